from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np

from secprops import (
    CombinedSection,
    RectangleSection,
    i_beam,
    plate,
    pretty,
    principal_axis,
    props,
)


def main() -> None:
    section = i_beam(b=200, h=300, tw=8, tf=12)
    print(pretty(props(section), n=2))
    print()

    # I-beam with a cover plate welded under the bottom flange
    reinforced = CombinedSection([
        section,
        plate(180, 15, origin="top").translated((0.0, -150.0)),
    ])
    print(pretty(props(reinforced), n=2))
    print()

    tilted = RectangleSection((4.0, 6.0), (-0.8, -1.0)).rotated(np.radians(-15.0))
    print(f"principal axis: {np.degrees(principal_axis(tilted)):.6f} deg")


if __name__ == "__main__":
    main()
