"""Tests for translated, rotated and weighted sections."""

import numpy as np
import pytest

from secprops import (
    CircleSection,
    CombinedSection,
    RectangleSection,
    RotatedSection,
    Section,
    TranslatedSection,
    WeightedSection,
)


def _values(s: Section) -> tuple:
    """Flatten the four properties for approximate comparison."""
    return (s.area(), *s.centroid(), *s.moment_of_inertia(), s.product_of_inertia())


@pytest.fixture
def primitives() -> list[Section]:
    """A spread of off-centre primitives."""
    return [
        RectangleSection((4.0, 6.0)),
        RectangleSection((4.0, 6.0), (-3.0, 1.5)),
        RectangleSection((-2.0, 5.0), (1.0, -7.0)),
        CircleSection(5.1, (3.4, 9.0)),
        CircleSection(1.2, (-9.0, -3.4)),
    ]


class TestTranslatedSection:
    """Tests for TranslatedSection."""

    def test_identity_translation(self, primitives: list[Section]) -> None:
        """Zero offset leaves every property unchanged."""
        for s in primitives:
            t = TranslatedSection(s, (0.0, 0.0))
            assert t.area() == s.area()
            assert t.centroid() == s.centroid()
            assert t.moment_of_inertia() == s.moment_of_inertia()
            assert t.product_of_inertia() == s.product_of_inertia()

    def test_matches_offset_rectangle(self) -> None:
        """Moving a corner rectangle equals building it with an offset."""
        t = TranslatedSection(RectangleSection((4.0, 6.0)), (1.0, 2.0))
        r = RectangleSection((4.0, 6.0), (1.0, 2.0))
        assert _values(t) == pytest.approx(_values(r))
        assert t.moment_of_inertia() == pytest.approx((248.0, 672.0))
        assert t.product_of_inertia() == pytest.approx(360.0)

    def test_matches_offset_circle(self) -> None:
        """Moving a centred circle equals building it with an offset."""
        t = TranslatedSection(CircleSection(2.0), (-1.5, 4.0))
        c = CircleSection(2.0, (-1.5, 4.0))
        assert _values(t) == pytest.approx(_values(c))

    def test_translations_compose(self, primitives: list[Section]) -> None:
        """Two shifts equal one shift by their sum."""
        a, b = (1.25, -3.0), (-4.5, 0.75)
        for s in primitives:
            twice = TranslatedSection(TranslatedSection(s, a), b)
            once = TranslatedSection(s, (a[0] + b[0], a[1] + b[1]))
            assert _values(twice) == pytest.approx(_values(once))

    def test_translation_round_trip(self, primitives: list[Section]) -> None:
        """Shifting away and back restores the section."""
        for s in primitives:
            back = TranslatedSection(TranslatedSection(s, (7.0, -2.0)), (-7.0, 2.0))
            assert _values(back) == pytest.approx(_values(s))

    def test_product_cross_terms_smallest_first(self, fixed) -> None:
        """Two unit cross terms are added before the large one."""
        # cross terms: cy*ox = 1e16, cx*oy = 1, ox*oy = 1
        s = fixed(1.0, centroid=(1.0, 1e16), product=-1e16)
        t = TranslatedSection(s, (1.0, 1.0))
        # left to right the unit terms vanish into 1e16 and the result is 0
        assert t.product_of_inertia() == 2.0

    def test_fluent_shorthand(self) -> None:
        """Section.translated builds the decorator."""
        s = RectangleSection((1.0, 1.0))
        t = s.translated((2.0, 3.0))
        assert isinstance(t, TranslatedSection)
        assert t.section is s
        assert t.centroid() == (2.5, 3.5)


class TestRotatedSection:
    """Tests for RotatedSection."""

    def test_area_unchanged(self, primitives: list[Section]) -> None:
        """Rotation keeps the area."""
        for s in primitives:
            assert RotatedSection(s, 0.7).area() == s.area()

    def test_quarter_turn_rectangle(self) -> None:
        """A quarter turn maps the rectangle onto its mirrored twin."""
        r = RotatedSection(RectangleSection((4.0, 6.0)), np.pi / 2)
        # occupies x in [-6, 0], y in [0, 4]
        expected = RectangleSection((-6.0, 4.0))
        assert _values(r) == pytest.approx(_values(expected), abs=1e-9)
        assert r.centroid() == pytest.approx((-3.0, 2.0), abs=1e-12)

    def test_centroid_rotates_counter_clockwise(self) -> None:
        """Positive angles turn the centroid counter-clockwise."""
        r = RotatedSection(CircleSection(1.0, (2.0, 0.0)), np.radians(30.0))
        assert r.centroid() == pytest.approx((2.0 * np.cos(np.pi / 6), 2.0 * np.sin(np.pi / 6)))

    def test_rotation_round_trip(self, primitives: list[Section]) -> None:
        """Rotating by an angle and back restores the section."""
        theta = np.radians(37.0)
        for s in primitives:
            back = RotatedSection(RotatedSection(s, theta), -theta)
            assert _values(back) == pytest.approx(_values(s), rel=1e-12, abs=1e-9)

    def test_rotations_compose(self, primitives: list[Section]) -> None:
        """Two rotations equal one rotation by the summed angle."""
        for s in primitives:
            twice = RotatedSection(RotatedSection(s, 0.3), 0.45)
            once = RotatedSection(s, 0.75)
            assert _values(twice) == pytest.approx(_values(once), rel=1e-12, abs=1e-9)

    def test_polar_moment_invariant(self, primitives: list[Section]) -> None:
        """Jx + Jy about the rotation centre does not depend on the angle."""
        for s in primitives:
            jy, jx = s.moment_of_inertia()
            ry, rx = RotatedSection(s, 1.1).moment_of_inertia()
            assert ry + rx == pytest.approx(jy + jx)

    def test_centred_circle_invariant(self) -> None:
        """A centred circle looks the same at any angle."""
        c = CircleSection(2.5)
        r = RotatedSection(c, 0.9)
        assert r.moment_of_inertia() == pytest.approx(c.moment_of_inertia())
        assert r.product_of_inertia() == pytest.approx(0.0, abs=1e-12)

    def test_moment_terms_smallest_first(self, fixed) -> None:
        """Both Mohr terms of about 0.6 are added before the 1e16 mean."""
        # cos(-2*angle) = 0.3, so (jy - jx) * cos / 2 = 0.6
        angle = -np.arccos(0.3) / 2
        jxy = 0.6 / np.sqrt(1.0 - 0.3**2)
        s = fixed(1.0, moments=(1e16 + 2.0, 1e16 - 2.0), product=jxy)
        # exact values are 1e16 +- 1.2; left to right both rounds go back to 1e16
        assert RotatedSection(s, angle).moment_of_inertia() == (1e16 + 2.0, 1e16 - 2.0)

    def test_fluent_shorthand(self) -> None:
        """Section.rotated builds the decorator."""
        r = CircleSection(1.0).rotated(0.5)
        assert isinstance(r, RotatedSection)
        assert r.angle == pytest.approx(0.5)


class TestWeightedSection:
    """Tests for WeightedSection."""

    def test_scales_properties(self) -> None:
        """Area, moments and product scale; centroid stays."""
        s = RectangleSection((4.0, 6.0), (1.0, 2.0))
        w = WeightedSection(s, 2.5)
        assert w.area() == pytest.approx(2.5 * 24.0)
        assert w.centroid() == s.centroid()
        assert w.moment_of_inertia() == pytest.approx((2.5 * 248.0, 2.5 * 672.0))
        assert w.product_of_inertia() == pytest.approx(2.5 * 360.0)

    def test_negative_weight(self) -> None:
        """A negative weight turns the section into a hole."""
        s = CircleSection(2.0, (1.0, 1.0))
        w = s.weighted(-1.0)
        assert isinstance(w, WeightedSection)
        assert w.area() == -s.area()
        assert w.centroid() == s.centroid()
        assert w.product_of_inertia() == -s.product_of_inertia()

    def test_weight_then_translate(self) -> None:
        """Weighting commutes with translation."""
        s = RectangleSection((3.0, 2.0))
        a = WeightedSection(TranslatedSection(s, (1.0, -2.0)), 0.4)
        b = TranslatedSection(WeightedSection(s, 0.4), (1.0, -2.0))
        assert _values(a) == pytest.approx(_values(b))

    def test_weighted_combination(self) -> None:
        """Weights apply to whole composites."""
        c = CombinedSection([RectangleSection((1.0, 1.0)), CircleSection(1.0, (3.0, 0.0))])
        w = WeightedSection(c, 3.0)
        assert w.area() == pytest.approx(3.0 * (1.0 + np.pi))
