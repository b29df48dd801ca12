# secprops.py
"""
secprops - Composable cross-section properties.

A section is a tree: primitive shapes at the leaves, transforms (translate,
rotate, weight) and combinations as internal nodes. Every node reports four
quantities about ONE shared reference origin:

    area()                 A
    centroid()             (Cx, Cy)
    moment_of_inertia()    (Jy, Jx)  = (integral x^2 dA, integral y^2 dA)
    product_of_inertia()   Jxy       = integral x*y dA

Because moments are never centroidal inside the tree, combining shapes is a
plain sum. Centroidal and principal values are derived at the end
(centroidal_moments, principal_axis, props).

Example:
    >>> from secprops import i_beam, props
    >>> sec = i_beam(b=200, h=300, tw=8, tf=12)
    >>> p = props(sec)
    >>> print(f"Area: {p['A']:.0f} mm^2")

Dependencies: numpy, shapely, matplotlib (optional)
"""
from typing import List, Tuple, Dict, Any, Callable, Iterable, Sequence, TypedDict, cast, Mapping
from abc import ABC, abstractmethod
import math
import os
import numpy as np
from shapely.geometry import Polygon, Point, box, MultiPolygon, GeometryCollection
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.geometry.polygon import orient
from shapely.affinity import rotate, translate

__all__ = [
    "Float", "Section",
    "CircleSection", "RectangleSection", "PolygonSection",
    "TranslatedSection", "RotatedSection", "WeightedSection", "CombinedSection",
    "principal_axis", "centroidal_moments", "principal_moments",
    "props", "props_at_point", "pretty",
    "i_beam", "channel", "angle", "t_beam", "rect_tube", "circ_tube",
    "rectangle", "plate", "circle", "grid_circles",
    "section_from_dict", "section_geometry", "plot_section",
]


# ============================================================
# CONFIGURATION
# ============================================================

_FLOAT_TYPES: dict[str, type] = {
    "float64": np.float64,
    "double": np.float64,
    "float32": np.float32,
    "single": np.float32,
}

_float_key = os.environ.get("SECPROPS_FLOAT", "float64").strip().lower()
if _float_key not in _FLOAT_TYPES:
    raise ValueError(
        f"Unsupported SECPROPS_FLOAT: {_float_key!r}. "
        f"Expected one of: {sorted(_FLOAT_TYPES)}"
    )

# Scalar type used by every formula. Fixed for the lifetime of the process.
Float = _FLOAT_TYPES[_float_key]

# Segments per quarter circle when circles are turned into polygons.
DEFAULT_NSEG = 64

# Relative tolerance, against the polar moment about the reference origin,
# below which centroidal residues count as zero in principal_axis().
_ISOTROPY_RTOL = 64 * float(np.finfo(Float).eps)

Pair = Tuple[Any, Any]
Shapes = List[Tuple[BaseGeometry, Any]]


class SectionProps(TypedDict):
    A: float
    Cx: float
    Cy: float
    Ix: float
    Iy: float
    Ixy: float
    Ip: float
    rx: float
    ry: float
    I1: float
    I2: float
    alpha: float
    Wx_plus: float
    Wx_minus: float
    Wy_plus: float
    Wy_minus: float


class SectionPropsAtPoint(TypedDict):
    A: float
    Cx: float
    Cy: float
    Ix_0: float
    Iy_0: float
    Ixy_0: float
    Ip_0: float
    rx_0: float
    ry_0: float


# ============================================================
# INTERNAL HELPERS
# ============================================================

def _pair(values: Sequence[float]) -> Pair:
    """Coerce a 2-sequence to a tuple of Float."""
    x, y = values
    return (Float(x), Float(y))


def _sorted_sum(terms: Iterable[float]) -> Any:
    """
    Sum terms in ascending order of magnitude.

    Small terms are accumulated before large ones so that contributions of
    similar size and opposite sign (holes, mirrored parts) cancel first.
    """
    arr = np.asarray(list(terms), dtype=Float)
    if arr.size == 0:
        return Float(0)
    order = np.argsort(np.abs(arr), kind="stable")
    # cumsum adds strictly left to right; np.sum would regroup pairwise
    return np.cumsum(arr[order])[-1]


def _collect_polygons(g: BaseGeometry) -> List[Polygon]:
    """Return a list of Polygon objects from a geometry."""
    if g is None or g.is_empty:
        return []
    if isinstance(g, Polygon):
        return [g]
    if isinstance(g, MultiPolygon):
        return list(g.geoms)
    if isinstance(g, GeometryCollection):
        return [p for p in g.geoms if isinstance(p, Polygon)]
    return []


# ============================================================
# SECTION CONTRACT
# ============================================================

class Section(ABC):
    """
    Anything that reports area, centroid and second moments.

    All four values refer to the same reference origin. Moments are NOT
    centroidal: use centroidal_moments() for that. Mixing sections from
    different reference frames without a TranslatedSection in between gives
    silently wrong sums.
    """

    @abstractmethod
    def area(self) -> Any:
        """Area (negative only under a negative weight)."""

    @abstractmethod
    def centroid(self) -> Pair:
        """Centroid (Cx, Cy) in the reference frame."""

    @abstractmethod
    def moment_of_inertia(self) -> Pair:
        """Second moments (Jy, Jx) about the reference origin."""

    @abstractmethod
    def product_of_inertia(self) -> Any:
        """Product of inertia Jxy about the reference origin."""

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        """
        (geometry, weight) pairs describing the section in the reference frame.

        Only needed for outlines (section_geometry, props moduli, plotting).
        """
        raise TypeError(f"{type(self).__name__} has no outline")

    def translated(self, offset: Sequence[float]) -> "TranslatedSection":
        return TranslatedSection(self, offset)

    def rotated(self, angle: float) -> "RotatedSection":
        return RotatedSection(self, angle)

    def weighted(self, weight: float) -> "WeightedSection":
        return WeightedSection(self, weight)


# ============================================================
# PRIMITIVES
# ============================================================

class CircleSection(Section):
    """
    Solid circle centred at `offset`.

    Only |radius| matters.
    """

    def __init__(self, radius: float, offset: Sequence[float] = (0.0, 0.0)) -> None:
        self.radius = Float(radius)
        self.offset = _pair(offset)

    def __repr__(self) -> str:
        return f"CircleSection(radius={self.radius!r}, offset={self.offset!r})"

    def area(self) -> Any:
        return self.radius * self.radius * Float(np.pi)

    def centroid(self) -> Pair:
        return self.offset

    def moment_of_inertia(self) -> Pair:
        r2 = self.radius * self.radius
        # pi*r^4/4 + A*d^2
        jy, jx = ((r2 + 4 * o * o) * r2 * Float(np.pi / 4) for o in self.offset)
        return (jy, jx)

    def product_of_inertia(self) -> Any:
        ox, oy = self.offset
        return self.radius * self.radius * Float(np.pi) * ox * oy

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        ox, oy = self.offset
        g = Point(float(ox), float(oy)).buffer(abs(float(self.radius)), quad_segs=nseg)
        return [(g, Float(1))]


class RectangleSection(Section):
    """
    Axis-aligned rectangle spanning `offset` .. `offset + size`.

    `offset` is a corner, not the centroid. Negative sizes extend the
    rectangle the other way and still give a positive area.
    """

    def __init__(self, size: Sequence[float], offset: Sequence[float] = (0.0, 0.0)) -> None:
        self.size = _pair(size)
        self.offset = _pair(offset)

    def __repr__(self) -> str:
        return f"RectangleSection(size={self.size!r}, offset={self.offset!r})"

    def area(self) -> Any:
        b, h = self.size
        return abs(b * h)

    def centroid(self) -> Pair:
        cx, cy = (o + s / 2 for s, o in zip(self.size, self.offset))
        return (cx, cy)

    def moment_of_inertia(self) -> Pair:
        b, h = self.size
        # edge moment s^3/3 generalised to a corner at `offset`
        jy, jx = (abs((s * s / 3 + (s + o) * o) * b * h)
                  for s, o in zip(self.size, self.offset))
        return (jy, jx)

    def product_of_inertia(self) -> Any:
        (b, h), (ox, oy) = self.size, self.offset
        return abs(b) * (b / 2 + ox) * abs(h) * (h / 2 + oy)

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        (b, h), (ox, oy) = self.size, self.offset
        xs = sorted((float(ox), float(ox + b)))
        ys = sorted((float(oy), float(oy + h)))
        return [(box(xs[0], ys[0], xs[1], ys[1]), Float(1))]


def _poly_int(poly: Polygon) -> Tuple[float, float, float, float, float, float]:
    """
    Integrate a single polygon (with holes) using Green's theorem.

    Returns:
        (A, Ax, Ay, Iy_0, Ix_0, Ixy_0)
        First moments Ax, Ay and second moments about the coordinate origin.
    """
    if poly.is_empty:
        return 0.0, 0.0, 0.0, 0.0, 0.0, 0.0

    poly = orient(poly, 1.0)  # CCW exterior; holes become CW

    def _ring_int(
        coords: Sequence[Sequence[float]]
    ) -> Tuple[float, float, float, float, float, float]:
        arr = np.asarray(coords, dtype=float)
        if arr.ndim != 2 or arr.shape[1] < 2:
            return 0.0, 0.0, 0.0, 0.0, 0.0, 0.0
        x = arr[:, 0]
        y = arr[:, 1]
        x1, y1, x2, y2 = x[:-1], y[:-1], x[1:], y[1:]

        a = x1 * y2 - x2 * y1  # signed area elements
        A = 0.5 * np.sum(a)
        Ax = np.sum((x1 + x2) * a) / 6.0
        Ay = np.sum((y1 + y2) * a) / 6.0
        Iy_0 = np.sum((x1**2 + x1 * x2 + x2**2) * a) / 12.0
        Ix_0 = np.sum((y1**2 + y1 * y2 + y2**2) * a) / 12.0
        Ixy_0 = np.sum((x1 * y2 + 2 * x1 * y1 + 2 * x2 * y2 + x2 * y1) * a) / 24.0
        return A, Ax, Ay, Iy_0, Ix_0, Ixy_0

    rings = [list(poly.exterior.coords)] + [list(r.coords) for r in poly.interiors]
    totals = np.sum([_ring_int(r) for r in rings], axis=0)
    return cast(Tuple[float, float, float, float, float, float], tuple(totals))


class PolygonSection(Section):
    """
    Arbitrary polygonal section from a Shapely Polygon or MultiPolygon.

    Values are integrated once at construction; holes subtract.
    """

    def __init__(self, geometry: BaseGeometry) -> None:
        self.geometry = geometry
        polys = _collect_polygons(geometry)
        totals = np.zeros(6)
        for p in polys:
            totals += np.asarray(_poly_int(p))
        A, Ax, Ay, Iy_0, Ix_0, Ixy_0 = (Float(v) for v in totals)
        self._area = A
        self._first = (Ax, Ay)
        self._moments = (Iy_0, Ix_0)
        self._product = Ixy_0

    def __repr__(self) -> str:
        return f"PolygonSection({self.geometry.wkt[:60]!r})"

    def area(self) -> Any:
        return self._area

    def centroid(self) -> Pair:
        if self._area == 0:
            return (Float(0), Float(0))
        cx, cy = (m / self._area for m in self._first)
        return (cx, cy)

    def moment_of_inertia(self) -> Pair:
        return self._moments

    def product_of_inertia(self) -> Any:
        return self._product

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        return [(self.geometry, Float(1))]


# ============================================================
# TRANSFORMS
# ============================================================

class TranslatedSection(Section):
    """
    Section moved by `offset`.

    Equivalently, the reference origin moves by -offset. Moments are carried
    over with the parallel-axis theorem applied incrementally, so the wrapped
    section may itself be off-centre.
    """

    def __init__(self, section: Section, offset: Sequence[float]) -> None:
        self.section = section
        self.offset = _pair(offset)

    def __repr__(self) -> str:
        return f"TranslatedSection({self.section!r}, offset={self.offset!r})"

    def area(self) -> Any:
        return self.section.area()

    def centroid(self) -> Pair:
        cx, cy = (c + o for c, o in zip(self.section.centroid(), self.offset))
        return (cx, cy)

    def moment_of_inertia(self) -> Pair:
        a = self.section.area()
        c = self.section.centroid()
        j = self.section.moment_of_inertia()
        jy, jx = (j[i] + (self.offset[i] + 2 * c[i]) * self.offset[i] * a for i in range(2))
        return (jy, jx)

    def product_of_inertia(self) -> Any:
        cx, cy = self.section.centroid()
        ox, oy = self.offset
        cross = _sorted_sum([cy * ox, cx * oy, ox * oy])
        return self.section.product_of_inertia() + cross * self.section.area()

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        ox, oy = (float(o) for o in self.offset)
        return [(translate(g, xoff=ox, yoff=oy), w) for g, w in self.section.shapes(nseg)]


class RotatedSection(Section):
    """
    Section rotated counter-clockwise by `angle` (radians) about the origin.

    Moments follow the Mohr's circle transform with the doubled angle.
    """

    def __init__(self, section: Section, angle: float) -> None:
        self.section = section
        self.angle = Float(angle)

    def __repr__(self) -> str:
        return f"RotatedSection({self.section!r}, angle={self.angle!r})"

    def area(self) -> Any:
        return self.section.area()

    def centroid(self) -> Pair:
        x, y = self.section.centroid()
        r = np.hypot(x, y)
        theta = np.arctan2(y, x) + self.angle
        return (r * np.cos(theta), r * np.sin(theta))

    def moment_of_inertia(self) -> Pair:
        a2 = self.angle * -2
        cos = np.cos(a2) / 2
        sin = np.sin(a2)
        jy, jx = self.section.moment_of_inertia()
        jxy = self.section.product_of_inertia()
        avg = (jy + jx) / 2
        return (
            _sorted_sum([avg, (jy - jx) * cos, jxy * sin]),
            _sorted_sum([avg, -(jy - jx) * cos, -jxy * sin]),
        )

    def product_of_inertia(self) -> Any:
        a2 = self.angle * -2
        jy, jx = self.section.moment_of_inertia()
        return (jx - jy) * np.sin(a2) / 2 + self.section.product_of_inertia() * np.cos(a2)

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        ang = float(self.angle)
        return [
            (rotate(g, ang, origin=(0.0, 0.0), use_radians=True), w)
            for g, w in self.section.shapes(nseg)
        ]


class WeightedSection(Section):
    """
    Section scaled by `weight`.

    Use -1 to cut a hole, or a modular ratio for a second material. The
    centroid does not move.
    """

    def __init__(self, section: Section, weight: float) -> None:
        self.section = section
        self.weight = Float(weight)

    def __repr__(self) -> str:
        return f"WeightedSection({self.section!r}, weight={self.weight!r})"

    def area(self) -> Any:
        return self.section.area() * self.weight

    def centroid(self) -> Pair:
        return self.section.centroid()

    def moment_of_inertia(self) -> Pair:
        jy, jx = (j * self.weight for j in self.section.moment_of_inertia())
        return (jy, jx)

    def product_of_inertia(self) -> Any:
        return self.section.product_of_inertia() * self.weight

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        return [(g, w * self.weight) for g, w in self.section.shapes(nseg)]


# ============================================================
# COMPOSITE
# ============================================================

class CombinedSection(Section):
    """
    Sum of sections sharing one reference origin.

    Every sum is taken in ascending order of magnitude. The centroid divides
    by the total area: a composite with zero total area (empty, or a hole
    cancelling its solid exactly) has no centroid and yields nan/inf.
    """

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        self.sections: List[Section] = list(sections)

    def __repr__(self) -> str:
        return f"CombinedSection({self.sections!r})"

    def __len__(self) -> int:
        return len(self.sections)

    def push(self, section: Section) -> None:
        """Append a section expressed about the same reference origin."""
        self.sections.append(section)

    def area(self) -> Any:
        return _sorted_sum(s.area() for s in self.sections)

    def centroid(self) -> Pair:
        terms = [(s.area(), s.centroid()) for s in self.sections]
        a = _sorted_sum(t[0] for t in terms)
        cx, cy = (_sorted_sum(t[0] * t[1][i] for t in terms) / a for i in range(2))
        return (cx, cy)

    def moment_of_inertia(self) -> Pair:
        moments = [s.moment_of_inertia() for s in self.sections]
        jy, jx = (_sorted_sum(j[i] for j in moments) for i in range(2))
        return (jy, jx)

    def product_of_inertia(self) -> Any:
        return _sorted_sum(s.product_of_inertia() for s in self.sections)

    def shapes(self, nseg: int = DEFAULT_NSEG) -> Shapes:
        return [pair for s in self.sections for pair in s.shapes(nseg)]


# ============================================================
# CENTROIDAL AND PRINCIPAL VALUES
# ============================================================

def centroidal_moments(section: Section) -> Tuple[Any, Any, Any]:
    """
    Move origin-referenced moments to the section's own centroid.

    Returns:
        (Iy_c, Ix_c, Ixy_c)
    """
    area = section.area()
    cx, cy = section.centroid()
    jy, jx = section.moment_of_inertia()
    jxy = section.product_of_inertia()
    return jy - cx * cx * area, jx - cy * cy * area, jxy - cx * cy * area


def principal_axis(section: Section) -> Any:
    """
    Angle (radians) of a principal axis measured from the x-axis.

    The other principal axis is at angle + pi/2. Sections with no preferred
    direction (circles, squares, regular polygons) return 0.
    """
    jy, jx = section.moment_of_inertia()
    jy_c, jx_c, jxy_c = centroidal_moments(section)

    # residues of the centroidal correction are not a direction
    tol = _ISOTROPY_RTOL * (abs(jx) + abs(jy))
    if abs(jxy_c) <= tol and abs(jx_c - jy_c) <= tol:
        return Float(0)

    return np.arctan2(jxy_c * -2, jx_c - jy_c) / 2


def principal_moments(section: Section) -> Tuple[Any, Any]:
    """
    Principal centroidal moments.

    Returns:
        (I1, I2) with I1 >= I2
    """
    jy_c, jx_c, jxy_c = centroidal_moments(section)
    avg = (jx_c + jy_c) / 2
    radius = np.hypot((jx_c - jy_c) / 2, jxy_c)
    return avg + radius, avg - radius


# ============================================================
# GEOMETRY
# ============================================================

def section_geometry(section: Section, nseg: int = DEFAULT_NSEG) -> BaseGeometry:
    """
    Outline of a section as a single Shapely geometry.

    Positively weighted parts are merged, negatively weighted parts are cut
    out. Zero weights contribute nothing.
    """
    solids = []
    voids = []
    for g, w in section.shapes(nseg):
        if w > 0:
            solids.append(g)
        elif w < 0:
            voids.append(g)

    if not solids:
        return GeometryCollection()
    result = unary_union(solids)
    if voids:
        result = result.difference(unary_union(voids))
    return result


# ============================================================
# PROFILE BUILDERS
# ============================================================
# All profiles:
#   - Reference origin at the centroid
#   - +x = Front (right), +y = Top (up)
#   - Return a Section tree built from primitives
# ============================================================

def _centred(section: Section) -> Section:
    """Wrap so the reference origin is at the centroid."""
    cx, cy = section.centroid()
    return TranslatedSection(section, (-cx, -cy))


def _check_positive(**dims: float) -> None:
    bad = {k: v for k, v in dims.items() if v <= 0}
    if bad:
        listing = ", ".join(f"{k}={v}" for k, v in bad.items())
        raise ValueError(f"dimensions must be positive: {listing}")


def i_beam(
    b: float,
    h: float,
    tw: float,
    tf: float,
) -> Section:
    """
    Create I-beam / H-section with centroid at (0, 0).

    Orientation:
        Top (+y)    = upper flange
        Below (-y)  = lower flange

    Args:
        b:  Flange width (mm)
        h:  Total height (mm)
        tw: Web thickness (mm)
        tf: Flange thickness (mm)

    Returns:
        CombinedSection of three rectangles
    """
    _check_positive(b=b, h=h, tw=tw, tf=tf)
    if tw >= b:
        raise ValueError(f"tw must be less than b: tw={tw}, b={b}")
    if 2 * tf >= h:
        raise ValueError(f"2*tf must be less than h: tf={tf}, h={h}")

    hb = b / 2.0
    hh = h / 2.0
    return CombinedSection([
        RectangleSection((b, tf), (-hb, hh - tf)),
        RectangleSection((tw, h - 2 * tf), (-tw / 2.0, -hh + tf)),
        RectangleSection((b, tf), (-hb, -hh)),
    ])


def channel(
    h: float,
    b: float,
    tw: float,
    tf: float,
) -> Section:
    """
    Create channel (C/U section) with centroid at (0, 0).

    Orientation:
        Front (+x)  = toes (open side)
        Back (-x)   = web (closed side)

    Args:
        h:  Total height (mm)
        b:  Flange width (mm)
        tw: Web thickness (mm)
        tf: Flange thickness (mm)
    """
    _check_positive(h=h, b=b, tw=tw, tf=tf)
    if tw >= b:
        raise ValueError(f"tw must be less than b: tw={tw}, b={b}")
    if 2 * tf >= h:
        raise ValueError(f"2*tf must be less than h: tf={tf}, h={h}")

    # web at x = 0..tw, bottom at y = 0
    return _centred(CombinedSection([
        RectangleSection((tw, h), (0.0, 0.0)),
        RectangleSection((b - tw, tf), (tw, h - tf)),
        RectangleSection((b - tw, tf), (tw, 0.0)),
    ]))


def angle(
    h: float,
    b: float,
    t: float,
) -> Section:
    """
    Create angle (L-section) with centroid at (0, 0).

    Vertical leg h along +y, horizontal leg b along +x, corner at the
    bottom-left. Unequal angles have a rotated principal axis.
    """
    _check_positive(h=h, b=b, t=t)
    if t >= min(h, b):
        raise ValueError(f"t must be less than both legs: t={t}, h={h}, b={b}")

    return _centred(CombinedSection([
        RectangleSection((t, h), (0.0, 0.0)),
        RectangleSection((b - t, t), (t, 0.0)),
    ]))


def t_beam(
    b: float,
    h: float,
    tw: float,
    tf: float,
) -> Section:
    """
    Create T-section with centroid at (0, 0).

    Flange on top, stem pointing down.
    """
    _check_positive(b=b, h=h, tw=tw, tf=tf)
    if tw >= b:
        raise ValueError(f"tw must be less than b: tw={tw}, b={b}")
    if tf >= h:
        raise ValueError(f"tf must be less than h: tf={tf}, h={h}")

    # flange top at y = 0
    return _centred(CombinedSection([
        RectangleSection((b, tf), (-b / 2.0, -tf)),
        RectangleSection((tw, h - tf), (-tw / 2.0, -h)),
    ]))


def rect_tube(
    b: float,
    h: float,
    t: float,
) -> Section:
    """
    Create rectangular hollow section (RHS) with centroid at (0, 0).

    Falls back to a solid rectangle if the wall is too thick for a void.
    """
    _check_positive(b=b, h=h, t=t)
    outer = RectangleSection((b, h), (-b / 2.0, -h / 2.0))

    ib = b - 2 * t
    ih = h - 2 * t
    if ib <= 0 or ih <= 0:
        return outer

    inner = RectangleSection((ib, ih), (-ib / 2.0, -ih / 2.0))
    return CombinedSection([outer, WeightedSection(inner, -1.0)])


def circ_tube(
    d: float,
    t: float,
) -> Section:
    """
    Create circular hollow section (CHS) with centroid at (0, 0).

    Args:
        d: Outer diameter (mm)
        t: Wall thickness (mm)
    """
    _check_positive(d=d, t=t)
    r_outer = d / 2.0
    r_inner = r_outer - t

    outer = CircleSection(r_outer)
    if r_inner <= 0:
        return outer
    return CombinedSection([outer, WeightedSection(CircleSection(r_inner), -1.0)])


def rectangle(
    b: float,
    h: float,
    x0: float = 0,
    y0: float = 0
) -> RectangleSection:
    """Rectangle with bottom-left corner at (x0, y0)."""
    return RectangleSection((b, h), (x0, y0))


def plate(
    width: float,
    height: float,
    *,
    origin: str = "centroid"
) -> RectangleSection:
    """
    Create plate section.

    Args:
        width:  Plate width
        height: Plate height
        origin: "centroid" (default), "top", or "bottom"
    """
    origin_key = str(origin).lower()
    if origin_key in ("centroid", "center", "centre", "mid", "middle"):
        y0 = -height / 2.0
    elif origin_key in ("top", "upper"):
        y0 = -height
    elif origin_key in ("bottom", "lower"):
        y0 = 0.0
    else:
        raise ValueError(f"Unsupported origin: {origin}")

    return rectangle(width, height, x0=-width / 2.0, y0=y0)


def circle(
    diam: float,
    x0: float = 0,
    y0: float = 0,
) -> CircleSection:
    """Circle of diameter `diam` centred at (x0, y0)."""
    return CircleSection(diam / 2.0, (x0, y0))


def grid_circles(
    diam: float,
    e1: float,
    p1: float,
    n1: int,
    e2: float,
    d1: float,
    n2: int
) -> CombinedSection:
    """
    Create grid of circles (bolt hole patterns).

    Weight the result by -1 to cut the holes from a plate.

    Args:
        diam: Hole diameter
        e1:   Edge distance to first row (rows go down, -y)
        p1:   Pitch between rows
        n1:   Number of rows - 1 (0 = single row)
        e2:   Edge distance to first column (+x)
        d1:   Pitch between columns
        n2:   Number of columns - 1 (0 = single column)
    """
    holes = CombinedSection()
    for i in range(n1 + 1):
        yc = -(e1 + i * p1)
        for j in range(n2 + 1):
            holes.push(circle(diam, x0=e2 + j * d1, y0=yc))
    return holes


# ============================================================
# SECTION PROPERTIES REPORT
# ============================================================

def props(section: Section, nseg: int = DEFAULT_NSEG) -> SectionProps:
    """
    Compute centroidal properties of a section.

    Args:
        section: Section tree
        nseg:    Circle resolution for the outline used by the moduli

    Returns:
        Dictionary with:
            A:        Area (mm^2)
            Cx, Cy:   Centroid coordinates (mm)
            Ix, Iy:   Second moments about centroidal axes (mm^4)
            Ixy:      Product of inertia about the centroid (mm^4)
            Ip:       Polar moment Ix + Iy (mm^4)
            rx, ry:   Radii of gyration (mm)
            I1, I2:   Principal moments, I1 >= I2 (mm^4)
            alpha:    Principal axis angle (rad)
            Wx_plus:  Section modulus, top fiber (mm^3)
            Wx_minus: Section modulus, bottom fiber (mm^3)
            Wy_plus:  Section modulus, right fiber (mm^3)
            Wy_minus: Section modulus, left fiber (mm^3)

    Raises:
        ValueError: If the total area is zero
    """
    A = float(section.area())
    if abs(A) < 1e-9:
        raise ValueError("Total area is close to zero.")

    Cx, Cy = (float(c) for c in section.centroid())
    Iy, Ix, Ixy = (float(v) for v in centroidal_moments(section))
    I1, I2 = (float(v) for v in principal_moments(section))
    alpha = float(principal_axis(section))

    rx = math.sqrt(Ix / A) if Ix / A > 0 else 0.0
    ry = math.sqrt(Iy / A) if Iy / A > 0 else 0.0

    g = section_geometry(section, nseg)
    if g.is_empty:
        print("Warning: section has no outline, section moduli set to nan")
        Wx_plus = Wx_minus = Wy_plus = Wy_minus = float('nan')
    else:
        minx, miny, maxx, maxy = g.bounds
        y_dist_plus = abs(maxy - Cy)
        y_dist_minus = abs(miny - Cy)
        x_dist_plus = abs(maxx - Cx)
        x_dist_minus = abs(minx - Cx)

        Wx_plus = Ix / y_dist_plus if y_dist_plus > 1e-9 else float('inf')
        Wx_minus = Ix / y_dist_minus if y_dist_minus > 1e-9 else float('inf')
        Wy_plus = Iy / x_dist_plus if x_dist_plus > 1e-9 else float('inf')
        Wy_minus = Iy / x_dist_minus if x_dist_minus > 1e-9 else float('inf')

    return cast(SectionProps, dict(
        A=A,
        Cx=Cx,
        Cy=Cy,
        Ix=Ix,
        Iy=Iy,
        Ixy=Ixy,
        Ip=Ix + Iy,
        rx=rx,
        ry=ry,
        I1=I1,
        I2=I2,
        alpha=alpha,
        Wx_plus=Wx_plus,
        Wx_minus=Wx_minus,
        Wy_plus=Wy_plus,
        Wy_minus=Wy_minus,
    ))


def props_at_point(
    section: Section,
    x0: float = 0.0,
    y0: float = 0.0
) -> SectionPropsAtPoint:
    """
    Compute section properties about arbitrary point (x0, y0).

    Args:
        section: Section tree
        x0: X coordinate of reference point (mm)
        y0: Y coordinate of reference point (mm)

    Returns:
        Dictionary with:
            A:      Area (mm^2)
            Cx, Cy: Centroid coordinates in the original frame (mm)
            Ix_0:   Second moment about horizontal axis through (x0, y0)
            Iy_0:   Second moment about vertical axis through (x0, y0)
            Ixy_0:  Product of inertia about (x0, y0)
            Ip_0:   Polar second moment about (x0, y0)
            rx_0:   Radius of gyration about X axis through (x0, y0)
            ry_0:   Radius of gyration about Y axis through (x0, y0)
    """
    moved = TranslatedSection(section, (-x0, -y0))
    A = float(section.area())
    Cx, Cy = (float(c) for c in section.centroid())
    Iy_0, Ix_0 = (float(j) for j in moved.moment_of_inertia())
    Ixy_0 = float(moved.product_of_inertia())

    if A > 1e-9:
        rx_0 = math.sqrt(Ix_0 / A)
        ry_0 = math.sqrt(Iy_0 / A)
    else:
        rx_0 = 0.0
        ry_0 = 0.0

    return cast(SectionPropsAtPoint, dict(
        A=A,
        Cx=Cx,
        Cy=Cy,
        Ix_0=Ix_0,
        Iy_0=Iy_0,
        Ixy_0=Ixy_0,
        Ip_0=Ix_0 + Iy_0,
        rx_0=rx_0,
        ry_0=ry_0
    ))


# ============================================================
# OUTPUT UTILITIES
# ============================================================

def pretty(d: Mapping[str, Any], n: int = 1) -> str:
    """
    Format props() result for printing.

    Args:
        d: Dictionary from props()
        n: Number of decimal places

    Returns:
        Formatted string
    """
    float_format = f',.{n}f'
    lines = []

    key_order = ['A', 'Cx', 'Cy', 'Ix', 'Iy', 'Ip', 'Ixy', 'rx', 'ry', 'I1', 'I2', 'alpha',
                 'Wx_plus', 'Wx_minus', 'Wy_plus', 'Wy_minus']

    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float, np.integer, np.floating))

    for k in key_order:
        if k in d and _is_number(d[k]):
            lines.append(f"{k:<9}= {format(float(d[k]), float_format)}")

    for k, v in d.items():
        if k not in key_order and _is_number(v):
            lines.append(f"{k:<9}= {format(float(v), float_format)}")

    return '\n'.join(lines)


def plot_section(
    section: Section,
    ax=None,
    *,
    face: str = "lightblue",
    edge: str = "k",
    linewidth: float = 1.0,
    show_axes: bool = False,
    nseg: int = DEFAULT_NSEG
):
    """
    Plot section outline using matplotlib.

    Args:
        section:   Section tree to plot
        ax:        Matplotlib axes (created if None)
        face:      Fill color (default: 'lightblue')
        edge:      Edge color (default: 'k')
        linewidth: Edge line width (default: 1.0)
        show_axes: Show coordinate axes and grid
        nseg:      Circle resolution

    Returns:
        Matplotlib axes object
    """
    import matplotlib.pyplot as plt

    create_new = ax is None
    if create_new:
        _, ax = plt.subplots()

    g = section_geometry(section, nseg)
    if g.is_empty:
        print("Warning: plot_section called with empty section")
        if create_new:
            ax.axis('off')
        return ax

    for p in _collect_polygons(g):
        ax.fill(*p.exterior.xy, facecolor=face, edgecolor=edge, linewidth=linewidth)
        for ring in p.interiors:
            ax.fill(*ring.xy, facecolor="white", edgecolor=edge, linewidth=linewidth)

    ax.set_aspect('equal')

    if create_new:
        if show_axes:
            ax.grid(True, linestyle=':', linewidth=0.4)
            ax.axhline(y=0, color='gray', linewidth=0.5)
            ax.axvline(x=0, color='gray', linewidth=0.5)
            ax.set_xlabel('x (mm)')
            ax.set_ylabel('y (mm)')
        else:
            ax.axis('off')

    return ax


# ============================================================
# CONVERTERS
# ============================================================

# Canonical profile type mapping.
# Keys are normalized (lowercase, spaces/hyphens -> underscores).
# Values are builder names used by section_from_dict().
_PROFILE_TYPE_MAP: dict[str, str] = {
    "profile_i": "i_beam",
    "profile_u": "channel",
    "profile_t": "t_beam",
    "profile_l": "angle",
    "profile_p": "rect_tube",
    "profile_pd": "circ_tube",
    "profile_fpl": "plate",

    "i_beam": "i_beam",
    "ibeam": "i_beam",
    "channel": "channel",
    "u_section": "channel",
    "t_beam": "t_beam",
    "t_section": "t_beam",
    "angle": "angle",
    "l_section": "angle",
    "tube": "rect_tube",
    "rect_tube": "rect_tube",
    "rhs": "rect_tube",
    "shs": "rect_tube",
    "round_tube": "circ_tube",
    "roundtube": "circ_tube",
    "circ_tube": "circ_tube",
    "chs": "circ_tube",
    "plate": "plate",
    "flat": "plate",
    "round_bar": "circle",
    "circle": "circle",
}


def section_from_dict(data: Dict[str, Any]) -> Section:
    """
    Dict -> Section tree (reference origin at the centroid).

    Supports:
      - flat dictionaries (profile_type/Type + H/B + thicknesses)
      - profile_params lists of {"property": ..., "value": ...} entries
      - optional placement: weight, angle (rad), offset (x, y)
    """
    if not isinstance(data, dict):
        raise TypeError("section_from_dict expects dict")

    # ---- flatten profile_params[] to params dict ----
    params: Dict[str, Any] = {}
    pp = data.get("profile_params")
    if isinstance(pp, list):
        for it in pp:
            if not isinstance(it, dict):
                continue
            k = it.get("property")
            v = it.get("value")
            if k is None or v is None:
                continue
            k = str(k).strip().upper()
            if k:
                params[k] = v

    def _get(keys: Sequence[str], default: float = 0.0) -> float:
        for k in keys:
            v = data.get(k)
            if v is None:
                v = params.get(k)
            if v is not None:
                try:
                    return float(v)
                except (TypeError, ValueError):
                    continue
        return float(default)

    # ---- resolve profile type ----
    raw_type = data.get("profile_type") or data.get("Type") or ""
    raw_type = str(raw_type).strip().lower().replace("-", "_").replace(" ", "_")

    p = _PROFILE_TYPE_MAP.get(raw_type)
    if not p:
        key = data.get("key") or data.get("profile") or data.get("section") or "?"
        raise ValueError(
            f"Unknown profile type: {raw_type!r} (key={key!r}). "
            f"Expected one of: {sorted(set(_PROFILE_TYPE_MAP.keys()))}"
        )

    section = _build_profile(p, _get)

    # ---- placement: weight, then rotation about the centroid, then offset ----
    weight = data.get("weight")
    if weight is not None:
        section = section.weighted(float(weight))
    angle_rad = data.get("angle")
    if angle_rad is not None:
        section = section.rotated(float(angle_rad))
    offset = data.get("offset")
    if offset is not None:
        try:
            ox, oy = (float(v) for v in offset)
        except (TypeError, ValueError):
            raise ValueError(f"offset must be a pair of numbers, got {offset!r}")
        section = section.translated((ox, oy))
    return section


def _build_profile(p: str, _get: Callable[..., float]) -> Section:
    """Build the centred profile for a normalised type name."""
    # ---- common dims ----
    h = _get(["H", "h", "HEIGHT", "d"])
    b = _get(["B", "b", "WIDTH"], h)
    tw = _get(["tw", "WEB_THICKNESS", "s"])
    tf = _get(["tf", "FLANGE_THICKNESS", "FLANGE_THICKNESS_1"])
    t_plate = _get(["t", "PLATE_THICKNESS"])
    d_circle = _get(["D", "DIAMETER", "diameter"])

    # ---- build by type ----
    if p == "i_beam":
        tw = tw if tw > 0 else t_plate
        tf = tf if tf > 0 else t_plate
        return i_beam(b=b, h=h, tw=tw, tf=tf)

    if p == "channel":
        if tw <= 0:
            tw = tf if tf > 0 else t_plate
        if tf <= 0:
            tf = tw
        return channel(h=h, b=b, tw=tw, tf=tf)

    if p == "angle":
        t = t_plate if t_plate > 0 else (tf if tf > 0 else tw)
        return angle(h=h, b=b, t=t)

    if p == "t_beam":
        tw = tw if tw > 0 else t_plate
        tf = tf if tf > 0 else t_plate
        return t_beam(b=b, h=h, tw=tw, tf=tf)

    if p == "rect_tube":
        t = t_plate if t_plate > 0 else (tw if tw > 0 else tf)
        return rect_tube(b=b, h=h, t=t)

    if p == "circ_tube":
        d = d_circle if d_circle > 0 else h
        t = t_plate if t_plate > 0 else (tw if tw > 0 else tf)
        return circ_tube(d=d, t=t)

    if p == "plate":
        _check_positive(B=b, H=h)
        return plate(b, h)

    if p == "circle":
        d = d_circle if d_circle > 0 else h
        _check_positive(D=d)
        return circle(d)

    # Only reachable if a _PROFILE_TYPE_MAP value has no builder above.
    raise ValueError(f"No section builder for profile type: {p!r}")
