"""Immutable geometric primitives.

This module defines the closed family of shapes the engine works with:
- Point: a location in the plane
- Segment: two endpoints with a cached line representation
- Vector: a segment with a direction and a sector tag
- Triangle: three non-colinear vertices with area, centroid and containment
- Circle: a center and a radius, used only as a marker
- Centroid: a weighted point summarizing an area

Every shape carries an axis-aligned bounding box and a type tag. Derived
fields are computed once at construction and never change afterwards.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, cast

from polyhive.exceptions import ColinearPointsError


class GeometryType(Enum):
    """Type tag for the shape variants."""

    POINT = auto()
    SEGMENT = auto()
    VECTOR = auto()
    TRIANGLE = auto()
    CIRCLE = auto()


class Sector(Enum):
    """Direction class of a vector.

    Values follow counter-clockwise rotational order starting at the
    positive x axis; NULL is reserved for zero-length vectors.
    """

    POSITIVE_X = 0
    QUADRANT_I = 1
    POSITIVE_Y = 2
    QUADRANT_II = 3
    NEGATIVE_X = 4
    QUADRANT_III = 5
    NEGATIVE_Y = 6
    QUADRANT_IV = 7
    NULL = 8

    @property
    def is_axis(self) -> bool:
        """True for the four axis-aligned sectors."""
        return self is not Sector.NULL and self.value % 2 == 0


class Curvature(str, Enum):
    """Which way a boundary bends moving from one edge to the next."""

    LEFT = "left"
    COLINEAR = "colinear"
    RIGHT = "right"


def _fmt(value: float) -> str:
    return format(value, ".10g")


class _Bounded:
    """Bounding-box behavior shared by all shapes."""

    __slots__ = ()

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def maybe_overlaps(self, other: "_Bounded") -> bool:
        """Check whether the bounding boxes of two shapes overlap on both axes.

        This is a cheap filter; a True result does not mean the shapes touch.

        Args:
            other: Any shape

        Returns:
            True if the boxes share at least one point
        """
        return not (self.x_max < other.x_min or other.x_max < self.x_min) and not (
            self.y_max < other.y_min or other.y_max < self.y_min
        )

    @property
    def bounding_box(self) -> tuple[float, float, float, float]:
        """Bounding box as (x_min, y_min, x_max, y_max)."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)


@dataclass(frozen=True, slots=True)
class Point(_Bounded):
    """A point in 2D space.

    Immutable and hashable. Equality is exact coordinate equality.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.POINT

    @property
    def x_min(self) -> float:  # type: ignore[override]
        return self.x

    @property
    def x_max(self) -> float:  # type: ignore[override]
        return self.x

    @property
    def y_min(self) -> float:  # type: ignore[override]
        return self.y

    @property
    def y_max(self) -> float:  # type: ignore[override]
        return self.y

    def distance_from(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def describe(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Segment(_Bounded):
    """A line segment between two points.

    The endpoint order is kept (a traversal direction along a perimeter) but
    every derived field is independent of it: swapping a and b yields the
    same length, slope, intercept and bounding box.

    The line through the segment takes one of three forms:
    - vertical: slope and intercept are both None
    - horizontal: slope is 0 and intercept is the shared y
    - general: y = slope * x + intercept

    Attributes:
        a: First endpoint
        b: Second endpoint
        length: Euclidean length
        slope: Slope of the line, None when vertical
        intercept: Y intercept of the line, None when vertical
    """

    a: Point
    b: Point
    x_min: float = field(init=False, compare=False, repr=False)
    x_max: float = field(init=False, compare=False, repr=False)
    y_min: float = field(init=False, compare=False, repr=False)
    y_max: float = field(init=False, compare=False, repr=False)
    length: float = field(init=False, compare=False, repr=False)
    slope: float | None = field(init=False, compare=False, repr=False)
    intercept: float | None = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        a, b = self.a, self.b

        # the leftmost endpoint anchors the slope so order never matters
        if a.x < b.x:
            x_min, x_max, left, right = a.x, b.x, a, b
        else:
            x_min, x_max, left, right = b.x, a.x, b, a
        y_min, y_max = (a.y, b.y) if a.y < b.y else (b.y, a.y)

        slope: float | None
        intercept: float | None
        if x_min == x_max:
            slope = None
            intercept = None
        elif y_min == y_max:
            slope = 0.0
            intercept = y_min
        else:
            slope = (right.y - left.y) / (right.x - left.x)
            intercept = left.y - slope * left.x

        object.__setattr__(self, "x_min", x_min)
        object.__setattr__(self, "x_max", x_max)
        object.__setattr__(self, "y_min", y_min)
        object.__setattr__(self, "y_max", y_max)
        object.__setattr__(self, "length", math.hypot(x_max - x_min, y_max - y_min))
        object.__setattr__(self, "slope", slope)
        object.__setattr__(self, "intercept", intercept)

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.SEGMENT

    @property
    def is_vertical(self) -> bool:
        return self.slope is None

    @property
    def is_horizontal(self) -> bool:
        return self.slope == 0

    def describe(self) -> str:
        return f"{self.a.describe()} - {self.b.describe()}"

    def midpoint(self) -> Point:
        """Point halfway between the endpoints."""
        if self.slope is None:
            return Point(self.x_min, (self.y_min + self.y_max) / 2)
        if self.slope == 0:
            return Point((self.x_min + self.x_max) / 2, self.y_min)
        return Point((self.x_min + self.x_max) / 2, (self.y_min + self.y_max) / 2)

    def reverse(self) -> "Segment":
        """Segment with the endpoints swapped."""
        return Segment(self.b, self.a)

    def to_vector(self) -> "Vector":
        """Vector running from a to b."""
        return Vector(self.a, self.b)

    def shares_endpoint(self, other: "Segment") -> bool:
        """Check whether any endpoint of this segment is an endpoint of the other."""
        return (
            self.a == other.a
            or self.a == other.b
            or self.b == other.a
            or self.b == other.b
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with both endpoints
        """
        return {"a": self.a.to_dict(), "b": self.b.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a and b endpoint dictionaries

        Returns:
            Segment instance
        """
        return cls(Point.from_dict(data["a"]), Point.from_dict(data["b"]))


@dataclass(frozen=True, slots=True)
class Vector(Segment):
    """A segment with a start and an end.

    The sector is derived purely from the signs of the coordinate deltas
    and whether the segment is axis-aligned.

    Attributes:
        sector: Direction class of the vector
    """

    sector: Sector = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        Segment.__post_init__(self)

        start, end = self.a, self.b
        if start == end:
            sector = Sector.NULL
        elif self.slope is None:
            sector = Sector.POSITIVE_Y if start.y < end.y else Sector.NEGATIVE_Y
        elif self.slope == 0:
            sector = Sector.POSITIVE_X if start.x < end.x else Sector.NEGATIVE_X
        elif start.x < end.x:
            sector = Sector.QUADRANT_I if start.y < end.y else Sector.QUADRANT_IV
        else:
            sector = Sector.QUADRANT_II if start.y < end.y else Sector.QUADRANT_III

        object.__setattr__(self, "sector", sector)

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.VECTOR

    @property
    def start(self) -> Point:
        return self.a

    @property
    def end(self) -> Point:
        return self.b

    def describe(self) -> str:
        return f"{self.start.describe()} -> {self.end.describe()}"


def _half_plane(edge: Segment, reference: Point) -> Callable[[float, float], bool]:
    """Compile the inequality for the side of an edge's line holding the reference point."""
    if edge.slope is None:
        threshold = edge.a.x
        if reference.x < threshold:
            return lambda x, _y: x <= threshold
        return lambda x, _y: x >= threshold

    if edge.slope == 0:
        threshold = edge.a.y
        if reference.y < threshold:
            return lambda _x, y: y <= threshold
        return lambda _x, y: y >= threshold

    m = cast(float, edge.slope)
    b = cast(float, edge.intercept)
    if m * reference.x + b < reference.y:
        return lambda x, y: m * x + b <= y
    return lambda x, y: m * x + b >= y


def _median_crossing(m1: Segment, m2: Segment) -> Point:
    """Point where the lines through two medians of a triangle meet.

    Two medians are never parallel and at most one of them is vertical.
    """
    if m2.slope is None:
        m1, m2 = m2, m1
    slope = cast(float, m2.slope)
    intercept = cast(float, m2.intercept)
    if m1.slope is None:
        x = m1.a.x
    else:
        x = (cast(float, m1.intercept) - intercept) / (slope - m1.slope)
    return Point(x, slope * x + intercept)


@dataclass(frozen=True, slots=True)
class Triangle(_Bounded):
    """A triangle with three non-colinear vertices.

    Area comes from Heron's formula over the edge lengths and the centroid
    from the intersection of two medians.

    Attributes:
        a: First vertex
        b: Second vertex
        c: Third vertex
        ab: Edge from a to b
        ac: Edge from a to c
        bc: Edge from b to c
        area: Enclosed area
        centroid: Intersection of the medians

    Raises:
        ColinearPointsError: If the vertices are colinear or coincide
    """

    a: Point
    b: Point
    c: Point
    ab: Segment = field(init=False, compare=False, repr=False)
    ac: Segment = field(init=False, compare=False, repr=False)
    bc: Segment = field(init=False, compare=False, repr=False)
    x_min: float = field(init=False, compare=False, repr=False)
    x_max: float = field(init=False, compare=False, repr=False)
    y_min: float = field(init=False, compare=False, repr=False)
    y_max: float = field(init=False, compare=False, repr=False)
    area: float = field(init=False, compare=False, repr=False)
    centroid: Point = field(init=False, compare=False, repr=False)
    _inequalities: tuple[Callable[[float, float], bool], ...] = field(
        init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        a, b, c = self.a, self.b, self.c
        ab = Segment(a, b)
        ac = Segment(a, c)
        if a == b or a == c or b == c or ab.slope == ac.slope:
            raise ColinearPointsError(f"{a.describe()}, {b.describe()}, {c.describe()}")
        bc = Segment(b, c)

        object.__setattr__(self, "ab", ab)
        object.__setattr__(self, "ac", ac)
        object.__setattr__(self, "bc", bc)
        object.__setattr__(self, "x_min", min(a.x, b.x, c.x))
        object.__setattr__(self, "x_max", max(a.x, b.x, c.x))
        object.__setattr__(self, "y_min", min(a.y, b.y, c.y))
        object.__setattr__(self, "y_max", max(a.y, b.y, c.y))

        # Heron's formula; rounding can push a sliver's product below zero
        s = (ab.length + ac.length + bc.length) / 2
        product = s * (s - ab.length) * (s - ac.length) * (s - bc.length)
        object.__setattr__(self, "area", math.sqrt(max(product, 0.0)))

        centroid = _median_crossing(Segment(c, ab.midpoint()), Segment(b, ac.midpoint()))
        object.__setattr__(self, "centroid", centroid)

        object.__setattr__(
            self,
            "_inequalities",
            (_half_plane(ab, c), _half_plane(ac, b), _half_plane(bc, a)),
        )

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.TRIANGLE

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside the triangle or on its boundary.

        Args:
            point: The point to test

        Returns:
            True if the point satisfies all three edge inequalities
        """
        if not self.maybe_overlaps(point):
            return False
        return all(inequality(point.x, point.y) for inequality in self._inequalities)

    def describe(self) -> str:
        return f"△({self.a.describe()}, {self.b.describe()}, {self.c.describe()})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "vertices": [self.a.to_dict(), self.b.to_dict(), self.c.to_dict()],
            "area": self.area,
            "centroid": self.centroid.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Circle(_Bounded):
    """A circle, used to mark points of interest.

    Attributes:
        center: Center point
        radius: Radius
    """

    center: Point
    radius: float

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.CIRCLE

    @property
    def x_min(self) -> float:  # type: ignore[override]
        return self.center.x - self.radius

    @property
    def x_max(self) -> float:  # type: ignore[override]
        return self.center.x + self.radius

    @property
    def y_min(self) -> float:  # type: ignore[override]
        return self.center.y - self.radius

    @property
    def y_max(self) -> float:  # type: ignore[override]
        return self.center.y + self.radius

    def describe(self) -> str:
        return f"○({self.center.describe()}, r={_fmt(self.radius)})"


@dataclass(frozen=True, slots=True)
class Centroid:
    """A weighted point: the centroid of some area and the size of that area.

    Attributes:
        point: Center of mass
        weight: Area the point stands for
    """

    point: Point
    weight: float

    def describe(self) -> str:
        return f"{self.point.describe()} x {_fmt(self.weight)}"

    def to_dict(self) -> dict[str, Any]:
        return {"point": self.point.to_dict(), "weight": self.weight}


Shape = Point | Segment | Vector | Triangle | Circle
