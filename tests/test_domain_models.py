"""Tests for domain models to verify they work correctly."""

from dataclasses import FrozenInstanceError
from itertools import permutations

import pytest

from polyhive.domain import (
    Centroid,
    Circle,
    GeometryType,
    Point,
    Polygon,
    Sector,
    Segment,
    Triangle,
    Vector,
)
from polyhive.exceptions import ColinearPointsError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0
        assert p.geometry_type is GeometryType.POINT

    def test_point_bounding_box_is_itself(self) -> None:
        """Test a point's bounding box collapses onto the point."""
        assert Point(3.0, -1.0).bounding_box == (3.0, -1.0, 3.0, -1.0)

    def test_point_equality_and_hash(self) -> None:
        """Test exact equality and hashing."""
        assert Point(1.0, 2.0) == Point(1, 2)
        assert len({Point(1.0, 2.0), Point(1, 2), Point(2, 1)}) == 2

    def test_point_describe(self) -> None:
        """Test human-readable form."""
        assert Point(1.0, 2.5).describe() == "(1, 2.5)"

    def test_point_distance(self) -> None:
        """Test Euclidean distance."""
        assert Point(0, 0).distance_from(Point(3, 4)) == 5.0

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1
        assert p1.to_tuple() == (100.0, 200.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(FrozenInstanceError):
            p.x = 300.0  # type: ignore


class TestSegment:
    """Tests for Segment line forms."""

    def test_general_slope_and_intercept(self) -> None:
        """Test the line through a sloped segment."""
        s = Segment(Point(0, 0), Point(2, 4))
        assert s.slope == 2.0
        assert s.intercept == 0.0

    def test_translated_segment(self) -> None:
        """Test intercept follows a translation."""
        s = Segment(Point(1, 1), Point(3, 5))
        assert s.slope == 2.0
        assert s.intercept == -1.0

    def test_derived_fields_ignore_endpoint_order(self) -> None:
        """Test swapping endpoints keeps every derived field."""
        s1 = Segment(Point(-1, 7), Point(3, -2))
        s2 = s1.reverse()
        assert s2.a == s1.b
        assert s1.slope == s2.slope
        assert s1.intercept == s2.intercept
        assert s1.length == s2.length
        assert s1.bounding_box == s2.bounding_box

    def test_vertical_segment(self) -> None:
        """Test vertical segments carry no slope or intercept."""
        s = Segment(Point(2, 5), Point(2, 1))
        assert s.is_vertical
        assert s.slope is None
        assert s.intercept is None
        assert s.length == 4.0

    def test_horizontal_segment(self) -> None:
        """Test horizontal segments have zero slope and intercept at y."""
        s = Segment(Point(5, 3), Point(1, 3))
        assert s.is_horizontal
        assert s.slope == 0.0
        assert s.intercept == 3.0

    def test_bounding_box(self) -> None:
        """Test the box spans both endpoints."""
        s = Segment(Point(4, -1), Point(-2, 6))
        assert s.bounding_box == (-2, -1, 4, 6)

    def test_maybe_overlaps(self) -> None:
        """Test bounding box overlap filter."""
        s1 = Segment(Point(0, 0), Point(2, 2))
        assert s1.maybe_overlaps(Segment(Point(2, 2), Point(3, 5)))
        assert not s1.maybe_overlaps(Segment(Point(3, 0), Point(4, 1)))

    def test_midpoint(self) -> None:
        """Test midpoint in each line form."""
        assert Segment(Point(0, 0), Point(0, 4)).midpoint() == Point(0, 2)
        assert Segment(Point(0, 1), Point(4, 1)).midpoint() == Point(2, 1)
        assert Segment(Point(0, 0), Point(2, 4)).midpoint() == Point(1, 2)

    def test_shares_endpoint(self) -> None:
        """Test endpoint sharing regardless of direction."""
        s = Segment(Point(0, 0), Point(1, 1))
        assert s.shares_endpoint(Segment(Point(2, 0), Point(1, 1)))
        assert not s.shares_endpoint(Segment(Point(2, 0), Point(3, 1)))

    def test_segment_serialization(self) -> None:
        """Test segment serialization and deserialization."""
        s = Segment(Point(0, 0), Point(1, 2))
        assert Segment.from_dict(s.to_dict()) == s


class TestVector:
    """Tests for Vector sectors."""

    @pytest.mark.parametrize(
        ("end", "sector"),
        [
            ((1, 0), Sector.POSITIVE_X),
            ((1, 1), Sector.QUADRANT_I),
            ((0, 1), Sector.POSITIVE_Y),
            ((-1, 1), Sector.QUADRANT_II),
            ((-1, 0), Sector.NEGATIVE_X),
            ((-1, -1), Sector.QUADRANT_III),
            ((0, -1), Sector.NEGATIVE_Y),
            ((1, -1), Sector.QUADRANT_IV),
            ((0, 0), Sector.NULL),
        ],
    )
    def test_sector(self, end: tuple[int, int], sector: Sector) -> None:
        """Test sector from the signs of the deltas."""
        v = Vector(Point(0, 0), Point(*end))
        assert v.sector is sector

    def test_sector_ignores_origin(self) -> None:
        """Test sector is the same wherever the vector starts."""
        assert Vector(Point(10, -3), Point(8, -10)).sector is Sector.QUADRANT_III

    def test_axis_sectors(self) -> None:
        """Test axis flag on sectors."""
        assert Sector.POSITIVE_Y.is_axis
        assert not Sector.QUADRANT_II.is_axis
        assert not Sector.NULL.is_axis

    def test_vector_is_segment(self) -> None:
        """Test vectors keep the segment's line form."""
        v = Segment(Point(0, 0), Point(2, 4)).to_vector()
        assert isinstance(v, Segment)
        assert v.geometry_type is GeometryType.VECTOR
        assert v.slope == 2.0
        assert v.start == Point(0, 0)
        assert v.end == Point(2, 4)
        assert v.describe() == "(0, 0) -> (2, 4)"


class TestTriangle:
    """Tests for Triangle class."""

    def test_area(self) -> None:
        """Test Heron area of a right triangle."""
        t = Triangle(Point(0, 0), Point(4, 0), Point(0, 4))
        assert t.area == pytest.approx(8.0)

    def test_centroid(self) -> None:
        """Test centroid is the mean of the vertices."""
        t = Triangle(Point(0, 0), Point(4, 0), Point(0, 4))
        assert t.centroid.x == pytest.approx(4 / 3)
        assert t.centroid.y == pytest.approx(4 / 3)

    def test_centroid_ignores_vertex_order(self) -> None:
        """Test every vertex permutation finds the same centroid."""
        points = [Point(8, -10.8), Point(2.7, -16.9), Point(6, -4.7)]
        for a, b, c in permutations(points):
            centroid = Triangle(a, b, c).centroid
            assert centroid.x == pytest.approx((8 + 2.7 + 6) / 3)
            assert centroid.y == pytest.approx((-10.8 - 16.9 - 4.7) / 3)

    def test_centroid_with_axis_aligned_medians(self) -> None:
        """Test a triangle whose medians are vertical or horizontal."""
        t = Triangle(Point(0, 0), Point(6, 0), Point(3, 6))
        assert t.centroid.x == pytest.approx(3.0)
        assert t.centroid.y == pytest.approx(2.0)

    @pytest.mark.parametrize(
        ("a", "b", "c", "expected"),
        [
            # median from c is horizontal
            (Point(0, 0), Point(0, 6), Point(6, 3), (2.0, 3.0)),
            # median from b is vertical
            (Point(0, 0), Point(2, 6), Point(4, 0), (2.0, 2.0)),
        ],
    )
    def test_centroid_medians_in_either_order(self, a, b, c, expected) -> None:
        """Test the medians meet whichever of them is axis-aligned."""
        t = Triangle(a, b, c)
        assert t.centroid.x == pytest.approx(expected[0])
        assert t.centroid.y == pytest.approx(expected[1])

    def test_contains(self) -> None:
        """Test containment, including the boundary."""
        t = Triangle(Point(0, 0), Point(4, 0), Point(0, 4))
        assert t.contains(Point(1, 1))
        assert t.contains(Point(0, 0))
        assert t.contains(Point(2, 2))
        assert not t.contains(Point(3, 3))
        assert not t.contains(Point(-1, 1))

    @pytest.mark.parametrize(
        "points",
        [
            (Point(0, 0), Point(1, 1), Point(2, 2)),
            (Point(0, 0), Point(0, 1), Point(0, 5)),
            (Point(0, 0), Point(0, 0), Point(1, 2)),
        ],
    )
    def test_colinear_points_rejected(self, points: tuple[Point, Point, Point]) -> None:
        """Test colinear or coincident vertices raise."""
        with pytest.raises(ColinearPointsError, match="colinear"):
            Triangle(*points)

    def test_bounding_box(self) -> None:
        """Test the box spans all three vertices."""
        t = Triangle(Point(1, 5), Point(-2, 0), Point(3, 2))
        assert t.bounding_box == (-2, 0, 3, 5)


class TestCircle:
    """Tests for Circle class."""

    def test_bounding_box(self) -> None:
        """Test circle box is center plus and minus radius."""
        c = Circle(Point(1, 1), 2)
        assert c.bounding_box == (-1, -1, 3, 3)
        assert c.geometry_type is GeometryType.CIRCLE

    def test_maybe_overlaps_point(self) -> None:
        """Test overlap filter against points."""
        c = Circle(Point(0, 0), 1)
        assert c.maybe_overlaps(Point(1, 1))
        assert not c.maybe_overlaps(Point(2, 0))


class TestCentroid:
    """Tests for Centroid class."""

    def test_centroid_describe(self) -> None:
        """Test human-readable form."""
        assert Centroid(Point(1, 2), 3.0).describe() == "(1, 2) x 3"

    def test_centroid_to_dict(self) -> None:
        """Test serialization."""
        assert Centroid(Point(1, 2), 3.0).to_dict() == {"point": {"x": 1, "y": 2}, "weight": 3.0}


class TestPolygon:
    """Tests for Polygon class."""

    def test_from_tuples(self) -> None:
        """Test building a polygon from coordinate pairs."""
        polygon = Polygon.from_tuples([(0, 0), (4, 0), (0, 4)], name="tri")
        assert len(polygon) == 3
        assert polygon.points[1] == Point(4.0, 0.0)
        assert polygon.name == "tri"

    def test_normalized_drops_repeats(self) -> None:
        """Test consecutive duplicates and the closing vertex are dropped."""
        polygon = Polygon.from_tuples([(0, 0), (4, 0), (4, 0), (4, 4), (0, 0)])
        assert polygon.normalized().points == [Point(0, 0), Point(4, 0), Point(4, 4)]

    def test_perimeter_closes(self) -> None:
        """Test the last edge returns to the first vertex."""
        perimeter = Polygon.from_tuples([(0, 0), (4, 0), (0, 4)]).perimeter()
        assert len(perimeter) == 3
        assert perimeter[-1] == Segment(Point(0, 4), Point(0, 0))
        assert all(perimeter[i].b == perimeter[(i + 1) % 3].a for i in range(3))

    def test_bounding_box(self) -> None:
        """Test polygon bounding box."""
        polygon = Polygon.from_tuples([(1, 2), (5, -1), (3, 7)])
        assert polygon.bounding_box() == (1, -1, 5, 7)

    def test_polygon_serialization(self) -> None:
        """Test polygon serialization and deserialization."""
        polygon = Polygon.from_tuples([(0, 0), (4, 0), (0, 4)], name="tri")
        restored = Polygon.from_dict(polygon.to_dict())
        assert restored.points == polygon.points
        assert restored.name == "tri"
