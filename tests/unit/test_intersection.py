"""Unit tests for segment intersection.

Covers every line-form combination: general, vertical, horizontal, and
colinear overlap.
"""

import pytest

from polyhive.core.intersection import intersect
from polyhive.domain import Point, Segment


def seg(x1: float, y1: float, x2: float, y2: float) -> Segment:
    return Segment(Point(x1, y1), Point(x2, y2))


class TestGeneralCrossing:
    """Tests for two sloped segments."""

    def test_crossing_point(self):
        """Test two sloped segments crossing inside both."""
        result = intersect(seg(0, 4, 2, 0), seg(0, 2, 4, 0))
        assert isinstance(result, Point)
        assert result.x == pytest.approx(4 / 3)
        assert result.y == pytest.approx(4 / 3)

    def test_symmetric_under_swap(self):
        """Test swapping operands gives an identical point."""
        s1 = seg(0.3, 4.1, 2.9, -0.7)
        s2 = seg(-0.2, 1.9, 4.4, 0.3)
        assert intersect(s1, s2) == intersect(s2, s1)

    def test_lines_cross_outside_segments(self):
        """Test overlapping boxes whose lines meet outside a segment."""
        assert intersect(seg(0, 0, 4, 1), seg(1, 3, 2, 1)) is None

    def test_disjoint_boxes(self):
        """Test segments far apart."""
        assert intersect(seg(0, 0, 1, 1), seg(5, 5, 6, 7)) is None

    def test_parallel_distinct_lines(self):
        """Test parallel segments on different lines."""
        assert intersect(seg(0, 0, 2, 2), seg(0, 1, 2, 3)) is None

    def test_rounded_touch_is_missed(self):
        """Test range checks stay exact when the computed crossing rounds past an end.

        (7, 8) lies on both segments, but the crossing comes out just
        beyond x = 7 and no tolerance pulls it back.
        """
        s1 = seg(0, 0, 7, 8)
        s2 = seg(9, 10, 6, 7)
        assert intersect(s1, s2) is None
        assert intersect(s2, s1) is None


class TestAxisAlignedCrossing:
    """Tests where one operand is vertical or horizontal."""

    def test_vertical_and_horizontal(self):
        """Test a plus sign."""
        assert intersect(seg(1, -1, 1, 1), seg(0, 0, 2, 0)) == Point(1, 0)
        assert intersect(seg(0, 0, 2, 0), seg(1, -1, 1, 1)) == Point(1, 0)

    def test_vertical_and_sloped(self):
        """Test a vertical segment crossing a sloped one."""
        assert intersect(seg(1, 0, 1, 4), seg(0, 0, 2, 4)) == Point(1, 2)
        assert intersect(seg(0, 0, 2, 4), seg(1, 0, 1, 4)) == Point(1, 2)

    def test_vertical_misses_sloped(self):
        """Test the crossing falls outside the vertical's y range."""
        assert intersect(seg(1, 3, 1, 4), seg(0, 0, 2, 4)) is None

    def test_horizontal_and_sloped(self):
        """Test a horizontal segment crossing a sloped one."""
        assert intersect(seg(0, 1, 4, 1), seg(0, 0, 2, 4)) == Point(0.5, 1)
        assert intersect(seg(0, 0, 2, 4), seg(0, 1, 4, 1)) == Point(0.5, 1)

    def test_horizontal_misses_sloped(self):
        """Test the crossing falls outside the horizontal's x range."""
        assert intersect(seg(1, 1, 4, 1), seg(0, 0, 2, 4)) is None

    def test_touching_at_endpoint(self):
        """Test a corner where two edges meet."""
        assert intersect(seg(0, 0, 2, 0), seg(2, 0, 2, 2)) == Point(2, 0)

    def test_t_junction(self):
        """Test an endpoint landing in the middle of another segment."""
        assert intersect(seg(0, 0, 4, 0), seg(2, 0, 2, 3)) == Point(2, 0)


class TestColinearOverlap:
    """Tests for segments sharing a line."""

    def test_sloped_overlap(self):
        """Test partial overlap along a diagonal."""
        assert intersect(seg(0, 0, 2, 2), seg(1, 1, 3, 3)) == seg(1, 1, 2, 2)

    def test_sloped_touch(self):
        """Test colinear segments meeting at one point."""
        assert intersect(seg(0, 0, 1, 1), seg(1, 1, 2, 2)) == Point(1, 1)

    def test_horizontal_overlap(self):
        """Test partial overlap along a horizontal line."""
        assert intersect(seg(0, 0, 3, 0), seg(5, 0, 2, 0)) == seg(2, 0, 3, 0)

    def test_vertical_overlap(self):
        """Test partial overlap along a vertical line."""
        assert intersect(seg(0, 0, 0, 3), seg(0, 1, 0, 5)) == seg(0, 1, 0, 3)

    def test_vertical_touch(self):
        """Test vertical segments meeting end to end."""
        assert intersect(seg(0, 0, 0, 3), seg(0, 3, 0, 5)) == Point(0, 3)

    def test_contained(self):
        """Test one segment lying within the other."""
        assert intersect(seg(0, 0, 6, 3), seg(2, 1, 4, 2)) == seg(2, 1, 4, 2)

    def test_doubling_back(self):
        """Test an edge running back over its predecessor."""
        assert intersect(seg(0, 0, 4, 0), seg(4, 0, 2, 0)) == seg(2, 0, 4, 0)

    def test_parallel_verticals(self):
        """Test vertical segments on different x."""
        assert intersect(seg(0, 0, 0, 3), seg(0.5, 0, 0.5, 3)) is None
