"""Exact, case-based segment intersection.

The branch structure follows the line forms cached on each Segment:
vertical, horizontal or general. Slope-based arithmetic is only used when
neither operand is axis-aligned, so no division by an undefined or zero
slope can happen.

All functions are pure and deterministic.
"""

from typing import cast

from polyhive.domain.shapes import Point, Segment


def intersect(s1: Segment, s2: Segment) -> Point | Segment | None:
    """Find where two segments meet.

    Args:
        s1: First segment
        s2: Second segment

    Returns:
        The single crossing Point, the overlapping Segment for colinear
        segments sharing more than one point, or None if they do not meet

    Examples:
        >>> s1 = Segment(Point(0, 4), Point(2, 0))
        >>> s2 = Segment(Point(0, 2), Point(4, 0))
        >>> intersect(s1, s2)  # Point(4/3, 4/3)
    """
    if not s1.maybe_overlaps(s2):
        return None

    if s1.slope == s2.slope:
        if s1.intercept != s2.intercept:
            return None
        return _colinear_overlap(s1, s2)

    if s1.slope is None:
        return _vertical_crossing(s1, s2)
    if s2.slope is None:
        return _vertical_crossing(s2, s1)
    if s1.slope == 0:
        return _horizontal_crossing(s1, s2)
    if s2.slope == 0:
        return _horizontal_crossing(s2, s1)
    return _general_crossing(s1, s2)


def _colinear_overlap(s1: Segment, s2: Segment) -> Point | Segment | None:
    """Overlap of two segments known to share a line."""
    if s1.slope is None:
        # both vertical; the x offsets must agree
        if s1.x_min != s2.x_min:
            return None
        x = s1.x_min
        low = max(s1.y_min, s2.y_min)
        high = min(s1.y_max, s2.y_max)
        if low == high:
            return Point(x, low)
        return Segment(Point(x, low), Point(x, high))

    low = max(s1.x_min, s2.x_min)
    high = min(s1.x_max, s2.x_max)

    if s1.slope == 0:
        y = s1.y_min
        if low == high:
            return Point(low, y)
        return Segment(Point(low, y), Point(high, y))

    m = cast(float, s1.slope)
    b = cast(float, s1.intercept)
    if low == high:
        return Point(low, m * low + b)
    return Segment(Point(low, m * low + b), Point(high, m * high + b))


def _vertical_crossing(vertical: Segment, other: Segment) -> Point | None:
    """Crossing of a vertical segment with a non-vertical one."""
    x = vertical.x_min
    if other.slope == 0:
        y = other.y_min
    else:
        y = cast(float, other.slope) * x + cast(float, other.intercept)

    if vertical.y_min <= y <= vertical.y_max and other.x_min <= x <= other.x_max:
        return Point(x, y)
    return None


def _horizontal_crossing(horizontal: Segment, other: Segment) -> Point | None:
    """Crossing of a horizontal segment with a general (sloped) one."""
    y = horizontal.y_min
    x = (y - cast(float, other.intercept)) / cast(float, other.slope)

    if (
        horizontal.x_min <= x <= horizontal.x_max
        and other.x_min <= x <= other.x_max
        and other.y_min <= y <= other.y_max
    ):
        return Point(x, y)
    return None


def _general_crossing(s1: Segment, s2: Segment) -> Point | None:
    """Crossing of two sloped segments with different slopes."""
    # canonical operand order keeps the result identical under swap
    if (s2.slope, s2.intercept) < (s1.slope, s1.intercept):
        s1, s2 = s2, s1
    m1, b1 = cast(float, s1.slope), cast(float, s1.intercept)
    m2, b2 = cast(float, s2.slope), cast(float, s2.intercept)

    x = (b1 - b2) / (m2 - m1)
    y = m1 * x + b1
    p = Point(x, y)
    if p.maybe_overlaps(s1) and p.maybe_overlaps(s2):
        return p
    return None
