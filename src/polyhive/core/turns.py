"""Turn classification and winding direction.

Turns are read from the sectors of two chained vectors rather than from
angles or cross products. Sectors far apart in rotational order decide the
turn outright; sectors on the same or opposite quadrant are settled by
comparing slopes.

Key functions:
- curvature: Which way the boundary turns from one vector into the next
- determine_convex_direction: Winding direction of a closed perimeter
"""

from enum import Enum
from typing import cast

from polyhive.domain.shapes import Curvature, Sector, Segment, Vector
from polyhive.exceptions import ChainError, DegeneratePolygonError


class _SlopeRule(Enum):
    """Tie-break for quadrant pairs that sectors alone cannot decide."""

    # both vectors in the same quadrant: a steeper second slope turns left
    STEEPER_IS_LEFT = "steeper"
    # vectors in opposite quadrants: a shallower second slope turns left
    SHALLOWER_IS_LEFT = "shallower"


_ROTATION = [s for s in Sector if s is not Sector.NULL]


def _build_turn_table() -> dict[tuple[Sector, Sector], Curvature | _SlopeRule]:
    """Enumerate the turn for every ordered pair of sectors."""
    table: dict[tuple[Sector, Sector], Curvature | _SlopeRule] = {}
    for first in Sector:
        for second in Sector:
            if first is Sector.NULL or second is Sector.NULL:
                table[first, second] = Curvature.COLINEAR
                continue
            steps = (second.value - first.value) % len(_ROTATION)
            if steps in (1, 2, 3):
                table[first, second] = Curvature.LEFT
            elif steps in (5, 6, 7):
                table[first, second] = Curvature.RIGHT
            elif first.is_axis:
                # same or opposite axis direction
                table[first, second] = Curvature.COLINEAR
            elif steps == 0:
                table[first, second] = _SlopeRule.STEEPER_IS_LEFT
            else:
                table[first, second] = _SlopeRule.SHALLOWER_IS_LEFT
    return table


TURN_TABLE = _build_turn_table()


def curvature(v1: Vector, v2: Vector) -> Curvature:
    """Determine which way one turns moving from v1 into v2.

    Args:
        v1: Incoming vector
        v2: Outgoing vector, which must start where v1 ends

    Returns:
        LEFT for a counter-clockwise turn, RIGHT for clockwise, COLINEAR if
        either vector has no length or both share a slope

    Raises:
        ChainError: If v2 does not start where v1 ends

    Examples:
        >>> east = Vector(Point(0, 0), Point(1, 0))
        >>> north = Vector(Point(1, 0), Point(1, 1))
        >>> curvature(east, north)
        <Curvature.LEFT: 'left'>
    """
    if v1.end != v2.start:
        raise ChainError(v1.describe(), v2.describe())
    if v1.sector is Sector.NULL or v2.sector is Sector.NULL:
        return Curvature.COLINEAR
    if v1.slope == v2.slope:
        return Curvature.COLINEAR

    rule = TURN_TABLE[v1.sector, v2.sector]
    if isinstance(rule, Curvature):
        return rule

    m1, m2 = cast(float, v1.slope), cast(float, v2.slope)
    if rule is _SlopeRule.STEEPER_IS_LEFT:
        return Curvature.LEFT if m2 > m1 else Curvature.RIGHT
    return Curvature.LEFT if m2 < m1 else Curvature.RIGHT


def segment_curvature(s1: Segment, s2: Segment) -> Curvature:
    """Curvature between two chained segments, each read from a to b."""
    return curvature(s1.to_vector(), s2.to_vector())


def determine_convex_direction(perimeter: list[Segment]) -> Curvature:
    """Determine whether a closed perimeter winds left or right.

    The answer is read at the vertices with minimal x, which can never be
    concave, so it does not depend on which vertex the list starts from.
    Among several such vertices the first non-colinear turn wins. A run of
    tied vertices that wraps around the end of the list is moved to the
    front so it is walked as one block.

    Args:
        perimeter: Closed cyclic list of chained segments

    Returns:
        Curvature.LEFT for counter-clockwise, Curvature.RIGHT for clockwise

    Raises:
        DegeneratePolygonError: If every turn at the leftmost vertices is colinear
    """
    n = len(perimeter)
    if n == 0:
        raise DegeneratePolygonError("Cannot determine the direction of an empty perimeter")

    x_min = min(s.a.x for s in perimeter)
    optima = [i for i, s in enumerate(perimeter) if s.a.x == x_min]

    if len(optima) > 1 and optima[0] == 0 and optima[-1] == n - 1:
        k = len(optima) - 1
        while k > 0 and optima[k - 1] == optima[k] - 1:
            k -= 1
        optima = optima[k:] + optima[:k]

    for i in optima:
        turn = segment_curvature(perimeter[i - 1], perimeter[i])
        if turn is not Curvature.COLINEAR:
            return turn

    raise DegeneratePolygonError(
        f"No turn found at the leftmost vertices of a {n}-segment perimeter"
    )
