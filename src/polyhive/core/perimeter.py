"""Perimeter validation and cleanup.

Key functions:
- validate_perimeter: Check a ring has enough edges and that they chain
- remove_colinearities: Merge straight runs of edges into single edges
"""

from collections.abc import Sequence

from polyhive.core.turns import curvature
from polyhive.domain.shapes import Curvature, Point, Segment
from polyhive.exceptions import ChainError, InsufficientSegmentsError
from polyhive.utils import get_logger

logger = get_logger(__name__)


def validate_perimeter(perimeter: Sequence[Segment]) -> None:
    """Check that a perimeter can enclose an area.

    Args:
        perimeter: Closed cyclic list of edges

    Raises:
        InsufficientSegmentsError: If there are fewer than 3 edges
        ChainError: If an edge does not start where the previous one ends
    """
    n = len(perimeter)
    if n < 3:
        raise InsufficientSegmentsError(n)
    for i in range(n):
        current = perimeter[i]
        following = perimeter[(i + 1) % n]
        if current.b != following.a:
            raise ChainError(current.describe(), following.describe())


def remove_colinearities(perimeter: Sequence[Segment]) -> tuple[list[Segment], list[Point]]:
    """Merge consecutive edges that continue in the same direction.

    Only edges heading the same way are merged. An edge that doubles back
    over its predecessor is kept so the crossing screen can report it.

    Args:
        perimeter: Closed cyclic list of edges

    Returns:
        Tuple of (cleaned perimeter, vertices that were dropped)
    """
    segments = list(perimeter)
    removed: list[Point] = []

    i = 0
    checked = 0
    while len(segments) > 3 and checked < len(segments):
        j = (i + 1) % len(segments)
        v1 = segments[i].to_vector()
        v2 = segments[j].to_vector()

        if v1.sector is v2.sector and curvature(v1, v2) is Curvature.COLINEAR:
            removed.append(v1.end)
            segments[i] = Segment(v1.start, v2.end)
            segments.pop(j)
            if j < i:
                i -= 1
            checked = 0
            continue

        checked += 1
        i = j

    if removed:
        logger.debug(
            "Colinear points removed",
            removed=[p.describe() for p in removed],
            segments=len(segments),
        )

    return segments, removed
