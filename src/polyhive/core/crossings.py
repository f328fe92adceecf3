"""Self-intersection screening of a closed boundary.

A boundary must pass this screen before it may be decomposed.
"""

from polyhive.core.intersection import intersect
from polyhive.domain.shapes import Segment
from polyhive.utils import get_logger

logger = get_logger(__name__)


def find_crossings(segments: list[Segment]) -> set[Segment]:
    """Find every edge of a closed boundary that crosses or overlaps another.

    Adjacent edges, including the last and first edge which close the ring,
    always meet at their shared vertex; they are flagged only when they run
    back over each other. Other pairs sharing a vertex are tolerated unless
    they overlap along a stretch. Any other contact flags both edges.

    Args:
        segments: Closed cyclic list of boundary edges in traversal order

    Returns:
        The malformed edges; empty for a simple polygon
    """
    crossed: set[Segment] = set()
    n = len(segments)
    last = n - 1

    for i in range(last):
        s1 = segments[i]
        for j in range(i + 1, n):
            s2 = segments[j]
            adjacent = j == i + 1 or (i == 0 and j == last)

            overlap = intersect(s1, s2)
            if overlap is None:
                continue
            if (adjacent or s1.shares_endpoint(s2)) and not isinstance(overlap, Segment):
                continue

            logger.debug(
                "Crossing found",
                i=i,
                j=j,
                first=s1.describe(),
                second=s2.describe(),
                at=overlap.describe(),
            )
            crossed.add(s1)
            crossed.add(s2)

    return crossed
