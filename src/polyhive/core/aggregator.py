"""Centroid and area of a decomposed polygon.

Each convex piece is fan-triangulated from its first vertex. Every triangle
contributes its centroid weighted by its area, and the weighted points are
combined two at a time until a single centroid carrying the total area
remains.

Key functions:
- combine_centroids: Merge two weighted points
- fan_triangulate: Triangles covering one convex piece
- triangle_centroids: Weighted centroids of all fan triangles
- coalesce_centroids: Reduce weighted points to a single one
"""

from collections import deque
from collections.abc import Callable, Iterable

from polyhive.domain.shapes import Centroid, Point, Segment, Triangle
from polyhive.exceptions import AggregationError, ColinearPointsError
from polyhive.utils import get_logger

logger = get_logger(__name__)

CombineObserver = Callable[[Segment, Centroid], None]


def combine_centroids(c1: Centroid, c2: Centroid) -> tuple[Segment, Centroid]:
    """Find the joint centroid of two weighted points.

    The joint centroid divides the segment connecting the two points so that
    each weight times its distance to the joint centroid balances the other.

    Args:
        c1: First weighted point
        c2: Second weighted point

    Returns:
        Tuple of (connecting segment, joint centroid carrying the summed weight)

    Examples:
        >>> _, c = combine_centroids(Centroid(Point(0, 0), 2), Centroid(Point(3, 0), 1))
        >>> c.point, c.weight  # (Point(1, 0), 3)
    """
    p1, w1 = c1.point, c1.weight
    p2, w2 = c2.point, c2.weight
    s = Segment(p1, p2)
    d = w1 + w2

    if s.slope is None:
        # vertical, or the same point twice
        point = Point(p1.x, p1.y + (p2.y - p1.y) * w2 / d)
    elif s.slope == 0:
        point = Point(p1.x + (p2.x - p1.x) * w2 / d, p1.y)
    else:
        point = Point((w1 * p1.x + w2 * p2.x) / d, (w1 * p1.y + w2 * p2.y) / d)

    return s, Centroid(point, d)


def fan_triangulate(piece: list[Segment]) -> list[Triangle]:
    """Cover a convex piece with triangles sharing its first vertex.

    Fan triangles that collapse onto a line are left out.

    Args:
        piece: Closed cyclic list of edges of a convex polygon

    Returns:
        One triangle per consecutive edge pair not touching the first vertex
    """
    if not piece:
        return []

    apex = piece[0].a
    triangles: list[Triangle] = []
    for edge in piece[1:-1]:
        try:
            triangles.append(Triangle(apex, edge.a, edge.b))
        except ColinearPointsError:
            logger.debug("Skipping degenerate fan triangle", apex=apex.describe(), edge=edge.describe())
    return triangles


def triangle_centroids(pieces: Iterable[list[Segment]]) -> tuple[list[Triangle], list[Centroid]]:
    """Fan-triangulate every piece and weight each triangle's centroid by its area.

    Args:
        pieces: Convex pieces from the decomposer

    Returns:
        Tuple of (triangles, matching weighted centroids)
    """
    triangles: list[Triangle] = []
    for piece in pieces:
        triangles.extend(fan_triangulate(piece))
    return triangles, [Centroid(t.centroid, t.area) for t in triangles]


def coalesce_centroids(
    centroids: Iterable[Centroid],
    on_combine: CombineObserver | None = None,
) -> Centroid:
    """Combine weighted points pairwise until one remains.

    The two oldest pending points are combined and their result queued at
    the back. Points without weight are dropped.

    Args:
        centroids: Weighted points to combine
        on_combine: Optional callback receiving each connecting segment and
            joint centroid

    Returns:
        Centroid of the whole set, weighted by the total weight

    Raises:
        AggregationError: If no point carries positive weight
    """
    pending = deque(c for c in centroids if c.weight > 0)
    if not pending:
        raise AggregationError("no centroid with positive weight")

    while len(pending) > 1:
        c1 = pending.popleft()
        c2 = pending.popleft()
        segment, joint = combine_centroids(c1, c2)
        if on_combine is not None:
            on_combine(segment, joint)
        pending.append(joint)

    return pending[0]
