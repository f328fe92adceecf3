"""Exception hierarchy for Polyhive."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polyhive.domain.shapes import Segment


class PolyhiveError(Exception):
    """Base exception for all Polyhive errors."""

    pass


class GeometryError(PolyhiveError):
    """Errors in geometric construction or calculation."""

    pass


class ColinearPointsError(GeometryError):
    """Three points given for a triangle do not enclose any area."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Points {description} are colinear")


class ChainError(GeometryError):
    """Turn requested between vectors that do not meet end to start."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"Vector {second} must begin where vector {first} ends"
        )


class DegeneratePolygonError(GeometryError):
    """Perimeter has no turn from which a winding direction can be read."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PolygonError(PolyhiveError):
    """Errors related to the shape of a polygon boundary."""

    pass


class InsufficientSegmentsError(PolygonError):
    """Perimeter has too few edges to enclose an area."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"A perimeter needs at least 3 segments, got {count}")


class MalformedPolygonError(PolygonError):
    """Perimeter crosses or overlaps itself."""

    def __init__(self, crossings: "set[Segment]") -> None:
        self.crossings = crossings
        described = ", ".join(sorted(s.describe() for s in crossings))
        super().__init__(f"Perimeter crosses itself at: {described}")


class DecompositionError(PolyhiveError):
    """Convex decomposition hit an unrecoverable state."""

    pass


class RecursionDepthExceededError(DecompositionError):
    """Concavities nested deeper than the configured ceiling."""

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"Improbable level of recursion: depth {depth} exceeds limit {limit}"
        )


class ChordSearchError(DecompositionError):
    """No splitting chord could be found for a concavity."""

    def __init__(self, vertex: str) -> None:
        self.vertex = vertex
        super().__init__(
            f"Looped without finding a splitting chord for the concavity at {vertex}"
        )


class AggregationError(PolyhiveError):
    """Centroids could not be combined."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Centroid aggregation failed: {reason}")


class PolygonIOError(PolyhiveError):
    """Errors related to reading polygons or writing results."""

    pass


class PolygonLoadError(PolygonIOError):
    """Error loading a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load polygon '{path}': {reason}")


class AnalysisSaveError(PolygonIOError):
    """Error saving an analysis result."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save analysis '{path}': {reason}")
