"""Staged analysis pipeline for a single polygon.

The stages run in a fixed order:
1. Normalize the vertex ring and build the perimeter
2. Merge straight runs of edges (optional)
3. Screen for self-crossings; a malformed boundary stops the pipeline here
4. Determine the winding direction
5. Decompose into convex pieces
6. Fan-triangulate the pieces and weight each triangle centroid by its area
7. Coalesce the weighted centroids into the polygon's centroid and area

Malformed input is reported in the result. Construction, precondition and
decomposition errors propagate to the caller.
"""

import time
from collections.abc import Iterable

import structlog

from polyhive.config import GeometryConfig
from polyhive.core.aggregator import coalesce_centroids, triangle_centroids
from polyhive.core.crossings import find_crossings
from polyhive.core.decomposer import ConvexDecomposer, StepObserver, find_convexities
from polyhive.core.perimeter import remove_colinearities, validate_perimeter
from polyhive.core.turns import determine_convex_direction
from polyhive.domain import DecompositionStep, Point, Polygon, PolygonAnalysis, Segment, StepKind
from polyhive.exceptions import MalformedPolygonError, PolyhiveError
from polyhive.utils import AnalysisLogger, AnalysisStats, get_logger


class PolygonAnalyzer:
    """Runs the full pipeline on polygons.

    The analyzer keeps no polygon state between calls; only the statistics
    of the most recent run are retained.

    Example:
        analyzer = PolygonAnalyzer()
        analysis = analyzer.analyze(Polygon.from_tuples([(0, 0), (4, 0), (0, 4)]))
        print(analysis.centroid)
    """

    def __init__(
        self,
        config: GeometryConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            config: Pipeline settings (defaults if None)
            logger: Structured logger to report stages to
        """
        self.config = config or GeometryConfig()
        self.logger = logger or get_logger("polyhive")
        self.stats = AnalysisStats()

    def analyze(self, polygon: Polygon, on_step: StepObserver | None = None) -> PolygonAnalysis:
        """Analyze a polygon.

        Args:
            polygon: Caller-owned vertex ring
            on_step: Optional callback receiving every decomposer decision

        Returns:
            PolygonAnalysis with the output of every stage that ran

        Raises:
            InsufficientSegmentsError: If fewer than 3 distinct vertices remain
            DegeneratePolygonError: If the boundary has no turn at all
            DecompositionError: If decomposition hits an invariant violation
        """
        tracker = AnalysisLogger(self.logger)
        self.stats = tracker.stats
        self.stats.start_time = time.time()

        try:
            analysis = self._run(polygon, tracker, on_step)
        except PolyhiveError as e:
            tracker.log_analysis_error(e)
            raise
        finally:
            self.stats.end_time = time.time()

        return analysis

    def _run(
        self,
        polygon: Polygon,
        tracker: AnalysisLogger,
        on_step: StepObserver | None,
    ) -> PolygonAnalysis:
        polygon = polygon.normalized()
        tracker.log_polygon_loaded(polygon.name, len(polygon))

        perimeter = polygon.perimeter()
        validate_perimeter(perimeter)

        removed: list[Point] = []
        if self.config.remove_colinear:
            perimeter, removed = remove_colinearities(perimeter)
        tracker.log_colinear_removed(len(removed), len(perimeter))

        analysis = PolygonAnalysis(polygon=polygon, perimeter=perimeter, removed_points=removed)

        crossings = find_crossings(perimeter)
        tracker.log_crossings([s.describe() for s in crossings])
        if crossings:
            analysis.crossings = crossings
            return analysis

        analysis.direction = determine_convex_direction(perimeter)
        tracker.log_direction(analysis.direction.value)

        def observe(step: DecompositionStep) -> None:
            if step.kind in (StepKind.CHORD_ACCEPTED, StepKind.CHORD_REJECTED):
                tracker.log_chord(step.kind is StepKind.CHORD_ACCEPTED)
            if self.config.record_steps:
                analysis.steps.append(step)
            if on_step is not None:
                on_step(step)

        decomposer = ConvexDecomposer(
            max_depth=self.config.max_recursion_depth,
            on_step=observe,
        )
        analysis.pieces = decomposer.decompose(perimeter)
        tracker.log_decomposition(len(analysis.pieces))

        analysis.triangles, analysis.centroids = triangle_centroids(analysis.pieces)
        analysis.centroid = coalesce_centroids(analysis.centroids)
        tracker.log_centroid(
            analysis.centroid.point.x,
            analysis.centroid.point.y,
            analysis.centroid.weight,
            len(analysis.triangles),
        )

        return analysis


def decompose_polygon(
    perimeter: list[Segment],
    max_depth: int = ConvexDecomposer.DEFAULT_MAX_DEPTH,
    on_step: StepObserver | None = None,
) -> list[list[Segment]]:
    """Screen a perimeter for crossings, then decompose it into convex pieces.

    Args:
        perimeter: Closed cyclic list of chained edges
        max_depth: Deepest nesting of hived-off pieces allowed
        on_step: Optional callback receiving every decomposer decision

    Returns:
        Convex pieces, each a closed cyclic list of edges

    Raises:
        MalformedPolygonError: If the perimeter crosses or overlaps itself
    """
    validate_perimeter(perimeter)
    crossings = find_crossings(perimeter)
    if crossings:
        raise MalformedPolygonError(crossings)
    return find_convexities(perimeter, max_depth=max_depth, on_step=on_step)


def analyze_points(
    coordinates: Iterable[tuple[float, float]],
    config: GeometryConfig | None = None,
) -> PolygonAnalysis:
    """Analyze a polygon given as (x, y) pairs.

    Args:
        coordinates: Vertex coordinates in traversal order
        config: Pipeline settings (defaults if None)

    Returns:
        PolygonAnalysis for the polygon
    """
    return PolygonAnalyzer(config).analyze(Polygon.from_tuples(coordinates))
