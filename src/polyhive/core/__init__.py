"""Core geometry algorithms for polyhive.

This module contains the algorithms for:

- Segment intersection with vertical/horizontal special cases
- Turn classification from vector sectors, and winding direction
- Self-crossing screening of a closed boundary
- Convex decomposition by hiving off concavities
- Centroid and area aggregation over fan triangles

All functions are:
- Stateless (safe to call in parallel on independent inputs)
- Pure and deterministic

Key functions:
- intersect: Point, overlap Segment or None for two segments
- curvature: Left/right/colinear turn between chained vectors
- determine_convex_direction: Winding direction of a perimeter
- find_crossings: Edges that cross or overlap
- find_convexities: Convex pieces of a simple polygon
- coalesce_centroids: Single weighted centroid from many

Key classes:
- ConvexDecomposer: Decomposer with depth ceiling and step observer
- PolygonAnalyzer: Runs every stage on a polygon
"""

from polyhive.core.aggregator import (
    coalesce_centroids,
    combine_centroids,
    fan_triangulate,
    triangle_centroids,
)
from polyhive.core.analyzer import PolygonAnalyzer, analyze_points, decompose_polygon
from polyhive.core.crossings import find_crossings
from polyhive.core.decomposer import ConvexDecomposer, find_convexities
from polyhive.core.intersection import intersect
from polyhive.core.perimeter import (
    remove_colinearities,
    validate_perimeter,
)
from polyhive.core.turns import curvature, determine_convex_direction, segment_curvature

__all__ = [
    # Decomposer classes
    "ConvexDecomposer",
    # Pipeline
    "PolygonAnalyzer",
    "analyze_points",
    "coalesce_centroids",
    "combine_centroids",
    "curvature",
    "decompose_polygon",
    "determine_convex_direction",
    "fan_triangulate",
    "find_convexities",
    "find_crossings",
    "intersect",
    "remove_colinearities",
    "segment_curvature",
    "triangle_centroids",
    "validate_perimeter",
]
