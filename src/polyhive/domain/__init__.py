"""Domain models for polyhive.

This module contains the value types the geometry engine works with. All
shapes are:

- Immutable (frozen dataclasses with derived fields cached at construction)
- Hashable, so they can be collected in sets
- Independent of any rendering or input layer

Key classes:
- Point, Segment, Vector, Triangle, Circle: the shape variants
- Centroid: a weighted point
- Polygon: a caller-owned ring of vertices
- PolygonAnalysis: the result of running the pipeline on a polygon
"""

from polyhive.domain.analysis import DecompositionStep, PolygonAnalysis, StepKind
from polyhive.domain.polygon import Polygon
from polyhive.domain.shapes import (
    Centroid,
    Circle,
    Curvature,
    GeometryType,
    Point,
    Sector,
    Segment,
    Shape,
    Triangle,
    Vector,
)

__all__: list[str] = [
    # Enums
    "Curvature",
    "GeometryType",
    "Sector",
    "StepKind",
    # Shapes
    "Point",
    "Segment",
    "Vector",
    "Triangle",
    "Circle",
    "Shape",
    "Centroid",
    # Aggregates
    "DecompositionStep",
    "Polygon",
    "PolygonAnalysis",
]
