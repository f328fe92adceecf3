"""Result types produced by the analysis pipeline.

This module defines:
- StepKind / DecompositionStep: discrete decomposer events for step-by-step display
- PolygonAnalysis: everything each pipeline stage produced for one polygon
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from polyhive.domain.polygon import Polygon
from polyhive.domain.shapes import Centroid, Curvature, Point, Segment, Triangle


class StepKind(str, Enum):
    """Kind of decomposer event."""

    CONVEX_TURN = "convex_turn"
    CONCAVITY = "concavity"
    CHORD_REJECTED = "chord_rejected"
    CHORD_ACCEPTED = "chord_accepted"


@dataclass(frozen=True)
class DecompositionStep:
    """One decision taken by the convex decomposer.

    Attributes:
        kind: What happened
        edge: Edge whose end vertex is being examined
        candidate: Next edge for turn checks, chord for chord events
        depth: Nesting depth of the perimeter being reduced
    """

    kind: StepKind
    edge: Segment
    candidate: Segment
    depth: int = 0

    def describe(self) -> str:
        return f"{self.kind.value}: {self.edge.describe()} then {self.candidate.describe()}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "edge": self.edge.to_dict(),
            "candidate": self.candidate.to_dict(),
            "depth": self.depth,
        }


@dataclass
class PolygonAnalysis:
    """Output of every pipeline stage for a single polygon.

    Stages after the crossing screen are left empty when the boundary
    crosses itself.

    Attributes:
        polygon: Normalized input polygon
        perimeter: Boundary after colinear vertices were merged away
        removed_points: Vertices dropped because they sat on a straight run
        direction: Winding direction of the boundary
        crossings: Edges involved in a self-crossing or overlap
        pieces: Convex pieces, each a closed list of edges
        triangles: Fan triangles of every piece
        centroids: Centroid and area of each fan triangle
        centroid: Centroid and total area of the polygon
        steps: Decomposer events, when recording was requested
    """

    polygon: Polygon
    perimeter: list[Segment]
    removed_points: list[Point] = field(default_factory=list)
    direction: Curvature | None = None
    crossings: set[Segment] = field(default_factory=set)
    pieces: list[list[Segment]] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)
    centroids: list[Centroid] = field(default_factory=list)
    centroid: Centroid | None = None
    steps: list[DecompositionStep] = field(default_factory=list)

    @property
    def is_malformed(self) -> bool:
        """True if the boundary crosses or overlaps itself."""
        return len(self.crossings) > 0

    @property
    def area(self) -> float | None:
        return self.centroid.weight if self.centroid else None

    def ordered_crossings(self) -> list[Segment]:
        """Crossing edges in perimeter order."""
        order = {segment: i for i, segment in enumerate(self.perimeter)}
        return sorted(self.crossings, key=lambda s: order.get(s, len(order)))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary.

        Returns:
            Dictionary representation of the analysis
        """
        return {
            "polygon": self.polygon.to_dict(),
            "perimeter": [s.to_dict() for s in self.perimeter],
            "removed_points": [p.to_dict() for p in self.removed_points],
            "direction": self.direction.value if self.direction else None,
            "malformed": self.is_malformed,
            "crossings": [s.to_dict() for s in self.ordered_crossings()],
            "pieces": [[s.to_dict() for s in piece] for piece in self.pieces],
            "triangles": [t.to_dict() for t in self.triangles],
            "centroids": [c.to_dict() for c in self.centroids],
            "centroid": self.centroid.to_dict() if self.centroid else None,
            "steps": [step.to_dict() for step in self.steps],
        }
