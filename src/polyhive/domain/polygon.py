"""Caller-owned polygon state.

A Polygon is the ordered list of vertices a caller has collected. The
engine never keeps a polygon between calls; every operation receives one
explicitly and returns new values.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from polyhive.domain.shapes import Point, Segment


@dataclass
class Polygon:
    """An ordered ring of vertices.

    The ring closes implicitly: the last vertex connects back to the first.

    Attributes:
        points: Vertices in traversal order
        name: Optional label for reporting
    """

    points: list[Point] = field(default_factory=list)
    name: str | None = None

    @classmethod
    def from_tuples(cls, coordinates: Iterable[tuple[float, float]], name: str | None = None) -> "Polygon":
        """Build a polygon from (x, y) pairs.

        Args:
            coordinates: Vertex coordinates in traversal order
            name: Optional label

        Returns:
            Polygon instance
        """
        return cls(points=[Point(float(x), float(y)) for x, y in coordinates], name=name)

    def __len__(self) -> int:
        return len(self.points)

    def normalized(self) -> "Polygon":
        """Drop vertices that repeat their predecessor.

        A closing vertex equal to the first one is dropped as well, since
        the ring closes on its own.

        Returns:
            New polygon without consecutive duplicates
        """
        points: list[Point] = []
        for point in self.points:
            if not points or points[-1] != point:
                points.append(point)
        while len(points) > 1 and points[-1] == points[0]:
            points.pop()
        return Polygon(points=points, name=self.name)

    def perimeter(self) -> list[Segment]:
        """Closed cyclic list of edges.

        Returns:
            One segment per vertex, the last one returning to the first vertex
        """
        n = len(self.points)
        if n < 2:
            return []
        return [Segment(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Bounding box as (x_min, y_min, x_max, y_max)."""
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with name and points
        """
        return {
            "name": self.name,
            "points": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(
            points=[Point.from_dict(p) for p in data["points"]],
            name=data.get("name"),
        )
