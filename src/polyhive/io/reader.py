"""Polygon reader for loading vertex lists from JSON.

Three layouts are accepted:
- a bare list of [x, y] pairs
- a list of {"x": ..., "y": ...} objects
- an object with a "points" key holding either of the above, and an
  optional "name"
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from polyhive.domain import Polygon
from polyhive.exceptions import PolygonLoadError


class PolygonFile(BaseModel):
    """Validated contents of a polygon file."""

    name: str | None = Field(default=None, description="Optional polygon label")
    points: list[tuple[float, float]] = Field(description="Vertices in traversal order")

    @field_validator("points", mode="before")
    @classmethod
    def _accept_point_objects(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [
                (item["x"], item["y"]) if isinstance(item, dict) and "x" in item and "y" in item else item
                for item in value
            ]
        return value

    def to_polygon(self) -> Polygon:
        return Polygon.from_tuples(self.points, name=self.name)


class PolygonReader:
    """Loads a polygon from a JSON file.

    Example:
        reader = PolygonReader(Path("shape.json"))
        polygon = reader.load()
        print(len(polygon))
    """

    def __init__(self, polygon_path: Path) -> None:
        """Initialize the polygon reader.

        Args:
            polygon_path: Path to the JSON polygon file
        """
        self._polygon_path = polygon_path

    @property
    def path(self) -> Path:
        return self._polygon_path

    def load(self) -> Polygon:
        """Load and validate the polygon file.

        The polygon is named after the file stem unless the file names it.

        Returns:
            Polygon with the file's vertices

        Raises:
            PolygonLoadError: If the file is missing, is not JSON, or does
                not describe a list of points
        """
        path = self._polygon_path
        if not path.exists():
            raise PolygonLoadError(str(path), "file not found")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise PolygonLoadError(str(path), str(e)) from e
        except json.JSONDecodeError as e:
            raise PolygonLoadError(str(path), f"invalid JSON: {e.msg} (line {e.lineno})") from e

        if isinstance(data, list):
            data = {"points": data}

        try:
            contents = PolygonFile.model_validate(data)
        except ValidationError as e:
            raise PolygonLoadError(str(path), f"{e.error_count()} validation error(s)") from e

        polygon = contents.to_polygon()
        if polygon.name is None:
            polygon.name = path.stem
        return polygon
