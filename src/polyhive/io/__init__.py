"""Polygon I/O layer for polyhive.

This module handles reading polygon files and writing analysis results.
It keeps file formats out of the domain models.

Key classes:
- PolygonReader: Load and validate a JSON vertex list
- AnalysisWriter: Save a PolygonAnalysis as JSON
"""

from polyhive.io.reader import PolygonFile, PolygonReader
from polyhive.io.writer import AnalysisWriter

__all__ = [
    "AnalysisWriter",
    "PolygonFile",
    "PolygonReader",
]
