"""Polyhive - Convex decomposition and centroids for simple polygons.

Polyhive reads a polygon as an ordered ring of vertices, screens the boundary
for self-crossings, hives off concavities until only convex pieces remain,
and fan-triangulates those pieces to compute the polygon's centroid and area.

Example:
    $ polyhive L-shape.json

This will create L-shape-analysis.json holding the convex pieces, the
weighted triangle centroids and the polygon's centroid.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
