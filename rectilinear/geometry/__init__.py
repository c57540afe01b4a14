"""
Geometry Layer
==============

Bounded Context: Pure rectangle geometry and relationship queries.

Responsibilities:
- Coordinate and segment representation (immutable)
- Rectangle construction and validation
- Intersection, containment and adjacency queries
- NO state, NO counting, NO logging

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from rectilinear.geometry.primitives import Axis, Coordinate, LineSegment, line_intersects
from rectilinear.geometry.errors import InvalidRectangleError
from rectilinear.geometry.shapes import AdjacencyType, Rectangle, line_overlap
from rectilinear.geometry.detector import RelationDetector

__all__ = [
    "Axis",
    "Coordinate",
    "LineSegment",
    "line_intersects",
    "InvalidRectangleError",
    "AdjacencyType",
    "Rectangle",
    "line_overlap",
    "RelationDetector",
]
