"""
rectilinear
===========

Bounded Context: Relationships between axis-aligned rectangles.

Design Philosophy:
- Separation of Concerns: Geometry, Analytics, Configuration separated
- Geometry is pure: immutable values, no logging, no I/O
- Fail-fast: an invalid Rectangle can never exist

Architecture:

    rectilinear/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── primitives.py  # Coordinate, LineSegment, line_intersects
    │   ├── shapes.py      # Rectangle, AdjacencyType, line_overlap
    │   ├── errors.py      # InvalidRectangleError
    │   └── detector.py    # RelationDetector (batch masks)
    │
    ├── analytics/         # Pair reports & counting
    │   ├── report.py      # RelationReport
    │   ├── counter.py     # RelationCounter, LayoutStats
    │   └── survey.py      # survey_layout
    │
    ├── logging/           # Structured JSON logging
    └── config.py          # LayoutConfig (YAML)

Usage:

    # 1. Create geometry (immutable, validated)
    from rectilinear import Coordinate, Rectangle

    a = Rectangle(Coordinate(0, 0), Coordinate(10, 10))
    b = Rectangle(Coordinate(5, 5), Coordinate(15, 15))

    # 2. Query (pure)
    a.intersects(b)   # [Coordinate(x=5, y=10), Coordinate(x=10, y=5)]
    a.contains(b)     # False
    a.adjacent(b)     # AdjacencyType.NON_ADJACENT

    # 3. Batch (numpy masks)
    from rectilinear import RelationDetector

    mask = RelationDetector.detect_contained(a, [b])

    # 4. Whole layout
    from rectilinear import LayoutConfig, survey_layout

    layout = LayoutConfig.from_yaml("layout.yaml")
    reports, stats = survey_layout(layout.build_rectangles())
"""

# Geometry Layer (immutable, stateless)
from rectilinear.geometry import (
    AdjacencyType,
    Axis,
    Coordinate,
    InvalidRectangleError,
    LineSegment,
    Rectangle,
    RelationDetector,
    line_intersects,
    line_overlap,
)

# Analytics Layer
from rectilinear.analytics import LayoutStats, RelationCounter, RelationReport, survey_layout

# Configuration
from rectilinear.config import LayoutConfig, RectangleConfig

__all__ = [
    # Geometry
    "AdjacencyType",
    "Axis",
    "Coordinate",
    "InvalidRectangleError",
    "LineSegment",
    "Rectangle",
    "RelationDetector",
    "line_intersects",
    "line_overlap",
    # Analytics
    "LayoutStats",
    "RelationCounter",
    "RelationReport",
    "survey_layout",
    # Configuration
    "LayoutConfig",
    "RectangleConfig",
]

__version__ = "1.0.0"
