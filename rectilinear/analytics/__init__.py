"""
Analytics Layer
===============

Bounded Context: Aggregated relationship statistics over rectangle layouts.

Responsibilities:
- Snapshot all relations of a pair (RelationReport)
- Accumulate counts over many pairs (mutable state)
- Generate immutable statistics snapshots (LayoutStats)

Design Philosophy:
- Mutable accumulators (RelationCounter)
- Immutable outputs (RelationReport, LayoutStats)
- Clear state management
"""

from rectilinear.analytics.report import RelationReport
from rectilinear.analytics.counter import LayoutStats, RelationCounter
from rectilinear.analytics.survey import survey_layout

__all__ = [
    "RelationReport",
    "LayoutStats",
    "RelationCounter",
    "survey_layout",
]
