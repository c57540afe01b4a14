"""
Relation Counter Module
=======================

Stateful accumulator for layout statistics.

Design:
- Mutable state (counters)
- Immutable snapshots (LayoutStats)
- Per-kind adjacency counting
- Reset capability
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict

from rectilinear.analytics.report import RelationReport
from rectilinear.geometry import AdjacencyType


@dataclass(frozen=True)
class LayoutStats:
    """
    Immutable statistics snapshot for a set of compared rectangle pairs.

    Design:
    - Frozen dataclass (thread-safe read)
    - Value object (no identity)
    - Can be serialized to JSON
    """

    pairs_compared: int = 0
    intersecting_pairs: int = 0
    nested_pairs: int = 0
    adjacency_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def adjacent_pairs(self) -> int:
        return sum(
            count for kind, count in self.adjacency_counts.items()
            if kind != AdjacencyType.NON_ADJACENT.value
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "pairs_compared": self.pairs_compared,
            "intersecting_pairs": self.intersecting_pairs,
            "nested_pairs": self.nested_pairs,
            "adjacent_pairs": self.adjacent_pairs,
            "adjacency_counts": dict(self.adjacency_counts),
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        return (
            f"pairs={self.pairs_compared}, intersecting={self.intersecting_pairs}, "
            f"nested={self.nested_pairs}, adjacent={self.adjacent_pairs}"
        )


class RelationCounter:
    """
    Stateful counter fed with RelationReport values.

    Design:
    - Mutable accumulators (private state)
    - Public immutable snapshots (get_stats())
    - Caller must synchronize if shared between threads

    Usage:
        counter = RelationCounter()
        counter.update(RelationReport.compare("a", a, "b", b))
        stats = counter.get_stats()  # Immutable
    """

    def __init__(self):
        self._pairs_compared = 0
        self._intersecting_pairs = 0
        self._nested_pairs = 0
        self._adjacency_counts: Dict[str, int] = defaultdict(int)

    def update(self, report: RelationReport) -> None:
        """
        Accumulate one compared pair.

        Args:
            report: Relationship snapshot of the pair
        """
        self._pairs_compared += 1

        if report.intersecting:
            self._intersecting_pairs += 1

        if report.nested:
            self._nested_pairs += 1

        self._adjacency_counts[report.adjacency.value] += 1

    def get_stats(self) -> LayoutStats:
        """
        Get immutable statistics snapshot.

        Returns:
            Frozen LayoutStats with current state
        """
        return LayoutStats(
            pairs_compared=self._pairs_compared,
            intersecting_pairs=self._intersecting_pairs,
            nested_pairs=self._nested_pairs,
            adjacency_counts=dict(self._adjacency_counts)  # Copy dict
        )

    def reset(self) -> None:
        """Reset all counters to zero."""
        self._pairs_compared = 0
        self._intersecting_pairs = 0
        self._nested_pairs = 0
        self._adjacency_counts.clear()
