"""
Relation Report Module
======================

Immutable snapshot of every relationship between two rectangles.

Design:
- Frozen dataclass (thread-safe read)
- Value object (no identity)
- Can be serialized to JSON
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from rectilinear.geometry import AdjacencyType, Coordinate, Rectangle


@dataclass(frozen=True)
class RelationReport:
    """
    Result of comparing two named rectangles.

    Attributes:
        first_id: Identifier of the first rectangle
        second_id: Identifier of the second rectangle
        intersections: Boundary crossings, as returned by first.intersects(second)
        first_contains_second: first.contains(second)
        second_contains_first: second.contains(first)
        adjacency: first.adjacent(second)
    """

    first_id: str
    second_id: str
    intersections: Tuple[Coordinate, ...] = ()
    first_contains_second: bool = False
    second_contains_first: bool = False
    adjacency: AdjacencyType = AdjacencyType.NON_ADJACENT

    @classmethod
    def compare(
        cls,
        first_id: str,
        first: Rectangle,
        second_id: str,
        second: Rectangle
    ) -> "RelationReport":
        """Run every relationship query from first towards second."""
        return cls(
            first_id=first_id,
            second_id=second_id,
            intersections=tuple(first.intersects(second)),
            first_contains_second=first.contains(second),
            second_contains_first=second.contains(first),
            adjacency=first.adjacent(second),
        )

    @property
    def intersecting(self) -> bool:
        return len(self.intersections) > 0

    @property
    def nested(self) -> bool:
        return self.first_contains_second or self.second_contains_first

    @property
    def is_related(self) -> bool:
        """True if any query found a relationship."""
        return (
            self.intersecting
            or self.nested
            or self.adjacency is not AdjacencyType.NON_ADJACENT
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "first_id": self.first_id,
            "second_id": self.second_id,
            "intersections": [point.to_dict() for point in self.intersections],
            "first_contains_second": self.first_contains_second,
            "second_contains_first": self.second_contains_first,
            "adjacency": self.adjacency.value,
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        parts = []
        if self.intersecting:
            points = ", ".join(str(point) for point in self.intersections)
            parts.append(f"crosses at {points}")
        if self.first_contains_second:
            parts.append(f"contains {self.second_id}")
        if self.second_contains_first:
            parts.append(f"inside {self.second_id}")
        if self.adjacency is not AdjacencyType.NON_ADJACENT:
            parts.append(f"adjacent ({self.adjacency.value})")

        summary = "; ".join(parts) if parts else "unrelated"
        return f"{self.first_id} -> {self.second_id}: {summary}"
