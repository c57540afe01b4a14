"""
Rectangle Shape Module
======================

Axis-aligned rectangle and its pairwise relationship queries.

Design:
- Immutable shape (frozen dataclass pattern)
- Fail-fast validation at construction (InvalidRectangleError)
- Corners derived once at init, never recomputed
- Queries are pure functions of two rectangles (no side effects)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from rectilinear.geometry.errors import InvalidRectangleError
from rectilinear.geometry.primitives import Axis, Coordinate, LineSegment, line_intersects


class AdjacencyType(str, Enum):
    """How two rectangles share a boundary segment."""

    PROPER = "Proper"
    """Shared sides are identical in span."""

    SUB_LINE = "SubLine"
    """One shared side is strictly nested inside the other."""

    PARTIAL = "Partial"
    """Shared sides overlap but neither contains the other."""

    NON_ADJACENT = "NonAdjacent"
    """No side is shared (collinear sides may still touch at one point)."""


def line_overlap(l1: LineSegment, l2: LineSegment, axis: Axis) -> AdjacencyType:
    """
    Classify the overlap of two collinear segments along one axis.

    Checks are evaluated in precedence order:
    PROPER -> SUB_LINE -> NON_ADJACENT -> PARTIAL

    Args:
        l1: side of one rectangle
        l2: side of another rectangle, collinear with l1
        axis: axis the segments run along

    Returns:
        AdjacencyType of the pair
    """
    start1, end1 = l1.bounds(axis)
    start2, end2 = l2.bounds(axis)

    if end1 - start1 == end2 - start2 and start1 == start2:
        return AdjacencyType.PROPER

    if (start1 > start2 and end1 < end2) or (start2 > start1 and end2 < end1):
        return AdjacencyType.SUB_LINE

    # Sharing a single endpoint is not a shared side
    if end1 <= start2 or end2 <= start1:
        return AdjacencyType.NON_ADJACENT

    return AdjacencyType.PARTIAL


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable axis-aligned rectangle.

    Defined by its bottom-left and top-right corners; the other two corners
    are derived at construction.

    Attributes:
        bottom_left: Lower-left corner
        top_right: Upper-right corner
        top_left: Derived, (bottom_left.x, top_right.y)
        bottom_right: Derived, (top_right.x, bottom_left.y)

    Invariants:
        - bottom_left.x < top_right.x
        - bottom_left.y < top_right.y

    Example:
        >>> r = Rectangle(Coordinate(0, 0), Coordinate(5, 5))
        >>> r.bottom_right
        Coordinate(x=5, y=0)
    """

    bottom_left: Coordinate
    top_right: Coordinate
    top_left: Coordinate = field(init=False, repr=False, compare=False)
    bottom_right: Coordinate = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate corners and derive the remaining two."""
        if not self.is_valid(self.bottom_left, self.top_right):
            raise InvalidRectangleError(self.bottom_left, self.top_right)

        # Using object.__setattr__ for frozen dataclass
        object.__setattr__(
            self, "top_left", Coordinate(x=self.bottom_left.x, y=self.top_right.y)
        )
        object.__setattr__(
            self, "bottom_right", Coordinate(x=self.top_right.x, y=self.bottom_left.y)
        )

    @staticmethod
    def is_valid(bottom_left: Coordinate, top_right: Coordinate) -> bool:
        """Return whether the pair of corners can form a rectangle."""
        return bottom_left.x < top_right.x and bottom_left.y < top_right.y

    @classmethod
    def from_points(
        cls,
        bottom_left: Tuple[float, float],
        top_right: Tuple[float, float]
    ) -> "Rectangle":
        """Build a rectangle from two (x, y) tuples."""
        return cls(Coordinate(*bottom_left), Coordinate(*top_right))

    # ========== Derived geometry ==========

    @property
    def left(self) -> float:
        return self.bottom_left.x

    @property
    def right(self) -> float:
        return self.top_right.x

    @property
    def bottom(self) -> float:
        return self.bottom_left.y

    @property
    def top(self) -> float:
        return self.top_right.y

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> Tuple[Coordinate, Coordinate, Coordinate, Coordinate]:
        """Corners in clockwise order, starting at top_left."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    @property
    def left_edge(self) -> LineSegment:
        return LineSegment(self.bottom_left, self.top_left)

    @property
    def right_edge(self) -> LineSegment:
        return LineSegment(self.bottom_right, self.top_right)

    @property
    def top_edge(self) -> LineSegment:
        return LineSegment(self.top_left, self.top_right)

    @property
    def bottom_edge(self) -> LineSegment:
        return LineSegment(self.bottom_left, self.bottom_right)

    # ========== Relationship queries ==========

    def intersects(self, other: "Rectangle") -> List[Coordinate]:
        """
        Points where the boundaries of the two rectangles cross.

        Each of other's vertical edges is tested against this rectangle's
        horizontal edges and vice versa. Corner contact and shared sides are
        not crossings. Duplicates are kept.

        Args:
            other: rectangle to check for intersection points

        Returns:
            Crossing coordinates in evaluation order (empty if none)
        """
        pairs = (
            (other.right_edge, self.top_edge),
            (other.right_edge, self.bottom_edge),
            (other.left_edge, self.top_edge),
            (other.left_edge, self.bottom_edge),
            (other.bottom_edge, self.right_edge),
            (other.bottom_edge, self.left_edge),
            (other.top_edge, self.right_edge),
            (other.top_edge, self.left_edge),
        )

        intersections = []
        for theirs, ours in pairs:
            point = line_intersects(theirs, ours)
            if point is not None:
                intersections.append(point)
        return intersections

    def contains_point(self, point: Coordinate) -> bool:
        """Check if point lies strictly inside the open interior."""
        return self.left < point.x < self.right and self.bottom < point.y < self.top

    def contains(self, other: "Rectangle") -> bool:
        """
        Check if other lies strictly inside this rectangle.

        Corners on this rectangle's boundary do NOT count as contained.
        """
        return all(self.contains_point(corner) for corner in other.corners())

    def adjacent(self, other: "Rectangle") -> AdjacencyType:
        """
        Classify how this rectangle shares a side with other.

        Adjacency only occurs between reciprocal sides (right-left,
        top-bottom). The first matching side pairing decides.

        Returns:
            AdjacencyType (NON_ADJACENT when no side pairing matches)
        """
        side_pair = self._shared_side(other)
        if side_pair is None:
            return AdjacencyType.NON_ADJACENT

        ours, theirs, axis = side_pair
        return line_overlap(ours, theirs, axis)

    def _shared_side(
        self,
        other: "Rectangle"
    ) -> Optional[Tuple[LineSegment, LineSegment, Axis]]:
        """Pick the reciprocal side pairing lying on a common line."""
        # Right side against other's left side
        if self.bottom_right.x == other.top_left.x:
            return self.right_edge, other.left_edge, Axis.Y

        # Top side against other's bottom side
        if self.top_right.y == other.bottom_left.y:
            return self.top_edge, other.bottom_edge, Axis.X

        # Left side against other's right side
        if self.top_left.x == other.bottom_right.x:
            return self.left_edge, other.right_edge, Axis.Y

        # Bottom side against other's top side
        if self.bottom_left.y == other.top_left.y:
            return self.bottom_edge, other.top_edge, Axis.X

        return None

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Serialize to JSON-compatible dict (defining corners only)."""
        return {
            "bottom_left": self.bottom_left.to_dict(),
            "top_right": self.top_right.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rectangle":
        """
        Deserialize from dict.

        Raises:
            ValueError: If required keys are missing
            InvalidRectangleError: If corners do not form a rectangle
        """
        try:
            bottom_left = Coordinate.from_dict(data["bottom_left"])
            top_right = Coordinate.from_dict(data["top_right"])
        except KeyError as e:
            raise ValueError(f"Missing required Rectangle field: {e}") from e
        return cls(bottom_left, top_right)
