"""
Geometric Primitives Module
===========================

Points and axis-aligned line segments - NO state, NO side effects.

Design:
- Immutable values (frozen dataclass pattern)
- Segments are NOT normalized (endpoints in any order)
- Explicit Optional result for "no intersection" (never a sentinel point)
- Thread-safe by design (immutability)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Axis(str, Enum):
    """Axis selector for per-coordinate comparisons."""

    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Coordinate:
    """
    Immutable (x, y) point on the cartesian plane.

    Value object: two coordinates are the same point iff x and y match.

    Example:
        >>> Coordinate(x=3, y=1)
        Coordinate(x=3, y=1)
    """

    x: float
    y: float

    def on(self, axis: Axis) -> float:
        """Return the component along the given axis."""
        return self.x if axis is Axis.X else self.y

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinate":
        """
        Deserialize from dict.

        Raises:
            ValueError: If required keys are missing
        """
        try:
            return cls(x=data["x"], y=data["y"])
        except KeyError as e:
            raise ValueError(f"Missing required Coordinate field: {e}") from e

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class LineSegment:
    """
    Ordered pair of coordinates representing a straight segment.

    Segments built by this package are strictly vertical (equal x) or
    strictly horizontal (equal y).

    Attributes:
        p1: First endpoint
        p2: Second endpoint
    """

    p1: Coordinate
    p2: Coordinate

    @property
    def is_vertical(self) -> bool:
        return self.p1.x == self.p2.x

    @property
    def is_horizontal(self) -> bool:
        return self.p1.y == self.p2.y

    def bounds(self, axis: Axis) -> Tuple[float, float]:
        """Return (min, max) of the endpoints along the axis."""
        a, b = self.p1.on(axis), self.p2.on(axis)
        return (a, b) if a <= b else (b, a)


def line_intersects(l1: LineSegment, l2: LineSegment) -> Optional[Coordinate]:
    """
    Return the crossing point of two perpendicular segments.

    Exactly one of the segments must be vertical and the other horizontal;
    this is not a general segment intersection routine.

    Touching at an endpoint does not count: the vertical x must lie strictly
    inside the horizontal segment's x range, and the horizontal y strictly
    inside the vertical segment's y range.

    Args:
        l1: straight line segment
        l2: straight line segment, perpendicular to l1

    Returns:
        Coordinate of the crossing, or None when the segments do not cross

    Example:
        >>> line_intersects(
        ...     LineSegment(Coordinate(0, 1), Coordinate(5, 1)),
        ...     LineSegment(Coordinate(3, 5), Coordinate(3, -5)),
        ... )
        Coordinate(x=3, y=1)
    """
    vertical = l1 if l1.is_vertical else l2
    horizontal = l1 if l1.is_horizontal else l2

    min_x, max_x = horizontal.bounds(Axis.X)
    min_y, max_y = vertical.bounds(Axis.Y)

    x = vertical.p1.x
    y = horizontal.p1.y

    if min_x < x < max_x and min_y < y < max_y:
        return Coordinate(x=x, y=y)
    return None
