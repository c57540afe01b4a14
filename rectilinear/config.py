"""
Configuration schema for rectangle layouts.

This module defines the layout file structure: named rectangles given by
their bottom-left and top-right corners, plus the logging level used by the
command-line tooling.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple
import yaml

from rectilinear.geometry import Coordinate, Rectangle

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def _as_point(value):
    """YAML sequences become tuples; anything else is left for validation."""
    return tuple(value) if isinstance(value, list) else value


@dataclass(frozen=True)
class RectangleConfig:
    """Named rectangle given as two corner points."""

    rectangle_id: str
    bottom_left: Tuple[float, float]
    top_right: Tuple[float, float]

    def __post_init__(self):
        """Validate rectangle configuration shape (not geometry)."""
        if not self.rectangle_id:
            raise ValueError("rectangle_id cannot be empty")

        for name, point in (("bottom_left", self.bottom_left), ("top_right", self.top_right)):
            if not isinstance(point, tuple):
                raise ValueError(
                    f"Rectangle '{self.rectangle_id}' {name} must be a pair [x, y], "
                    f"got {point!r}"
                )
            if len(point) != 2:
                raise ValueError(
                    f"Rectangle '{self.rectangle_id}' {name} must have exactly 2 values, "
                    f"got {len(point)}"
                )
            for value in point:
                # bool is an int subclass but never a coordinate
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(
                        f"Rectangle '{self.rectangle_id}' {name} values must be numbers, "
                        f"got {value!r}"
                    )

    def to_rectangle(self) -> Rectangle:
        """
        Build the Rectangle value.

        Raises:
            InvalidRectangleError: If the corners do not form a rectangle
        """
        return Rectangle(Coordinate(*self.bottom_left), Coordinate(*self.top_right))


@dataclass(frozen=True)
class LayoutConfig:
    """
    Set of named rectangles.

    This configuration is loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    rectangles: List[RectangleConfig] = field(default_factory=list)
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate layout configuration."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

        seen = set()
        for rectangle in self.rectangles:
            if rectangle.rectangle_id in seen:
                raise ValueError(f"Duplicate rectangle_id: '{rectangle.rectangle_id}'")
            seen.add(rectangle.rectangle_id)

    @property
    def rectangle_ids(self) -> List[str]:
        return [rectangle.rectangle_id for rectangle in self.rectangles]

    def build_rectangles(self) -> Dict[str, Rectangle]:
        """
        Build every configured rectangle, keeping file order.

        Raises:
            InvalidRectangleError: On the first invalid pair of corners
        """
        return {
            rectangle.rectangle_id: rectangle.to_rectangle()
            for rectangle in self.rectangles
        }

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "LayoutConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: "INFO"

            rectangles:
              - rectangle_id: "room"
                bottom_left: [0, 0]
                top_right: [10, 10]
              - rectangle_id: "hall"
                bottom_left: [0, 10]
                top_right: [10, 12]

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If YAML is invalid or fields are missing
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Layout file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Layout file {path} must contain a mapping at top level")

        entries = data.get("rectangles") or []
        if not isinstance(entries, list):
            raise ValueError(f"'rectangles' in {path} must be a list, got {entries!r}")

        rectangles = []
        for r in entries:
            if not isinstance(r, dict):
                raise ValueError(f"Rectangle entry in {path} must be a mapping, got {r!r}")
            try:
                rectangles.append(RectangleConfig(
                    rectangle_id=str(r["rectangle_id"]),
                    bottom_left=_as_point(r["bottom_left"]),
                    top_right=_as_point(r["top_right"]),
                ))
            except KeyError as e:
                raise ValueError(f"Missing required rectangle field in {path}: {e}")

        return cls(
            rectangles=rectangles,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )
