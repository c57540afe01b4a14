"""Errors raised by the geometry layer."""

from rectilinear.geometry.primitives import Coordinate


class InvalidRectangleError(ValueError):
    """
    Raised when a Rectangle is built from a pair of coordinates that do not
    describe a valid (non-degenerate, non-inverted) rectangle.

    Attributes:
        bottom_left: Offending bottom-left corner
        top_right: Offending top-right corner
    """

    def __init__(self, bottom_left: Coordinate, top_right: Coordinate):
        self.bottom_left = bottom_left
        self.top_right = top_right
        super().__init__(
            "Error attempting to instantiate Rectangle. "
            f"the provided pair of coordinates {bottom_left}, {top_right} "
            "do not represent a valid rectangle"
        )
