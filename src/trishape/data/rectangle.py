import copy
import numpy as np
from typing import Tuple


class Rectangle:
    """Axis-aligned bounding box given by its top left corner and its extent."""
    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    def __repr__(self):
        return f"<Rectangle x={self.x}, y={self.y}, w={self.width}, h={self.height}>"

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)

    def copy(self):
        return copy.deepcopy(self)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def center(self) -> np.ndarray:
        return np.array([self.x + self.width / 2.0, self.y + self.height / 2.0], dtype=np.float64)

    @property
    def corners(self) -> np.ndarray:
        """Corners in the order top left, top right, bottom right, bottom left."""
        return np.array([
            [self.x, self.y],
            [self.x + self.width, self.y],
            [self.x + self.width, self.y + self.height],
            [self.x, self.y + self.height],
        ], dtype=np.float64)

    def point_at(self, u: float, v: float) -> np.ndarray:
        """Maps fractional (u, v) coordinates of the box to absolute coordinates."""
        return np.array([self.x + u * self.width, self.y + v * self.height], dtype=np.float64)

    def grow(self, dx: float, dy: float):
        """Grows the rectangle by dx on the left and right and by dy on top and bottom."""
        self.x -= dx
        self.y -= dy
        self.width += 2 * dx
        self.height += 2 * dy
        return self

    def contains_point(self, point) -> bool:
        px, py = point[0], point[1]
        return (self.x <= px <= self.x + self.width) and (self.y <= py <= self.y + self.height)

    @staticmethod
    def from_points(anchor, lead, min_extent: float = 0.0):
        """
        Normalizes two arbitrary corner points into a rectangle.

        The smaller coordinates become the top left corner, the extents are
        the absolute differences, floored at min_extent.
        """
        rect = Rectangle()
        rect.x = float(min(anchor[0], lead[0]))
        rect.y = float(min(anchor[1], lead[1]))
        rect.width = float(max(min_extent, abs(lead[0] - anchor[0])))
        rect.height = float(max(min_extent, abs(lead[1] - anchor[1])))
        return rect
