import copy
import logging
import numpy as np
from types import MappingProxyType
from typing import List, Optional

from shapely.geometry import Point, Polygon

from ..config import drawing_rules
from ..connectors import ChopConnector
from ..data.attributes import Attributes, AttributeKey, Orientation
from ..data.rectangle import Rectangle
from ..geometry import outline as outline_ops
from ..geometry.affine import AffineTransform
from ..geometry.growth import (
    buffer_join_style,
    drawing_area_margin,
    grow_miter_limit,
    perpendicular_draw_growth,
    perpendicular_fill_growth,
    perpendicular_hit_growth,
    stroke_total_width,
)
from ..handles import OrientationHandle, create_resize_handles

logger = logging.getLogger(__name__)

# Fractional (u, v) coordinates of the three vertices inside the bounds; the first one is the tip
DIRECTION_POINTS = MappingProxyType({
    Orientation.NORTH: ((0.5, 0.0), (1.0, 1.0), (0.0, 1.0)),
    Orientation.NORTH_EAST: ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0)),
    Orientation.EAST: ((0.0, 0.0), (1.0, 0.5), (0.0, 1.0)),
    Orientation.SOUTH_EAST: ((1.0, 0.0), (1.0, 1.0), (0.0, 1.0)),
    Orientation.SOUTH: ((0.5, 1.0), (0.0, 0.0), (1.0, 0.0)),
    Orientation.SOUTH_WEST: ((1.0, 1.0), (0.0, 1.0), (0.0, 0.0)),
    Orientation.WEST: ((0.0, 0.5), (1.0, 0.0), (1.0, 1.0)),
    Orientation.NORTH_WEST: ((0.0, 1.0), (0.0, 0.0), (1.0, 0.0)),
})


def triangle_points(rect: Rectangle, orientation) -> np.ndarray:
    """Vertices of the triangle inscribed in rect; unknown orientations point north."""
    uv = DIRECTION_POINTS.get(orientation, DIRECTION_POINTS[Orientation.NORTH])
    return np.array([rect.point_at(u, v) for u, v in uv], dtype=np.float64)


class TriangleShape:
    """
    Triangle whose tip points in the direction of its ORIENTATION attribute.

    Only the bounds and the orientation are stored; the vertices are derived
    from them on every query.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0,
                 orientation: Orientation = Orientation.NORTH, attributes: Optional[Attributes] = None):
        self.rectangle = Rectangle(x, y, width, height)
        self.attributes: Attributes = attributes if attributes is not None else Attributes()
        self.attributes.set(AttributeKey.ORIENTATION, orientation)

    def __repr__(self):
        r = self.rectangle
        return f"<TriangleShape {self.get_orientation().name} ({r.x}, {r.y}, {r.width}, {r.height})>"

    # ---------- Attributes ----------
    def get_orientation(self) -> Orientation:
        return self.attributes.get(AttributeKey.ORIENTATION)

    def set_orientation(self, orientation: Orientation):
        self.attributes.set(AttributeKey.ORIENTATION, orientation)

    # ---------- Geometry ----------
    def outline_points(self) -> np.ndarray:
        return triangle_points(self.rectangle, self.get_orientation())

    def get_outline(self) -> Polygon:
        """Closed triangle path; the edge from the last vertex back to the tip is implicit."""
        return outline_ops.closed_outline(self.outline_points())

    def _grown_outline(self, grow: float, factor: float) -> Polygon:
        """Outline moved by grow, never reaching past the drawing area."""
        triangle = self.get_outline()
        if grow != 0:
            triangle = outline_ops.grow_outline(
                triangle, grow, grow_miter_limit(self.attributes, factor), buffer_join_style(self.attributes)
            )
            if grow > 0:
                triangle = outline_ops.clip_outline(triangle, self.get_drawing_area())
        return triangle

    def get_bounds(self) -> Rectangle:
        return self.rectangle.copy()

    def get_start_point(self) -> np.ndarray:
        return np.array([self.rectangle.x, self.rectangle.y], dtype=np.float64)

    def get_end_point(self) -> np.ndarray:
        return np.array([self.rectangle.x + self.rectangle.width,
                         self.rectangle.y + self.rectangle.height], dtype=np.float64)

    def get_center(self) -> np.ndarray:
        return self.rectangle.center

    def set_bounds(self, anchor, lead):
        self.rectangle = Rectangle.from_points(anchor, lead, min_extent=drawing_rules.min_extent)
        logger.debug("Bounds of %r set", self)

    def transform(self, tx: AffineTransform):
        """Maps the two defining corners of the bounds and rebuilds the bounds from them."""
        anchor, lead = tx.transform_points([self.get_start_point(), self.get_end_point()])
        self.set_bounds(anchor, lead)

    def get_drawing_area(self) -> Rectangle:
        """Bounds plus the part of the stroke lying outside of them, plus one unit of padding."""
        width = drawing_area_margin(self.attributes, 1.0)
        return self.get_bounds().grow(width, width)

    # ---------- Hit-testing and connection ----------
    def contains(self, point, scale_denominator: float = 1.0) -> bool:
        grow = perpendicular_hit_growth(self.attributes, scale_denominator)
        triangle = self._grown_outline(grow, scale_denominator)
        if triangle.is_empty:
            return False
        return triangle.contains(Point(point[0], point[1]))

    def chop(self, point) -> np.ndarray:
        """Point where a line from the inside towards point leaves the (hit-grown) triangle."""
        grow = perpendicular_hit_growth(self.attributes, 1.0)
        return outline_ops.chop(self._grown_outline(grow, 1.0), point)

    def find_connector(self, point, prototype=None) -> ChopConnector:
        return ChopConnector(self)

    def find_compatible_connector(self, connector, is_start_connector: bool) -> ChopConnector:
        return ChopConnector(self)

    # ---------- Rendering ----------
    def draw_fill(self, surface):
        factor = surface.scale_factor
        grow = perpendicular_fill_growth(self.attributes, factor)
        triangle = self._grown_outline(grow, factor)
        if not triangle.is_empty:
            surface.fill(triangle, self.attributes.get(AttributeKey.FILL_COLOR))

    def draw_stroke(self, surface):
        factor = surface.scale_factor
        grow = perpendicular_draw_growth(self.attributes, factor)
        triangle = self._grown_outline(grow, factor)
        if not triangle.is_empty:
            surface.draw(triangle, self.attributes.get(AttributeKey.STROKE_COLOR),
                         stroke_total_width(self.attributes, factor))

    def draw(self, surface):
        if self.attributes.get(AttributeKey.FILL_COLOR) is not None:
            self.draw_fill(surface)
        if self.attributes.get(AttributeKey.STROKE_COLOR) is not None:
            self.draw_stroke(surface)

    # ---------- Editing ----------
    def create_handles(self, detail_level: int) -> List:
        handles = create_resize_handles(self, detail_level)
        if detail_level == 0:
            handles.append(OrientationHandle(self))
        return handles

    def clone(self) -> 'TriangleShape':
        return copy.deepcopy(self)

    def get_transform_restore_data(self) -> Rectangle:
        return self.rectangle.copy()

    def restore_transform_to(self, geometry: Rectangle):
        self.rectangle.x = geometry.x
        self.rectangle.y = geometry.y
        self.rectangle.width = geometry.width
        self.rectangle.height = geometry.height
