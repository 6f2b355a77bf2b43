"""
Stroke width and perpendicular growth of a figure's outline.

The growth values say how far the outline must be moved outwards (positive)
or inwards (negative) to get the area that is filled, stroked or hit-tested,
given the figure's stroke attributes.
"""

from ..config import drawing_rules
from ..data.attributes import (
    Attributes,
    AttributeKey,
    FillUnderStroke,
    StrokeJoin,
    StrokePlacement,
    StrokeType,
)


def stroke_total_width(attrs: Attributes, factor: float = 1.0) -> float:
    """
    Width of the whole stroke, including the gap of a double stroke.

    If the stroke width is given in pixels, it is divided by the scale factor
    so it stays constant on screen.
    """
    width = attrs.get(AttributeKey.STROKE_WIDTH)
    if attrs.get(AttributeKey.STROKE_TYPE) == StrokeType.DOUBLE:
        width *= 1.0 + attrs.get(AttributeKey.STROKE_INNER_WIDTH_FACTOR)
    if attrs.get(AttributeKey.STROKE_PIXEL_WIDTH) and factor:
        width /= factor
    return width


def perpendicular_draw_growth(attrs: Attributes, factor: float = 1.0) -> float:
    stroke_width = stroke_total_width(attrs, factor)
    placement = attrs.get(AttributeKey.STROKE_PLACEMENT)
    if placement == StrokePlacement.INSIDE:
        return stroke_width / -2.0
    if placement == StrokePlacement.OUTSIDE:
        return stroke_width / 2.0
    return 0.0


def perpendicular_fill_growth(attrs: Attributes, factor: float = 1.0) -> float:
    stroke_width = stroke_total_width(attrs, factor)
    placement = attrs.get(AttributeKey.STROKE_PLACEMENT)
    fill_under_stroke = attrs.get(AttributeKey.FILL_UNDER_STROKE)

    if fill_under_stroke == FillUnderStroke.FULL:
        grow = {
            StrokePlacement.INSIDE: 0.0,
            StrokePlacement.OUTSIDE: stroke_width,
            StrokePlacement.CENTER: stroke_width / 2.0,
        }
    elif fill_under_stroke == FillUnderStroke.NONE:
        grow = {
            StrokePlacement.INSIDE: -stroke_width,
            StrokePlacement.OUTSIDE: 0.0,
            StrokePlacement.CENTER: stroke_width / -2.0,
        }
    else:
        grow = {
            StrokePlacement.INSIDE: stroke_width / -2.0,
            StrokePlacement.OUTSIDE: stroke_width / 2.0,
            StrokePlacement.CENTER: 0.0,
        }
    return grow[placement]


def perpendicular_hit_growth(attrs: Attributes, factor: float = 1.0) -> float:
    """Growth of the clickable area; reaches the outer edge of the stroke if there is one."""
    if attrs.get(AttributeKey.STROKE_COLOR) is None:
        return perpendicular_fill_growth(attrs, factor)
    return perpendicular_draw_growth(attrs, factor) + stroke_total_width(attrs, factor) / 2.0


def stroke_extent(attrs: Attributes, factor: float = 1.0) -> float:
    """How far the rendered stroke may reach beyond the bounds, mitred corners included."""
    if attrs.get(AttributeKey.STROKE_COLOR) is None:
        return 0.0
    stroke_width = stroke_total_width(attrs, factor)
    placement = attrs.get(AttributeKey.STROKE_PLACEMENT)
    if placement == StrokePlacement.OUTSIDE:
        extent = stroke_width
    elif placement == StrokePlacement.CENTER:
        extent = stroke_width / 2.0
    else:
        extent = 0.0
    if attrs.get(AttributeKey.STROKE_JOIN) == StrokeJoin.MITER:
        extent *= attrs.get(AttributeKey.STROKE_MITER_LIMIT)
    return extent


def drawing_area_margin(attrs: Attributes, factor: float = 1.0) -> float:
    return stroke_extent(attrs, factor) + drawing_rules.drawing_area_padding


def grow_miter_limit(attrs: Attributes, factor: float = 1.0) -> float:
    """
    Absolute miter limit handed to the outline-grow operation.

    Mitred corners never reach past the drawing area margin.
    """
    limit = stroke_total_width(attrs, factor) * attrs.get(AttributeKey.STROKE_MITER_LIMIT)
    return min(limit, drawing_area_margin(attrs, factor))


# Shapely buffer join style per stroke join
BUFFER_JOIN_STYLES = {
    StrokeJoin.MITER: "mitre",
    StrokeJoin.ROUND: "round",
    StrokeJoin.BEVEL: "bevel",
}


def buffer_join_style(attrs: Attributes) -> str:
    return BUFFER_JOIN_STYLES[attrs.get(AttributeKey.STROKE_JOIN)]
