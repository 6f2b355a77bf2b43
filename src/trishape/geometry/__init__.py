from .affine import AffineTransform
from .outline import closed_outline, grow_outline, chop, clip_outline
from .growth import (
    stroke_total_width,
    perpendicular_fill_growth,
    perpendicular_draw_growth,
    perpendicular_hit_growth,
    grow_miter_limit,
    stroke_extent,
    drawing_area_margin,
    buffer_join_style,
)

__all__ = [
    "AffineTransform",
    "closed_outline",
    "grow_outline",
    "chop",
    "clip_outline",
    "stroke_total_width",
    "perpendicular_fill_growth",
    "perpendicular_draw_growth",
    "perpendicular_hit_growth",
    "grow_miter_limit",
    "stroke_extent",
    "drawing_area_margin",
    "buffer_join_style",
]
