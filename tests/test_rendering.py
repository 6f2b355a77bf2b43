import pytest

from trishape import AttributeKey, FillUnderStroke, StrokeJoin, StrokePlacement, StrokeType, TriangleShape
from trishape.geometry import (
    buffer_join_style,
    drawing_area_margin,
    grow_miter_limit,
    grow_outline,
    perpendicular_draw_growth,
    perpendicular_fill_growth,
    perpendicular_hit_growth,
    stroke_total_width,
)
from trishape.geometry.outline import closed_outline


def test_fill_uses_raw_triangle_without_growth(triangle, surface):
    triangle.draw_fill(surface)
    (outline, color), = surface.fills
    assert color == triangle.attributes.get(AttributeKey.FILL_COLOR)
    assert outline.equals(triangle.get_outline())


def test_fill_grows_under_full_stroke(triangle, surface):
    triangle.attributes.set(AttributeKey.STROKE_WIDTH, 2.0)
    triangle.attributes.set(AttributeKey.FILL_UNDER_STROKE, FillUnderStroke.FULL)
    triangle.draw_fill(surface)
    (outline, _), = surface.fills
    assert outline.area > triangle.get_outline().area
    assert outline.bounds[3] == pytest.approx(21.0)


def test_stroke_inside_shrinks_outline(triangle, surface):
    triangle.attributes.set(AttributeKey.STROKE_WIDTH, 2.0)
    triangle.attributes.set(AttributeKey.STROKE_PLACEMENT, StrokePlacement.INSIDE)
    triangle.draw_stroke(surface)
    (outline, color, width), = surface.strokes
    assert color == "#000000"
    assert width == pytest.approx(2.0)
    assert outline.bounds[3] == pytest.approx(19.0)


def test_draw_skips_missing_colors(triangle, surface):
    triangle.attributes.set(AttributeKey.FILL_COLOR, None)
    triangle.draw(surface)
    assert surface.fills == []
    assert len(surface.strokes) == 1

    triangle.attributes.set(AttributeKey.STROKE_COLOR, None)
    triangle.draw(surface)
    assert len(surface.strokes) == 1


def test_pixel_stroke_width_follows_scale_factor(triangle, surface):
    triangle.attributes.set(AttributeKey.STROKE_PIXEL_WIDTH, True)
    triangle.attributes.set(AttributeKey.STROKE_WIDTH, 4.0)
    surface.scale_factor = 2.0
    triangle.draw_stroke(surface)
    (_, _, width), = surface.strokes
    assert width == pytest.approx(2.0)


def test_fill_eaten_by_inside_stroke_is_not_rendered(surface):
    thin = TriangleShape(0, 0, 1, 1)
    thin.attributes.set(AttributeKey.STROKE_WIDTH, 10.0)
    thin.attributes.set(AttributeKey.STROKE_PLACEMENT, StrokePlacement.INSIDE)
    thin.draw_fill(surface)
    assert surface.fills == []


def test_double_stroke_total_width(triangle):
    triangle.attributes.set(AttributeKey.STROKE_TYPE, StrokeType.DOUBLE)
    triangle.attributes.set(AttributeKey.STROKE_WIDTH, 2.0)
    assert stroke_total_width(triangle.attributes) == pytest.approx(6.0)


@pytest.mark.parametrize("under, placement, expected", [
    (FillUnderStroke.FULL, StrokePlacement.INSIDE, 0.0),
    (FillUnderStroke.FULL, StrokePlacement.CENTER, 1.0),
    (FillUnderStroke.FULL, StrokePlacement.OUTSIDE, 2.0),
    (FillUnderStroke.NONE, StrokePlacement.INSIDE, -2.0),
    (FillUnderStroke.NONE, StrokePlacement.CENTER, -1.0),
    (FillUnderStroke.NONE, StrokePlacement.OUTSIDE, 0.0),
    (FillUnderStroke.CENTER, StrokePlacement.INSIDE, -1.0),
    (FillUnderStroke.CENTER, StrokePlacement.CENTER, 0.0),
    (FillUnderStroke.CENTER, StrokePlacement.OUTSIDE, 1.0),
])
def test_fill_growth(triangle, under, placement, expected):
    triangle.attributes.set(AttributeKey.STROKE_WIDTH, 2.0)
    triangle.attributes.set(AttributeKey.FILL_UNDER_STROKE, under)
    triangle.attributes.set(AttributeKey.STROKE_PLACEMENT, placement)
    assert perpendicular_fill_growth(triangle.attributes) == pytest.approx(expected)


@pytest.mark.parametrize("placement, draw, hit", [
    (StrokePlacement.INSIDE, -1.0, 0.0),
    (StrokePlacement.CENTER, 0.0, 1.0),
    (StrokePlacement.OUTSIDE, 1.0, 2.0),
])
def test_draw_and_hit_growth(triangle, placement, draw, hit):
    triangle.attributes.set(AttributeKey.STROKE_WIDTH, 2.0)
    triangle.attributes.set(AttributeKey.STROKE_PLACEMENT, placement)
    assert perpendicular_draw_growth(triangle.attributes) == pytest.approx(draw)
    assert perpendicular_hit_growth(triangle.attributes) == pytest.approx(hit)


def test_grow_outline_zero_offset_is_identity():
    square = closed_outline([(0, 0), (4, 0), (4, 4), (0, 4)])
    assert grow_outline(square, 0.0) is square


def test_grow_outline_keeps_mitred_square_corners():
    square = closed_outline([(0, 0), (4, 0), (4, 4), (0, 4)])
    grown = grow_outline(square, 1.0, miter_limit=10.0)
    assert grown.bounds == pytest.approx((-1, -1, 5, 5))
    assert grown.area == pytest.approx(36.0)


@pytest.mark.parametrize("join, area", [("round", 16 + 16 + 3.14159), ("bevel", 34.0)])
def test_grow_outline_follows_join_style(join, area):
    square = closed_outline([(0, 0), (4, 0), (4, 4), (0, 4)])
    grown = grow_outline(square, 1.0, miter_limit=10.0, join=join)
    assert grown.area == pytest.approx(area, rel=1e-2)


@pytest.mark.parametrize("join, style", [
    (StrokeJoin.MITER, "mitre"),
    (StrokeJoin.ROUND, "round"),
    (StrokeJoin.BEVEL, "bevel"),
])
def test_stroke_join_selects_buffer_style(triangle, join, style):
    triangle.attributes.set(AttributeKey.STROKE_JOIN, join)
    assert buffer_join_style(triangle.attributes) == style


def test_miter_limit_is_capped_by_drawing_area_margin(triangle):
    # 1 * 3 from the stroke, but the drawing area only reaches 0.5 * 3 + 1 out
    assert drawing_area_margin(triangle.attributes) == pytest.approx(2.5)
    assert grow_miter_limit(triangle.attributes) == pytest.approx(2.5)

    triangle.attributes.set(AttributeKey.STROKE_JOIN, StrokeJoin.ROUND)
    assert drawing_area_margin(triangle.attributes) == pytest.approx(1.5)
    assert grow_miter_limit(triangle.attributes) == pytest.approx(1.5)
