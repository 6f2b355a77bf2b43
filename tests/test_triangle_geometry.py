import numpy as np
import pytest

from trishape import Orientation, Rectangle, TriangleShape
from trishape.figures import DIRECTION_POINTS, Figure, Surface, triangle_points

EXPECTED_VERTICES = {
    Orientation.NORTH: [(5, 0), (10, 20), (0, 20)],
    Orientation.NORTH_EAST: [(0, 0), (10, 0), (10, 20)],
    Orientation.EAST: [(0, 0), (10, 10), (0, 20)],
    Orientation.SOUTH_EAST: [(10, 0), (10, 20), (0, 20)],
    Orientation.SOUTH: [(5, 20), (0, 0), (10, 0)],
    Orientation.SOUTH_WEST: [(10, 20), (0, 20), (0, 0)],
    Orientation.WEST: [(0, 10), (10, 0), (10, 20)],
    Orientation.NORTH_WEST: [(0, 20), (0, 0), (10, 0)],
}


@pytest.mark.parametrize("orientation", list(Orientation))
def test_vertices_follow_orientation_table(orientation):
    shape = TriangleShape(0, 0, 10, 20, orientation)
    np.testing.assert_allclose(shape.outline_points(), EXPECTED_VERTICES[orientation])


def test_table_covers_every_orientation():
    assert set(DIRECTION_POINTS) == set(Orientation)


def test_unknown_orientation_points_north():
    rect = Rectangle(0, 0, 10, 20)
    np.testing.assert_allclose(triangle_points(rect, "UPWARDS"), EXPECTED_VERTICES[Orientation.NORTH])
    np.testing.assert_allclose(triangle_points(rect, None), EXPECTED_VERTICES[Orientation.NORTH])


def test_vertices_are_offset_by_rectangle_origin():
    shape = TriangleShape(100, 50, 10, 20, Orientation.WEST)
    np.testing.assert_allclose(shape.outline_points(), [(100, 60), (110, 50), (110, 70)])


def test_outline_is_closed_triangle(triangle):
    outline = triangle.get_outline()
    coords = list(outline.exterior.coords)
    assert len(coords) == 4
    assert coords[0] == coords[-1]
    assert outline.area == pytest.approx(100.0)


def test_geometry_follows_orientation_change(triangle):
    triangle.set_orientation(Orientation.SOUTH)
    np.testing.assert_allclose(triangle.outline_points()[0], (5, 20))


def test_default_triangle_is_empty_and_points_north():
    shape = TriangleShape()
    assert shape.get_orientation() == Orientation.NORTH
    assert shape.get_bounds().as_tuple() == (0.0, 0.0, 0.0, 0.0)


def test_orientation_only_constructor():
    shape = TriangleShape(orientation=Orientation.EAST)
    assert shape.get_orientation() == Orientation.EAST


def test_start_end_and_center_points(triangle):
    np.testing.assert_allclose(triangle.get_start_point(), (0, 0))
    np.testing.assert_allclose(triangle.get_end_point(), (10, 20))
    np.testing.assert_allclose(triangle.get_center(), (5, 10))


def test_triangle_satisfies_figure_protocol(triangle, surface):
    assert isinstance(triangle, Figure)
    assert isinstance(surface, Surface)
