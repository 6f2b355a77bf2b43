import numpy as np
import pyvista as pv
from shapely.geometry import Polygon

from ..data.rectangle import Rectangle


def to_plot_coords(coords) -> np.ndarray:
    """Figure coordinates (y down) to points in the z=0 plane of the plot (y up)."""
    pts = np.asarray(coords, dtype=np.float64)[:, :2]
    return np.column_stack([pts[:, 0], -pts[:, 1], np.zeros(len(pts))])


class PyVistaSurface:
    """Renders figure outlines into a PyVista plotter."""
    def __init__(self, plotter, scale_factor: float = 1.0):
        self.plotter = plotter
        self.scale_factor = scale_factor

    def fill(self, outline: Polygon, color: str):
        # Exterior ring repeats its first point at the end
        pts = to_plot_coords(list(outline.exterior.coords)[:-1])
        num_points = pts.shape[0]
        faces = np.hstack([[num_points], np.arange(num_points)])
        mesh = pv.PolyData(pts, faces=faces).triangulate()
        self.plotter.add_mesh(mesh, color=color, opacity=0.9, show_edges=False, style='surface')

    def draw(self, outline: Polygon, color: str, width: float):
        line = pv.lines_from_points(to_plot_coords(outline.exterior.coords))
        self.plotter.add_mesh(line, color=color, line_width=max(1.0, width * self.scale_factor))


def rectangle_outline(rect: Rectangle) -> Polygon:
    return Polygon(rect.corners)


def plot_shapes(shapes, plotter, plot_cfg):
    if plotter is None or plot_cfg is None:
        return

    standard_point_size = plot_cfg.get('point_size', 12)
    standard_font_size = plot_cfg.get('font_size', 14)

    color_bounds = "#785ef0"
    color_drawing_area = "#ffb000"
    color_handles = "#dc267f"

    surface = PyVistaSurface(plotter, scale_factor=plot_cfg.get('scale_factor', 1.0))

    if plot_cfg.get('Legend', True):
        legend_text = """
    Tip = direction of the ORIENTATION attribute
    Dots = handles of the finest detail level
    Frame = bounds / drawing area
            """
        plotter.add_text(legend_text, position="lower_right", font_size=standard_font_size, color="black")

    for shape in shapes:
        shape.draw(surface)

        if plot_cfg.get('Bounds', False):
            surface.draw(rectangle_outline(shape.get_bounds()), color_bounds, 1.0)

        if plot_cfg.get('Drawing Area', False):
            surface.draw(rectangle_outline(shape.get_drawing_area()), color_drawing_area, 1.0)

        if plot_cfg.get('Handles', False):
            handles = shape.create_handles(plot_cfg.get('handle_detail_level', 0))
            locations = [h.get_location() for h in handles]
            if locations:
                plotter.add_points(
                    to_plot_coords(locations),
                    color=color_handles,
                    point_size=standard_point_size,
                    render_points_as_spheres=True,
                )

        if plot_cfg.get('Labels', False):
            plotter.add_point_labels(
                to_plot_coords([shape.get_center()]),
                [shape.get_orientation().name],
                font_size=standard_font_size,
                always_visible=True,
                show_points=False
            )

    return plotter
