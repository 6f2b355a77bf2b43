from .plot_shapes import PyVistaSurface, plot_shapes, to_plot_coords

__all__ = [
    'PyVistaSurface',
    'plot_shapes',
    'to_plot_coords',
]
