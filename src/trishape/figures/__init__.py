from .figure import Figure, Surface
from .triangle import TriangleShape, triangle_points, DIRECTION_POINTS

__all__ = [
    'Figure',
    'Surface',
    'TriangleShape',
    'triangle_points',
    'DIRECTION_POINTS',
]
