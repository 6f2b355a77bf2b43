# src/trishape/__init__.py
"""
trishape: Directional Triangle Figure
=====================================

A triangle figure for 2D vector drawing editors. The tip of the triangle
points in one of eight compass directions.

Overview
--------
The figure stores nothing but its bounding rectangle and an ORIENTATION
attribute. The three vertices are derived from both on every query, so the
geometry stays consistent after resizing, moving or restoring the bounds.

Features
--------
- Geometry: outline path, bounds, drawing area, affine transform
- Rendering: fill and stroke hooks, outline grown to honour stroke placement
- Hit-testing: containment with stroke tolerance, chop point for connectors
- Editing: resize handles and an orientation handle, undo snapshots

Usage Example
-------------
>>> from trishape import TriangleShape, Orientation
>>> triangle = TriangleShape(0, 0, 10, 20, Orientation.EAST)
>>> triangle.outline_points().tolist()
[[0.0, 0.0], [10.0, 10.0], [0.0, 20.0]]
>>> triangle.contains((3, 10))
True

Configuration
-------------
Defaults in trishape/config/config.yaml:
- attributes: default attribute values of new figures (colors, stroke settings)
- plot: visualization settings (bounds, handles, labels)

Drawing rules in trishape/config/drawing_rules.py:
- Minimum figure extent, drawing area padding, handle size, stroke defaults
"""

# Version information
__version__ = "0.1.0"

from .data import (
    Attributes,
    AttributeKey,
    Orientation,
    Rectangle,
    StrokePlacement,
    StrokeJoin,
    StrokeType,
    FillUnderStroke,
)
from .geometry import AffineTransform
from .figures import TriangleShape, Figure, Surface
from .connectors import ChopConnector
from .handles import OrientationHandle, ResizeHandle

# Define what is available when the package is imported
__all__ = [
    "__version__",
    "Attributes",
    "AttributeKey",
    "Orientation",
    "Rectangle",
    "StrokePlacement",
    "StrokeJoin",
    "StrokeType",
    "FillUnderStroke",
    "AffineTransform",
    "TriangleShape",
    "Figure",
    "Surface",
    "ChopConnector",
    "OrientationHandle",
    "ResizeHandle",
]
