"""
Capabilities a drawing host expects from a figure and from a rendering surface.

Figures are composed from a bounds rectangle and an ``Attributes`` store
rather than derived from a common base class; anything providing the methods
below can be placed in a drawing.
"""

from typing import Any, List, Protocol, runtime_checkable

import numpy as np
from shapely.geometry import Polygon

from ..data.attributes import Attributes
from ..data.rectangle import Rectangle


@runtime_checkable
class Surface(Protocol):
    """Something figures can be rendered onto."""
    scale_factor: float

    def fill(self, outline: Polygon, color: str) -> None: ...

    def draw(self, outline: Polygon, color: str, width: float) -> None: ...


@runtime_checkable
class Figure(Protocol):
    attributes: Attributes

    def get_bounds(self) -> Rectangle: ...

    def get_start_point(self) -> np.ndarray: ...

    def get_end_point(self) -> np.ndarray: ...

    def get_center(self) -> np.ndarray: ...

    def set_bounds(self, anchor, lead) -> None: ...

    def get_drawing_area(self) -> Rectangle: ...

    def transform(self, tx) -> None: ...

    def contains(self, point, scale_denominator: float = 1.0) -> bool: ...

    def chop(self, point) -> np.ndarray: ...

    def draw_fill(self, surface: Surface) -> None: ...

    def draw_stroke(self, surface: Surface) -> None: ...

    def draw(self, surface: Surface) -> None: ...

    def create_handles(self, detail_level: int) -> List[Any]: ...

    def find_connector(self, point, prototype=None) -> Any: ...

    def find_compatible_connector(self, connector, is_start_connector: bool) -> Any: ...

    def clone(self) -> 'Figure': ...

    def get_transform_restore_data(self) -> Any: ...

    def restore_transform_to(self, geometry: Any) -> None: ...
