import numpy as np

from ..config import drawing_rules
from ..data.rectangle import Rectangle


class Handle:
    """Interactive control owned by a figure. Idle until a tool drags it."""
    def __init__(self, owner):
        self.owner = owner

    def __repr__(self):
        return f"<{type(self).__name__} at {self.get_location().tolist()}>"

    def get_location(self) -> np.ndarray:
        return self.owner.get_bounds().center

    def get_bounds(self) -> Rectangle:
        half = drawing_rules.handle_size / 2.0
        loc = self.get_location()
        return Rectangle(loc[0] - half, loc[1] - half, drawing_rules.handle_size, drawing_rules.handle_size)

    def contains(self, point) -> bool:
        return self.get_bounds().contains_point(point)

    def track_start(self, anchor):
        pass

    def track_step(self, anchor, lead):
        pass

    def track_end(self, anchor, lead):
        return None


class BoundsOutlineHandle(Handle):
    """Marks the bounds of a selected figure at the coarse detail level. Cannot be dragged."""
    def contains(self, point) -> bool:
        return False
