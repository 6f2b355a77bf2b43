import logging
from typing import List

from .handle import BoundsOutlineHandle, Handle

logger = logging.getLogger(__name__)

# Fractional (u, v) positions on the bounds: corners and edge midpoints, clockwise from top left
RESIZE_POSITIONS = (
    (0.0, 0.0), (0.5, 0.0), (1.0, 0.0), (1.0, 0.5),
    (1.0, 1.0), (0.5, 1.0), (0.0, 1.0), (0.0, 0.5),
)


class ResizeHandle(Handle):
    """
    Handle on a corner or edge midpoint of the figure's bounds.

    Dragging it moves the matching bounds edges to the drag point and hands
    the result to the figure's set_bounds.
    """
    def __init__(self, owner, u: float, v: float):
        super().__init__(owner)
        self.u = u
        self.v = v
        self._restore_data = None

    def get_location(self):
        return self.owner.get_bounds().point_at(self.u, self.v)

    def track_start(self, anchor):
        self._restore_data = self.owner.get_transform_restore_data()

    def track_step(self, anchor, lead):
        r = self.owner.get_bounds()
        left, top = r.x, r.y
        right, bottom = r.x + r.width, r.y + r.height

        if self.u == 0.0:
            left = lead[0]
        elif self.u == 1.0:
            right = lead[0]
        if self.v == 0.0:
            top = lead[1]
        elif self.v == 1.0:
            bottom = lead[1]

        self.owner.set_bounds((left, top), (right, bottom))

    def track_end(self, anchor, lead):
        """Returns (old, new) geometry snapshots so the caller can record an undoable edit."""
        self.track_step(anchor, lead)
        old = self._restore_data
        self._restore_data = None
        new = self.owner.get_transform_restore_data()
        logger.debug("Resized %r from %r to %r", self.owner, old, new)
        return old, new


def create_resize_handles(owner, detail_level: int = 0) -> List[Handle]:
    """Box handles for a figure: an outline at level -1, eight resize handles at level 0."""
    if detail_level == -1:
        return [BoundsOutlineHandle(owner)]
    if detail_level == 0:
        return [ResizeHandle(owner, u, v) for u, v in RESIZE_POSITIONS]
    return []
