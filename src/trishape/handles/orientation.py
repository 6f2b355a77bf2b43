import logging
import math
import numpy as np
from typing import Tuple

from .handle import Handle
from ..data.attributes import Orientation

logger = logging.getLogger(__name__)

# Compass sectors of 45° starting at east, turning clockwise (y axis points down)
SECTOR_ORIENTATIONS = (
    Orientation.EAST,
    Orientation.SOUTH_EAST,
    Orientation.SOUTH,
    Orientation.SOUTH_WEST,
    Orientation.WEST,
    Orientation.NORTH_WEST,
    Orientation.NORTH,
    Orientation.NORTH_EAST,
)


def orientation_towards(center, point) -> Orientation:
    """Orientation whose compass sector around center contains point."""
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    if dx == 0 and dy == 0:
        return Orientation.NORTH
    angle = math.degrees(math.atan2(dy, dx))
    sector = int(round(angle / 45.0)) % 8
    return SECTOR_ORIENTATIONS[sector]


class OrientationHandle(Handle):
    """Sits on the tip of a triangle; dragging it around the centre turns the tip."""
    def __init__(self, owner):
        super().__init__(owner)
        self._old_orientation = None

    def get_location(self) -> np.ndarray:
        return self.owner.outline_points()[0]

    def track_start(self, anchor):
        self._old_orientation = self.owner.get_orientation()

    def track_step(self, anchor, lead):
        new_orientation = orientation_towards(self.owner.get_bounds().center, lead)
        if new_orientation != self.owner.get_orientation():
            self.owner.set_orientation(new_orientation)

    def track_end(self, anchor, lead) -> Tuple[Orientation, Orientation]:
        """Returns (old, new) orientation so the caller can record an undoable edit."""
        self.track_step(anchor, lead)
        old = self._old_orientation if self._old_orientation is not None else self.owner.get_orientation()
        new = self.owner.get_orientation()
        self._old_orientation = None
        if old != new:
            logger.debug("Orientation of %r changed from %s to %s", self.owner, old.name, new.name)
        return old, new

    def cycle(self, steps: int = 1) -> Tuple[Orientation, Orientation]:
        """Turns the tip clockwise by 45° per step."""
        old = self.owner.get_orientation()
        new = old.next(steps)
        self.owner.set_orientation(new)
        logger.debug("Orientation of %r cycled from %s to %s", self.owner, old.name, new.name)
        return old, new
