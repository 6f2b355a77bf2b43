import numpy as np


class ChopConnector:
    """
    Lets a connection line attach to a figure. The line ends where it
    crosses the figure's outline instead of at the figure's centre.
    """
    def __init__(self, owner):
        self.owner = owner

    def __repr__(self):
        return f"<ChopConnector on {self.owner!r}>"

    def get_owner(self):
        return self.owner

    def get_anchor(self) -> np.ndarray:
        """Point a connection aims at before chopping."""
        return self.owner.get_bounds().center

    def get_bounds(self):
        return self.owner.get_bounds()

    def contains(self, point) -> bool:
        return self.owner.contains(point)

    def chop(self, reference) -> np.ndarray:
        return self.owner.chop(reference)

    def find_start(self, end_reference) -> np.ndarray:
        """Start point of a connection whose other end lies at end_reference."""
        return self.chop(end_reference)

    def find_end(self, start_reference) -> np.ndarray:
        """End point of a connection whose other end lies at start_reference."""
        return self.chop(start_reference)
