import pytest

from trishape import Attributes, AttributeKey, Orientation, TriangleShape


class RecordingSurface:
    """Surface that remembers what was rendered onto it."""
    def __init__(self, scale_factor=1.0):
        self.scale_factor = scale_factor
        self.fills = []
        self.strokes = []

    def fill(self, outline, color):
        self.fills.append((outline, color))

    def draw(self, outline, color, width):
        self.strokes.append((outline, color, width))


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def triangle():
    return TriangleShape(0, 0, 10, 20, Orientation.NORTH)


@pytest.fixture
def unstroked_triangle():
    attrs = Attributes({AttributeKey.STROKE_COLOR: None})
    return TriangleShape(0, 0, 10, 20, Orientation.NORTH, attributes=attrs)
