from .rectangle import Rectangle
from .attributes import (
    Attributes,
    AttributeKey,
    Orientation,
    StrokePlacement,
    StrokeJoin,
    StrokeType,
    FillUnderStroke,
)

# Define what is available when the package is imported
__all__ = [
    'Rectangle',
    'Attributes',
    'AttributeKey',
    'Orientation',
    'StrokePlacement',
    'StrokeJoin',
    'StrokeType',
    'FillUnderStroke',
]
