"""
Typed attribute store of a figure.

Every attribute is identified by an ``AttributeKey`` member. The key fixes the
value type and the default, so a lookup never needs a cast at the call site.
"""

import copy
from enum import Enum
from typing import Any, Dict, Optional

from ..config import drawing_rules


class Orientation(Enum):
    """Compass direction the tip of a triangle points to."""
    NORTH = "NORTH"
    NORTH_EAST = "NORTH_EAST"
    EAST = "EAST"
    SOUTH_EAST = "SOUTH_EAST"
    SOUTH = "SOUTH"
    SOUTH_WEST = "SOUTH_WEST"
    WEST = "WEST"
    NORTH_WEST = "NORTH_WEST"

    def next(self, steps: int = 1) -> 'Orientation':
        """Returns the orientation reached by turning clockwise by 45° steps."""
        members = list(Orientation)
        return members[(members.index(self) + steps) % len(members)]


class StrokePlacement(Enum):
    INSIDE = "INSIDE"
    CENTER = "CENTER"
    OUTSIDE = "OUTSIDE"


class StrokeJoin(Enum):
    MITER = "MITER"
    ROUND = "ROUND"
    BEVEL = "BEVEL"


class StrokeType(Enum):
    BASIC = "BASIC"
    DOUBLE = "DOUBLE"


class FillUnderStroke(Enum):
    """How far the fill reaches below the stroke."""
    NONE = "NONE"
    CENTER = "CENTER"
    FULL = "FULL"


class AttributeKey(Enum):
    """Attribute identifiers as (config name, value type, default, nullable)."""
    ORIENTATION = ("orientation", Orientation, Orientation.NORTH, False)
    FILL_COLOR = ("fill_color", str, "#ffffff", True)
    STROKE_COLOR = ("stroke_color", str, "#000000", True)
    STROKE_WIDTH = ("stroke_width", float, drawing_rules.default_stroke_width, False)
    STROKE_PLACEMENT = ("stroke_placement", StrokePlacement, StrokePlacement.CENTER, False)
    STROKE_JOIN = ("stroke_join", StrokeJoin, StrokeJoin.MITER, False)
    STROKE_MITER_LIMIT = ("stroke_miter_limit", float, drawing_rules.default_miter_limit, False)
    STROKE_TYPE = ("stroke_type", StrokeType, StrokeType.BASIC, False)
    STROKE_INNER_WIDTH_FACTOR = ("stroke_inner_width_factor", float, drawing_rules.default_inner_width_factor, False)
    FILL_UNDER_STROKE = ("fill_under_stroke", FillUnderStroke, FillUnderStroke.CENTER, False)
    STROKE_PIXEL_WIDTH = ("stroke_pixel_width", bool, False, False)

    def __init__(self, config_name, value_type, default, nullable):
        self.config_name = config_name
        self.value_type = value_type
        self.default = default
        self.nullable = nullable

    @classmethod
    def from_config_name(cls, name: str) -> 'AttributeKey':
        for key in cls:
            if key.config_name == name:
                return key
        raise ValueError(f"Unknown attribute '{name}'")

    def accepts(self, value) -> bool:
        if value is None:
            return self.nullable
        if self.value_type is float:
            # Ints are fine for float attributes, bools are not
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, self.value_type)


class Attributes:
    """Attribute map shared by a figure and whoever edits it."""
    def __init__(self, values: Optional[Dict[AttributeKey, Any]] = None):
        self._values: Dict[AttributeKey, Any] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def __repr__(self):
        return f"<Attributes: {len(self._values)} set>"

    def __contains__(self, key: AttributeKey) -> bool:
        return key in self._values

    def copy(self):
        return copy.deepcopy(self)

    def get(self, key: AttributeKey) -> Any:
        """Returns the stored value of key, or the key's default if it was never set."""
        return self._values.get(key, key.default)

    def set(self, key: AttributeKey, value: Any):
        if not isinstance(key, AttributeKey):
            raise TypeError(f"Unknown attribute key {key!r}")
        if not key.accepts(value):
            raise TypeError(
                f"Attribute {key.name} expects {key.value_type.__name__}, got {type(value).__name__}"
            )
        if key.value_type is float and value is not None:
            value = float(value)
        self._values[key] = value

    def remove(self, key: AttributeKey):
        """Drops an explicitly set value so the default applies again."""
        self._values.pop(key, None)

    def items(self):
        return self._values.items()
