import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml

from ..data.attributes import Attributes, AttributeKey

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


def load_config(path=None) -> dict:
    """Reads a YAML config file; the packaged config.yaml is used when no path is given."""
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    with open(path) as f:
        cfg = yaml.load(f, Loader=yaml.FullLoader)
    logger.debug("Loaded config from %s", path)
    return cfg or {}


def resolve_attribute(key: AttributeKey, raw):
    """Turns a raw YAML value into the value type of key."""
    if raw is None:
        return None
    if issubclass(key.value_type, Enum):
        try:
            return key.value_type[str(raw).upper()]
        except KeyError:
            names = ", ".join(member.name for member in key.value_type)
            raise ValueError(f"Invalid value '{raw}' for {key.config_name}, expected one of: {names}") from None
    return raw


def default_attributes(cfg: Optional[dict] = None) -> Attributes:
    """Builds an attribute store from the 'attributes' section of a config."""
    if cfg is None:
        cfg = load_config()
    attrs = Attributes()
    for name, raw in (cfg.get('attributes') or {}).items():
        key = AttributeKey.from_config_name(name)
        attrs.set(key, resolve_attribute(key, raw))
    return attrs
