from .chop_connector import ChopConnector

__all__ = [
    "ChopConnector",
]
