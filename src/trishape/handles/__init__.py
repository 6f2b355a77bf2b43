from .handle import Handle, BoundsOutlineHandle
from .resize import ResizeHandle, create_resize_handles
from .orientation import OrientationHandle, orientation_towards

__all__ = [
    'Handle',
    'BoundsOutlineHandle',
    'ResizeHandle',
    'create_resize_handles',
    'OrientationHandle',
    'orientation_towards',
]
