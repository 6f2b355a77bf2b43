# Demo figures drawn by `python -m trishape`, one per orientation
SHAPE_INPUTS = [
    {'x': 0, 'y': 0, 'width': 40, 'height': 60, 'orientation': 'NORTH'},
    {'x': 60, 'y': 0, 'width': 40, 'height': 60, 'orientation': 'NORTH_EAST'},
    {'x': 120, 'y': 0, 'width': 40, 'height': 60, 'orientation': 'EAST'},
    {'x': 180, 'y': 0, 'width': 40, 'height': 60, 'orientation': 'SOUTH_EAST'},
    {'x': 0, 'y': 80, 'width': 40, 'height': 60, 'orientation': 'SOUTH'},
    {'x': 60, 'y': 80, 'width': 40, 'height': 60, 'orientation': 'SOUTH_WEST'},
    {'x': 120, 'y': 80, 'width': 40, 'height': 60, 'orientation': 'WEST'},
    {
        'x': 180, 'y': 80, 'width': 40, 'height': 60, 'orientation': 'NORTH_WEST',
        'attributes': {'stroke_placement': 'OUTSIDE', 'stroke_width': 4.0}  # Optional: overrides of the defaults
    },
]
