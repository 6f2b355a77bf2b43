# Minimum width/height of a figure when its bounds are set interactively
min_extent = 0.1

# Padding added around the stroke extent of the drawing area
drawing_area_padding = 1.0

# Default Stroke Attributes
default_stroke_width = 1.0
default_miter_limit = 3.0
default_inner_width_factor = 2.0

# Handles
handle_size = 7  # side length of a handle square in view units
