"""Global constants for the application."""

# Canvas defaults
DEFAULT_WIDTH = 640  # Canvas width in pixels
DEFAULT_HEIGHT = 480  # Canvas height in pixels
MAX_CANVAS_SIZE = 4096  # Largest width or height the web app renders
DEFAULT_PADDING = 40  # Space between the canvas edge and the plot box, per side

# Gridlines
DEFAULT_GRIDLINES_X = 5  # Number of vertical gridline intervals
DEFAULT_GRIDLINES_Y = 10  # Number of horizontal gridline intervals
DEFAULT_TICK_LENGTH = 8  # How far ticks extend past the plot box
GRIDLINE_COLOR = "#e5e5e5"
GRIDLINE_WIDTH = 1
GRIDLINE_DASH = "--"  # Dash pattern for horizontal gridlines
X_LABEL_OFFSET = 10  # Vertical distance from tick end to x label
Y_LABEL_OFFSET = 15  # Horizontal distance from tick end to y label
LABEL_DECIMALS = 2

# Colors
CANVAS_COLOR = "#fff"  # Fill behind the whole canvas
DEFAULT_BACKGROUND_COLOR = "#fafafa"  # Fill of the plot box
DEFAULT_COLORS = (
    "#ee7951",  # Red
    "#88bbc8",  # Blue
    "#82d07a",  # Green
    "#ba80c8",  # Purple
)

# Curves and markers
CURVE_STROKE_WIDTH = 2
MARKER_OUTER_RADIUS = 5
MARKER_INNER_RADIUS = 2
MARKER_STROKE_WIDTH = 2

# Tolerance (in pixels) for the inclusive plot box test
PLOT_BOUNDS_TOLERANCE = 1e-9

# Environment variable prefix for settings overrides
ENV_PREFIX = "GRAPHR_"
