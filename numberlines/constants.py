# Pixel geometry of a single numberline; these match the page the numberlines were first drawn on.
MARGIN_LEFT = 40
MARGIN_RIGHT = 40
MARGIN_TOP = 20
MARGIN_BOTTOM = 20
LINE_HEIGHT = 100

TICK_LENGTH = 6
LABEL_GAP = 3

# Zooming: factor = exp(wheel_delta * SENSITIVITY). A positive delta (wheel rolled towards the user) zooms out.
SENSITIVITY = 0.0005

# The wheel-delta of a single notch of a mouse wheel, in the DOM's "pixel" units.
WHEEL_STEP = 100

# The detail line shows its range padded by this fraction of the span on both sides.
PADDING_FACTOR = 0.03

INITIAL_OVERVIEW_DOMAIN = (-100, 100)
INITIAL_SELECTION = (-10, 10)

# Apply the brush while dragging (True), or only when the drag ends (False).
BRUSH_CONTINUOUS = True

# Fractional ticks
DENOMINATORS = (2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 15, 16, 20, 24, 25, 30, 32, 40, 50, 60, 64, 75, 80, 100)
MIN_TICKS = 5
MAX_TICKS = 15
RELAXED_FACTOR = 1.5


font_size = 10


def get_font_size():
    return font_size
