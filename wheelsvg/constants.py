"""Rendering defaults for the wheel SVG.

Lengths in SVG user units (pixels) unless noted.
"""

# Outline
BG_COLOR = "black"                # sector fill / outer circle fill
INNER_CIRCLE_BG = "black"         # inner circle fill, "line" method only
STROKE = "white"                  # outline and marker stroke
STROKE_WIDTH = 1                  # outline stroke width
OUTLINE_METHOD = "sector"         # "sector" | "line"
OUTLINE_STARTING_POINT = "left"   # first sector boundary
MARKER_STYLE = "outside"          # "outside" | "inline" | "none"

# Markers
MARKER_TICK_LENGTH = 10           # tick extends this far beyond the outer radius
MARKER_TEXT_GAP = 15              # outside label distance beyond the outer radius
MARKER_INLINE_INSET = 10          # inline label distance inside the outer radius

# Selector ring
SELECTOR_STARTING_POINT = "top"
SELECTOR_RADIAL_PADDING = 5
SELECTOR_PAD_ANGLE = 0.04         # radians
SELECTOR_CORNER_RADIUS = 6
LABEL_CHARACTER_LENGTH = 3        # selector labels are truncated to this many chars
MIDDLE_BUTTON_RADIUS_RATIO = 0.36 # of the inner circle radius

# Events
EVENT_CORNER_RADIUS = 6
EVENT_PAD_ANGLE = 0.005           # radians
EVENT_RADIAL_PADDING = 3

STARTING_POINTS = {"left": 0, "top": 90, "right": 180, "bottom": 270}
MARKER_STYLES = ("outside", "inline", "none")
OUTLINE_METHODS = ("sector", "line")
MIDDLE_BUTTON_TYPES = ("selector", "button")

# Class hooks and the stylesheet that gives them a default look
SELECTOR_PATH_CLASS = "selector-path"
SELECTOR_TEXT_CLASS = "selector-text"
ACTIVE_CLASS = "active"
EVENT_PATH_CLASS = "event-path"
EVENT_TEXT_CLASS = "event-text"
DEFAULT_STYLE = (
    ".selector-path{fill:transparent;stroke:rgba(255,255,255,0.1);cursor:pointer}"
    ".selector-path.active{fill:rgba(255,255,255,0.1);stroke:rgba(255,255,255,0.5)}"
    ".selector-text{fill:rgba(255,255,255,0.6);font-family:Arial;font-size:10px}"
    ".selector-text.active{fill:white}"
    ".event-path{fill:rgba(70,130,180,0.6);stroke:white;stroke-width:0.5;cursor:pointer}"
    ".event-text{fill:white;font-family:Arial;font-size:9px}"
    "text{user-select:none}"
)
