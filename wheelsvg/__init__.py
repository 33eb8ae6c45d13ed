"""SVG rendering for the wheel calendar."""

from .config import (
    ConfigurationError, ConfigurationWarning,
    SelectorConfig, MiddleButtonConfig,
    check_selector, check_middle_button, resolve_starting_angle,
)
from .events import (
    CalendarEvent, EventStyle, resolve_event_style, is_event_visible, visible_events,
)
from .render import (
    render_outline, render_markers, render_selector, render_event,
    render_wheel_svg, WheelView, marker_text_anchor, marker_baseline,
)
