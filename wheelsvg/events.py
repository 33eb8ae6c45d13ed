"""Calendar events drawn as arcs on the wheel."""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, NamedTuple, Optional

from wheelgeom import time_string_to_degrees
from .constants import EVENT_CORNER_RADIUS, EVENT_PAD_ANGLE, EVENT_RADIAL_PADDING

@dataclass(frozen=True)
class CalendarEvent:
    """One arc on the wheel. Angles in degrees; `active_wheels` holds the
    selector keys the event is shown under. Optional styling falls back to
    the renderer's event defaults when left as None.
    """
    start_angle: float
    end_angle: float
    title: str
    active_wheels: frozenset = frozenset()
    corner_radius: Optional[float] = None
    pad_angle: Optional[float] = None
    radial_padding: Optional[float] = None
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: Optional[float] = None
    aria_label: Optional[str] = None
    on_click: Optional[Callable[..., Any]] = None

    def __post_init__(self):
        if not isinstance(self.active_wheels, frozenset):
            object.__setattr__(self, "active_wheels", frozenset(self.active_wheels))

    @classmethod
    def from_times(cls, start: str, end: str, title: str,
                   active_wheels: Iterable[str] = (), spring_point: float = 6, **kwargs):
        """Event from "HH:MM" strings, angles normalised to [0, 360)."""
        return cls(
            time_string_to_degrees(start, spring_point) % 360,
            time_string_to_degrees(end, spring_point) % 360,
            title, frozenset(active_wheels), **kwargs,
        )

    @property
    def key(self) -> str:
        return f"{self.title}-{self.start_angle}-{self.end_angle}"

def is_event_visible(event: CalendarEvent, active_key) -> bool:
    return active_key in event.active_wheels

def visible_events(events: Iterable[CalendarEvent], active_key) -> list[CalendarEvent]:
    """Events shown under *active_key*, in input order."""
    return [e for e in events if is_event_visible(e, active_key)]

class EventStyle(NamedTuple):
    """Defaults applied to events that leave a field as None."""
    corner_radius: float = EVENT_CORNER_RADIUS
    pad_angle: float = EVENT_PAD_ANGLE
    radial_padding: float = EVENT_RADIAL_PADDING
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: Optional[float] = None
    aria_label: Optional[str] = None

def resolve_event_style(event: CalendarEvent, defaults: EventStyle) -> EventStyle:
    return EventStyle(*(
        default if getattr(event, name) is None else getattr(event, name)
        for name, default in zip(EventStyle._fields, defaults)
    ))
