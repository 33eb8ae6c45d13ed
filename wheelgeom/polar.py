"""Polar/rectangular conversion and clock-time to angle helpers.

Angles are degrees with 0 at the left (9 o'clock) and increasing clockwise on
a y-down screen: x = cx - r*cos(t), y = cy - r*sin(t).
"""
import math
from typing import Union

from .types import Point

def polar_to_rect(cx: float, cy: float, r: float, t: float) -> Point:
    """Rectangular point at radius r and angle t (degrees) around (cx, cy)."""
    a = t * math.pi / 180
    if math.isinf(a):
        # math.cos/sin raise on inf; keep the conversion total
        return (math.nan, math.nan)
    return (cx - r * math.cos(a), cy - r * math.sin(a))

def _to_number(s: str) -> float:
    """Numeric value of a substring; blank is 0, anything unparsable is nan."""
    s = s.strip()
    if not s:
        return 0.0
    try:
        return float(s)
    except ValueError:
        return math.nan

def time_string_to_hours(time: str) -> float:
    """'HH:MM' to decimal hours, e.g. '14:30' -> 14.5.

    No range checking. Malformed strings give nan rather than an error.
    """
    return _to_number(time[0:2]) + _to_number(time[3:5]) / 60

def hours_to_degrees(hours: float, spring_point: float = 6) -> float:
    """Clock hours to wheel degrees; *spring_point* is the hour mapped to 0."""
    return 15 * hours - 15 * spring_point

def time_string_to_degrees(time: str, spring_point: float = 6) -> float:
    return hours_to_degrees(time_string_to_hours(time), spring_point)

def time_to_coordinates(
    time: Union[str, float], cx: float, cy: float, r: float, spring_point: float = 6,
) -> Point:
    """Point on the circle for a 'HH:MM' string or decimal hours."""
    if isinstance(time, str):
        return polar_to_rect(cx, cy, r, time_string_to_degrees(time, spring_point))
    return polar_to_rect(cx, cy, r, hours_to_degrees(time, spring_point))
