"""Tests for wheelsvg/events.py."""
import pytest
from wheelsvg.events import (
    CalendarEvent, EventStyle, resolve_event_style, is_event_visible, visible_events,
)


def test_active_wheels_frozen():
    e = CalendarEvent(0, 30, "Run", ["Mon", "Tue"])
    assert e.active_wheels == frozenset({"Mon", "Tue"})
    with pytest.raises(AttributeError):
        e.title = "Walk"


def test_from_times_normalises_angles():
    e = CalendarEvent.from_times("22:30", "06:00", "Sleep", ["Mon"])
    assert e.start_angle == pytest.approx(247.5)
    assert e.end_angle == 0
    early = CalendarEvent.from_times("03:00", "04:00", "Early")
    assert early.start_angle == pytest.approx(315)


def test_from_times_passes_styling():
    e = CalendarEvent.from_times("09:00", "10:00", "Call", fill_color="red")
    assert e.fill_color == "red"
    assert e.active_wheels == frozenset()


def test_is_event_visible():
    e = CalendarEvent(0, 30, "Run", {"Mon"})
    assert is_event_visible(e, "Mon")
    assert not is_event_visible(e, "Tue")
    assert not is_event_visible(e, None)


def test_visible_events_keeps_order():
    events = [
        CalendarEvent(0, 10, "a", {"Mon"}),
        CalendarEvent(10, 20, "b", {"Tue"}),
        CalendarEvent(20, 30, "c", {"Mon", "Tue"}),
    ]
    assert [e.title for e in visible_events(events, "Mon")] == ["a", "c"]
    assert visible_events(events, "Sun") == []


def test_event_style_defaults():
    assert EventStyle()[:3] == (6, 0.005, 3)


def test_resolve_event_style_prefers_event_values():
    e = CalendarEvent(0, 30, "Run", corner_radius=0, fill_color="red")
    s = resolve_event_style(e, EventStyle(stroke_color="white"))
    # 0 is an explicit value, not a fallback trigger
    assert s.corner_radius == 0
    assert s.fill_color == "red"
    assert s.stroke_color == "white"
    assert s.pad_angle == 0.005
