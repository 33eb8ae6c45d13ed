"""Tests for wheelsvg/gen_wheel.py demo data."""
from dataclasses import replace
from wheelsvg.gen_wheel import (
    build_demo_calendar, build_demo_events, DAYS, HOUR_MARKERS,
)
from wheelsvg.render import render_wheel_svg


def test_hour_markers_every_three_hours():
    assert len(HOUR_MARKERS) == 24
    assert HOUR_MARKERS[0] == "06"
    assert HOUR_MARKERS[3] == "09"
    assert HOUR_MARKERS[18] == "00"
    assert HOUR_MARKERS[1] == ""


def test_demo_events_within_circle():
    for e in build_demo_events():
        assert 0 <= e.start_angle < 360
        assert 0 <= e.end_angle < 360


def test_demo_calendar_is_sized():
    demo = build_demo_calendar()
    model = demo["model"]
    try:
        assert model.limiting_dimension == 520
        assert demo["source"].listener_count == 1
        assert demo["selector"].ring_keys == list(DAYS[1:])
    finally:
        model.close()


def test_demo_renders_every_day():
    demo = build_demo_calendar()
    try:
        for day in DAYS:
            sel = replace(demo["selector"], active_wheel=day)
            svg = render_wheel_svg(demo["model"].data, 24, demo["events"], sel,
                                   markers=HOUR_MARKERS)
            assert svg.startswith("<svg")
            assert svg.count('class="wheel-event"') >= 3
    finally:
        demo["model"].close()


def test_middle_button_selects_daily():
    demo = build_demo_calendar()
    demo["model"].close()
    sel = demo["selector"]
    sel.middle_button.activate(sel.set_active_wheel)
    sel.select("Friday")
    assert demo["selected"] == ["Daily", "Friday"]
