"""Generate a demo 24-hour wheel calendar SVG.

A week of events on a 24-sector clock face, a selector ring for the days of
the week and a middle button that selects the "Daily" wheel. Writes one
SVG per day next to this file.
"""
import os
from dataclasses import replace

from sizing import DimensionModel, ManualResizeSource
from wheelsvg.config import SelectorConfig, MiddleButtonConfig
from wheelsvg.events import CalendarEvent
from wheelsvg.render import WheelView

DAYS = ("Daily", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
WEEKDAYS = DAYS[1:6]
HOUR_MARKERS = [f"{(6 + i) % 24:02d}" if i % 3 == 0 else "" for i in range(24)]   # sector 0 starts at 06:00
CANVAS = (640, 520)

# ============================================================
# Demo Data
# ============================================================
def build_demo_events() -> list[CalendarEvent]:
    return [
        CalendarEvent.from_times("06:30", "07:15", "Run", WEEKDAYS),
        CalendarEvent.from_times("07:30", "08:00", "Breakfast", DAYS),
        CalendarEvent.from_times("09:00", "12:00", "Deep work", WEEKDAYS),
        CalendarEvent.from_times("12:30", "13:30", "Lunch", DAYS),
        CalendarEvent.from_times("14:00", "17:00", "Meetings", ("Monday", "Wednesday")),
        CalendarEvent.from_times("10:00", "14:00", "Market", ("Saturday",)),
        CalendarEvent.from_times("18:00", "19:30", "Dinner", DAYS),
        CalendarEvent.from_times("22:30", "06:00", "Sleep", DAYS),
    ]

def build_demo_calendar():
    """Sized model, events and selector for the demo wheel."""
    source = ManualResizeSource(*CANVAS)
    model = DimensionModel()
    model.observe(source)
    selected = []
    selector = SelectorConfig(
        wheels=DAYS, active_wheel="Daily", set_active_wheel=selected.append,
        middle_button=MiddleButtonConfig(type="selector", selector="Daily"),
    )
    return {"source": source, "model": model, "events": build_demo_events(),
            "selector": selector, "selected": selected}

# ============================================================
# Main entry point
# ============================================================
if __name__ == "__main__":
    demo = build_demo_calendar()
    model, selector = demo["model"], demo["selector"]
    view = WheelView(model, 24, events=demo["events"], selector=selector, markers=HOUR_MARKERS)
    out_dir = os.path.dirname(os.path.abspath(__file__))

    print(f"Limiting dimension: {model.limiting_dimension:g}")
    c, R, r = model.dimensions
    print(f"Center {c:g}, outer radius {R:g}, inner radius {r:g}")
    for day in DAYS:
        svg = view.update(selector=replace(selector, active_wheel=day))
        svg_path = os.path.join(out_dir, f"wheel_{day.lower()}.svg")
        with open(svg_path, "w") as f:
            f.write(svg)
        shown = svg.count('class="wheel-event"')
        print(f"  {day:<10s} {shown:2d} events  ->  {os.path.basename(svg_path)}")
    view.close()
    model.close()
