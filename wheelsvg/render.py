"""SVG rendering of the wheel: outline ring, time markers, selector, events.

Each render_* helper appends SVG element strings to an `out` list.
render_wheel_svg() assembles a whole document from a WheelData snapshot.
"""
from html import escape
from typing import Callable, Iterable, Optional, Sequence, Union

from wheelgeom import (
    Sector, DividerLine, polar_to_rect, fmt_num,
    generate_outline_sector_data, generate_outline_line_data,
    generate_single_arc, generate_arc_sequence,
    calculate_sector_text_data, text_transform,
)
from sizing import WheelData, WheelDimensions, DimensionModel
from .config import ConfigurationError, SelectorConfig, resolve_starting_angle
from .events import CalendarEvent, EventStyle, resolve_event_style, visible_events
from .constants import (
    BG_COLOR, INNER_CIRCLE_BG, STROKE, STROKE_WIDTH,
    OUTLINE_METHOD, OUTLINE_STARTING_POINT, MARKER_STYLE,
    OUTLINE_METHODS, MARKER_STYLES,
    MARKER_TICK_LENGTH, MARKER_TEXT_GAP, MARKER_INLINE_INSET,
    SELECTOR_PATH_CLASS, SELECTOR_TEXT_CLASS, ACTIVE_CLASS,
    EVENT_PATH_CLASS, EVENT_TEXT_CLASS, DEFAULT_STYLE,
)

OutlineData = Union[list[Sector], list[DividerLine]]

def _f(v: float) -> str:
    return fmt_num(v)

def _pt(p) -> str:
    return f"{_f(p[0])} {_f(p[1])}"

def _cls(base: str, active: bool) -> str:
    return f"{base} {ACTIVE_CLASS}" if active else base

# ============================================================
# Outline Ring
# ============================================================
def render_outline(
    out: list[str], dims: WheelDimensions, number_of_sectors: int,
    method: str = OUTLINE_METHOD, starting_point=OUTLINE_STARTING_POINT,
    bg_color: str = BG_COLOR, inner_circle_bg: str = INNER_CIRCLE_BG,
    stroke: str = STROKE, stroke_width: float = STROKE_WIDTH,
) -> OutlineData:
    """Draw the ring as closed sectors or as circles plus divider lines.

    "sector" leaves the hole in the middle transparent; "line" paints it
    with *inner_circle_bg*. Returns the sector or line data drawn, which
    render_markers() positions its ticks against.
    """
    if method not in OUTLINE_METHODS:
        raise ConfigurationError(
            f"unknown outline method {method!r}; expected 'sector' or 'line'")
    center, R, r = dims
    out.append('<g id="sector-wrapper">')
    if method == "line":
        data = generate_outline_line_data(number_of_sectors, center, r, R)
        out.append(f'<circle cx="{_f(center)}" cy="{_f(center)}" r="{_f(R)}"'
                   f' fill="{bg_color}" stroke="{stroke}"/>')
        for line in data:
            out.append(f'<path d="M {_pt(line.inner)} L {_pt(line.outer)}"'
                       f' stroke="{stroke}" stroke-width="{_f(stroke_width)}" fill="none"/>')
        out.append(f'<circle cx="{_f(center)}" cy="{_f(center)}" r="{_f(r)}"'
                   f' fill="{inner_circle_bg}" stroke="{stroke}"/>')
    else:
        data = generate_outline_sector_data(
            number_of_sectors, center, r, R, resolve_starting_angle(starting_point))
        for s in data:
            d = (f"M {_pt(s.start_inner)} L {_pt(s.start_outer)}"
                 f" A {_f(R)} {_f(R)} 1 0 1 {_pt(s.end_outer)}"
                 f" L {_pt(s.end_inner)}"
                 f" A {_f(r)} {_f(r)} 1 0 0 {_pt(s.start_inner)}")
            out.append(f'<path id="sector-{s.step}" d="{d}" fill="{bg_color}"'
                       f' stroke="{stroke}" stroke-width="{_f(stroke_width)}"/>')
    out.append('</g>')
    return data

# ============================================================
# Time Markers
# ============================================================
def marker_text_anchor(angle: float) -> str:
    """Anchor that keeps an outside label clear of the ring."""
    if angle < 90:
        return "end"
    if angle == 90:
        return "middle"
    if angle < 270:
        return "start"
    if angle == 270:
        return "middle"
    return "end"

def marker_baseline(angle: float) -> str:
    if angle == 0:
        return "middle"
    if angle < 180:
        return "baseline"
    if angle == 180:
        return "middle"
    return "hanging"

def _boundary(item) -> tuple[float, tuple[float, float]]:
    """(angle, outer point) of a sector's start edge or a divider line."""
    if isinstance(item, Sector):
        return item.angle, item.start_outer
    return item.angle, item.outer

def render_markers(
    out: list[str], dims: WheelDimensions, outline_data: OutlineData,
    markers: Sequence[str], style: str = MARKER_STYLE, stroke: str = STROKE,
    stroke_width: float = STROKE_WIDTH,
) -> None:
    """Label the boundary of outline item i with markers[i]; "" skips one."""
    if style not in MARKER_STYLES:
        raise ConfigurationError(
            f"unknown marker style {style!r}; expected 'outside', 'inline' or 'none'")
    if len(markers) > len(outline_data):
        raise ConfigurationError(
            f"{len(markers)} markers given for {len(outline_data)} outline boundaries")
    center, R, _ = dims
    out.append('<g id="time-markers-wrapper">')
    if style != "none":
        for marker, item in zip(markers, outline_data):
            if not marker:
                continue
            angle, edge = _boundary(item)
            if angle >= 360:
                angle -= 360
            label = escape(marker)
            if style == "outside":
                tick = polar_to_rect(center, center, R + MARKER_TICK_LENGTH, angle)
                tx, ty = polar_to_rect(center, center, R + MARKER_TEXT_GAP, angle)
                out.append(f'<g id="{label}-wrapper">')
                out.append(f'<path d="M {_pt(edge)} L {_pt(tick)}"'
                           f' stroke="{stroke}" stroke-width="{_f(stroke_width)}"/>')
                out.append(f'<text x="{_f(tx)}" y="{_f(ty)}" fill="{stroke}"'
                           f' alignment-baseline="{marker_baseline(angle)}"'
                           f' text-anchor="{marker_text_anchor(angle)}">{label}</text>')
            else:
                tx, ty = polar_to_rect(center, center, R - MARKER_INLINE_INSET, angle)
                out.append(f'<g id="{label}-wrapper" transform="rotate(180 {_f(tx)} {_f(ty)})">')
                out.append(f'<text x="{_f(tx)}" y="{_f(ty)}" fill="{stroke}"'
                           f' alignment-baseline="{marker_baseline(angle)}" text-anchor="start"'
                           f' transform="rotate({_f(angle)} {_f(tx)} {_f(ty)})">{label}</text>')
            out.append('</g>')
    out.append('</g>')

# ============================================================
# Selector Ring and Middle Button
# ============================================================
def render_selector(out: list[str], dims: WheelDimensions, selector: SelectorConfig) -> list[str]:
    """Draw the selector ring inside the inner circle. Returns the ring paths."""
    center, _, inner = dims
    button = selector.middle_button
    if button is not None and not button.enabled:
        button = None
    middle_r = button.resolved_radius(inner) if button else selector.corner_radius
    keys = selector.ring_keys
    start = selector.starting_angle
    rp = selector.radial_padding
    paths = generate_arc_sequence(
        len(keys), start, inner, middle_r,
        selector.corner_radius, selector.pad_angle, rp)

    out.append('<g id="selector-container">')
    out.append('<g id="selector-paths-container">')
    for key, d in zip(keys, paths):
        k = escape(key)
        out.append(f'<path id="selector-{k}" role="button" tabindex="0" aria-label="Select {k}"'
                   f' class="{_cls(SELECTOR_PATH_CLASS, key == selector.active_wheel)}"'
                   f' transform="translate({_f(center)}, {_f(center)})" d="{d}"/>')
    out.append('</g>')

    out.append('<g id="selector-text-container">')
    if keys:
        step = 360 / len(keys)
        text_r = (middle_r + inner + rp) / (2 if button else 1.5)
        for i, key in enumerate(keys):
            x, y = polar_to_rect(center, center, text_r, step * i + step / 2 + start)
            out.append(f'<text x="{_f(x)}" y="{_f(y)}" text-anchor="middle" alignment-baseline="central"'
                       f' class="{_cls(SELECTOR_TEXT_CLASS, key == selector.active_wheel)}"'
                       f' pointer-events="none">{escape(key[:selector.label_character_length])}</text>')
    out.append('</g>')

    if button:
        _render_middle_button(out, center, middle_r, selector)
    out.append('</g>')
    return paths

def _render_middle_button(out, center, radius, selector):
    button = selector.middle_button
    active = button.is_selector and selector.active_wheel == button.selector
    if button.aria_label:
        aria = button.aria_label
    elif button.is_selector:
        aria = f"Select {button.selector}"
    else:
        aria = button.label or ""
    out.append('<g id="selector-middle-button-container">')
    out.append(f'<circle id="middle-button" cx="{_f(center)}" cy="{_f(center)}" r="{_f(radius)}"'
               f' role="button" tabindex="0" aria-label="{escape(aria)}"'
               f' class="{_cls(SELECTOR_PATH_CLASS, active)}"/>')
    if button.icon:
        # icon is caller-supplied SVG markup
        out.append(f'<svg x="{_f(center - radius)}" y="{_f(center - radius)}"'
                   f' width="{_f(radius * 2)}" height="{_f(radius * 2)}" pointer-events="none">'
                   f'{button.icon}</svg>')
    else:
        label = button.label or (button.selector or "")[:selector.label_character_length]
        out.append(f'<text x="{_f(center)}" y="{_f(center)}" text-anchor="middle"'
                   f' alignment-baseline="central" class="{_cls(SELECTOR_TEXT_CLASS, active)}"'
                   f' pointer-events="none">{escape(label)}</text>')
    out.append('</g>')

# ============================================================
# Events
# ============================================================
def render_event(
    out: list[str], dims: WheelDimensions, event: CalendarEvent,
    defaults: EventStyle = EventStyle(),
) -> str:
    """Draw one event arc between the inner and outer circles with its title.

    Returns the arc path.
    """
    center, R, r = dims
    style = resolve_event_style(event, defaults)
    d = generate_single_arc(event.start_angle, event.end_angle, R, r,
                            style.corner_radius, style.pad_angle, style.radial_padding)
    tt = text_transform(calculate_sector_text_data(center, R, event.start_angle, event.end_angle),
                        center)
    attrs = ""
    if style.fill_color is not None:
        attrs += f' fill="{escape(style.fill_color)}"'
    if style.stroke_color is not None:
        attrs += f' stroke="{escape(style.stroke_color)}"'
    if style.stroke_width is not None:
        attrs += f' stroke-width="{_f(style.stroke_width)}"'
    aria = style.aria_label if style.aria_label is not None else event.title
    out.append(f'<g class="wheel-event" transform="translate({_f(center)}, {_f(center)})">')
    out.append(f'<path d="{d}" class="{EVENT_PATH_CLASS}"{attrs}'
               f' role="button" tabindex="0" aria-label="{escape(aria)}"/>')
    ox, oy = tt.origin
    out.append(f'<text x="{_f(tt.x)}" y="{_f(tt.y)}" text-anchor="{tt.text_anchor}"'
               f' alignment-baseline="central" class="{EVENT_TEXT_CLASS}"'
               f' transform="rotate({_f(tt.rotation)} {_f(ox)} {_f(oy)})"'
               f' pointer-events="none">{escape(event.title)}</text>')
    out.append('</g>')
    return d

# ============================================================
# Whole Document
# ============================================================
def render_wheel_svg(
    data: Optional[WheelData], number_of_sectors: int,
    events: Iterable[CalendarEvent] = (),
    selector: Optional[SelectorConfig] = None,
    markers: Sequence[str] = (),
    marker_style: str = MARKER_STYLE,
    outline_method: str = OUTLINE_METHOD,
    starting_point=OUTLINE_STARTING_POINT,
    bg_color: str = BG_COLOR, inner_circle_bg: str = INNER_CIRCLE_BG,
    stroke: str = STROKE, stroke_width: float = STROKE_WIDTH,
    event_defaults: EventStyle = EventStyle(),
    defs: Optional[str] = None,
) -> str:
    """Full <svg> document for one wheel, or "" while the size is unknown.

    With an enabled selector only events under its active key are drawn;
    otherwise every event is.
    """
    if data is None:
        return ""
    L = data.limiting_dimension
    dims = data.dimensions
    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{_f(L)}" height="{_f(L)}"'
               f' viewBox="0 0 {_f(L)} {_f(L)}" overflow="visible">')
    out.append(f'<style>{DEFAULT_STYLE}</style>')
    if defs:
        out.append(f'<defs>{defs}</defs>')

    out.append('<g id="wheel-outline">')
    outline = render_outline(out, dims, number_of_sectors, outline_method, starting_point,
                             bg_color, inner_circle_bg, stroke, stroke_width)
    render_markers(out, dims, outline, markers, marker_style, stroke, stroke_width)
    out.append('</g>')

    use_selector = selector is not None and selector.enabled
    shown = visible_events(events, selector.active_wheel) if use_selector else list(events)
    out.append('<g id="wheel-events">')
    for event in shown:
        render_event(out, dims, event, event_defaults)
    out.append('</g>')

    if use_selector:
        render_selector(out, dims, selector)
    out.append('</svg>')
    return "\n".join(out)

class WheelView:
    """Keeps an SVG rendering in step with a DimensionModel.

    Re-renders on every size change and on update(); `svg` is "" until the
    model is sized. *on_render* receives each new document.
    """

    def __init__(self, model: DimensionModel, number_of_sectors: int,
                 on_render: Optional[Callable[[str], None]] = None, **options):
        self._model = model
        self.number_of_sectors = number_of_sectors
        self.options = options
        self._on_render = on_render
        self.svg = ""
        self._render(model.data)
        self._unsubscribe = model.subscribe(self._render)

    def _render(self, data: Optional[WheelData]) -> None:
        self.svg = render_wheel_svg(data, self.number_of_sectors, **self.options)
        if self.svg and self._on_render is not None:
            self._on_render(self.svg)

    def update(self, **options) -> str:
        """Change rendering options (e.g. a new selector) and re-render."""
        self.options.update(options)
        self._render(self._model.data)
        return self.svg

    def close(self) -> None:
        self._unsubscribe()
