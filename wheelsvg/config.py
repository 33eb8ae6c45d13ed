"""Configuration contract for the selector ring and its middle button.

Contradictory but harmless settings (fields supplied for a disabled feature)
only warn with ConfigurationWarning. Settings the renderer cannot act on
raise ConfigurationError when the config object is built.
"""
import warnings
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Optional, Sequence

from .constants import (
    STARTING_POINTS, MIDDLE_BUTTON_TYPES, MIDDLE_BUTTON_RADIUS_RATIO,
    SELECTOR_STARTING_POINT, SELECTOR_RADIAL_PADDING, SELECTOR_PAD_ANGLE,
    SELECTOR_CORNER_RADIUS, LABEL_CHARACTER_LENGTH,
)

class ConfigurationError(ValueError):
    """Wheel configuration the renderer cannot honour."""

class ConfigurationWarning(UserWarning):
    """Wheel configuration that is contradictory but still renderable."""

def resolve_starting_angle(point) -> float:
    """Keyword ("left", "top", "right", "bottom") or number -> degrees."""
    if isinstance(point, str):
        if point not in STARTING_POINTS:
            raise ConfigurationError(
                f"unknown starting point {point!r}; expected one of "
                f"{', '.join(STARTING_POINTS)} or a number of degrees")
        return STARTING_POINTS[point]
    if isinstance(point, Real) and not isinstance(point, bool):
        return point
    raise ConfigurationError(f"starting point must be a keyword or a number, got {point!r}")

# ============================================================
# Middle Button
# ============================================================
@dataclass(frozen=True)
class MiddleButtonConfig:
    """Circle drawn inside the selector ring.

    type "selector" makes it select `selector` (which then leaves the ring);
    type "button" runs `action` when activated. `icon` is raw SVG markup
    drawn instead of the text label.
    """
    enabled: bool = True
    type: Optional[str] = None
    selector: Optional[str] = None
    action: Optional[Callable[..., Any]] = None
    icon: Optional[str] = None
    label: Optional[str] = None
    aria_label: Optional[str] = None
    radius: Optional[float] = None

    def __post_init__(self):
        check_middle_button(self)

    @property
    def is_selector(self) -> bool:
        return self.enabled and self.type == "selector"

    def resolved_radius(self, inner_circle_radius: float) -> float:
        if self.radius:
            return self.radius
        return inner_circle_radius * MIDDLE_BUTTON_RADIUS_RATIO

    def activate(self, set_active_wheel: Callable[[str], Any], event=None) -> None:
        """Click/keyboard activation: select the key or run the action."""
        if not self.enabled:
            return
        if self.type == "selector":
            set_active_wheel(self.selector)
        else:
            self.action(event)

def check_middle_button(button: MiddleButtonConfig) -> None:
    if not button.enabled:
        supplied = [name for name in ("type", "selector", "action", "icon", "label", "aria_label")
                    if getattr(button, name)]
        if supplied:
            warnings.warn(
                f"middle button is disabled but {', '.join(supplied)} was supplied; "
                "enable it for these settings to take effect",
                ConfigurationWarning, stacklevel=4)
        return
    if not button.type:
        raise ConfigurationError("middle button is enabled but no type was given")
    if button.type not in MIDDLE_BUTTON_TYPES:
        raise ConfigurationError(
            f"unknown middle button type {button.type!r}; expected 'selector' or 'button'")
    if button.type == "selector":
        if not button.selector:
            raise ConfigurationError("middle button of type 'selector' needs a selector key")
        return
    if button.action is None:
        raise ConfigurationError("middle button of type 'button' needs an action")
    if not button.icon and not button.label:
        raise ConfigurationError("middle button of type 'button' needs an icon or a label")
    if not button.aria_label:
        warnings.warn(
            "middle button of type 'button' has no aria label; "
            "screen readers cannot announce what it does",
            ConfigurationWarning, stacklevel=4)

# ============================================================
# Selector Ring
# ============================================================
@dataclass(frozen=True)
class SelectorConfig:
    """Ring of category buttons between the middle button and the inner circle.

    `active_wheel` filters which events are shown; activating a ring segment
    calls `set_active_wheel(key)`.
    """
    enabled: bool = True
    wheels: Optional[Sequence[str]] = None
    active_wheel: Optional[str] = None
    set_active_wheel: Optional[Callable[[str], Any]] = None
    starting_point: Any = SELECTOR_STARTING_POINT
    radial_padding: float = SELECTOR_RADIAL_PADDING
    pad_angle: float = SELECTOR_PAD_ANGLE
    corner_radius: float = SELECTOR_CORNER_RADIUS
    label_character_length: int = LABEL_CHARACTER_LENGTH
    middle_button: Optional[MiddleButtonConfig] = None

    def __post_init__(self):
        check_selector(self)

    @property
    def starting_angle(self) -> float:
        return resolve_starting_angle(self.starting_point)

    @property
    def ring_keys(self) -> list[str]:
        """Keys drawn as ring segments; a selector middle button takes its key out."""
        keys = list(self.wheels or ())
        if self.middle_button is not None and self.middle_button.is_selector:
            keys = [k for k in keys if k != self.middle_button.selector]
        return keys

    def select(self, key: str) -> None:
        if key not in (self.wheels or ()):
            raise KeyError(key)
        self.set_active_wheel(key)

def check_selector(selector: SelectorConfig) -> None:
    if not selector.enabled:
        supplied = [name for name in ("wheels", "active_wheel", "set_active_wheel")
                    if getattr(selector, name)]
        if supplied:
            warnings.warn(
                f"selector is disabled but {', '.join(supplied)} was supplied; "
                "enable it for these settings to take effect",
                ConfigurationWarning, stacklevel=4)
        return
    if not selector.wheels:
        raise ConfigurationError("selector is enabled but no wheels were given")
    if not selector.active_wheel:
        raise ConfigurationError("selector is enabled but no active wheel was given")
    if selector.set_active_wheel is None:
        raise ConfigurationError("selector is enabled but no set_active_wheel callback was given")
    if len(set(selector.wheels)) != len(selector.wheels):
        raise ConfigurationError(f"selector wheels must be unique: {list(selector.wheels)}")
    resolve_starting_angle(selector.starting_point)
