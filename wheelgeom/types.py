"""Shared type definitions for the wheel geometry engine."""
from typing import NamedTuple

Point = tuple[float, float]

class Sector(NamedTuple):
    """One slice of an outline ring. `angle` is the start angle in degrees."""
    step: int; angle: float
    start_inner: Point; start_outer: Point
    end_inner: Point; end_outer: Point

class DividerLine(NamedTuple):
    """Radial divider from the inner circle to the outer circle."""
    angle: float; inner: Point; outer: Point

class ArcSpec(NamedTuple):
    """Angular span plus ring parameters for one renderable arc."""
    start_angle: float; end_angle: float
    outer_radius: float; inner_radius: float
    corner_radius: float = 0; pad_angle: float = 0; radial_padding: float = 0

    @property
    def span(self) -> float:
        """Span in degrees; an end angle below the start wraps past 360."""
        if self.end_angle < self.start_angle:
            return self.end_angle + 360 - self.start_angle
        return self.end_angle - self.start_angle

class TextPlacement(NamedTuple):
    text_angle: float    # midpoint of the span (degrees)
    flip: bool           # label would read upside-down without a 180 turn
    text_center: Point   # point on the outer radius at text_angle
    text_offset: float   # radial text padding

class TextTransform(NamedTuple):
    """Label anchor relative to the wheel center, ready for an SVG <text>."""
    x: float; y: float
    text_anchor: str
    rotation: float
    origin: Point
