"""Wheel geometry: outline sectors and divider lines, arc paths, label placement.

All functions are pure. Angles are in degrees using the convention of
polar.py (0 = left, clockwise on screen).
"""
import math

import numpy as np

from .types import Sector, DividerLine, ArcSpec, TextPlacement, TextTransform
from .polar import polar_to_rect
from .arc import ArcBuilder

TEXT_OFFSET_RATIO = 0.04   # label padding as a fraction of the outer radius

# ============================================================
# Outline Sectors and Divider Lines
# ============================================================
def generate_outline_sector_data(
    number_of_sectors: int, center: float,
    inner_circle_radius: float, outer_circle_radius: float,
    starting_angle: float,
) -> list[Sector]:
    """Partition the ring into equal sectors starting at *starting_angle*.

    Each sector's end points are reused as the next sector's start points, so
    neighbouring sectors share boundary points exactly. The list is not
    closed: the last sector ends where the first one starts.
    """
    sectors = []
    inner = polar_to_rect(center, center, inner_circle_radius, starting_angle)
    outer = polar_to_rect(center, center, outer_circle_radius, starting_angle)
    angle = starting_angle
    for step in range(1, number_of_sectors + 1):
        end_angle = angle + 360 / number_of_sectors
        end_inner = polar_to_rect(center, center, inner_circle_radius, end_angle)
        end_outer = polar_to_rect(center, center, outer_circle_radius, end_angle)
        sectors.append(Sector(step, angle, inner, outer, end_inner, end_outer))
        inner, outer, angle = end_inner, end_outer, end_angle
    return sectors

def generate_outline_line_data(
    number_of_sectors: int, center: float,
    inner_circle_radius: float, outer_circle_radius: float,
) -> list[DividerLine]:
    """Divider lines at i*360/n for i = 0..n (n+1 lines, first and last coincide).

    Always starts at 0 degrees regardless of any sector starting angle.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        angles = np.arange(number_of_sectors + 1) * 360.0 / number_of_sectors
        rad = angles * np.pi / 180
        cos_a = np.cos(rad); sin_a = np.sin(rad)
    return [
        DividerLine(
            float(a),
            (float(center - inner_circle_radius * c), float(center - inner_circle_radius * s)),
            (float(center - outer_circle_radius * c), float(center - outer_circle_radius * s)),
        )
        for a, c, s in zip(angles, cos_a, sin_a)
    ]

# ============================================================
# Arc Paths
# ============================================================
def _builder_angle(deg: float) -> float:
    """Wheel degrees (0 = left) to builder radians (0 = top)."""
    return (deg - 90) * math.pi / 180

def generate_single_arc(
    start_angle: float, end_angle: float,
    outer_radius: float, inner_radius: float,
    corner_radius: float = 0, pad_angle: float = 0, radial_padding: float = 0,
) -> str:
    """SVG path for one arc, centered on the origin.

    An end angle below the start angle wraps past 360. Both radii are pulled
    in by *radial_padding*; padding of half the ring thickness or more gives a
    degenerate path rather than an error. *pad_angle* is in radians.
    """
    if end_angle < start_angle:
        end_angle += 360
    build = ArcBuilder(corner_radius=corner_radius, pad_angle=pad_angle)
    path = build(inner_radius + radial_padding, outer_radius - radial_padding,
                 _builder_angle(start_angle), _builder_angle(end_angle))
    return path or ""

def arc_path(spec: ArcSpec) -> str:
    return generate_single_arc(*spec)

def generate_arc_sequence(
    number_of_sectors: int, start_angle: float,
    outer_radius: float, inner_radius: float,
    corner_radius: float = 0, pad_angle: float = 0, radial_padding: float = 0,
) -> list[str]:
    """One arc path per equal division of the circle, starting at *start_angle*."""
    build = ArcBuilder(corner_radius=corner_radius, pad_angle=pad_angle)
    paths = []
    angle = start_angle
    for _ in range(number_of_sectors):
        end_angle = angle + 360 / number_of_sectors
        adjusted = end_angle + 360 if angle > end_angle else end_angle
        path = build(inner_radius + radial_padding, outer_radius - radial_padding,
                     _builder_angle(angle), _builder_angle(adjusted))
        paths.append(path or "")
        angle = end_angle
    return paths

# ============================================================
# Label Placement
# ============================================================
def calculate_sector_text_data(
    center: float, outer_circle_radius: float, start_angle: float, end_angle: float,
) -> TextPlacement:
    """Label angle, flip flag, anchor point and offset for a sector's span."""
    if end_angle >= start_angle:
        ta = (start_angle + end_angle) / 2
    else:
        ta = (start_angle + end_angle + 360) / 2
    flip = 90 <= ta < 270
    tc = polar_to_rect(center, center, outer_circle_radius, ta)
    return TextPlacement(ta, flip, tc, outer_circle_radius * TEXT_OFFSET_RATIO)

def text_transform(placement: TextPlacement, center: float) -> TextTransform:
    """Label anchor relative to *center* that keeps text upright.

    Flipped labels are anchored at their end, offset the other way along the
    radius and turned a further 180 degrees.
    """
    ta, flip, tc, to = placement
    ox = tc[0] - center; oy = tc[1] - center
    if flip:
        return TextTransform(ox - to, oy, "end", ta + 180, (ox, oy))
    return TextTransform(ox + to, oy, "start", ta, (ox, oy))
