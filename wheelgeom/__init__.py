"""Wheel geometry engine: polar conversion, sectors, arc paths, label placement."""

from .types import Point, Sector, DividerLine, ArcSpec, TextPlacement, TextTransform
from .polar import (
    polar_to_rect,
    time_string_to_hours, hours_to_degrees, time_string_to_degrees, time_to_coordinates,
)
from .arc import GeometryError, ArcBuilder, PathBuffer, fmt_num
from .geometry import (
    generate_outline_sector_data, generate_outline_line_data,
    generate_single_arc, generate_arc_sequence, arc_path,
    calculate_sector_text_data, text_transform,
)
