"""Responsive sizing: limiting dimension, wheel radii, debounced resize handling."""

from .model import (
    WheelDimensions, WheelData, DimensionModel,
    limiting_dimension, compute_wheel_data,
)
from .debounce import Debouncer
from .source import ResizeSource, ManualResizeSource, Size
