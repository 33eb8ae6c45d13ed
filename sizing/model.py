"""Responsive dimension model: one measured size in, wheel radii out."""
import math
import threading
from typing import Callable, NamedTuple, Optional

from .constants import (
    OUTER_CIRCLE_PERCENT, INNER_CIRCLE_PERCENT, MIN_SIZE, MAX_SIZE, DEBOUNCE_DELAY_MS,
)
from .debounce import Debouncer
from .source import ResizeSource

class WheelDimensions(NamedTuple):
    center: float
    outer_circle_radius: float
    inner_circle_radius: float

class WheelData(NamedTuple):
    """What subscribers receive: the clamped size and the radii derived from it."""
    limiting_dimension: float
    dimensions: WheelDimensions

Listener = Callable[[WheelData], None]

def limiting_dimension(width: float, height: float, min_size: float, max_size: float) -> float:
    """Smaller side clamped to [min_size, max_size]; min_size wins over max_size.

    A nan side gives nan whichever side it is on.
    """
    if math.isnan(width) or math.isnan(height):
        return math.nan
    return max(min(width, height, max_size), min_size)

def compute_wheel_data(
    limiting: float, outer_percent: float = OUTER_CIRCLE_PERCENT,
    inner_percent: float = INNER_CIRCLE_PERCENT,
) -> WheelData:
    center = limiting / 2
    return WheelData(limiting, WheelDimensions(
        center, center * outer_percent / 100, center * inner_percent / 100,
    ))

class DimensionModel:
    """Owns the wheel's size state and broadcasts it to subscribers.

    Starts uninitialized (``data is None``). The first positive limiting
    dimension moves it to sized; it never goes back. Resize signals from an
    observed source are debounced, and each recomputation runs to completion
    under a lock before the next is applied. After close() nothing further
    is applied or broadcast.
    """

    def __init__(
        self,
        outer_percent: float = OUTER_CIRCLE_PERCENT,
        inner_percent: float = INNER_CIRCLE_PERCENT,
        min_size: float = MIN_SIZE,
        max_size: float = MAX_SIZE,
        debounce_delay_ms: float = DEBOUNCE_DELAY_MS,
        timer_factory: Callable = threading.Timer,
    ):
        self.outer_percent = outer_percent
        self.inner_percent = inner_percent
        self.min_size = min_size
        self.max_size = max_size
        self._lock = threading.RLock()
        self._data: Optional[WheelData] = None
        self._listeners: list[Listener] = []
        self._release_source: Optional[Callable[[], None]] = None
        self._closed = False
        self._debounced = Debouncer(self.apply_size, debounce_delay_ms, timer_factory)

    # --- read-only state ---

    @property
    def data(self) -> Optional[WheelData]:
        return self._data

    @property
    def limiting_dimension(self) -> Optional[float]:
        return None if self._data is None else self._data.limiting_dimension

    @property
    def dimensions(self) -> Optional[WheelDimensions]:
        return None if self._data is None else self._data.dimensions

    @property
    def is_sized(self) -> bool:
        return self._data is not None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def resize_pending(self) -> bool:
        return self._debounced.pending

    # --- subscription ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener(WheelData) for every change; returns an unsubscribe."""
        with self._lock:
            self._listeners.append(listener)
        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
        return unsubscribe

    # --- resize handling ---

    def apply_size(self, width: float, height: float) -> Optional[WheelData]:
        """Recompute from a measured size and notify subscribers on change.

        A non-positive limiting dimension leaves the state as it was.
        """
        with self._lock:
            if self._closed:
                return None
            limiting = limiting_dimension(width, height, self.min_size, self.max_size)
            if not limiting > 0:
                return self._data
            data = compute_wheel_data(limiting, self.outer_percent, self.inner_percent)
            if data == self._data:
                return data
            self._data = data
            for listener in list(self._listeners):
                listener(data)
            return data

    def observe(self, source: ResizeSource) -> None:
        """Size from *source* now, then follow its changes through the debounce."""
        with self._lock:
            if self._closed:
                raise RuntimeError("DimensionModel is closed")
            if self._release_source is not None:
                self._release_source()
                self._release_source = None
            self._debounced.cancel()
            size = source.measure()
            if size is not None:
                self.apply_size(*size)
            self._release_source = source.subscribe(self._debounced)

    def flush(self) -> bool:
        """Apply a pending debounced resize immediately."""
        return self._debounced.flush()

    def close(self) -> None:
        """Cancel pending work, release the source, drop subscribers."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._debounced.cancel()
            if self._release_source is not None:
                self._release_source()
                self._release_source = None
            self._listeners.clear()

    def __enter__(self) -> "DimensionModel":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
