"""Resize sources: anything that can report a target's size and notify on change."""
from typing import Callable, Optional, Protocol

Size = tuple[float, float]
ResizeListener = Callable[[float, float], None]

class ResizeSource(Protocol):
    """Measurement source observed by a DimensionModel."""

    def measure(self) -> Optional[Size]:
        """Current (width, height), or None if the target is not laid out yet."""
        ...

    def subscribe(self, listener: ResizeListener) -> Callable[[], None]:
        """Call listener(width, height) on every change; returns an unsubscribe."""
        ...

class ManualResizeSource:
    """In-memory source. resize() notifies listeners synchronously."""

    def __init__(self, width: Optional[float] = None, height: Optional[float] = None):
        self._size: Optional[Size] = None
        if width is not None and height is not None:
            self._size = (width, height)
        self._listeners: list[ResizeListener] = []

    def measure(self) -> Optional[Size]:
        return self._size

    def subscribe(self, listener: ResizeListener) -> Callable[[], None]:
        self._listeners.append(listener)
        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(self, width: float, height: float) -> None:
        self._size = (width, height)
        for listener in list(self._listeners):
            listener(width, height)
