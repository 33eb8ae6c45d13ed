"""Cancellable-timer debounce."""
import threading
from typing import Any, Callable

class Debouncer:
    """Delay calls to *func* until *delay_ms* passes without a newer call.

    Every call cancels the pending timer and schedules a new one; when it
    fires, *func* runs once with the arguments of the latest call.
    *timer_factory* has the threading.Timer signature
    ``(interval_s, function, args)`` and returns an object with start() and
    cancel().
    """

    def __init__(self, func: Callable[..., Any], delay_ms: float,
                 timer_factory: Callable[..., Any] = threading.Timer):
        self._func = func
        self._delay = delay_ms / 1000.0
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._args: tuple = ()
        self._generation = 0   # stale timers compare against this and bail

    def __call__(self, *args: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._args = args
            timer = self._timer_factory(self._delay, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            args = self._args
            self._timer = None
        self._func(*args)

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1

    def flush(self) -> bool:
        """Run the pending call now. Returns False if nothing was pending."""
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
            self._generation += 1
            args = self._args
        self._func(*args)
        return True
