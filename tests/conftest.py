"""Shared test fixtures for wheel calendar tests."""
import pytest
from sizing import DimensionModel, ManualResizeSource, compute_wheel_data


class FakeTimer:
    """threading.Timer stand-in that only fires when told to."""

    def __init__(self, interval, function, args=()):
        self.interval = interval
        self.function = function
        self.args = tuple(args)
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if self.started and not self.cancelled:
            self.function(*self.args)


class FakeTimers:
    """Timer factory recording every timer it hands out."""

    def __init__(self):
        self.created = []

    def __call__(self, interval, function, args=()):
        timer = FakeTimer(interval, function, args)
        self.created.append(timer)
        return timer

    @property
    def live(self):
        return [t for t in self.created if t.started and not t.cancelled]

    def fire_all(self):
        for t in list(self.created):
            t.fire()


@pytest.fixture
def timers():
    return FakeTimers()


@pytest.fixture
def model(timers):
    """Default-configured DimensionModel with a fake timer factory."""
    m = DimensionModel(timer_factory=timers)
    yield m
    m.close()


@pytest.fixture
def source():
    """Resize source already laid out at 200x200."""
    return ManualResizeSource(200, 200)


@pytest.fixture(scope="session")
def wheel_data():
    """WheelData for a 400px limiting dimension: center 200, radii 180/60."""
    return compute_wheel_data(400)


@pytest.fixture(scope="session")
def dims(wheel_data):
    return wheel_data.dimensions
