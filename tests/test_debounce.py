"""Tests for sizing/debounce.py."""
import threading
import pytest
from sizing.debounce import Debouncer


def test_fires_once_with_latest_args(timers):
    calls = []
    d = Debouncer(lambda *a: calls.append(a), 100, timers)
    d(1, 1)
    d(2, 2)
    d(3, 3)
    assert calls == []
    assert len(timers.live) == 1
    timers.fire_all()
    assert calls == [(3, 3)]


def test_delay_converted_to_seconds(timers):
    d = Debouncer(lambda: None, 250, timers)
    d()
    assert timers.created[0].interval == pytest.approx(0.25)
    assert timers.created[0].daemon is True


def test_each_call_cancels_previous_timer(timers):
    d = Debouncer(lambda *a: None, 100, timers)
    d(1)
    d(2)
    assert timers.created[0].cancelled
    assert not timers.created[1].cancelled


def test_stale_timer_does_not_fire(timers):
    calls = []
    d = Debouncer(calls.append, 100, timers)
    d("a")
    stale = timers.created[0]
    d("b")
    # a timer that already began running when cancelled still bails out
    stale.function(*stale.args)
    assert calls == []
    timers.created[1].fire()
    assert calls == ["b"]


def test_pending_and_cancel(timers):
    calls = []
    d = Debouncer(calls.append, 100, timers)
    assert not d.pending
    d("x")
    assert d.pending
    d.cancel()
    assert not d.pending
    timers.fire_all()
    assert calls == []


def test_flush_runs_now(timers):
    calls = []
    d = Debouncer(calls.append, 100, timers)
    assert d.flush() is False
    d("x")
    assert d.flush() is True
    assert calls == ["x"]
    assert not d.pending
    timers.fire_all()
    assert calls == ["x"]


def test_real_timer_fires():
    done = threading.Event()
    got = []
    def record(v):
        got.append(v)
        done.set()
    d = Debouncer(record, 5)
    d(1)
    d(2)
    assert done.wait(2.0)
    assert got == [2]
