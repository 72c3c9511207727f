import time

import pytest

from enginecore.stopwatch import Stopwatch


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_stop_reports_milliseconds():
    clock = FakeClock()
    watch = Stopwatch(clock=clock)
    clock.now = 1.5
    assert watch.stop() == pytest.approx(1500.0)


def test_start_resets_origin():
    clock = FakeClock()
    watch = Stopwatch(clock=clock)
    clock.now = 10.0
    watch.start()
    clock.now = 10.25
    assert watch.stop() == pytest.approx(250.0)


def test_stop_does_not_reset():
    clock = FakeClock()
    watch = Stopwatch(clock=clock)
    clock.now = 2.0
    first = watch.stop()
    clock.now = 3.0
    assert watch.stop() > first


def test_real_clock_measures_sleep():
    watch = Stopwatch()
    time.sleep(0.01)
    assert watch.stop() >= 10.0