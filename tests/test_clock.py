import time

import pytest

from spanda.clock import Clock, ManualClock, MockClock, WallClock


def test_mock_clock_returns_fixed_dt():
    clock = MockClock(1.0 / 60.0)
    for _ in range(100):
        assert abs(clock.delta() - 1.0 / 60.0) < 1e-7


def test_manual_clock_accumulates():
    clock = ManualClock()
    clock.advance(0.1)
    clock.advance(0.2)
    assert clock.delta() == pytest.approx(0.3, abs=1e-6)


def test_manual_clock_resets_after_delta():
    clock = ManualClock()
    clock.advance(0.5)
    assert clock.delta() == pytest.approx(0.5)
    assert clock.delta() == pytest.approx(0.0, abs=1e-6)


def test_manual_clock_starts_at_zero():
    assert ManualClock().delta() == 0.0


def test_wall_clock_returns_positive():
    clock = WallClock()
    time.sleep(0.01)
    dt = clock.delta()
    assert dt > 0.0


def test_wall_clock_measures_since_last_call():
    clock = WallClock()
    time.sleep(0.02)
    first = clock.delta()
    second = clock.delta()
    assert first >= 0.015
    assert second < first


def test_clock_is_abstract():
    with pytest.raises(TypeError):
        Clock()