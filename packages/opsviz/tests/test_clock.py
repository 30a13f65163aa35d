"""Tests for ClockSource advancement and FrameContext generation."""

import pytest
from opsviz.clock import ClockSource
from opsviz.types import FrameContext


class FakeTime:
    """Settable stand-in for time.monotonic."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_clock_initialization():
    """Fixed-step clock starts at frame 0 with dt = 1 / fps."""
    clock = ClockSource(fps=20)
    assert clock.fps == 20
    assert clock.frame_number == 0
    assert clock.elapsed == 0.0
    assert abs(clock.dt - 0.05) < 1e-9
    assert not clock.realtime


def test_non_positive_fps_rejected():
    with pytest.raises(ValueError):
        ClockSource(fps=0)
    with pytest.raises(ValueError):
        ClockSource(fps=-5)


def test_fixed_step_elapsed_is_frame_times_dt():
    """Elapsed is computed from the frame number, not accumulated."""
    clock = ClockSource(fps=20)
    for i in range(1, 1001):
        clock.advance()
        assert clock.frame_number == i
    assert abs(clock.elapsed - 50.0) < 1e-9


def test_advance_returns_new_elapsed():
    clock = ClockSource(fps=10)
    assert abs(clock.advance() - 0.1) < 1e-9
    assert abs(clock.advance() - 0.2) < 1e-9


def test_fixed_step_strictly_increasing():
    clock = ClockSource(fps=60)
    prev = clock.elapsed
    for _ in range(500):
        current = clock.advance()
        assert current > prev
        prev = current


def test_realtime_elapsed_measured_from_origin():
    """With a time source, elapsed is the wall time since construction."""
    fake = FakeTime(100.0)
    clock = ClockSource(fps=60, time_fn=fake)
    assert clock.realtime

    fake.now = 100.5
    assert clock.advance() == 0.5
    fake.now = 101.25
    assert clock.advance() == 1.25


def test_realtime_stalled_reading_still_advances():
    """A repeated wall-clock reading is nudged strictly upward."""
    fake = FakeTime(10.0)
    clock = ClockSource(fps=60, time_fn=fake)

    fake.now = 10.5
    first = clock.advance()
    second = clock.advance()
    assert second > first

    fake.now = 10.0  # clock went backwards
    third = clock.advance()
    assert third > second


def test_realtime_context_dt_is_last_frame_duration():
    fake = FakeTime(0.0)
    clock = ClockSource(fps=60, time_fn=fake)
    fake.now = 0.25
    clock.advance()
    fake.now = 0.75
    clock.advance()
    ctx = clock.context(lambda: None)
    assert ctx.dt == 0.5
    assert ctx.elapsed == 0.75


def test_context_returns_correct_values():
    clock = ClockSource(fps=20)
    clock.advance()

    stop_called = []
    ctx = clock.context(lambda: stop_called.append(True))

    assert isinstance(ctx, FrameContext)
    assert ctx.frame_number == 1
    assert abs(ctx.dt - 0.05) < 1e-9
    assert abs(ctx.elapsed - 0.05) < 1e-9

    ctx.request_stop()
    assert stop_called == [True]


def test_context_is_frozen():
    clock = ClockSource(fps=20)
    ctx = clock.context(lambda: None)
    with pytest.raises(AttributeError):
        ctx.frame_number = 99  # type: ignore[misc]


def test_reset_starts_fresh_timeline():
    clock = ClockSource(fps=20)
    for _ in range(10):
        clock.advance()

    clock.reset()
    assert clock.frame_number == 0
    assert clock.elapsed == 0.0
    clock.advance()
    assert clock.frame_number == 1


def test_reset_to_saved_position():
    clock = ClockSource(fps=20)
    clock.reset(frame_number=40)
    assert abs(clock.elapsed - 2.0) < 1e-9
    clock.advance()
    assert clock.frame_number == 41


def test_realtime_reset_rebases_origin():
    fake = FakeTime(50.0)
    clock = ClockSource(fps=60, time_fn=fake)
    fake.now = 60.0
    clock.advance()
    assert clock.elapsed == 10.0

    clock.reset()
    assert clock.elapsed == 0.0
    fake.now = 61.0
    assert clock.advance() == 1.0


def test_realtime_reset_resumes_at_elapsed():
    fake = FakeTime(0.0)
    clock = ClockSource(fps=60, time_fn=fake)
    clock.reset(frame_number=5, elapsed=3.0)
    fake.now = 1.0
    assert clock.advance() == 4.0
