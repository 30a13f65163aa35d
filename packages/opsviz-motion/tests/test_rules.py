"""Tests for motion rules."""

import math

import pytest
from opsviz import DerivedState, MotionRule
from opsviz_motion import (
    Bank,
    Bob,
    Compose,
    Drift,
    Flare,
    Flicker,
    GatedBob,
    Pulse,
    Spin,
    Static,
    Swing,
)

SAMPLE_TIMES = [i * 0.037 for i in range(2000)]


class TestPurity:

    @pytest.mark.parametrize(
        "rule",
        [
            Spin(0.12, channel="heading"),
            Swing(-math.pi / 4, math.pi / 4, 0.5),
            Pulse(0.5, 0.3, 2, 1.0, "opacity"),
            Flare(0.7, 2.0, 0.5, phase=3),
            Flicker(0.2, 1.0, 3, 0.5),
            Drift(amplitude_x=4.0, freq_x=0.5),
            GatedBob(0.5, 0.3, 2.0, 0.2, 0.8),
            Bank(0.05, 0.3, math.pi / 4, 0.1, 0.2),
        ],
    )
    def test_same_time_same_state(self, rule):
        """Evaluation order does not matter; earlier times can be replayed."""
        forward = [rule.state(t) for t in SAMPLE_TIMES[:50]]
        backward = [rule.state(t) for t in reversed(SAMPLE_TIMES[:50])]
        assert forward == backward[::-1]

    def test_static_drives_nothing(self):
        assert Static().state(12.0) == DerivedState()


class TestSpin:

    def test_angle_grows_linearly(self):
        spin = Spin(0.5)
        assert spin.state(0.0).angle == 0.0
        assert spin.state(4.0).angle == pytest.approx(2.0)

    def test_heading_channel(self):
        state = Spin(0.1, base_angle=1.0, channel="heading").state(10.0)
        assert state.heading == pytest.approx(2.0)
        assert state.angle is None

    def test_unknown_channel_rejected(self):
        with pytest.raises(ValueError):
            Spin(1.0, channel="opacity")


class TestSwing:

    @pytest.mark.parametrize(
        "low, high, freq, phase",
        [
            (-math.pi / 4, math.pi / 4, 0.5, 0.0),
            (-math.pi / 6, math.pi / 3, 0.7, 0.5),
            (-math.pi / 8, math.pi / 8, 1.0, 1.0),
            (-1.0, 1.0, 2.3, 0.25),
            (0.1, 0.7, 3.1, 2.0),
        ],
    )
    def test_stays_within_limits(self, low, high, freq, phase):
        swing = Swing(low, high, freq, phase)
        for t in SAMPLE_TIMES:
            angle = swing.state(t).angle
            assert low <= angle <= high

    def test_reaches_both_limits(self):
        swing = Swing(-1.0, 1.0, 1.0)
        assert swing.state(math.pi / 2).angle == pytest.approx(1.0)
        assert swing.state(3 * math.pi / 2).angle == pytest.approx(-1.0)


class TestPulse:

    def test_oscillates_around_base(self):
        pulse = Pulse(0.5, 0.5, 2)
        values = [pulse.state(t).intensity for t in SAMPLE_TIMES]
        assert min(values) >= pulse.low - 1e-12
        assert max(values) <= pulse.high + 1e-12
        assert pulse.state(0.0).intensity == 0.5

    def test_channel_selection(self):
        state = Pulse(1.0, 0.1, 2, channel="scale").state(0.3)
        assert state.scale is not None
        assert state.intensity is None

    def test_unknown_channel_rejected(self):
        with pytest.raises(ValueError):
            Pulse(1.0, 0.1, channel="heading")

    def test_low_high_with_negative_amplitude(self):
        pulse = Pulse(1.0, -0.25)
        assert (pulse.low, pulse.high) == (0.75, 1.25)


class TestFlare:

    def test_hot_exactly_when_wave_above_threshold(self):
        flare = Flare(0.7, hot=2.0, cool=0.5, freq=1, phase=2)
        for t in SAMPLE_TIMES:
            expected = 2.0 if math.sin(t + 2) > 0.7 else 0.5
            assert flare.state(t).intensity == expected

    def test_only_two_levels(self):
        flare = Flare(0.7, 2.0, 0.5)
        levels = {flare.state(t).intensity for t in SAMPLE_TIMES}
        assert levels == {0.5, 2.0}

    def test_firing_at_peak(self):
        flare = Flare(0.7, 2.0, 0.5)
        assert flare.firing(math.pi / 2)
        assert not flare.firing(0.0)


class TestFlicker:

    def test_within_range(self):
        flicker = Flicker(0.2, 1.0, 3, 0.5)
        for t in SAMPLE_TIMES:
            opacity = flicker.state(t).opacity
            assert 0.2 - 1e-12 <= opacity <= 1.0 + 1e-12

    def test_floor_at_zero_crossing(self):
        assert Flicker(0.3, 1.0, 1.0).state(0.0).opacity == 0.3


class TestDrift:

    def test_faces_direction_of_travel(self):
        drift = Drift(amplitude_x=4.0, freq_x=0.5)
        start = drift.state(0.0)
        assert start.x == 0.0
        assert start.heading == pytest.approx(math.pi / 2)

        turned = drift.state(2 * math.pi)
        assert turned.heading == pytest.approx(-math.pi / 2)

    def test_stays_within_amplitude(self):
        drift = Drift(center_x=1.0, amplitude_x=4.0, freq_x=0.5)
        for t in SAMPLE_TIMES:
            assert -3.0 - 1e-12 <= drift.state(t).x <= 5.0 + 1e-12

    def test_heading_matches_finite_difference(self):
        drift = Drift(amplitude_x=2.0, amplitude_z=1.0, freq_x=0.7, freq_z=0.3, phase_z=1.0)
        t, h = 3.1, 1e-6
        a, b = drift.state(t), drift.state(t + h)
        expected = math.atan2(b.x - a.x, b.z - a.z)
        assert a.heading == pytest.approx(expected, abs=1e-4)


class TestBob:

    def test_bob_around_center(self):
        bob = Bob(center=1.2, amplitude=0.1, freq=0.5, phase=2)
        for t in SAMPLE_TIMES:
            assert 1.1 - 1e-12 <= bob.state(t).y <= 1.3 + 1e-12

    def test_gated_bob_rests_when_gate_closed(self):
        bob = GatedBob(rest=0.5, amplitude=0.3, freq=2.0, gate_freq=0.2, gate_threshold=0.8)
        assert bob.state(0.0).y == 0.5
        assert bob.state(1.3).y == 0.5

    def test_gated_bob_moves_when_gate_open(self):
        bob = GatedBob(rest=0.5, amplitude=0.3, freq=2.0, gate_freq=0.2, gate_threshold=0.8)
        t = (math.pi / 2) / 0.2 + 0.4
        assert bob.state(t).y == pytest.approx(0.5 + math.sin(2.0 * t) * 0.3)
        assert bob.state(t).y != 0.5


class TestBank:

    def test_roll_and_yaw(self):
        bank = Bank(0.05, 0.3, math.pi / 4, 0.1, 0.2)
        rest = bank.state(0.0)
        assert rest.angle == 0.0
        assert rest.heading == pytest.approx(math.pi / 4)
        for t in SAMPLE_TIMES:
            state = bank.state(t)
            assert abs(state.angle) <= 0.05 + 1e-12
            assert abs(state.heading - math.pi / 4) <= 0.1 + 1e-12


class TestCompose:

    def test_combines_channels(self):
        rule = Compose(Bob(0.0, 0.2, 0.5), Bank(0.05, 0.3, math.pi / 4, 0.1, 0.2))
        state = rule.state(1.0)
        assert state.y == pytest.approx(math.sin(0.5) * 0.2)
        assert state.angle is not None
        assert state.heading is not None

    def test_later_rule_wins(self):
        rule = Compose(Pulse(1.0, 0.1, 2, channel="scale"), Flare(0.7, 2.0, 0.5), Static())
        state = rule.state(0.0)
        assert state.scale == 1.0
        assert state.intensity == 0.5

        overridden = Compose(Bob(5.0, 0.0), Bob(1.0, 0.0)).state(0.0)
        assert overridden.y == 1.0

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            Compose()

    def test_accepts_any_motion_rule(self):
        class Tilt:
            def state(self, t: float) -> DerivedState:
                return DerivedState(angle=t / 10)

        tilt: MotionRule = Tilt()
        state = Compose(Bob(0.0, 0.2), tilt).state(2.0)
        assert state.angle == pytest.approx(0.2)
        assert state.y == pytest.approx(math.sin(2.0) * 0.2)
