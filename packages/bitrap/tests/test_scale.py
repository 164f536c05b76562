"""Tests for ScaleState cycle behavior."""
import math

import pytest

from bitrap.scale import ScaleState
from bitrap.types import ScaleStateError


def run_cycle(state, limit=10_000):
    """Tick until the cycle completes. Returns (ticks, completions)."""
    completions = []
    ticks = 0
    while not completions and ticks < limit:
        state.update(completions.append)
        ticks += 1
    return ticks, completions


class TestScaleStateBasics:
    def test_initial_state_is_zero(self):
        state = ScaleState(0.1)
        assert state.progress == 0.0
        assert state.direction == 0.0
        assert state.committed_progress == 0.0
        assert state.idle

    def test_update_while_idle_is_noop(self):
        state = ScaleState(0.1)
        called = []
        state.update(called.append)
        assert state.progress == 0.0
        assert called == []

    @pytest.mark.parametrize("step", [0.0, -0.5, 2.0])
    def test_invalid_step(self, step):
        with pytest.raises(ValueError):
            ScaleState(step)


class TestStartUpdating:
    def test_start_from_zero_moves_forward(self):
        state = ScaleState(0.1)
        started = []
        state.start_updating(lambda: started.append(True))
        assert state.direction == 1.0
        assert started == [True]
        assert not state.idle

    def test_start_while_animating_is_noop(self):
        state = ScaleState(0.1)
        started = []
        state.start_updating(lambda: started.append(True))
        state.update(lambda c: None)
        progress = state.progress
        state.start_updating(lambda: started.append(True))
        assert started == [True]
        assert state.progress == progress
        assert state.direction == 1.0

    def test_second_activation_reverses(self):
        state = ScaleState(0.25)
        state.start_updating(lambda: None)
        run_cycle(state)
        assert state.committed_progress == 1.0
        state.start_updating(lambda: None)
        assert state.direction == -1.0

    def test_start_from_uncommitted_value_raises(self):
        state = ScaleState(0.25)
        state._committed = 0.5
        with pytest.raises(ScaleStateError):
            state.start_updating(lambda: None)


class TestCycle:
    @pytest.mark.parametrize("step", [0.25, 0.125, 0.1, 0.1 / 7, 0.02 / 7])
    def test_cycle_takes_ceil_one_over_step_ticks(self, step):
        state = ScaleState(step)
        state.start_updating(lambda: None)
        ticks, completions = run_cycle(state)
        assert ticks == math.ceil(1 / step)
        assert completions == [1.0]

    def test_progress_snaps_and_direction_resets(self):
        state = ScaleState(0.3)
        state.start_updating(lambda: None)
        run_cycle(state)
        assert state.progress == 1.0
        assert state.committed_progress == 1.0
        assert state.direction == 0.0
        assert state.idle

    def test_progress_stays_within_one_unit(self):
        state = ScaleState(0.07)
        for _ in range(4):
            state.start_updating(lambda: None)
            committed = state.committed_progress
            done = []
            while not done:
                state.update(done.append)
                assert committed - 1 <= state.progress <= committed + 1
                assert state.idle == bool(done)

    def test_reverse_cycle_returns_to_zero(self):
        state = ScaleState(0.2)
        state.start_updating(lambda: None)
        run_cycle(state)
        state.start_updating(lambda: None)
        ticks, completions = run_cycle(state)
        assert ticks == 5
        assert completions == [0.0]
        assert state.progress == 0.0

    def test_progress_advances_by_step(self):
        state = ScaleState(0.25)
        state.start_updating(lambda: None)
        state.update(lambda c: None)
        assert state.progress == 0.25
        state.update(lambda c: None)
        assert state.progress == 0.5
