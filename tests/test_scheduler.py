"""Tests for the fixed-period scheduler and its wiring to the game clocks."""

import random

import pytest

from snake.game import GameState, Phase
from snake.scheduler import Scheduler


class TestScheduler:

    def test_cadence_ratio(self):
        """100 ms and 1000 ms commands fire 10:1 over simulated frames."""
        counts = {"tick": 0, "countdown": 0}
        sched = Scheduler(0)
        sched.every(100, lambda: counts.__setitem__("tick", counts["tick"] + 1), name="tick")
        sched.every(1000, lambda: counts.__setitem__("countdown", counts["countdown"] + 1), name="countdown")

        for now in range(0, 3001, 16):
            sched.advance(now)
        sched.advance(3000)
        assert counts == {"tick": 30, "countdown": 3}

    def test_catches_up_after_slow_frame(self):
        fired = []
        sched = Scheduler(0)
        sched.every(100, lambda: fired.append("tick"))
        assert sched.advance(350) == 3
        assert len(fired) == 3
        assert sched.advance(399) == 0
        assert sched.advance(400) == 1

    def test_due_order_across_commands(self):
        log = []
        sched = Scheduler(0)
        sched.every(100, lambda: log.append("tick"), name="tick")
        sched.every(1000, lambda: log.append("countdown"), name="countdown")
        sched.advance(1000)
        assert log.count("tick") == 10
        assert log[-2:] == ["tick", "countdown"]

    def test_nothing_due_before_first_period(self):
        fired = []
        sched = Scheduler(500)
        sched.every(100, lambda: fired.append(1))
        sched.advance(599)
        assert fired == []

    def test_reset_rearms_from_now(self):
        fired = []
        sched = Scheduler(0)
        sched.every(1000, lambda: fired.append(1))
        sched.advance(900)
        sched.reset(900)
        sched.advance(1500)
        assert fired == []
        sched.advance(1900)
        assert fired == [1]

    def test_entry_name_defaults_to_callable(self):
        def countdown():
            pass

        entry = Scheduler().every(1000, countdown)
        assert entry.name == "countdown"

    @pytest.mark.parametrize("period", [0, -100, 1.5])
    def test_rejects_bad_period(self, period):
        with pytest.raises(ValueError):
            Scheduler().every(period, lambda: None)

    def test_rejects_clock_going_backwards(self):
        sched = Scheduler(1000)
        with pytest.raises(ValueError):
            sched.advance(999)


class TestGameClocks:

    def _wire(self, game):
        sched = Scheduler(0)
        sched.every(100, game.tick, name="tick")
        sched.every(1000, game.countdown_tick, name="countdown")
        return sched

    def test_one_second_of_play(self, state):
        sched = self._wire(state)
        sched.advance(1000)
        assert state.head == (15, 5)
        assert state.time_left == 59

    def test_pause_stops_both_clocks(self, state):
        sched = self._wire(state)
        sched.advance(500)
        state.toggle_pause()
        before = state.snapshot()
        sched.advance(5000)
        assert state.snapshot() == before

    def test_timeout_through_scheduler(self):
        game = GameState(20, 20, rng=random.Random(3))
        sched = Scheduler(0)
        sched.every(1000, game.countdown_tick, name="countdown")
        sched.advance(60_000)
        assert game.phase is Phase.OVER
        assert game.time_left == 0
