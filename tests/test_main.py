"""Tests for the driver's argument handling and scheduler wiring."""

import dataclasses
import random

from snake.config import CFG
from snake.game import GameState
from snake.main import advance_clocks, build_config, build_scheduler, parse_args


class TestDriverSetup:

    def test_defaults_match_config(self):
        cfg = build_config(parse_args([]))
        assert cfg == CFG

    def test_overrides(self):
        args = parse_args(["--seed", "7", "--tick-ms", "50", "--countdown-ms", "500", "--debug"])
        cfg = build_config(args)
        assert (cfg.seed, cfg.tick_ms, cfg.countdown_ms) == (7, 50, 500)
        assert cfg.time_limit_s == CFG.time_limit_s
        assert args.debug is True

    def test_scheduler_has_two_independent_clocks(self):
        game = GameState(20, 20, rng=random.Random(0))
        sched = build_scheduler(game, CFG, now_ms=0)
        periods = {e.name: e.period_ms for e in sched.entries}
        assert periods == {"tick": 100, "countdown": 1000}

    def test_full_board_stops_the_loop(self):
        cfg = dataclasses.replace(CFG, start_cell=(0, 0))
        game = GameState(2, 1, cfg=cfg, rng=random.Random(0))
        sched = build_scheduler(game, cfg, now_ms=0)
        assert advance_clocks(sched, 50) is True
        assert advance_clocks(sched, 100) is False
        assert game.score == 0
        assert game.head == (0, 0)
