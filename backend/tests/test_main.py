"""
Tests for main.py - session runner and command-line entry point.
"""

import argparse
import json
import os
import sys
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import OVER, RUNNING  # noqa: E402
from main import build_parser, main, run_session  # noqa: E402


def make_params(**overrides) -> argparse.Namespace:
    values = dict(
        grid_size=10,
        speed="fast",
        player="greedy",
        max_rounds=50,
        seed=7,
        headless=True,
        show_board=False,
        video=None,
    )
    values.update(overrides)
    return argparse.Namespace(**values)


class TestRunSession:
    """Tests for run_session()."""

    def test_headless_session_summary(self):
        result = run_session(make_params())

        assert set(result) == {"game_id", "score", "rounds", "snake_length", "death_reason", "status"}
        assert result["status"] in {RUNNING, OVER}
        assert result["rounds"] <= 50
        assert result["score"] % 10 == 0
        assert result["snake_length"] == 3 + result["score"] // 10
        if result["status"] == RUNNING:
            assert result["rounds"] == 50
            assert result["death_reason"] is None

    def test_seed_makes_sessions_reproducible(self):
        first = run_session(make_params(player="random", max_rounds=200))
        second = run_session(make_params(player="random", max_rounds=200))

        for key in ("score", "rounds", "snake_length", "death_reason", "status"):
            assert first[key] == second[key]

    def test_game_id_is_passed_through(self):
        result = run_session(make_params(game_id="session-1"))
        assert result["game_id"] == "session-1"

    def test_realtime_session_respects_round_limit(self):
        result = run_session(make_params(headless=False, speed="2", max_rounds=10))
        assert result["rounds"] <= 10

    def test_show_board_prints_each_tick(self, capsys):
        run_session(make_params(max_rounds=3, show_board=True))
        out = capsys.readouterr().out
        assert "Round 1 |" in out
        assert " H " in out or " H\n" in out

    def test_video_uses_recorded_history(self):
        with patch("services.frame_renderer.SnakeFrameRenderer.generate_video") as generate_video:
            run_session(make_params(max_rounds=5, video="out/session.mp4"))

        history, path = generate_video.call_args[0]
        assert path == "out/session.mp4"
        assert history[0].round_number == 0
        assert len(history) >= 2

    def test_unknown_player_raises(self):
        with pytest.raises(ValueError):
            run_session(make_params(player="llm"))

    def test_invalid_speed_raises(self):
        with pytest.raises(ValueError):
            run_session(make_params(speed="warp"))


class TestCli:
    """Tests for the argparse entry point."""

    def test_parser_defaults(self, monkeypatch):
        for name in ("SNAKE_GRID_SIZE", "SNAKE_SPEED_MS", "SNAKE_SPEED_PRESET", "SNAKE_PLAYER", "SNAKE_MAX_ROUNDS"):
            monkeypatch.delenv(name, raising=False)

        args = build_parser().parse_args([])

        assert args.grid_size == 20
        assert args.speed == "200"
        assert args.player == "greedy"
        assert args.max_rounds == 1000
        assert args.headless is False
        assert args.video is None

    def test_main_prints_json_summary(self, capsys):
        argv = ["main.py", "--headless", "--seed", "3", "--max-rounds", "30", "--grid-size", "10"]
        with patch.object(sys, "argv", argv):
            main()

        out = capsys.readouterr().out
        assert "Session Result Summary:" in out
        summary = json.loads(out.split("Session Result Summary:")[1])
        assert summary["rounds"] <= 30

    def test_main_reports_bad_grid_size(self):
        argv = ["main.py", "--headless", "--grid-size", "3"]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit) as excinfo:
                main()
        assert excinfo.value.code == 2

    def test_main_rejects_non_positive_rounds(self):
        argv = ["main.py", "--headless", "--max-rounds", "0"]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit):
                main()
