"""Tests for the terminal front end."""

import json
from itertools import count

import pytest
from src.core import Lexicon
from src.environment import Board, GameConfig, Round
from src.main import load_config, main, parse_path, run_round


def make_round(**config):
    return Round.create(
        config=GameConfig(**config),
        lexicon=Lexicon(["cat", "cats"]),
        board=Board.from_rows(["CATS", "XXXX"]),
    )


def frozen_clock():
    return 0.0


def no_input(prompt=""):
    raise EOFError


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("rows: 4\ncols: 6\nseed: 9\nround_seconds: 60\n")
        config = load_config(str(path))
        assert (config.rows, config.cols, config.seed) == (4, 6, 9)
        assert config.round_seconds == 60

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("round_seconds: 5\nwarning_seconds: 10\n")
        with pytest.raises(ValueError):
            load_config(str(path))


class TestParsePath:
    """Test parsing of typed paths."""

    def test_pairs(self):
        assert parse_path("0,0 0,1  1,2") == [(0, 0), (0, 1), (1, 2)]

    def test_empty(self):
        assert parse_path("") == []

    @pytest.mark.parametrize("text", ["0", "0,1,2", "a,b"])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            parse_path(text)


class TestRunRound:
    """Test scripted play."""

    def test_scores_words(self, capsys):
        game_round = make_round()
        result = run_round(game_round, ["0,0 0,1 0,2", "0,0 0,1 0,2 0,3"], clock=frozen_clock)
        assert result.words == ["cat", "cats"]
        assert result.score == 2
        assert result.end_reason == "Input ended"
        assert "✓ CAT +1" in capsys.readouterr().out

    def test_reports_rejections(self, capsys):
        game_round = make_round()
        run_round(game_round, ["0,0 0,1 0,2", "0,0 0,1 0,2"], clock=frozen_clock)
        assert "already found" in capsys.readouterr().out

    def test_bad_input_is_skipped(self, capsys):
        game_round = make_round()
        result = run_round(game_round, ["hello", "9,9", "0,0 0,1 0,2"], clock=frozen_clock)
        assert result.words == ["cat"]
        assert "Error" in capsys.readouterr().err

    def test_quit(self):
        game_round = make_round()
        result = run_round(game_round, ["quit", "0,0 0,1 0,2"], clock=frozen_clock)
        assert result.words == []
        assert result.end_reason == "Quit by player"

    def test_pause(self, capsys):
        game_round = make_round()
        run_round(game_round, ["pause"], clock=frozen_clock)
        assert game_round.timer.running is False
        assert "Paused" in capsys.readouterr().out

    def test_time_runs_out(self, capsys):
        game_round = make_round(round_seconds=30, warning_seconds=5)
        ticks = count(0, 20)
        result = run_round(
            game_round,
            ["0,0 0,1 0,2", "0,0 0,1 0,2 0,3"],
            clock=lambda: float(next(ticks)),
        )
        # First command at t=20 is in time, second at t=40 is not
        assert result.words == ["cat"]
        assert result.end_reason == "Time up"
        assert "Time up!" in capsys.readouterr().out


class TestMain:
    """Test the CLI entry point."""

    def test_plays_and_saves(self, tmp_path, monkeypatch, capsys):
        words = tmp_path / "words.txt"
        words.write_text("cat\ncats\n")
        output = tmp_path / "out" / "round.json"

        monkeypatch.setattr("builtins.input", no_input)
        assert main(["--words", str(words), "--seed", "1", "--output", str(output)]) == 0

        data = json.loads(output.read_text())
        assert data["config"]["seed"] == 1
        assert data["config"]["word_list"] == str(words)
        assert len(data["board"]) == 5
        assert "=== Round Summary ===" in capsys.readouterr().out

    def test_fallback_warning(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", no_input)
        assert main([]) == 0
        assert "fallback word list" in capsys.readouterr().err

    def test_bad_config(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err
