"""Tests for the command-line entry point."""

import logging

import pytest

from gambit.app import main
from gambit.core.notation import STARTING_FEN


class TestShow:
    def test_default_position(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["show"]) == 0
        out = capsys.readouterr().out
        assert STARTING_FEN in out
        assert "f42356324" in out

    def test_bad_fen(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            assert main(["show", "--fen", "not a fen"]) == 2
        assert "Invalid FEN" in caplog.text


class TestPerft:
    def test_total(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["perft", "--depth", "2"]) == 0
        assert capsys.readouterr().out.strip() == "400"

    def test_divide(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["perft", "--depth", "1", "--divide"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[-1] == "Total: 20"
        assert "e2e4: 1" in lines

    def test_zero_depth_divide(self) -> None:
        assert main(["perft", "--depth", "0", "--divide"]) == 2


class TestPlay:
    def test_seeded_games(self, capsys: pytest.CaptureFixture[str]) -> None:
        argv = ["play", "--games", "2", "--seed", "5", "--max-plies", "40"]
        assert main(argv) == 0
        first = capsys.readouterr().out
        assert first.count("Game ") == 2
        assert "Draws:" in first

        assert main(argv) == 0
        assert capsys.readouterr().out == first

    def test_finished_position(self, capsys: pytest.CaptureFixture[str]) -> None:
        fen = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"
        assert main(["play", "--fen", fen]) == 0
        out = capsys.readouterr().out
        assert "Game 1: DRAW (STALEMATE) after 0 plies" in out

    def test_invalid_max_plies(self) -> None:
        assert main(["play", "--max-plies", "0"]) == 2

    def test_missing_command(self) -> None:
        with pytest.raises(SystemExit):
            main([])
