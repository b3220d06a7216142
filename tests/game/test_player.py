"""Tests for players and move strategies."""

import random

import pytest

from gambit.core.board import Board
from gambit.core.enums import PROMOTION_TYPES, Color, PieceType
from gambit.core.legality import generate_legal_moves
from gambit.core.notation import board_from_fen
from gambit.game.interfaces import IPlayer
from gambit.game.player import StrategyPlayer
from gambit.game.strategies import random_move, random_promotion


class TestStrategyPlayer:
    def test_properties(self) -> None:
        first = lambda board, color: generate_legal_moves(board, color)[0]  # noqa: E731
        p = StrategyPlayer(Color.WHITE, first, name="Scripted")
        assert isinstance(p, IPlayer)
        assert p.color == Color.WHITE
        assert p.name == "Scripted"

    def test_default_name(self) -> None:
        p = StrategyPlayer(Color.BLACK, random_move)
        assert "black" in p.name.lower()

    def test_delegates_move(self, starting_board: Board) -> None:
        seen = []

        def strategy(board: Board, color: Color):
            seen.append((board, color))
            return generate_legal_moves(board, color)[0]

        p = StrategyPlayer(Color.WHITE, strategy)
        p.choose_move(starting_board)
        assert seen == [(starting_board, Color.WHITE)]

    def test_default_promotion_is_queen(self) -> None:
        p = StrategyPlayer(Color.WHITE, random_move)
        assert p.choose_promotion() == PieceType.QUEEN

    def test_custom_promotion(self) -> None:
        p = StrategyPlayer(Color.WHITE, random_move, promotion=lambda: PieceType.ROOK)
        assert p.choose_promotion() == PieceType.ROOK

    def test_random_factory(self, starting_board: Board) -> None:
        p = StrategyPlayer.random(Color.BLACK, random.Random(7))
        assert p.name == "Random (black)"
        assert p.choose_move(starting_board) in generate_legal_moves(
            starting_board, Color.BLACK
        )
        assert p.choose_promotion() in PROMOTION_TYPES


class TestStrategies:
    def test_random_move_is_legal(self, starting_board: Board) -> None:
        rng = random.Random(1)
        legal = generate_legal_moves(starting_board, Color.WHITE)
        for _ in range(10):
            assert random_move(starting_board, Color.WHITE, rng) in legal

    def test_seeded_is_reproducible(self, starting_board: Board) -> None:
        a = random_move(starting_board, Color.WHITE, random.Random(42))
        b = random_move(starting_board, Color.WHITE, random.Random(42))
        assert a == b

    def test_no_legal_moves(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        with pytest.raises(ValueError, match="No legal moves"):
            random_move(board, Color.BLACK)

    def test_random_promotion(self) -> None:
        rng = random.Random(3)
        picks = {random_promotion(rng) for _ in range(50)}
        assert picks <= set(PROMOTION_TYPES)
        assert PieceType.KING not in picks
