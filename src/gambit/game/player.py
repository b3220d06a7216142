"""Concrete player implementations."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import TYPE_CHECKING

from gambit.core.apply import queen_promotion
from gambit.core.enums import Color, PieceType
from gambit.game.interfaces import IPlayer, MoveStrategy
from gambit.game.strategies import random_move, random_promotion

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.move import Move


class StrategyPlayer(IPlayer):
    """A participant that delegates its decisions to callables.

    Args:
        color: Side the player plays.
        name: Display name.
        move_strategy: ``(Board, Color) -> Move`` drawing from the legal moves.
        promotion: ``() -> PieceType`` called when one of its pawns promotes.
    """

    __slots__ = ("_color", "_name", "_move_strategy", "_promotion")

    def __init__(
        self,
        color: Color,
        move_strategy: MoveStrategy,
        name: str = "",
        promotion: Callable[[], PieceType] = queen_promotion,
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._move_strategy = move_strategy
        self._promotion = promotion

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def choose_move(self, board: Board) -> Move:
        return self._move_strategy(board, self._color)

    def choose_promotion(self) -> PieceType:
        return self._promotion()

    @classmethod
    def random(cls, color: Color, rng: random.Random | None = None) -> StrategyPlayer:
        """Player picking random legal moves and random promotions."""
        return cls(
            color,
            lambda board, side: random_move(board, side, rng),
            name=f"Random ({color})",
            promotion=lambda: random_promotion(rng),
        )
