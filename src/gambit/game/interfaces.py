"""Abstract interfaces for the game layer.

The session depends on these, not on concrete players, so any move
source (scripted, random, an external bot) can take part in a game.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from gambit.core.enums import Color, PieceType

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.move import Move


MoveStrategy = Callable[["Board", Color], "Move"]


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def choose_move(self, board: Board) -> Move:
        """Pick one of the legal moves of :attr:`color` on *board*."""

    @abstractmethod
    def choose_promotion(self) -> PieceType:
        """Piece to promote to when a pawn reaches the last rank."""
