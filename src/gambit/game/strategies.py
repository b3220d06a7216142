"""Reference move-selection and promotion strategies."""

from __future__ import annotations

import random

from gambit.core.board import Board
from gambit.core.enums import PROMOTION_TYPES, Color, PieceType
from gambit.core.legality import generate_legal_moves
from gambit.core.move import Move


def random_move(board: Board, color: Color, rng: random.Random | None = None) -> Move:
    """Uniformly random legal move of *color*."""
    moves = generate_legal_moves(board, color)
    if not moves:
        raise ValueError(f"No legal moves for {color}")
    return (rng or random).choice(moves)


def random_promotion(rng: random.Random | None = None) -> PieceType:
    return (rng or random).choice(PROMOTION_TYPES)
