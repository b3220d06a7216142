"""Perft: leaf-node counting for move-generator verification.

Promotion is resolved at application time, so a promoting move counts
once (it is played as a queen).
"""

from __future__ import annotations

from gambit.core.apply import apply_move, queen_promotion
from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.legality import generate_legal_moves
from gambit.core.notation import move_to_uci


def perft(board: Board, color: Color, depth: int) -> int:
    """Count leaf nodes *depth* plies below *board* with *color* to move."""
    if depth == 0:
        return 1
    moves = generate_legal_moves(board, color)
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        child = apply_move(move, board.copy(), queen_promotion)
        nodes += perft(child, color.opposite, depth - 1)
    return nodes


def perft_divide(board: Board, color: Color, depth: int) -> dict[str, int]:
    """Per-root-move node counts, keyed by coordinate text."""
    if depth < 1:
        raise ValueError(f"perft_divide needs depth >= 1, got {depth}")
    out: dict[str, int] = {}
    for move in generate_legal_moves(board, color):
        child = apply_move(move, board.copy(), queen_promotion)
        out[move_to_uci(move)] = perft(child, color.opposite, depth - 1)
    return out
