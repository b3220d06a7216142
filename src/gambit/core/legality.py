"""Legality filter: prunes pseudo-legal moves by simulating them."""

from __future__ import annotations

from gambit.core.apply import apply_move, queen_promotion
from gambit.core.attacks import is_attacked
from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator


def is_malformed_pawn_diagonal(move: Move, board: Board) -> bool:
    """A pawn diagonal with neither an enemy piece to take nor an en passant victim."""
    if move.piece.piece_type != PieceType.PAWN or move.to_sq[1] == move.from_sq[1]:
        return False
    if move.en_passant_killed_pawn is not None:
        return False
    target = board[move.to_sq]
    return target is None or target.color == move.piece.color


def leaves_king_safe(move: Move, board: Board) -> bool:
    """Simulate *move* on a copy of *board*; is the mover's king safe afterwards?"""
    color = move.piece.color
    after = apply_move(move, board.copy(), queen_promotion)
    return not is_attacked(after, after.king_square(color), color)


def is_legal_move(move: Move, board: Board) -> bool:
    """Whether a pseudo-legal *move* may be played on *board*."""
    if is_malformed_pawn_diagonal(move, board):
        return False
    target = board[move.to_sq]
    if target is not None and target.piece_type == PieceType.KING:
        return False
    return leaves_king_safe(move, board)


def generate_legal_moves(board: Board, color: Color) -> list[Move]:
    """All legal moves of *color* on *board*."""
    gen = MoveGenerator(board)
    moves = gen.generate_pseudo_legal_moves(color)
    return [m for m in moves if is_legal_move(m, board)]
