"""Attack detection and the direction tables shared with move generation."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.types import Square, in_bounds

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)
_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)


def pawn_direction(color: Color) -> int:
    """Row step of a pawn of *color* moving forward."""
    return 1 if color == Color.WHITE else -1


def _ray_hits(
    board: Board,
    sq: Square,
    defender: Color,
    directions: tuple[tuple[int, int], ...],
    attackers: tuple[PieceType, ...],
) -> bool:
    row, col = sq
    for dr, dc in directions:
        r = row + dr
        c = col + dc
        while in_bounds(r, c):
            piece = board[(r, c)]
            if piece is not None:
                if piece.color != defender and piece.piece_type in attackers:
                    return True
                break
            r += dr
            c += dc
    return False


def _offset_hits(
    board: Board,
    sq: Square,
    defender: Color,
    offsets: tuple[tuple[int, int], ...],
    attacker: PieceType,
) -> bool:
    row, col = sq
    for dr, dc in offsets:
        r = row + dr
        c = col + dc
        if in_bounds(r, c):
            piece = board[(r, c)]
            if (
                piece is not None
                and piece.color != defender
                and piece.piece_type == attacker
            ):
                return True
    return False


def is_attacked(board: Board, sq: Square, defender: Color) -> bool:
    """Is *sq* attacked by any piece of the side opposing *defender*?"""
    if _ray_hits(board, sq, defender, ROOK_DIRS, _ORTHOGONAL_ATTACKERS):
        return True
    if _ray_hits(board, sq, defender, BISHOP_DIRS, _DIAGONAL_ATTACKERS):
        return True
    if _offset_hits(board, sq, defender, KNIGHT_OFFSETS, PieceType.KNIGHT):
        return True
    if _offset_hits(board, sq, defender, KING_OFFSETS, PieceType.KING):
        return True

    # Enemy pawns attack from the squares diagonally in front of the defender.
    row, col = sq
    pawn_row = row + pawn_direction(defender)
    for pawn_col in (col - 1, col + 1):
        if in_bounds(pawn_row, pawn_col):
            piece = board[(pawn_row, pawn_col)]
            if (
                piece is not None
                and piece.color != defender
                and piece.piece_type == PieceType.PAWN
            ):
                return True
    return False
