"""Compact board key used for repetition detection.

Layout: one hex digit for the castling rights, then one hex digit per
square in row-major order starting at a1. A square digit is
``color << 3 | piece_type`` (``piece_type`` runs 1..6), or ``f`` when
the square is empty. Counters, the repetition map and en passant flags
are not part of the key.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES

_EMPTY = 0xF
_KEY_LENGTH = 1 + 64

# Most significant bit first: white king-side, white queen-side,
# black king-side, black queen-side.
_CASTLING_BITS: tuple[tuple[CastlingRights, int], ...] = (
    (CastlingRights.WHITE_KINGSIDE, 0b1000),
    (CastlingRights.WHITE_QUEENSIDE, 0b0100),
    (CastlingRights.BLACK_KINGSIDE, 0b0010),
    (CastlingRights.BLACK_QUEENSIDE, 0b0001),
)


def encode_board(board: Board) -> str:
    """Serialise placement and castling rights to a 65-digit hex string."""
    castling = 0
    for right, bit in _CASTLING_BITS:
        if board.castling & right:
            castling |= bit

    digits = [format(castling, "x")]
    for sq in ALL_SQUARES:
        piece = board[sq]
        if piece is None:
            digits.append("f")
        else:
            digits.append(format((int(piece.color) << 3) | int(piece.piece_type), "x"))
    return "".join(digits)


def decode_board(key: str) -> Board:
    """Rebuild a board from :func:`encode_board` output.

    Only placement and castling rights come back; the fifty-move counter
    is zero and the repetition map empty.
    """
    if len(key) != _KEY_LENGTH:
        raise ValueError(f"Invalid board key (need {_KEY_LENGTH} digits): {key!r}")
    try:
        values = [int(ch, 16) for ch in key]
    except ValueError:
        raise ValueError(f"Invalid board key (non-hex digit): {key!r}") from None

    board = Board()
    castling = CastlingRights.NONE
    for right, bit in _CASTLING_BITS:
        if values[0] & bit:
            castling |= right
    board.castling = castling

    for sq, value in zip(ALL_SQUARES, values[1:]):
        if value == _EMPTY:
            continue
        code = value & 0b111
        if not PieceType.PAWN <= code <= PieceType.KING:
            raise ValueError(f"Invalid piece code {value:x} in board key: {key!r}")
        board[sq] = Piece(Color(value >> 3), PieceType(code))
    return board
