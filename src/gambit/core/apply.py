"""Move application: mutates a board according to a generated move."""

from __future__ import annotations

import logging
from collections.abc import Callable

from gambit.core.board import Board
from gambit.core.codec import encode_board
from gambit.core.enums import PROMOTION_TYPES, CastlingRights, Color, PieceType
from gambit.core.errors import KingCaptureError
from gambit.core.move import Move
from gambit.core.move_generator import pawn_start_row, promotion_row
from gambit.core.piece import Piece
from gambit.core.types import Square

_LOGGER = logging.getLogger(__name__)

PromotionChoice = Callable[[], PieceType]

_ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    (0, 0): (Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    (0, 7): (Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    (7, 0): (Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    (7, 7): (Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}


def queen_promotion() -> PieceType:
    """Promotion choice that always picks a queen."""
    return PieceType.QUEEN


def apply_move(move: Move, board: Board, promotion_choice: PromotionChoice) -> Board:
    """Apply *move* to *board* in place and return the same board.

    The move must come from legal move generation on this board; its
    provenance is not re-validated. *promotion_choice* is called exactly
    once when a pawn reaches its last rank. Bad input raises before the
    board is touched.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    captured = board[move.to_sq]
    if captured is not None and captured.piece_type == PieceType.KING:
        _LOGGER.error("Move %s captures the %s king", move, captured.color)
        raise KingCaptureError(f"Move {move} would capture the {captured.color} king")

    promotion: PieceType | None = None
    if (
        piece.piece_type == PieceType.PAWN
        and move.to_sq[0] == promotion_row(piece.color)
    ):
        promotion = promotion_choice()
        if promotion not in PROMOTION_TYPES:
            raise ValueError(f"Invalid promotion choice: {promotion!r}")

    key = encode_board(board)
    board.repetitions[key] = board.repetitions.get(key, 0) + 1

    if captured is not None:
        board.fifty_move_counter = 0
        _drop_corner_right(board, move.to_sq, captured)
    else:
        board.fifty_move_counter += 1
    if piece.piece_type == PieceType.PAWN:
        board.fifty_move_counter = 0

    board[move.to_sq] = piece
    board[move.from_sq] = None

    if move.castle is not None:
        board[move.castle.rook_to] = board[move.castle.rook_from]
        board[move.castle.rook_from] = None
        board.castling &= ~CastlingRights.both(piece.color)

    _update_castling(board, move, piece)

    if move.en_passant_killed_pawn is not None:
        board[move.en_passant_killed_pawn] = None

    _update_en_passant(board, move, piece)

    if promotion is not None:
        board[move.to_sq] = Piece(piece.color, PieceType(promotion))

    return board


# ── Castling bookkeeping ─────────────────────────────────────────────────────


def _update_castling(board: Board, move: Move, piece: Piece) -> None:
    if piece.piece_type == PieceType.KING:
        board.castling &= ~CastlingRights.both(piece.color)
    elif piece.piece_type == PieceType.ROOK:
        corner = _ROOK_CORNERS.get(move.from_sq)
        if corner is not None and corner[0] == piece.color:
            board.castling &= ~corner[1]


def _drop_corner_right(board: Board, sq: Square, captured: Piece) -> None:
    """A rook taken on its home corner takes that side's right with it."""
    corner = _ROOK_CORNERS.get(sq)
    if (
        corner is not None
        and captured.piece_type == PieceType.ROOK
        and captured.color == corner[0]
    ):
        board.castling &= ~corner[1]


def _update_en_passant(board: Board, move: Move, piece: Piece) -> None:
    for _, other in board.occupied():
        other.en_passant_vulnerable = False

    if (
        piece.piece_type == PieceType.PAWN
        and abs(move.to_sq[0] - move.from_sq[0]) == 2
        and move.from_sq[0] == pawn_start_row(piece.color)
    ):
        piece.en_passant_vulnerable = True
