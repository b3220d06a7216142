"""Pseudo-legal move generation.

Moves produced here follow each piece's movement pattern and the board
occupancy, but may leave the mover's own king attacked. Pawn diagonals
are emitted whether or not there is something to capture;
:mod:`gambit.core.legality` prunes them.
"""

from __future__ import annotations

from gambit.core.attacks import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    is_attacked,
    pawn_direction,
)
from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.move import CastleRookMove, Move
from gambit.core.piece import Piece
from gambit.core.types import Square, in_bounds

_KING_HOME_COL = 4


def home_row(color: Color) -> int:
    """Back rank of *color*."""
    return 0 if color == Color.WHITE else 7


def pawn_start_row(color: Color) -> int:
    return 1 if color == Color.WHITE else 6


def promotion_row(color: Color) -> int:
    """Farthest rank for a pawn of *color*."""
    return 7 if color == Color.WHITE else 0


class MoveGenerator:
    """Generates pseudo-legal moves on a given :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves of *color*, square by square in row-major order."""
        moves: list[Move] = []
        for sq, piece in self._board.pieces(color):
            moves.extend(self.pseudo_moves(piece, sq))
        return moves

    def pseudo_moves(self, piece: Piece, sq: Square) -> list[Move]:
        """Pseudo-legal moves of *piece* standing on *sq*."""
        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(piece, sq, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_stepping(piece, sq, KNIGHT_OFFSETS, moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(piece, sq, BISHOP_DIRS, moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(piece, sq, ROOK_DIRS, moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(piece, sq, QUEEN_DIRS, moves)
        else:
            self._gen_stepping(piece, sq, KING_OFFSETS, moves)
            self._gen_castling(piece, sq, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, sq: Square, moves: list[Move]) -> None:
        board = self._board
        row, col = sq
        direction = pawn_direction(piece.color)
        ahead = row + direction
        if not in_bounds(ahead, col):
            return

        if board.is_empty((ahead, col)):
            moves.append(Move(piece, sq, (ahead, col)))
            if row == pawn_start_row(piece.color):
                two_ahead = (row + 2 * direction, col)
                if board.is_empty(two_ahead):
                    moves.append(Move(piece, sq, two_ahead))

        # Diagonals go out unconditionally; legality keeps real captures only.
        for target_col in (col - 1, col + 1):
            if in_bounds(ahead, target_col):
                moves.append(Move(piece, sq, (ahead, target_col)))

        for target_col in (col - 1, col + 1):
            if not in_bounds(row, target_col):
                continue
            neighbour = board[(row, target_col)]
            if (
                neighbour is not None
                and neighbour.piece_type == PieceType.PAWN
                and neighbour.color != piece.color
                and neighbour.en_passant_vulnerable
            ):
                moves.append(
                    Move(
                        piece,
                        sq,
                        (ahead, target_col),
                        en_passant_killed_pawn=(row, target_col),
                    )
                )

    def _gen_stepping(
        self,
        piece: Piece,
        sq: Square,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        row, col = sq
        for dr, dc in offsets:
            r = row + dr
            c = col + dc
            if in_bounds(r, c):
                target = board[(r, c)]
                if target is None or target.color != piece.color:
                    moves.append(Move(piece, sq, (r, c)))

    def _gen_sliding(
        self,
        piece: Piece,
        sq: Square,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        row, col = sq
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            while in_bounds(r, c):
                target = board[(r, c)]
                if target is None:
                    moves.append(Move(piece, sq, (r, c)))
                else:
                    if target.color != piece.color:
                        moves.append(Move(piece, sq, (r, c)))
                    break
                r += dr
                c += dc

    def _gen_castling(self, piece: Piece, king_sq: Square, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        row = home_row(color)
        if king_sq != (row, _KING_HOME_COL):
            return
        if not board.has_castling_right(CastlingRights.both(color)):
            return
        if is_attacked(board, king_sq, color):
            return

        if board.has_castling_right(CastlingRights.kingside(color)):
            if (
                self._has_home_rook(color, (row, 7))
                and board.is_empty((row, 5))
                and board.is_empty((row, 6))
                and not is_attacked(board, (row, 5), color)
            ):
                moves.append(
                    Move(
                        piece,
                        king_sq,
                        (row, 6),
                        castle=CastleRookMove((row, 7), (row, 5)),
                    )
                )

        if board.has_castling_right(CastlingRights.queenside(color)):
            if (
                self._has_home_rook(color, (row, 0))
                and board.is_empty((row, 3))
                and board.is_empty((row, 2))
                and board.is_empty((row, 1))
                and not is_attacked(board, (row, 3), color)
            ):
                moves.append(
                    Move(
                        piece,
                        king_sq,
                        (row, 2),
                        castle=CastleRookMove((row, 0), (row, 3)),
                    )
                )

    def _has_home_rook(self, color: Color, corner: Square) -> bool:
        rook = self._board[corner]
        return (
            rook is not None
            and rook.color == color
            and rook.piece_type == PieceType.ROOK
        )


def pseudo_moves(piece: Piece, from_sq: Square, board: Board) -> list[Move]:
    """Pseudo-legal moves of *piece* on *from_sq*."""
    return MoveGenerator(board).pseudo_moves(piece, from_sq)
