"""FEN parsing/serialisation and coordinate move text."""

from __future__ import annotations

from typing import NamedTuple

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.legality import generate_legal_moves
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


class FenPosition(NamedTuple):
    """Board plus the FEN fields the board itself does not hold."""

    board: Board
    side_to_move: Color
    fullmove_number: int = 1


def position_from_fen(fen: str) -> FenPosition:
    """Parse a FEN string.

    The en passant field flags the pawn that has just advanced two
    squares; the halfmove field becomes the fifty-move counter.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = 7 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    if castling_part != "-":
        rights = dict(_CASTLING_CHARS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            board.castling |= right

    # 4. En passant: flag the pawn standing in front of the target square
    if ep_part != "-":
        ep_row, ep_col = parse_square(ep_part)
        expected_row = 5 if side == Color.WHITE else 2
        if ep_row != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        pawn_row = ep_row - 1 if side == Color.WHITE else ep_row + 1
        pawn = board[(pawn_row, ep_col)]
        if pawn is None or pawn.piece_type != PieceType.PAWN or pawn.color == side:
            raise ValueError(f"Invalid FEN en-passant square (no pawn): {ep_part!r}")
        pawn.en_passant_vulnerable = True

    # 5-6. Clocks (optional)
    if len(parts) > 4:
        halfmove = int(parts[4])
        if halfmove < 0:
            raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
        board.fifty_move_counter = halfmove

    fullmove = 1
    if len(parts) > 5:
        fullmove = int(parts[5])
        if fullmove < 1:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return FenPosition(board, side, fullmove)


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string, keeping only the board."""
    return position_from_fen(fen).board


def _en_passant_square(board: Board) -> Square | None:
    for (row, col), piece in board.occupied():
        if piece.en_passant_vulnerable:
            behind = row - 1 if piece.color == Color.WHITE else row + 1
            return (behind, col)
    return None


def board_to_fen(
    board: Board, side_to_move: Color = Color.WHITE, fullmove_number: int = 1
) -> str:
    """Serialise *board* to FEN."""
    # 1. Board
    rows: list[str] = []
    for row in range(7, -1, -1):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS if board.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_sq = _en_passant_square(board)
    ep_str = square_name(ep_sq) if ep_sq is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{board.fifty_move_counter} {fullmove_number}"
    )


# ── Coordinate move text ─────────────────────────────────────────────────────


def move_to_uci(move: Move, promotion: PieceType | None = None) -> str:
    """Long-algebraic text, e.g. ``e2e4`` or ``e7e8q``."""
    text = str(move)
    if promotion is not None:
        text += _PROMO_CHARS[promotion]
    return text


def parse_uci(board: Board, color: Color, text: str) -> tuple[Move, PieceType | None]:
    """Resolve coordinate text against the legal moves of *color*.

    Returns the move and the requested promotion piece, if any.
    """
    text = text.strip().lower()
    if len(text) not in (4, 5):
        raise ValueError(f"Invalid move text: {text!r}")
    from_sq = parse_square(text[:2])
    to_sq = parse_square(text[2:4])

    promotion: PieceType | None = None
    if len(text) == 5:
        for ptype, ch in _PROMO_CHARS.items():
            if ch == text[4]:
                promotion = ptype
                break
        else:
            raise ValueError(f"Invalid promotion piece in move text: {text!r}")

    for move in generate_legal_moves(board, color):
        if move.from_sq == from_sq and move.to_sq == to_sq:
            return move, promotion
    raise ValueError(f"Illegal move for {color}: {text!r}")
