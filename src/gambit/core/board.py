"""Board - piece placement, castling rights and draw bookkeeping."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.errors import KingNotFoundError
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 board.

    Besides the placement it owns the castling rights, the half-move
    counter for the fifty-move rule and the occurrence count of every
    encoded state seen so far. All of it is mutated only by
    :func:`~gambit.core.apply.apply_move`.
    """

    __slots__ = ("_tiles", "castling", "fifty_move_counter", "repetitions")

    def __init__(self) -> None:
        self._tiles: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        self.castling = CastlingRights.NONE
        self.fifty_move_counter = 0
        self.repetitions: dict[str, int] = {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._tiles[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._tiles[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        row, col = sq
        return self._tiles[row][col] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All occupied squares in row-major order."""
        tiles = self._tiles
        for sq in ALL_SQUARES:
            piece = tiles[sq[0]][sq[1]]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """Squares and pieces of *color*, row-major."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color* by scanning the whole board."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        raise KingNotFoundError(f"No {color.name} king on board")

    def has_castling_right(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: every piece and the repetition map are duplicated."""
        b = Board()
        b._tiles = [
            [p.copy() if p is not None else None for p in row] for row in self._tiles
        ]
        b.castling = self.castling
        b.fifty_move_counter = self.fifty_move_counter
        b.repetitions = self.repetitions.copy()
        return b

    def clear(self) -> None:
        self._tiles = [[None] * 8 for _ in range(8)]
        self.castling = CastlingRights.NONE
        self.fifty_move_counter = 0
        self.repetitions = {}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position with full castling rights."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.WHITE, pt)
            b[(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(6, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(7, col)] = Piece(Color.BLACK, pt)
        b.castling = CastlingRights.ALL
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Same placement and castling rights; counters are not compared."""
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles and self.castling == other.castling

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for col in range(8):
                p = self._tiles[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def create_starting_board() -> Board:
    """Fresh board in the standard starting position."""
    return Board.initial()
