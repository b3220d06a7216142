"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.core.piece import Piece
from gambit.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class CastleRookMove:
    """Rook relocation that accompanies a castling king move."""

    rook_from: Square
    rook_to: Square


@dataclass(frozen=True, slots=True)
class Move:
    """A single move as produced by the move generator.

    Promotion is not part of the move: it is chosen when the move is
    applied. ``piece`` is informational and ignored by equality and
    hashing, since ``from_sq`` already identifies the moving piece.
    """

    piece: Piece = field(compare=False)
    from_sq: Square
    to_sq: Square
    castle: CastleRookMove | None = None
    en_passant_killed_pawn: Square | None = None

    @property
    def is_castle(self) -> bool:
        return self.castle is not None

    @property
    def is_en_passant(self) -> bool:
        return self.en_passant_killed_pawn is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
