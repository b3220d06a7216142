"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import Color, create_starting_board, generate_legal_moves

    board = create_starting_board()
    for move in generate_legal_moves(board, Color.WHITE):
        print(move)
"""

from gambit.core.apply import PromotionChoice, apply_move, queen_promotion
from gambit.core.attacks import is_attacked
from gambit.core.board import Board, create_starting_board
from gambit.core.codec import decode_board, encode_board
from gambit.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    GameEndReason,
    GameResult,
    PieceType,
)
from gambit.core.errors import KingCaptureError, KingNotFoundError, RulesInvariantError
from gambit.core.legality import generate_legal_moves, is_legal_move
from gambit.core.move import CastleRookMove, Move
from gambit.core.move_generator import MoveGenerator, pseudo_moves
from gambit.core.notation import (
    STARTING_FEN,
    FenPosition,
    board_from_fen,
    board_to_fen,
    move_to_uci,
    parse_uci,
    position_from_fen,
)
from gambit.core.perft import perft, perft_divide
from gambit.core.piece import Piece
from gambit.core.rules import (
    Rules,
    game_result,
    is_check,
    is_checkmate,
    is_draw,
    is_stalemate,
    repetition_count,
)
from gambit.core.types import Square, in_bounds, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameEndReason",
    "GameResult",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "square_name",
    # Errors
    "KingCaptureError",
    "KingNotFoundError",
    "RulesInvariantError",
    # Domain objects
    "Board",
    "CastleRookMove",
    "Move",
    "MoveGenerator",
    "Piece",
    "PromotionChoice",
    "Rules",
    # Rules operations
    "apply_move",
    "create_starting_board",
    "decode_board",
    "encode_board",
    "game_result",
    "generate_legal_moves",
    "is_attacked",
    "is_check",
    "is_checkmate",
    "is_draw",
    "is_legal_move",
    "is_stalemate",
    "pseudo_moves",
    "queen_promotion",
    "repetition_count",
    # Notation / tooling
    "STARTING_FEN",
    "FenPosition",
    "board_from_fen",
    "board_to_fen",
    "move_to_uci",
    "parse_uci",
    "perft",
    "perft_divide",
    "position_from_fen",
]
