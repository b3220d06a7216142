"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from gambit.core.attacks import is_attacked
from gambit.core.board import Board
from gambit.core.codec import encode_board
from gambit.core.enums import Color, GameEndReason, GameResult
from gambit.core.legality import generate_legal_moves, is_legal_move
from gambit.core.move_generator import MoveGenerator

FIFTY_MOVE_HALFMOVES = 100
REPETITION_LIMIT = 3


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    The board carries no side to move, so every query names the colour
    it is about.
    """

    @staticmethod
    def is_check(board: Board, color: Color) -> bool:
        king_sq = board.king_square(color)
        return is_attacked(board, king_sq, color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_check(board, color):
            return False
        moves = MoveGenerator(board).generate_pseudo_legal_moves(color)
        return not any(is_legal_move(move, board) for move in moves)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_check(board, color):
            return False
        return len(generate_legal_moves(board, color)) == 0

    @staticmethod
    def repetition_count(board: Board) -> int:
        """How many times the current state has occurred, this occurrence included.

        The repetition map records a state when a move is played from
        it, so the occurrence in front of us is not in the map yet.
        """
        return board.repetitions.get(encode_board(board), 0) + 1

    @staticmethod
    def is_threefold_repetition(board: Board) -> bool:
        return Rules.repetition_count(board) >= REPETITION_LIMIT

    @staticmethod
    def is_fifty_move_rule(board: Board) -> bool:
        return board.fifty_move_counter >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def is_draw(board: Board, color: Color) -> bool:
        """Threefold repetition, fifty-move rule, or *color* stalemated."""
        return (
            Rules.is_threefold_repetition(board)
            or Rules.is_fifty_move_rule(board)
            or Rules.is_stalemate(board, color)
        )

    @staticmethod
    def end_reason(board: Board, color: Color) -> GameEndReason | None:
        """Why the game is over with *color* to move, or ``None``."""
        if Rules.is_checkmate(board, color):
            return GameEndReason.CHECKMATE
        if Rules.is_threefold_repetition(board):
            return GameEndReason.THREEFOLD_REPETITION
        if Rules.is_fifty_move_rule(board):
            return GameEndReason.FIFTY_MOVE_RULE
        if Rules.is_stalemate(board, color):
            return GameEndReason.STALEMATE
        return None

    @staticmethod
    def game_result(board: Board, color: Color) -> GameResult:
        """Determine the current game result with *color* to move."""
        reason = Rules.end_reason(board, color)
        if reason is None:
            return GameResult.IN_PROGRESS
        if reason == GameEndReason.CHECKMATE:
            return (
                GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
            )
        return GameResult.DRAW


is_check = Rules.is_check
is_checkmate = Rules.is_checkmate
is_stalemate = Rules.is_stalemate
is_draw = Rules.is_draw
repetition_count = Rules.repetition_count
game_result = Rules.game_result
