"""Game session. Owns the authoritative board, turn and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gambit.core.apply import PromotionChoice, apply_move, queen_promotion
from gambit.core.board import Board
from gambit.core.codec import encode_board
from gambit.core.enums import Color, GameEndReason, GameResult, PieceType
from gambit.core.legality import generate_legal_moves
from gambit.core.move import Move
from gambit.core.notation import move_to_uci
from gambit.core.rules import Rules
from gambit.game.interfaces import GamePhase, IPlayer

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    color: Color
    uci: str
    key_after: str
    promotion: PieceType | None = None
    was_capture: bool = False
    was_check: bool = False


class GameSession:
    """Explicit per-game state handed to the rules core by reference.

    The session is a pure logic class without threading or UI. It validates
    submitted moves against the legal set, applies them to its board,
    switches turns and detects the end of the game.

    Args:
        max_plies: Optional cap on the number of half-moves; reaching it
            ends the game as a draw by move limit.
    """

    __slots__ = (
        "_board",
        "_side_to_move",
        "_phase",
        "_result",
        "_end_reason",
        "_history",
        "_max_plies",
    )

    def __init__(self, max_plies: int | None = None) -> None:
        if max_plies is not None and max_plies < 1:
            raise ValueError(f"max_plies must be positive, got {max_plies}")
        self._max_plies = max_plies
        self._board = Board.initial()
        self._side_to_move = Color.WHITE
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._end_reason: GameEndReason | None = None
        self._history: list[MoveRecord] = []

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def end_reason(self) -> GameEndReason | None:
        return self._end_reason

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self, board: Board | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, optionally from a prepared board."""
        self._board = board if board is not None else Board.initial()
        self._side_to_move = side_to_move
        self._phase = GamePhase.AWAITING_MOVE
        self._result = GameResult.IN_PROGRESS
        self._end_reason = None
        self._history.clear()
        _LOGGER.info("New game, %s to move", side_to_move)
        self._check_game_over()

    def legal_moves(self) -> list[Move]:
        if self._phase != GamePhase.AWAITING_MOVE:
            return []
        return generate_legal_moves(self._board, self._side_to_move)

    # ── Move application ─────────────────────────────────────────────────

    def submit_move(
        self, move: Move, promotion_choice: PromotionChoice = queen_promotion
    ) -> bool:
        """Apply *move* if it is legal for the side to move. True if applied."""
        if self._phase != GamePhase.AWAITING_MOVE:
            _LOGGER.warning("Move %s rejected: game is not awaiting a move", move)
            return False
        if move not in self.legal_moves():
            _LOGGER.warning(
                "Move %s rejected: not legal for %s", move, self._side_to_move
            )
            return False

        chosen: list[PieceType] = []

        def record_promotion() -> PieceType:
            choice = promotion_choice()
            chosen.append(choice)
            return choice

        mover = self._side_to_move
        was_capture = not self._board.is_empty(move.to_sq) or move.is_en_passant
        apply_move(move, self._board, record_promotion)
        self._side_to_move = mover.opposite

        record = MoveRecord(
            move=move,
            color=mover,
            uci=move_to_uci(move, chosen[0] if chosen else None),
            key_after=encode_board(self._board),
            promotion=chosen[0] if chosen else None,
            was_capture=was_capture,
            was_check=Rules.is_check(self._board, self._side_to_move),
        )
        self._history.append(record)
        _LOGGER.debug("%s played %s", mover, record.uci)

        self._check_game_over()
        return True

    def play_turn(self, player: IPlayer) -> MoveRecord:
        """Ask *player* for a move and apply it."""
        if player.color != self._side_to_move:
            raise ValueError(
                f"{player.name} plays {player.color}, "
                f"but {self._side_to_move} is to move"
            )
        move = player.choose_move(self._board)
        if not self.submit_move(move, player.choose_promotion):
            raise ValueError(f"{player.name} chose an illegal move: {move}")
        return self._history[-1]

    def play_game(self, white: IPlayer, black: IPlayer) -> GameResult:
        """Alternate *white* and *black* until the game ends."""
        if white.color != Color.WHITE or black.color != Color.BLACK:
            raise ValueError("Players must be passed as (white, black)")
        if self._phase == GamePhase.NOT_STARTED:
            self.new_game()
        players = {Color.WHITE: white, Color.BLACK: black}
        while not self.is_game_over:
            self.play_turn(players[self._side_to_move])
        return self._result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        reason = Rules.end_reason(self._board, self._side_to_move)
        if (
            reason is None
            and self._max_plies is not None
            and self.ply_count >= self._max_plies
        ):
            reason = GameEndReason.MOVE_LIMIT
        if reason is None:
            return

        if reason == GameEndReason.CHECKMATE:
            self._result = (
                GameResult.BLACK_WINS
                if self._side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        else:
            self._result = GameResult.DRAW
        self._end_reason = reason
        self._phase = GamePhase.GAME_OVER
        _LOGGER.info(
            "Game over after %d plies: %s (%s)",
            self.ply_count,
            self._result.name,
            reason.name,
        )
