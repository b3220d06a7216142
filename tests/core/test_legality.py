"""Tests for the legality filter."""

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.legality import (
    generate_legal_moves,
    is_legal_move,
    is_malformed_pawn_diagonal,
)
from gambit.core.move import Move
from gambit.core.move_generator import pseudo_moves
from gambit.core.notation import board_from_fen, parse_uci
from gambit.core.types import parse_square


def _uci_set(board: Board, color: Color) -> set[str]:
    return {str(m) for m in generate_legal_moves(board, color)}


class TestStartingPosition:
    def test_twenty_moves(self, starting_board: Board) -> None:
        assert len(generate_legal_moves(starting_board, Color.WHITE)) == 20
        assert len(generate_legal_moves(starting_board, Color.BLACK)) == 20

    def test_pawn_diagonals_pruned(self, starting_board: Board) -> None:
        assert "e2d3" not in _uci_set(starting_board, Color.WHITE)

    def test_does_not_mutate_board(self, starting_board: Board) -> None:
        before = starting_board.copy()
        generate_legal_moves(starting_board, Color.WHITE)
        assert starting_board == before
        assert starting_board.repetitions == {}


class TestPawnDiagonals:
    def test_malformed_when_empty(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 0 1")
        e2 = parse_square("e2")
        move = Move(board[e2], e2, parse_square("d3"))
        assert is_malformed_pawn_diagonal(move, board)
        assert not is_legal_move(move, board)

    def test_capture_is_well_formed(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/3n4/4P3/4K3 w - - 0 1")
        assert "e2d3" in _uci_set(board, Color.WHITE)

    def test_own_piece_is_malformed(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/3N4/4P3/4K3 w - - 0 1")
        assert "e2d3" not in _uci_set(board, Color.WHITE)

    def test_straight_move_is_not_a_diagonal(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 0 1")
        e2 = parse_square("e2")
        move = Move(board[e2], e2, parse_square("e3"))
        assert not is_malformed_pawn_diagonal(move, board)


class TestKingSafety:
    def test_pinned_piece_cannot_leave_line(self) -> None:
        board = board_from_fen("4r1k1/8/8/8/8/8/4B3/4K3 w - - 0 1")
        moves = _uci_set(board, Color.WHITE)
        assert not any(m.startswith("e2") for m in moves)

    def test_must_answer_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K2R w K - 0 1")
        assert _uci_set(board, Color.WHITE) == {"e1d2", "e1e2", "e1f2"}

    def test_king_cannot_step_into_attack(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/3rK3 w - - 0 1")
        moves = _uci_set(board, Color.WHITE)
        assert "e1d1" in moves
        assert "e1e2" in moves
        assert "e1f1" not in moves
        assert "e1d2" not in moves

    def test_king_capture_never_legal(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4RK2 w - - 0 1")
        e1 = parse_square("e1")
        capture = [
            m for m in pseudo_moves(board[e1], e1, board) if m.to_sq == (7, 4)
        ]
        assert len(capture) == 1
        assert not is_legal_move(capture[0], board)
        assert "e1e8" not in _uci_set(board, Color.WHITE)


class TestEnPassant:
    def test_capture_available(self) -> None:
        board = board_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        move, _ = parse_uci(board, Color.WHITE, "e5d6")
        assert move.is_en_passant

    def test_horizontal_pin(self) -> None:
        board = board_from_fen("8/8/8/K2pP2r/8/8/8/7k w - d6 0 1")
        assert "e5d6" not in _uci_set(board, Color.WHITE)
        assert "e5e6" in _uci_set(board, Color.WHITE)
