"""Tests for the board key codec."""

import pytest

from gambit.core.board import Board
from gambit.core.codec import decode_board, encode_board
from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.notation import board_from_fen
from gambit.core.piece import Piece
from gambit.core.types import E4

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"

STARTING_KEY = (
    "f"
    + "42356324"
    + "11111111"
    + "f" * 32
    + "99999999"
    + "cabdebac"
)


class TestEncode:
    def test_starting_position(self) -> None:
        assert encode_board(Board.initial()) == STARTING_KEY

    def test_key_length(self) -> None:
        assert len(encode_board(Board())) == 65

    def test_empty_board(self) -> None:
        assert encode_board(Board()) == "0" + "f" * 64

    @pytest.mark.parametrize(
        ("rights", "digit"),
        [
            (CastlingRights.WHITE_KINGSIDE, "8"),
            (CastlingRights.WHITE_QUEENSIDE, "4"),
            (CastlingRights.BLACK_KINGSIDE, "2"),
            (CastlingRights.BLACK_QUEENSIDE, "1"),
            (CastlingRights.WHITE_BOTH, "c"),
            (CastlingRights.BLACK_BOTH, "3"),
        ],
    )
    def test_castling_digit(self, rights: CastlingRights, digit: str) -> None:
        board = Board()
        board.castling = rights
        assert encode_board(board)[0] == digit

    def test_en_passant_flag_not_encoded(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        plain = encode_board(board)
        board[E4].en_passant_vulnerable = True
        assert encode_board(board) == plain

    def test_counters_not_encoded(self) -> None:
        board = Board.initial()
        board.fifty_move_counter = 40
        board.repetitions[STARTING_KEY] = 2
        assert encode_board(board) == STARTING_KEY


class TestDecode:
    @pytest.mark.parametrize(
        "fen",
        [
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            KIWIPETE,
            POS3,
            "r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        board = board_from_fen(fen)
        decoded = decode_board(encode_board(board))
        assert decoded == board
        assert decoded.castling == board.castling

    def test_counters_reset(self) -> None:
        board = Board.initial()
        board.fifty_move_counter = 9
        board.repetitions[STARTING_KEY] = 2
        decoded = decode_board(encode_board(board))
        assert decoded.fifty_move_counter == 0
        assert decoded.repetitions == {}

    def test_decoded_pieces(self) -> None:
        decoded = decode_board(STARTING_KEY)
        assert decoded[(0, 4)] == Piece(Color.WHITE, PieceType.KING)
        assert decoded[(7, 3)] == Piece(Color.BLACK, PieceType.QUEEN)
        assert decoded.castling == CastlingRights.ALL

    @pytest.mark.parametrize(
        "key",
        [
            "",
            STARTING_KEY[:-1],
            STARTING_KEY + "f",
            "g" + STARTING_KEY[1:],
            STARTING_KEY[:10] + "7" + STARTING_KEY[11:],
            STARTING_KEY[:10] + "8" + STARTING_KEY[11:],
            STARTING_KEY[:10] + "0" + STARTING_KEY[11:],
        ],
    )
    def test_invalid_key(self, key: str) -> None:
        with pytest.raises(ValueError, match="Invalid"):
            decode_board(key)
