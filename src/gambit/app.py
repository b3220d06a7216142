"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter
from collections.abc import Sequence

from gambit.core.codec import encode_board
from gambit.core.enums import Color, GameResult
from gambit.core.notation import STARTING_FEN, board_to_fen, position_from_fen
from gambit.core.perft import perft, perft_divide
from gambit.game.player import StrategyPlayer
from gambit.game.session import GameSession

_LOGGER = logging.getLogger(__name__)


def cmd_show(args: argparse.Namespace) -> int:
    board, side, fullmove = position_from_fen(args.fen)
    print(repr(board))
    print()
    print(board_to_fen(board, side, fullmove))
    print(encode_board(board))
    return 0


def cmd_perft(args: argparse.Namespace) -> int:
    board, side, _ = position_from_fen(args.fen)
    if args.divide:
        out = perft_divide(board, side, args.depth)
        for uci in sorted(out):
            print(f"{uci}: {out[uci]}")
        print(f"Total: {sum(out.values())}")
    else:
        print(perft(board, side, args.depth))
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    tally: Counter[GameResult] = Counter()
    for game_no in range(1, args.games + 1):
        board, side, _ = position_from_fen(args.fen)
        session = GameSession(max_plies=args.max_plies)
        session.new_game(board, side)
        result = session.play_game(
            StrategyPlayer.random(Color.WHITE, rng),
            StrategyPlayer.random(Color.BLACK, rng),
        )
        tally[result] += 1
        reason = session.end_reason.name if session.end_reason else "-"
        print(
            f"Game {game_no}: {result.name} ({reason}) "
            f"after {session.ply_count} plies"
        )

    print(
        f"White wins: {tally[GameResult.WHITE_WINS]}  "
        f"Black wins: {tally[GameResult.BLACK_WINS]}  "
        f"Draws: {tally[GameResult.DRAW]}"
    )
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gambit", description="Chess rules engine")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="Print a position as diagram, FEN and key")
    p_show.add_argument("--fen", default=STARTING_FEN)
    p_show.set_defaults(func=cmd_show)

    p_perft = sub.add_parser("perft", help="Count leaf nodes of the move tree")
    p_perft.add_argument("--fen", default=STARTING_FEN)
    p_perft.add_argument("--depth", type=int, default=3)
    p_perft.add_argument("--divide", action="store_true")
    p_perft.set_defaults(func=cmd_perft)

    p_play = sub.add_parser("play", help="Play random-vs-random games")
    p_play.add_argument("--fen", default=STARTING_FEN)
    p_play.add_argument("--games", type=int, default=1)
    p_play.add_argument("--seed", type=int, default=None)
    p_play.add_argument("--max-plies", type=int, default=None)
    p_play.set_defaults(func=cmd_play)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except ValueError as exc:
        _LOGGER.error("%s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
