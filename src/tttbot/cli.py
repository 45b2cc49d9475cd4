from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from .board import deserialize_board, is_valid_state
from .game import BOT_SIDES, DEFAULT_BOT, play_game
from .minimax import best_move
from .render import format_move


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tttbot", description="Tic-tac-toe with a perfect-play bot")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colours (also honoured via the NO_COLOR env var)",
    )

    p_play = sub.add_parser("play", help="Play an interactive game on the terminal")
    p_play.add_argument(
        "--bot",
        choices=sorted(BOT_SIDES),
        default=None,
        help=f"Side played by the bot: x, o or nobot (default: $TTTBOT_BOT or {DEFAULT_BOT})",
    )

    p_sol = sub.add_parser("solve", help="Best move and score for the side to move")
    p_sol.add_argument("--board", help="Board string, e.g., 100020000 (omit with --stdin)")
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    return p


def _resolve_bot(flag: Optional[str]) -> str:
    if flag is not None:
        return flag
    env = os.getenv("TTTBOT_BOT", "").strip().lower()
    if env in BOT_SIDES:
        return env
    if env:
        logging.warning("Ignoring unknown TTTBOT_BOT=%s", env)
    return DEFAULT_BOT


def _color_enabled(no_color: bool) -> bool:
    return not no_color and not os.getenv("NO_COLOR")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tttbot"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "play":
        bot = _resolve_bot(ns.bot)
        logging.debug("bot=%s", bot)

        def _write(text: str) -> None:
            sys.stdout.write(text)
            sys.stdout.flush()

        play_game(BOT_SIDES[bot], sys.stdin.readline, _write, color=_color_enabled(ns.no_color))
        return 0

    if ns.cmd == "solve":
        if ns.stdin:
            import csv as _csv
            w = _csv.writer(sys.stdout)
            w.writerow(["board", "move", "score"])
            for line in sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    b = deserialize_board(raw)
                except ValueError:
                    continue
                if not is_valid_state(b):
                    continue
                res = best_move(b)
                w.writerow([raw, "" if res.move is None else res.move, res.score])
            return 0

        try:
            b = deserialize_board(ns.board or "")
        except ValueError as e:
            logging.error("%s", e)
            return 2
        if not is_valid_state(b):
            logging.error("Board is not a valid reachable state.")
            return 2
        res = best_move(b)
        logging.info(
            "move=%s cell=%s score=%d",
            res.move,
            "-" if res.move is None else format_move(res.move),
            res.score,
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
