"""
Interactive game loop: a human (or two) against an optional perfect-play bot.

Input and output are injected as callables so the loop can be driven by a
terminal or by a script.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .board import (
    Board,
    Mark,
    MoveError,
    Outcome,
    Status,
    apply_move,
    evaluate_outcome,
    player_to_move,
)
from .minimax import choose_move
from .render import CYAN, RESET, format_move, mark_symbol, parse_move, render_board

logger = logging.getLogger(__name__)

BOT_SIDES: Dict[str, Optional[Mark]] = {
    "x": Mark.X,
    "o": Mark.O,
    "nobot": None,
}
DEFAULT_BOT = "o"


def _paint(text: str, color: bool) -> str:
    return f"{CYAN}{text}{RESET}" if color else text


def play_game(
    bot: Optional[Mark],
    read_line: Callable[[], str],
    write: Callable[[str], None],
    color: bool = True,
    board: Optional[Board] = None,
) -> Optional[Outcome]:
    """Run a game to completion.

    Returns the final outcome, or None if the human quit (a line starting
    with `q`, or end of input).
    """
    if board is None:
        board = Board()
    outcome = evaluate_outcome(board)
    while not outcome.is_over:
        mover = player_to_move(board)
        if mover is bot:
            result = choose_move(board)
            write(f"\nBot move: {_paint(format_move(result.move), color)}\n")
            apply_move(board, result.move)
        else:
            write(f"\nPlayer to move: {mark_symbol(mover, color)}\n")
            write(render_board(board, color) + "\n")
            write("Enter your move:\n» ")
            while True:
                line = read_line()
                if not line or line[0] in "qQ":
                    write("\n")
                    logger.debug("game aborted by player")
                    return None
                try:
                    apply_move(board, parse_move(line.strip()))
                    break
                except MoveError as e:
                    logger.debug("rejected move %r: %s", line.strip(), e)
                except ValueError:
                    logger.debug("unparseable move %r", line.strip())
                write("Invalid move, try again:\n» ")
        outcome = evaluate_outcome(board)

    write(render_board(board, color) + "\n")
    if outcome.status is Status.DRAW:
        write("Draw\n")
    else:
        write(f"Winner: {mark_symbol(outcome.winner, color)}\n")
    logger.debug("game over: %s %s", outcome.status.value,
                 outcome.winner.name if outcome.winner else "")
    return outcome
