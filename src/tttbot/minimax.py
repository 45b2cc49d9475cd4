"""
Exhaustive minimax over the full game tree, scored from X's point of view.

Scoring:
- X win = +MAX_SCORE, O win = -MAX_SCORE, draw = 0.
- Each ply back towards the root halves the score with an arithmetic
  right shift (floor division by two), so a faster win has a larger
  magnitude than a slower one and a slower loss is preferred over a faster one.
- MAX_SCORE = 2**10 survives the at most 9 halvings without reaching 0.

Tie-break policy:
- Cells are scanned in ascending index order and the best child is replaced
  only on strict improvement, so the lowest-index optimal move wins ties.

No pruning and no memoization: the 3x3 tree is small enough to search whole.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from .board import Board, Mark, Status, evaluate_outcome, player_to_move

logger = logging.getLogger(__name__)

MAX_SCORE = 1024


class SearchResult(NamedTuple):
    move: Optional[int]
    score: int


def best_move(board: Board) -> SearchResult:
    """Optimal move for the side to move and its discounted score.

    `move` is None when the board is already terminal. The caller's board
    is never modified.
    """
    outcome = evaluate_outcome(board)
    if outcome.status is Status.DRAW:
        return SearchResult(None, 0)
    if outcome.status is Status.WIN:
        return SearchResult(None, MAX_SCORE if outcome.winner is Mark.X else -MAX_SCORE)

    mover = player_to_move(board)
    sign = 1 if mover is Mark.X else -1

    best_index: Optional[int] = None
    best_score = 0
    for i, cell in enumerate(board.cells):
        if cell is not Mark.EMPTY:
            continue
        child = best_move(board.place(i, mover))
        if best_index is None or child.score * sign > best_score * sign:
            best_index = i
            best_score = child.score

    return SearchResult(best_index, best_score >> 1)


def choose_move(board: Board) -> SearchResult:
    """Top-level search used by the driver; logs the decision."""
    result = best_move(board)
    logger.debug("best_move mover=%s move=%s score=%d",
                 player_to_move(board).name, result.move, result.score)
    return result
