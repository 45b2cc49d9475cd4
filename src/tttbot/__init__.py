"""tttbot package.

Board model, exhaustive minimax search, text rendering and a small CLI
for playing tic-tac-toe against a perfect-play bot.

Convenience imports are exposed for common workflows.
"""

from .board import (
    Board,
    GameOverError,
    Mark,
    MoveError,
    OccupiedError,
    Outcome,
    apply_move,
    evaluate_outcome,
    player_to_move,
)
from .minimax import MAX_SCORE, SearchResult, best_move

__all__ = [
    "Board",
    "Mark",
    "Outcome",
    "MoveError",
    "OccupiedError",
    "GameOverError",
    "apply_move",
    "evaluate_outcome",
    "player_to_move",
    "best_move",
    "SearchResult",
    "MAX_SCORE",
]
