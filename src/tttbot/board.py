"""
Board state model: cells, turn order, legality and termination.
Notes:
- A board is 9 cells in row-major order: index = row*3 + col.
- Cells hold a Mark: 0=empty, 1=X, 2=O. X always starts.
- Whose turn it is follows from the piece counts; the outcome is always
  recomputed from the cells, never stored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Tuple


class Mark(IntEnum):
    EMPTY = 0
    X = 1
    O = 2


# Checked in this order: diagonals, rows, columns.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 4, 8), (2, 4, 6),
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
)


class MoveError(ValueError):
    """A move was rejected by the board."""


class OccupiedError(MoveError):
    pass


class GameOverError(MoveError):
    pass


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Mark] = None

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return _WINS[mark]

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)
_WINS = {
    Mark.X: Outcome(Status.WIN, Mark.X),
    Mark.O: Outcome(Status.WIN, Mark.O),
}


@dataclass
class Board:
    """Nine marks; copy before branching, the search never shares cells."""

    _cells: List[Mark] = field(default_factory=lambda: [Mark.EMPTY] * 9)

    def __post_init__(self) -> None:
        if len(self._cells) != 9:
            raise ValueError(f"Board needs 9 cells, got {len(self._cells)}")
        self._cells = [Mark(c) for c in self._cells]

    @classmethod
    def from_cells(cls, cells: Iterable[int]) -> "Board":
        return cls(list(cells))

    @property
    def cells(self) -> Tuple[Mark, ...]:
        return tuple(self._cells)

    def __getitem__(self, index: int) -> Mark:
        return self._cells[index]

    def copy(self) -> "Board":
        # cells are already validated; skip __post_init__
        child = Board.__new__(Board)
        child._cells = self._cells[:]
        return child

    def place(self, index: int, mark: Mark) -> "Board":
        """Return a copy with `index` set to `mark`; no legality checks."""
        child = self.copy()
        child._cells[index] = mark
        return child


def winner(board: Board) -> Optional[Mark]:
    c = board._cells
    for a, b, d in WIN_LINES:
        v = c[a]
        if v is not Mark.EMPTY and v is c[b] and v is c[d]:
            return v
    return None


def evaluate_outcome(board: Board) -> Outcome:
    w = winner(board)
    if w is not None:
        return _WINS[w]
    if Mark.EMPTY not in board._cells:
        return DRAW
    return IN_PROGRESS


def get_piece_counts(board: Board) -> Tuple[int, int]:
    return board._cells.count(Mark.X), board._cells.count(Mark.O)


def player_to_move(board: Board) -> Mark:
    x, o = get_piece_counts(board)
    return Mark.X if x == o else Mark.O


def legal_moves(board: Board) -> List[int]:
    if evaluate_outcome(board).is_over:
        return []
    return [i for i, v in enumerate(board._cells) if v is Mark.EMPTY]


def apply_move(board: Board, index: int) -> None:
    """Claim `index` for the side to move, in place.

    Raises GameOverError once the game has a winner or is drawn, and
    OccupiedError if the cell is taken. The board is unchanged on error.
    """
    if evaluate_outcome(board).is_over:
        raise GameOverError("Game is already over")
    if not 0 <= index < 9:
        raise IndexError(f"Cell index out of range: {index}")
    if board._cells[index] is not Mark.EMPTY:
        raise OccupiedError(f"Cell {index} is occupied")
    board._cells[index] = player_to_move(board)


def is_valid_state(board: Board) -> bool:
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: Mark) -> int:
        return sum(1 for line in WIN_LINES if all(board[i] is p for i in line))

    x_wins, o_wins = count_wins(Mark.X), count_wins(Mark.O)
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True


def serialize_board(board: Board) -> str:
    return ''.join(str(int(cell)) for cell in board.cells)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != 9 or any(c not in "012" for c in raw):
        raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
    return Board.from_cells(int(c) for c in raw)
