"""Text rendering of boards and conversion between cell indices and `A1` labels."""
from __future__ import annotations

from typing import Dict

from .board import Board, Mark

MARK_SYMBOLS: Dict[Mark, str] = {
    Mark.EMPTY: " ",
    Mark.X: "X",
    Mark.O: "O",
}

ROWS = "ABC"
COLS = "123"

CYAN = "\x1b[96m"
RED = "\x1b[31m"
RESET = "\x1b[0m"

# `{h}`/`{c}`/`{r}` are colour slots, `R` marks a cell in row-major order.
_TEMPLATE = (
    "{h}    1 2 3{r}\n"
    "  ╭─┼─┼─┼─╮\n"
    "{h}A{r} ┼{c} R R R {r}┤\n"
    "{h}B{r} ┼{c} R R R {r}┤\n"
    "{h}C{r} ┼{c} R R R {r}┤\n"
    "  ╰─┴─┴─┴─╯\n"
)


def render_board(board: Board, color: bool = True) -> str:
    if color:
        text = _TEMPLATE.format(h=CYAN, c=RED, r=RESET)
    else:
        text = _TEMPLATE.format(h="", c="", r="")
    symbols = iter(MARK_SYMBOLS[m] for m in board.cells)
    return ''.join(next(symbols) if ch == 'R' else ch for ch in text)


def format_move(index: int) -> str:
    if not 0 <= index < 9:
        raise ValueError(f"Cell index out of range: {index}")
    return ROWS[index // 3] + COLS[index % 3]


def parse_move(text: str) -> int:
    """Parse `A1`..`C3` (row letter case-insensitive) into a cell index.

    Only the first two characters are looked at.
    """
    if len(text) < 2:
        raise ValueError(f"Invalid move: {text!r}")
    row, col = text[0].upper(), text[1]
    if row not in ROWS or col not in COLS:
        raise ValueError(f"Invalid move: {text!r}")
    return ROWS.index(row) * 3 + COLS.index(col)


def mark_symbol(mark: Mark, color: bool = True) -> str:
    s = MARK_SYMBOLS[mark]
    return f"{RED}{s}{RESET}" if color else s
