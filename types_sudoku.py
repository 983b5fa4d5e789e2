# types_sudoku.py
from __future__ import annotations

from typing import Any, NamedTuple, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cells = list[int]
"""A board flattened row-major into 81 integers (index = row * 9 + col)."""

Cell = tuple[int, int]
"""A (row, col) coordinate, both 0-based."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class CellChoice(NamedTuple):
    """An empty cell picked for branching together with its legal digits."""

    row: int
    col: int
    choices: list[int]


class Move(TypedDict, total=False):
    """A single player or solver action exchanged with the CLI and API layers."""

    technique: str  # e.g., 'naked_single', 'player'
    type: str  # 'placement' or 'erase'
    digit: int  # the digit being placed
    cell: str  # target cell (e.g., 'r4c7')
    explanation: dict[str, Any]  # human-friendly reasoning
    highlights: dict[str, Any]  # UI hints (row/col/box/cells)
