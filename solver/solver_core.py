"""Core Sudoku board: the puzzle/solution grid store, row/column/box constraint checks, and candidate enumeration."""

# solver_core.py
# - Board keeps the original clues (puzzle) and the working grid (solution)
# - violates_row / violates_col / violates_box are the only legality checks
# - cell_choices, find_hint and find_most_constrained_empty_cell build on them
# Cells are stored flat, row-major: index = row * 9 + col. 0 = blank.
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence

from types_sudoku import Cell, CellChoice, Cells, Grid

if TYPE_CHECKING:
    from .progress import SearchStats

DIM = 9
DIMBOX = 3
EMPTY = 0
DIGITS = range(1, DIM + 1)


def index(row: int, col: int) -> int:
    return row * DIM + col


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < DIM and 0 <= col < DIM


def rc_to_key(row: int, col: int) -> str:
    """0-based (row, col) -> 1-based key like 'r1c1'."""
    return f"r{row + 1}c{col + 1}"


def key_to_rc(key: str) -> Cell:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r - 1, c - 1)


def which_box(row: int, col: int) -> int:
    """1-based box number, counted row-major."""
    return DIMBOX * (row // DIMBOX) + (col // DIMBOX) + 1


def flatten(grid: Grid) -> Cells:
    if len(grid) != DIM or any(len(row) != DIM for row in grid):
        raise ValueError("grid must be 9 rows of 9 values")
    return [v for row in grid for v in row]


def to_grid(cells: Sequence[int]) -> Grid:
    return [list(cells[r * DIM:(r + 1) * DIM]) for r in range(DIM)]


def _require_cell(row: int, col: int) -> None:
    if not in_bounds(row, col):
        raise IndexError(f"cell ({row}, {col}) is outside the 9x9 board")


def _require_digit(digit: int) -> None:
    if digit not in DIGITS:
        raise ValueError(f"digit must be between 1 and 9, got {digit!r}")


class Board:
    """A puzzle and its working solution.

    ``puzzle`` holds the clues and never changes after construction.
    ``solution`` starts as a copy of it and is mutated by ``fill``,
    ``erase``, ``reset`` and ``solve``. A clue cell always holds its clue
    in ``solution``.
    """

    def __init__(self, cells: Sequence[int]) -> None:
        cells = list(cells)
        if len(cells) != DIM * DIM:
            raise ValueError(f"expected {DIM * DIM} cells, got {len(cells)}")
        for v in cells:
            if not isinstance(v, int) or not EMPTY <= v <= DIM:
                raise ValueError(f"cell values must be integers 0..9, got {v!r}")
        self.puzzle: tuple[int, ...] = tuple(cells)
        self.solution: Cells = cells

    @classmethod
    def from_grid(cls, grid: Grid) -> "Board":
        return cls(flatten(grid))

    @classmethod
    def empty(cls) -> "Board":
        return cls([EMPTY] * (DIM * DIM))

    def copy(self) -> "Board":
        other = Board(self.puzzle)
        other.solution = self.solution[:]
        return other

    # --- grid store ---------------------------------------------------

    def get(self, row: int, col: int) -> int:
        _require_cell(row, col)
        return self.solution[index(row, col)]

    def is_clue(self, row: int, col: int) -> bool:
        _require_cell(row, col)
        return self.puzzle[index(row, col)] != EMPTY

    def rows(self) -> Grid:
        return to_grid(self.solution)

    def puzzle_rows(self) -> Grid:
        return to_grid(self.puzzle)

    def empty_cells(self) -> Iterator[Cell]:
        for r in range(DIM):
            for c in range(DIM):
                if self.solution[index(r, c)] == EMPTY:
                    yield (r, c)

    def reset(self) -> None:
        self.solution[:] = self.puzzle

    def erase(self, row: int, col: int) -> bool:
        """Clear a non-clue cell. Returns False only for clues."""
        _require_cell(row, col)
        if self.puzzle[index(row, col)] != EMPTY:
            return False
        self.solution[index(row, col)] = EMPTY
        return True

    def is_solved(self) -> bool:
        # Completeness only: fill never commits a conflicting digit, so a
        # full grid built through fill is also valid.
        return EMPTY not in self.solution

    # --- constraint checks --------------------------------------------

    def violates_row(self, row: int, digit: int) -> bool:
        _require_cell(row, 0)
        _require_digit(digit)
        base = row * DIM
        return digit in self.solution[base:base + DIM]

    def violates_col(self, col: int, digit: int) -> bool:
        _require_cell(0, col)
        _require_digit(digit)
        return digit in self.solution[col::DIM]

    def violates_box(self, row: int, col: int, digit: int) -> bool:
        _require_cell(row, col)
        _require_digit(digit)
        r0 = DIMBOX * (row // DIMBOX)
        c0 = DIMBOX * (col // DIMBOX)
        for r in range(r0, r0 + DIMBOX):
            base = r * DIM + c0
            if digit in self.solution[base:base + DIMBOX]:
                return True
        return False

    def violates(self, row: int, col: int, digit: int) -> bool:
        return (
            self.violates_row(row, digit)
            or self.violates_col(col, digit)
            or self.violates_box(row, col, digit)
        )

    # --- candidates ---------------------------------------------------

    def cell_choices(self, row: int, col: int) -> list[int]:
        """Digits 1..9, ascending, that can go into (row, col) right now.

        Clue cells have no choices.
        """
        _require_cell(row, col)
        if self.puzzle[index(row, col)] != EMPTY:
            return []
        return [d for d in DIGITS if not self.violates(row, col, d)]

    def find_hint(self) -> Cell | None:
        """First empty cell (row-major) with exactly one legal digit, or None."""
        for r, c in self.empty_cells():
            if len(self.cell_choices(r, c)) == 1:
                return (r, c)
        return None

    def find_most_constrained_empty_cell(self) -> CellChoice | None:
        """Pick the empty cell to branch on.

        Returns None when the board has no empty cell. If some empty cell has
        no legal digit at all, the first such cell is returned with an empty
        choice list. Otherwise the first (row-major) cell with the fewest
        choices is returned along with them.
        """
        least = DIM + 1
        dead_end: Cell | None = None
        found_empty = False
        for r, c in self.empty_cells():
            found_empty = True
            n = len(self.cell_choices(r, c))
            if n == 0:
                if dead_end is None:
                    dead_end = (r, c)
            elif n < least:
                least = n
        if not found_empty:
            return None
        if dead_end is not None:
            return CellChoice(dead_end[0], dead_end[1], [])

        for r, c in self.empty_cells():
            choices = self.cell_choices(r, c)
            if len(choices) == least:
                return CellChoice(r, c, choices)
        return None

    # --- moves --------------------------------------------------------

    def fill(self, row: int, col: int, digit: int) -> bool:
        """Place digit at (row, col) unless it is a clue or breaks a constraint."""
        _require_cell(row, col)
        _require_digit(digit)
        if self.puzzle[index(row, col)] != EMPTY:
            return False
        if self.violates(row, col, digit):
            return False
        self.solution[index(row, col)] = digit
        return True

    def solve(self, stats: SearchStats | None = None, verbose: bool = False) -> bool:
        from .backtrack import solve

        return solve(self, stats=stats, verbose=verbose)
