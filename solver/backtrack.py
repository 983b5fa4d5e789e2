"""Depth-first backtracking search over a Board, branching on the most constrained empty cell."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from .progress import SearchStats, log

if TYPE_CHECKING:
    from .solver_core import Board


def _search(board: Board, stats: SearchStats, depth: int) -> bool:
    if board.is_solved():
        return True
    target = board.find_most_constrained_empty_cell()
    if target is None or not target.choices:
        stats.dead_ends += 1
        return False

    row, col, choices = target
    stats.max_depth = max(stats.max_depth, depth + 1)
    for digit in choices:
        # fill re-checks every choice
        if not board.fill(row, col, digit):
            continue
        stats.fills += 1
        if _search(board, stats, depth + 1):
            return True

    # deeper levels already restored their own cells
    board.erase(row, col)
    stats.backtracks += 1
    return False


def solve(board: Board, stats: SearchStats | None = None, verbose: bool = False) -> bool:
    """Fill every empty cell of ``board`` in place.

    Cells are chosen by fewest legal digits (row-major on ties) and digits
    are tried in ascending order, so the first solution found is
    deterministic. Returns False, with the board exactly as it was, when the
    current state has no completion.
    """
    if stats is None:
        stats = SearchStats()
    start = time.time()
    log(f"[solver] solve start; {sum(1 for _ in board.empty_cells())} empty cells", quiet=not verbose)
    ok = _search(board, stats, 0)
    stats.duration_ms = int((time.time() - start) * 1000)
    log(
        f"[solver] solve end: {'solved' if ok else 'no solution'}; {stats.summary()}",
        quiet=not verbose,
    )
    return ok
