"""Tool-friendly wrappers around Board: validation, candidates, hints, solving and move application, returning plain dicts for the CLI and the API."""

# sudoku_tools.py
from __future__ import annotations

from typing import Dict, List

from types_sudoku import Candidates, Grid, Move

from .progress import SearchStats
from .solver_core import DIM, Board, flatten, key_to_rc, rc_to_key, which_box


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report overwritten givens and duplicate digits per row, column and box.

    Board.is_solved only checks that every cell is filled; this is the
    check to use on grids that were not built through Board.fill. A given
    that was cleared back to 0 also counts as overwritten.
    """
    issues = []
    for r in range(DIM):
        for c in range(DIM):
            if original[r][c] != 0 and current[r][c] != original[r][c]:
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": original[r][c], "found": current[r][c]})

    def duplicates_in_unit(vals):
        seen = set(); dups = set()
        for v in vals:
            if v == 0: continue
            if v in seen: dups.add(v)
            seen.add(v)
        return dups

    # rows
    for r in range(DIM):
        dups = duplicates_in_unit(current[r])
        if dups:
            cells = [rc_to_key(r, c) for c in range(DIM) if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"r{r + 1}", "digits": sorted(dups), "cells": cells})
    # cols
    for c in range(DIM):
        col = [current[r][c] for r in range(DIM)]
        dups = duplicates_in_unit(col)
        if dups:
            cells = [rc_to_key(r, c) for r in range(DIM) if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"c{c + 1}", "digits": sorted(dups), "cells": cells})
    # boxes
    for b in range(DIM):
        br = b // 3; bc = b % 3
        cells = []
        vals = []
        for i in range(3):
            for j in range(3):
                r = 3 * br + i; c = 3 * bc + j
                cells.append(rc_to_key(r, c))
                vals.append(current[r][c])
        dups = duplicates_in_unit(vals)
        if dups:
            bad = [cells[i] for i, v in enumerate(vals) if v in dups]
            issues.append({"type": "duplicate", "unit": f"b{b + 1}", "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def load_board(original: Grid, current: Grid | None = None) -> Board:
    """Build a Board from the puzzle and, optionally, a game in progress.

    Raises ValueError when ``current`` overwrites a given or repeats a digit
    in a unit.
    """
    board = Board.from_grid(original)
    if current is None:
        return board
    cells = flatten(current)
    if any(v not in range(0, DIM + 1) for v in cells):
        raise ValueError("cell values must be integers 0..9")
    report = sanity_check(original, current)
    if not report["ok"]:
        first = report["issues"][0]
        raise ValueError(f"inconsistent board: {first['type']} at {first.get('cell') or first.get('unit')}")
    board.solution[:] = cells
    return board


def compute_candidates_tool(board: Board) -> Dict:
    """Candidate digits for each empty cell, keyed like {'r1c2': [1, 2, 5], ...}."""
    cand: Candidates = {}
    for r, c in board.empty_cells():
        cand[rc_to_key(r, c)] = board.cell_choices(r, c)
    return {"candidates": cand}


def _naked_single(row: int, col: int, digit: int) -> Move:
    key = rc_to_key(row, col)
    return {
        "technique": "naked_single",
        "type": "placement",
        "cell": key,
        "digit": digit,
        "explanation": {
            "why": f"Only one candidate fits r{row + 1}c{col + 1}.",
            "units": {"row": f"r{row + 1}", "col": f"c{col + 1}", "box": f"b{which_box(row, col)}"},
        },
        "highlights": {"cells": [key]},
    }


def hint_tool(board: Board) -> Dict:
    cell = board.find_hint()
    if cell is None:
        return {"found": False, "move": None}
    r, c = cell
    return {"found": True, "move": _naked_single(r, c, board.cell_choices(r, c)[0])}


def solve_tool(board: Board, verbose: bool = False) -> Dict:
    """Solve in place; on failure the board is left as it was."""
    stats = SearchStats()
    solved = board.solve(stats=stats, verbose=verbose)
    return {"solved": solved, "solution": board.rows(), "stats": stats.as_dict()}


def apply_move(board: Board, move: Move) -> Dict:
    """Apply a 'placement' (fill) or 'erase' move to the board."""
    r, c = key_to_rc(move["cell"])
    if move.get("type", "placement") == "erase":
        applied = board.erase(r, c)
    else:
        applied = board.fill(r, c, move["digit"])
    return {"applied": applied, "current": board.rows()}


def choices_tool(board: Board, row: int, col: int) -> Dict:
    key = rc_to_key(row, col)
    choices: List[int] = board.cell_choices(row, col)
    return {"cell": key, "clue": board.is_clue(row, col), "choices": choices}
