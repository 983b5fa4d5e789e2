"""Command line front end: load a puzzle, then check, hint, list choices, solve, or play interactively."""

# sudoku_cli.py
# Usage:
#   sudoku-engine --puzzle puzzle.txt --solve
#   sudoku-engine --puzzle puzzle.txt --hint --choices 1 3 --json
#   sudoku-engine --play < session.txt     (81 puzzle chars, then commands)
#   sudoku-engine --puzzle puzzle.txt --play     (commands on stdin)
from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable, TextIO

from solver.config import load_config
from solver.progress import log
from solver.puzzle_io import PuzzleFormatError, read_puzzle, render_grid
from solver.solver_core import Board, rc_to_key
from solver.sudoku_tools import (
    choices_tool, compute_candidates_tool, hint_tool, sanity_check, solve_tool,
)

PLAY_HELP = (
    "commands (1-based rows/cols): fill R C D | erase R C | choices R C | "
    "hint | candidates | reset | solve | print | help | quit"
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku-engine", description="9x9 Sudoku engine with a backtracking solver")
    ap.add_argument("--puzzle", type=str, default="-",
                    help="File with 81 cells ('_' or '0' for blanks); '-' reads stdin")
    ap.add_argument("--config", type=str, default=None, help="YAML config file")
    ap.add_argument("--check", action="store_true", help="Report duplicate digits")
    ap.add_argument("--choices", type=int, nargs=2, metavar=("ROW", "COL"),
                    help="List legal digits for a cell (1-based)")
    ap.add_argument("--hint", action="store_true", help="Find a cell with a single legal digit")
    ap.add_argument("--solve", action="store_true", help="Solve by backtracking")
    ap.add_argument("--play", action="store_true",
                    help="Read commands after the puzzle and apply them one by one")
    ap.add_argument("--json", action="store_true", default=None, help="Print a JSON payload")
    ap.add_argument("--quiet", action="store_true", default=None, help="No progress logs")
    return ap


def _load(path: str) -> Board:
    if path == "-":
        return read_puzzle(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return read_puzzle(f)


def _format_hint(result: dict) -> str:
    if not result["found"]:
        return "no hint: no cell has a single legal digit"
    m = result["move"]
    return f"hint: {m['cell']} = {m['digit']}"


def _format_choices(result: dict) -> str:
    if result["clue"]:
        return f"{result['cell']}: clue"
    return f"{result['cell']}: " + (" ".join(map(str, result["choices"])) or "none")


def _format_check(result: dict) -> str:
    if result["ok"]:
        return "check: ok"
    lines = ["check: %d issue(s)" % len(result["issues"])]
    for issue in result["issues"]:
        lines.append(f"  {issue['type']} {issue.get('unit') or issue.get('cell')}: {issue.get('digits') or issue.get('found')}")
    return "\n".join(lines)


def _cell_args(parts: list[str], n: int) -> list[int]:
    if len(parts) != n:
        raise ValueError(f"expected {n} numbers")
    vals = [int(p) for p in parts]
    for v in vals[:2]:
        if not 1 <= v <= 9:
            raise ValueError("rows and columns are 1..9")
    return [vals[0] - 1, vals[1] - 1] + vals[2:]


def play(board: Board, commands: Iterable[str], cfg, out: TextIO | None = None) -> int:
    """Apply session commands to ``board``, printing one response per command."""
    out = out or sys.stdout

    def emit(text: str) -> None:
        print(text, file=out)

    for raw in commands:
        parts = raw.split()
        if not parts:
            continue
        cmd, rest = parts[0].lower(), parts[1:]
        try:
            if cmd in ("quit", "exit"):
                break
            elif cmd == "help":
                emit(PLAY_HELP)
            elif cmd == "print":
                emit(render_grid(board, cfg.empty_char))
            elif cmd == "reset":
                board.reset()
                emit("reset to puzzle")
            elif cmd == "fill":
                r, c, d = _cell_args(rest, 3)
                ok = board.fill(r, c, d)
                emit(f"fill {rc_to_key(r, c)} = {d}: {'ok' if ok else 'rejected'}")
            elif cmd == "erase":
                r, c = _cell_args(rest, 2)
                ok = board.erase(r, c)
                emit(f"erase {rc_to_key(r, c)}: {'ok' if ok else 'rejected (clue)'}")
            elif cmd == "choices":
                r, c = _cell_args(rest, 2)
                emit(_format_choices(choices_tool(board, r, c)))
            elif cmd == "candidates":
                for key, opts in compute_candidates_tool(board)["candidates"].items():
                    emit(f"{key}: " + (" ".join(map(str, opts)) or "none"))
            elif cmd == "hint":
                emit(_format_hint(hint_tool(board)))
            elif cmd == "solve":
                result = solve_tool(board, verbose=not cfg.quiet and cfg.log_stats)
                emit("solved" if result["solved"] else "no solution")
                if board.is_solved():
                    emit(render_grid(board, cfg.empty_char))
            else:
                emit(f"unknown command {cmd!r}; {PLAY_HELP}")
        except ValueError as e:
            emit(f"error: {e}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config,
                          output="json" if args.json else None,
                          quiet=args.quiet)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        board = _load(args.puzzle)
    except (OSError, PuzzleFormatError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    log(f"loaded puzzle with {sum(1 for _ in board.empty_cells())} empty cells", quiet=cfg.quiet)

    if args.play:
        # commands always come from stdin, after the puzzle when it was read from there too
        return play(board, sys.stdin, cfg)

    status = 0
    payload: dict = {"original": board.puzzle_rows()}
    text: list[str] = []
    if args.check:
        payload["check"] = sanity_check(board.puzzle_rows(), board.rows())
        text.append(_format_check(payload["check"]))
    if args.choices:
        r, c = args.choices
        if not (1 <= r <= 9 and 1 <= c <= 9):
            print("error: --choices takes 1-based ROW COL in 1..9", file=sys.stderr)
            return 2
        payload["choices"] = choices_tool(board, r - 1, c - 1)
        text.append(_format_choices(payload["choices"]))
    if args.hint:
        payload["hint"] = hint_tool(board)
        text.append(_format_hint(payload["hint"]))
    if args.solve:
        result = solve_tool(board, verbose=not cfg.quiet and cfg.log_stats)
        payload["solve"] = {"solved": result["solved"], "stats": result["stats"]}
        text.append("solved" if result["solved"] else "no solution")
        if not result["solved"]:
            status = 1
    payload["current"] = board.rows()

    if cfg.output == "json":
        print(json.dumps(payload, indent=2))
    else:
        for line in text:
            print(line)
        print(render_grid(board, cfg.empty_char))
    return status


if __name__ == "__main__":
    sys.exit(main())
