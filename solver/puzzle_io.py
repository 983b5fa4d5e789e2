"""Reading puzzles from text and rendering boards with box separators."""

from __future__ import annotations

import io
from typing import TextIO

from .solver_core import DIM, DIMBOX, EMPTY, Board

EMPTY_CHARS = ("_", "0")


class PuzzleFormatError(ValueError):
    """The input does not hold 81 puzzle characters."""


def _next_char(stream: TextIO) -> str:
    while True:
        ch = stream.read(1)
        if ch == "" or not ch.isspace():
            return ch


def read_puzzle(stream: TextIO) -> Board:
    """Read 81 non-blank characters row-major from ``stream``.

    '_' or '0' is an empty cell, '1'..'9' a clue. Nothing past the 81st
    character is consumed.
    """
    cells = []
    for n in range(DIM * DIM):
        ch = _next_char(stream)
        if ch == "":
            raise PuzzleFormatError(f"expected {DIM * DIM} cells, input ended after {n}")
        if ch in EMPTY_CHARS:
            cells.append(EMPTY)
        elif "1" <= ch <= "9":
            cells.append(int(ch))
        else:
            raise PuzzleFormatError(f"unexpected character {ch!r} at cell {n + 1}")
    return Board(cells)


def parse_puzzle(text: str) -> Board:
    return read_puzzle(io.StringIO(text))


def _separator() -> str:
    return ("+" + "-" * (DIMBOX * 3)) * (DIM // DIMBOX) + "+"


def render_grid(board: Board, empty: str = "_") -> str:
    lines = []
    for r, row in enumerate(board.rows()):
        if r % DIMBOX == 0:
            lines.append(_separator())
        line = ""
        for c, v in enumerate(row):
            if c % DIMBOX == 0:
                line += "|"
            line += f" {v if v != EMPTY else empty} "
        lines.append(line + "|")
    lines.append(_separator())
    return "\n".join(lines) + "\n"
