# tests/test_board_basics.py
import pytest

from solver.solver_core import Board, index
from solver.sudoku_tools import sanity_check


def test_board_starts_as_puzzle(classic_board):
    assert list(classic_board.puzzle) == classic_board.solution
    assert classic_board.get(0, 0) == 5
    assert classic_board.get(0, 2) == 0
    assert classic_board.is_clue(0, 0)
    assert not classic_board.is_clue(0, 2)


def test_board_rejects_bad_cells():
    with pytest.raises(ValueError):
        Board([0] * 80)
    with pytest.raises(ValueError):
        Board([0] * 80 + [10])
    with pytest.raises(ValueError):
        Board.from_grid([[0] * 9] * 8)


def test_constraint_checks(classic_board):
    assert classic_board.violates_row(0, 5)
    assert not classic_board.violates_row(0, 1)
    assert classic_board.violates_col(0, 8)
    assert not classic_board.violates_col(0, 9)
    assert classic_board.violates_box(1, 1, 9)
    assert not classic_board.violates_box(4, 4, 1)


def test_constraint_checks_reject_out_of_range_cells(classic_board):
    with pytest.raises(IndexError):
        classic_board.violates_row(9, 1)
    with pytest.raises(IndexError):
        classic_board.violates_col(-1, 1)
    with pytest.raises(IndexError):
        classic_board.violates_box(0, 9, 1)


def test_fill_accepts_legal_digit(classic_board):
    assert classic_board.fill(0, 2, 4)
    assert classic_board.get(0, 2) == 4
    # the placed digit now blocks itself in its row, column and box
    assert classic_board.violates_row(0, 4)
    assert classic_board.violates_col(2, 4)
    assert classic_board.violates_box(0, 2, 4)


def test_fill_rejects_conflicts_without_mutation(classic_board):
    before = classic_board.solution[:]
    assert not classic_board.fill(0, 2, 5)  # row
    assert not classic_board.fill(0, 2, 8)  # column
    assert not classic_board.fill(0, 2, 6)  # box
    assert classic_board.solution == before


def test_fill_precondition_errors(classic_board):
    with pytest.raises(IndexError):
        classic_board.fill(9, 0, 1)
    with pytest.raises(ValueError):
        classic_board.fill(0, 2, 0)
    with pytest.raises(ValueError):
        classic_board.fill(0, 2, 10)


def test_clues_are_immutable(classic_board):
    for digit in range(1, 10):
        assert not classic_board.fill(0, 0, digit)
    assert not classic_board.erase(0, 0)
    classic_board.fill(0, 2, 4)
    classic_board.reset()
    assert not classic_board.erase(0, 1)
    assert classic_board.get(0, 0) == 5
    assert classic_board.get(0, 1) == 3


def test_erase_non_clue(classic_board):
    assert classic_board.erase(0, 2)  # already empty still reports success
    assert classic_board.fill(0, 2, 4)
    assert classic_board.erase(0, 2)
    assert classic_board.get(0, 2) == 0


def test_reset_is_idempotent(classic_board):
    classic_board.fill(0, 2, 4)
    classic_board.fill(0, 3, 6)
    classic_board.reset()
    once = classic_board.solution[:]
    classic_board.reset()
    assert classic_board.solution == once == list(classic_board.puzzle)


def test_is_solved_checks_completeness_only():
    # Two 5s in row 0, written directly instead of through fill.
    board = Board.empty()
    board.solution[index(0, 0)] = 5
    board.solution[index(0, 1)] = 5
    assert not board.is_solved()
    assert not sanity_check(board.puzzle_rows(), board.rows())["ok"]

    # A full grid that breaks every row still counts as "solved".
    board.solution[:] = [5] * 81
    assert board.is_solved()
    report = sanity_check(board.puzzle_rows(), board.rows())
    assert not report["ok"]
    assert {"type": "duplicate", "unit": "r1", "digits": [5],
            "cells": [f"r1c{c}" for c in range(1, 10)]} in report["issues"]


def test_copy_is_independent(classic_board):
    other = classic_board.copy()
    other.fill(0, 2, 4)
    assert classic_board.get(0, 2) == 0
    assert other.puzzle == classic_board.puzzle


@pytest.mark.parametrize("digit", [0, 10, -1])
def test_constraint_checks_reject_out_of_range_digits(classic_board, digit):
    with pytest.raises(ValueError):
        classic_board.violates_row(0, digit)
    with pytest.raises(ValueError):
        classic_board.violates_col(0, digit)
    with pytest.raises(ValueError):
        classic_board.violates_box(0, 0, digit)
