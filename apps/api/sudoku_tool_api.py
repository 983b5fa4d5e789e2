# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from solver.solver_core import Board
from solver.sudoku_tools import apply_move as _apply_move
from solver.sudoku_tools import choices_tool, compute_candidates_tool, hint_tool, load_board, sanity_check, solve_tool

app = FastAPI(title="Sudoku Engine Tool API")


class BoardModel(BaseModel):
    original: list[list[int]]
    current: list[list[int]] | None = None


class SanityModel(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


class ChoicesRequest(BoardModel):
    row: int  # 1-based
    col: int  # 1-based


class MoveModel(BaseModel):
    cell: str
    digit: int | None = None
    type: str = "placement"


class ApplyMoveRequest(BoardModel):
    move: MoveModel


def _board(req: BoardModel) -> Board:
    try:
        return load_board(req.original, req.current)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/sanity_check")
def api_sanity(payload: SanityModel):
    try:
        Board.from_grid(payload.original)
        Board.from_grid(payload.current)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return sanity_check(payload.original, payload.current)


@app.post("/compute_candidates")
def api_cands(req: BoardModel):
    return compute_candidates_tool(_board(req))


@app.post("/choices")
def api_choices(req: ChoicesRequest):
    board = _board(req)
    if not (1 <= req.row <= 9 and 1 <= req.col <= 9):
        raise HTTPException(status_code=422, detail="row and col are 1..9")
    return choices_tool(board, req.row - 1, req.col - 1)


@app.post("/hint")
def api_hint(req: BoardModel):
    return hint_tool(_board(req))


@app.post("/solve")
def api_solve(req: BoardModel):
    return solve_tool(_board(req))


@app.post("/apply_move")
def api_apply(req: ApplyMoveRequest):
    board = _board(req)
    move = req.move.model_dump(exclude_none=True)
    if move["type"] not in ("placement", "erase"):
        raise HTTPException(status_code=422, detail="move type must be 'placement' or 'erase'")
    if move["type"] == "placement" and "digit" not in move:
        raise HTTPException(status_code=422, detail="placement needs a digit")
    try:
        return _apply_move(board, move)
    except (ValueError, IndexError) as e:
        raise HTTPException(status_code=422, detail=str(e))
