"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging
import os
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from ..models.schemas import (
    HealthResponse,
    PropagateResponse,
    SolveRequest,
    SolveResponse,
    TextSolveRequest,
    TextSolveResponse,
)
from ..solver.backtracking import SudokuSolver, is_valid_solution
from ..solver.grid import ContradictionError, Grid, MalformedGridError
from ..solver.render import format_box

router = APIRouter()
_LOGGER = logging.getLogger(__name__)
_SELF_CHECK_PASSED: bool | None = None

_T = TypeVar("_T", int, float)

SELF_CHECK_PUZZLE = """
    ... 8.1 ...
    ... ... .43
    5.. ... ...

    ... .7. 8..
    ... ... 1..
    .2. .3. ...

    6.. ... .75
    ..3 4.. ...
    ... 2.. 6..
"""


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _self_check_enabled() -> bool:
    return _env("SUDOKU_STARTUP_SELF_CHECK", 1) != 0


def run_self_check() -> tuple[bool, str | None]:
    """Solve a known 17-clue puzzle and verify the result."""
    global _SELF_CHECK_PASSED

    grid = Grid.from_text(SELF_CHECK_PUZZLE)
    if not SudokuSolver().solve(grid):
        _SELF_CHECK_PASSED = False
        return False, "self-check puzzle reported as unsolvable"
    if not is_valid_solution(grid.to_rows()):
        _SELF_CHECK_PASSED = False
        return False, "self-check produced an invalid solution"

    _SELF_CHECK_PASSED = True
    return True, None


def _solve(grid: Grid) -> tuple[bool, SudokuSolver]:
    solver = SudokuSolver()
    return solver.solve(grid), solver


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", self_check_passed=_SELF_CHECK_PASSED)


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
async def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    try:
        cells = request.grid.cells

        try:
            grid = Grid.from_rows(cells)
        except MalformedGridError as e:
            _LOGGER.warning("Rejected grid: %s", e)
            return SolveResponse(
                success=False,
                original=cells,
                solved=None,
                message=f"Invalid Sudoku grid format: {e}",
            )

        solved, solver = _solve(grid)
        if not solved:
            return SolveResponse(
                success=False,
                original=cells,
                solved=None,
                message="Puzzle has no solution",
                guesses=solver.guesses,
                backtracks=solver.backtracks,
            )

        return SolveResponse(
            success=True,
            original=cells,
            solved=grid.to_rows(),
            message="Puzzle solved successfully",
            guesses=solver.guesses,
            backtracks=solver.backtracks,
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/sudoku:solveText",
    response_model=TextSolveResponse,
    tags=["Sudoku"],
)
async def solve_sudoku_text(request: TextSolveRequest):
    """
    Solve a Sudoku puzzle given as text.

    Digits 1-9 are givens, '0' or '.' mark empty cells and any other
    character (spaces, separators, box drawing) is ignored.
    """
    max_chars = _env("SUDOKU_MAX_PUZZLE_CHARS", 4096)
    if len(request.puzzle) > max_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Puzzle text exceeds {max_chars} characters",
        )

    try:
        try:
            grid = Grid.from_text(request.puzzle)
        except MalformedGridError as e:
            _LOGGER.warning("Rejected puzzle text: %s", e)
            return TextSolveResponse(
                success=False,
                original=None,
                solved=None,
                message=f"Invalid Sudoku grid format: {e}",
            )

        original = grid.to_rows()
        solved, solver = _solve(grid)
        if not solved:
            return TextSolveResponse(
                success=False,
                original=original,
                solved=None,
                message="Puzzle has no solution",
                guesses=solver.guesses,
                backtracks=solver.backtracks,
            )

        return TextSolveResponse(
            success=True,
            original=original,
            solved=grid.to_rows(),
            message="Puzzle solved successfully",
            guesses=solver.guesses,
            backtracks=solver.backtracks,
            rendered=format_box(grid),
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/sudoku:propagate",
    response_model=PropagateResponse,
    tags=["Sudoku"],
)
async def propagate_sudoku(request: SolveRequest):
    """Reduce candidates by propagation only, without guessing."""
    try:
        try:
            grid = Grid.from_rows(request.grid.cells)
        except MalformedGridError as e:
            _LOGGER.warning("Rejected grid: %s", e)
            return PropagateResponse(
                success=False, message=f"Invalid Sudoku grid format: {e}"
            )

        try:
            determined = grid.propagate()
        except ContradictionError as e:
            return PropagateResponse(
                success=False,
                message=f"Contradiction: {e}",
                contradiction_cell=e.index,
            )

        message = "Puzzle solved by propagation" if grid.is_solved() else "Propagation finished"
        return PropagateResponse(
            success=True,
            message=message,
            grid=grid.to_rows(),
            candidates=grid.candidate_lists(),
            determined=determined,
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
