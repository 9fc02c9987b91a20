"""Sudoku solver using constraint propagation and backtracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .candidates import DIGITS
from .grid import CELL_COUNT, ContradictionError, Grid

_LOGGER = logging.getLogger(__name__)

Rows = List[List[int]]


@dataclass
class SolveResult:
    """Outcome of solving one puzzle."""

    solved: bool
    grid: Grid
    guesses: int = 0
    backtracks: int = 0

    @property
    def rows(self) -> Optional[Rows]:
        return self.grid.to_rows() if self.solved else None


class SudokuSolver:
    """Solves Sudoku puzzles by propagating constraints and guessing."""

    def __init__(self):
        self.guesses = 0
        self.backtracks = 0

    def solve(self, grid: Grid) -> bool:
        """
        Solve a grid in place.

        Args:
            grid: Grid to solve; left fully determined on success

        Returns:
            True if a solution was found, False if the puzzle has none
        """
        self.guesses = 0
        self.backtracks = 0
        solved = self._solve_recursive(grid, 0)
        _LOGGER.debug(
            "solve finished: solved=%s guesses=%d backtracks=%d",
            solved,
            self.guesses,
            self.backtracks,
        )
        return solved

    def _solve_recursive(self, grid: Grid, start_at: int) -> bool:
        """Propagate, then try each remaining digit of the first open cell."""
        try:
            grid.propagate()
        except ContradictionError:
            return False

        index = self._find_open_cell(grid, start_at)
        if index is None:
            return True

        for digit in DIGITS:
            if not grid.can_set(index, digit):
                continue

            snapshot = grid.clone()
            grid.set(index, digit)
            self.guesses += 1

            if self._solve_recursive(grid, index):
                return True

            grid.restore(snapshot)
            self.backtracks += 1

        return False

    def _find_open_cell(self, grid: Grid, start_at: int = 0) -> Optional[int]:
        """
        Find the next cell with more than one candidate.

        Cells before *start_at* are already determined by the caller's frame.

        Returns:
            Cell index if one is found, None when the grid is complete
        """
        for i in range(start_at, CELL_COUNT):
            if not grid.get(i).is_determined():
                return i
        return None

    def solve_grid(self, grid: Grid) -> SolveResult:
        solved = self.solve(grid)
        return SolveResult(
            solved=solved,
            grid=grid,
            guesses=self.guesses,
            backtracks=self.backtracks,
        )


def solve_text(text: str | bytes) -> SolveResult:
    """Parse puzzle text and solve it."""
    return SudokuSolver().solve_grid(Grid.from_text(text))


def solve_rows(rows: Rows) -> SolveResult:
    """Solve a 9x9 list of lists with 0 for empty cells."""
    return SudokuSolver().solve_grid(Grid.from_rows(rows))


def is_valid_solution(rows: Rows) -> bool:
    """
    Check that every row, column and block holds the digits 1-9 once.

    Args:
        rows: 9x9 grid of ints

    Returns:
        True if the grid is a complete, valid Sudoku solution
    """
    if not isinstance(rows, list) or len(rows) != 9:
        return False
    if any(not isinstance(row, list) or len(row) != 9 for row in rows):
        return False

    digits = set(range(1, 10))
    for i in range(9):
        if set(rows[i]) != digits:
            return False
        if {rows[r][i] for r in range(9)} != digits:
            return False
        top, left = i // 3 * 3, i % 3 * 3
        block = {rows[r][c] for r in range(top, top + 3) for c in range(left, left + 3)}
        if block != digits:
            return False
    return True
