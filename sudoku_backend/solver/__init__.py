"""Solver module exports."""

from .backtracking import SolveResult, SudokuSolver, is_valid_solution, solve_rows, solve_text
from .candidates import ALL, NONE, Candidates
from .grid import ContradictionError, Grid, MalformedGridError, parse_grid
from .render import format_box, format_compact

__all__ = [
    "ALL",
    "NONE",
    "Candidates",
    "ContradictionError",
    "Grid",
    "MalformedGridError",
    "SolveResult",
    "SudokuSolver",
    "format_box",
    "format_compact",
    "is_valid_solution",
    "parse_grid",
    "solve_rows",
    "solve_text",
]
