"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")

    class Config:
        json_schema_extra = {
            "example": {
                "cells": [
                    [5, 3, 0, 0, 7, 0, 0, 0, 0],
                    [6, 0, 0, 1, 9, 5, 0, 0, 0],
                    [0, 9, 8, 0, 0, 0, 0, 6, 0],
                    [8, 0, 0, 0, 6, 0, 0, 0, 3],
                    [4, 0, 0, 8, 0, 3, 0, 0, 1],
                    [7, 0, 0, 0, 2, 0, 0, 0, 6],
                    [0, 6, 0, 0, 0, 0, 2, 8, 0],
                    [0, 0, 0, 4, 1, 9, 0, 0, 5],
                    [0, 0, 0, 0, 8, 0, 0, 7, 9],
                ]
            }
        }


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class TextSolveRequest(BaseModel):
    """Request to solve a Sudoku given as text."""

    puzzle: str = Field(
        description="81 cells as digits, '0' or '.' for empty; other characters are ignored"
    )


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] | None = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")
    guesses: int = Field(default=0, description="Speculative assignments made")
    backtracks: int = Field(default=0, description="Guesses that were rolled back")


class TextSolveResponse(SolveResponse):
    """Response from solving a Sudoku given as text."""

    rendered: str | None = Field(
        default=None, description="Box-drawing rendering of the solved grid"
    )


class PropagateResponse(BaseModel):
    """Candidates left after constraint propagation alone."""

    success: bool = Field(description="Whether propagation finished without contradiction")
    message: str = Field(description="Status message")
    grid: list[list[int]] | None = Field(
        default=None, description="Grid after propagation (0 for open cells)"
    )
    candidates: list[list[int]] | None = Field(
        default=None, description="Remaining digits for each of the 81 cells"
    )
    determined: list[int] = Field(
        default_factory=list, description="Indices of cells determined by propagation"
    )
    contradiction_cell: int | None = Field(
        default=None, description="Cell where the contradiction was found"
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    self_check_passed: bool | None = Field(
        default=None, description="Result of the startup solver self-check"
    )
