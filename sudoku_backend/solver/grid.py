"""Sudoku grid of candidate sets with constraint propagation."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .candidates import ALL, Candidates
from .render import format_box

CELL_COUNT = 81
MARKERS = "0123456789."


class MalformedGridError(ValueError):
    """Raised when input does not describe 81 cells."""


class ContradictionError(ValueError):
    """Raised when propagation leaves a cell with no valid digit."""

    def __init__(self, index: int, message: Optional[str] = None):
        self.index = index
        row, col = divmod(index, 9)
        super().__init__(message or f"no candidates left for cell {index} (r{row + 1}c{col + 1})")


def _peer_groups(index: int) -> Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]:
    row, col = divmod(index, 9)
    top, left = row // 3 * 3, col // 3 * 3
    row_peers = tuple(row * 9 + c for c in range(9) if c != col)
    column_peers = tuple(r * 9 + col for r in range(9) if r != row)
    block_peers = tuple(
        r * 9 + c
        for r in range(top, top + 3)
        for c in range(left, left + 3)
        if (r, c) != (row, col)
    )
    return row_peers, column_peers, block_peers


# (row, column, block) peer indices for every cell, 8 indices per group.
PEER_GROUPS = tuple(_peer_groups(i) for i in range(CELL_COUNT))
# All distinct cells sharing a unit with each cell.
NEIGHBORS = tuple(
    tuple(sorted(set(row) | set(col) | set(block))) for row, col, block in PEER_GROUPS
)


class Grid:
    """Mutable 9x9 Sudoku grid, one candidate set per cell in row-major order."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Iterable[int]] = None):
        if cells is None:
            self._cells: List[Candidates] = [ALL] * CELL_COUNT
            return
        squares = [Candidates(c) for c in cells]
        if len(squares) != CELL_COUNT:
            raise MalformedGridError(f"the grid must have {CELL_COUNT} squares, got {len(squares)}")
        for index, square in enumerate(squares):
            if not 0 <= square <= ALL:
                raise MalformedGridError(f"square {index} holds {int(square):#x}, outside the 9-digit domain")
        self._cells = squares

    @classmethod
    def from_text(cls, text: str | bytes) -> "Grid":
        """
        Build a grid from a puzzle string.

        Digits 1-9 fix a cell, ``0`` or ``.`` leave it unknown and every other
        character is ignored. Anything after the 81st cell is ignored.

        Args:
            text: Puzzle text or raw bytes

        Returns:
            The parsed grid

        Raises:
            MalformedGridError: Fewer than 81 cells were found
        """
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8", errors="replace")

        squares: List[Candidates] = []
        for ch in text:
            if ch not in MARKERS:
                continue
            squares.append(ALL if ch == "." else Candidates.from_digit(ord(ch) - ord("0")))
            if len(squares) == CELL_COUNT:
                break

        if len(squares) != CELL_COUNT:
            raise MalformedGridError(
                f"the grid must have {CELL_COUNT} squares, found {len(squares)}"
            )
        return cls(squares)

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> "Grid":
        """Build a grid from 9 rows of 9 ints, 0 for unknown cells."""
        if not isinstance(rows, list) or len(rows) != 9:
            raise MalformedGridError("the grid must have 9 rows")

        squares: List[Candidates] = []
        for r, row in enumerate(rows):
            if not isinstance(row, list) or len(row) != 9:
                raise MalformedGridError(f"row {r} must have 9 cells")
            for value in row:
                if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 9:
                    raise MalformedGridError(f"invalid cell value {value!r} in row {r}")
                squares.append(Candidates.from_digit(value))
        return cls(squares)

    @property
    def cells(self) -> Tuple[Candidates, ...]:
        return tuple(self._cells)

    def get(self, i: int) -> Candidates:
        return self._cells[i]

    def set(self, i: int, digit: int) -> None:
        """Fix cell *i* to *digit* without propagating."""
        if not 1 <= digit <= 9:
            raise ValueError(f"digit must be between 1 and 9, got {digit}")
        self._cells[i] = Candidates.from_digit(digit)

    def can_set(self, i: int, digit: int) -> bool:
        return digit in self._cells[i]

    def clone(self) -> "Grid":
        snapshot = Grid.__new__(Grid)
        snapshot._cells = list(self._cells)
        return snapshot

    def restore(self, snapshot: "Grid") -> None:
        """Overwrite every cell with the cells of *snapshot*."""
        self._cells[:] = snapshot._cells

    def row_peers(self, i: int) -> List[Candidates]:
        return [self._cells[j] for j in PEER_GROUPS[i][0]]

    def column_peers(self, i: int) -> List[Candidates]:
        return [self._cells[j] for j in PEER_GROUPS[i][1]]

    def block_peers(self, i: int) -> List[Candidates]:
        return [self._cells[j] for j in PEER_GROUPS[i][2]]

    def propagate(self) -> List[int]:
        """
        Apply exclusion and deduction until no new cell is determined.

        Returns:
            Indices of the cells determined by this call, in the order they
            were determined. An empty list means the grid was already reduced.

        Raises:
            ContradictionError: Some cell ran out of candidates, or two
                determined cells in one unit hold the same digit
        """
        determined: List[int] = []
        while True:
            changes = self.reduce_by_exclusion()
            changes += self.reduce_by_deduction()
            if not changes:
                return determined
            determined.extend(changes)

    def reduce_by_exclusion(self) -> List[int]:
        return [i for i in range(CELL_COUNT) if self.exclude_cell(i)]

    def reduce_by_deduction(self) -> List[int]:
        return [i for i in range(CELL_COUNT) if self.deduce_cell(i)]

    def exclude_cell(self, i: int) -> bool:
        """Remove digits already placed in the cell's row, column and block.

        Returns True when the cell became determined.
        """
        cells = self._cells
        square = cells[i]
        if square.is_determined():
            for j in NEIGHBORS[i]:
                if cells[j] == square:
                    raise ContradictionError(
                        i, f"digit {square.digit} appears in cells {i} and {j}"
                    )
            return False

        for peers in PEER_GROUPS[i]:
            square = square.exclude_determined(cells[j] for j in peers)
        if square.is_empty():
            raise ContradictionError(i)

        cells[i] = square
        return square.is_determined()

    def deduce_cell(self, i: int) -> bool:
        """Place a digit that has nowhere else to go in one of the cell's units.

        Returns True when the cell was assigned.
        """
        cells = self._cells
        square = cells[i]
        if square.is_determined():
            return False

        for peers in PEER_GROUPS[i]:
            only = Candidates.missing(cells[j] for j in peers).intersect(square)
            # Several missing digits give no deduction.
            if only.is_determined():
                cells[i] = only
                return True
        return False

    def is_solved(self) -> bool:
        return all(square.is_determined() for square in self._cells)

    def to_rows(self) -> List[List[int]]:
        """Return 9 rows of ints with 0 for every undetermined cell."""
        values = [sq.digit if sq.is_determined() else 0 for sq in self._cells]
        return [values[r * 9:r * 9 + 9] for r in range(9)]

    def candidate_lists(self) -> List[List[int]]:
        return [list(square) for square in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({''.join(sq.display_char() for sq in self._cells)!r})"

    def __str__(self) -> str:
        return format_box(self)


def parse_grid(text: str | bytes) -> Grid:
    """Convenience function to build a grid from puzzle text."""
    return Grid.from_text(text)
