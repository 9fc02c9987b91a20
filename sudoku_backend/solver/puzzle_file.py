"""Read line-oriented puzzle files.

The first line holds the number of puzzles and is skipped; each following
non-blank line is one puzzle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from .grid import Grid


def iter_puzzle_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, text)`` for every puzzle line, numbered from 1."""
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 or not line.strip():
            continue
        yield line_number, line.rstrip("\r\n")


def iter_puzzles(lines: Iterable[str]) -> Iterator[Tuple[int, Grid]]:
    """
    Parse puzzles from the lines of a puzzle file.

    Args:
        lines: File lines, header included

    Yields:
        ``(line_number, grid)`` pairs

    Raises:
        MalformedGridError: A puzzle line has fewer than 81 cells
    """
    for line_number, text in iter_puzzle_lines(lines):
        yield line_number, Grid.from_text(text)


def read_puzzle_lines(path: str | Path) -> List[Tuple[int, str]]:
    with Path(path).open(encoding="utf-8") as handle:
        return list(iter_puzzle_lines(handle))


def read_puzzle_file(path: str | Path) -> List[Tuple[int, Grid]]:
    with Path(path).open(encoding="utf-8") as handle:
        return list(iter_puzzles(handle))
