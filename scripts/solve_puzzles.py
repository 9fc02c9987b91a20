"""Solve every puzzle in a puzzle file and report timing."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts._paths import resolve_puzzle_path
from sudoku_backend.solver.backtracking import SudokuSolver
from sudoku_backend.solver.grid import Grid, MalformedGridError
from sudoku_backend.solver.puzzle_file import read_puzzle_lines

LOGGER = logging.getLogger("solve_puzzles")


@dataclass
class BatchReport:
    solved: int = 0
    guesses: int = 0
    backtracks: int = 0
    elapsed: float = 0.0
    unsolved_lines: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unsolved_lines

    def summary(self) -> str:
        return (
            f"solved {self.solved} sudokus in {self.elapsed:.3f}s "
            f"({self.guesses} guesses, {self.backtracks} backtracks)"
        )


def solve_file(path: Path, show: bool = False) -> BatchReport:
    report = BatchReport()
    solver = SudokuSolver()
    start = time.perf_counter()

    for line_number, text in read_puzzle_lines(path):
        try:
            grid = Grid.from_text(text)
        except MalformedGridError as exc:
            LOGGER.error("Skipping malformed puzzle on line %d: %s", line_number, exc)
            report.unsolved_lines.append(line_number)
            continue

        unsolved = str(grid) if show else None
        if not solver.solve(grid):
            LOGGER.warning("No solution for puzzle on line %d", line_number)
            report.unsolved_lines.append(line_number)
            continue

        report.solved += 1
        report.guesses += solver.guesses
        report.backtracks += solver.backtracks
        LOGGER.debug(
            "line %d: %d guesses, %d backtracks",
            line_number,
            solver.guesses,
            solver.backtracks,
        )
        if show:
            print(f"puzzle on line {line_number}:")
            print(unsolved)
            print(grid)
            print()

    report.elapsed = time.perf_counter() - start
    return report


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve a batch of Sudoku puzzles")
    parser.add_argument(
        "puzzle_file",
        help="Puzzle file: first line is the puzzle count, then one puzzle per line",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print every puzzle and its solution",
    )
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    try:
        path = resolve_puzzle_path(args.puzzle_file)
    except FileNotFoundError as exc:
        LOGGER.error("%s", exc)
        return 2

    report = solve_file(path, show=args.show)
    print(report.summary())
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
