"""Benchmark solver runtime on a puzzle file."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts._paths import resolve_puzzle_path
from sudoku_backend.solver.backtracking import SudokuSolver
from sudoku_backend.solver.grid import Grid
from sudoku_backend.solver.puzzle_file import read_puzzle_file


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku solver runtime")
    parser.add_argument(
        "--puzzles",
        default="tests/data/puzzles.txt",
        help="Puzzle file to benchmark",
    )
    parser.add_argument(
        "--rounds",
        type=_positive_int,
        default=3,
        help="Number of times every puzzle is solved",
    )
    return parser.parse_args(argv)


def run_benchmark(puzzles: list[Grid], rounds: int) -> tuple[float, float, int]:
    if rounds < 1 or not puzzles:
        raise ValueError("need at least one round and one puzzle")

    solver = SudokuSolver()
    backtracks = 0
    start = time.perf_counter()

    for _ in range(rounds):
        for puzzle in puzzles:
            solver.solve(puzzle.clone())
            backtracks += solver.backtracks

    elapsed = time.perf_counter() - start
    avg_per_puzzle = elapsed / (rounds * len(puzzles))
    return elapsed, avg_per_puzzle, backtracks


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    path = resolve_puzzle_path(args.puzzles)
    puzzles = [grid for _, grid in read_puzzle_file(path)]
    if not puzzles:
        print(f"No puzzles found in {path}")
        return 1

    total, avg, backtracks = run_benchmark(puzzles, args.rounds)

    print("Solver benchmark results")
    print(f"puzzles={len(puzzles)} rounds={args.rounds}")
    print(f"total={total:.3f}s avg_per_puzzle={avg * 1000.0:.3f}ms")
    print(f"backtracks_per_round={backtracks // args.rounds}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
