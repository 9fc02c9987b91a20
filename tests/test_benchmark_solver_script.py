"""Tests for the solver benchmark script."""

from pathlib import Path

import pytest

from scripts.benchmark_solver import main, parse_args, run_benchmark
from sudoku_backend.solver.puzzle_file import read_puzzle_file

DATA_FILE = Path(__file__).resolve().parent / "data" / "puzzles.txt"


def _sample_puzzles():
    return [grid for _, grid in read_puzzle_file(DATA_FILE)]


def test_run_benchmark_on_sample_file():
    puzzles = _sample_puzzles()
    total, avg, backtracks = run_benchmark(puzzles, rounds=2)

    assert len(puzzles) == 4
    assert total >= 0.0
    assert avg == pytest.approx(total / 8)
    assert backtracks >= 0


def test_run_benchmark_leaves_puzzles_untouched():
    puzzles = _sample_puzzles()
    before = [grid.clone() for grid in puzzles]

    run_benchmark(puzzles, rounds=1)

    assert puzzles == before


@pytest.mark.parametrize("rounds, puzzles", [(0, None), (-3, None), (1, [])])
def test_run_benchmark_rejects_empty_work(rounds, puzzles):
    with pytest.raises(ValueError):
        run_benchmark(_sample_puzzles() if puzzles is None else puzzles, rounds)


@pytest.mark.parametrize("rounds", ["0", "-1", "many"])
def test_rounds_must_be_positive(rounds):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--rounds", rounds])
    assert excinfo.value.code == 2


def test_default_arguments():
    args = parse_args([])
    assert args.rounds == 3
    assert args.puzzles == "tests/data/puzzles.txt"


def test_main_prints_results(capsys):
    assert main(["--puzzles", str(DATA_FILE), "--rounds", "1"]) == 0

    out = capsys.readouterr().out
    assert "Solver benchmark results" in out
    assert "puzzles=4 rounds=1" in out
    assert "backtracks_per_round=" in out


def test_main_with_empty_file(tmp_path, capsys):
    empty = tmp_path / "empty.txt"
    empty.write_text("0\n", encoding="utf-8")

    assert main(["--puzzles", str(empty), "--rounds", "1"]) == 1
    assert "No puzzles found" in capsys.readouterr().out
