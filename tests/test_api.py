"""Tests for the HTTP API."""

import logging

import pytest
from fastapi.testclient import TestClient

from sudoku_backend.api import routes
from sudoku_backend.main import app

SOLVED = "435269781682571493197834562826195347374682915951743628519326874248957136763418259"

PUZZLE_ROWS = [
    [0, 0, 0, 8, 0, 1, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 4, 3],
    [5, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 7, 0, 8, 0, 0],
    [0, 0, 0, 0, 0, 0, 1, 0, 0],
    [0, 2, 0, 0, 3, 0, 0, 0, 0],
    [6, 0, 0, 0, 0, 0, 0, 7, 5],
    [0, 0, 3, 4, 0, 0, 0, 0, 0],
    [0, 0, 0, 2, 0, 0, 6, 0, 0],
]

SOLUTION_ROWS = [
    [2, 3, 7, 8, 4, 1, 5, 6, 9],
    [1, 8, 6, 7, 9, 5, 2, 4, 3],
    [5, 9, 4, 3, 2, 6, 7, 1, 8],
    [3, 1, 5, 6, 7, 4, 8, 9, 2],
    [4, 6, 9, 5, 8, 2, 1, 3, 7],
    [7, 2, 8, 1, 3, 9, 4, 5, 6],
    [6, 4, 2, 9, 1, 8, 3, 7, 5],
    [8, 5, 3, 4, 6, 7, 9, 2, 1],
    [9, 7, 1, 2, 5, 3, 6, 8, 4],
]


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestSolveEndpoint:
    """Tests for /api/v1/sudoku:solve."""

    def test_solves_grid(self, client):
        response = client.post("/api/v1/sudoku:solve", json={"grid": {"cells": PUZZLE_ROWS}})
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is True
        assert body["original"] == PUZZLE_ROWS
        assert body["solved"] == SOLUTION_ROWS
        assert body["message"] == "Puzzle solved successfully"
        assert body["backtracks"] <= body["guesses"]

    def test_unsolvable_grid(self, client):
        rows = [row[:] for row in SOLUTION_ROWS]
        rows[0][0] = rows[0][1]
        response = client.post("/api/v1/sudoku:solve", json={"grid": {"cells": rows}})
        body = response.json()

        assert body["success"] is False
        assert body["solved"] is None
        assert body["message"] == "Puzzle has no solution"

    def test_invalid_shape(self, client):
        response = client.post(
            "/api/v1/sudoku:solve", json={"grid": {"cells": [[0] * 9] * 8}}
        )
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is False
        assert body["message"].startswith("Invalid Sudoku grid format")

    def test_out_of_range_value(self, client):
        rows = [row[:] for row in PUZZLE_ROWS]
        rows[4][4] = 12
        response = client.post("/api/v1/sudoku:solve", json={"grid": {"cells": rows}})

        assert response.json()["success"] is False

    def test_missing_body_is_rejected(self, client):
        response = client.post("/api/v1/sudoku:solve", json={})
        assert response.status_code == 422


class TestSolveTextEndpoint:
    """Tests for /api/v1/sudoku:solveText."""

    def test_solves_text(self, client):
        puzzle = "\n".join(
            "".join(str(v) if v else "." for v in row) for row in PUZZLE_ROWS
        )
        response = client.post("/api/v1/sudoku:solveText", json={"puzzle": puzzle})
        body = response.json()

        assert body["success"] is True
        assert body["original"] == PUZZLE_ROWS
        assert body["solved"] == SOLUTION_ROWS
        assert body["rendered"].splitlines()[1] == "║237│841│569║"

    def test_filled_grid_needs_no_backtracks(self, client):
        response = client.post("/api/v1/sudoku:solveText", json={"puzzle": SOLVED})
        body = response.json()

        assert body["success"] is True
        assert body["guesses"] == 0
        assert body["backtracks"] == 0

    def test_short_text(self, client):
        response = client.post("/api/v1/sudoku:solveText", json={"puzzle": "123"})
        body = response.json()

        assert body["success"] is False
        assert body["original"] is None
        assert "81 squares" in body["message"]

    def test_text_length_limit(self, client, monkeypatch):
        monkeypatch.setenv("SUDOKU_MAX_PUZZLE_CHARS", "100")
        response = client.post("/api/v1/sudoku:solveText", json={"puzzle": SOLVED + " " * 50})

        assert response.status_code == 413

    def test_invalid_limit_falls_back_to_default(self, client, monkeypatch):
        monkeypatch.setenv("SUDOKU_MAX_PUZZLE_CHARS", "lots")
        response = client.post("/api/v1/sudoku:solveText", json={"puzzle": SOLVED + " " * 50})

        assert response.status_code == 200
        assert response.json()["success"] is True


class TestPropagateEndpoint:
    """Tests for /api/v1/sudoku:propagate."""

    def test_reports_candidates(self, client):
        response = client.post("/api/v1/sudoku:propagate", json={"grid": {"cells": PUZZLE_ROWS}})
        body = response.json()

        assert body["success"] is True
        assert len(body["candidates"]) == 81
        assert body["candidates"][3] == [8]
        for index, row in enumerate(body["grid"]):
            for col, value in enumerate(row):
                if value:
                    assert body["candidates"][index * 9 + col] == [value]

    def test_reports_contradiction(self, client):
        rows = [row[:] for row in SOLUTION_ROWS]
        rows[0][0] = rows[0][1]
        response = client.post("/api/v1/sudoku:propagate", json={"grid": {"cells": rows}})
        body = response.json()

        assert body["success"] is False
        assert body["contradiction_cell"] is not None
        assert body["candidates"] is None

    def test_solved_by_propagation(self, client):
        rows = [[int(ch) for ch in SOLVED[r * 9:r * 9 + 9]] for r in range(9)]
        rows[0][0] = 0
        response = client.post("/api/v1/sudoku:propagate", json={"grid": {"cells": rows}})
        body = response.json()

        assert body["success"] is True
        assert body["determined"] == [0]
        assert body["grid"][0][0] == 4
        assert body["message"] == "Puzzle solved by propagation"

    def test_invalid_shape_is_logged(self, client, caplog):
        with caplog.at_level(logging.WARNING, logger="sudoku_backend.api.routes"):
            response = client.post(
                "/api/v1/sudoku:propagate", json={"grid": {"cells": [[0] * 9] * 8}}
            )
        body = response.json()

        assert body["success"] is False
        assert body["message"].startswith("Invalid Sudoku grid format")
        assert "Rejected grid: the grid must have 9 rows" in caplog.text


def test_env_helper(monkeypatch):
    monkeypatch.setenv("SUDOKU_TEST_VALUE", "7")
    assert routes._env("SUDOKU_TEST_VALUE", 1) == 7

    monkeypatch.setenv("SUDOKU_TEST_VALUE", "seven")
    assert routes._env("SUDOKU_TEST_VALUE", 1) == 1

    monkeypatch.delenv("SUDOKU_TEST_VALUE")
    assert routes._env("SUDOKU_TEST_VALUE", 2.5) == 2.5
