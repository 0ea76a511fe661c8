"""Backtracking searches: Sudoku and the n-queens puzzle."""

from __future__ import annotations

from collections.abc import MutableSequence

_SYMBOLS = "123456789"
EMPTY = "."
QUEEN = "Q"


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill the empty (``'.'``) cells of a 9x9 board in place.

    Cells are filled in row-major order trying ``'1'`` to ``'9'``. Returns
    True if the board was completed; otherwise it is left as it was.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")
    rows: list[set[str]] = [set() for _ in range(9)]
    cols: list[set[str]] = [set() for _ in range(9)]
    boxes: list[set[str]] = [set() for _ in range(9)]
    empty: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == EMPTY:
                empty.append((r, c))
            else:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[_box(r, c)].add(cell)

    def place(k: int) -> bool:
        if k == len(empty):
            return True
        r, c = empty[k]
        b = _box(r, c)
        for symbol in _SYMBOLS:
            if symbol in rows[r] or symbol in cols[c] or symbol in boxes[b]:
                continue
            board[r][c] = symbol
            rows[r].add(symbol)
            cols[c].add(symbol)
            boxes[b].add(symbol)
            if place(k + 1):
                return True
            board[r][c] = EMPTY
            rows[r].discard(symbol)
            cols[c].discard(symbol)
            boxes[b].discard(symbol)
        return False

    return place(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n x n board.

    Each board is a list of row strings of ``'.'`` and ``'Q'``; solutions
    are ordered by queen column, first row first.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    solutions: list[list[str]] = []
    queens: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append([EMPTY * c + QUEEN + EMPTY * (n - c - 1) for c in queens])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            queens.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            queens.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    place(0)
    return solutions