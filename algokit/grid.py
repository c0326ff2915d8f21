"""Algorithms on two-dimensional grids and boards."""

from __future__ import annotations

from typing import List, MutableSequence, Sequence, Set, Tuple

_NEIGHBOURS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def game_of_life(board: List[List[int]]) -> None:
    """Advance a Game of Life board by one generation, in place."""
    rows = len(board)
    if rows == 0:
        return
    cols = len(board[0])

    def alive_around(r: int, c: int) -> int:
        return sum(
            board[r + dr][c + dc] & 1
            for dr, dc in _NEIGHBOURS
            if 0 <= r + dr < rows and 0 <= c + dc < cols
        )

    # bit 0 holds the current state, bit 1 the next one
    for r in range(rows):
        for c in range(cols):
            alive = alive_around(r, c)
            if board[r][c] & 1:
                if 2 <= alive <= 3:
                    board[r][c] = 3
            elif alive == 3:
                board[r][c] = 2
    for row in board:
        for c, cell in enumerate(row):
            row[c] = cell >> 1


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells of a 9x9 board break no Sudoku rule.

    Empty cells are ``"."``.
    """
    seen: Set[Tuple[str, int, str]] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == ".":
                continue
            keys = [("row", r, cell), ("col", c, cell), ("box", r // 3 * 3 + c // 3, cell)]
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def rotate(matrix: List[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def spiral_order(matrix: Sequence[Sequence[int]]) -> List[int]:
    """Values of the matrix read clockwise in a spiral from the top-left."""
    result: List[int] = []
    if not matrix or not matrix[0]:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][c] for c in range(left, right + 1))
        result.extend(matrix[r][right] for r in range(top + 1, bottom + 1))
        if top < bottom and left < right:
            result.extend(matrix[bottom][c] for c in range(right - 1, left - 1, -1))
            result.extend(matrix[r][left] for r in range(bottom - 1, top, -1))
        top, bottom, left, right = top + 1, bottom - 1, left + 1, right - 1
    return result


def set_zeroes(matrix: List[MutableSequence[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        for c in range(len(row)):
            if r in zero_rows or c in zero_cols:
                row[c] = 0


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, each used once."""
    rows = len(board)
    if rows == 0:
        return False
    cols = len(board[0])
    used: Set[Tuple[int, int]] = set()

    def trace(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols) or (r, c) in used:
            return False
        if board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(
            trace(r + dr, c + dc, index + 1)
            for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1))
        )
        used.discard((r, c))
        return found

    return any(trace(r, c, 0) for r in range(rows) for c in range(cols))