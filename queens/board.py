"""
Board state for the queens placement search.

This module provides:
- SearchBoard: mutable n×n grid of optional piece occupants
- make_solution: materialize a 'Q'/'*' character grid from placed queens
- board_to_str: text rendering of a character grid
"""

import numpy as np
from typing import Iterable, List, Optional

from .interfaces import BoardInterface, PieceInterface


QUEEN_MARK = 'Q'
EMPTY_MARK = '*'


class SearchBoard(BoardInterface):
    """
    Square occupancy grid mutated in place by the search.

    Cells hold a piece reference or None. At most one occupant per cell;
    placing onto an occupied cell or clearing an empty one is rejected.

    Attributes:
        _n: Board dimension
        _cells: List of rows, each a list of Optional[PieceInterface]
        _count: Number of occupied cells
    """

    def __init__(self, n: int = 8):
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Board size must be an int, got {type(n).__name__}")
        if n < 1:
            raise ValueError(f"Board size must be positive, got {n}")
        self._n = n
        self._cells: List[List[Optional[PieceInterface]]] = [
            [None] * n for _ in range(n)
        ]
        self._count = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def occupied(self) -> int:
        """Number of occupied cells."""
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def _check_bounds(self, row: int, column: int) -> None:
        if not (0 <= row < self._n and 0 <= column < self._n):
            raise IndexError(f"Cell ({row}, {column}) outside {self._n}x{self._n} board")

    def get_cell(self, row: int, column: int) -> Optional[PieceInterface]:
        self._check_bounds(row, column)
        return self._cells[row][column]

    def place(self, piece: PieceInterface) -> None:
        if not isinstance(piece, PieceInterface):
            raise TypeError(f"Expected a piece, got {type(piece).__name__}")
        row, column = piece.row, piece.column
        self._check_bounds(row, column)
        if self._cells[row][column] is not None:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")
        self._cells[row][column] = piece
        self._count += 1

    def remove(self, row: int, column: int) -> PieceInterface:
        self._check_bounds(row, column)
        piece = self._cells[row][column]
        if piece is None:
            raise ValueError(f"Cell ({row}, {column}) is empty")
        self._cells[row][column] = None
        self._count -= 1
        return piece

    def pieces(self) -> List[PieceInterface]:
        return [p for line in self._cells for p in line if p is not None]

    def __repr__(self) -> str:
        return f"SearchBoard(n={self._n}, occupied={self._count})"


def make_solution(queens: Iterable[PieceInterface], n: int = 8) -> np.ndarray:
    """
    Materialize a solution grid from placed queens.

    Args:
        queens: Placed pieces; only their positions are read
        n: Board dimension

    Returns:
        Read-only n×n array with 'Q' at each queen and '*' elsewhere.
    """
    solution = np.full((n, n), EMPTY_MARK, dtype='<U1')
    for q in queens:
        solution[q.row, q.column] = QUEEN_MARK
    solution.flags.writeable = False
    return solution


def board_to_str(grid) -> str:
    """Render a character grid one row per line, cells separated by spaces."""
    return '\n'.join(' '.join(str(c) for c in line) for line in np.asarray(grid))
