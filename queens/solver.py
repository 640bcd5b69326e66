"""
Backtracking placement search for the N-Queens problem.

This module provides:
- SearchStats: counters describing one exhaustive search
- QueenPlacementSolver: column-by-column backtracking enumerator
- find_all_queen_placements: convenience wrapper returning every solution

The search commits one queen per column, left to right. A candidate cell is
safe when no already-placed queen attacks it; the attack test is delegated
to the piece (`Queen.attacks`).
"""

import numpy as np
from dataclasses import dataclass, asdict
from typing import Callable, List, Dict
import time

from .interfaces import SolverInterface
from .board import SearchBoard, make_solution
from .pieces import Queen, VALID_COLORS


@dataclass
class SearchStats:
    """
    Counters for one search.

    Attributes:
        nodes_visited: Candidate cells tested
        nodes_pruned: Candidates rejected by the safety check
        placements: Queens committed to the board
        backtracks: Queens removed when unwinding
        solutions: Complete placements found
        max_depth: Deepest column reached with a committed queen
        time_elapsed: Wall time of the search in seconds
    """
    nodes_visited: int = 0
    nodes_pruned: int = 0
    placements: int = 0
    backtracks: int = 0
    solutions: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"Solutions: {self.solutions}, "
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Backtracks: {self.backtracks}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class QueenPlacementSolver(SolverInterface):
    """
    Exhaustive backtracking solver placing one queen per column.

    Rows are tried in ascending order in every column, which fixes the
    enumeration order of the returned solutions.
    """

    def __init__(
        self,
        n: int = 8,
        color: str = 'BLACK',
        log_interval: int = 0,
        board_factory: Callable[[int], SearchBoard] = SearchBoard
    ):
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Board size must be an int, got {type(n).__name__}")
        if n < 1:
            raise ValueError(f"Board size must be positive, got {n}")
        if color not in VALID_COLORS:
            raise ValueError(f"Invalid color '{color}', must be one of {list(VALID_COLORS)}")
        self._n = n
        self._color = color
        self._log_interval = log_interval
        self._board_factory = board_factory
        self._verbose = False
        self._start = 0.0
        self._stats = SearchStats()

    @property
    def n(self) -> int:
        return self._n

    def get_stats(self) -> SearchStats:
        return self._stats

    def solve(self, verbose: bool = False) -> List[np.ndarray]:
        """
        Enumerate every safe placement of n queens.

        Args:
            verbose: Whether to print progress

        Returns:
            List of read-only 'Q'/'*' grids in enumeration order.
        """
        self._verbose = verbose
        self._stats = SearchStats()
        self._start = time.time()

        board = self._board_factory(self._n)
        placed: List[Queen] = []
        solutions: List[np.ndarray] = []

        self._place_column(0, board, placed, solutions)

        if placed or not board.is_empty():
            raise RuntimeError(
                f"Board not restored after search: {board.occupied} occupied cells, "
                f"{len(placed)} queens still placed"
            )

        self._stats.time_elapsed = time.time() - self._start
        self._log(f"Search finished: {self._stats}")
        return solutions

    def _is_safe(self, row: int, col: int, board: SearchBoard, placed: List[Queen]) -> bool:
        """A candidate is safe when no placed queen attacks it."""
        for q in placed:
            if q.attacks(row, col, board):
                return False
        return True

    def _place_column(
        self,
        col: int,
        board: SearchBoard,
        placed: List[Queen],
        solutions: List[np.ndarray]
    ) -> None:
        """Try every row of `col`, recursing on each safe one."""
        if col == self._n:
            solutions.append(make_solution(placed, self._n))
            self._stats.solutions += 1
            self._print_progress(placed)
            return

        for row in range(self._n):
            self._stats.nodes_visited += 1
            if not self._is_safe(row, col, board, placed):
                self._stats.nodes_pruned += 1
                continue

            queen = Queen(self._color, row, col)
            board.place(queen)
            placed.append(queen)
            self._stats.placements += 1
            self._stats.max_depth = max(self._stats.max_depth, col + 1)

            self._place_column(col + 1, board, placed, solutions)

            placed.pop()
            board.remove(row, col)
            self._stats.backtracks += 1

    def _log(self, message: str) -> None:
        """Print message if verbose."""
        if self._verbose:
            print(f"  [{self.__class__.__name__}] {message}")

    def _print_progress(self, placed: List[Queen]) -> None:
        """Print the found solution if at print interval."""
        if not self._verbose or self._log_interval <= 0:
            return
        count = self._stats.solutions
        if count % self._log_interval == 0:
            rows = tuple(q.row for q in placed)
            elapsed = time.time() - self._start
            print(f"Solution {count:>6}: "
                  f"rows={rows}, "
                  f"Nodes={self._stats.nodes_visited:>8}, "
                  f"Time={elapsed:>5.2f}s")


def find_all_queen_placements(n: int = 8, verbose: bool = False) -> List[np.ndarray]:
    """
    Find all solutions to the n-queens problem (92 for n = 8).

    Args:
        n: Board dimension
        verbose: Whether to print progress

    Returns:
        List of n×n character grids with 'Q' for queens and '*' for empty cells.
    """
    return QueenPlacementSolver(n).solve(verbose=verbose)
