"""
Abstract interfaces for Piece, Board and Solver classes.

These interfaces define the contract that all implementations must follow,
so the placement search only depends on the attack capability of a piece
and never on concrete piece fields.
"""

from abc import ABC, abstractmethod
from typing import Tuple, List, Optional, Any
import numpy as np


class PieceInterface(ABC):
    """
    Abstract interface for chess pieces.

    A piece has a color tag and a fixed (row, column) position once placed.
    The only behaviour the search relies on is `attacks`.

    Attributes:
        color: Owning color tag ('BLACK' or 'WHITE')
        row: Row of the cell the piece occupies
        column: Column of the cell the piece occupies
        symbol: Single character used when rendering the board
    """

    @property
    @abstractmethod
    def color(self) -> str:
        """Owning color tag."""
        pass

    @property
    @abstractmethod
    def row(self) -> int:
        """Row index."""
        pass

    @property
    @abstractmethod
    def column(self) -> int:
        """Column index."""
        pass

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Single-character board symbol."""
        pass

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.column)

    @abstractmethod
    def attacks(self, row: int, column: int, board: Optional['BoardInterface'] = None) -> bool:
        """
        Decide whether this piece attacks the target cell.

        Args:
            row: Target row
            column: Target column
            board: Current board occupancy (may be ignored by pieces
                whose attack pattern does not depend on occupancy)

        Returns:
            True if the target cell is attacked.
        """
        pass


class BoardInterface(ABC):
    """
    Abstract interface for a square board of optional piece occupants.

    Attributes:
        n: Board dimension (n×n cells)
    """

    @property
    @abstractmethod
    def n(self) -> int:
        """Board dimension."""
        pass

    @abstractmethod
    def get_cell(self, row: int, column: int) -> Optional[PieceInterface]:
        """
        Get the occupant of a cell.

        Returns:
            The piece at (row, column) or None if the cell is empty.
        """
        pass

    @abstractmethod
    def place(self, piece: PieceInterface) -> None:
        """Occupy the cell at the piece's position."""
        pass

    @abstractmethod
    def remove(self, row: int, column: int) -> PieceInterface:
        """Clear a cell and return its former occupant."""
        pass

    @abstractmethod
    def pieces(self) -> List[PieceInterface]:
        """All occupants in row-major order."""
        pass


class SolverInterface(ABC):
    """
    Abstract interface for exhaustive placement solvers.

    A solver enumerates every maximal safe placement on an n×n board and
    returns each one as a character grid.
    """

    @abstractmethod
    def solve(self, verbose: bool = False) -> List[np.ndarray]:
        """
        Run the search.

        Args:
            verbose: Whether to print progress

        Returns:
            List of solution grids in enumeration order.
        """
        pass

    @abstractmethod
    def get_stats(self) -> Any:
        """
        Get statistics of the last search.

        Returns:
            Statistics object describing the last `solve` call.
        """
        pass
