"""
Chess piece implementations exposing attack queries.

This module provides:
- ChessPiece: common state (color tag and fixed position)
- Queen, Rook, Bishop, Knight, King, Pawn: geometric attack patterns

Attack queries are purely geometric: an intervening piece never blocks a
line, which is the rule the queens placement problem relies on.
"""

from typing import Optional

from .interfaces import PieceInterface, BoardInterface


VALID_COLORS = ('BLACK', 'WHITE')


class ChessPiece(PieceInterface):
    """
    Base class holding the color tag and position shared by all pieces.

    Attributes:
        _color: Owning color tag
        _row: Row index
        _column: Column index
    """

    SYMBOL = '?'

    def __init__(self, color: str, row: int, column: int):
        if color not in VALID_COLORS:
            raise ValueError(f"Invalid color '{color}', must be one of {list(VALID_COLORS)}")
        if row < 0 or column < 0:
            raise ValueError(f"Position must be non-negative, got ({row}, {column})")
        self._color = color
        self._row = int(row)
        self._column = int(column)

    @property
    def color(self) -> str:
        return self._color

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def symbol(self) -> str:
        return self.SYMBOL

    def _offsets(self, row: int, column: int):
        return row - self._row, column - self._column

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._color}, {self._row}, {self._column})"


class Rook(ChessPiece):
    """Attacks along its row and column."""

    SYMBOL = 'R'

    def attacks(self, row: int, column: int, board: Optional[BoardInterface] = None) -> bool:
        dr, dc = self._offsets(row, column)
        if dr == 0 and dc == 0:
            return False
        return dr == 0 or dc == 0


class Bishop(ChessPiece):
    """Attacks along both diagonals."""

    SYMBOL = 'B'

    def attacks(self, row: int, column: int, board: Optional[BoardInterface] = None) -> bool:
        dr, dc = self._offsets(row, column)
        return dr != 0 and abs(dr) == abs(dc)


class Queen(ChessPiece):
    """
    Queen attack pattern: same row, same column, or same diagonal.

    The board argument is accepted for interface compatibility only. Queens
    problem semantics check alignment, never occupancy in between.
    """

    SYMBOL = 'Q'

    def attacks(self, row: int, column: int, board: Optional[BoardInterface] = None) -> bool:
        dr, dc = self._offsets(row, column)
        if dr == 0 and dc == 0:
            return False
        return dr == 0 or dc == 0 or abs(dr) == abs(dc)


class Knight(ChessPiece):
    """Attacks the eight L-shaped jumps."""

    SYMBOL = 'N'

    def attacks(self, row: int, column: int, board: Optional[BoardInterface] = None) -> bool:
        dr, dc = self._offsets(row, column)
        return {abs(dr), abs(dc)} == {1, 2}


class King(ChessPiece):
    """Attacks every adjacent cell."""

    SYMBOL = 'K'

    def attacks(self, row: int, column: int, board: Optional[BoardInterface] = None) -> bool:
        dr, dc = self._offsets(row, column)
        return max(abs(dr), abs(dc)) == 1


class Pawn(ChessPiece):
    """
    Attacks the two cells diagonally one row forward.

    Forward is increasing row when `moving_up` is set, decreasing otherwise.
    """

    SYMBOL = 'P'

    def __init__(self, color: str, row: int, column: int, moving_up: bool = False):
        super().__init__(color, row, column)
        self.moving_up = moving_up

    def attacks(self, row: int, column: int, board: Optional[BoardInterface] = None) -> bool:
        dr, dc = self._offsets(row, column)
        forward = 1 if self.moving_up else -1
        return dr == forward and abs(dc) == 1
