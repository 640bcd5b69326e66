"""
Grouping of board configurations that are identical up to symmetry.

Two boards are similar when one equals the other rotated clockwise by
0°, 90°, 180° or 270°, optionally followed by a single flip across the
vertical or horizontal axis. Each group is represented by its first member
and every incoming board is tested against the representatives in order.
"""

import numpy as np
from typing import List, Sequence

from .transform import as_square, candidate_forms


def are_similar(board, representative) -> bool:
    """
    Test one board against one representative.

    At each of the four rotation steps the board is compared with the
    rotated representative, then with its vertical flip, then with its
    horizontal flip. Square boards of different sizes are never similar.

    Raises:
        ValueError: if either grid is not square.
    """
    board = as_square(board)
    representative = as_square(representative)
    if board.shape != representative.shape:
        return False

    return any(np.array_equal(board, form) for form in candidate_forms(representative))


class SymmetryClassifier:
    """
    Incremental partition of boards into symmetry groups.

    Groups are kept in order of first occurrence; members keep insertion
    order. The first member of each group is its representative.
    """

    def __init__(self):
        self._groups: List[List[np.ndarray]] = []

    @property
    def groups(self) -> List[List[np.ndarray]]:
        return self._groups

    def add(self, board) -> int:
        """
        Place a board in the first matching group or start a new one.

        Returns:
            Index of the group the board joined.
        """
        for idx, group in enumerate(self._groups):
            if are_similar(board, group[0]):
                group.append(board)
                return idx
        self._groups.append([board])
        return len(self._groups) - 1

    def add_all(self, boards: Sequence) -> List[List[np.ndarray]]:
        for board in boards:
            self.add(board)
        return self._groups

    def group_sizes(self) -> List[int]:
        return [len(g) for g in self._groups]

    def __len__(self) -> int:
        return len(self._groups)


def group_similar_boards(boards: Sequence) -> List[List[np.ndarray]]:
    """
    Partition boards into groups of configurations that are transformations
    of each other.

    Args:
        boards: Board configurations in input order

    Returns:
        List of groups; every input board appears in exactly one group.
    """
    return SymmetryClassifier().add_all(boards)
