"""
Utility functions for verifying N-Queens solutions.

This module contains:
- Attack checking functions (JIT-compiled and pure Python)
- Vectorized attacking-pair counting
- Solution validation helpers
- Reference solution counts
"""

import jax
import jax.numpy as jnp
import numpy as np
from typing import Dict, List, Optional, Tuple

from .board import QUEEN_MARK


# =============================================================================
# Attack Checking Functions
# =============================================================================

@jax.jit
def check_attack_jit(q1: jnp.ndarray, q2: jnp.ndarray) -> jnp.ndarray:
    """
    Check if two queens attack each other (JIT-compiled).

    Attack types:
    - Rook-type: same row or same column
    - Diagonal: |r-r'| = |c-c'|

    A position never attacks itself.

    Args:
        q1: First queen position (row, col)
        q2: Second queen position (row, col)

    Returns:
        Boolean indicating if queens attack each other.
    """
    dr = jnp.abs(q1[0] - q2[0])
    dc = jnp.abs(q1[1] - q2[1])
    same = (dr == 0) & (dc == 0)
    return ((dr == 0) | (dc == 0) | (dr == dc)) & ~same


def check_attack_python(q1: Tuple[int, int], q2: Tuple[int, int]) -> bool:
    """
    Check if two queens attack each other (pure Python for testing).

    Args:
        q1: First queen position (row, col)
        q2: Second queen position (row, col)

    Returns:
        Boolean indicating if queens attack each other.
    """
    r1, c1 = q1
    r2, c2 = q2
    dr = abs(r1 - r2)
    dc = abs(c1 - c2)

    if dr == 0 and dc == 0:
        return False
    return dr == 0 or dc == 0 or dr == dc


@jax.jit
def attack_matrix(queens: jnp.ndarray) -> jnp.ndarray:
    """
    Pairwise attack matrix for a set of queens.

    Args:
        queens: Array of shape (k, 2) with (row, col) positions

    Returns:
        Boolean array of shape (k, k); entry (i, j) is True if queen i
        attacks queen j.
    """
    def row_of(q):
        return jax.vmap(lambda other: check_attack_jit(q, other))(queens)
    return jax.vmap(row_of)(queens)


def count_attacking_pairs(queens) -> int:
    """
    Count unordered attacking pairs.

    Args:
        queens: Sequence or array of (row, col) positions

    Returns:
        Number of attacking pairs.
    """
    positions = jnp.asarray(np.asarray(queens, dtype=np.int32).reshape(-1, 2))
    if positions.shape[0] < 2:
        return 0
    matrix = attack_matrix(positions).astype(jnp.int32)
    return int(jnp.sum(jnp.triu(matrix, k=1)))


# =============================================================================
# Solution Helpers
# =============================================================================

def queen_positions(solution) -> List[Tuple[int, int]]:
    """
    Positions of every 'Q' in a grid, ordered by column then row.

    Args:
        solution: Character grid

    Returns:
        List of (row, col) tuples.
    """
    mask = np.asarray(solution) == QUEEN_MARK
    cells = [(int(r), int(c)) for r, c in np.argwhere(mask)]
    return sorted(cells, key=lambda p: (p[1], p[0]))


def is_valid_solution(solution) -> bool:
    """
    Check that a grid is a complete non-attacking queens placement.

    Each row and each column must contain exactly one 'Q', and no two
    queens may share a diagonal.
    """
    grid = np.asarray(solution)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        return False

    mask = grid == QUEEN_MARK
    if not (np.all(mask.sum(axis=0) == 1) and np.all(mask.sum(axis=1) == 1)):
        return False

    return count_attacking_pairs(queen_positions(grid)) == 0


# =============================================================================
# Reference Counts
# =============================================================================

# OEIS A000170: total solutions on an n×n board
KNOWN_SOLUTION_COUNTS: Dict[int, int] = {
    1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92, 9: 352,
    10: 724, 11: 2680, 12: 14200, 13: 73712, 14: 365596,
}

# OEIS A002562: solutions distinct up to rotation and reflection
KNOWN_GROUP_COUNTS: Dict[int, int] = {
    1: 1, 2: 0, 3: 0, 4: 1, 5: 2, 6: 1, 7: 6, 8: 12, 9: 46,
    10: 92, 11: 341, 12: 1787, 13: 9233, 14: 45752,
}


def expected_solution_count(n: int) -> Optional[int]:
    """Known number of solutions for board size n, or None if not tabulated."""
    return KNOWN_SOLUTION_COUNTS.get(n)


def expected_group_count(n: int) -> Optional[int]:
    """Known number of symmetry classes for board size n, or None."""
    return KNOWN_GROUP_COUNTS.get(n)
