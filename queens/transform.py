"""
Rotations and reflections of a square grid.

All functions accept a numpy array or nested sequences of any element type
and return a new numpy array. Inputs are never modified.
"""

import numpy as np
from typing import List


def as_square(grid) -> np.ndarray:
    """Convert to an array and reject anything that is not n×n."""
    arr = np.asarray(grid)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"Expected a square grid, got shape {arr.shape}")
    return arr


def rotate_clockwise_90(grid) -> np.ndarray:
    """
    Rotate a square grid 90° clockwise.

    Transposes the grid, then reverses each resulting row, so
    [[A, B], [C, D]] becomes [[C, A], [D, B]].

    Raises:
        ValueError: if the grid is not square.
    """
    arr = as_square(grid)
    return arr.T[:, ::-1].copy()


def flip_vertical(grid) -> np.ndarray:
    """Mirror left-right across the vertical axis (reverse each row)."""
    arr = as_square(grid)
    return arr[:, ::-1].copy()


def flip_horizontal(grid) -> np.ndarray:
    """Mirror top-bottom across the horizontal axis (reverse row order)."""
    arr = as_square(grid)
    return arr[::-1, :].copy()


def rotation_orbit(grid) -> List[np.ndarray]:
    """
    The four clockwise rotations of a grid: 0°, 90°, 180°, 270°.

    Returns:
        List of four arrays, the first being a copy of the input.
    """
    current = as_square(grid).copy()
    orbit = []
    for _ in range(4):
        orbit.append(current)
        current = rotate_clockwise_90(current)
    return orbit


def candidate_forms(grid) -> List[np.ndarray]:
    """
    The 12 forms tested when matching against a representative.

    For each rotation step: the rotated grid, its vertical flip, and its
    horizontal flip, in that order.
    """
    forms = []
    for rotated in rotation_orbit(grid):
        forms.extend([rotated, flip_vertical(rotated), flip_horizontal(rotated)])
    return forms
