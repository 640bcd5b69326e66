"""
N-Queens Placement Search and Symmetry Grouping Package

This package enumerates every non-attacking placement of n queens on an
n×n board (92 for the classical 8×8 case) and partitions the solutions into
groups that are identical up to rotation and reflection.

Modules:
    - interfaces: Abstract base classes for Piece, Board and Solver
    - pieces: Chess pieces exposing attack queries
    - board: Search board and solution grids
    - transform: Rotations and reflections of square grids
    - solver: Backtracking placement search
    - classifier: Symmetry grouping of solutions
    - utils: JIT attack checks, solution validation, reference counts
    - config: Configuration management
    - runner: Config-driven orchestration
"""

from .interfaces import PieceInterface, BoardInterface, SolverInterface
from .pieces import ChessPiece, Queen, Rook, Bishop, Knight, King, Pawn
from .board import SearchBoard, make_solution, board_to_str, QUEEN_MARK, EMPTY_MARK
from .transform import (
    rotate_clockwise_90,
    flip_vertical,
    flip_horizontal,
    rotation_orbit,
    candidate_forms,
)
from .solver import SearchStats, QueenPlacementSolver, find_all_queen_placements
from .classifier import SymmetryClassifier, are_similar, group_similar_boards
from .utils import (
    check_attack_jit,
    check_attack_python,
    count_attacking_pairs,
    is_valid_solution,
    queen_positions,
    expected_solution_count,
    expected_group_count,
)
from .config import Config
from .runner import QueensRunner

__all__ = [
    'PieceInterface',
    'BoardInterface',
    'SolverInterface',
    'ChessPiece',
    'Queen',
    'Rook',
    'Bishop',
    'Knight',
    'King',
    'Pawn',
    'SearchBoard',
    'make_solution',
    'board_to_str',
    'QUEEN_MARK',
    'EMPTY_MARK',
    'rotate_clockwise_90',
    'flip_vertical',
    'flip_horizontal',
    'rotation_orbit',
    'candidate_forms',
    'SearchStats',
    'QueenPlacementSolver',
    'find_all_queen_placements',
    'SymmetryClassifier',
    'are_similar',
    'group_similar_boards',
    'check_attack_jit',
    'check_attack_python',
    'count_attacking_pairs',
    'is_valid_solution',
    'queen_positions',
    'expected_solution_count',
    'expected_group_count',
    'Config',
    'QueensRunner',
]
