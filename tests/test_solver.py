"""
Test suite for the placement search, configuration and runner.

Tests verify:
1. Solution count and validity for the classical board
2. Enumeration order
3. Backtracking bookkeeping (search statistics)
4. Other board sizes and argument checking
5. Configuration management
6. Config-driven runner
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest


FIRST_ROWS = (0, 4, 7, 5, 2, 6, 1, 3)
LAST_ROWS = (7, 3, 0, 2, 5, 1, 6, 4)


def rows_by_column(solution):
    """Row index of the queen in each column."""
    return tuple(int(np.argmax(np.asarray(solution)[:, c] == 'Q'))
                 for c in range(len(solution)))


# =============================================================================
# Search Tests
# =============================================================================

def test_finds_92_solutions():
    """Test the classical 8x8 board has 92 solutions."""
    from queens.solver import find_all_queen_placements

    solutions = find_all_queen_placements()
    assert len(solutions) == 92, f"Should find 92 solutions, got {len(solutions)}"

    print("92 solutions test passed")


def test_solutions_are_valid():
    """Test each solution has one queen per row and column and no shared diagonal."""
    from queens.solver import find_all_queen_placements

    for solution in find_all_queen_placements():
        assert solution.shape == (8, 8), "Solution should be 8x8"
        assert set(np.unique(solution)) <= {'Q', '*'}, "Only 'Q' and '*' allowed"

        mask = solution == 'Q'
        assert np.all(mask.sum(axis=0) == 1), "One queen per column"
        assert np.all(mask.sum(axis=1) == 1), "One queen per row"

        cells = [tuple(p) for p in np.argwhere(mask)]
        for i in range(len(cells)):
            for j in range(i + 1, len(cells)):
                (r1, c1), (r2, c2) = cells[i], cells[j]
                assert abs(r1 - r2) != abs(c1 - c2), f"Queens {cells[i]} and {cells[j]} share a diagonal"

    print("Solution validity test passed")


def test_solutions_are_distinct():
    """Test no solution is produced twice."""
    from queens.solver import find_all_queen_placements

    keys = {s.tobytes() for s in find_all_queen_placements()}
    assert len(keys) == 92, "All 92 solutions should be distinct"

    print("Distinct solutions test passed")


def test_enumeration_order():
    """Test rows are tried in ascending order in every column."""
    from queens.solver import find_all_queen_placements

    solutions = find_all_queen_placements()
    rows = [rows_by_column(s) for s in solutions]

    assert rows[0] == FIRST_ROWS, f"First solution should be {FIRST_ROWS}, got {rows[0]}"
    assert rows[-1] == LAST_ROWS, f"Last solution should be {LAST_ROWS}, got {rows[-1]}"
    assert rows == sorted(rows), "Solutions should come out in lexicographic row order"

    print("Enumeration order test passed")


def test_solutions_are_read_only():
    """Test returned grids cannot be modified."""
    from queens.solver import find_all_queen_placements

    solution = find_all_queen_placements()[0]
    assert not solution.flags.writeable, "Solution should be read-only"
    with pytest.raises(ValueError):
        solution[0, 0] = '*'

    print("Read-only solution test passed")


def test_search_stats():
    """Test commit/undo bookkeeping balances after the search."""
    from queens.solver import QueenPlacementSolver

    solver = QueenPlacementSolver(8)
    solutions = solver.solve()
    stats = solver.get_stats()

    assert stats.solutions == len(solutions) == 92
    assert stats.placements == stats.backtracks, "Every commit should be undone"
    assert stats.nodes_visited == stats.placements + stats.nodes_pruned
    assert stats.max_depth == 8, "Search should reach the last column"
    assert stats.time_elapsed >= 0
    assert stats.to_dict()['solutions'] == 92

    print("Search stats test passed")


def test_solve_is_repeatable():
    """Test a second call resets statistics and gives the same result."""
    from queens.solver import QueenPlacementSolver

    solver = QueenPlacementSolver(6)
    first = solver.solve()
    first_stats = solver.get_stats().nodes_visited
    second = solver.solve()

    assert len(first) == len(second) == 4
    assert all(np.array_equal(a, b) for a, b in zip(first, second))
    assert solver.get_stats().nodes_visited == first_stats, "Stats should reset between runs"

    print("Repeatable solve test passed")


def test_other_board_sizes():
    """Test small boards against known counts."""
    from queens.solver import find_all_queen_placements
    from queens.utils import expected_solution_count

    for n in range(1, 8):
        solutions = find_all_queen_placements(n)
        assert len(solutions) == expected_solution_count(n), f"Wrong count for n={n}"

    solutions = find_all_queen_placements(4)
    assert [rows_by_column(s) for s in solutions] == [(1, 3, 0, 2), (2, 0, 3, 1)]

    single = find_all_queen_placements(1)
    assert single[0].tolist() == [['Q']]

    print("Other board sizes test passed")


def test_invalid_board_size():
    """Test board size checking."""
    from queens.solver import QueenPlacementSolver

    with pytest.raises(ValueError):
        QueenPlacementSolver(0)
    with pytest.raises(TypeError):
        QueenPlacementSolver('8')
    with pytest.raises(ValueError):
        QueenPlacementSolver(8, color='RED')

    print("Invalid board size test passed")


def test_search_detects_unrestored_board():
    """Test the search refuses to finish when undo leaves the board dirty."""
    from queens.board import SearchBoard
    from queens.solver import QueenPlacementSolver

    class LeakyBoard(SearchBoard):
        """Clears cells on remove but never releases the occupancy count."""

        def remove(self, row, column):
            piece = super().remove(row, column)
            self._count += 1
            return piece

    with pytest.raises(RuntimeError):
        QueenPlacementSolver(4, board_factory=LeakyBoard).solve()

    solutions = QueenPlacementSolver(4, board_factory=SearchBoard).solve()
    assert len(solutions) == 2, "A well-behaved board should pass the check"

    print("Unrestored board test passed")


def test_verbose_progress(capsys):
    """Test progress lines are printed at the log interval."""
    from queens.solver import QueenPlacementSolver

    QueenPlacementSolver(4, log_interval=1).solve(verbose=True)
    out = capsys.readouterr().out
    assert "Solution      1" in out
    assert "Solution      2" in out
    assert "Search finished" in out

    QueenPlacementSolver(4, log_interval=1).solve(verbose=False)
    assert capsys.readouterr().out == "", "Quiet search should print nothing"

    print("Verbose progress test passed")


# =============================================================================
# Config Tests
# =============================================================================

def test_config_creation():
    """Test Config creation and validation."""
    from queens.config import Config

    # Default config
    config = Config()
    errors = config.validate()
    assert len(errors) == 0, f"Default config should be valid, got: {errors}"
    assert config.size == 8

    # Custom config
    config = Config(size=6, color='WHITE', group=False)
    assert config.size == 6
    assert config.color == 'WHITE'
    assert config.group is False

    # Invalid config
    config = Config(size=0, color='RED', log_interval=-1)
    errors = config.validate()
    assert len(errors) == 3, f"Should report three errors, got: {errors}"

    print("Config creation test passed")


def test_config_from_dict():
    """Test Config creation from dictionary."""
    from queens.config import Config

    data = {
        'n': 5,
        'color': 'WHITE',
        'verify': False,
        'log_interval': 2,
    }

    config = Config.from_dict(data)
    assert config.size == 5, "'n' should alias 'size'"
    assert config.color == 'WHITE'
    assert config.verify is False
    assert config.group is True
    assert config.log_interval == 2

    assert Config.from_dict(config.to_dict()) == config

    print("Config from_dict test passed")


def test_config_from_yaml(tmp_path):
    """Test Config loading from YAML."""
    from queens.config import Config

    path = tmp_path / "config.yaml"
    path.write_text("size: 6\nverbose: true\n")

    config = Config.from_yaml(str(path))
    assert config.size == 6
    assert config.verbose is True
    assert config.color == 'BLACK'

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert Config.from_yaml(str(empty)) == Config()

    with pytest.raises(FileNotFoundError):
        Config.from_yaml(str(tmp_path / "missing.yaml"))

    print("Config from_yaml test passed")


def test_repository_config_file():
    """Test the sample config at the repository root loads and validates."""
    from queens.config import Config

    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    config = Config.from_yaml(os.path.join(root, 'config.yaml'))
    assert config.validate() == []
    assert config.size == 8

    print("Repository config test passed")


# =============================================================================
# Runner Tests
# =============================================================================

def test_runner_classical():
    """Test the runner on the classical board."""
    from queens.config import Config
    from queens.runner import QueensRunner

    results = QueensRunner(Config()).run()

    assert len(results['solutions']) == results['expected_solutions'] == 92
    assert len(results['groups']) == results['expected_groups'] == 12
    assert sum(results['group_sizes']) == 92
    assert results['valid'] is True
    assert results['stats'].solutions == 92

    print("Runner classical test passed")


def test_runner_options(capsys):
    """Test grouping/verification switches and verbose summary."""
    from queens.config import Config
    from queens.runner import QueensRunner

    results = QueensRunner(Config(size=6, group=False, verify=False)).run()
    assert len(results['solutions']) == 4
    assert results['groups'] == []
    assert results['valid'] is None

    QueensRunner(Config(size=4, verbose=True)).run()
    out = capsys.readouterr().out
    assert "Configuration Summary" in out
    assert "Summary for N=4" in out
    assert "Groups: 1" in out
    assert "First group representative:\n* * Q *\nQ * * *\n* * * Q\n* Q * *" in out

    print("Runner options test passed")


def test_runner_rejects_invalid_config():
    """Test the runner refuses an invalid configuration."""
    from queens.config import Config
    from queens.runner import QueensRunner

    with pytest.raises(ValueError):
        QueensRunner(Config(size=-1))

    print("Runner invalid config test passed")


# =============================================================================
# Run All Tests
# =============================================================================

def run_all_tests():
    """Run all tests that need no pytest fixtures."""
    print("\n" + "=" * 60)
    print("Running Placement Search Tests")
    print("=" * 60 + "\n")

    # Search tests
    test_finds_92_solutions()
    test_solutions_are_valid()
    test_solutions_are_distinct()
    test_enumeration_order()
    test_solutions_are_read_only()
    test_search_stats()
    test_solve_is_repeatable()
    test_other_board_sizes()
    test_invalid_board_size()
    test_search_detects_unrestored_board()

    # Config tests
    test_config_creation()
    test_config_from_dict()
    test_repository_config_file()

    # Runner tests
    test_runner_classical()
    test_runner_rejects_invalid_config()

    print("\n" + "=" * 60)
    print(" All placement search tests passed!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    run_all_tests()
