"""
Config-driven orchestration of the search and the symmetry grouping.
"""

from typing import Any, Dict

from .config import Config
from .board import board_to_str
from .solver import QueenPlacementSolver
from .classifier import SymmetryClassifier
from .utils import is_valid_solution, expected_solution_count, expected_group_count


class QueensRunner:
    """
    Orchestrates solver execution based on configuration.
    """

    def __init__(self, config: Config):
        """
        Initialize runner with configuration.

        Args:
            config: Configuration instance
        """
        errors = config.validate()
        if errors:
            raise ValueError("Invalid configuration: " + "; ".join(errors))
        self.config = config

    def run(self) -> Dict[str, Any]:
        """
        Run the placement search, then group solutions if configured.

        Returns:
            Dictionary with solutions, groups, statistics and reference counts
        """
        config = self.config
        if config.verbose:
            config.print_summary()

        solver = QueenPlacementSolver(config.size, config.color, config.log_interval)
        solutions = solver.solve(verbose=config.verbose)

        valid = None
        if config.verify:
            valid = all(is_valid_solution(s) for s in solutions)

        groups = []
        if config.group:
            classifier = SymmetryClassifier()
            groups = classifier.add_all(solutions)

        results = {
            'solutions': solutions,
            'groups': groups,
            'stats': solver.get_stats(),
            'group_sizes': [len(g) for g in groups],
            'expected_solutions': expected_solution_count(config.size),
            'expected_groups': expected_group_count(config.size),
            'valid': valid,
        }

        if config.verbose:
            self._print_summary(results)

        return results

    def _print_summary(self, results: Dict[str, Any]) -> None:
        """Print summary of a run."""
        n = self.config.size
        print(f"\n{'='*60}")
        print(f"Summary for N={n}")
        print(f"{'='*60}")
        expected = results['expected_solutions']
        found = len(results['solutions'])
        if expected is None:
            print(f"Solutions: {found}")
        else:
            status = "✓" if found == expected else "✗"
            print(f"Solutions: {found} (expected {expected}) {status}")
        if self.config.group:
            print(f"Groups: {len(results['groups'])} "
                  f"(expected {results['expected_groups']})")
            print(f"Group sizes: {results['group_sizes']}")
            if results['groups']:
                print("First group representative:")
                print(board_to_str(results['groups'][0][0]))
        if results['valid'] is not None:
            print(f"All solutions valid: {results['valid']}")
        print(f"Search: {results['stats']}")
        print(f"{'='*60}")
