"""
Configuration management for the N-Queens placement search.

This module provides a clean interface for loading and validating
configuration from YAML files.
"""

import yaml
from dataclasses import dataclass
from typing import List


@dataclass
class Config:
    """
    Configuration container for a search and grouping run.

    Attributes:
        size: Board dimension n (8 for the classical problem)
        color: Color tag given to placed queens
        group: Whether to partition solutions into symmetry groups
        verify: Whether to validate every solution after the search
        verbose: Whether to print progress and summaries
        log_interval: Print every k-th solution found (0 to disable)
    """

    # Board configuration
    size: int = 8
    color: str = 'BLACK'

    # Pipeline configuration
    group: bool = True
    verify: bool = True

    # Output
    verbose: bool = False
    log_interval: int = 0

    @classmethod
    def from_yaml(cls, path: str) -> 'Config':
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance
        """
        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """
        Create configuration from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Config instance
        """
        # Accept 'n' as an alias for 'size'
        size = data.get('size', data.get('n', 8))

        return cls(
            size=size,
            color=data.get('color', 'BLACK'),
            group=data.get('group', True),
            verify=data.get('verify', True),
            verbose=data.get('verbose', False),
            log_interval=data.get('log_interval', 0),
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            'size': self.size,
            'color': self.color,
            'group': self.group,
            'verify': self.verify,
            'verbose': self.verbose,
            'log_interval': self.log_interval,
        }

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Validate size
        if not isinstance(self.size, int) or isinstance(self.size, bool):
            errors.append(f"Board size must be an integer, got {self.size!r}")
        elif self.size < 1:
            errors.append(f"Board size must be positive, got {self.size}")

        # Validate color
        valid_colors = ['BLACK', 'WHITE']
        if self.color not in valid_colors:
            errors.append(f"Invalid color '{self.color}', must be one of {valid_colors}")

        # Validate log interval
        if not isinstance(self.log_interval, int) or self.log_interval < 0:
            errors.append(f"log_interval must be a non-negative integer, got {self.log_interval!r}")

        return errors

    def print_summary(self) -> None:
        """Print configuration summary."""
        print("=" * 60)
        print("Configuration Summary")
        print("=" * 60)
        print(f"Board size: {self.size}x{self.size}")
        print(f"Queen color: {self.color}")
        print(f"Group by symmetry: {self.group}")
        print(f"Verify solutions: {self.verify}")
        if self.log_interval > 0:
            print(f"Log interval: {self.log_interval:,}")
        print("=" * 60)
