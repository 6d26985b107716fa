"""
Configuration for the uniform-cost solver.
"""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration for uniform-cost search."""

    progress_interval: int = 50_000  # Expansions between progress log lines
    record_pop_costs: bool = False  # Keep every popped cost in the result

    def __post_init__(self):
        if self.progress_interval < 1:
            raise ValueError(
                f"Progress interval must be at least 1, got {self.progress_interval}"
            )
