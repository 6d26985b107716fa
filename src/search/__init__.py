"""
Uniform-cost search over implicit graphs.

Used to find the least energy that moves every burrow pod home.
"""

from .config import SolverConfig
from .solver import SearchResult, SearchStatus, UniformCostSolver, Unsolvable

__all__ = [
    "UniformCostSolver",
    "SearchResult",
    "SearchStatus",
    "SolverConfig",
    "Unsolvable",
]
