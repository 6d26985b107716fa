"""
Uniform-cost (Dijkstra) search over an implicit graph.
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import (Callable, Dict, Generic, Hashable, Iterable, List, Optional,
                    Tuple, TypeVar)

from ..util.logger import logger
from .config import SolverConfig

S = TypeVar("S", bound=Hashable)


class SearchStatus(Enum):
    INITIALIZED = "initialized"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult(Generic[S]):
    """Result of one uniform-cost search."""

    cost: Optional[int]
    nodes_explored: int
    states_discovered: int
    stale_skipped: int
    time_taken_ms: float
    status: SearchStatus
    best_cost: Dict[S, int] = field(default_factory=dict, repr=False)
    pop_costs: List[int] = field(default_factory=list, repr=False)

    @property
    def success(self) -> bool:
        return self.status == SearchStatus.SOLVED


class Unsolvable(RuntimeError):
    """Raised when the frontier empties before any goal is reached."""

    def __init__(self, result: SearchResult):
        super().__init__(
            f"No path to a goal after exploring {result.nodes_explored} states"
        )
        self.result = result


class UniformCostSolver(Generic[S]):
    """Dijkstra search driven by a neighbour function.

    Every call to ``solve`` owns a fresh best-cost map and frontier. Stale
    frontier entries are skipped when popped rather than removed on update.
    ``status`` is INITIALIZED until the first solve and then follows the most
    recent one.
    """

    def __init__(
        self,
        neighbours: Callable[[S], Iterable[Tuple[S, int]]],
        is_goal: Callable[[S], bool],
        config: Optional[SolverConfig] = None,
    ):
        """Initialize the solver.

        Args:
            neighbours: Returns ``(next_state, step_cost)`` pairs for a state
            is_goal: Goal predicate
            config: Solver configuration
        """
        self.neighbours = neighbours
        self.is_goal = is_goal
        self.config = config or SolverConfig()
        self.logger = logger.bind(component="solver")
        self.status = SearchStatus.INITIALIZED

    def solve(self, start: S) -> SearchResult[S]:
        """Find the minimum cost from ``start`` to any goal state.

        Returns:
            SearchResult with the cost and search statistics

        Raises:
            Unsolvable: if no goal state is reachable
            ValueError: if the neighbour function yields a negative step cost
        """
        start_time = time.time()
        best_cost: Dict[S, int] = {start: 0}
        tiebreak = itertools.count()
        frontier: List[Tuple[int, int, S]] = [(0, next(tiebreak), start)]
        pop_costs: List[int] = []
        nodes_explored = 0
        stale_skipped = 0

        def result(cost: Optional[int]) -> SearchResult[S]:
            return SearchResult(
                cost=cost,
                nodes_explored=nodes_explored,
                states_discovered=len(best_cost),
                stale_skipped=stale_skipped,
                time_taken_ms=(time.time() - start_time) * 1000,
                status=self.status,
                best_cost=best_cost,
                pop_costs=pop_costs,
            )

        self.status = SearchStatus.RUNNING
        while frontier:
            cost, _, state = heapq.heappop(frontier)
            if cost > best_cost[state]:
                stale_skipped += 1
                continue

            if self.config.record_pop_costs:
                pop_costs.append(cost)

            if self.is_goal(state):
                self.status = SearchStatus.SOLVED
                solved = result(cost)
                self.logger.info(
                    f"Solved with cost {cost} after {nodes_explored} expansions "
                    f"({solved.time_taken_ms:.0f}ms)"
                )
                return solved

            nodes_explored += 1
            if nodes_explored % self.config.progress_interval == 0:
                self.logger.debug(
                    f"{nodes_explored} expanded, frontier {len(frontier)}, "
                    f"current cost {cost}"
                )

            for next_state, step_cost in self.neighbours(state):
                if step_cost < 0:
                    raise ValueError(f"Negative step cost {step_cost} from {state!r}")

                candidate = cost + step_cost
                if candidate < best_cost.get(next_state, candidate + 1):
                    best_cost[next_state] = candidate
                    heapq.heappush(frontier, (candidate, next(tiebreak), next_state))

        self.status = SearchStatus.EXHAUSTED
        exhausted = result(None)
        self.logger.error(
            f"Frontier exhausted after {nodes_explored} expansions without a goal"
        )
        raise Unsolvable(exhausted)
