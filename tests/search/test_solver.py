"""
Tests for the uniform-cost solver on small explicit graphs.
"""

import pytest

from src.search.config import SolverConfig
from src.search.solver import SearchStatus, UniformCostSolver, Unsolvable


def graph_solver(edges, goal, **config):
    def neighbours(node):
        return edges.get(node, [])

    return UniformCostSolver(neighbours, lambda node: node == goal, SolverConfig(**config))


class TestUniformCostSolver:
    def test_start_is_goal(self):
        result = graph_solver({}, "s").solve("s")

        assert result.success
        assert result.cost == 0
        assert result.nodes_explored == 0

    def test_cheaper_indirect_path_wins(self):
        edges = {
            "s": [("a", 1), ("b", 5)],
            "a": [("b", 1)],
            "b": [("g", 10)],
        }
        result = graph_solver(edges, "g").solve("s")

        assert result.cost == 12
        assert result.status == SearchStatus.SOLVED

    def test_best_cost_keeps_minimum_on_collision(self):
        edges = {
            "s": [("a", 1), ("b", 5)],
            "a": [("b", 1)],
            "b": [("g", 10)],
        }
        result = graph_solver(edges, "g").solve("s")

        # b is reached at 5 directly and at 2 through a
        assert result.best_cost["b"] == 2
        assert result.stale_skipped == 1

    def test_pop_costs_non_decreasing(self):
        edges = {
            "s": [("a", 3), ("b", 1), ("c", 7)],
            "a": [("d", 1)],
            "b": [("a", 1), ("d", 6)],
            "c": [("g", 1)],
            "d": [("c", 1), ("g", 9)],
        }
        result = graph_solver(edges, "g", record_pop_costs=True).solve("s")

        assert result.cost == 5
        assert result.pop_costs == sorted(result.pop_costs)
        assert result.pop_costs[-1] == 5

    def test_zero_cost_edges(self):
        edges = {"s": [("a", 0)], "a": [("g", 0)]}

        assert graph_solver(edges, "g").solve("s").cost == 0

    def test_exhausted_frontier_raises(self):
        edges = {"s": [("a", 1)], "a": [("s", 1)]}

        with pytest.raises(Unsolvable) as exc_info:
            graph_solver(edges, "g").solve("s")

        result = exc_info.value.result
        assert result.status == SearchStatus.EXHAUSTED
        assert result.cost is None
        assert result.states_discovered == 2

    def test_negative_cost_rejected(self):
        edges = {"s": [("a", -1)]}

        with pytest.raises(ValueError, match="Negative step cost"):
            graph_solver(edges, "g").solve("s")

    def test_each_solve_is_independent(self):
        edges = {"s": [("a", 2)], "a": [("g", 3)]}
        solver = graph_solver(edges, "g")

        first = solver.solve("s")
        second = solver.solve("a")

        assert first.cost == 5
        assert second.cost == 3
        assert "s" not in second.best_cost

    def test_status_follows_latest_solve(self):
        solver = graph_solver({"s": [("a", 1)]}, "g")
        assert solver.status == SearchStatus.INITIALIZED

        with pytest.raises(Unsolvable):
            solver.solve("s")
        assert solver.status == SearchStatus.EXHAUSTED

        assert solver.solve("g").success
        assert solver.status == SearchStatus.SOLVED


class TestSolverConfig:
    def test_defaults(self):
        config = SolverConfig()

        assert config.progress_interval == 50_000
        assert not config.record_pop_costs

    def test_progress_interval_must_be_positive(self):
        for interval in (0, -5):
            with pytest.raises(ValueError, match="at least 1"):
                SolverConfig(progress_interval=interval)

    def test_progress_logged_every_expansion(self):
        edges = {"s": [("a", 1)], "a": [("g", 1)]}

        result = graph_solver(edges, "g", progress_interval=1).solve("s")
        assert result.cost == 2
        assert result.nodes_explored == 2
