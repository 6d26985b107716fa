from typing import Optional, Tuple

from ..search.config import SolverConfig
from ..search.solver import SearchResult, UniformCostSolver
from ..util.logger import logger
from .burrow_map import BurrowMap
from .config import BurrowConfig
from .configuration import Configuration, is_goal
from .movement import MoveGenerator
from .parser import parse_diagram, render_configuration, unfold
from .pods import Colour, Pod


class OrganizerPuzzle:
    """A burrow, its pods and their starting configuration."""

    def __init__(
        self,
        burrow_map: BurrowMap,
        colours: Tuple[Colour, ...],
        initial: Configuration,
        config: Optional[BurrowConfig] = None,
    ):
        self.map = burrow_map
        self.colours = colours
        self.initial = initial
        self.config = config or BurrowConfig()
        self.logger = logger.bind(component="puzzle")

    @classmethod
    def from_diagram(
        cls, text: str, unfolded: bool = False, config: Optional[BurrowConfig] = None
    ) -> "OrganizerPuzzle":
        config = config or BurrowConfig()
        if unfolded:
            text = unfold(text, config)
        burrow_map, colours, initial = parse_diagram(text)
        return cls(burrow_map, colours, initial, config)

    def move_generator(self) -> MoveGenerator:
        return MoveGenerator(self.map, self.colours, self.config.unit_costs)

    def solve(self, solver_config: Optional[SolverConfig] = None) -> SearchResult:
        self.logger.debug(
            f"Solving {len(self.colours)} pods, "
            f"{self.initial.settled_count()} already home"
        )
        solver = UniformCostSolver(
            self.move_generator().neighbours, is_goal, solver_config
        )
        return solver.solve(self.initial)

    def pods(self, configuration: Optional[Configuration] = None) -> Tuple[Pod, ...]:
        return (configuration or self.initial).pods(self.colours)

    def render(self, configuration: Optional[Configuration] = None) -> str:
        return render_configuration(self.map, self.colours, configuration or self.initial)

    def __str__(self) -> str:
        return self.render()


def cheapest_organization(
    text: str, unfolded: bool = False, config: Optional[BurrowConfig] = None
) -> int:
    """Minimum energy needed to organize the pods drawn in ``text``."""
    return OrganizerPuzzle.from_diagram(text, unfolded, config).solve().cost
