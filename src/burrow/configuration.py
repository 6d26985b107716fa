from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .pods import Colour, DestRoom, Pod, Position


@dataclass(frozen=True)
class Configuration:
    """One arrangement of every pod, ordered by pod index.

    Compared and hashed by value so it can key the best-cost map.
    """

    positions: Tuple[Position, ...]

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, index: int) -> Position:
        return self.positions[index]

    def moved(self, index: int, position: Position) -> "Configuration":
        positions = list(self.positions)
        positions[index] = position
        return Configuration(tuple(positions))

    def pods(self, colours: Sequence[Colour]) -> Tuple[Pod, ...]:
        return tuple(
            Pod(index, colour, position)
            for index, (colour, position) in enumerate(zip(colours, self.positions))
        )

    def settled_count(self) -> int:
        return sum(1 for position in self.positions if isinstance(position, DestRoom))


def is_goal(configuration: Configuration) -> bool:
    return all(isinstance(position, DestRoom) for position in configuration)
