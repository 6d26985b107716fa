from dataclasses import dataclass
from enum import Enum
from typing import Union


class Colour(Enum):
    AMBER = "A"
    BRONZE = "B"
    COPPER = "C"
    DESERT = "D"

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def from_letter(cls, letter: str) -> "Colour":
        return cls(letter)


UNIT_COSTS = {
    Colour.AMBER: 1,
    Colour.BRONZE: 10,
    Colour.COPPER: 100,
    Colour.DESERT: 1000,
}


@dataclass(frozen=True)
class StartRoom:
    """Inside a room the pod has not settled in yet."""

    depth: int
    column: int


@dataclass(frozen=True)
class Hallway:
    """Parked in the hallway."""

    offset: int


@dataclass(frozen=True)
class DestRoom:
    """Settled in its own room. Terminal."""

    depth: int


Position = Union[StartRoom, Hallway, DestRoom]


@dataclass(frozen=True)
class Pod:
    index: int
    colour: Colour
    position: Position

    @property
    def settled(self) -> bool:
        return isinstance(self.position, DestRoom)

    def __str__(self) -> str:
        return f"{self.colour.letter}#{self.index} at {self.position}"
