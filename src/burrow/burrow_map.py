from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .pods import Colour, DestRoom, Hallway, Position, StartRoom


class CellType(Enum):
    WALL = 0
    OPEN = 1
    VOID = 2  # outside the burrow


class BurrowMap:
    """Static geometry of a burrow: one hallway row with rooms hanging below it.

    Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row, the same
    as in the diagram text. Room ``i`` (counted from the left) belongs to the
    ``i``-th colour.
    """

    def __init__(
        self,
        grid: np.ndarray,
        hallway_row: int,
        hallway_span: Tuple[int, int],
        room_columns: Sequence[int],
        room_depth: int,
    ):
        self.grid = grid
        self.height, self.width = grid.shape
        self.hallway_row = hallway_row
        self.hallway_span = hallway_span
        self.room_columns: Tuple[int, ...] = tuple(room_columns)
        self.room_depth = room_depth
        self._room_by_colour: Dict[Colour, int] = dict(zip(Colour, self.room_columns))
        self._entries = frozenset(self.room_columns)

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell_type(self, x: int, y: int) -> CellType:
        if not self.is_valid_position(x, y):
            return CellType.WALL
        return CellType(self.grid[y, x])

    def is_open(self, x: int, y: int) -> bool:
        return self.get_cell_type(x, y) == CellType.OPEN

    def room_column(self, colour: Colour) -> int:
        return self._room_by_colour[colour]

    def in_hallway(self, offset: int) -> bool:
        first, last = self.hallway_span
        return first <= offset <= last

    def is_room_entry(self, offset: int) -> bool:
        return offset in self._entries

    def stopping_cells(self) -> List[int]:
        """Hallway offsets a pod may park on."""
        first, last = self.hallway_span
        return [x for x in range(first, last + 1) if x not in self._entries]

    def cell_of(self, position: Position, colour: Colour) -> Tuple[int, int]:
        if isinstance(position, Hallway):
            return position.offset, self.hallway_row
        if isinstance(position, StartRoom):
            return position.column, self.hallway_row + position.depth
        if isinstance(position, DestRoom):
            return self.room_column(colour), self.hallway_row + position.depth
        raise TypeError(f"Unknown position kind: {position!r}")

    def render(self, occupants: Optional[Dict[Tuple[int, int], str]] = None) -> str:
        occupants = occupants or {}
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) in occupants:
                    row.append(occupants[(x, y)])
                elif self.is_open(x, y):
                    row.append(".")
                elif self.get_cell_type(x, y) == CellType.VOID:
                    row.append(" ")
                else:
                    row.append("#")
            rows.append("".join(row).rstrip())
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()
