"""
Parsing of burrow diagrams into a map and an initial configuration.

A diagram looks like::

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

``#`` and space are walls, ``.`` is open floor and ``A``-``D`` are pods
standing on open floor.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..util.logger import logger
from .burrow_map import BurrowMap, CellType
from .config import BurrowConfig
from .configuration import Configuration
from .pods import Colour, DestRoom, Hallway, Position, StartRoom

log = logger.bind(component="parser")

WALL_CHARS = {"#": CellType.WALL, " ": CellType.VOID}
OPEN_CHAR = "."
POD_LETTERS = {colour.letter: colour for colour in Colour}


class ParseError(ValueError):
    """Raised when a diagram cannot describe a valid burrow."""


def unfold(text: str, config: Optional[BurrowConfig] = None) -> str:
    """Deepen every room by inserting the fixed unfold rows."""
    config = config or BurrowConfig()
    lines = text.rstrip("\n").splitlines()
    if len(lines) < config.unfold_after_line + 1:
        raise ParseError(
            f"Diagram has {len(lines)} lines, too short to unfold after line "
            f"{config.unfold_after_line}"
        )

    cut = config.unfold_after_line
    unfolded = lines[:cut] + list(config.unfold_rows) + lines[cut:]
    return "\n".join(unfolded) + "\n"


def parse_diagram(
    text: str,
) -> Tuple[BurrowMap, Tuple[Colour, ...], Configuration]:
    """Parse a diagram into its map, the pod colours and the starting positions.

    Pods are indexed in reading order. Pods already sitting in their own room
    above nothing but pods of their colour start out settled.

    Raises:
        ParseError: on an unexpected character or malformed geometry
    """
    lines = [line for line in text.rstrip("\n").splitlines()]
    if not lines:
        raise ParseError("Empty diagram")

    width = max(len(line) for line in lines)
    grid = np.full((len(lines), width), CellType.VOID.value, dtype=int)
    found: List[Tuple[int, int, Colour]] = []

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char in WALL_CHARS:
                grid[y, x] = WALL_CHARS[char].value
            elif char == OPEN_CHAR:
                grid[y, x] = CellType.OPEN.value
            elif char in POD_LETTERS:
                grid[y, x] = CellType.OPEN.value
                found.append((x, y, POD_LETTERS[char]))
            else:
                raise ParseError(
                    f"Unexpected character {char!r} at line {y + 1}, column {x + 1}"
                )

    burrow_map = _build_map(grid)
    colours, positions = _place_pods(burrow_map, found)

    log.debug(
        f"Parsed {burrow_map.width}x{burrow_map.height} burrow with "
        f"{len(burrow_map.room_columns)} rooms of depth {burrow_map.room_depth}"
    )
    return burrow_map, colours, Configuration(positions)


def render_configuration(
    burrow_map: BurrowMap, colours: Sequence[Colour], configuration: Configuration
) -> str:
    """Draw a configuration back into diagram form."""
    occupants: Dict[Tuple[int, int], str] = {}
    for colour, position in zip(colours, configuration):
        occupants[burrow_map.cell_of(position, colour)] = colour.letter
    return burrow_map.render(occupants)


def _build_map(grid: np.ndarray) -> BurrowMap:
    open_rows = np.flatnonzero((grid == CellType.OPEN.value).any(axis=1))
    if open_rows.size == 0:
        raise ParseError("Diagram has no open cells")

    hallway_row = int(open_rows[0])
    hallway = np.flatnonzero(grid[hallway_row] == CellType.OPEN.value)
    first, last = int(hallway[0]), int(hallway[-1])
    if last - first + 1 != hallway.size:
        raise ParseError(f"Hallway on line {hallway_row + 1} is not contiguous")

    below = grid[hallway_row + 1 :] == CellType.OPEN.value
    room_columns = [int(x) for x in np.flatnonzero(below.any(axis=0))]
    if len(room_columns) != len(Colour):
        raise ParseError(
            f"Expected {len(Colour)} rooms, found {len(room_columns)}"
        )

    depths = set()
    for x in room_columns:
        if not first <= x <= last:
            raise ParseError(f"Room in column {x + 1} is not below the hallway")
        column = below[:, x]
        depth = int(column.sum())
        if not column[:depth].all():
            raise ParseError(f"Room in column {x + 1} is not contiguous")
        depths.add(depth)

    if len(depths) != 1:
        raise ParseError(f"Rooms have unequal depths: {sorted(depths)}")

    return BurrowMap(grid, hallway_row, (first, last), room_columns, depths.pop())


def _place_pods(
    burrow_map: BurrowMap, found: List[Tuple[int, int, Colour]]
) -> Tuple[Tuple[Colour, ...], Tuple[Position, ...]]:
    for colour in Colour:
        count = sum(1 for _, _, c in found if c == colour)
        if count != burrow_map.room_depth:
            raise ParseError(
                f"Expected {burrow_map.room_depth} pods of colour {colour.letter}, "
                f"found {count}"
            )

    colours = tuple(colour for _, _, colour in found)
    positions: List[Position] = []
    for x, y, colour in found:
        if y == burrow_map.hallway_row:
            if burrow_map.is_room_entry(x):
                raise ParseError(
                    f"Pod {colour.letter} at column {x + 1} blocks a room entry"
                )
            positions.append(Hallway(x))
        else:
            depth = y - burrow_map.hallway_row
            if depth < burrow_map.room_depth and not any(
                fx == x and fy == y + 1 for fx, fy, _ in found
            ):
                raise ParseError(
                    f"Pod {colour.letter} at line {y + 1}, column {x + 1} "
                    f"sits above an empty slot"
                )
            positions.append(StartRoom(depth, x))

    _settle(burrow_map, colours, positions)
    return colours, tuple(positions)


def _settle(
    burrow_map: BurrowMap, colours: Sequence[Colour], positions: List[Position]
) -> None:
    """Mark pods already home, walking each room from the bottom up."""
    by_cell = {
        (p.column, p.depth): i
        for i, p in enumerate(positions)
        if isinstance(p, StartRoom)
    }
    for colour in Colour:
        column = burrow_map.room_column(colour)
        for depth in range(burrow_map.room_depth, 0, -1):
            index = by_cell.get((column, depth))
            if index is None or colours[index] != colour:
                break
            positions[index] = DestRoom(depth)
