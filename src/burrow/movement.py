from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .burrow_map import BurrowMap
from .configuration import Configuration
from .pods import UNIT_COSTS, Colour, DestRoom, Hallway, StartRoom

Move = Tuple[Configuration, int]


class MoveGenerator:
    """Enumerates the legal moves out of a configuration.

    A pod leaving a room either goes straight into its own room, when the way
    is clear and the room accepts it, or parks somewhere in the hallway. A
    parked pod only ever moves again to enter its own room. Settled pods never
    move.
    """

    def __init__(
        self,
        burrow_map: BurrowMap,
        colours: Sequence[Colour],
        unit_costs: Optional[Dict[Colour, int]] = None,
    ):
        self.map = burrow_map
        self.colours: Tuple[Colour, ...] = tuple(colours)
        self.unit_costs = unit_costs or UNIT_COSTS
        negative = sorted({c.letter for c in self.colours if self.unit_costs[c] < 0})
        if negative:
            raise ValueError(f"Unit costs must be non-negative, got {negative}")

        self._unit_costs = tuple(self.unit_costs[colour] for colour in self.colours)
        self._targets = tuple(burrow_map.room_column(colour) for colour in self.colours)
        self._stops = frozenset(burrow_map.stopping_cells())

    def neighbours(self, configuration: Configuration) -> List[Move]:
        occupied = self.occupancy(configuration)
        moves: List[Move] = []

        for index, position in enumerate(configuration.positions):
            if isinstance(position, StartRoom):
                moves.extend(self._leave_room(configuration, occupied, index, position))
            elif isinstance(position, Hallway):
                move = self._enter_from_hallway(configuration, occupied, index, position)
                if move is not None:
                    moves.append(move)
            # DestRoom: settled

        return moves

    def unit_cost(self, colour: Colour) -> int:
        return self.unit_costs[colour]

    def occupancy(self, configuration: Configuration) -> Dict[Tuple[int, int], int]:
        """Map each occupied cell to the index of the pod standing on it."""
        return {
            self.map.cell_of(position, colour): index
            for index, (colour, position) in enumerate(
                zip(self.colours, configuration.positions)
            )
        }

    def accepting_depth(
        self,
        configuration: Configuration,
        colour: Colour,
        occupied: Optional[Dict[Tuple[int, int], int]] = None,
    ) -> Optional[int]:
        """Depth the next pod of ``colour`` would land on, or None if the room is closed."""
        if occupied is None:
            occupied = self.occupancy(configuration)

        column = self.map.room_column(colour)
        top = self.map.hallway_row
        landing = None
        for depth in range(self.map.room_depth, 0, -1):
            index = occupied.get((column, top + depth))
            if index is None:
                if landing is None:
                    landing = depth
            elif self.colours[index] != colour or landing is not None:
                return None
        return landing

    def _leave_room(
        self,
        configuration: Configuration,
        occupied: Dict[Tuple[int, int], int],
        index: int,
        position: StartRoom,
    ) -> Iterable[Move]:
        column, top = position.column, self.map.hallway_row
        for depth in range(1, position.depth):
            if (column, top + depth) in occupied:
                return []

        colour = self.colours[index]
        unit = self._unit_costs[index]
        target = self._targets[index]

        if target != column and self._hallway_clear(occupied, column, target):
            landing = self.accepting_depth(configuration, colour, occupied)
            if landing is not None:
                steps = position.depth + abs(column - target) + landing
                return [(configuration.moved(index, DestRoom(landing)), unit * steps)]

        moves = []
        for offset in self._reachable_stops(occupied, column):
            steps = position.depth + abs(column - offset)
            moves.append((configuration.moved(index, Hallway(offset)), unit * steps))
        return moves

    def _enter_from_hallway(
        self,
        configuration: Configuration,
        occupied: Dict[Tuple[int, int], int],
        index: int,
        position: Hallway,
    ) -> Optional[Move]:
        offset = position.offset
        target = self._targets[index]
        if offset < target:
            path = range(offset + 1, target + 1)
        else:
            path = range(target, offset)

        row = self.map.hallway_row
        if any((x, row) in occupied for x in path):
            return None

        landing = self.accepting_depth(configuration, self.colours[index], occupied)
        if landing is None:
            return None

        steps = abs(offset - target) + landing
        return configuration.moved(index, DestRoom(landing)), self._unit_costs[index] * steps

    def _hallway_clear(
        self, occupied: Dict[Tuple[int, int], int], start: int, end: int
    ) -> bool:
        row = self.map.hallway_row
        low, high = min(start, end), max(start, end)
        return not any((x, row) in occupied for x in range(low, high + 1))

    def _reachable_stops(
        self, occupied: Dict[Tuple[int, int], int], column: int
    ) -> List[int]:
        """Hallway cells reachable from above ``column`` without passing another pod."""
        row = self.map.hallway_row
        stops = []
        for step in (-1, 1):
            x = column + step
            while self.map.in_hallway(x) and (x, row) not in occupied:
                if x in self._stops:
                    stops.append(x)
                x += step
        return stops
