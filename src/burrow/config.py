"""
Configuration for parsing and moving pods in a burrow.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .pods import UNIT_COSTS, Colour

UNFOLD_ROWS = (
    "  #D#C#B#A#",
    "  #D#B#A#C#",
)


@dataclass
class BurrowConfig:
    """Configuration for a burrow puzzle."""

    # Energy per cell moved, by colour
    unit_costs: Dict[Colour, int] = field(default_factory=lambda: dict(UNIT_COSTS))

    # Rows inserted by the unfold transformation
    unfold_rows: Tuple[str, ...] = UNFOLD_ROWS
    unfold_after_line: int = 3  # Insert after the first room row (1-based line number)
