#!/usr/bin/env python3
"""
Burrow Organizer

Computes the least energy needed to move every pod in a burrow diagram
into its own room.
"""

import argparse
import sys

from src.burrow.parser import ParseError
from src.burrow.puzzle import OrganizerPuzzle
from src.search.config import SolverConfig
from src.search.solver import Unsolvable
from src.util.logger import logger, set_level

log = logger.bind(component="cli")


def read_diagram(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r") as f:
        return f.read()


def solve_part(text: str, unfolded: bool, show: bool, config: SolverConfig) -> int:
    """Solve one variant of the diagram and return its minimal cost."""
    puzzle = OrganizerPuzzle.from_diagram(text, unfolded=unfolded)
    if show:
        print(puzzle)
    result = puzzle.solve(config)
    log.info(
        f"Explored {result.nodes_explored} states "
        f"({result.states_discovered} discovered) in {result.time_taken_ms:.0f}ms"
    )
    return result.cost


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Burrow Organizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py input.txt            # Minimal cost for the diagram
  python main.py input.txt --unfold   # Same, with every room deepened
  python main.py input.txt --both     # Print both costs
  cat input.txt | python main.py -    # Read the diagram from stdin
        """,
    )

    parser.add_argument("input", help="Diagram file, or - for stdin")
    parser.add_argument(
        "--unfold", action="store_true", help="Insert the extra rows before solving"
    )
    parser.add_argument(
        "--both", action="store_true", help="Solve the folded and unfolded diagrams"
    )
    parser.add_argument(
        "--show", action="store_true", help="Print the parsed starting position"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Minimum log level (default: WARNING)"
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=SolverConfig.progress_interval,
        help="Expansions between progress log lines",
    )

    args = parser.parse_args(argv)

    try:
        set_level(args.log_level.upper())
        config = SolverConfig(progress_interval=args.progress_interval)
        text = read_diagram(args.input)
        if args.both:
            for part, unfolded in ((1, False), (2, True)):
                cost = solve_part(text, unfolded, args.show, config)
                print(f"Part {part}: {cost}")
        else:
            print(solve_part(text, args.unfold, args.show, config))
    except (OSError, ParseError, Unsolvable, ValueError) as e:
        log.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
