import sys

from loguru import logger

PALETTE = {
    "solver": "green",
    "parser": "blue",
    "puzzle": "magenta",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "parser": "INFO",
}

_state = {"level": "INFO"}


def component_filter(record):
    comp = record["extra"].get("component", "")
    floor = logger.level(_state["level"]).no
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= max(floor, min_level)


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<8}</> | "
        "<level>{message}</level>\n"
    )


def set_level(level: str) -> None:
    """Change the minimum level shown on stderr."""
    logger.level(level)  # raises ValueError for unknown levels
    _state["level"] = level


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
