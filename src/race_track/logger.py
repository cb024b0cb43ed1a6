import sys

from loguru import logger

PALETTE = {
    "solver": "green",
    "runner": "blue",
    "provider": "magenta",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "solver": "WARNING",
}


def make_component_filter(default_level, levels):
    def component_filter(record):
        comp = record["extra"].get("component", "")
        min_level = logger.level(levels.get(comp, default_level)).no
        return record["level"].no >= min_level

    return component_filter


def formatter(record):
    comp = record["extra"].get("component", "")
    case_id = record["extra"].get("case_id", "")
    colour = PALETTE.get(comp, "white")

    if case_id != "":
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10} | case {case_id!s:<6}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10}</> | "
            "<level>{message}</level>\n"
        )


def configure_logging(verbose: bool = False) -> None:
    """Replace the loguru sinks with the component-aware stderr sink.

    With ``verbose`` every component logs from DEBUG, solver included.
    """
    if verbose:
        default_level = "DEBUG"
        levels = {comp: "DEBUG" for comp in LEVEL_PER_COMPONENT}
    else:
        default_level = "INFO"
        levels = dict(LEVEL_PER_COMPONENT)

    logger.remove()
    logger.add(
        sys.stderr,
        format=formatter,
        filter=make_component_filter(default_level, levels),
        colorize=True,
    )


configure_logging()
