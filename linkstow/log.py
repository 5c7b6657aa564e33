import logging

from rich.console import Console
from rich.logging import RichHandler


_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def level_for(verbosity: int) -> int:
    return _LEVELS.get(verbosity, logging.DEBUG)


def configure_logging(verbosity: int = 0, console: Console | None = None) -> None:
    """Route ``linkstow`` log records to stderr through rich.

    Repeated calls replace the previous handler instead of stacking them.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("linkstow")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level_for(verbosity))
