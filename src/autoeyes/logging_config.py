"""Loguru setup shared by the CLI and by programs embedding AutoEyes.

Two layouts exist: a detailed one with level and source line for --debug, and
a compact one that shows the ``module.function`` that logged each message.
"""

from pathlib import Path
from typing import Callable

from loguru import logger

DEBUG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
)
DEBUG_FORMAT_COLOR = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
INFO_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {extra[short_name]: <30} | {message}"
INFO_FORMAT_COLOR = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<cyan>{extra[short_name]: <30}</cyan> | <level>{message}</level>"
)

LOG_ROTATION = "10 MB"
LOG_RETENTION = 5


def format_short_name(record):
    """Store ``module.function`` of a record in ``extra["short_name"]``.

    Args:
        record: Loguru record dict
    """
    module_name = record["name"].split(".")[-1]
    record["extra"]["short_name"] = f"{module_name}.{record['function']}"


def add_logger_sink(debug: bool, sink, colorize: bool = False, **kwargs) -> int:
    """Add a sink using the debug or compact layout.

    Args:
        debug: If True, log DEBUG and above in the detailed layout; otherwise
            INFO and above in the compact layout
        sink: Anything logger.add() accepts (callable, path or stream)
        colorize: Use color markup (terminal sinks only)
        **kwargs: Passed through to logger.add() (e.g. rotation, retention)

    Returns:
        Handler id, usable with logger.remove()
    """
    if debug:
        return logger.add(
            sink=sink,
            format=DEBUG_FORMAT_COLOR if colorize else DEBUG_FORMAT,
            level="DEBUG",
            colorize=colorize,
            **kwargs,
        )

    return logger.add(
        sink=sink,
        format=INFO_FORMAT_COLOR if colorize else INFO_FORMAT,
        level="INFO",
        colorize=colorize,
        filter=lambda record: format_short_name(record) or True,
        **kwargs,
    )


def configure_logging(
    debug: bool, console: Callable[[str], None], log_file: Path | None = None
) -> list[int]:
    """Replace loguru's default handler with the AutoEyes sinks.

    Args:
        debug: Select the debug layout and level for every sink
        console: Callable receiving formatted console messages
        log_file: Optional file that also receives every message, rotated
            when it grows past LOG_ROTATION

    Returns:
        Ids of the handlers that were added
    """
    logger.remove()
    handler_ids = [add_logger_sink(debug, console, colorize=True)]

    if log_file is not None:
        handler_ids.append(
            add_logger_sink(
                debug,
                log_file,
                colorize=False,
                rotation=LOG_ROTATION,
                retention=LOG_RETENTION,
            )
        )
        logger.debug(f"Logging to {log_file}")

    return handler_ids
