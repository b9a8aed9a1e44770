"""Logger configuration for weekcal.

weekcal is disabled in loguru on import, so embedding applications keep
full control of their sinks. setup_logger() opts in: it enables weekcal
records and attaches sinks owned by weekcal, leaving other sinks alone.
"""

import sys
from pathlib import Path

from loguru import logger

from weekcal.config.settings import settings

_handler_ids: list[int] = []


def reset_logger() -> None:
    """Remove the sinks added by setup_logger and disable weekcal records again."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable("weekcal")


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Enable weekcal logging with a console sink and optional file sink.

    Calling it again replaces the sinks from the previous call.

    Args:
        level: Logging level; defaults to WEEKCAL_LOG_LEVEL
        log_file: Optional path to log file; defaults to WEEKCAL_LOG_FILE
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    reset_logger()
    logger.enable("weekcal")

    _handler_ids.append(
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=level,
            filter="weekcal",
            colorize=True,
        )
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(
            logger.add(
                log_path,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
                level=level,
                filter="weekcal",
                rotation=rotation,
                retention=retention,
                compression="zip",
                backtrace=True,
                diagnose=True,
            )
        )

    logger.debug(f"weekcal logging enabled with level={level}, log_file={log_file}")
