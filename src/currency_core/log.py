"""Loguru setup.

Library modules log through ``from loguru import logger`` and bind a
``service`` field; this module only decides where records go.
"""

from __future__ import annotations

import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[service]}</cyan> | {message}"
)


def setup_logging(level: str = "INFO", *, json_logs: bool = False) -> int:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        level: Minimum level to emit.
        json_logs: Serialize records as JSON lines instead of the console format.

    Returns:
        The id of the installed sink.
    """
    logger.remove()
    logger.configure(extra={"service": "-"})
    if json_logs:
        return logger.add(sys.stderr, level=level, serialize=True)
    return logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=None)
