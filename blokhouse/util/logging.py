"""
Logging configuration.

Log records go to stderr through rich so that stdout carries nothing but the
inventory documents Ansible and Puppet read from it.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """
    Configure the root logger with a stderr RichHandler.

    Safe to call more than once; the previous handlers are replaced.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)
