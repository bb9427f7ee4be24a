"""
Logging utilities for the Subject Helper Bot.
"""

import logging
from typing import Optional


_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Get the application logger, initializing if needed."""
    global _logger
    if _logger is None:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        _logger = logging.getLogger("helper_bot")
    return _logger


def set_log_level(level: str) -> None:
    """Set the application logger level from a name such as 'DEBUG'.

    Unknown names fall back to INFO.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        get_logger().warning(f"Unknown log level {level!r}, using INFO")
        resolved = logging.INFO
    get_logger().setLevel(resolved)


logger = get_logger()
