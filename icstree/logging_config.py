"""
Central logging configuration for icstree.

Installs a colorized console handler when nothing else has configured the
root logger, and pins the icstree module loggers to a common level.
"""

import logging
import os
import sys
from typing import Optional

from colorlog import ColoredFormatter

# HH:MM:SS  LEVEL   logger.name: message
CONSOLE_FORMAT = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

ICSTREE_LOGGERS = [
    "icstree",
    "icstree.parser",
    "icstree.serializer",
    "icstree.validator",
    "icstree.config",
]


def configure_logging(
    debug_mode: bool = False,
    force_debug: Optional[bool] = None,
    log_level: Optional[str] = None,
) -> None:
    """
    Configure logging levels for icstree.

    Args:
        debug_mode: Whether to enable debug logging for icstree modules
        force_debug: Override debug mode setting (None to use env var detection)
        log_level: Root log level from settings, used outside debug mode when
            ICSTREE_LOG_LEVEL is unset

    Environment Variables:
        ICSTREE_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        ICSTREE_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)
    """
    env_debug = os.getenv("ICSTREE_DEBUG", "").lower() in ("1", "true", "yes")
    env_log_level = os.getenv("ICSTREE_LOG_LEVEL", "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif env_debug:
        final_debug = True
    else:
        final_debug = debug_mode

    root_level = logging.DEBUG if final_debug else logging.INFO
    level_name = env_log_level
    if not level_name and not final_debug and log_level:
        level_name = log_level.upper()
    if level_name in ("DEBUG", "INFO", "WARNING", "ERROR"):
        root_level = getattr(logging, level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    # Only add a handler if no handlers exist, to avoid duplicate output.
    if not root_logger.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setLevel(root_level)
        handler.setFormatter(
            ColoredFormatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT, log_colors=LOG_COLORS)
        )
        root_logger.addHandler(handler)

    module_level = logging.DEBUG if final_debug else logging.INFO
    for logger_name in ICSTREE_LOGGERS:
        logging.getLogger(logger_name).setLevel(module_level)

    if final_debug:
        root_logger.debug("Debug logging enabled for icstree modules")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in ICSTREE_LOGGERS:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)

    return status
