"""Logging setup shared by the whole package."""

import logging
from typing import Optional

# Root logger name for the package
LOGGER_NAME = "pathfinder"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger, or a child of it for `name`.

    The first call attaches a stream handler at INFO level to the package
    logger; later calls reuse it.
    """
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    if not name:
        return root
    return root.getChild(name.rsplit(".", 1)[-1])


def set_log_level(level: str) -> None:
    get_logger().setLevel(level.upper())
