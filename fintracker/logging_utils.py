"""Mini README: Application-wide logging helpers for the financial tracker.

Structure:
    * configure_root_logger - installs a single stream handler on the root logger.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules call ``get_logger(__name__)`` at import time. Entry points (the CLI)
    call ``configure_root_logger`` with the configured level; the handler is
    only installed once so reloading modules never duplicates output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger with a debugging friendly formatter.

    Only the first call installs a handler. An explicit ``level`` passed later
    still adjusts the root level so entry points can apply configured values.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(_resolve_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(_resolve_level(logging.INFO if level is None else level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
