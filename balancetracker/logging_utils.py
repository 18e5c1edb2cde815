"""Mini README: Application-wide logging helpers for the balance tracker.

Structure:
    * configure_root_logger - installs the shared handler and level once.
    * get_logger - factory returning module loggers.

Usage:
    Modules call ``get_logger(__name__)`` at import time. Entry points call
    ``configure_root_logger`` with the configured level; repeated calls only
    adjust the level so handlers are never duplicated.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
_HANDLER: Optional[logging.Handler] = None


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach the shared stream handler and apply ``level`` to the root logger."""

    global _HANDLER
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)
