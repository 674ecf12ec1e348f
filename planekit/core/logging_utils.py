"""Logging utilities for planekit.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All planekit code should obtain loggers via get_logger().
The package stays silent (NullHandler) until configure_logging() is called.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = 'planekit'

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_planekit_root() -> logging.Logger:
    """Give the 'planekit' logger a single stdout handler and isolate it from
    the process root logger. Returns the 'planekit' logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # Replace the package NullHandler with a StreamHandler
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the 'planekit' logger family level and attach a stream handler.

    This does NOT modify the process root logger.
    """
    root = _ensure_planekit_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'planekit' namespace.

    If a level is provided it is set on the logger; otherwise the logger is set
    to NOTSET so it inherits from the 'planekit' parent configured via
    configure_logging().
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging', 'ROOT_LOGGER_NAME']
