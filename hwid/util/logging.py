"""
MIT License

Logging helpers for hwid.

Every module logs through a child of the ``hwid`` logger; the parent carries
the single stderr handler so applications can silence or redirect the whole
library in one place.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "hwid"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_CONFIGURED = False


def _configure_root() -> logging.Logger:
    global _CONFIGURED
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _CONFIGURED:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        root.propagate = False
        _CONFIGURED = True
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Return the logger for ``name``, nested under the ``hwid`` logger.

    Module names such as ``hwid.core.identifier`` are used as-is; any other
    name is attached below ``hwid``.
    """
    root = _configure_root()
    if name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["DATE_FORMAT", "LOG_FORMAT", "ROOT_LOGGER_NAME", "get_logger"]
