"""
Logging for termcodec.

The codecs log rejected input (unknown erase names, unsupported screen
modes, ignored bit depths) at DEBUG under the ``termcodec`` logger and
never configure handlers themselves.  The ``termcodec`` CLI calls
:func:`setup_logging` with the configured ``log_level``, or DEBUG when
``--verbose`` is given.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Parent of every termcodec.<module> logger
_root_logger = logging.getLogger("termcodec")

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Level to restore on enable()
_saved_level: int | None = None


def _to_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Route termcodec records to a stream.

    Replaces any handler a previous call installed, so the CLI can call it
    once per invocation.

    Args:
        level: Level name from ``CodecConfig.log_level`` or a logging int;
            unknown names fall back to INFO
        format: Record format, defaults to time, level and logger name
        stream: Destination, defaults to stderr so escape sequences written
            to stdout are not interleaved with log lines

    Example:
        from termcodec.logging import setup_logging

        setup_logging("DEBUG")  # show why a screen mode was rejected
    """
    level = _to_level(level)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format or _DEFAULT_FORMAT))
    handler.setLevel(level)
    _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the ``termcodec.<name>`` logger for a codec module, e.g. ``"screen"``."""
    if name.startswith("termcodec."):
        return logging.getLogger(name)
    return logging.getLogger(f"termcodec.{name}")


def set_level(level: str | int) -> None:
    """Change the termcodec level without touching handlers."""
    _root_logger.setLevel(_to_level(level))


def disable() -> None:
    """Silence termcodec, e.g. when a host application owns stderr."""
    global _saved_level
    # Child records propagate past a disabled parent, so gate on level too
    if not _root_logger.disabled:
        _saved_level = _root_logger.level
    _root_logger.disabled = True
    _root_logger.setLevel(logging.CRITICAL + 1)


def enable() -> None:
    """Undo :func:`disable`."""
    global _saved_level
    _root_logger.disabled = False
    if _saved_level is not None:
        _root_logger.setLevel(_saved_level)
        _saved_level = None
