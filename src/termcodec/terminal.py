"""
Script-facing facades over the codecs.

``Terminal`` exposes each erase operation as an attribute named after its
region (``term.clear()``, ``term.clearLineEnd()``) plus ``set_mode``;
``Cursor`` exposes one method per cursor operation.  Both only build
strings.  Writing them to a stream is up to the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from termcodec import cursor as cursor_codec
from termcodec import erase as erase_codec
from termcodec import screen as screen_codec
from termcodec.config import CodecConfig
from termcodec.errors import UnknownOperationError


class Cursor:
    """Cursor operations rendered in the configured sequence style."""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()

    def _encode(self, op: cursor_codec.CursorOp) -> str:
        return cursor_codec.encode(op, self.config.sequence_style)

    def home(self) -> str:
        return self._encode(cursor_codec.home())

    def move(self, x: int, y: int) -> str:
        return self._encode(cursor_codec.move(x, y))

    def up(self, n: int) -> str:
        return self._encode(cursor_codec.up(n))

    def down(self, n: int) -> str:
        return self._encode(cursor_codec.down(n))

    def left(self, n: int) -> str:
        return self._encode(cursor_codec.left(n))

    def right(self, n: int) -> str:
        return self._encode(cursor_codec.right(n))

    def column(self, n: int) -> str:
        return self._encode(cursor_codec.column(n))

    def save(self) -> str:
        return self._encode(cursor_codec.save())

    def restore(self) -> str:
        return self._encode(cursor_codec.restore())


class Terminal:
    """
    Terminal control operations.

    Example:
        term = Terminal()
        term.clear()                # "\\x1b[2J"
        term.erase("clearLineEnd")  # "\\x1b[0K"
        term.set_mode("color", "graphics", {"width": 640, "height": 480}, 4)
        term.cursor.up(3)           # "\\x1b[3A"
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()
        self._cursor = Cursor(self.config)

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    def erase(self, name: str) -> str:
        """Return the sequence for the erase operation called *name*."""
        return erase_codec.encode(erase_codec.parse(name))

    def set_mode(self, *values: Any) -> str:
        """
        Return the sequence for a screen mode request.

        *values* are the positional request fields: color kind, screen
        kind, dimensions and an optional bit depth.
        """
        if len(values) > 4:
            raise TypeError(f"set_mode() takes at most 4 arguments ({len(values)} given)")
        return screen_codec.encode(screen_codec.decode_request(*values))

    def __getattr__(self, name: str) -> Callable[[], str]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            region = erase_codec.parse(name)
        except UnknownOperationError as e:
            raise AttributeError(str(e)) from e

        sequence = erase_codec.encode(region)

        def operation() -> str:
            return sequence

        operation.__name__ = region.value
        return operation

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(erase_codec.NAMES))
