"""
Cursor motion codec.

Each cursor operation is a small frozen dataclass; :func:`encode` maps any
of them to its escape sequence.  Counts and coordinates are passed through
unchanged, so what a zero or out-of-range value means is left to the
terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from termcodec.ansi import CSI, ESC, csi
from termcodec.config import SEQUENCE_STYLES, SequenceStyle

# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Home:
    """Move the cursor to ``(0, 0)``."""


@dataclass(frozen=True)
class MoveTo:
    """Move the cursor to the coordinates ``(x, y)``."""

    x: int
    y: int


@dataclass(frozen=True)
class Up:
    """Move the cursor up by *n* lines."""

    n: int


@dataclass(frozen=True)
class Down:
    """Move the cursor down by *n* lines."""

    n: int


@dataclass(frozen=True)
class Left:
    """Move the cursor left by *n* columns."""

    n: int


@dataclass(frozen=True)
class Right:
    """Move the cursor right by *n* columns."""

    n: int


@dataclass(frozen=True)
class ColumnTo:
    """Move the cursor to column *n* of the current line."""

    n: int


@dataclass(frozen=True)
class Save:
    """Save the cursor position."""


@dataclass(frozen=True)
class Restore:
    """Restore the saved cursor position."""


CursorOp = Union[Home, MoveTo, Up, Down, Left, Right, ColumnTo, Save, Restore]

# Final characters for the single-count relative moves
_RELATIVE_FINALS: dict[type, str] = {
    Up: "A",
    Down: "B",
    Right: "C",
    Left: "D",
    ColumnTo: "G",
}

# FIXME: ESC SP 7 / ESC SP 8 are unconfirmed against a terminal reference.
# DECSC/DECRC have no space, which is what the "standard" style emits.
_LEGACY_SAVE = f"{ESC} 7"
_LEGACY_RESTORE = f"{ESC} 8"


def encode(op: CursorOp, style: SequenceStyle = "legacy") -> str:
    """
    Return the escape sequence for a cursor operation.

    Parameters
    ----------
    op:
        Any :data:`CursorOp` variant.
    style:
        ``'legacy'`` reproduces the historical bytes: ``MoveTo`` is written
        as ``CSI {x};{y}`` with literal braces and no terminator, and
        save/restore as ``ESC SP 7`` / ``ESC SP 8``.  ``'standard'`` writes
        ``CSI x;y H`` and ``ESC 7`` / ``ESC 8``.  Every other operation is
        identical in both styles.

    Raises
    ------
    ValueError
        *style* is not one of the known sequence styles.
    """
    if style not in SEQUENCE_STYLES:
        raise ValueError(f"Unknown sequence style {style!r}, expected one of: {', '.join(SEQUENCE_STYLES)}")

    final = _RELATIVE_FINALS.get(type(op))
    if final is not None:
        return csi(op.n, final)  # type: ignore[union-attr]

    if isinstance(op, Home):
        return csi("", "H")
    if isinstance(op, MoveTo):
        if style == "standard":
            return csi(f"{op.x};{op.y}", "H")
        return f"{CSI}{{{op.x}}};{{{op.y}}}"
    if isinstance(op, Save):
        return f"{ESC}7" if style == "standard" else _LEGACY_SAVE
    if isinstance(op, Restore):
        return f"{ESC}8" if style == "standard" else _LEGACY_RESTORE

    raise TypeError(f"Not a cursor operation: {op!r}")


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def home() -> Home:
    return Home()


def move(x: int, y: int) -> MoveTo:
    return MoveTo(x, y)


def up(n: int) -> Up:
    return Up(n)


def down(n: int) -> Down:
    return Down(n)


def left(n: int) -> Left:
    return Left(n)


def right(n: int) -> Right:
    return Right(n)


def column(n: int) -> ColumnTo:
    return ColumnTo(n)


def save() -> Save:
    return Save()


def restore() -> Restore:
    return Restore()
