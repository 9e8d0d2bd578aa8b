"""
Screen and line erase codec.

Each :class:`EraseRegion` has a user-facing name (its enum value), which is
also the key callers use to look it up, and a fixed escape sequence.
"""

from __future__ import annotations

from enum import Enum

from termcodec.ansi import csi
from termcodec.errors import TypeMismatchError, UnknownOperationError
from termcodec.logging import get_logger

logger = get_logger("erase")


class EraseRegion(str, Enum):
    """Region of the screen to clear."""

    SCREEN = "clear"  # Entire screen
    SCREEN_END = "clearEnd"  # Cursor to end of screen
    SCREEN_START = "clearStart"  # Cursor to start of screen
    LINE = "clearLine"  # Current line
    LINE_END = "clearLineEnd"  # Cursor to end of line
    LINE_START = "clearLineStart"  # Cursor to start of line
    SAVED = "clearSaved"  # Scrollback buffer

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def sequence(self) -> str:
        return _SEQUENCES[self]

    @classmethod
    def parse(cls, name: str) -> EraseRegion:
        return parse(name)


# Canonical order used for listings and error messages
ALL: tuple[EraseRegion, ...] = (
    EraseRegion.SCREEN,
    EraseRegion.SCREEN_END,
    EraseRegion.SCREEN_START,
    EraseRegion.LINE,
    EraseRegion.LINE_START,
    EraseRegion.LINE_END,
    EraseRegion.SAVED,
)

NAMES: tuple[str, ...] = tuple(region.value for region in ALL)

_SEQUENCES: dict[EraseRegion, str] = {
    EraseRegion.SCREEN: csi(2, "J"),
    EraseRegion.SCREEN_END: csi(0, "J"),
    EraseRegion.SCREEN_START: csi(1, "J"),
    EraseRegion.LINE: csi(2, "K"),
    EraseRegion.LINE_END: csi(0, "K"),
    EraseRegion.LINE_START: csi(1, "K"),
    EraseRegion.SAVED: csi(3, "J"),
}

_BY_NAME: dict[str, EraseRegion] = {region.value.casefold(): region for region in ALL}


def name_of(region: EraseRegion) -> str:
    """Return the user-facing name of *region*."""
    return region.value


def parse(name: str) -> EraseRegion:
    """
    Look up an erase region by name, ignoring case.

    Raises:
        UnknownOperationError: *name* is not one of :data:`NAMES`.
        TypeMismatchError: *name* is not a string.
    """
    if not isinstance(name, str):
        raise TypeMismatchError("EraseKind name (str)", name)

    region = _BY_NAME.get(name.casefold())
    if region is None:
        logger.debug("Rejected erase operation %r", name)
        raise UnknownOperationError(name, NAMES)
    return region


def encode(region: EraseRegion) -> str:
    """Return the escape sequence that clears *region*."""
    return _SEQUENCES[region]
