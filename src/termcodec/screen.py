"""
Screen mode codec.

A :data:`ScreenMode` is deliberately permissive: any screen kind, any
dimensions and any bit depth can be constructed.  Only the fifteen
configurations in :data:`ALL` correspond to real hardware modes, and
:func:`encode` is where that is enforced.

Building a mode from loosely-typed input is a separate step,
:func:`decode_request`, which checks shape and enum tokens but never
consults the table.  Keeping the two apart lets callers tell a malformed
request from an unsupported configuration.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from termcodec.ansi import csi
from termcodec.errors import (
    InvalidModeConfigurationError,
    MissingFieldError,
    TypeMismatchError,
    UnknownEnumValueError,
)
from termcodec.logging import get_logger

logger = get_logger("screen")


class ScreenKind(str, Enum):
    """Screen rendering mode."""

    TEXT = "text"
    GRAPHICS = "graphics"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


class ColorKind(str, Enum):
    """Color capability of a screen mode."""

    MONOCHROME = "monochrome"
    COLOR = "color"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


def _as_dims(dims: Sequence[int]) -> tuple[int, int]:
    width, height = dims
    return (width, height)


@dataclass(frozen=True)
class Monochrome:
    """Monochrome screen mode."""

    screen_kind: ScreenKind
    dims: tuple[int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "dims", _as_dims(self.dims))


@dataclass(frozen=True)
class Color:
    """
    Color screen mode.

    ``bit_depth`` is ``log2(n)`` where ``n`` is the number of colors the
    mode can show at once.  ``None`` is a distinct value, not a wildcard:
    ``Color(TEXT, (40, 25))`` is legal, ``Color(TEXT, (40, 25), 4)`` is not.
    """

    screen_kind: ScreenKind
    dims: tuple[int, int]
    bit_depth: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "dims", _as_dims(self.dims))


@dataclass(frozen=True)
class EnableWrapping:
    """Enable line wrapping."""


ScreenMode = Union[Monochrome, Color, EnableWrapping]

# ---------------------------------------------------------------------------
# Legal modes
# ---------------------------------------------------------------------------

_TEXT = ScreenKind.TEXT
_GRAPHICS = ScreenKind.GRAPHICS

# Mode -> numeric parameter of CSI = n h, in table order
_MODE_CODES: dict[ScreenMode, int] = {
    Monochrome(_TEXT, (40, 25)): 0,
    Color(_TEXT, (40, 25)): 1,
    Monochrome(_TEXT, (80, 25)): 2,
    Color(_TEXT, (80, 25)): 3,
    Color(_GRAPHICS, (320, 200), 2): 4,
    Monochrome(_GRAPHICS, (320, 200)): 5,
    Monochrome(_GRAPHICS, (640, 200)): 6,
    EnableWrapping(): 7,
    Color(_GRAPHICS, (320, 200)): 13,
    Color(_GRAPHICS, (640, 200), 4): 14,
    Monochrome(_GRAPHICS, (640, 350)): 15,
    Color(_GRAPHICS, (640, 350), 4): 16,
    Monochrome(_GRAPHICS, (640, 480)): 17,
    Color(_GRAPHICS, (640, 480), 4): 18,
    Color(_GRAPHICS, (300, 200), 8): 19,
}

ALL: tuple[ScreenMode, ...] = tuple(_MODE_CODES)


def name_of(mode: ScreenMode) -> str:
    """Canonical debug form of *mode*, as listed in error messages."""
    return repr(mode)


def legal_modes() -> Iterator[tuple[ScreenMode, str]]:
    """Yield every legal mode with its escape sequence, in table order."""
    for mode, code in _MODE_CODES.items():
        yield mode, csi(f"={code}", "h")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _well_typed(mode: Any) -> bool:
    """Whether *mode* has exactly the field types the table is keyed on."""
    if type(mode) is EnableWrapping:
        return True
    if type(mode) not in (Monochrome, Color):
        return False
    if type(mode.screen_kind) is not ScreenKind:
        return False
    if not all(_is_int(v) for v in mode.dims):
        return False
    if type(mode) is Color and mode.bit_depth is not None:
        return _is_int(mode.bit_depth)
    return True


def encode(mode: ScreenMode) -> str:
    """
    Return the escape sequence that switches the terminal into *mode*.

    Fields are matched by type as well as value, so ``4.0`` is not a bit
    depth of ``4`` and ``"text"`` is not ``ScreenKind.TEXT``.

    Raises:
        InvalidModeConfigurationError: *mode* is not one of :data:`ALL`.
    """
    code = _MODE_CODES.get(mode) if _well_typed(mode) else None
    if code is None:
        logger.debug("Rejected screen mode %r", mode)
        raise InvalidModeConfigurationError(mode, [name_of(m) for m in ALL])
    return csi(f"={code}", "h")


# ---------------------------------------------------------------------------
# Request decoding
# ---------------------------------------------------------------------------

_SCREEN_KINDS: dict[str, ScreenKind] = {kind.value: kind for kind in ScreenKind}
_COLOR_KINDS: dict[str, ColorKind] = {kind.value: kind for kind in ColorKind}

# Positional fields of a request with the values each accepts; positions are 1-based
_FIELDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ColorKind", tuple(_COLOR_KINDS)),
    ("ScreenKind", tuple(_SCREEN_KINDS)),
    ("Dimensions", ("{'width': w, 'height': h}",)),
)


def _require(index: int, value: Any) -> None:
    if value is None:
        name, accepted = _FIELDS[index]
        raise MissingFieldError(name, index + 1, accepted)


def _as_count(value: Any) -> int | None:
    """Convert *value* to a non-negative int, or ``None`` if it isn't one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value >= 0:
        return value
    return None


def _decode_dims(dims: Any) -> tuple[int, int]:
    if isinstance(dims, Mapping):
        if "width" not in dims or "height" not in dims:
            raise TypeMismatchError("Dimensions with width and height", dims)
        raw = (dims["width"], dims["height"])
    elif isinstance(dims, Sequence) and not isinstance(dims, (str, bytes)) and len(dims) == 2:
        raw = (dims[0], dims[1])
    else:
        raise TypeMismatchError("Dimensions (mapping with width and height, or a pair)", dims)

    width, height = (_as_count(v) for v in raw)
    if width is None:
        raise TypeMismatchError("non-negative integer width", raw[0])
    if height is None:
        raise TypeMismatchError("non-negative integer height", raw[1])
    return (width, height)


def decode_request(
    color_kind: Any = None,
    screen_kind: Any = None,
    dims: Any = None,
    bit_depth: Any = None,
) -> ScreenMode:
    """
    Build a :data:`ScreenMode` from loosely-typed request values.

    Args:
        color_kind: ``"monochrome"`` or ``"color"``, any case
        screen_kind: ``"text"`` or ``"graphics"``, any case
        dims: ``{"width": w, "height": h}`` or a ``(w, h)`` pair
        bit_depth: Optional color depth; ignored for monochrome modes and
            treated as absent unless it is a non-negative integer

    Returns:
        A ``Monochrome`` or ``Color`` mode.  Whether it is a supported
        configuration is only checked by :func:`encode`.

    Raises:
        MissingFieldError: One of the first three values is ``None``.
        TypeMismatchError: A kind is not a string or *dims* is not a pair.
        UnknownEnumValueError: A kind token is not recognized.
    """
    # Each field is checked for presence, then type, before the next one
    _require(0, color_kind)
    if not isinstance(color_kind, str):
        raise TypeMismatchError("ColorKind (str)", color_kind, _COLOR_KINDS)

    _require(1, screen_kind)
    if not isinstance(screen_kind, str):
        raise TypeMismatchError("ScreenKind (str)", screen_kind, _SCREEN_KINDS)

    _require(2, dims)
    decoded_dims = _decode_dims(dims)
    depth = _as_count(bit_depth)
    if bit_depth is not None and depth is None:
        logger.debug("Ignoring bit depth %r", bit_depth)

    kind = _SCREEN_KINDS.get(screen_kind.lower())
    if kind is None:
        raise UnknownEnumValueError("ScreenKind", screen_kind, _SCREEN_KINDS)

    color = _COLOR_KINDS.get(color_kind.lower())
    if color is None:
        raise UnknownEnumValueError("ColorKind", color_kind, _COLOR_KINDS)

    if color is ColorKind.MONOCHROME:
        return Monochrome(kind, decoded_dims)
    return Color(kind, decoded_dims, depth)
