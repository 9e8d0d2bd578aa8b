"""
Exception types raised by the terminal control-code codecs.

Every error carries the alternatives the caller could have used in its
``valid`` attribute, and lists them in its message.
"""

from __future__ import annotations

from collections.abc import Iterable


class TermCodecError(Exception):
    """Base class for all codec errors."""

    def __init__(self, message: str, valid: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.valid: tuple[str, ...] = tuple(valid)


class UnknownOperationError(TermCodecError, LookupError):
    """Raised when an erase operation name is not registered."""

    def __init__(self, name: str, valid: Iterable[str]) -> None:
        valid = tuple(valid)
        super().__init__(
            f"Method {name} not found on Terminal, valid methods are {', '.join(valid)}",
            valid,
        )
        self.name = name


class InvalidModeConfigurationError(TermCodecError, ValueError):
    """Raised when a screen mode is well-formed but not a supported hardware mode."""

    def __init__(self, mode: object, valid: Iterable[str]) -> None:
        valid = tuple(valid)
        super().__init__(
            "Invalid mode configuration, valid configurations are:\n- " + "\n- ".join(valid),
            valid,
        )
        self.mode = mode


class MissingFieldError(TermCodecError, TypeError):
    """Raised when a positional field of a screen mode request is absent."""

    def __init__(self, field: str, position: int, valid: Iterable[str] = ()) -> None:
        message = f"bad argument #{position} ({field}): expected {field} of mode, got None"
        valid = tuple(valid)
        if valid:
            message += f" (expected one of: {', '.join(valid)})"
        super().__init__(message, valid)
        self.field = field
        self.position = position


class TypeMismatchError(TermCodecError, TypeError):
    """Raised when a request value has the wrong type for its field."""

    def __init__(self, expected: str, got: object, valid: Iterable[str] = ()) -> None:
        got_name = type(got).__name__
        message = f"Expected {expected}, got {got_name}"
        valid = tuple(valid)
        if valid:
            message += f" (expected one of: {', '.join(valid)})"
        super().__init__(message, valid)
        self.expected = expected
        self.got = got


class UnknownEnumValueError(TermCodecError, ValueError):
    """Raised when a kind token is not one of the recognized values."""

    def __init__(self, enum: str, value: str, valid: Iterable[str]) -> None:
        valid = tuple(valid)
        super().__init__(
            f"Unknown {enum} {value!r}, expected one of: {', '.join(valid)}",
            valid,
        )
        self.enum = enum
        self.value = value
