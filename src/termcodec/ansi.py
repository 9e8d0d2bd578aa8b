"""
ANSI escape sequence primitives shared by the codecs.

Provides the escape prefixes and a small builder for CSI sequences so the
cursor, erase and screen mode tables all spell their output the same way.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------

ESC = "\033"
CSI = f"{ESC}["


def csi(params: str | int, final: str) -> str:
    """
    Build a CSI sequence from a parameter string and a final character.

    Parameters
    ----------
    params:
        Parameter bytes placed between ``CSI`` and *final*.  Integers are
        written in decimal, strings are used verbatim (e.g. ``'=13'``).
    final:
        The command character (``'A'``, ``'J'``, ``'h'``...).  May be empty
        for sequences that carry no terminator.

    Returns
    -------
    str
        ``CSI + params + final``.
    """
    return f"{CSI}{params}{final}"


def escape(sequence: str) -> str:
    """Return a printable form of *sequence* with control bytes escaped."""
    return sequence.encode("unicode_escape").decode("ascii")
