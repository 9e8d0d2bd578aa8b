"""
termcodec - terminal control-code codec.

Translates terminal-control intents (cursor motion, erase regions, screen
modes) into ANSI/VT escape sequences.  Nothing here writes to a terminal;
every operation returns a string for the caller to output.

Example:
    from termcodec import EraseRegion, Terminal, cursor, erase, screen

    erase.encode(EraseRegion.LINE)              # "\\x1b[2K"
    cursor.encode(cursor.up(3))                 # "\\x1b[3A"

    mode = screen.decode_request("color", "graphics", {"width": 640, "height": 480}, 4)
    screen.encode(mode)                         # "\\x1b[=18h"

    term = Terminal()
    term.clearLine()                            # "\\x1b[2K"
"""

from termcodec import cursor, erase, screen
from termcodec.config import CodecConfig, SequenceStyle
from termcodec.cursor import (
    ColumnTo,
    CursorOp,
    Down,
    Home,
    Left,
    MoveTo,
    Restore,
    Right,
    Save,
    Up,
)
from termcodec.erase import EraseRegion
from termcodec.errors import (
    InvalidModeConfigurationError,
    MissingFieldError,
    TermCodecError,
    TypeMismatchError,
    UnknownEnumValueError,
    UnknownOperationError,
)
from termcodec.screen import (
    Color,
    ColorKind,
    EnableWrapping,
    Monochrome,
    ScreenKind,
    ScreenMode,
)
from termcodec.terminal import Cursor, Terminal

__version__ = "0.1.0"

__all__ = [
    # Codecs
    "cursor",
    "erase",
    "screen",
    # Cursor
    "CursorOp",
    "Home",
    "MoveTo",
    "Up",
    "Down",
    "Left",
    "Right",
    "ColumnTo",
    "Save",
    "Restore",
    # Erase
    "EraseRegion",
    # Screen
    "ScreenMode",
    "ScreenKind",
    "ColorKind",
    "Monochrome",
    "Color",
    "EnableWrapping",
    # Facades
    "Terminal",
    "Cursor",
    # Config
    "CodecConfig",
    "SequenceStyle",
    # Errors
    "TermCodecError",
    "UnknownOperationError",
    "InvalidModeConfigurationError",
    "MissingFieldError",
    "TypeMismatchError",
    "UnknownEnumValueError",
]
