"""
Configuration for termcodec.

Settings can be loaded from YAML files or constructed programmatically.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

# ---------------------------------------------------------------------------
# Sequence style
# ---------------------------------------------------------------------------

SequenceStyle = Literal["legacy", "standard"]

SEQUENCE_STYLES: tuple[str, ...] = ("legacy", "standard")


def get_sequence_style() -> SequenceStyle:
    """Get the sequence style from the environment, defaulting to 'legacy'."""
    val = os.environ.get("TERMCODEC_SEQUENCE_STYLE", "legacy").lower()
    if val in SEQUENCE_STYLES:
        return val  # type: ignore[return-value]
    return "legacy"


def default_config_paths() -> list[Path]:
    """Config file locations, in lookup order."""
    return [
        Path.cwd() / "termcodec.yaml",
        Path.home() / ".config" / "termcodec" / "config.yaml",
    ]


@dataclass
class CodecConfig:
    """
    Configuration for the codecs and the command-line front end.

    Example YAML:
        sequence_style: standard
        escape_output: true
        log_level: DEBUG
    """

    # "legacy" keeps the historical cursor move/save/restore bytes,
    # "standard" emits CUP with its terminator and DECSC/DECRC.
    sequence_style: SequenceStyle = field(default_factory=get_sequence_style)

    # CLI prints repr-escaped sequences instead of raw bytes
    escape_output: bool = True

    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.sequence_style not in SEQUENCE_STYLES:
            raise ValueError(
                f"Invalid sequence_style {self.sequence_style!r}, "
                f"expected one of: {', '.join(SEQUENCE_STYLES)}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CodecConfig:
        """Create config from a dictionary."""
        if not isinstance(data, Mapping):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        return cls(
            sequence_style=data.get("sequence_style", get_sequence_style()),
            escape_output=data.get("escape_output", True),
            log_level=data.get("log_level", "WARNING"),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> CodecConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def load(cls, paths: list[Path] | None = None) -> tuple[CodecConfig, Path | None]:
        """
        Load the first config file that exists.

        Returns the config and the path it was read from, or the defaults
        and ``None`` when no file is found.
        """
        for path in paths if paths is not None else default_config_paths():
            if path.exists():
                return cls.from_yaml(path), path
        return cls(), None

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "sequence_style": self.sequence_style,
            "escape_output": self.escape_output,
            "log_level": self.log_level,
        }
