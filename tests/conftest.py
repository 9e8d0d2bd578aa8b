"""Shared pytest fixtures for termcodec tests."""

import pytest

from termcodec import CodecConfig, Terminal
from termcodec.screen import Color, Monochrome, ScreenKind


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep environment and config files on this machine out of the tests."""
    monkeypatch.delenv("TERMCODEC_SEQUENCE_STYLE", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def standard_config() -> CodecConfig:
    """Config that emits terminated CUP and DECSC/DECRC."""
    return CodecConfig(sequence_style="standard")


@pytest.fixture
def terminal() -> Terminal:
    """Terminal facade with default (legacy) settings."""
    return Terminal()


@pytest.fixture
def unsupported_modes() -> list:
    """Well-formed modes that are not in the legal table."""
    return [
        Color(ScreenKind.TEXT, (40, 25), 3),
        Color(ScreenKind.TEXT, (40, 25), 4),
        Color(ScreenKind.GRAPHICS, (320, 200), 4),
        Color(ScreenKind.GRAPHICS, (640, 480)),
        Color(ScreenKind.GRAPHICS, (1024, 768), 8),
        Monochrome(ScreenKind.TEXT, (80, 24)),
        Monochrome(ScreenKind.TEXT, (320, 200)),
        Monochrome(ScreenKind.GRAPHICS, (40, 25)),
        Monochrome(ScreenKind.GRAPHICS, (300, 200)),
    ]
