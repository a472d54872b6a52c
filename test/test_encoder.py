from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from video_concat.encoder import Platform, default_encoder, select_encoder


@pytest.mark.parametrize(
    "platform, expected",
    [
        (Platform.WINDOWS, "hevc_nvenc"),
        (Platform.MACOS, "hevc_videotoolbox"),
        (Platform.OTHER, "libx265"),
    ],
)
def test_default_encoder_mapping(platform: Platform, expected: str) -> None:
    assert default_encoder(platform) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("win32", Platform.WINDOWS),
        ("cygwin", Platform.WINDOWS),
        ("darwin", Platform.MACOS),
        ("linux", Platform.OTHER),
        ("freebsd13", Platform.OTHER),
    ],
)
def test_platform_from_sys_platform(value: str, expected: Platform) -> None:
    assert Platform.from_sys_platform(value) is expected


def test_macos_without_override_uses_videotoolbox() -> None:
    assert select_encoder(None, Platform.MACOS) == "hevc_videotoolbox"


def test_override_wins_over_platform_default() -> None:
    assert select_encoder("libx264", Platform.MACOS) == "libx264"


def test_empty_override_falls_back_to_default() -> None:
    assert select_encoder("", Platform.OTHER) == "libx265"
