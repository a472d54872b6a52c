"""Default video codec per host platform."""
from __future__ import annotations

import sys
from enum import Enum
from typing import Optional


class Platform(Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    OTHER = "other"

    @classmethod
    def from_sys_platform(cls, value: str) -> "Platform":
        if value.startswith(("win32", "cygwin")):
            return cls.WINDOWS
        if value == "darwin":
            return cls.MACOS
        return cls.OTHER

    @classmethod
    def current(cls) -> "Platform":
        return cls.from_sys_platform(sys.platform)


DEFAULT_ENCODERS = {
    Platform.WINDOWS: "hevc_nvenc",
    Platform.MACOS: "hevc_videotoolbox",
    Platform.OTHER: "libx265",
}


def default_encoder(platform: Platform) -> str:
    # No hardware probing: FFmpeg itself rejects an unusable encoder.
    return DEFAULT_ENCODERS[platform]


def select_encoder(override: Optional[str], platform: Platform) -> str:
    if override:
        return override
    return default_encoder(platform)
