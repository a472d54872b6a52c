"""Configuration loader for the batch concat tool."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import yaml  # type: ignore
except ModuleNotFoundError as exc:  # pragma: no cover - import guard
    raise RuntimeError(
        "PyYAML is required. Please install it with `pip install pyyaml`."
    ) from exc

from video_concat.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("video_concat.yaml")


@dataclass
class AppConfig:
    """Wrapper around raw configuration with resolved paths."""

    raw: Dict[str, Any]
    config_path: Optional[Path]
    temp_dir: Optional[Path]
    log_file: Optional[Path]

    @property
    def logging_level(self) -> str:
        level = (
            self.raw.get("logging", {}).get("level")
            or self.raw.get("logging", {}).get("LEVEL")
            or "INFO"
        )
        return str(level).upper()

    @property
    def ffmpeg(self) -> Dict[str, Any]:
        return self.raw.get("ffmpeg", {}) or {}

    @property
    def ffmpeg_path(self) -> str:
        return str(self.ffmpeg.get("path") or "ffmpeg")

    @property
    def resolution(self) -> str:
        return str(self.ffmpeg.get("resolution") or "1920x1080")

    @property
    def framerate(self) -> int:
        value = self.ffmpeg.get("framerate", 60)
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"ffmpeg.framerate must be an integer, got {value!r}") from exc

    @property
    def encoder(self) -> Optional[str]:
        value = self.ffmpeg.get("encoder")
        return str(value) if value else None

    @property
    def audio_codec(self) -> str:
        return str(self.ffmpeg.get("audio_codec") or "aac")

    @property
    def audio_bitrate(self) -> str:
        return str(self.ffmpeg.get("audio_bitrate") or "192k")

    def to_debug_dict(self) -> Dict[str, Any]:
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "ffmpeg_path": self.ffmpeg_path,
            "resolution": self.resolution,
            "framerate": self.framerate,
            "encoder": self.encoder,
            "temp_dir": str(self.temp_dir) if self.temp_dir else None,
            "log_file": str(self.log_file) if self.log_file else None,
        }

    def dumps(self) -> str:
        """Return a JSON string for diagnostics."""
        return json.dumps(self.to_debug_dict(), ensure_ascii=False, indent=2)


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return value


def load_config(path: Path | str | None = None) -> AppConfig:
    """Load YAML config and resolve key paths.

    An explicit ``path`` must exist. Without one, ``video_concat.yaml`` in the
    working directory is used when present and built-in defaults otherwise.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return AppConfig(raw={}, config_path=None, temp_dir=None, log_file=None)
        path = DEFAULT_CONFIG_PATH

    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read config {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    root = config_path.parent
    _section(raw, "ffmpeg")

    temp_dir = None
    temp_name = _section(raw, "manifest").get("temp_directory")
    if temp_name:
        temp_dir = (root / str(temp_name)).resolve()

    log_file = None
    log_file_name = _section(raw, "logging").get("file")
    if log_file_name:
        log_file = (root / str(log_file_name)).resolve()

    return AppConfig(
        raw=raw,
        config_path=config_path,
        temp_dir=temp_dir,
        log_file=log_file,
    )
