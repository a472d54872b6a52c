from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Sequence

from logging_utils import get_logger

from .errors import ToolExecutionError, ToolNotFoundError

logger = get_logger(__name__)


def find_tool(name: str = "ffmpeg") -> str:
    """Resolve ``name`` on PATH, raising ToolNotFoundError when absent."""
    resolved = shutil.which(name)
    if resolved is None:
        raise ToolNotFoundError(
            f"{name} not found. Install FFmpeg and make sure it is on PATH."
        )
    return resolved


def build_command(
    tool: str,
    manifest_path: Path,
    *,
    resolution: str,
    framerate: int,
    encoder: str,
    output_path: Path,
    audio_codec: str = "aac",
    audio_bitrate: str = "192k",
) -> List[str]:
    return [
        tool,
        "-f",
        "concat",
        "-safe",
        "0",
        "-i",
        str(manifest_path),
        "-vf",
        f"scale={resolution},fps={framerate}",
        "-c:v",
        encoder,
        "-c:a",
        audio_codec,
        "-b:a",
        audio_bitrate,
        "-y",
        str(output_path),
    ]


def format_command(cmd: Sequence[str]) -> str:
    return " ".join(a if " " not in a else f"'{a}'" for a in cmd)


def run_tool(cmd: Sequence[str]) -> None:
    """Run ``cmd`` to completion, raising on non-zero exit.

    stdout and stderr are inherited so FFmpeg output reaches the console live.
    """
    logger.debug("FFmpeg: %s", format_command(cmd))
    try:
        proc = subprocess.run(list(cmd))
    except OSError as exc:
        raise ToolExecutionError(f"Failed to start {cmd[0]}: {exc}") from exc
    if proc.returncode != 0:
        raise ToolExecutionError(
            f"ffmpeg failed with exit code {proc.returncode}",
            returncode=proc.returncode,
        )
