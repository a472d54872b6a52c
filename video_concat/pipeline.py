"""High-level orchestration for a batch concat run."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from logging_utils import get_logger

from .encoder import Platform, select_encoder
from .errors import NoVideosFoundError, ToolExecutionError
from .manifest import ConcatManifest
from .runner import build_command, find_tool, run_tool
from .scanner import scan_videos
from .sorter import order_videos

logger = get_logger(__name__)


@dataclass
class ConcatParams:
    input_dir: Path
    output_path: Path
    resolution: str = "1920x1080"
    framerate: int = 60
    encoder: Optional[str] = None
    ffmpeg_path: str = "ffmpeg"
    audio_codec: str = "aac"
    audio_bitrate: str = "192k"
    temp_dir: Optional[Path] = None


@dataclass
class ConcatResult:
    output_path: Path
    video_count: int
    encoder: str
    command: List[str]


class BatchConcatPipeline:
    """Scan, order, write the concat list and hand everything to FFmpeg.

    The run stops at the first error. The concat list is removed on every
    exit path once it exists.
    """

    def __init__(self, params: ConcatParams, platform: Optional[Platform] = None) -> None:
        self.params = params
        self.platform = platform or Platform.current()

    def run(self) -> ConcatResult:
        params = self.params

        # Checked before any file I/O
        tool = find_tool(params.ffmpeg_path)
        logger.debug("Using ffmpeg at %s", tool)

        logger.info("Scanning %s for video files...", params.input_dir)
        entries = scan_videos(params.input_dir)
        if not entries:
            raise NoVideosFoundError(f"No video files found in '{params.input_dir}'")
        logger.info("Found %d video file(s)", len(entries))

        paths = order_videos(entries)

        with ConcatManifest(paths, temp_dir=params.temp_dir) as manifest:
            encoder = select_encoder(params.encoder, self.platform)
            logger.info("Video encoder: %s", encoder)

            cmd = build_command(
                tool,
                manifest.path,
                resolution=params.resolution,
                framerate=params.framerate,
                encoder=encoder,
                output_path=params.output_path,
                audio_codec=params.audio_codec,
                audio_bitrate=params.audio_bitrate,
            )
            logger.info("Starting concatenation and encoding...")
            try:
                run_tool(cmd)
            except ToolExecutionError:
                head, tail = manifest.preview()
                logger.error("concat list head: %s", " | ".join(head))
                logger.error("concat list tail: %s", " | ".join(tail))
                raise

        return ConcatResult(
            output_path=params.output_path,
            video_count=len(paths),
            encoder=encoder,
            command=cmd,
        )
