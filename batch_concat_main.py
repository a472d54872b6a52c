"""Command line entry for the batch concat tool."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from config_loader import AppConfig, load_config
from logging_utils import configure_logging, get_logger
from video_concat import BatchConcatError, BatchConcatPipeline, ConcatParams
from video_concat.runner import find_tool

logger = get_logger(__name__)

# Values handed to FFmpeg verbatim; they may start with "-"
DASH_VALUE_OPTIONS = ("-resolution", "--resolution", "-encoder", "--encoder")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Concatenate every video under a directory, oldest first, with FFmpeg",
    )
    parser.add_argument(
        "-dir",
        "--dir",
        dest="input_dir",
        required=True,
        help="Directory containing the video files (searched recursively)",
    )
    parser.add_argument(
        "-output",
        "--output",
        dest="output",
        required=True,
        help="Output file path (overwritten if it exists)",
    )
    parser.add_argument(
        "-resolution",
        "--resolution",
        help="Output resolution passed to the scale filter (default: 1920x1080)",
    )
    parser.add_argument(
        "-framerate",
        "--framerate",
        type=int,
        help="Output frame rate passed to the fps filter (default: 60)",
    )
    parser.add_argument(
        "-encoder",
        "--encoder",
        help=(
            "Video encoder passed to -c:v. Defaults to hevc_nvenc on Windows, "
            "hevc_videotoolbox on macOS and libx265 elsewhere."
        ),
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: video_concat.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        help="Override logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )
    return parser


def build_params(args: argparse.Namespace, config: AppConfig) -> ConcatParams:
    """CLI flags win over config values, which win over built-in defaults."""
    return ConcatParams(
        input_dir=Path(args.input_dir).expanduser(),
        output_path=Path(args.output).expanduser(),
        resolution=args.resolution or config.resolution,
        framerate=args.framerate if args.framerate is not None else config.framerate,
        encoder=args.encoder or config.encoder,
        ffmpeg_path=config.ffmpeg_path,
        audio_codec=config.audio_codec,
        audio_bitrate=config.audio_bitrate,
        temp_dir=config.temp_dir,
    )


def join_dash_values(argv: Sequence[str]) -> List[str]:
    """Glue pass-through options to their values as ``-option=value``.

    argparse reads a separate value starting with ``-`` as another flag, which
    rejects FFmpeg scale values such as ``-2:720``.
    """
    joined: List[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in DASH_VALUE_OPTIONS and i + 1 < len(argv):
            joined.append(f"{arg}={argv[i + 1]}")
            i += 2
        else:
            joined.append(arg)
            i += 1
    return joined


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(join_dash_values(sys.argv[1:] if argv is None else argv))

    try:
        config = load_config(args.config)
    except BatchConcatError as exc:
        configure_logging(args.log_level or "INFO")
        logger.error("%s", exc)
        return 1

    level = args.log_level or config.logging_level
    configure_logging(level)

    try:
        # Nothing is written, not even the log file, until FFmpeg is known to exist
        find_tool(config.ffmpeg_path)
        log_file = Path(args.log_file).expanduser() if args.log_file else config.log_file
        if log_file is not None:
            configure_logging(level, log_file)

        logger.debug("Config: %s", config.dumps())
        params = build_params(args, config)
        result = BatchConcatPipeline(params).run()
    except BatchConcatError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Concatenation complete. Output: %s", result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
