"""Batch concatenation of a directory of videos through FFmpeg.

Modules:
- scanner: Recursive discovery of supported video files
- sorter: Chronological ordering and path canonicalisation
- manifest: Concat demuxer list rendering and the scoped temp file
- encoder: Platform default video codec selection
- runner: FFmpeg lookup, command assembly and execution
- pipeline: Whole-run orchestration
"""

from .errors import (
    BatchConcatError,
    ConfigError,
    ManifestWriteError,
    NoVideosFoundError,
    PathResolutionError,
    ScanError,
    ToolExecutionError,
    ToolNotFoundError,
)
from .pipeline import BatchConcatPipeline, ConcatParams, ConcatResult

__all__ = [
    "BatchConcatError",
    "BatchConcatPipeline",
    "ConcatParams",
    "ConcatResult",
    "ConfigError",
    "ManifestWriteError",
    "NoVideosFoundError",
    "PathResolutionError",
    "ScanError",
    "ToolExecutionError",
    "ToolNotFoundError",
]
