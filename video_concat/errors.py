"""Exception types raised by the batch concat pipeline."""
from __future__ import annotations

from typing import Optional


class BatchConcatError(RuntimeError):
    """Base class for every fatal error of a run."""


class ConfigError(BatchConcatError):
    pass


class ToolNotFoundError(BatchConcatError):
    pass


class ScanError(BatchConcatError):
    pass


class NoVideosFoundError(BatchConcatError):
    pass


class PathResolutionError(BatchConcatError):
    pass


class ManifestWriteError(BatchConcatError):
    pass


class ToolExecutionError(BatchConcatError):
    """FFmpeg exited nonzero or could not be started.

    ``returncode`` is ``None`` when the process never ran.
    """

    def __init__(self, message: str, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode
