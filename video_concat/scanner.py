"""Recursive discovery of video files under a root directory."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from logging_utils import get_logger

from .errors import ScanError

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".mp4", ".mov", ".mkv", ".avi"})


@dataclass(frozen=True)
class VideoEntry:
    path: Path
    modified_at: float


def is_supported(name: str) -> bool:
    lowered = name.lower()
    return any(lowered.endswith(ext) for ext in SUPPORTED_EXTENSIONS)


def scan_videos(root: Path | str) -> List[VideoEntry]:
    """Return every supported video below ``root`` in walk order.

    Entries of each directory are visited by name so that the walk order,
    and therefore the tie-break of the chronological sort, is reproducible.
    Symlinks are never followed into directories; a symlink entry keeps its
    own mtime.
    """
    root_path = Path(root)
    try:
        if not root_path.is_dir():
            if root_path.exists():
                raise ScanError(f"Not a directory: {root_path}")
            raise ScanError(f"Directory not found: {root_path}")
    except OSError as exc:
        raise ScanError(f"Cannot access {root_path}: {exc}") from exc

    found: List[VideoEntry] = []
    _walk(root_path, found)
    logger.debug("scan: %d video(s) under %s", len(found), root_path)
    return found


def _walk(directory: Path, found: List[VideoEntry]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise ScanError(f"Failed to list {directory}: {exc}") from exc

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                _walk(Path(entry.path), found)
                continue
            if not is_supported(entry.name):
                continue
            stat = entry.stat(follow_symlinks=False)
        except OSError as exc:
            raise ScanError(f"Failed to inspect {entry.path}: {exc}") from exc
        found.append(VideoEntry(path=Path(entry.path), modified_at=stat.st_mtime))
