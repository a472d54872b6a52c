"""Chronological ordering of scanned videos."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .errors import PathResolutionError
from .scanner import VideoEntry


def sort_chronologically(entries: Iterable[VideoEntry]) -> List[VideoEntry]:
    """Oldest first. ``sorted`` is stable, so equal mtimes keep scan order."""
    return sorted(entries, key=lambda entry: entry.modified_at)


def resolve_paths(entries: Iterable[VideoEntry]) -> List[Path]:
    resolved: List[Path] = []
    for entry in entries:
        try:
            resolved.append(entry.path.resolve(strict=True))
        except (OSError, RuntimeError) as exc:
            # RuntimeError: symlink loop on older interpreters
            raise PathResolutionError(f"Failed to resolve {entry.path}: {exc}") from exc
    return resolved


def order_videos(entries: Iterable[VideoEntry]) -> List[Path]:
    """Sort by mtime, then canonicalise every path."""
    return resolve_paths(sort_chronologically(entries))
