"""FFmpeg concat demuxer list handling.

Each input becomes one ``file '<path>'`` directive. A single quote cannot
appear inside a quoted token, so it is closed, emitted as ``\\'`` and reopened:
``'`` becomes ``'\\''``.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from logging_utils import get_logger

from .errors import ManifestWriteError

logger = get_logger(__name__)

DIRECTIVE = "file"
MANIFEST_PREFIX = "concat-list-"
MANIFEST_SUFFIX = ".txt"


def escape_path(path: Path | str) -> str:
    return str(path).replace("'", "'\\''")


def manifest_line(path: Path | str) -> str:
    return f"{DIRECTIVE} '{escape_path(path)}'"


def render_manifest(paths: Sequence[Path | str]) -> str:
    """One directive per path, order preserved, newline terminated."""
    return "".join(manifest_line(p) + "\n" for p in paths)


def parse_manifest_line(line: str) -> str:
    """Return the path encoded by a ``file '...'`` directive."""
    text = line[:-1] if line.endswith("\n") else line
    prefix = DIRECTIVE + " "
    if not text.startswith(prefix):
        raise ValueError(f"Not a file directive: {line!r}")
    text = text[len(prefix):]

    parts: List[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "'":
            end = text.find("'", i + 1)
            if end < 0:
                raise ValueError(f"Unterminated quote: {line!r}")
            parts.append(text[i + 1 : end])
            i = end + 1
        elif ch == "\\" and i + 1 < len(text):
            parts.append(text[i + 1])
            i += 2
        elif ch.isspace():
            raise ValueError(f"Unquoted whitespace: {line!r}")
        else:
            parts.append(ch)
            i += 1
    return "".join(parts)


class ConcatManifest:
    """Temporary concat list owned by a single run.

    The file is written on ``__enter__`` and removed on ``__exit__`` whatever
    the outcome of the ``with`` body.
    """

    def __init__(self, paths: Sequence[Path | str], temp_dir: Optional[Path] = None) -> None:
        self.paths = list(paths)
        self.temp_dir = temp_dir
        self.lines = [manifest_line(p) for p in self.paths]
        self.path: Optional[Path] = None

    def __enter__(self) -> "ConcatManifest":
        self.path = self._write()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _write(self) -> Path:
        try:
            fd, name = tempfile.mkstemp(
                prefix=MANIFEST_PREFIX,
                suffix=MANIFEST_SUFFIX,
                dir=str(self.temp_dir) if self.temp_dir else None,
            )
        except OSError as exc:
            raise ManifestWriteError(f"Failed to create concat list: {exc}") from exc

        path = Path(name)
        try:
            # surrogateescape keeps undecodable file name bytes as they are on disk
            with open(fd, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as fh:
                fh.write("".join(line + "\n" for line in self.lines))
        except (OSError, UnicodeError) as exc:
            path.unlink(missing_ok=True)
            raise ManifestWriteError(f"Failed to write concat list {path}: {exc}") from exc
        except BaseException:
            path.unlink(missing_ok=True)
            raise

        logger.debug("concat: list file => %s (%d entries)", path, len(self.lines))
        return path

    def close(self) -> None:
        if self.path is None:
            return
        path, self.path = self.path, None
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("concat: failed to remove list file %s: %s", path, exc)

    def preview(self, limit: int = 5) -> Tuple[List[str], List[str]]:
        """Head and tail lines, for failure diagnostics."""
        return self.lines[:limit], self.lines[-limit:]
