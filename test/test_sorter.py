from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from video_concat.errors import PathResolutionError
from video_concat.scanner import VideoEntry, scan_videos
from video_concat.sorter import order_videos, resolve_paths, sort_chronologically


def test_sort_is_ascending_by_mtime() -> None:
    entries = [
        VideoEntry(Path("/v/b.mp4"), 30.0),
        VideoEntry(Path("/v/a.mp4"), 10.0),
        VideoEntry(Path("/v/c.mp4"), 20.0),
    ]

    ordered = sort_chronologically(entries)

    assert [e.path.name for e in ordered] == ["a.mp4", "c.mp4", "b.mp4"]


def test_sort_keeps_scan_order_for_ties() -> None:
    entries = [
        VideoEntry(Path("/v/z.mp4"), 5.0),
        VideoEntry(Path("/v/y.mp4"), 1.0),
        VideoEntry(Path("/v/x.mp4"), 5.0),
        VideoEntry(Path("/v/w.mp4"), 5.0),
    ]

    ordered = sort_chronologically(entries)

    assert [e.path.name for e in ordered] == ["y.mp4", "z.mp4", "x.mp4", "w.mp4"]
    assert sorted(ordered, key=lambda e: e.path) == sorted(entries, key=lambda e: e.path)


def test_sort_does_not_mutate_input() -> None:
    entries = [VideoEntry(Path("b"), 2.0), VideoEntry(Path("a"), 1.0)]

    sort_chronologically(entries)

    assert [e.path.name for e in entries] == ["b", "a"]


def test_order_videos_returns_absolute_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "b.mp4").write_bytes(b"")
    (tmp_path / "a.mov").write_bytes(b"")
    os.utime(tmp_path / "b.mp4", (200, 200))
    os.utime(tmp_path / "a.mov", (100, 100))
    monkeypatch.chdir(tmp_path)

    paths = order_videos(scan_videos(Path(".")))

    assert paths == [(tmp_path / "a.mov").resolve(), (tmp_path / "b.mp4").resolve()]
    assert all(p.is_absolute() for p in paths)


def test_resolve_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(PathResolutionError):
        resolve_paths([VideoEntry(tmp_path / "gone.mp4", 0.0)])


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_broken_symlink_fails_resolution(tmp_path: Path) -> None:
    (tmp_path / "dangling.mp4").symlink_to(tmp_path / "nowhere.mp4")

    entries = scan_videos(tmp_path)
    assert [e.path.name for e in entries] == ["dangling.mp4"]

    with pytest.raises(PathResolutionError):
        order_videos(entries)
