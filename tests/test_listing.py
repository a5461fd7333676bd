"""Tests for ui/listing.py."""

from __future__ import annotations

import stat
from datetime import datetime
from pathlib import Path

import pytest

from trashtool.fs.types import FileInfo, ListResult
from trashtool.ui.listing import format_mode, format_size, make_console, render_listing


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        pytest.param(0, "0 B", id="zero"),
        pytest.param(1023, "1023 B", id="below-kib"),
        pytest.param(1024, "1.0 KiB", id="kib"),
        pytest.param(1536, "1.5 KiB", id="fraction"),
        pytest.param(5 * 1024**2, "5.0 MiB", id="mib"),
        pytest.param(3 * 1024**3, "3.0 GiB", id="gib"),
    ],
)
def test_format_size(size: int, expected: str):
    assert format_size(size) == expected


@pytest.mark.parametrize(
    ("mode", "is_directory", "expected"),
    [
        pytest.param(stat.S_IFREG | 0o644, False, "-rw-r--r--", id="file"),
        pytest.param(stat.S_IFDIR | 0o755, True, "drwxr-xr-x", id="dir"),
        pytest.param(0o700, False, "-rwx------", id="private"),
        pytest.param(0, False, "----------", id="none"),
    ],
)
def test_format_mode(mode: int, is_directory: bool, expected: str):
    assert format_mode(mode, is_directory).plain == expected


class TestRenderListing:
    def _render(self, result: ListResult, long_format: bool = False) -> str:
        console = make_console("never", width=200)
        with console.capture() as capture:
            render_listing(console, result, long_format)
        return capture.get()

    def test_empty(self):
        out = self._render(ListResult(success=True, message="", path=Path("/t/files")))
        assert out.splitlines() == ["/t/files", "  (empty)"]

    def test_failure(self):
        out = self._render(ListResult(success=False, message="Cannot list", path=Path("/t/files")))
        assert "Cannot list" in out

    def test_grid(self):
        entries = [
            FileInfo(path=Path("/t/files/a.txt"), name="a.txt", is_directory=False),
            FileInfo(path=Path("/t/files/b.txt"), name="b.txt", is_directory=False),
        ]
        result = ListResult(success=True, message="", entries=entries, path=Path("/t/files"))
        out = self._render(result)
        assert "a.txt" in out
        assert "b.txt" in out

    def test_long(self):
        info = FileInfo(
            path=Path("/t/files/a.txt"),
            name="a.txt",
            is_directory=False,
            size_bytes=2048,
            mode=stat.S_IFREG | 0o600,
            uid=0,
            gid=0,
            modified_at=datetime(2024, 1, 2, 3, 4),
        )
        result = ListResult(success=True, message="", entries=[info], path=Path("/t/files"))
        out = self._render(result, long_format=True)
        assert "-rw-------" in out
        assert "2.0 KiB" in out
        assert "Jan 02 03:04" in out
        assert "a.txt" in out
