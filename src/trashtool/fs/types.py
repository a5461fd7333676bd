"""Result types: TrashResult, RestoreResult, EmptyResult, ListResult."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


@dataclass
class FileInfo:
    """Metadata of one item under a trash's ``files/`` directory."""

    path: Path
    name: str
    is_directory: bool
    is_symlink: bool = False
    size_bytes: int = 0
    mode: int = 0
    nlink: int = 1
    uid: int = 0
    gid: int = 0
    modified_at: datetime | None = None


@dataclass
class TrashResult:
    """Result of trashing one path."""

    success: bool
    message: str
    path: str | None = None
    trashed_path: Path | None = None
    trash_root: Path | None = None


@dataclass
class RestoreResult:
    """Result of restoring one trash entry."""

    success: bool
    message: str
    file_path: Path | None = None


@dataclass
class EmptyResult:
    """Result of emptying one trash directory."""

    success: bool
    message: str
    trash_dir: Path | None = None
    item_count: int = 0
    emptied: bool = False
    already_empty: bool = False


@dataclass
class ListResult:
    """Result of listing one trash directory."""

    success: bool
    message: str
    entries: list[FileInfo] = field(default_factory=list)
    path: Path | None = None
