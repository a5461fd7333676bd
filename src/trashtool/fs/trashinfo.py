"""``.trashinfo`` record format — constants, building and parsing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .encoding import decode_path, encode_path
from .exceptions import TrashInfoParseError

TRASH_INFO_HEADER = "[Trash Info]"
TRASH_INFO_PATH_KEY = "Path"
TRASH_INFO_DATE_KEY = "DeletionDate"
TRASH_INFO_SUFFIX = ".trashinfo"
TRASH_INFO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
TRASH_FILES_DIR_NAME = "files"
TRASH_INFO_DIR_NAME = "info"


@dataclass(frozen=True)
class TrashInfo:
    """Decoded contents of one ``.trashinfo`` record."""

    original_path: Path
    deletion_date: str


def format_deletion_date(when: datetime | None = None) -> str:
    """Format *when* (default: now, local time) without a timezone."""
    return (when or datetime.now()).strftime(TRASH_INFO_DATE_FORMAT)


def build_trashinfo(original_path: Path | str, deletion_date: str) -> str:
    """Build the three-line record for *original_path*.

    Examples:
        build_trashinfo("/home/user/file.txt", "2024-01-01T12:30:00")
        -> "[Trash Info]\\nPath=/home/user/file.txt\\nDeletionDate=2024-01-01T12:30:00\\n"
    """
    return (
        f"{TRASH_INFO_HEADER}\n"
        f"{TRASH_INFO_PATH_KEY}={encode_path(str(original_path))}\n"
        f"{TRASH_INFO_DATE_KEY}={deletion_date}\n"
    )


def parse_trashinfo_fields(text: str) -> tuple[str | None, str | None]:
    """Return the raw ``(Path, DeletionDate)`` values found in *text*.

    Lines are scanned independently and the first occurrence of each key
    wins.  A missing key is returned as ``None``.
    """
    path_prefix = f"{TRASH_INFO_PATH_KEY}="
    date_prefix = f"{TRASH_INFO_DATE_KEY}="
    path_field: str | None = None
    date_field: str | None = None

    for line in text.splitlines():
        if path_field is None and line.startswith(path_prefix):
            path_field = line[len(path_prefix) :]
        if date_field is None and line.startswith(date_prefix):
            date_field = line[len(date_prefix) :]
        if path_field is not None and date_field is not None:
            break

    return path_field, date_field


def parse_trashinfo(text: str, source: Path | None = None) -> TrashInfo:
    """Parse and decode a record.

    Raises ``TrashInfoParseError`` when either key is missing or the path
    does not decode to valid UTF-8.
    """
    path_field, date_field = parse_trashinfo_fields(text)
    if path_field is None:
        raise TrashInfoParseError(source, f"missing '{TRASH_INFO_PATH_KEY}' key")
    if date_field is None:
        raise TrashInfoParseError(source, f"missing '{TRASH_INFO_DATE_KEY}' key")

    try:
        decoded = decode_path(path_field)
    except UnicodeError as e:
        raise TrashInfoParseError(source, f"path is not valid UTF-8 ({e.reason})") from e

    return TrashInfo(original_path=Path(decoded), deletion_date=date_field)


def info_path_for(dest_path: Path, info_dir: Path) -> Path:
    """Path of the record paired with the item at *dest_path*.

    Examples:
        info_path_for(Path(".../Trash/files/archive.tar.gz"), Path(".../Trash/info"))
        -> Path(".../Trash/info/archive.tar.gz.trashinfo")
    """
    return info_dir / f"{dest_path.name}{TRASH_INFO_SUFFIX}"
