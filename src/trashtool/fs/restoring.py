"""Discovering trashed items and restoring them to their original paths."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import (
    RestoreCollisionError,
    TrashedItemNotFoundError,
    TrashInfoParseError,
    TrashIOError,
)
from .trashinfo import (
    TRASH_FILES_DIR_NAME,
    TRASH_INFO_DIR_NAME,
    TRASH_INFO_SUFFIX,
    parse_trashinfo,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrashEntry:
    """A trashed item paired with its record, for one restore session.

    Attributes:
        trashed_path: The item under ``files/``.
        info_path: Its ``.trashinfo`` record under ``info/``.
        original_path: Decoded original absolute path.
        deletion_date: Raw ``DeletionDate`` value.
    """

    trashed_path: Path
    info_path: Path
    original_path: Path
    deletion_date: str

    @property
    def display_text(self) -> str:
        """One-line description for selection lists."""
        return f"{self.deletion_date}  {self.original_path} <= {self.trashed_path}"

    @property
    def identity(self) -> str:
        """Stable key for this entry within a session (its record path)."""
        return str(self.info_path)


def _is_record_name(name: str) -> bool:
    # A bare ".trashinfo" would pair with an empty name, i.e. files/ itself.
    return name.endswith(TRASH_INFO_SUFFIX) and len(name) > len(TRASH_INFO_SUFFIX)


def _scan_info_dir(trash_dir: Path) -> list[TrashEntry]:
    info_dir = trash_dir / TRASH_INFO_DIR_NAME
    files_dir = trash_dir / TRASH_FILES_DIR_NAME
    if not info_dir.is_dir():
        return []

    try:
        names = [entry.name for entry in os.scandir(info_dir)]
    except OSError as e:
        raise TrashIOError(info_dir, e) from e

    entries: list[TrashEntry] = []
    for name in names:
        if not _is_record_name(name):
            continue
        info_path = info_dir / name

        try:
            text = info_path.read_text(encoding="utf-8", errors="surrogateescape")
            info = parse_trashinfo(text, source=info_path)
        except OSError as e:
            logger.warning("Cannot read %s: %s. Skipping entry.", info_path, e)
            continue
        except TrashInfoParseError as e:
            logger.warning("%s. Skipping entry.", e)
            continue

        trashed_path = files_dir / name[: -len(TRASH_INFO_SUFFIX)]
        if not os.path.lexists(trashed_path):
            logger.warning("No trashed item for %s. Skipping entry.", info_path)
            continue

        entries.append(
            TrashEntry(
                trashed_path=trashed_path,
                info_path=info_path,
                original_path=info.original_path,
                deletion_date=info.deletion_date,
            )
        )
    return entries


def scan_trash_entries(trash_dirs: Iterable[Path]) -> list[TrashEntry]:
    """Collect restorable entries from the ``info/`` directory of each trash.

    Trash directories without ``info/`` are skipped.  Corrupt records are
    logged and skipped without aborting the scan.  Entries come back in
    directory order; see ``sort_entries``.
    """
    entries: list[TrashEntry] = []
    for trash_dir in trash_dirs:
        entries.extend(_scan_info_dir(trash_dir))
    return entries


def sort_entries(entries: Iterable[TrashEntry]) -> list[TrashEntry]:
    """Entries ordered by deletion date, then original path."""
    return sorted(entries, key=lambda e: (e.deletion_date, str(e.original_path)))


def restore_entry(entry: TrashEntry) -> Path:
    """Move *entry* back to its original path and drop its record.

    Never overwrites: an occupied destination raises
    ``RestoreCollisionError`` and leaves both sides untouched.  Failing to
    remove the record afterwards is logged; the restore still succeeds.
    """
    original_path = entry.original_path
    if os.path.lexists(original_path):
        raise RestoreCollisionError(original_path)

    parent = original_path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise TrashIOError(parent, e) from e

    if not os.path.lexists(entry.trashed_path):
        raise TrashedItemNotFoundError(entry.trashed_path)

    try:
        os.rename(entry.trashed_path, original_path)
    except OSError as e:
        raise TrashIOError(entry.trashed_path, e) from e

    try:
        entry.info_path.unlink()
    except OSError:
        logger.warning(
            "Restored '%s' but failed to remove its info file '%s'",
            original_path,
            entry.info_path,
            exc_info=True,
        )

    logger.debug("Restored %s -> %s", entry.trashed_path, original_path)
    return original_path
