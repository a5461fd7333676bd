"""Moving items into a trash directory.

The ``.trashinfo`` record is written before the item is renamed into
``files/`` and removed again if the rename fails, so an item is never
trashed without its record.
"""

from __future__ import annotations

import errno
import logging
import os
from typing import TYPE_CHECKING

from .exceptions import AlreadyInTrashError, CrossDeviceMoveError, TrashIOError, TrashLocationError
from .locations import canonicalize
from .trashinfo import build_trashinfo, format_deletion_date, info_path_for

if TYPE_CHECKING:
    from pathlib import Path

    from .locations import TrashLocation

logger = logging.getLogger(__name__)

# Matches Nautilus, Nemo and Thunar: "file.txt" collides to "file.2.txt".
COLLISION_COUNTER_START = 2


def collision_name(filename: str, counter: int) -> str:
    """Name of the *counter*-th candidate for *filename*.

    The counter goes before everything after the first dot, so
    ``archive.tar.gz`` becomes ``archive.2.tar.gz``.  Names without a dot
    and dotfiles such as ``.bashrc`` get it appended: ``.bashrc.2``.
    """
    dot_index = filename.find(".")
    if dot_index <= 0:
        return f"{filename}.{counter}"
    return f"{filename[:dot_index]}.{counter}{filename[dot_index:]}"


def find_available_dest_path(source_path: Path, files_dir: Path) -> Path:
    """First path in *files_dir* not already taken by an item named after *source_path*."""
    filename = source_path.name
    if not filename:
        raise TrashLocationError(f"Source path '{source_path}' has no filename", source_path)

    dest_path = files_dir / filename
    counter = COLLISION_COUNTER_START
    while os.path.lexists(dest_path):
        dest_path = files_dir / collision_name(filename, counter)
        counter += 1
    return dest_path


def is_in_trash(source_path: Path, trash_root: Path) -> bool:
    """True if *source_path* is *trash_root* or lies anywhere beneath it."""
    return source_path.is_relative_to(trash_root)


def write_trashinfo(original_path: Path, dest_path: Path, info_dir: Path) -> Path:
    """Write the record for an item about to land at *dest_path*; return its path."""
    info_file = info_path_for(dest_path, info_dir)
    content = build_trashinfo(original_path, format_deletion_date())
    try:
        info_file.write_text(content, encoding="utf-8")
    except OSError as e:
        raise TrashIOError(info_file, e) from e
    return info_file


def trash_item(source_path: Path, location: TrashLocation) -> Path:
    """Move *source_path* into *location* and return its path under ``files/``.

    The trash structure must already exist (see
    ``TrashLocation.ensure_structure_exists``).  Cross-device renames are
    reported as ``CrossDeviceMoveError``; there is no copy fallback.
    """
    if not os.path.lexists(source_path):
        error = FileNotFoundError(errno.ENOENT, "source file not found", str(source_path))
        raise TrashIOError(source_path, error)

    absolute_source = canonicalize(source_path)
    trash_root = location.root_path
    if os.path.lexists(trash_root):
        trash_root = canonicalize(trash_root)
    if is_in_trash(source_path, location.root_path) or is_in_trash(absolute_source, trash_root):
        raise AlreadyInTrashError(source_path)

    dest_path = find_available_dest_path(absolute_source, location.files_path)
    info_file = write_trashinfo(absolute_source, dest_path, location.info_path)

    try:
        os.rename(absolute_source, dest_path)
    except OSError as e:
        try:
            info_file.unlink()
        except OSError:
            logger.warning(
                "Failed to move '%s' to trash and also failed to clean up its info file '%s'",
                source_path,
                info_file,
                exc_info=True,
            )
        if e.errno == errno.EXDEV:
            raise CrossDeviceMoveError(source_path) from e
        raise TrashIOError(source_path, e) from e

    logger.debug("Trashed %s -> %s", absolute_source, dest_path)
    return dest_path
