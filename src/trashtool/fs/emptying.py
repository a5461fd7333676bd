"""Emptying trash directories."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import TrashIOError
from .trashinfo import TRASH_FILES_DIR_NAME, TRASH_INFO_DIR_NAME

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrashStatus:
    """Occupancy of one trash directory."""

    trash_dir: Path
    item_count: int
    info_count: int

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0 and self.info_count == 0


def _count_entries(directory: Path) -> int:
    try:
        with os.scandir(directory) as it:
            return sum(1 for _ in it)
    except OSError as e:
        raise TrashIOError(directory, e) from e


def trash_status(trash_dir: Path) -> TrashStatus:
    """Count the entries of ``files/`` and ``info/``.

    A missing subdirectory raises ``TrashIOError``.
    """
    return TrashStatus(
        trash_dir=trash_dir,
        item_count=_count_entries(trash_dir / TRASH_FILES_DIR_NAME),
        info_count=_count_entries(trash_dir / TRASH_INFO_DIR_NAME),
    )


def empty_trash_dir(trash_dir: Path) -> None:
    """Remove ``files/`` and ``info/`` recursively, then recreate them empty.

    Later trash operations assume both subdirectories exist, so each is
    recreated straight after removal.
    """
    for name in (TRASH_FILES_DIR_NAME, TRASH_INFO_DIR_NAME):
        directory = trash_dir / name
        try:
            if directory.is_symlink():
                directory.unlink()
            elif directory.is_dir():
                shutil.rmtree(directory)
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TrashIOError(directory, e) from e
    logger.debug("Emptied trash at %s", trash_dir)
