"""Trash location resolution and trash directory structure.

A path is trashed on its own filesystem: the home trash when it shares a
mount with ``$XDG_DATA_HOME/Trash``, otherwise a per-mount trash at the
mount's top directory (``$topdir/.Trash/$uid`` when an administrator has
prepared a sticky ``$topdir/.Trash``, else ``$topdir/.Trash-$uid``).
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import (
    HomeTrashNotFoundError,
    SymlinkTrashError,
    TrashIOError,
    TrashLocationError,
)
from .mounts import find_mount_point, read_mount_points
from .trashinfo import TRASH_FILES_DIR_NAME, TRASH_INFO_DIR_NAME

if TYPE_CHECKING:
    from trashtool.config import TrashConfig

logger = logging.getLogger(__name__)

SHARED_TRASH_DIR_NAME = ".Trash"
PRIVATE_TRASH_PREFIX = ".Trash-"

HOME_TRASH_MODE = 0o700
SHARED_TRASH_MODE = 0o1777
USER_TRASH_MODE = 0o700


class TrashType(str, Enum):
    """Kind of trash root."""

    HOME = "home"
    """``$XDG_DATA_HOME/Trash``."""

    TOPDIR_SHARED = "topdir_shared"
    """``$topdir/.Trash``, prepared by an administrator.  Never resolved directly."""

    TOPDIR_SHARED_USER = "topdir_shared_user"
    """``$topdir/.Trash/$uid``."""

    TOPDIR_PRIVATE = "topdir_private"
    """``$topdir/.Trash-$uid``."""


@dataclass(frozen=True)
class TrashLocation:
    """One trash root and its kind.

    Recomputed from live filesystem state for every operation.
    """

    root_path: Path
    trash_type: TrashType

    @property
    def files_path(self) -> Path:
        return self.root_path / TRASH_FILES_DIR_NAME

    @property
    def info_path(self) -> Path:
        return self.root_path / TRASH_INFO_DIR_NAME

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def ensure_structure_exists(self) -> None:
        """Create the root, ``files/`` and ``info/`` if missing.  Idempotent.

        ``files/`` and ``info/`` get no explicit mode: access is controlled
        by the root's restrictive mode, whatever the process umask.
        """
        self._create_root()

        for subdir in (self.files_path, self.info_path):
            if subdir.exists():
                continue
            try:
                subdir.mkdir()
            except OSError as e:
                raise TrashIOError(subdir, e) from e

    def _create_root(self) -> None:
        if self.trash_type is TrashType.HOME:
            self._create_with_mode(HOME_TRASH_MODE)
        elif self.trash_type is TrashType.TOPDIR_SHARED:
            self._create_with_mode(SHARED_TRASH_MODE)
        else:
            self._create_with_fallback(USER_TRASH_MODE, SHARED_TRASH_MODE)

    def _create_with_mode(self, mode: int) -> None:
        root = self.root_path
        try:
            if not root.exists():
                root.mkdir(parents=True)
            os.chmod(root, mode)
        except OSError as e:
            raise TrashIOError(root, e) from e

    def _create_with_fallback(self, primary_mode: int, fallback_mode: int) -> None:
        """Create the root, preferring *primary_mode*.

        A permission error while creating is tolerated: the chmod that
        follows decides.  If *primary_mode* cannot be set for lack of
        permission, *fallback_mode* is tried instead.
        """
        root = self.root_path
        if not root.exists():
            try:
                root.mkdir(parents=True)
            except PermissionError:
                logger.debug("Permission denied creating %s; relying on chmod", root)
            except OSError as e:
                raise TrashIOError(root, e) from e

        try:
            os.chmod(root, primary_mode)
        except PermissionError:
            logger.debug(
                "Cannot set mode %o on %s, falling back to %o", primary_mode, root, fallback_mode
            )
            try:
                os.chmod(root, fallback_mode)
            except OSError as e:
                raise TrashIOError(root, e) from e
        except OSError as e:
            raise TrashIOError(root, e) from e


# =============================================================================
# Path helpers
# =============================================================================


def canonicalize(path: Path | str) -> Path:
    """Absolute path of *path* with every directory component resolved.

    The final component is kept as-is, so a symbolic link resolves to the
    link itself rather than its target.  A dangling link therefore
    canonicalises (and is trashed) as the link; only a missing path or an
    unresolvable parent raises ``TrashIOError``.
    """
    path = Path(path)
    if not os.path.lexists(path):
        error = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
        raise TrashIOError(path, error)

    absolute = Path(os.path.abspath(path))
    if not absolute.name:
        return absolute

    try:
        parent = absolute.parent.resolve(strict=True)
    except OSError as e:
        raise TrashIOError(path, e) from e
    return parent / absolute.name


def home_trash_root(config: TrashConfig) -> Path:
    """The home trash path with its parent canonicalised.

    The ``Trash`` leaf itself is not resolved so that a symlinked trash
    root stays visible to the caller.
    """
    home_trash = config.home_trash_path
    if home_trash is None:
        raise HomeTrashNotFoundError()
    return Path(os.path.realpath(home_trash.parent)) / home_trash.name


def is_valid_shared_trash(shared_trash: Path) -> bool:
    """True if *shared_trash* is a real directory (not a symlink) with the sticky bit."""
    try:
        st = os.lstat(shared_trash)
    except OSError:
        return False
    return stat.S_ISDIR(st.st_mode) and bool(st.st_mode & stat.S_ISVTX)


# =============================================================================
# Resolution
# =============================================================================


def resolve_trash_location(
    path: Path | str, mount_points: list[Path], config: TrashConfig
) -> TrashLocation:
    """Determine which trash must hold *path*.

    Raises ``TrashIOError`` if *path* cannot be canonicalised,
    ``HomeTrashNotFoundError`` without a data directory,
    ``SymlinkTrashError`` if the home trash root is a symlink, and
    ``TrashLocationError`` if no mount point holds *path*.
    """
    absolute_path = canonicalize(path)
    home_trash = home_trash_root(config)

    file_mount = find_mount_point(absolute_path, mount_points)
    home_mount = find_mount_point(home_trash, mount_points)

    if file_mount is not None and file_mount == home_mount:
        if home_trash.is_symlink():
            raise SymlinkTrashError(home_trash)
        logger.debug("Using home trash %s for %s", home_trash, absolute_path)
        return TrashLocation(home_trash, TrashType.HOME)

    if file_mount is not None:
        # $topdir/.Trash is never created here, only validated.
        shared_trash = file_mount / SHARED_TRASH_DIR_NAME
        if is_valid_shared_trash(shared_trash):
            root = shared_trash / str(config.uid)
            logger.debug("Using shared trash %s for %s", root, absolute_path)
            return TrashLocation(root, TrashType.TOPDIR_SHARED_USER)

        root = file_mount / f"{PRIVATE_TRASH_PREFIX}{config.uid}"
        logger.debug("Using private trash %s for %s", root, absolute_path)
        return TrashLocation(root, TrashType.TOPDIR_PRIVATE)

    raise TrashLocationError(f"Could not determine filesystem for '{path}'", Path(path))


# =============================================================================
# Enumeration
# =============================================================================


def find_trash_dirs_on_mounts(uid: int, mounts_file: Path) -> list[Path]:
    """Existing per-mount trash directories for *uid*.

    For each mount point the shared ``$topdir/.Trash/$uid`` is preferred
    (when ``$topdir/.Trash`` carries the sticky bit), then the private
    ``$topdir/.Trash-$uid``.
    """
    found: list[Path] = []
    for mount_point in read_mount_points(mounts_file):
        shared_trash = mount_point / SHARED_TRASH_DIR_NAME
        if is_valid_shared_trash(shared_trash):
            user_trash = shared_trash / str(uid)
            if user_trash.is_dir():
                found.append(user_trash)
                continue

        private_trash = mount_point / f"{PRIVATE_TRASH_PREFIX}{uid}"
        if private_trash.is_dir():
            found.append(private_trash)

    return found


def find_all_trash_dirs(config: TrashConfig) -> list[Path]:
    """Every trash root that currently exists: home first, then per-mount."""
    trash_dirs: list[Path] = []

    home_trash = config.home_trash_path
    if home_trash is not None and home_trash.is_dir():
        trash_dirs.append(home_trash)

    trash_dirs.extend(find_trash_dirs_on_mounts(config.uid, config.mounts_file))

    unique: list[Path] = []
    for trash_dir in trash_dirs:
        if trash_dir not in unique:
            unique.append(trash_dir)
    return unique


def target_trash_dirs(config: TrashConfig, all_trash: bool = False) -> list[Path]:
    """Trash roots to list or empty: every one with *all_trash*, else the home trash."""
    if all_trash:
        return find_all_trash_dirs(config)

    home_trash = config.home_trash_path
    if home_trash is not None and home_trash.is_dir():
        return [home_trash]
    return []


def live_mount_points(config: TrashConfig) -> list[Path]:
    """Mount points from the configured mount table."""
    return read_mount_points(config.mounts_file)
