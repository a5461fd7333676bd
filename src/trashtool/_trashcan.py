"""TrashCan facade — runs the trash engine item by item and reports results."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from trashtool.config import TrashConfig
from trashtool.fs.emptying import TrashStatus, empty_trash_dir, trash_status
from trashtool.fs.exceptions import NoTrashDirectoriesError, TrashError
from trashtool.fs.locations import (
    find_all_trash_dirs,
    live_mount_points,
    resolve_trash_location,
    target_trash_dirs,
)
from trashtool.fs.restoring import TrashEntry, restore_entry, scan_trash_entries, sort_entries
from trashtool.fs.trashing import trash_item
from trashtool.fs.trashinfo import TRASH_FILES_DIR_NAME
from trashtool.fs.types import EmptyResult, FileInfo, ListResult, RestoreResult, TrashResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from trashtool.fs.protocol import Confirmer, Selector

logger = logging.getLogger(__name__)


class TrashCan:
    """Synchronous entry point to the trash engine.

    Engine errors never escape the per-item methods: each path, entry or
    trash directory gets its own result with ``success`` and a message, and
    a failure on one item does not stop the others.

    Usage::

        can = TrashCan()
        for result in can.trash(["notes.txt", "old/"]):
            print(result.message)
    """

    def __init__(self, config: TrashConfig | None = None) -> None:
        self.config = config or TrashConfig()

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------

    def mount_points(self) -> list[Path]:
        """Mount points of the live mount table."""
        return live_mount_points(self.config)

    def trash_dirs(self, all_trash: bool = False) -> list[Path]:
        """Existing trash roots: the home trash, or every trash with *all_trash*."""
        return target_trash_dirs(self.config, all_trash)

    # ------------------------------------------------------------------
    # Trash
    # ------------------------------------------------------------------

    def trash(self, paths: Iterable[str | Path]) -> list[TrashResult]:
        """Move each of *paths* into the trash of its filesystem."""
        mount_points = self.mount_points()
        results: list[TrashResult] = []

        for raw_path in paths:
            path = Path(raw_path)
            try:
                location = resolve_trash_location(path, mount_points, self.config)
            except TrashError as e:
                results.append(
                    TrashResult(
                        success=False,
                        message=f"Could not determine trash location for '{path}': {e}",
                        path=str(raw_path),
                    )
                )
                continue

            try:
                location.ensure_structure_exists()
            except TrashError as e:
                results.append(
                    TrashResult(
                        success=False,
                        message=f"Failed to prepare trash directory for '{path}': {e}",
                        path=str(raw_path),
                        trash_root=location.root_path,
                    )
                )
                continue

            try:
                dest_path = trash_item(path, location)
            except TrashError as e:
                results.append(
                    TrashResult(
                        success=False,
                        message=f"Failed to trash '{path}': {e}",
                        path=str(raw_path),
                        trash_root=location.root_path,
                    )
                )
                continue

            results.append(
                TrashResult(
                    success=True,
                    message=f"Trashed: {path}",
                    path=str(raw_path),
                    trashed_path=dest_path,
                    trash_root=location.root_path,
                )
            )

        return results

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_trash(self, trash_dir: Path) -> ListResult:
        """Entries of *trash_dir*'s ``files/``.  A missing ``files/`` lists as empty."""
        files_dir = trash_dir / TRASH_FILES_DIR_NAME
        try:
            with os.scandir(files_dir) as it:
                dir_entries = sorted(it, key=lambda e: e.name)
        except FileNotFoundError:
            return ListResult(success=True, message="Trash is empty", path=files_dir)
        except OSError as e:
            message = f"Cannot list {files_dir}: {e}"
            return ListResult(success=False, message=message, path=files_dir)

        entries: list[FileInfo] = []
        for dir_entry in dir_entries:
            try:
                st = dir_entry.stat(follow_symlinks=False)
                is_directory = dir_entry.is_dir()
            except OSError as e:
                logger.warning("Cannot stat %s: %s", dir_entry.path, e)
                continue
            entries.append(
                FileInfo(
                    path=Path(dir_entry.path),
                    name=dir_entry.name,
                    is_directory=is_directory,
                    is_symlink=dir_entry.is_symlink(),
                    size_bytes=st.st_size,
                    mode=st.st_mode,
                    nlink=st.st_nlink,
                    uid=st.st_uid,
                    gid=st.st_gid,
                    modified_at=datetime.fromtimestamp(st.st_mtime),
                )
            )

        return ListResult(
            success=True,
            message=f"Found {len(entries)} items in trash",
            entries=entries,
            path=files_dir,
        )

    def list_all(self, all_trash: bool = False) -> list[ListResult]:
        """Listings of every target trash.  Raises ``NoTrashDirectoriesError`` if there is none."""
        trash_dirs = self.trash_dirs(all_trash)
        if not trash_dirs:
            raise NoTrashDirectoriesError()
        return [self.list_trash(trash_dir) for trash_dir in trash_dirs]

    # ------------------------------------------------------------------
    # Restore
    # ------------------------------------------------------------------

    def entries(self) -> list[TrashEntry]:
        """Restorable entries of every trash, oldest deletion first."""
        return sort_entries(scan_trash_entries(find_all_trash_dirs(self.config)))

    def restore(self, entries: Iterable[TrashEntry]) -> list[RestoreResult]:
        """Restore each of *entries* to its original path."""
        results: list[RestoreResult] = []
        for entry in entries:
            try:
                restored = restore_entry(entry)
            except TrashError as e:
                results.append(
                    RestoreResult(
                        success=False,
                        message=f"Failed to restore '{entry.original_path}': {e}",
                        file_path=entry.original_path,
                    )
                )
                continue
            results.append(
                RestoreResult(success=True, message=f"Restored: {restored}", file_path=restored)
            )
        return results

    def restore_interactive(
        self, selector: Selector, entries: list[TrashEntry] | None = None
    ) -> list[RestoreResult]:
        """Let *selector* pick among *entries* (default: all) and restore the picks.

        Returns an empty list when there is nothing to restore or the
        selection was cancelled.
        """
        if entries is None:
            entries = self.entries()
        if not entries:
            return []

        by_identity = {entry.identity: entry for entry in entries}
        selected = selector.select([(entry.display_text, entry.identity) for entry in entries])
        if selected is None:
            logger.debug("Restore cancelled")
            return []

        return self.restore(by_identity[i] for i in selected if i in by_identity)

    # ------------------------------------------------------------------
    # Empty
    # ------------------------------------------------------------------

    def status(self, trash_dir: Path) -> TrashStatus:
        """Occupancy of *trash_dir*.  Raises ``TrashIOError`` on an incomplete trash."""
        return trash_status(trash_dir)

    def empty(
        self,
        trash_dirs: Iterable[Path],
        *,
        confirm: Confirmer | None = None,
        before_confirm: Callable[[Path], None] | None = None,
    ) -> list[EmptyResult]:
        """Permanently delete the contents of each of *trash_dirs*.

        Already-empty trashes are reported and skipped.  With *confirm* the
        user is asked per trash; without it emptying is unconditional.
        *before_confirm* is called with each non-empty trash first, e.g. to
        list its contents.
        """
        results: list[EmptyResult] = []
        for trash_dir in trash_dirs:
            try:
                status = trash_status(trash_dir)
            except TrashError as e:
                results.append(EmptyResult(success=False, message=str(e), trash_dir=trash_dir))
                continue

            if status.is_empty:
                results.append(
                    EmptyResult(
                        success=True,
                        message=f"({status.item_count}): {trash_dir}",
                        trash_dir=trash_dir,
                        already_empty=True,
                    )
                )
                continue

            if before_confirm is not None:
                before_confirm(trash_dir)

            question = f"({status.item_count}): {trash_dir} - to empty?"
            if confirm is not None and not confirm.confirm(question):
                results.append(
                    EmptyResult(
                        success=True,
                        message=f"Kept trash at: {trash_dir}",
                        trash_dir=trash_dir,
                        item_count=status.item_count,
                    )
                )
                continue

            try:
                empty_trash_dir(trash_dir)
            except TrashError as e:
                results.append(
                    EmptyResult(
                        success=False,
                        message=str(e),
                        trash_dir=trash_dir,
                        item_count=status.item_count,
                    )
                )
                continue

            results.append(
                EmptyResult(
                    success=True,
                    message=f"Emptied trash at: {trash_dir}",
                    trash_dir=trash_dir,
                    item_count=status.item_count,
                    emptied=True,
                )
            )
        return results
