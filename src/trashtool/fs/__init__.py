"""Trash engine — locations, records, trashing, restoring, emptying."""

from trashtool.fs.emptying import TrashStatus, empty_trash_dir, trash_status
from trashtool.fs.encoding import decode_path, encode_path
from trashtool.fs.exceptions import (
    AlreadyInTrashError,
    CrossDeviceMoveError,
    HomeTrashNotFoundError,
    NoTrashDirectoriesError,
    RestoreCollisionError,
    SymlinkTrashError,
    TrashedItemNotFoundError,
    TrashError,
    TrashInfoParseError,
    TrashIOError,
    TrashLocationError,
)
from trashtool.fs.locations import (
    TrashLocation,
    TrashType,
    find_all_trash_dirs,
    resolve_trash_location,
)
from trashtool.fs.mounts import find_mount_point, read_mount_points
from trashtool.fs.protocol import Confirmer, Selector
from trashtool.fs.restoring import TrashEntry, restore_entry, scan_trash_entries
from trashtool.fs.trashing import find_available_dest_path, trash_item
from trashtool.fs.trashinfo import TrashInfo, build_trashinfo, parse_trashinfo

__all__ = [
    "AlreadyInTrashError",
    "Confirmer",
    "CrossDeviceMoveError",
    "HomeTrashNotFoundError",
    "NoTrashDirectoriesError",
    "RestoreCollisionError",
    "Selector",
    "SymlinkTrashError",
    "TrashEntry",
    "TrashError",
    "TrashIOError",
    "TrashInfo",
    "TrashInfoParseError",
    "TrashLocation",
    "TrashLocationError",
    "TrashStatus",
    "TrashType",
    "TrashedItemNotFoundError",
    "build_trashinfo",
    "decode_path",
    "empty_trash_dir",
    "encode_path",
    "find_all_trash_dirs",
    "find_available_dest_path",
    "find_mount_point",
    "parse_trashinfo",
    "read_mount_points",
    "resolve_trash_location",
    "restore_entry",
    "scan_trash_entries",
    "trash_item",
    "trash_status",
]
