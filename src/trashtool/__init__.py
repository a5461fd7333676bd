"""trash-tool: a FreeDesktop.org Trash implementation.

Trash, list, restore and empty — on the home trash and per-mount trashes.
"""

__version__ = "0.1.0"

from trashtool._trashcan import TrashCan
from trashtool.config import TrashConfig
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
from trashtool.fs.locations import TrashLocation, TrashType
from trashtool.fs.protocol import Confirmer, Selector
from trashtool.fs.restoring import TrashEntry
from trashtool.fs.types import EmptyResult, FileInfo, ListResult, RestoreResult, TrashResult

__all__ = [
    "AlreadyInTrashError",
    "Confirmer",
    "CrossDeviceMoveError",
    "EmptyResult",
    "FileInfo",
    "HomeTrashNotFoundError",
    "ListResult",
    "NoTrashDirectoriesError",
    "RestoreCollisionError",
    "RestoreResult",
    "Selector",
    "SymlinkTrashError",
    "TrashCan",
    "TrashConfig",
    "TrashEntry",
    "TrashError",
    "TrashIOError",
    "TrashInfoParseError",
    "TrashLocation",
    "TrashLocationError",
    "TrashResult",
    "TrashType",
    "TrashedItemNotFoundError",
    "__version__",
]
