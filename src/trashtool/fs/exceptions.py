"""Custom exception hierarchy for the trash engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class TrashError(Exception):
    """Base exception for all trash engine errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TrashIOError(TrashError):
    """Raised on an OS filesystem failure, annotated with the offending path."""

    def __init__(self, path: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(f"I/O error for '{path}': {reason}", path)
        self.errno = error.errno


class TrashInfoParseError(TrashError):
    """Raised when a ``.trashinfo`` record is malformed or incomplete."""

    def __init__(self, path: Path | None, reason: str) -> None:
        where = f" '{path}'" if path is not None else ""
        super().__init__(f"Failed to parse trash info file{where}: {reason}", path)
        self.reason = reason


class RestoreCollisionError(TrashError):
    """Raised when the restore destination is already occupied."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Destination '{path}' already exists. Cannot restore.", path)


class TrashedItemNotFoundError(TrashError):
    """Raised when the item under ``files/`` is missing (inconsistent trash)."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Trashed item '{path}' not found. "
            "The trash directory might be in an inconsistent state.",
            path,
        )


class NoTrashDirectoriesError(TrashError):
    """Raised when no trash directory could be located at all."""

    def __init__(self) -> None:
        super().__init__("No trash directories found.")


class AlreadyInTrashError(TrashError):
    """Raised when the source already lies inside the destination trash."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Item '{path}' is already in the trash.", path)


class SymlinkTrashError(TrashError):
    """Raised when the home trash root is a symbolic link."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Trash '{path}' is a symbolic link.", path)


class CrossDeviceMoveError(TrashError):
    """Raised when a rename would cross filesystem boundaries."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Cross-device move not supported for '{path}'. "
            "The destination is on a different filesystem.",
            path,
        )


class TrashLocationError(TrashError):
    """Raised when the resolver cannot pick a usable trash (e.g. no mount point)."""


class HomeTrashNotFoundError(TrashLocationError):
    """Raised when no user data directory exists to hold the home trash."""

    def __init__(self) -> None:
        super().__init__("Home trash not found: no user data directory could be determined.")
