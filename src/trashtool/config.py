"""TrashConfig — environment-derived settings passed explicitly to the engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from trashtool.fs.mounts import MOUNTS_FILE_PATH

COLOR_CHOICES = ("auto", "always", "never")
HOME_TRASH_DIR_NAME = "Trash"


def default_data_home() -> Path | None:
    """Return the user's data directory, or ``None`` if none can be found.

    ``$XDG_DATA_HOME`` is honoured only when it is absolute; otherwise the
    default ``$HOME/.local/share`` is used.
    """
    xdg_data_home = os.environ.get("XDG_DATA_HOME", "")
    if xdg_data_home and os.path.isabs(xdg_data_home):
        return Path(xdg_data_home)

    try:
        home = Path.home()
    except RuntimeError:
        return None
    return home / ".local" / "share"


@dataclass
class TrashConfig:
    """Settings for one trash-tool invocation."""

    data_home: Path | None = field(default_factory=default_data_home)
    """Base of the home trash (``<data_home>/Trash``).  ``None`` if undeterminable."""

    mounts_file: Path = MOUNTS_FILE_PATH
    """Line-oriented mount table; the second field of each line is a mount point."""

    uid: int = field(default_factory=os.getuid)
    """User id used to name per-mount trash directories."""

    color: str = "auto"
    """Colour mode for the presentation layer: "auto", "always" or "never"."""

    def __post_init__(self) -> None:
        if self.data_home is not None:
            self.data_home = Path(self.data_home)
        self.mounts_file = Path(self.mounts_file)
        if self.color not in COLOR_CHOICES:
            raise ValueError(f"color must be one of {COLOR_CHOICES}, got {self.color!r}")

    @property
    def home_trash_path(self) -> Path | None:
        """``<data_home>/Trash``, or ``None`` when there is no data home."""
        if self.data_home is None:
            return None
        return self.data_home / HOME_TRASH_DIR_NAME
