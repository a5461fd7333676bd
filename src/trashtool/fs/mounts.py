"""Mount table parsing and mount-point lookup."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

MOUNTS_FILE_PATH = Path("/proc/mounts")

# The kernel escapes whitespace and backslashes in mount points as \ooo.
_OCTAL_ESCAPE_RE = re.compile(r"\\([0-7]{3})")


def unescape_mount_field(field: str) -> str:
    """Decode ``\\040``-style octal escapes used by ``/proc/mounts``."""
    return _OCTAL_ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 8)), field)


def parse_mount_points(lines: list[str] | str) -> list[Path]:
    """Extract mount points (second whitespace-separated field) from *lines*.

    Lines with fewer than two fields are ignored.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    mount_points: list[Path] = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            continue
        mount_points.append(Path(unescape_mount_field(fields[1])))
    return mount_points


def read_mount_points(mounts_file: Path = MOUNTS_FILE_PATH) -> list[Path]:
    """Read the live mount table.  A missing or unreadable table yields ``[]``."""
    try:
        text = mounts_file.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError:
        logger.debug("Mount table %s is not readable", mounts_file, exc_info=True)
        return []
    return parse_mount_points(text)


def find_mount_point(path: Path, mount_points: list[Path]) -> Path | None:
    """Return the mount point holding *path*, or ``None``.

    Finds the longest matching mount prefix.  Matching is component-wise,
    so ``/mnt/usb`` does not hold ``/mnt/usb2/file``.
    """
    best_match: Path | None = None
    best_len = -1

    for mount_point in mount_points:
        if path.is_relative_to(mount_point) and len(str(mount_point)) > best_len:
            best_match = mount_point
            best_len = len(str(mount_point))

    return best_match
