"""Rendering trash contents with rich — plain grid and long format."""

from __future__ import annotations

import grp
import pwd
from typing import TYPE_CHECKING, Any

from rich.columns import Columns
from rich.console import Console
from rich.filesize import pick_unit_and_suffix
from rich.text import Text

from .file_type import FileType, get_file_type

if TYPE_CHECKING:
    from pathlib import Path

    from trashtool.fs.types import FileInfo, ListResult

FILE_TYPE_STYLES: dict[FileType, str] = {
    FileType.DIRECTORY: "bold blue",
    FileType.EXECUTABLE: "bold green",
    FileType.ARCHIVE: "bold red",
    FileType.CONFIG: "bold yellow",
    FileType.DOCUMENT: "",
    FileType.IMAGE: "bold magenta",
    FileType.VIDEO: "bold purple",
    FileType.MUSIC: "bold cyan",
    FileType.OTHER: "",
}

BINARY_SUFFIXES = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


def make_console(color: str = "auto", **kwargs: Any) -> Console:
    """Console honouring an explicit colour mode ("auto", "always", "never")."""
    force_terminal = {"always": True, "never": False}.get(color)
    return Console(force_terminal=force_terminal, highlight=False, **kwargs)


def styled_name(name: str, path: Path) -> Text:
    return Text(name, style=FILE_TYPE_STYLES[get_file_type(path)])


def format_size(size: int) -> str:
    """Binary size, e.g. ``1.5 KiB``."""
    if size < 1024:
        return f"{size} B"
    unit, suffix = pick_unit_and_suffix(size, BINARY_SUFFIXES, 1024)
    return f"{size / unit:.1f} {suffix}"


def format_mode(mode: int, is_directory: bool) -> Text:
    """``ls``-style permission string, coloured per bit."""
    text = Text("d", style="blue") if is_directory else Text("-", style="dim")
    for shift in (6, 3, 0):
        bits = (mode >> shift) & 0o7
        for mask, char, style in ((4, "r", "yellow"), (2, "w", "red"), (1, "x", "green")):
            if bits & mask:
                text.append(char, style=style)
            else:
                text.append("-", style="dim")
    return text


def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def _long_line(info: FileInfo) -> Text:
    modified = info.modified_at.strftime("%b %d %H:%M") if info.modified_at else ""
    line = format_mode(info.mode, info.is_directory)
    line.append(f" {info.nlink:>2} ")
    line.append(f"{_user_name(info.uid):<7} ", style="bold")
    line.append(f"{_group_name(info.gid):<7} ", style="bold")
    line.append(f"{format_size(info.size_bytes):>10} ", style="green")
    line.append(f"{modified} ", style="blue")
    line.append_text(styled_name(info.name, info.path))
    return line


def render_listing(console: Console, result: ListResult, long_format: bool = False) -> None:
    """Print the ``files/`` path of a trash followed by its entries."""
    console.print(str(result.path), style="white")
    if not result.success:
        console.print(f"  {result.message}", style="red")
        return
    if not result.entries:
        console.print("  (empty)")
        return

    if long_format:
        for info in result.entries:
            console.print(_long_line(info))
    else:
        console.print(
            Columns([styled_name(info.name, info.path) for info in result.entries], padding=(0, 2))
        )
