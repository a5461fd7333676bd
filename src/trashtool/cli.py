"""trash-tool command line."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.logging import RichHandler
from rich.text import Text

from trashtool import __version__
from trashtool._trashcan import TrashCan
from trashtool.config import COLOR_CHOICES, TrashConfig
from trashtool.fs.exceptions import TrashError
from trashtool.ui.listing import make_console, render_listing, styled_name
from trashtool.ui.prompts import PromptConfirmer, PromptSelector

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool, color: str) -> None:
    """Send engine warnings (and debug output with ``-v``) to stderr through rich."""
    handler = RichHandler(
        console=make_console(color, stderr=True),
        show_time=False,
        show_path=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _trash_files(can: TrashCan, files: tuple[str, ...], console: Console, err: Console) -> bool:
    trashed: list[Text] = []
    ok = True
    for result in can.trash(files):
        if result.success and result.trashed_path is not None:
            trashed.append(styled_name(result.path or "", result.trashed_path))
        else:
            err.print(result.message, style="red")
            ok = False
    if trashed:
        console.print(Text("Trashed: ").append_text(Text(", ").join(trashed)))
    return ok


def _restore(can: TrashCan, console: Console, err: Console) -> bool:
    try:
        entries = can.entries()
    except TrashError as e:
        err.print(str(e), style="red")
        return False
    if not entries:
        console.print("Trash is empty. Nothing to restore.")
        return True

    ok = True
    for result in can.restore_interactive(PromptSelector(console), entries):
        if result.success:
            console.print(result.message)
        else:
            err.print(result.message, style="red")
            ok = False
    return ok


def _display(
    can: TrashCan, all_trash: bool, long_format: bool, console: Console, err: Console
) -> bool:
    try:
        listings = can.list_all(all_trash)
    except TrashError as e:
        err.print(str(e), style="red")
        return False
    for listing in listings:
        render_listing(console, listing, long_format)
    return True


def _empty(
    can: TrashCan,
    all_trash: bool,
    no_confirm: bool,
    show_contents: bool,
    long_format: bool,
    console: Console,
    err: Console,
) -> bool:
    def before_confirm(trash_dir: Path) -> None:
        if show_contents:
            render_listing(console, can.list_trash(trash_dir), long_format)

    ok = True
    results = can.empty(
        can.trash_dirs(all_trash),
        confirm=None if no_confirm else PromptConfirmer(),
        before_confirm=before_confirm,
    )
    for result in results:
        if result.success:
            console.print(result.message)
        else:
            err.print(result.message, style="red")
            ok = False
    return ok


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.Path())
@click.option(
    "--color",
    type=click.Choice(COLOR_CHOICES),
    default="auto",
    show_default=True,
    help="When to use colors.",
)
@click.option("-d", "--display", is_flag=True, help="Display the contents of the trash.")
@click.option(
    "-l", "--long", "long_format", is_flag=True, help="List trash contents in long format."
)
@click.option("-e", "--empty", is_flag=True, help="Permanently delete the contents of the trash.")
@click.option("-y", "--no-confirm", is_flag=True, help="Empty the trash without asking.")
@click.option("-r", "--restore", is_flag=True, help="Interactively restore items from the trash.")
@click.option(
    "-a", "--all", "all_trash", is_flag=True, help="Act on every trash, not only the home trash."
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.version_option(__version__, prog_name="trash-tool")
def trash_command(
    files: tuple[str, ...],
    color: str,
    display: bool,
    long_format: bool,
    empty: bool,
    no_confirm: bool,
    restore: bool,
    all_trash: bool,
    verbose: bool,
) -> None:
    """Move FILES to the trash, following the FreeDesktop.org Trash specification.

    Without FILES or options, the contents of the trash are displayed.

    \b
    Examples:
        trash-tool notes.txt old-project/
        trash-tool -l
        trash-tool -r
        trash-tool -e -y --all
    """
    configure_logging(verbose, color)
    config = TrashConfig(color=color)
    can = TrashCan(config)
    console = make_console(config.color)
    err = make_console(config.color, stderr=True)

    if restore:
        ok = _restore(can, console, err)
    elif files:
        ok = _trash_files(can, files, console, err)
    elif empty or no_confirm:
        ok = _empty(can, all_trash, no_confirm, display or long_format, long_format, console, err)
    else:
        ok = _display(can, all_trash, long_format, console, err)

    sys.exit(0 if ok else 1)


def main() -> None:
    trash_command()


if __name__ == "__main__":
    main()
