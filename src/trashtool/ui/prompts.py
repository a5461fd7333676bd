"""Click-based implementations of the Selector and Confirmer protocols."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import click
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

_RANGE_RE = re.compile(r"^(\d+)-(\d+)$")


def parse_selection(text: str, count: int) -> list[int]:
    """Parse ``"1 3 5-7"`` (or comma-separated) into zero-based indices.

    Numbers are 1-based and must lie in ``1..count``; duplicates are dropped
    and input order is kept.  Raises ``ValueError`` on anything else.

    Examples:
        parse_selection("2", 3) -> [1]
        parse_selection("3,1-2", 3) -> [2, 0, 1]
    """
    indices: list[int] = []
    for token in text.replace(",", " ").split():
        match = _RANGE_RE.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                raise ValueError(f"Invalid range: {token}")
            numbers = range(start, end + 1)
        elif token.isdigit():
            numbers = range(int(token), int(token) + 1)
        else:
            raise ValueError(f"Not a number: {token}")

        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"Out of range: {number} (choose 1-{count})")
            if number - 1 not in indices:
                indices.append(number - 1)
    return indices


class PromptSelector:
    """Numbered table plus a typed selection; empty input cancels."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def select(self, candidates: list[tuple[str, str]]) -> list[str] | None:
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column(justify="right", style="bold")
        table.add_column()
        for number, (text, _identity) in enumerate(candidates, start=1):
            table.add_row(str(number), text)
        self.console.print(table)

        while True:
            answer = click.prompt(
                "Restore which items? (e.g. 1 3 5-7, empty to cancel)",
                default="",
                show_default=False,
            )
            if not answer.strip():
                return None
            try:
                indices = parse_selection(answer, len(candidates))
            except ValueError as e:
                self.console.print(str(e), style="red")
                continue
            return [candidates[i][1] for i in indices]


class PromptConfirmer:
    """Yes/no prompt where an empty answer means yes; re-asks on anything else."""

    def confirm(self, question: str) -> bool:
        return click.confirm(question, default=True)
