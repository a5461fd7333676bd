"""Collaborator protocols — how the engine asks for a selection or a yes/no.

The engine never renders anything itself.  A front end supplies objects
implementing these protocols; the CLI's click-based prompts are one such
implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Selector(Protocol):
    """Picks restore candidates."""

    def select(self, candidates: list[tuple[str, str]]) -> list[str] | None:
        """Choose among ``(display_text, identity)`` pairs.

        Returns the chosen identities (possibly none), or ``None`` when the
        user cancelled.
        """
        ...


@runtime_checkable
class Confirmer(Protocol):
    """Answers a yes/no question."""

    def confirm(self, question: str) -> bool:
        """Return the answer.  An empty answer counts as yes."""
        ...
