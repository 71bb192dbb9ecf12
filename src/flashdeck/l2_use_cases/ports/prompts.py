"""Port: user-facing confirmation and notification capabilities."""

from __future__ import annotations

from typing import Protocol


class ConfirmationProvider(Protocol):
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question. True means proceed."""
        ...


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        """Report a non-fatal failure to the user."""
        ...
