"""Terminal confirmation and notification via click."""

from __future__ import annotations

import click


class ClickConfirmation:
    """Asks on the terminal unless *assume_yes* pre-answers every question."""

    def __init__(self, assume_yes: bool = False) -> None:
        self._assume_yes = assume_yes

    def confirm(self, message: str) -> bool:
        if self._assume_yes:
            return True
        return click.confirm(message, default=False)


class ClickNotifier:
    def notify(self, message: str) -> None:
        click.echo(message, err=True)
