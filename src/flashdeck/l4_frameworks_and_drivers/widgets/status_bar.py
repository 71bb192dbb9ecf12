"""Status bar — bottom bar showing deck position and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar with the study position and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: auto;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    position: reactive[str] = reactive('0 / 0')
    card_count: reactive[int] = reactive(0)
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        left = f'{self.position} │ {self.card_count} cards'

        content_width = (self.size.width or 80) - 2
        hints = self.keybinding_hints
        if hints:
            hints_width = cell_len(hints.replace(r'\[', '['))
            gap = content_width - cell_len(left) - hints_width
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
