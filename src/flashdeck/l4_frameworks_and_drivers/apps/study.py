"""StudyApp — TUI for stepping through the deck and flipping cards."""

from __future__ import annotations

import logging

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from flashdeck.l2_use_cases.study_cursor import StudyCursor
from flashdeck.l3_interface_adapters.controllers.deck_controller import DeckController
from flashdeck.l4_frameworks_and_drivers.widgets.card_view import CardView
from flashdeck.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('fd.app')


class StudyApp(TextualApp):
    """Shows one entry at a time; the deck itself is read-only here."""

    CSS = """
    #header {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding('q', 'quit_app', 'Quit', priority=True),
        Binding('right', 'next_entry', 'Next', show=False),
        Binding('l', 'next_entry', 'Next', show=False),
        Binding('left', 'prev_entry', 'Previous', show=False),
        Binding('h', 'prev_entry', 'Previous', show=False),
        Binding('space', 'flip', 'Flip', show=False),
        Binding('e', 'export', 'Export', show=False),
    ]

    def __init__(self, controller: DeckController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self.study_cursor = StudyCursor()

    def compose(self) -> ComposeResult:
        yield Static('  flashdeck | Study', id='header')
        yield CardView(id='card-view')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.keybinding_hints = r'\[←/→] move  \[space] flip  \[e] export  \[q] quit'
        self._refresh_view()

    def _refresh_view(self) -> None:
        deck = self._controller.entries
        self.study_cursor.clamp(deck)
        view = self.query_one('#card-view', CardView)
        view.show(self.study_cursor.current(deck), flipped=self.study_cursor.flipped)
        bar = self.query_one('#status-bar', StatusBar)
        bar.position = self.study_cursor.position_label(deck)
        bar.card_count = self._controller.store.card_count

    def action_next_entry(self) -> None:
        self.study_cursor.next(self._controller.entries)
        self._refresh_view()

    def action_prev_entry(self) -> None:
        self.study_cursor.prev()
        self._refresh_view()

    def action_flip(self) -> None:
        self.study_cursor.flip()
        self._refresh_view()

    def action_export(self) -> None:
        try:
            path = self._controller.export()
        except OSError as e:
            log.error('Export failed: %s', e, exc_info=True)
            self.notify(f'Export failed: {e}', severity='error')
            return
        self.notify(f'Exported to {path}')

    def action_quit_app(self) -> None:
        self.exit()
