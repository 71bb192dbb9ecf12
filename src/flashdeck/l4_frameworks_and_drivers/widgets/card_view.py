"""Card view — shows one deck entry: a source title or one face of a card."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from flashdeck.l1_entities.entry import Card, Entry, Separator

EMPTY_DECK_MESSAGE = 'No cards. Load one or more CSV files to start.'


class CardView(Static):
    """Renders the entry under the study cursor.

    ``face`` is one of ``empty``, ``separator``, ``prompt`` or ``response``.
    """

    DEFAULT_CSS = """
    CardView {
        width: 1fr;
        height: 1fr;
        content-align: center middle;
        text-align: center;
        border: round $primary;
        padding: 1 2;
    }

    CardView.separator {
        border: round $secondary;
    }

    CardView.response {
        border: round $accent;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.face = 'empty'
        self.body = ''

    def show(self, entry: Entry | None, *, flipped: bool = False) -> None:
        match entry:
            case None:
                face, label, body = 'empty', '', EMPTY_DECK_MESSAGE
            case Separator(title=title):
                face, label, body = 'separator', 'FILE', title
            case Card(response=response) if flipped:
                face, label, body = 'response', 'RESPONSE', response or '(no response)'
            case Card(prompt=prompt):
                face, label, body = 'prompt', 'PROMPT', prompt or '(no prompt)'
            case _:
                raise TypeError(f'Unknown entry type: {type(entry).__name__}')

        self.remove_class('empty', 'separator', 'prompt', 'response')
        self.add_class(face)
        self.face = face
        self.body = body

        content = Text()
        if label:
            content.append(label, style='bold reverse')
            content.append('\n\n')
        content.append(body, style='bold')
        self.update(content)
