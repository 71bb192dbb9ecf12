"""Study navigation state — which entry is shown and which face is up."""

from __future__ import annotations

from pydantic import BaseModel

from flashdeck.l1_entities.entry import Deck, Entry


class StudyCursor(BaseModel):
    """Position within a deck. Moving always turns the card face-down."""

    index: int = 0
    flipped: bool = False

    def current(self, deck: Deck) -> Entry | None:
        if not deck:
            return None
        return deck[min(self.index, len(deck) - 1)]

    def next(self, deck: Deck) -> None:
        self.flipped = False
        self.index = max(min(self.index + 1, len(deck) - 1), 0)

    def prev(self) -> None:
        self.flipped = False
        self.index = max(self.index - 1, 0)

    def flip(self) -> None:
        self.flipped = not self.flipped

    def clamp(self, deck: Deck) -> None:
        """Re-bound the index after the deck changed size."""
        self.index = max(min(self.index, len(deck) - 1), 0)

    def position_label(self, deck: Deck) -> str:
        if not deck:
            return '0 / 0'
        return f'{min(self.index, len(deck) - 1) + 1} / {len(deck)}'
