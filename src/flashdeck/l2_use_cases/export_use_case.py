"""Use case: hand the serialized deck to an export sink."""

from __future__ import annotations

import logging
from pathlib import Path

from flashdeck.l2_use_cases.deck_store import DeckStore
from flashdeck.l2_use_cases.ports.export_sink import ExportSink
from flashdeck.l2_use_cases.utils.delimited_codec import serialize

log = logging.getLogger('fd.export')

DEFAULT_EXPORT_NAME = 'flashcards_export.csv'


class ExportDeckUseCase:
    """Serializes the current deck without mutating it."""

    def __init__(self, store: DeckStore, sink: ExportSink, filename: str = DEFAULT_EXPORT_NAME) -> None:
        self._store = store
        self._sink = sink
        self._filename = filename

    def render(self) -> str:
        return serialize(self._store.entries)

    def execute(self) -> Path:
        text = self.render()
        path = self._sink.save(text, self._filename)
        log.info('Exported %d entries to %s', len(self._store), path)
        return path
