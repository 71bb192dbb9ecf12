"""DeckController — orchestrates the deck store, ingestion, and export."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from flashdeck.l1_entities.entry import Deck
from flashdeck.l2_use_cases.deck_store import DeckStore
from flashdeck.l2_use_cases.export_use_case import ExportDeckUseCase
from flashdeck.l2_use_cases.ingest_use_case import IngestResult, IngestUseCase
from flashdeck.l2_use_cases.ports.content_source import UrlFetcher
from flashdeck.l2_use_cases.ports.export_sink import ExportSink
from flashdeck.l2_use_cases.ports.prompts import Notifier
from flashdeck.l3_interface_adapters.gateways.local_file_source import file_source


class DeckController:
    """Single entry point for the CLI and the study app.

    Owns no state of its own; the DeckStore is passed in so tests and the
    container decide its collaborators.
    """

    def __init__(
        self,
        store: DeckStore,
        fetcher: UrlFetcher,
        notifier: Notifier,
        export_sink: ExportSink,
        export_filename: str,
    ) -> None:
        self.store = store
        self._ingest_uc = IngestUseCase(store, fetcher, notifier)
        self._export_uc = ExportDeckUseCase(store, export_sink, export_filename)
        self._started = False

    @property
    def entries(self) -> Deck:
        return self.store.entries

    def start(self) -> None:
        """Load the persisted deck. Runs at most once per controller."""
        if self._started:
            return
        self._started = True
        self.store.load_snapshot_on_start()

    async def load_files(self, paths: Iterable[Path]) -> list[IngestResult]:
        return await self._ingest_uc.ingest_files(file_source(p) for p in paths)

    async def load_url(self, url: str) -> IngestResult:
        return await self._ingest_uc.ingest_url(url)

    def export(self) -> Path:
        return self._export_uc.execute()

    def clear(self) -> bool:
        return self.store.clear()
