"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from flashdeck.l1_entities.config import AppConfig
from flashdeck.l2_use_cases.deck_store import DeckStore
from flashdeck.l2_use_cases.ports.content_source import UrlFetcher
from flashdeck.l2_use_cases.ports.export_sink import ExportSink
from flashdeck.l2_use_cases.ports.prompts import ConfirmationProvider, Notifier
from flashdeck.l2_use_cases.ports.snapshot import SnapshotGateway
from flashdeck.l3_interface_adapters.controllers.deck_controller import DeckController
from flashdeck.l3_interface_adapters.gateways.file_export_sink import FileExportSink
from flashdeck.l3_interface_adapters.gateways.httpx_url_fetcher import HttpxUrlFetcher
from flashdeck.l3_interface_adapters.gateways.json_snapshot_gateway import JsonSnapshotGateway
from flashdeck.l4_frameworks_and_drivers.prompts import ClickConfirmation, ClickNotifier


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        *,
        assume_yes: bool = False,
        export_dir: Path | None = None,
    ) -> None:
        self.config = config
        self.snapshot_path = Path(config.storage.snapshot_file).expanduser()

        self.snapshots: SnapshotGateway = JsonSnapshotGateway(self.snapshot_path)
        self.fetcher: UrlFetcher = HttpxUrlFetcher(
            timeout=config.fetch.timeout,
            follow_redirects=config.fetch.follow_redirects,
        )
        self.notifier: Notifier = ClickNotifier()
        self.confirmation: ConfirmationProvider = ClickConfirmation(assume_yes=assume_yes)
        self.export_sink: ExportSink = FileExportSink((export_dir or Path(config.export.directory)).expanduser())

        self.store = DeckStore(self.snapshots, self.confirmation, self.notifier)
        self.controller = DeckController(
            store=self.store,
            fetcher=self.fetcher,
            notifier=self.notifier,
            export_sink=self.export_sink,
            export_filename=config.export.filename,
        )
