"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from flashdeck.l1_entities.config import AppConfig
from flashdeck.l1_entities.entry import Deck
from flashdeck.l1_entities.errors import SourceReadError
from flashdeck.l2_use_cases.deck_store import DeckStore
from flashdeck.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeSnapshotGateway:
    """In-memory snapshot storage with injectable failures."""

    def __init__(self, stored: Deck | None = None) -> None:
        self.stored = stored
        self.load_error: Exception | None = None
        self.save_error: Exception | None = None
        self.save_calls: list[Deck] = []
        self.delete_calls: int = 0

    def load(self) -> Deck | None:
        if self.load_error is not None:
            raise self.load_error
        return self.stored

    def save(self, entries: Deck) -> None:
        self.save_calls.append(entries)
        if self.save_error is not None:
            raise self.save_error
        self.stored = entries

    def delete(self) -> None:
        self.delete_calls += 1
        self.stored = None


class FakeConfirmation:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def confirm(self, message: str) -> bool:
        self.questions.append(message)
        return self.answer


class FakeNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakeExportSink:
    def __init__(self, directory: Path | None = None) -> None:
        self._directory = directory or Path('/fake/export')
        self.saved: list[tuple[str, str]] = []

    def save(self, text: str, suggested_name: str) -> Path:
        self.saved.append((text, suggested_name))
        return self._directory / suggested_name


class FakeUrlFetcher:
    """Serves canned bodies; unknown URLs fail like an HTTP 404."""

    def __init__(self, bodies: dict[str, str] | None = None) -> None:
        self.bodies = dict(bodies or {})
        self.calls: list[str] = []

    async def fetch_text(self, url: str) -> str:
        self.calls.append(url)
        if url not in self.bodies:
            raise SourceReadError(f'HTTP 404 for {url}')
        return self.bodies[url]


class GatedContent:
    """Content provider that stays suspended until released by the test."""

    def __init__(self, content: str | bytes) -> None:
        self._content = content
        self._gate = asyncio.Event()
        self.started = False

    def release(self) -> None:
        self._gate.set()

    async def __call__(self) -> str | bytes:
        self.started = True
        await self._gate.wait()
        return self._content


def ready(content: str | bytes):
    """Content provider that completes immediately."""

    async def _read() -> str | bytes:
        return content

    return _read


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_snapshots() -> FakeSnapshotGateway:
    return FakeSnapshotGateway()


@pytest.fixture
def fake_confirmation() -> FakeConfirmation:
    return FakeConfirmation()


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def store(fake_snapshots, fake_confirmation, fake_notifier) -> DeckStore:
    return DeckStore(fake_snapshots, fake_confirmation, fake_notifier)


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
storage:
  snapshot_file: "/tmp/flashdeck-test/deck.json"
export:
  filename: "my_cards.csv"
  directory: "./exports"
fetch:
  timeout: 12.5
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
