"""Use case: load delimited sources and append each as one group to the deck."""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from flashdeck.l1_entities.entry import Card, Entry, Separator
from flashdeck.l1_entities.errors import SourceReadError
from flashdeck.l2_use_cases.deck_store import DeckStore
from flashdeck.l2_use_cases.ports.content_source import ContentProvider, UrlFetcher
from flashdeck.l2_use_cases.ports.prompts import Notifier
from flashdeck.l2_use_cases.utils.delimited_codec import parse_document

log = logging.getLogger('fd.ingest')


@dataclass(frozen=True)
class FileSource:
    """A selected file: its display name and a way to read its content."""

    name: str
    read: ContentProvider


@dataclass(frozen=True)
class IngestResult:
    """Outcome of one ingestion operation."""

    title: str
    cards_added: int = 0
    error: str = ''

    @property
    def ok(self) -> bool:
        return not self.error


def new_entry_id(prefix: str) -> str:
    return f'{prefix}-{uuid.uuid4().hex}'


def decode_content(raw: str | bytes) -> str:
    """Decode file bytes as UTF-8 (BOM tolerated). Raises SourceReadError."""
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise SourceReadError(f'Content is not valid UTF-8: {e}') from e


def title_from_url(url: str) -> str:
    return url.split('/')[-1] or url


def build_group(title: str, pairs: Iterable[tuple[str, str]]) -> tuple[Entry, ...]:
    """One separator followed by one card per pair, each with a fresh id."""
    group: list[Entry] = [Separator(id=new_entry_id('sep'), title=title)]
    group.extend(Card(id=new_entry_id('card'), prompt=q, response=a) for q, a in pairs)
    return tuple(group)


class IngestUseCase:
    """Runs ingestion operations against a shared DeckStore.

    Each operation suspends only while reading its source. Parsing and the
    append happen after resumption, against whatever the deck holds then.
    """

    def __init__(self, store: DeckStore, fetcher: UrlFetcher, notifier: Notifier) -> None:
        self._store = store
        self._fetcher = fetcher
        self._notifier = notifier

    async def ingest_files(self, sources: Iterable[FileSource]) -> list[IngestResult]:
        """Load all *sources* concurrently. Results follow submission order."""
        return list(await asyncio.gather(*(self._ingest_file(src) for src in sources)))

    async def ingest_url(self, url: str) -> IngestResult:
        title = title_from_url(url)
        try:
            text = await self._fetcher.fetch_text(url)
        except SourceReadError as e:
            return self._fail(title, f'Error loading from URL: {e}')
        return self._append_group(title, text)

    async def _ingest_file(self, source: FileSource) -> IngestResult:
        try:
            text = decode_content(await source.read())
        except (SourceReadError, OSError) as e:
            return self._fail(source.name, f'Error reading {source.name}: {e}')
        return self._append_group(source.name, text)

    def _append_group(self, title: str, text: str) -> IngestResult:
        group = build_group(title, parse_document(text))
        self._store.append(group)
        cards = len(group) - 1
        log.info('Appended %s: %d cards (deck size %d)', title, cards, len(self._store))
        return IngestResult(title=title, cards_added=cards)

    def _fail(self, title: str, message: str) -> IngestResult:
        log.error(message)
        self._notifier.notify(message)
        return IngestResult(title=title, error=message)
