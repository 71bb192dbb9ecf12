"""DeckStore — owns the ordered deck and keeps its snapshot in step."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence

from flashdeck.l1_entities.entry import Card, Deck, Entry, Separator
from flashdeck.l1_entities.errors import DuplicateEntryError, SnapshotDecodeError
from flashdeck.l2_use_cases.ports.prompts import ConfirmationProvider, Notifier
from flashdeck.l2_use_cases.ports.snapshot import SnapshotGateway

log = logging.getLogger('fd.deck')

CLEAR_PROMPT = 'Clear all cards? This also deletes the saved data.'

DeckReducer = Callable[[Deck], Sequence[Entry]]


class DeckStore:
    """Single owner of the deck for the running process.

    Every mutation goes through :meth:`update`, which applies a reducer to the
    deck value current at call time. Callers that suspend on I/O therefore
    never overwrite entries appended while they were waiting.
    """

    def __init__(
        self,
        snapshots: SnapshotGateway,
        confirmation: ConfirmationProvider,
        notifier: Notifier,
    ) -> None:
        self._snapshots = snapshots
        self._confirmation = confirmation
        self._notifier = notifier
        self._entries: Deck = ()

    @property
    def entries(self) -> Deck:
        return self._entries

    @property
    def card_count(self) -> int:
        return sum(1 for e in self._entries if isinstance(e, Card))

    @property
    def separator_count(self) -> int:
        return sum(1 for e in self._entries if isinstance(e, Separator))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def load_snapshot_on_start(self) -> None:
        """Rehydrate from the persisted snapshot. Any failure leaves the deck empty."""
        try:
            restored = self._snapshots.load()
        except SnapshotDecodeError as e:
            log.warning('Ignoring unreadable snapshot: %s', e)
            return
        except OSError as e:
            log.warning('Cannot read snapshot: %s', e)
            return
        if not restored:
            log.debug('No prior deck to restore')
            return
        self._entries = tuple(restored)
        log.info('Restored %d entries from snapshot', len(self._entries))

    def update(self, reducer: DeckReducer) -> Deck:
        """Replace the deck with ``reducer(current deck)`` and persist it."""
        new_entries = tuple(reducer(self._entries))
        _check_unique_ids(new_entries)
        self._entries = new_entries
        self._persist()
        return new_entries

    def append(self, entries: Sequence[Entry]) -> Deck:
        added = tuple(entries)
        return self.update(lambda prev: prev + added)

    def clear(self) -> bool:
        """Empty the deck after confirmation. Returns False when the user declines."""
        if not self._confirmation.confirm(CLEAR_PROMPT):
            log.debug('Clear declined')
            return False
        self.update(lambda _prev: ())
        log.info('Deck cleared')
        return True

    def _persist(self) -> None:
        try:
            if self._entries:
                self._snapshots.save(self._entries)
            else:
                self._snapshots.delete()
        except OSError as e:
            # Memory stays authoritative; only durability is lost.
            log.warning('Snapshot write failed: %s', e, exc_info=True)
            self._notifier.notify(f'Could not save deck: {e}')


def _check_unique_ids(entries: Deck) -> None:
    seen: set[str] = set()
    for entry in entries:
        if entry.id in seen:
            raise DuplicateEntryError(f'Duplicate entry id: {entry.id}')
        seen.add(entry.id)
