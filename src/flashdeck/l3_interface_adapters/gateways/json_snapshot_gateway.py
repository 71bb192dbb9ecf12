"""Gateway: JSON file snapshot — implements SnapshotGateway port."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from flashdeck.l1_entities.entry import Deck, Entry
from flashdeck.l1_entities.errors import SnapshotDecodeError

log = logging.getLogger('fd.snapshot')

_ENTRIES = TypeAdapter(list[Entry])


def encode_snapshot(entries: Deck) -> bytes:
    return _ENTRIES.dump_json(list(entries), indent=2)


def decode_snapshot(data: str | bytes) -> Deck:
    try:
        entries = tuple(_ENTRIES.validate_json(data))
    except ValidationError as e:
        raise SnapshotDecodeError(f'{e.error_count()} invalid record(s) in snapshot') from e
    if len({entry.id for entry in entries}) != len(entries):
        raise SnapshotDecodeError('Snapshot repeats an entry id')
    return entries


class JsonSnapshotGateway:
    """Stores the deck as a JSON array of tagged records in a single file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Deck | None:
        if not self._path.exists():
            return None
        entries = decode_snapshot(self._path.read_bytes())
        log.debug('Read %d entries from %s', len(entries), self._path)
        return entries

    def save(self, entries: Deck) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + '.tmp')
        tmp.write_bytes(encode_snapshot(entries))
        tmp.replace(self._path)
        log.debug('Wrote %d entries to %s', len(entries), self._path)

    def delete(self) -> None:
        self._path.unlink(missing_ok=True)
        log.debug('Deleted snapshot %s', self._path)
