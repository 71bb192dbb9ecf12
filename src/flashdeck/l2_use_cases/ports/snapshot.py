"""Port: durable deck snapshot storage."""

from __future__ import annotations

from typing import Protocol

from flashdeck.l1_entities.entry import Deck


class SnapshotGateway(Protocol):
    """Abstract persistence for the deck between process runs."""

    def load(self) -> Deck | None:
        """Return the persisted entries, or None when no snapshot exists.

        Raises SnapshotDecodeError when a snapshot exists but is corrupt.
        """
        ...

    def save(self, entries: Deck) -> None:
        """Overwrite the snapshot with *entries*. Raises OSError on storage failure."""
        ...

    def delete(self) -> None:
        """Remove the snapshot if present."""
        ...
