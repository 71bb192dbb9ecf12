"""Gateway: local CSV files as ingestion sources."""

from __future__ import annotations

import asyncio
from pathlib import Path

from flashdeck.l1_entities.errors import SourceReadError
from flashdeck.l2_use_cases.ingest_use_case import FileSource

CSV_SUFFIXES = frozenset({'.csv'})


def is_csv_file(path: Path) -> bool:
    return path.suffix.lower() in CSV_SUFFIXES


def file_source(path: Path) -> FileSource:
    """Wrap *path* as a FileSource whose read happens off the event loop."""

    async def _read() -> bytes:
        if not is_csv_file(path):
            raise SourceReadError(f'Not a CSV file: {path.name}')
        return await asyncio.to_thread(path.read_bytes)

    return FileSource(name=path.name, read=_read)
