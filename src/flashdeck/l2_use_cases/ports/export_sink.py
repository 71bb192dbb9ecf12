"""Port: destination for exported delimited text."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ExportSink(Protocol):
    """Abstract "save as file" mechanism."""

    def save(self, text: str, suggested_name: str) -> Path:
        """Persist *text* and return where it was written."""
        ...
