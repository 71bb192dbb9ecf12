"""Gateway: writes exported text into a directory — implements ExportSink port."""

from __future__ import annotations

from pathlib import Path


class FileExportSink:
    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def save(self, text: str, suggested_name: str) -> Path:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / suggested_name
        path.write_text(text, encoding='utf-8')
        return path
