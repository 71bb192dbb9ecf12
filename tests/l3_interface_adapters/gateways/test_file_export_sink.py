"""Tests for FileExportSink."""

from pathlib import Path

from flashdeck.l3_interface_adapters.gateways.file_export_sink import FileExportSink


class TestFileExportSink:
    def test_writes_named_file(self, tmp_path: Path):
        sink = FileExportSink(tmp_path / 'out')
        path = sink.save('#a.csv\nQ,A', 'flashcards_export.csv')
        assert path == tmp_path / 'out' / 'flashcards_export.csv'
        assert path.read_text(encoding='utf-8') == '#a.csv\nQ,A'

    def test_overwrites(self, tmp_path: Path):
        sink = FileExportSink(tmp_path)
        sink.save('first', 'x.csv')
        sink.save('second', 'x.csv')
        assert (tmp_path / 'x.csv').read_text(encoding='utf-8') == 'second'
