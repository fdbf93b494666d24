from __future__ import annotations

import os
from datetime import datetime

import pytest

from mdconverter.file_handler import FileHandler


class TestFileHandler:
    def test_read_text_strips_bom(self, tmp_path):
        f = tmp_path / "capture.txt"
        f.write_bytes("\ufeff┌─┐\nrow".encode("utf-8"))
        assert FileHandler().read_text(str(f)) == "┌─┐\nrow"

    def test_read_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            FileHandler().read_text(str(tmp_path / "missing.txt"))

    def test_write_text_utf8(self, tmp_path):
        path = tmp_path / "out.md"
        FileHandler().write_text(str(path), "| • | ✅ |\n")
        assert path.read_text(encoding="utf-8") == "| • | ✅ |\n"

    def test_is_markdown(self):
        assert FileHandler.is_markdown("notes.md")
        assert FileHandler.is_markdown("NOTES.Markdown")
        assert not FileHandler.is_markdown("capture.txt")
        assert not FileHandler.is_markdown("md")

    def test_default_name_is_timestamp(self):
        assert FileHandler.default_name(datetime(2026, 10, 19, 15, 30)) == "202610191530"

    def test_markdown_name(self):
        assert FileHandler.markdown_name("report") == "report.md"
        assert FileHandler.markdown_name("report.MD") == "report.MD"

    def test_get_output_path_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "out"
        path = FileHandler().get_output_path(str(target), "a.md")
        assert os.path.isdir(target)
        assert path == os.path.join(str(target), "a.md")

    def test_unique_filenames(self, tmp_path):
        handler = FileHandler()
        path1 = handler.get_output_path(str(tmp_path), "file.md")
        with open(path1, "w") as f:
            f.write("first")
        path2 = handler.get_output_path(str(tmp_path), "file.md")
        assert path1 != path2
        assert path2.endswith("file_1.md")

    def test_output_path_next_to_source(self, tmp_path):
        source = tmp_path / "capture.txt"
        source.write_text("x")
        path = FileHandler().output_path_for(str(source), ".md")
        assert path == os.path.join(str(tmp_path), "capture.md")

    def test_output_path_in_output_dir(self, tmp_path):
        out = tmp_path / "converted"
        path = FileHandler(str(out)).output_path_for("/somewhere/capture.txt", ".html")
        assert path == os.path.join(str(out), "capture.html")

    def test_output_path_for_stdin_uses_timestamp(self, tmp_path):
        path = FileHandler(str(tmp_path)).output_path_for(None, ".md")
        name = os.path.basename(path)
        assert name.endswith(".md")
        assert name[:-3].isdigit()
        assert len(name[:-3]) == 12

    def test_markdown_source_is_not_overwritten(self, tmp_path):
        source = tmp_path / "notes.md"
        source.write_text("# Notes")
        path = FileHandler().output_path_for(str(source), ".md")
        assert path.endswith("notes_1.md")
