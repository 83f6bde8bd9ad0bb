"""Tests for scaffold.file_writer."""

import pytest

from hookwiz.scaffold.file_writer import LocalFileWriter


@pytest.mark.unit
class TestLocalFileWriter:

    def test_writes_relative_to_root(self, tmp_path):
        LocalFileWriter(str(tmp_path)).write_text(".eslintrc.js", "module.exports = {};\n")
        assert (tmp_path / ".eslintrc.js").read_text() == "module.exports = {};\n"

    def test_returns_full_path(self, tmp_path):
        full_path = LocalFileWriter(str(tmp_path)).write_text("phpcs.xml", "<ruleset/>\n")
        assert full_path == str(tmp_path / "phpcs.xml")

    def test_overwrites_existing_file(self, tmp_path):
        (tmp_path / ".prettierrc.js").write_text("old")
        LocalFileWriter(str(tmp_path)).write_text(".prettierrc.js", "new")
        assert (tmp_path / ".prettierrc.js").read_text() == "new"

    def test_failure_raises_runtime_error(self, tmp_path):
        writer = LocalFileWriter(str(tmp_path / "missing"))
        with pytest.raises(RuntimeError, match="Error writing file .eslintrc.js"):
            writer.write_text(".eslintrc.js", "")
