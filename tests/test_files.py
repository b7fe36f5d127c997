"""
Idempotent file writing tests
"""

import pytest
from pathlib import Path
import tempfile

from semdoc.lib.files import write_updated


class TestWriteUpdated:
    """Test rewriting files only when their content changes"""

    def test_creates_missing_file(self):
        """A missing file is created and reported as changed"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "page.1"
            assert write_updated(path, ".TH T 1\n") is True
            assert path.read_text() == ".TH T 1\n"

    def test_same_content_not_rewritten(self):
        """Identical content leaves the file alone"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "page.1"
            write_updated(path, "same")
            assert write_updated(path, "same") is False
            assert path.read_text() == "same"

    def test_changed_content_replaced(self):
        """Longer old content is fully replaced, not overwritten in part"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "page.md"
            write_updated(path, "a much longer first version")
            assert write_updated(path, "short") is True
            assert path.read_text() == "short"

    def test_bytes_content(self):
        """Bytes and UTF-8 strings compare equal on disk"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "page.md"
            assert write_updated(str(path), "héllo".encode("utf-8")) is True
            assert write_updated(path, "héllo") is False

    def test_missing_directory(self):
        """IO errors propagate"""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(OSError):
                write_updated(Path(tmpdir) / "nope" / "page.md", "x")
