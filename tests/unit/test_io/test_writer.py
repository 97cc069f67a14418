"""Tests for the AtomicWriter utility."""

import hashlib
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from pairrank.io.writer import AtomicWriter


class TestAtomicWriter:
    """Tests for AtomicWriter class."""

    def test_write_creates_file(self) -> None:
        """Write creates file with correct content."""
        with TemporaryDirectory() as tmp_dir:
            base_dir = Path(tmp_dir)
            writer = AtomicWriter(base_dir)

            content = "1,apple\n2,banana\n"
            file_path = base_dir / "ranking.csv"

            result = writer.write(file_path, content)

            assert file_path.read_text(encoding="utf-8") == content
            assert result.bytes_written == len(content.encode("utf-8"))

    def test_write_computes_sha256(self) -> None:
        """Write computes correct SHA-256 checksum."""
        with TemporaryDirectory() as tmp_dir:
            base_dir = Path(tmp_dir)
            writer = AtomicWriter(base_dir, session_id="s-1")

            content = "1,ünïcode\n"
            result = writer.write(base_dir / "ranking.csv", content)

            expected = hashlib.sha256(content.encode("utf-8")).hexdigest()
            assert result.sha256 == expected

    def test_write_returns_relative_path(self) -> None:
        """Write returns path relative to base directory."""
        with TemporaryDirectory() as tmp_dir:
            base_dir = Path(tmp_dir)
            writer = AtomicWriter(base_dir)

            file_path = base_dir / "out" / "ranking.csv"
            result = writer.write(file_path, "1,a\n")

            assert result.path == "out/ranking.csv"
            assert Path(result.absolute_path) == file_path.resolve()

    def test_write_creates_parent_dirs(self) -> None:
        """Missing parent directories are created."""
        with TemporaryDirectory() as tmp_dir:
            base_dir = Path(tmp_dir)
            file_path = base_dir / "a" / "b" / "ranking.csv"

            AtomicWriter(base_dir).write(file_path, "1,a\n")

            assert file_path.exists()

    def test_write_leaves_no_temp_files(self) -> None:
        """Write leaves no temporary files after completion."""
        with TemporaryDirectory() as tmp_dir:
            base_dir = Path(tmp_dir)
            AtomicWriter(base_dir).write(base_dir / "ranking.csv", "1,a\n")

            assert list(base_dir.glob("*.tmp")) == []

    def test_write_overwrites_existing_file(self) -> None:
        """Write replaces an existing file."""
        with TemporaryDirectory() as tmp_dir:
            base_dir = Path(tmp_dir)
            file_path = base_dir / "ranking.csv"
            file_path.write_text("old", encoding="utf-8")

            AtomicWriter(base_dir).write(file_path, "1,new\n")

            assert file_path.read_text(encoding="utf-8") == "1,new\n"

    def test_path_outside_base_dir(self) -> None:
        """Paths outside the base directory are reported as given."""
        with TemporaryDirectory() as base, TemporaryDirectory() as other:
            file_path = Path(other) / "ranking.csv"
            result = AtomicWriter(Path(base)).write(file_path, "1,a\n")

            assert result.path == str(file_path)

    def test_failed_rename_removes_temp_file(self) -> None:
        """A failed rename leaves no temporary file behind."""
        with TemporaryDirectory() as tmp_dir:
            base_dir = Path(tmp_dir)
            target = base_dir / "ranking.csv"
            target.mkdir()

            with pytest.raises(OSError):
                AtomicWriter(base_dir).write(target, "1,a\n")

            assert list(base_dir.glob("*.tmp")) == []
            assert target.is_dir()
