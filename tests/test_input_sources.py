"""Tests for source file discovery."""

import os
from contextlib import nullcontext
from pathlib import Path

import pytest

from sqlhunter import input_sources
from sqlhunter.input_sources import WalkError, detect_text_encoding, iter_source_files, read_source_text


def touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestIterSourceFiles:
    def test_recursive_sorted_depth_first(self, tmp_path):
        touch(tmp_path / "b.py")
        touch(tmp_path / "a" / "z.py")
        touch(tmp_path / "a" / "sub" / "y.py")
        touch(tmp_path / "c.py")
        touch(tmp_path / "notes.txt")
        found = [p.relative_to(tmp_path).as_posix() for p in iter_source_files(tmp_path)]
        assert found == ["a/sub/y.py", "a/z.py", "b.py", "c.py"]

    def test_custom_extension(self, tmp_path):
        touch(tmp_path / "a.src")
        touch(tmp_path / "b.py")
        assert list(iter_source_files(tmp_path, ".src")) == [tmp_path / "a.src"]

    def test_extension_is_case_sensitive(self, tmp_path):
        touch(tmp_path / "A.PY")
        assert list(iter_source_files(tmp_path)) == []

    def test_single_file_root(self, tmp_path):
        target = touch(tmp_path / "only.py")
        assert list(iter_source_files(target)) == [target]
        other = touch(tmp_path / "only.txt")
        assert list(iter_source_files(other)) == []

    def test_missing_root(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(iter_source_files(tmp_path / "missing"))

    def test_empty_directory(self, tmp_path):
        assert list(iter_source_files(tmp_path)) == []

    def test_enumeration_error_aborts_walk(self, tmp_path, monkeypatch):
        touch(tmp_path / "a.py")
        (tmp_path / "locked").mkdir()
        touch(tmp_path / "z.py")
        real_scandir = os.scandir

        def fake_scandir(path):
            if Path(path).name == "locked":
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr(input_sources.os, "scandir", fake_scandir)
        walked = []
        with pytest.raises(WalkError) as excinfo:
            for path in iter_source_files(tmp_path):
                walked.append(path.name)
        assert walked == ["a.py"]
        assert "locked" in excinfo.value.path
        assert isinstance(excinfo.value.cause, PermissionError)


class TestReadSourceText:
    def test_detect_encoding(self):
        assert detect_text_encoding(b"\xef\xbb\xbfx") == "utf-8-sig"
        assert detect_text_encoding(b"\xff\xfex\x00") == "utf-16"
        assert detect_text_encoding(b"x = 1") == "utf-8"

    def test_bom_is_stripped(self, tmp_path):
        path = tmp_path / "bom.py"
        path.write_bytes(b"\xef\xbb\xbfq = 'select'\n")
        assert read_source_text(path) == "q = 'select'\n"

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "bad.py"
        path.write_bytes(b"q = '\xff\xfe\xfa'\n")
        with pytest.raises(UnicodeDecodeError):
            read_source_text(path)


class TestWalkErrors:
    def test_entry_stat_error_becomes_walk_error(self, tmp_path, monkeypatch):
        class BrokenEntry:
            name = "flaky"

            def is_dir(self, follow_symlinks=True):
                raise PermissionError(13, "Permission denied", str(tmp_path / "flaky"))

        monkeypatch.setattr(input_sources.os, "scandir", lambda path: nullcontext([BrokenEntry()]))
        with pytest.raises(WalkError) as excinfo:
            list(iter_source_files(tmp_path))
        assert excinfo.value.path.endswith("flaky")
        assert isinstance(excinfo.value.cause, PermissionError)
