import os
import socket

import pytest

from virtualdir.errors import (
    DestinationExistsError,
    SourceNotFoundError,
    UnsupportedPathError,
)
from virtualdir.fs import SyncReport, delete_recursively, generate, read
from virtualdir.models import VirtualDirectory, VirtualFile


@pytest.fixture
def tree():
    return VirtualDirectory.from_mapping(
        {
            "README.md": "# project\n",
            "src": {"main.py": "print('hi')\n", "pkg": {"__init__.py": ""}},
            "empty": {},
        }
    )


def snapshot(root):
    result = {}
    for dirpath, dirnames, filenames in os.walk(root):
        rel = os.path.relpath(dirpath, root)
        for name in dirnames:
            result[os.path.normpath(os.path.join(rel, name))] = None
        for name in filenames:
            with open(os.path.join(dirpath, name), "rb") as f:
                result[os.path.normpath(os.path.join(rel, name))] = f.read()
    return result


class TestGenerate:
    def test_creates_tree(self, tmp_path, tree):
        destination = tmp_path / "out"
        report = generate(tree, destination)
        assert snapshot(destination) == {
            "README.md": b"# project\n",
            "src": None,
            "src/main.py": b"print('hi')\n",
            "src/pkg": None,
            "src/pkg/__init__.py": b"",
            "empty": None,
        }
        assert destination / "src" / "pkg" in report.created
        assert len(report.written) == 3
        assert report.skipped == []
        assert report.deleted == []

    def test_is_idempotent(self, tmp_path, tree):
        destination = tmp_path / "out"
        generate(tree, destination)
        before = snapshot(destination)
        report = generate(tree, destination)
        assert report.written == []
        assert report.created == []
        assert report.deleted == []
        assert len(report.skipped) == 3
        assert not report.changed
        assert snapshot(destination) == before

    def test_skips_unchanged_files_without_rewriting(self, tmp_path, tree, monkeypatch):
        destination = tmp_path / "out"
        generate(tree, destination)

        def fail(*args, **kwargs):
            raise AssertionError("unexpected write")

        monkeypatch.setattr("pathlib.Path.write_bytes", fail)
        generate(tree, destination)

    def test_rewrites_changed_files_only(self, tmp_path, tree):
        destination = tmp_path / "out"
        generate(tree, destination)
        (destination / "src" / "main.py").write_text("changed")
        report = generate(tree, destination)
        assert report.written == [destination / "src" / "main.py"]
        assert (destination / "src" / "main.py").read_text() == "print('hi')\n"

    def test_keeps_unrelated_entries(self, tmp_path, tree):
        destination = tmp_path / "out"
        destination.mkdir()
        (destination / "extra.txt").write_text("keep me")
        generate(tree, destination)
        assert (destination / "extra.txt").read_text() == "keep me"

    def test_reuses_existing_directory_without_replace(self, tmp_path, tree):
        generate(tree, tmp_path)
        assert (tmp_path / "README.md").read_text() == "# project\n"

    def test_refuses_existing_file_without_replace(self, tmp_path, tree):
        destination = tmp_path / "out"
        destination.write_text("in the way")
        with pytest.raises(
            DestinationExistsError, match="Destination path already exists"
        ):
            generate(tree, destination)
        assert destination.read_text() == "in the way"

    def test_replaces_existing_file(self, tmp_path, tree):
        destination = tmp_path / "out"
        destination.write_text("in the way")
        report = generate(tree, destination, replace=True)
        assert destination.is_dir()
        assert destination in report.deleted
        assert destination in report.created
        assert (destination / "src" / "main.py").read_text() == "print('hi')\n"

    def test_replaces_file_with_directory(self, tmp_path, tree):
        destination = tmp_path / "out"
        destination.mkdir()
        (destination / "src").write_text("not a directory")
        generate(tree, destination)
        assert (destination / "src" / "pkg" / "__init__.py").is_file()

    def test_replaces_directory_with_file(self, tmp_path, tree):
        destination = tmp_path / "out"
        (destination / "README.md" / "nested").mkdir(parents=True)
        (destination / "README.md" / "nested" / "file").write_text("x")
        report = generate(tree, destination)
        assert (destination / "README.md").read_text() == "# project\n"
        assert destination / "README.md" in report.deleted

    def test_replaces_symlink_with_file(self, tmp_path, tree):
        target = tmp_path / "target.txt"
        target.write_text("# project\n")
        destination = tmp_path / "out"
        destination.mkdir()
        (destination / "README.md").symlink_to(target)
        generate(tree, destination)
        assert not (destination / "README.md").is_symlink()
        assert target.read_text() == "# project\n"

    def test_compares_binary_content(self, tmp_path):
        destination = tmp_path / "out"
        destination.mkdir()
        (destination / "blob").write_bytes(b"\xff\xfe")
        tree = VirtualDirectory.builder().add_file("blob", b"\xff\xfd").build()
        report = generate(tree, destination)
        assert report.written == [destination / "blob"]
        assert (destination / "blob").read_bytes() == b"\xff\xfd"

    def test_accepts_shared_report(self, tmp_path, tree):
        report = SyncReport()
        returned = generate(tree, tmp_path / "out", report=report)
        assert returned is report
        assert report.summary() == "4 created, 3 written, 0 unchanged, 0 deleted"


class TestRead:
    def test_reads_directory(self, tmp_path, tree):
        generate(tree, tmp_path / "out")
        assert read(tmp_path / "out") == tree

    def test_reads_file(self, tmp_path):
        path = tmp_path / "file.bin"
        path.write_bytes(b"\x00\x01")
        assert read(path) == VirtualFile(b"\x00\x01")

    def test_reads_sorted(self, tmp_path):
        for name in ["b", "c", "a"]:
            (tmp_path / name).write_text(name)
        assert list(read(tmp_path)) == ["a", "b", "c"]
        assert str(read(tmp_path)) == "a\nb\nc\n"

    def test_fails_on_missing_path(self, tmp_path):
        with pytest.raises(SourceNotFoundError, match="No file at"):
            read(tmp_path / "missing")

    def test_skips_symlinks(self, tmp_path):
        (tmp_path / "real").write_text("content")
        (tmp_path / "link").symlink_to(tmp_path / "real")
        (tmp_path / "dirlink").symlink_to(tmp_path, target_is_directory=True)
        assert read(tmp_path) == VirtualDirectory({"real": VirtualFile("content")})
        assert read(tmp_path / "link") is None

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
    def test_fails_on_fifo(self, tmp_path):
        os.mkfifo(tmp_path / "pipe")
        with pytest.raises(UnsupportedPathError, match="Unsupported path"):
            read(tmp_path)

    @pytest.mark.skipif(not hasattr(socket, "AF_UNIX"), reason="requires unix sockets")
    def test_fails_on_socket(self, tmp_path):
        path = tmp_path / "s"
        with socket.socket(socket.AF_UNIX) as sock:
            try:
                sock.bind(str(path))
            except OSError:
                pytest.skip("cannot bind unix socket here")
            with pytest.raises(UnsupportedPathError):
                read(path)


class TestDeleteRecursively:
    def test_removes_tree(self, tmp_path):
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "c").write_text("x")
        delete_recursively(tmp_path / "a")
        assert not (tmp_path / "a").exists()

    def test_removes_link_not_target(self, tmp_path):
        (tmp_path / "target").mkdir()
        (tmp_path / "target" / "keep").write_text("x")
        (tmp_path / "link").symlink_to(tmp_path / "target", target_is_directory=True)
        delete_recursively(tmp_path / "link")
        assert not (tmp_path / "link").is_symlink()
        assert (tmp_path / "target" / "keep").exists()

    def test_ignores_missing(self, tmp_path):
        delete_recursively(tmp_path / "missing")
