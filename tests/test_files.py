"""Tests for the file tools: path rules, local filesystem gateway, service and tools."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from demo_server.adapters.filesystem import LocalFileSystem
from demo_server.domain.models import FileMetadata
from demo_server.domain.rules import validate_safe_path
from demo_server.domain.values import FilePath, FileSize
from demo_server.errors import FileSystemError, InvalidArgumentError, NotFoundError
from demo_server.services.files import FileService
from tests.conftest import call_tool, result_text

UNSAFE_PATHS = ["../secret.txt", "notes/../../x", "/etc/passwd", "/proc/self/environ", "/sys/kernel"]


@pytest.fixture()
def file_service(logger) -> FileService:
    return FileService(LocalFileSystem(), logger)


# ---------------------------------------------------------------------------
# Value objects & rules
# ---------------------------------------------------------------------------


class TestFilePath:
    def test_trimmed(self):
        assert FilePath("  a/b.txt ").value == "a/b.txt"

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError, match="File path cannot be empty"):
            FilePath("   ")

    def test_file_name(self):
        assert FilePath("dir/sub/file.md").file_name == "file.md"
        assert FilePath("file.md").file_name == "file.md"


class TestFileSize:
    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0 B"),
            (512, "512.0 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1024**2, "1.0 MB"),
            (5 * 1024**3, "5.0 GB"),
            (1024**4, "1.0 TB"),
            (2048 * 1024**4, "2048.0 TB"),
        ],
    )
    def test_format(self, size, expected):
        assert FileSize(size).format() == expected

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError):
            FileSize(-1)


class TestFileMetadata:
    def test_directory_entry(self):
        entry = FileMetadata(FilePath("x/docs"), "docs", FileSize(0), True)
        assert entry.format_list_entry() == "[DIR]  docs"

    def test_file_entry(self):
        entry = FileMetadata(FilePath("x/a.txt"), "a.txt", FileSize(2048), False)
        assert entry.format_list_entry() == "[FILE] a.txt (2.0 KB)"


class TestValidateSafePath:
    @pytest.mark.parametrize("value", UNSAFE_PATHS)
    def test_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            validate_safe_path(FilePath(value))

    @pytest.mark.parametrize("value", ["notes.txt", "./a/b", "/tmp/x", "data/etc/x"])
    def test_allowed(self, value):
        validate_safe_path(FilePath(value))

    def test_protected_prefix_is_a_plain_prefix(self):
        with pytest.raises(InvalidArgumentError, match="system directories"):
            validate_safe_path(FilePath("/etcetera"))


# ---------------------------------------------------------------------------
# FileService
# ---------------------------------------------------------------------------


class TestFileService:
    def test_write_then_read_roundtrip(self, file_service, tmp_path: Path):
        target = FilePath(str(tmp_path / "deep" / "nested" / "f.txt"))
        content = "line one\nünïcödé ✓\n\ttabs and trailing spaces   \n"
        file_service.write_file(target, content)
        assert file_service.read_file(target) == content
        assert (tmp_path / "deep" / "nested" / "f.txt").read_bytes() == content.encode("utf-8")

    def test_write_overwrites(self, file_service, tmp_path: Path):
        target = FilePath(str(tmp_path / "f.txt"))
        file_service.write_file(target, "first version, longer")
        file_service.write_file(target, "second")
        assert file_service.read_file(target) == "second"

    def test_read_missing(self, file_service, tmp_path: Path):
        with pytest.raises(NotFoundError, match="File not found"):
            file_service.read_file(FilePath(str(tmp_path / "nope.txt")))

    def test_read_directory(self, file_service, tmp_path: Path):
        with pytest.raises(InvalidArgumentError, match="Not a regular file"):
            file_service.read_file(FilePath(str(tmp_path)))

    def test_read_io_error(self, logger):
        fs = MagicMock()
        fs.exists.return_value = True
        fs.is_file.return_value = True
        fs.read_bytes.side_effect = FileSystemError("Failed to read file: a.txt (denied)")
        with pytest.raises(FileSystemError, match="Error reading file: a.txt"):
            FileService(fs, logger).read_file(FilePath("a.txt"))
        logger.error.assert_called_once()

    @pytest.mark.parametrize("value", UNSAFE_PATHS)
    def test_unsafe_paths_do_no_io(self, logger, value):
        fs = MagicMock()
        service = FileService(fs, logger)
        with pytest.raises(InvalidArgumentError):
            service.read_file(FilePath(value))
        with pytest.raises(InvalidArgumentError):
            service.write_file(FilePath(value), "x")
        assert fs.method_calls == []

    def test_list_directory_sorted(self, file_service, tmp_path: Path):
        (tmp_path / "b.txt").write_text("bb")
        (tmp_path / "a.txt").write_text("a" * 2048)
        (tmp_path / "c_dir").mkdir()
        entries = file_service.list_directory(FilePath(str(tmp_path)))
        assert [e.name for e in entries] == ["a.txt", "b.txt", "c_dir"]
        assert [e.is_directory for e in entries] == [False, False, True]
        assert entries[0].size == FileSize(2048)

    def test_list_directory_default_is_cwd(self, file_service, tmp_path: Path, monkeypatch):
        (tmp_path / "only.txt").write_text("x")
        monkeypatch.chdir(tmp_path)
        assert [e.name for e in file_service.list_directory()] == ["only.txt"]

    def test_list_missing_directory(self, file_service, tmp_path: Path):
        with pytest.raises(NotFoundError, match="Directory not found"):
            file_service.list_directory(FilePath(str(tmp_path / "missing")))

    def test_list_file_is_not_directory(self, file_service, tmp_path: Path):
        (tmp_path / "f.txt").write_text("x")
        with pytest.raises(InvalidArgumentError, match="Not a directory"):
            file_service.list_directory(FilePath(str(tmp_path / "f.txt")))


# ---------------------------------------------------------------------------
# LocalFileSystem
# ---------------------------------------------------------------------------


class TestLocalFileSystem:
    def test_size(self, tmp_path: Path):
        (tmp_path / "f.bin").write_bytes(b"12345")
        assert LocalFileSystem().size(FilePath(str(tmp_path / "f.bin"))) == 5

    def test_read_missing_raises_filesystem_error(self, tmp_path: Path):
        with pytest.raises(FileSystemError, match="Failed to read file"):
            LocalFileSystem().read_bytes(FilePath(str(tmp_path / "missing")))

    def test_write_under_a_file_raises_filesystem_error(self, tmp_path: Path):
        (tmp_path / "blocker").write_text("x")
        with pytest.raises(FileSystemError, match="Failed to write file"):
            LocalFileSystem().write_bytes(FilePath(str(tmp_path / "blocker" / "f.txt")), b"x")


# ---------------------------------------------------------------------------
# File tools
# ---------------------------------------------------------------------------


class TestFileTools:
    def test_write_then_read(self, server, tmp_path: Path):
        path = str(tmp_path / "out" / "note.txt")
        written = call_tool(server, "write_file", {"file_path": path, "content": "hello\nworld"})
        assert result_text(written) == f"File written successfully: {path}"

        read = call_tool(server, "read_file", {"file_path": path})
        assert result_text(read) == f"File contents of {path}:\n\nhello\nworld"

    def test_read_missing(self, server, tmp_path: Path):
        path = str(tmp_path / "missing.txt")
        result = call_tool(server, "read_file", {"file_path": path})
        assert result["isError"] is True
        assert result_text(result) == f"Error: File not found: {path}"

    def test_traversal_rejected(self, server):
        result = call_tool(server, "write_file", {"file_path": "../escape.txt", "content": "x"})
        assert result["isError"] is True
        assert "Path traversal is not allowed" in result_text(result)

    def test_system_path_rejected(self, server):
        result = call_tool(server, "read_file", {"file_path": "/etc/hostname"})
        assert result["isError"] is True
        assert "system directories" in result_text(result)

    def test_list_directory(self, server, tmp_path: Path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "file.txt").write_text("abc")
        result = call_tool(server, "list_directory", {"directory_path": str(tmp_path)})
        assert result_text(result) == (
            f"Contents of {tmp_path}:\n\n[FILE] file.txt (3.0 B)\n[DIR]  sub"
        )

    def test_list_empty_directory(self, server, tmp_path: Path):
        result = call_tool(server, "list_directory", {"directory_path": str(tmp_path)})
        assert result_text(result).endswith("(empty directory)")
