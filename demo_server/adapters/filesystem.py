"""Local filesystem gateway built on :mod:`pathlib`."""

from pathlib import Path

from demo_server.domain.models import FileMetadata
from demo_server.domain.values import FilePath, FileSize
from demo_server.errors import FileSystemError


def _to_path(path: FilePath) -> Path:
    return Path(path.value)


class LocalFileSystem:
    def exists(self, path: FilePath) -> bool:
        return _to_path(path).exists()

    def is_file(self, path: FilePath) -> bool:
        return _to_path(path).is_file()

    def is_dir(self, path: FilePath) -> bool:
        return _to_path(path).is_dir()

    def read_bytes(self, path: FilePath) -> bytes:
        try:
            return _to_path(path).read_bytes()
        except OSError as exc:
            raise FileSystemError(f"Failed to read file: {path} ({exc.strerror or exc})") from exc

    def write_bytes(self, path: FilePath, content: bytes) -> None:
        target = _to_path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            raise FileSystemError(f"Failed to write file: {path} ({exc.strerror or exc})") from exc

    def list_entries(self, path: FilePath) -> list[FileMetadata]:
        try:
            entries = []
            for entry in _to_path(path).iterdir():
                is_dir = entry.is_dir()
                entries.append(
                    FileMetadata(
                        path=FilePath(str(entry)),
                        name=entry.name,
                        size=FileSize(0 if is_dir else entry.stat().st_size),
                        is_directory=is_dir,
                    )
                )
            return entries
        except OSError as exc:
            raise FileSystemError(
                f"Failed to list directory: {path} ({exc.strerror or exc})"
            ) from exc

    def size(self, path: FilePath) -> int:
        try:
            return _to_path(path).stat().st_size
        except OSError as exc:
            raise FileSystemError(f"Failed to get file size: {path} ({exc.strerror or exc})") from exc
