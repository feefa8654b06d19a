"""File operation use case.

Every path goes through ``validate_safe_path`` before the gateway is touched,
so rejected paths never cause any I/O.
"""

from demo_server.domain.models import FileMetadata
from demo_server.domain.rules import validate_safe_path
from demo_server.domain.values import FilePath
from demo_server.errors import FileSystemError, InvalidArgumentError, NotFoundError
from demo_server.ports.outbound import FileSystemGateway, Logger

ENCODING = "utf-8"


class FileService:
    def __init__(self, file_system: FileSystemGateway, logger: Logger) -> None:
        self._fs = file_system
        self._logger = logger

    def read_file(self, path: FilePath) -> str:
        """Return the full text of a regular file.

        Raises:
            InvalidArgumentError: unsafe path, or the path is not a regular file.
            NotFoundError: nothing exists at the path.
            FileSystemError: the read itself failed.
        """
        self._logger.info(f"Reading file: {path}")
        validate_safe_path(path)

        if not self._fs.exists(path):
            raise NotFoundError(f"File not found: {path}")
        if not self._fs.is_file(path):
            raise InvalidArgumentError(f"Not a regular file: {path}")

        try:
            data = self._fs.read_bytes(path)
        except FileSystemError as exc:
            self._logger.error(f"Error reading file {path}: {exc}", exc)
            raise FileSystemError(f"Error reading file: {path}") from exc

        self._logger.info(f"Successfully read {len(data)} bytes from: {path}")
        return data.decode(ENCODING, errors="replace")

    def write_file(self, path: FilePath, content: str) -> None:
        """Create or overwrite a file, creating parent directories as needed."""
        self._logger.info(f"Writing to file: {path} ({len(content)} characters)")
        validate_safe_path(path)

        data = content.encode(ENCODING)
        try:
            self._fs.write_bytes(path, data)
        except FileSystemError as exc:
            self._logger.error(f"Error writing file {path}: {exc}", exc)
            raise FileSystemError(f"Error writing file: {path}") from exc

        self._logger.info(f"Successfully wrote {len(data)} bytes to: {path}")

    def list_directory(self, path: FilePath | None = None) -> list[FileMetadata]:
        """List a directory (default: the working directory), sorted by name."""
        directory = path if path is not None else FilePath(".")
        self._logger.info(f"Listing directory: {directory}")
        validate_safe_path(directory)

        if not self._fs.exists(directory):
            raise NotFoundError(f"Directory not found: {directory}")
        if not self._fs.is_dir(directory):
            raise InvalidArgumentError(f"Not a directory: {directory}")

        try:
            entries = self._fs.list_entries(directory)
        except FileSystemError as exc:
            self._logger.error(f"Error listing directory {directory}: {exc}", exc)
            raise FileSystemError(f"Error listing directory: {directory}") from exc

        entries.sort(key=lambda entry: entry.name)
        self._logger.info(f"Found {len(entries)} entries in: {directory}")
        return entries
