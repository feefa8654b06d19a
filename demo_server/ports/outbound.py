"""Output ports: what the application services need from infrastructure.

Services only ever see these protocols, so tests can substitute in-memory
doubles for every adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from demo_server.domain.models import FileMetadata, Note
from demo_server.domain.values import (
    CityName,
    Coordinates,
    FilePath,
    NoteId,
    Temperature,
    WindSpeed,
)


@dataclass(frozen=True)
class GeocodeResult:
    coordinates: Coordinates
    country: str


@dataclass(frozen=True)
class WeatherReading:
    temperature: Temperature
    weather_code: int
    wind_speed: WindSpeed


class NoteRepository(Protocol):
    """Thread-safe store that owns every note."""

    def save(self, note: Note) -> None: ...

    def find_by_id(self, note_id: NoteId) -> Note | None: ...

    def find_all(self) -> list[Note]: ...

    def next_identity(self) -> NoteId:
        """Return a fresh id. Must be a single atomic step."""
        ...


class FileSystemGateway(Protocol):
    """Filesystem access. I/O failures raise ``FileSystemError``."""

    def exists(self, path: FilePath) -> bool: ...

    def is_file(self, path: FilePath) -> bool: ...

    def is_dir(self, path: FilePath) -> bool: ...

    def read_bytes(self, path: FilePath) -> bytes: ...

    def write_bytes(self, path: FilePath, content: bytes) -> None:
        """Write *content*, creating missing parent directories."""
        ...

    def list_entries(self, path: FilePath) -> list[FileMetadata]: ...

    def size(self, path: FilePath) -> int: ...


class WeatherGateway(Protocol):
    """Geocoding and current-conditions lookup.

    ``geocode`` raises ``NotFoundError`` for unknown cities; every other
    failure (network, timeout, status, payload) raises ``GatewayError``.
    """

    def geocode(self, city: CityName) -> GeocodeResult: ...

    def current_weather(self, coordinates: Coordinates) -> WeatherReading: ...


class Clock(Protocol):
    def now(self) -> datetime: ...


class Logger(Protocol):
    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str, cause: BaseException | None = None) -> None: ...
