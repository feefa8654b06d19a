"""Immutable value objects that enforce the domain invariants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from demo_server.errors import InvalidArgumentError

MAX_CITY_NAME_LENGTH = 100

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


@dataclass(frozen=True, order=True)
class NoteId:
    """Positive integer identity assigned by the note repository."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidArgumentError(f"Note ID must be an integer, got: {self.value!r}")
        if self.value <= 0:
            raise InvalidArgumentError(f"Note ID must be positive, got: {self.value}")

    def __str__(self) -> str:
        return str(self.value)


class Operation(Enum):
    """Arithmetic operations supported by the calculator."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        match self:
            case Operation.ADD:
                return "+"
            case Operation.SUBTRACT:
                return "-"
            case Operation.MULTIPLY:
                return "×"
            case Operation.DIVIDE:
                return "÷"
            case _:
                assert_never(self)

    @classmethod
    def from_name(cls, name: str) -> Operation:
        """Look up an operation by its wire name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown operation: {name}") from None


@dataclass(frozen=True)
class CityName:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidArgumentError("City name must be a string")
        trimmed = self.value.strip()
        if not trimmed:
            raise InvalidArgumentError("City name cannot be empty")
        if len(trimmed) > MAX_CITY_NAME_LENGTH:
            raise InvalidArgumentError(
                f"City name cannot exceed {MAX_CITY_NAME_LENGTH} characters"
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise InvalidArgumentError(
                f"Latitude must be between -90 and 90, got: {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise InvalidArgumentError(
                f"Longitude must be between -180 and 180, got: {self.longitude}"
            )

    def __str__(self) -> str:
        return f"({self.latitude:.2f}, {self.longitude:.2f})"


@dataclass(frozen=True)
class Temperature:
    celsius: float

    def __post_init__(self) -> None:
        # NaN fails every comparison, so test the valid range positively.
        if not self.celsius >= -273.15:
            raise InvalidArgumentError(
                f"Temperature cannot be below absolute zero: {self.celsius}"
            )

    def __str__(self) -> str:
        return f"{self.celsius:.1f}°C"


@dataclass(frozen=True)
class WindSpeed:
    km_per_hour: float

    def __post_init__(self) -> None:
        if not self.km_per_hour >= 0:
            raise InvalidArgumentError(
                f"Wind speed cannot be negative: {self.km_per_hour}"
            )

    def __str__(self) -> str:
        return f"{self.km_per_hour:.1f} km/h"


@dataclass(frozen=True)
class FilePath:
    """A user-supplied path, trimmed. Safety rules live in ``domain.rules``."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidArgumentError("File path must be a string")
        trimmed = self.value.strip()
        if not trimmed:
            raise InvalidArgumentError("File path cannot be empty")
        object.__setattr__(self, "value", trimmed)

    @property
    def file_name(self) -> str:
        separator = max(self.value.rfind("/"), self.value.rfind("\\"))
        return self.value[separator + 1 :] if separator >= 0 else self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class FileSize:
    bytes: int

    def __post_init__(self) -> None:
        if self.bytes < 0:
            raise InvalidArgumentError(f"File size cannot be negative: {self.bytes}")

    def format(self) -> str:
        """Human-readable size, base 1024 with one decimal place."""
        if self.bytes == 0:
            return "0 B"
        size = float(self.bytes)
        group = 0
        while size >= 1024 and group < len(_SIZE_UNITS) - 1:
            size /= 1024
            group += 1
        return f"{size:.1f} {_SIZE_UNITS[group]}"

    def __str__(self) -> str:
        return self.format()
