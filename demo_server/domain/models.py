"""Domain entities. Each one validates its invariants at construction."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import assert_never

from demo_server.domain.values import (
    CityName,
    FilePath,
    FileSize,
    NoteId,
    Operation,
    Temperature,
    WindSpeed,
)
from demo_server.errors import InvalidArgumentError, RejectedOperationError

MAX_TITLE_LENGTH = 200


@dataclass(frozen=True)
class Note:
    """A single note. Never mutated once stored."""

    id: NoteId
    title: str
    content: str
    created: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise InvalidArgumentError("Content must be a string")
        object.__setattr__(self, "title", normalize_title(self.title))


def normalize_title(title: str) -> str:
    """Return *title* trimmed, or raise if it breaks the note title rules."""
    if not isinstance(title, str):
        raise InvalidArgumentError("Title must be a string")
    trimmed = title.strip()
    if not trimmed:
        raise InvalidArgumentError("Title cannot be empty")
    if len(trimmed) > MAX_TITLE_LENGTH:
        raise InvalidArgumentError(f"Title cannot exceed {MAX_TITLE_LENGTH} characters")
    return trimmed


@dataclass(frozen=True)
class Calculation:
    operation: Operation
    operand_a: float
    operand_b: float
    result: float

    @classmethod
    def perform(cls, operation: Operation, a: float, b: float) -> Calculation:
        """Compute ``a <operation> b``.

        Raises:
            InvalidArgumentError: an operand is NaN or infinite.
            RejectedOperationError: division by zero, or the result overflows.
        """
        if not (math.isfinite(a) and math.isfinite(b)):
            raise InvalidArgumentError("Operands must be finite numbers")

        match operation:
            case Operation.ADD:
                result = a + b
            case Operation.SUBTRACT:
                result = a - b
            case Operation.MULTIPLY:
                result = a * b
            case Operation.DIVIDE:
                if b == 0:
                    raise RejectedOperationError("Division by zero is not allowed")
                result = a / b
            case _:
                assert_never(operation)

        if not math.isfinite(result):
            raise RejectedOperationError("Result is too large to represent")
        return cls(operation, a, b, result)

    def format(self) -> str:
        return (
            f"Result: {self.operand_a:.2f} {self.operation.symbol} "
            f"{self.operand_b:.2f} = {self.result:.2f}"
        )


@dataclass(frozen=True)
class Weather:
    city: CityName
    country: str
    temperature: Temperature
    condition: str
    wind_speed: WindSpeed

    def __post_init__(self) -> None:
        for name in ("city", "country", "temperature", "condition", "wind_speed"):
            if getattr(self, name) is None:
                raise InvalidArgumentError(f"Weather {name} is required")

    def format(self) -> str:
        return (
            f"Weather in {self.city} ({self.country}):\n"
            f"Temperature: {self.temperature}\n"
            f"Condition: {self.condition}\n"
            f"Wind: {self.wind_speed}"
        )


@dataclass(frozen=True)
class FileMetadata:
    path: FilePath
    name: str
    size: FileSize
    is_directory: bool

    def format_list_entry(self) -> str:
        if self.is_directory:
            return f"[DIR]  {self.name}"
        return f"[FILE] {self.name} ({self.size.format()})"
