"""Input ports: the use cases the protocol layer can drive."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from demo_server.domain.models import Calculation, FileMetadata, Note, Weather
from demo_server.domain.values import CityName, FilePath, NoteId, Operation


@dataclass(frozen=True)
class Resource:
    uri: str
    mime_type: str
    name: str
    description: str


@dataclass(frozen=True)
class ResourceContent:
    uri: str
    mime_type: str
    text: str


@dataclass(frozen=True)
class PromptArgument:
    name: str
    description: str
    required: bool
    default: str | None = None


@dataclass(frozen=True)
class Prompt:
    name: str
    description: str
    arguments: list[PromptArgument] = field(default_factory=list)


@dataclass(frozen=True)
class PromptMessage:
    role: str
    text: str


class CalculationUseCase(Protocol):
    def calculate(self, operation: Operation, a: float, b: float) -> Calculation: ...


class NoteManagementUseCase(Protocol):
    def create_note(self, title: str, content: str) -> Note: ...

    def list_notes(self) -> list[Note]:
        """All notes, ascending by id."""
        ...

    def get_note(self, note_id: NoteId) -> Note: ...


class WeatherQueryUseCase(Protocol):
    def get_weather(self, city: CityName) -> Weather: ...


class FileOperationUseCase(Protocol):
    def read_file(self, path: FilePath) -> str: ...

    def write_file(self, path: FilePath, content: str) -> None: ...

    def list_directory(self, path: FilePath | None = None) -> list[FileMetadata]: ...


class ResourceQueryUseCase(Protocol):
    def list_resources(self) -> list[Resource]: ...

    def read_resource(self, uri: str) -> ResourceContent: ...


class PromptGenerationUseCase(Protocol):
    def list_prompts(self) -> list[Prompt]: ...

    def get_prompt(self, name: str) -> Prompt: ...

    def generate_prompt(
        self, name: str, arguments: dict[str, str]
    ) -> list[PromptMessage]: ...
