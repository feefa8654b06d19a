"""``tools/list`` and ``tools/call``.

Each tool pairs a pydantic argument model (which also provides the advertised
input schema) with a function that drives one use case and renders its
result as text. Tool failures never become protocol errors: they are returned
as a normal result with ``isError: true``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from demo_server.domain.values import CityName, FilePath, Operation
from demo_server.errors import DemoServerError, InvalidArgumentError, NotFoundError
from demo_server.ports.inbound import (
    CalculationUseCase,
    FileOperationUseCase,
    NoteManagementUseCase,
    WeatherQueryUseCase,
)
from demo_server.protocol.jsonrpc import format_validation_error, parse_params

logger = logging.getLogger(__name__)

NO_NOTES_TEXT = "No notes found. Create one using the create_note tool!"

# ---------------------------------------------------------------------------
# Argument models
# ---------------------------------------------------------------------------


class ToolCallParams(BaseModel):
    name: str
    arguments: dict[str, Any] | None = None


class CalculateArguments(BaseModel):
    operation: str = Field(
        description="The arithmetic operation to perform",
        json_schema_extra={"enum": [op.value for op in Operation]},
    )
    a: float = Field(description="First number")
    b: float = Field(description="Second number")


class CreateNoteArguments(BaseModel):
    title: str = Field(description="The title of the note")
    content: str = Field(description="The content of the note")


class ListNotesArguments(BaseModel):
    pass


class GetWeatherArguments(BaseModel):
    city: str = Field(description="The city name")


class ReadFileArguments(BaseModel):
    file_path: str = Field(description="The path to the file to read")


class WriteFileArguments(BaseModel):
    file_path: str = Field(description="The path to the file to write")
    content: str = Field(description="The content to write to the file")


class ListDirectoryArguments(BaseModel):
    directory_path: str = Field(
        default=".",
        description="The directory path to list (defaults to current directory)",
    )


@dataclass(frozen=True)
class _Tool:
    name: str
    description: str
    arguments: type[BaseModel]
    run: Callable[[Any], str]


def text_content(text: str) -> dict[str, str]:
    return {"type": "text", "text": text}


def tool_result(text: str, is_error: bool = False) -> dict[str, Any]:
    result: dict[str, Any] = {"content": [text_content(text)]}
    if is_error:
        result["isError"] = True
    return result


# ---------------------------------------------------------------------------
# Handler
# ---------------------------------------------------------------------------


class ToolHandler:
    """Routes tool calls to the calculation, note, weather and file use cases."""

    def __init__(
        self,
        calculation: CalculationUseCase,
        notes: NoteManagementUseCase,
        weather: WeatherQueryUseCase,
        files: FileOperationUseCase,
    ) -> None:
        self._calculation = calculation
        self._notes = notes
        self._weather = weather
        self._files = files
        tools = [
            _Tool(
                "calculate",
                "Perform basic arithmetic calculations (add, subtract, multiply, divide)",
                CalculateArguments,
                self._calculate,
            ),
            _Tool(
                "create_note",
                "Create a new note with a title and content",
                CreateNoteArguments,
                self._create_note,
            ),
            _Tool(
                "list_notes",
                "List all notes with their IDs and titles",
                ListNotesArguments,
                self._list_notes,
            ),
            _Tool(
                "get_weather",
                "Get real weather information for a city",
                GetWeatherArguments,
                self._get_weather,
            ),
            _Tool(
                "read_file",
                "Read the contents of a text file",
                ReadFileArguments,
                self._read_file,
            ),
            _Tool(
                "write_file",
                "Write content to a text file (creates or overwrites)",
                WriteFileArguments,
                self._write_file,
            ),
            _Tool(
                "list_directory",
                "List files and directories in a folder",
                ListDirectoryArguments,
                self._list_directory,
            ),
        ]
        self._tools = {tool.name: tool for tool in tools}

    def list_tools(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return {
            "tools": [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "inputSchema": tool.arguments.model_json_schema(),
                }
                for tool in self._tools.values()
            ]
        }

    def call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        call = parse_params(ToolCallParams, params, "tools/call")
        logger.info("Tool %s invoked", call.name)
        try:
            text = self._execute(call.name, call.arguments or {})
        except DemoServerError as exc:
            logger.warning("Tool %s failed: %s", call.name, exc)
            return tool_result(f"Error: {exc}", is_error=True)
        except Exception as exc:
            logger.exception("Tool %s crashed", call.name)
            return tool_result(f"Error: Internal error: {exc}", is_error=True)
        return tool_result(text)

    def _execute(self, name: str, arguments: dict[str, Any]) -> str:
        tool = self._tools.get(name)
        if tool is None:
            raise NotFoundError(f"Unknown tool: {name}")
        try:
            parsed = tool.arguments.model_validate(arguments)
        except ValidationError as exc:
            raise InvalidArgumentError(
                f"Invalid arguments for {name}: {format_validation_error(exc)}"
            ) from exc
        return tool.run(parsed)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def _calculate(self, args: CalculateArguments) -> str:
        operation = Operation.from_name(args.operation)
        return self._calculation.calculate(operation, args.a, args.b).format()

    def _create_note(self, args: CreateNoteArguments) -> str:
        note = self._notes.create_note(args.title, args.content)
        return f"Note created successfully!\nID: {note.id}\nTitle: {note.title}"

    def _list_notes(self, args: ListNotesArguments) -> str:
        notes = self._notes.list_notes()
        if not notes:
            return NO_NOTES_TEXT
        lines = [f"Available notes ({len(notes)}):"]
        lines.extend(f"ID {note.id}: {note.title}" for note in notes)
        return "\n".join(lines)

    def _get_weather(self, args: GetWeatherArguments) -> str:
        return self._weather.get_weather(CityName(args.city)).format()

    def _read_file(self, args: ReadFileArguments) -> str:
        path = FilePath(args.file_path)
        content = self._files.read_file(path)
        return f"File contents of {path}:\n\n{content}"

    def _write_file(self, args: WriteFileArguments) -> str:
        path = FilePath(args.file_path)
        self._files.write_file(path, args.content)
        return f"File written successfully: {path}"

    def _list_directory(self, args: ListDirectoryArguments) -> str:
        path = FilePath(args.directory_path)
        entries = self._files.list_directory(path)
        header = f"Contents of {path}:\n\n"
        if not entries:
            return header + "(empty directory)"
        return header + "\n".join(entry.format_list_entry() for entry in entries)
