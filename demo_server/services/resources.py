"""Resource query use case: two static resources plus one per stored note."""

import json

from demo_server.domain.values import NoteId
from demo_server.errors import InvalidArgumentError, NotFoundError
from demo_server.ports.inbound import Resource, ResourceContent
from demo_server.ports.outbound import Logger, NoteRepository

INFO_URI = "demo://info"
CAPABILITIES_URI = "demo://capabilities"
NOTE_URI_PREFIX = "note://"


def note_uri(note_id: NoteId) -> str:
    return f"{NOTE_URI_PREFIX}{note_id.value}"


class ResourceService:
    def __init__(
        self,
        repository: NoteRepository,
        logger: Logger,
        server_name: str,
        server_version: str,
    ) -> None:
        self._repository = repository
        self._logger = logger
        self._server_name = server_name
        self._server_version = server_version

    def list_resources(self) -> list[Resource]:
        resources = [
            Resource(
                uri=INFO_URI,
                mime_type="text/plain",
                name="Server Information",
                description="Information about this MCP demo server",
            ),
            Resource(
                uri=CAPABILITIES_URI,
                mime_type="application/json",
                name="MCP Capabilities",
                description="Overview of MCP protocol capabilities",
            ),
        ]
        for note in sorted(self._repository.find_all(), key=lambda n: n.id.value):
            resources.append(
                Resource(
                    uri=note_uri(note.id),
                    mime_type="text/plain",
                    name=f"Note: {note.title}",
                    description=f"Note created on {note.created.isoformat()}",
                )
            )
        return resources

    def read_resource(self, uri: str) -> ResourceContent:
        self._logger.info(f"Reading resource: {uri}")

        if uri == INFO_URI:
            return ResourceContent(uri, "text/plain", self._server_info_text())
        if uri == CAPABILITIES_URI:
            return ResourceContent(uri, "application/json", self._capabilities_json())
        if uri.startswith(NOTE_URI_PREFIX):
            return self._read_note(uri)

        raise NotFoundError(f"Unknown resource: {uri}")

    def _read_note(self, uri: str) -> ResourceContent:
        suffix = uri[len(NOTE_URI_PREFIX) :]
        # int() accepts "+1", " 1" and non-ASCII digits; note ids are plain ASCII digits.
        if not (suffix.isascii() and suffix.isdecimal()):
            raise InvalidArgumentError(f"Invalid note URI: {uri}")
        note_id = NoteId(int(suffix))

        note = self._repository.find_by_id(note_id)
        if note is None:
            raise NotFoundError(f"Note not found: {note_id}")

        text = f"Title: {note.title}\nCreated: {note.created.isoformat()}\n\n{note.content}"
        return ResourceContent(uri, "text/plain", text)

    def _server_info_text(self) -> str:
        return (
            f"{self._server_name} v{self._server_version}\n\n"
            "This server demonstrates the core capabilities of the Model Context Protocol."
        )

    def _capabilities_json(self) -> str:
        return json.dumps(
            {
                "protocol": "Model Context Protocol (MCP)",
                "version": self._server_version,
                "features": {
                    "tools": "Execute functions with structured input/output",
                    "resources": "Access and read external data sources",
                    "prompts": "Use pre-configured prompt templates",
                },
                "transport": "stdio",
                "documentation": "https://modelcontextprotocol.io",
            },
            indent=2,
        )
