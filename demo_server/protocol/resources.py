"""``resources/list`` and ``resources/read``."""

from typing import Any

from pydantic import BaseModel

from demo_server.ports.inbound import ResourceQueryUseCase
from demo_server.protocol.jsonrpc import parse_params


class ReadResourceParams(BaseModel):
    uri: str


class ResourceHandler:
    def __init__(self, resources: ResourceQueryUseCase) -> None:
        self._resources = resources

    def list_resources(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return {
            "resources": [
                {
                    "uri": resource.uri,
                    "name": resource.name,
                    "description": resource.description,
                    "mimeType": resource.mime_type,
                }
                for resource in self._resources.list_resources()
            ]
        }

    def read_resource(self, params: dict[str, Any]) -> dict[str, Any]:
        request = parse_params(ReadResourceParams, params, "resources/read")
        content = self._resources.read_resource(request.uri)
        return {
            "contents": [
                {"uri": content.uri, "mimeType": content.mime_type, "text": content.text}
            ]
        }
