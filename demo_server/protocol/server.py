"""Stdio JSON-RPC dispatcher.

Reads one JSON object per line, routes requests by method name and writes one
JSON object per response line. Notifications (messages without an ``id``)
never produce output. Logging goes through :mod:`logging` and must be
configured to a stream other than the protocol output.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TextIO

from pydantic import ValidationError

from demo_server.errors import DemoServerError
from demo_server.protocol.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    JsonRpcError,
    JsonRpcRequest,
    MethodNotFoundError,
    error_response,
    format_validation_error,
    success_response,
)
from demo_server.protocol.prompts import PromptHandler
from demo_server.protocol.resources import ResourceHandler
from demo_server.protocol.tools import ToolHandler

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
INITIALIZED_NOTIFICATION = "notifications/initialized"

Handler = Callable[[dict[str, Any]], dict[str, Any]]


class McpServer:
    """Line-oriented JSON-RPC server over a pair of text streams."""

    def __init__(
        self,
        tools: ToolHandler,
        resources: ResourceHandler,
        prompts: PromptHandler,
        server_name: str,
        server_version: str,
        protocol_version: str = PROTOCOL_VERSION,
    ) -> None:
        self._server_name = server_name
        self._server_version = server_version
        self._protocol_version = protocol_version
        self._routes: dict[str, Handler] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": tools.list_tools,
            "tools/call": tools.call_tool,
            "resources/list": resources.list_resources,
            "resources/read": resources.read_resource,
            "prompts/list": prompts.list_prompts,
            "prompts/get": prompts.get_prompt,
        }

    # ------------------------------------------------------------------
    # Read loop
    # ------------------------------------------------------------------

    def run(self, stdin: TextIO, stdout: TextIO) -> None:
        """Serve until end of input.

        ``OSError`` raised by *stdin* propagates to the caller, which treats
        it as fatal.
        """
        logger.info(
            "Starting %s %s (protocol %s) on stdio",
            self._server_name,
            self._server_version,
            self._protocol_version,
        )
        while True:
            line = stdin.readline()
            if not line:
                break
            if not line.strip():
                continue
            response = self.handle_line(line)
            if response is not None:
                stdout.write(json.dumps(response) + "\n")
                stdout.flush()
        logger.info("End of input, shutting down")

    def handle_line(self, line: str) -> dict[str, Any] | None:
        """Process one input line; return the response, or None if none is due."""
        try:
            message = json.loads(line)
        except json.JSONDecodeError as exc:
            logger.warning("Invalid JSON (%s), skipping line: %.200s", exc, line.rstrip())
            return None
        if not isinstance(message, dict):
            logger.warning("Expected a JSON object, skipping line: %.200s", line.rstrip())
            return None
        return self.handle_message(message)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def handle_message(self, message: dict[str, Any]) -> dict[str, Any] | None:
        if "id" not in message:
            self._handle_notification(message)
            return None

        request_id = message["id"]
        try:
            request = JsonRpcRequest.model_validate(message)
        except ValidationError as exc:
            logger.warning("Invalid request id=%r: %s", request_id, exc)
            return error_response(
                request_id,
                INVALID_REQUEST,
                f"Invalid Request: {format_validation_error(exc)}",
            )

        method = request.method
        logger.info("Request id=%r method=%s", request_id, method)
        try:
            handler = self._route(method)
            result = handler(request.params or {})
        except JsonRpcError as exc:
            logger.warning("%s (id=%r)", exc.message, request_id)
            return error_response(request_id, exc.code, exc.message)
        except DemoServerError as exc:
            logger.warning("%s failed (id=%r): %s", method, request_id, exc)
            return error_response(request_id, INTERNAL_ERROR, str(exc))
        except Exception as exc:
            logger.exception("Unhandled error in %s (id=%r)", method, request_id)
            return error_response(request_id, INTERNAL_ERROR, f"Internal error: {exc}")
        return success_response(request_id, result)

    def _route(self, method: str) -> Handler:
        handler = self._routes.get(method)
        if handler is None:
            raise MethodNotFoundError(method)
        return handler

    def _handle_notification(self, message: dict[str, Any]) -> None:
        method = message.get("method")
        if method == INITIALIZED_NOTIFICATION:
            logger.info("Client initialization complete")
        else:
            logger.debug("Ignoring notification: %r", method)

    # ------------------------------------------------------------------
    # Lifecycle methods
    # ------------------------------------------------------------------

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        client = params.get("clientInfo") or {}
        logger.info(
            "Initialize from client %s, protocol version %s",
            client.get("name", "unknown") if isinstance(client, dict) else "unknown",
            self._protocol_version,
        )
        return {
            "protocolVersion": self._protocol_version,
            "serverInfo": {"name": self._server_name, "version": self._server_version},
            "capabilities": {"tools": {}, "resources": {}, "prompts": {}},
        }

    def _ping(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}
