"""JSON-RPC 2.0 envelope models, error codes and response builders."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from demo_server.errors import InvalidArgumentError

ModelT = TypeVar("ModelT", bound=BaseModel)

JSONRPC_VERSION = "2.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcError(Exception):
    """A protocol-level failure rendered as a JSON-RPC ``error`` object."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class MethodNotFoundError(JsonRpcError):
    def __init__(self, method: str) -> None:
        super().__init__(METHOD_NOT_FOUND, f"Method not found: {method}")


class JsonRpcRequest(BaseModel):
    """Envelope of an incoming request or notification.

    The id is not part of the model: it is taken from the raw object and
    echoed back untouched, whatever its JSON type.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: dict[str, Any] | None = None


def success_response(request_id: Any, result: dict[str, Any]) -> dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def format_validation_error(exc: ValidationError) -> str:
    """Compact ``field: message`` rendering of a pydantic error."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def parse_params(model: type[ModelT], params: dict[str, Any], method: str) -> ModelT:
    """Validate method params, raising ``InvalidArgumentError`` on failure."""
    try:
        return model.model_validate(params)
    except ValidationError as exc:
        raise InvalidArgumentError(
            f"Invalid params for {method}: {format_validation_error(exc)}"
        ) from exc
