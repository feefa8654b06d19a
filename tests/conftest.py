"""Shared fixtures and in-memory doubles for the output ports."""

from __future__ import annotations

import io
import json
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from demo_server.adapters.memory import InMemoryNoteRepository
from demo_server.config import Settings
from demo_server.domain.values import (
    CityName,
    Coordinates,
    Temperature,
    WindSpeed,
)
from demo_server.errors import NotFoundError
from demo_server.main import build_server
from demo_server.ports.outbound import GeocodeResult, WeatherReading
from demo_server.protocol.server import McpServer

FIXED_NOW = datetime(2024, 11, 5, 12, 30, tzinfo=UTC)


class FixedClock:
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current


class FakeWeatherGateway:
    """Answers for Paris only; every other city is not found."""

    def __init__(self) -> None:
        self.geocoded: list[str] = []

    def geocode(self, city: CityName) -> GeocodeResult:
        self.geocoded.append(city.value)
        if city.value.lower() != "paris":
            raise NotFoundError(f"City not found: {city}")
        return GeocodeResult(Coordinates(48.85, 2.35), "France")

    def current_weather(self, coordinates: Coordinates) -> WeatherReading:
        return WeatherReading(Temperature(18.4), 3, WindSpeed(12.0))


@pytest.fixture()
def logger() -> MagicMock:
    """A stand-in for the Logger port that records every call."""
    return MagicMock()


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def repository() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture()
def server() -> McpServer:
    """A fully wired server with the weather gateway replaced by a fake."""
    return build_server(Settings(), weather_gateway=FakeWeatherGateway())


def run_lines(server: McpServer, *messages: dict | str) -> list[dict]:
    """Feed messages (dicts or raw lines) through the read loop, return responses."""
    lines = [m if isinstance(m, str) else json.dumps(m) for m in messages]
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    server.run(stdin, stdout)
    return [json.loads(line) for line in stdout.getvalue().splitlines()]


def call_tool(server: McpServer, name: str, arguments: dict | None = None, request_id=1) -> dict:
    """Send a single tools/call request and return the ``result`` object."""
    params: dict = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    response = server.handle_message(
        {"jsonrpc": "2.0", "id": request_id, "method": "tools/call", "params": params}
    )
    assert response is not None
    return response["result"]


def result_text(result: dict) -> str:
    return result["content"][0]["text"]
