"""Entry point: wire the adapters, services and protocol handlers, then serve.

Run with ``python -m demo_server.main`` or the ``mcp-demo-server`` script.
Responses go to stdout; all logging goes to stderr.
"""

from __future__ import annotations

import io
import logging
import sys

from demo_server.adapters.filesystem import LocalFileSystem
from demo_server.adapters.memory import InMemoryNoteRepository
from demo_server.adapters.system import StdlibLogger, SystemClock
from demo_server.adapters.weather import OpenMeteoWeatherGateway
from demo_server.config import Settings, settings
from demo_server.ports.outbound import WeatherGateway
from demo_server.protocol.prompts import PromptHandler
from demo_server.protocol.resources import ResourceHandler
from demo_server.protocol.server import McpServer
from demo_server.protocol.tools import ToolHandler
from demo_server.services.calculation import CalculationService
from demo_server.services.files import FileService
from demo_server.services.notes import NoteService
from demo_server.services.prompts import PromptService
from demo_server.services.resources import ResourceService
from demo_server.services.weather import WeatherQueryService

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

logger = logging.getLogger("demo_server")


def configure_logging(config: Settings) -> None:
    """Log to stderr, plus a side file when ``log_file`` is set."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=config.log_level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_server(
    config: Settings,
    weather_gateway: WeatherGateway | None = None,
) -> McpServer:
    """Assemble the server. One repository instance is shared by every service."""
    repository = InMemoryNoteRepository()
    clock = SystemClock()
    app_logger = StdlibLogger("demo_server.app")
    if weather_gateway is None:
        weather_gateway = OpenMeteoWeatherGateway(
            geocoding_url=config.geocoding_url,
            forecast_url=config.forecast_url,
            timeout=config.http_timeout,
        )

    tools = ToolHandler(
        calculation=CalculationService(app_logger),
        notes=NoteService(repository, clock, app_logger),
        weather=WeatherQueryService(weather_gateway, app_logger),
        files=FileService(LocalFileSystem(), app_logger),
    )
    resources = ResourceHandler(
        ResourceService(repository, app_logger, config.server_name, config.server_version)
    )
    prompts = PromptHandler(PromptService(repository, app_logger))

    return McpServer(
        tools,
        resources,
        prompts,
        server_name=config.server_name,
        server_version=config.server_version,
        protocol_version=config.protocol_version,
    )


def main() -> int:
    configure_logging(settings)
    # The protocol is UTF-8 regardless of the platform locale. Undecodable
    # input bytes become U+FFFD so the line fails JSON parsing and is skipped.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8")

    weather_gateway = OpenMeteoWeatherGateway(
        geocoding_url=settings.geocoding_url,
        forecast_url=settings.forecast_url,
        timeout=settings.http_timeout,
    )
    server = build_server(settings, weather_gateway=weather_gateway)
    try:
        server.run(sys.stdin, sys.stdout)
    except OSError as exc:
        logger.critical("I/O error on the protocol stream: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        weather_gateway.close()
    return 0


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
