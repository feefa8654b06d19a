"""Server configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from demo_server.adapters.weather import FORECAST_URL, GEOCODING_URL, REQUEST_TIMEOUT
from demo_server.protocol.server import PROTOCOL_VERSION


class Settings(BaseSettings):
    """Application settings loaded from ``DEMO_SERVER_*`` variables or a .env file."""

    model_config = {
        "env_prefix": "DEMO_SERVER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Server identity
    server_name: str = "mcp-demo-server"
    server_version: str = "1.0.0"
    protocol_version: str = PROTOCOL_VERSION

    # Logging (always stderr; optionally also a side file)
    log_level: str = "INFO"
    log_file: str | None = None

    # Open-Meteo
    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    http_timeout: float = REQUEST_TIMEOUT


settings = Settings()
