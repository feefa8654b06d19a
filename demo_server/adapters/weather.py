"""Open-Meteo weather gateway.

Two HTTP calls per lookup: the geocoding API resolves a city name to
coordinates and a country, then the forecast API returns current conditions.
Both calls are bounded by ``timeout``; every failure is raised as
``GatewayError`` (or ``NotFoundError`` for an unknown city).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from demo_server.domain.values import (
    CityName,
    Coordinates,
    Temperature,
    WindSpeed,
)
from demo_server.errors import GatewayError, InvalidArgumentError, NotFoundError
from demo_server.ports.outbound import GeocodeResult, WeatherReading

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
REQUEST_TIMEOUT = 10.0  # seconds
USER_AGENT = "mcp-demo-server/1.0"

# ---------------------------------------------------------------------------
# Upstream payloads
# ---------------------------------------------------------------------------


class _GeocodingHit(BaseModel):
    latitude: float
    longitude: float
    country: str = "Unknown"


class _GeocodingResponse(BaseModel):
    results: list[_GeocodingHit] = Field(default_factory=list)


class _CurrentConditions(BaseModel):
    temperature_2m: float
    weather_code: int
    wind_speed_10m: float


class _ForecastResponse(BaseModel):
    current: _CurrentConditions


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------


class OpenMeteoWeatherGateway:
    """:class:`WeatherGateway` backed by the public Open-Meteo APIs."""

    def __init__(
        self,
        geocoding_url: str = GEOCODING_URL,
        forecast_url: str = FORECAST_URL,
        timeout: float = REQUEST_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self._geocoding_url = geocoding_url
        self._forecast_url = forecast_url
        self._timeout = timeout
        self._client = client or httpx.Client(
            timeout=timeout, headers={"User-Agent": USER_AGENT}
        )

    def close(self) -> None:
        self._client.close()

    def geocode(self, city: CityName) -> GeocodeResult:
        payload = self._get_json(
            self._geocoding_url,
            {"name": city.value, "count": 1, "language": "en", "format": "json"},
            what="Geocoding",
        )
        try:
            data = _GeocodingResponse.model_validate(payload)
        except ValidationError as exc:
            raise GatewayError("Geocoding service returned an unexpected payload") from exc

        if not data.results:
            raise NotFoundError(f"City not found: {city}")

        hit = data.results[0]
        try:
            coordinates = Coordinates(hit.latitude, hit.longitude)
        except InvalidArgumentError as exc:
            raise GatewayError(f"Geocoding service returned invalid coordinates: {exc}") from exc
        return GeocodeResult(coordinates=coordinates, country=hit.country)

    def current_weather(self, coordinates: Coordinates) -> WeatherReading:
        payload = self._get_json(
            self._forecast_url,
            {
                "latitude": f"{coordinates.latitude:.2f}",
                "longitude": f"{coordinates.longitude:.2f}",
                "current": "temperature_2m,weather_code,wind_speed_10m",
                "temperature_unit": "celsius",
            },
            what="Weather",
        )
        try:
            current = _ForecastResponse.model_validate(payload).current
            return WeatherReading(
                temperature=Temperature(current.temperature_2m),
                weather_code=current.weather_code,
                wind_speed=WindSpeed(current.wind_speed_10m),
            )
        except (ValidationError, InvalidArgumentError) as exc:
            raise GatewayError("Weather service returned an unexpected payload") from exc

    def _get_json(self, url: str, params: dict[str, Any], what: str) -> Any:
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self._client.get(url, params=params, timeout=self._timeout)
        except httpx.TimeoutException as exc:
            raise GatewayError(
                f"{what} request timed out ({self._timeout:g}s limit)"
            ) from exc
        except httpx.HTTPError as exc:
            raise GatewayError(f"Network error during {what.lower()} request: {exc}") from exc

        if resp.status_code != 200:
            raise GatewayError(f"{what} service returned HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as exc:
            raise GatewayError(f"{what} service returned malformed JSON") from exc
