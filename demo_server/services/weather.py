"""Weather query use case: geocode, fetch current conditions, interpret."""

from demo_server.domain.models import Weather
from demo_server.domain.rules import interpret_weather_code
from demo_server.domain.values import CityName
from demo_server.errors import GatewayError, NotFoundError
from demo_server.ports.outbound import Logger, WeatherGateway


class WeatherQueryService:
    def __init__(self, gateway: WeatherGateway, logger: Logger) -> None:
        self._gateway = gateway
        self._logger = logger

    def get_weather(self, city: CityName) -> Weather:
        self._logger.info(f"Fetching weather for city: {city}")
        try:
            location = self._gateway.geocode(city)
            self._logger.info(f"City located at coordinates: {location.coordinates}")
            reading = self._gateway.current_weather(location.coordinates)
        except NotFoundError:
            self._logger.warn(f"City not found: {city}")
            raise
        except GatewayError as exc:
            self._logger.error(f"Weather service error for {city}: {exc}", exc)
            raise GatewayError(f"Failed to fetch weather for {city}: {exc}") from exc

        weather = Weather(
            city=city,
            country=location.country,
            temperature=reading.temperature,
            condition=interpret_weather_code(reading.weather_code),
            wind_speed=reading.wind_speed,
        )
        self._logger.info(f"Successfully fetched weather for {city}")
        return weather
