"""Stateless domain rules: path safety and WMO weather code interpretation."""

from demo_server.domain.values import FilePath
from demo_server.errors import InvalidArgumentError

PROTECTED_PREFIXES = ("/etc", "/sys", "/proc")

# WMO weather interpretation codes as reported by Open-Meteo.
_WEATHER_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Partly cloudy",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    61: "Rain",
    63: "Rain",
    65: "Rain",
    71: "Snow",
    73: "Snow",
    75: "Snow",
    77: "Snow grains",
    80: "Rain showers",
    81: "Rain showers",
    82: "Rain showers",
    85: "Snow showers",
    86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}


def validate_safe_path(path: FilePath) -> None:
    """Reject traversal and system-directory paths. Performs no I/O."""
    value = path.value
    if ".." in value:
        raise InvalidArgumentError(f"Path traversal is not allowed: {value}")
    if value.startswith(PROTECTED_PREFIXES):
        raise InvalidArgumentError(
            f"Access to system directories is not allowed: {value}"
        )


def interpret_weather_code(code: int) -> str:
    """Translate a WMO weather code into a short description."""
    return _WEATHER_CONDITIONS.get(code, "Unknown")
