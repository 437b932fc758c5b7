"""Open-Meteo weather codes, display descriptors and lookup results."""

import math
from dataclasses import dataclass
from enum import IntEnum


class WeatherCode(IntEnum):
    CLEAR_SKY = 0
    MAINLY_CLEAR = 1
    PARTLY_CLOUDY = 2
    OVERCAST = 3
    FOG = 45
    LIGHT_DRIZZLE = 51
    LIGHT_RAIN = 61
    MODERATE_RAIN = 63
    HEAVY_RAIN = 65
    LIGHT_SHOWERS = 80
    THUNDERSTORM = 95


@dataclass(frozen=True)
class WeatherDescriptor:
    name: str
    icon: str


WEATHER_DESCRIPTORS: dict[WeatherCode, WeatherDescriptor] = {
    WeatherCode.CLEAR_SKY: WeatherDescriptor("Céu Limpo", "weather-sunny"),
    WeatherCode.MAINLY_CLEAR: WeatherDescriptor("Quase Limpo", "weather-partly-cloudy"),
    WeatherCode.PARTLY_CLOUDY: WeatherDescriptor(
        "Parcialmente Nublado", "weather-partly-cloudy"
    ),
    WeatherCode.OVERCAST: WeatherDescriptor("Nublado", "weather-cloudy"),
    WeatherCode.FOG: WeatherDescriptor("Nevoeiro", "weather-fog"),
    WeatherCode.LIGHT_DRIZZLE: WeatherDescriptor("Garoa Leve", "weather-rainy"),
    WeatherCode.LIGHT_RAIN: WeatherDescriptor("Chuva Leve", "weather-pouring"),
    WeatherCode.MODERATE_RAIN: WeatherDescriptor("Chuva Moderada", "weather-pouring"),
    WeatherCode.HEAVY_RAIN: WeatherDescriptor("Chuva Forte", "weather-pouring"),
    WeatherCode.LIGHT_SHOWERS: WeatherDescriptor(
        "Pancadas Leves", "weather-lightning-rainy"
    ),
    WeatherCode.THUNDERSTORM: WeatherDescriptor("Trovoada", "weather-lightning"),
}


def coerce_weather_code(value: object) -> WeatherCode:
    """Map a raw upstream code onto WeatherCode, degrading to CLEAR_SKY."""
    if isinstance(value, bool):
        return WeatherCode.CLEAR_SKY
    try:
        return WeatherCode(value)
    except (ValueError, TypeError):
        return WeatherCode.CLEAR_SKY


def describe(code: WeatherCode) -> WeatherDescriptor:
    return WEATHER_DESCRIPTORS[code]


def round_temperature(value: float) -> int:
    """Round half up: 18.5 -> 19, -2.5 -> -2."""
    return math.floor(value + 0.5)


def build_location_label(name: str, admin1: str | None) -> str:
    if admin1:
        return f"{name}, {admin1}"
    return name


@dataclass(frozen=True)
class WeatherResult:
    location_label: str
    temperature_celsius: int
    code: WeatherCode

    def __post_init__(self) -> None:
        if not self.location_label:
            raise ValueError("location_label must not be empty")

    @property
    def descriptor(self) -> WeatherDescriptor:
        return describe(self.code)
