"""Open-Meteo current conditions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentConditions:
    temperature_2m: float
    weather_code: int | None  # raw upstream value, not yet validated
