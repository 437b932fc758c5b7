"""Output formatters for the lookup screen."""

import json

from clima.models.state import DisplayMode, QueryState
from clima.models.weather import WeatherResult

ICON_GLYPHS: dict[str, str] = {
    "weather-sunny": "☀️",
    "weather-partly-cloudy": "⛅",
    "weather-cloudy": "☁️",
    "weather-fog": "🌫️",
    "weather-rainy": "🌦️",
    "weather-pouring": "🌧️",
    "weather-lightning-rainy": "⛈️",
    "weather-lightning": "🌩️",
}

INITIAL_HINT = "Digite uma cidade..."
LOADING_TEXT = "Carregando..."


def icon_glyph(icon: str) -> str:
    return ICON_GLYPHS.get(icon, "?")


def format_result_text(result: WeatherResult) -> str:
    descriptor = result.descriptor
    return "\n".join([
        result.location_label,
        f"{icon_glyph(descriptor.icon)}  {result.temperature_celsius}°C",
        descriptor.name,
    ])


def format_state_text(state: QueryState) -> str:
    """Plain text for whichever region the state currently shows."""
    mode = state.display_mode
    if mode == DisplayMode.LOADING:
        return LOADING_TEXT
    if mode == DisplayMode.ERROR:
        return f"Erro: {state.error}"
    if mode == DisplayMode.RESULT:
        assert state.result is not None
        return format_result_text(state.result)
    return INITIAL_HINT


def format_result_json(result: WeatherResult) -> str:
    """JSON result for programmatic consumption."""
    descriptor = result.descriptor
    data = {
        "location": result.location_label,
        "temperature_celsius": result.temperature_celsius,
        "code": int(result.code),
        "condition": descriptor.name,
        "icon": descriptor.icon,
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
