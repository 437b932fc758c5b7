"""Open-Meteo forecast API client for current conditions."""

import logging

import httpx

from clima.models.forecast import CurrentConditions
from clima.models.result import Err, ErrorKind, Ok, Outcome, error_message

logger = logging.getLogger(__name__)

FORECAST_BASE_URL = "https://api.open-meteo.com"
CURRENT_FIELDS = "temperature_2m,weather_code"


class ForecastClient:
    def __init__(self, base_url: str = FORECAST_BASE_URL, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def current(self, latitude: float, longitude: float) -> Outcome[CurrentConditions]:
        """Fetch current temperature (°C) and weather code for a coordinate."""
        url = f"{self.base_url}/v1/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_FIELDS,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Forecast API error for %s,%s: %s", latitude, longitude, e)
            return Err(ErrorKind.NETWORK_OR_UPSTREAM, error_message(e))
        except httpx.RequestError as e:
            logger.error("Forecast request failed for %s,%s: %s", latitude, longitude, e)
            return Err(ErrorKind.NETWORK_OR_UPSTREAM, error_message(e))
        except ValueError as e:
            logger.error("Forecast returned invalid JSON: %s", e)
            return Err(ErrorKind.NETWORK_OR_UPSTREAM, error_message(e))

        try:
            return Ok(_parse_current(data))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Malformed forecast payload for %s,%s: %r", latitude, longitude, e)
            return Err(
                ErrorKind.NETWORK_OR_UPSTREAM,
                f"Resposta inválida do serviço de previsão: {e}",
            )


def _parse_current(data: dict) -> CurrentConditions:
    current = data["current"]
    return CurrentConditions(
        temperature_2m=float(current["temperature_2m"]),
        weather_code=current.get("weather_code"),
    )
