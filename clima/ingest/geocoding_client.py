"""Open-Meteo geocoding API client."""

import logging

import httpx

from clima.models.location import GeoCandidate
from clima.models.result import (
    NOT_FOUND_MESSAGE,
    Err,
    ErrorKind,
    Ok,
    Outcome,
    error_message,
)

logger = logging.getLogger(__name__)

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com"
RESULT_COUNT = 1  # only the first candidate is ever used


class GeocodingClient:
    def __init__(
        self,
        base_url: str = GEOCODING_BASE_URL,
        language: str = "pt",
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.timeout = timeout

    async def search(self, name: str) -> Outcome[GeoCandidate]:
        """Resolve a place name to its first candidate.

        An absent or empty ``results`` list is a NOT_FOUND error; transport
        failures, non-2xx responses and malformed bodies are upstream errors.
        """
        url = f"{self.base_url}/v1/search"
        params = {"name": name, "language": self.language, "count": RESULT_COUNT}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Geocoding API error for name=%r: %s", name, e)
            return Err(ErrorKind.NETWORK_OR_UPSTREAM, error_message(e))
        except httpx.RequestError as e:
            logger.error("Geocoding request failed for name=%r: %s", name, e)
            return Err(ErrorKind.NETWORK_OR_UPSTREAM, error_message(e))
        except ValueError as e:
            logger.error("Geocoding returned invalid JSON for name=%r: %s", name, e)
            return Err(ErrorKind.NETWORK_OR_UPSTREAM, error_message(e))

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            logger.info("No geocoding match for name=%r", name)
            return Err(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        try:
            return Ok(_parse_candidate(results[0]))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Malformed geocoding candidate for name=%r: %r", name, e)
            return Err(
                ErrorKind.NETWORK_OR_UPSTREAM,
                f"Resposta inválida do serviço de geocodificação: {e}",
            )


def _parse_candidate(raw: dict) -> GeoCandidate:
    name = raw["name"]
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"candidate name {name!r}")
    admin1 = raw.get("admin1")
    return GeoCandidate(
        latitude=float(raw["latitude"]),
        longitude=float(raw["longitude"]),
        name=name,
        admin1=str(admin1) if admin1 else None,
    )
