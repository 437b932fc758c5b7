"""Tests for the geocoding client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from clima.ingest.geocoding_client import GeocodingClient
from clima.models.location import GeoCandidate
from clima.models.result import (
    GENERIC_ERROR_MESSAGE,
    NOT_FOUND_MESSAGE,
    Err,
    ErrorKind,
    Ok,
)

SEARCH_URL = "https://test-geo.example.com/v1/search"


@pytest.fixture
def geo() -> GeocodingClient:
    return GeocodingClient(base_url="https://test-geo.example.com/")


class TestSearch:
    @respx.mock
    def test_success(self, geo: GeocodingClient, berlin_geocoding: dict):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=berlin_geocoding)
        )

        outcome = asyncio.run(geo.search("Berlin"))
        assert outcome == Ok(GeoCandidate(52.52, 13.405, "Berlin", "Berlin"))

    @respx.mock
    def test_query_params(self, geo: GeocodingClient, berlin_geocoding: dict):
        route = respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=berlin_geocoding)
        )

        asyncio.run(geo.search("São Paulo"))
        params = route.calls[0].request.url.params
        assert params["name"] == "São Paulo"
        assert params["language"] == "pt"
        assert params["count"] == "1"

    @respx.mock
    def test_missing_admin1(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(
                200,
                json={"results": [{"latitude": 35.69, "longitude": 139.69, "name": "Tokyo"}]},
            )
        )

        outcome = asyncio.run(geo.search("Tokyo"))
        assert isinstance(outcome, Ok)
        assert outcome.value.admin1 is None

    @respx.mock
    def test_no_results_key(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"generationtime_ms": 0.4})
        )

        outcome = asyncio.run(geo.search("Xyzzyville"))
        assert outcome == Err(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

    @respx.mock
    def test_empty_results(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"results": []})
        )

        outcome = asyncio.run(geo.search("Xyzzyville"))
        assert outcome == Err(ErrorKind.NOT_FOUND, "Cidade não encontrada")

    @respx.mock
    def test_http_error(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(500))

        outcome = asyncio.run(geo.search("Berlin"))
        assert isinstance(outcome, Err)
        assert outcome.kind == ErrorKind.NETWORK_OR_UPSTREAM
        assert "500" in outcome.message

    @respx.mock
    def test_connect_error(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(side_effect=httpx.ConnectError("Network is unreachable"))

        outcome = asyncio.run(geo.search("Berlin"))
        assert outcome == Err(ErrorKind.NETWORK_OR_UPSTREAM, "Network is unreachable")

    @respx.mock
    def test_error_without_text_uses_fallback(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(side_effect=httpx.ReadTimeout(""))

        outcome = asyncio.run(geo.search("Berlin"))
        assert outcome == Err(ErrorKind.NETWORK_OR_UPSTREAM, GENERIC_ERROR_MESSAGE)

    @respx.mock
    def test_invalid_json(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, text="<html>"))

        outcome = asyncio.run(geo.search("Berlin"))
        assert isinstance(outcome, Err)
        assert outcome.kind == ErrorKind.NETWORK_OR_UPSTREAM

    @respx.mock
    def test_candidate_missing_coordinates(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"results": [{"name": "Nowhere"}]})
        )

        outcome = asyncio.run(geo.search("Nowhere"))
        assert isinstance(outcome, Err)
        assert outcome.kind == ErrorKind.NETWORK_OR_UPSTREAM

    @respx.mock
    def test_candidate_null_name(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(
                200, json={"results": [{"latitude": 1, "longitude": 2, "name": None}]}
            )
        )

        outcome = asyncio.run(geo.search("x"))
        assert isinstance(outcome, Err)
        assert outcome.kind == ErrorKind.NETWORK_OR_UPSTREAM
        assert outcome.message.startswith("Resposta inválida do serviço de geocodificação")

    @respx.mock
    def test_candidate_empty_name(self, geo: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(
                200, json={"results": [{"latitude": 1, "longitude": 2, "name": ""}]}
            )
        )

        outcome = asyncio.run(geo.search("x"))
        assert isinstance(outcome, Err)
        assert outcome.kind == ErrorKind.NETWORK_OR_UPSTREAM
        assert outcome.message.startswith("Resposta inválida do serviço de geocodificação")
