"""The search-and-render flow: city text in, WeatherResult or error out.

Every invocation takes a ticket from a monotonically increasing counter.
Only the lookup holding the latest ticket may touch the state or the store
once its network calls resolve, so a slow earlier answer can never replace
a faster later one.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from clima.models.forecast import CurrentConditions
from clima.models.location import GeoCandidate
from clima.models.result import Err, ErrorKind, Outcome, error_message
from clima.models.state import QueryState
from clima.models.weather import (
    WeatherResult,
    build_location_label,
    coerce_weather_code,
    round_temperature,
)

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    async def search(self, name: str) -> Outcome[GeoCandidate]: ...


class Forecaster(Protocol):
    async def current(
        self, latitude: float, longitude: float
    ) -> Outcome[CurrentConditions]: ...


class CityStore(Protocol):
    async def read(self) -> Outcome[str | None]: ...

    async def write(self, city: str) -> Outcome[None]: ...


StateListener = Callable[[QueryState], None]


class WeatherLookup:
    def __init__(
        self,
        geocoder: Geocoder,
        forecaster: Forecaster,
        store: CityStore,
        state: QueryState | None = None,
        on_change: StateListener | None = None,
    ):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.store = store
        self.state = state if state is not None else QueryState()
        self.on_change = on_change
        self._issued = 0
        self._write_lock = asyncio.Lock()

    async def lookup(self, city_query: str) -> None:
        city = city_query.strip()
        if not city:
            return

        self._issued += 1
        ticket = self._issued

        self.state.loading = True
        self.state.error = None
        self.state.result = None
        self.state.input_focused = False
        self._notify()

        try:
            outcome = await self._fetch(city)
        except Exception as e:
            logger.exception("Lookup #%d for %r crashed", ticket, city)
            outcome = Err(ErrorKind.NETWORK_OR_UPSTREAM, error_message(e))

        try:
            if not self._is_current(ticket):
                logger.debug("Discarding stale lookup #%d for %r", ticket, city)
                return
            if isinstance(outcome, Err):
                self.state.error = outcome.message
                return
            self.state.result = outcome
            self.state.error = None
            self.state.loading = False
            self._notify()
            await self._remember(city, ticket)
        finally:
            if self._is_current(ticket):
                self.state.loading = False
                self.state.input_text = ""
                self._notify()

    async def restore_last_city(self) -> None:
        """Look up the persisted city, if any. Storage failures are only logged."""
        try:
            stored = await self.store.read()
        except Exception:
            logger.exception("Reading last city failed, starting empty")
            return
        if isinstance(stored, Err):
            logger.warning("Ignoring unreadable last city: %s", stored.message)
            return
        if stored.value:
            logger.info("Restoring last city %r", stored.value)
            await self.lookup(stored.value)

    async def _fetch(self, city: str) -> WeatherResult | Err:
        geo = await self.geocoder.search(city)
        if isinstance(geo, Err):
            return geo
        candidate = geo.value

        current = await self.forecaster.current(candidate.latitude, candidate.longitude)
        if isinstance(current, Err):
            return current
        conditions = current.value

        code = coerce_weather_code(conditions.weather_code)
        if code != conditions.weather_code:
            logger.info(
                "Unrecognized weather code %r for %s, using %d",
                conditions.weather_code, candidate.name, code,
            )
        return WeatherResult(
            location_label=build_location_label(candidate.name, candidate.admin1),
            temperature_celsius=round_temperature(conditions.temperature_2m),
            code=code,
        )

    async def _remember(self, city: str, ticket: int) -> None:
        async with self._write_lock:
            # a newer lookup may have published while we waited
            if not self._is_current(ticket):
                logger.debug("Not saving stale lookup #%d for %r", ticket, city)
                return
            try:
                saved = await self.store.write(city)
            except Exception:
                logger.exception("Saving last city %r failed", city)
                return
        if isinstance(saved, Err):
            logger.warning("Last city not saved: %s", saved.message)

    def _is_current(self, ticket: int) -> bool:
        return ticket == self._issued

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)
