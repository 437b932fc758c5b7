"""Top-level lookup screen: owns its state for the lifetime of one session."""

import logging
from collections.abc import Callable

from clima.config.schema import ClimaConfig
from clima.ingest.forecast_client import ForecastClient
from clima.ingest.geocoding_client import GeocodingClient
from clima.lookup.flow import WeatherLookup
from clima.models.state import QueryState
from clima.reporting.formatters import format_state_text
from clima.storage.last_city import LastCityStore

logger = logging.getLogger(__name__)

Renderer = Callable[[str], None]


class WeatherView:
    def __init__(self, lookup: WeatherLookup, renderer: Renderer | None = None):
        self.lookup = lookup
        self.renderer = renderer
        self._mounted = False
        self._last_rendered: str | None = None

    @classmethod
    def from_config(
        cls, config: ClimaConfig, renderer: Renderer | None = None
    ) -> "WeatherView":
        api = config.api
        geocoder = GeocodingClient(
            base_url=api.geocoding_base_url,
            language=api.language,
            timeout=api.timeout_seconds,
        )
        forecaster = ForecastClient(
            base_url=api.forecast_base_url, timeout=api.timeout_seconds
        )
        store = LastCityStore(config.storage.db_path)
        return cls(WeatherLookup(geocoder, forecaster, store, QueryState()), renderer)

    @property
    def state(self) -> QueryState:
        return self.lookup.state

    async def mount(self, restore: bool = True) -> None:
        """Attach the renderer and, optionally, look up the last saved city."""
        self._mounted = True
        logger.debug("View mounted (restore=%s)", restore)
        self.lookup.on_change = self._on_change
        self._on_change(self.state)
        if restore:
            await self.lookup.restore_last_city()

    def unmount(self) -> None:
        self._mounted = False
        self.lookup.on_change = None

    def type_text(self, text: str) -> None:
        self.state.input_text = text
        self.state.input_focused = True

    async def submit(self, text: str | None = None) -> None:
        """Enter key and search button both land here."""
        if text is not None:
            self.type_text(text)
        await self.lookup.lookup(self.state.input_text)

    def render(self) -> str:
        return format_state_text(self.state)

    def _on_change(self, state: QueryState) -> None:
        if not self._mounted or self.renderer is None:
            return
        text = format_state_text(state)
        if text != self._last_rendered:
            self._last_rendered = text
            self.renderer(text)
