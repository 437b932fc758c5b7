"""Observable view state for the lookup screen."""

from dataclasses import dataclass
from enum import StrEnum

from clima.models.weather import WeatherResult


class DisplayMode(StrEnum):
    INITIAL = "initial"
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"


@dataclass
class QueryState:
    input_text: str = ""
    input_focused: bool = True
    result: WeatherResult | None = None
    loading: bool = False
    error: str | None = None

    @property
    def display_mode(self) -> DisplayMode:
        """The single region shown on screen."""
        if self.loading:
            return DisplayMode.LOADING
        if self.error:
            return DisplayMode.ERROR
        if self.result is not None:
            return DisplayMode.RESULT
        return DisplayMode.INITIAL
