"""Data models for the City Weather application."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional


@dataclass(frozen=True)
class Country:
    """A selectable country."""

    code: str
    display_name: str


@dataclass(frozen=True)
class City:
    """A selectable city within a country."""

    id: str
    display_name: str


class ViewMode(Enum):
    """Which screen the user is looking at."""

    SELECTING = "selecting"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


class ConditionCategory(Enum):
    """Coarse weather classes used to pick an animation."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"


@dataclass(frozen=True)
class WeatherSnapshot:
    """Represents the current weather for one city."""

    location_name: str
    temperature_c: float
    condition_summary: str
    condition_category: str
    humidity_pct: float
    wind_speed: float  # m/s

    def to_dict(self) -> Dict:
        """Convert to dictionary representation."""
        return {
            "location": self.location_name,
            "temp": self.temperature_c,
            "weather": self.condition_summary,
            "category": self.condition_category,
            "humidity": self.humidity_pct,
            "wind_speed": self.wind_speed,
        }


@dataclass(frozen=True)
class FetchState:
    """Snapshot of the fetch controller.

    The loading, error and result flags are all derived from ``mode`` so
    they can never describe two screens at once.
    """

    mode: ViewMode = ViewMode.SELECTING
    weather: Optional[WeatherSnapshot] = None
    error: Optional[str] = None
    request_id: int = 0

    @property
    def is_loading(self) -> bool:
        return self.mode is ViewMode.LOADING

    @property
    def has_error(self) -> bool:
        return self.mode is ViewMode.ERROR

    @property
    def has_result(self) -> bool:
        return self.mode is ViewMode.RESULT


# State transitions. Each returns a new FetchState.

def start_loading(state: FetchState) -> FetchState:
    """Selecting/Error/Result -> Loading, with a fresh request id."""
    return FetchState(mode=ViewMode.LOADING, request_id=state.request_id + 1)


def succeed(state: FetchState, weather: WeatherSnapshot) -> FetchState:
    """Loading -> Result."""
    return replace(state, mode=ViewMode.RESULT, weather=weather, error=None)


def fail(state: FetchState, message: str) -> FetchState:
    """Any -> Error. Drops any previous result."""
    return replace(state, mode=ViewMode.ERROR, weather=None, error=message)


def back_to_selecting(state: FetchState) -> FetchState:
    """Any -> Selecting. Leaving Loading makes any in-flight ticket stale."""
    return FetchState(mode=ViewMode.SELECTING, request_id=state.request_id)
