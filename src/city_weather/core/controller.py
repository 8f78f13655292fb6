"""
Weather fetch controller.

Drives the Selecting -> Loading -> Result/Error screens for a single
location at a time. Every fetch is tagged with a request id; responses for
a request that is no longer current are dropped.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import MissingCredential, WeatherAPIError
from .models import (
    FetchState,
    ViewMode,
    WeatherSnapshot,
    back_to_selecting,
    fail,
    start_loading,
    succeed,
)
from .selection_service import SelectionStore
from .weather_service import WeatherService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchTicket:
    """Identifies one outbound request."""

    request_id: int
    country: str
    city: str


class WeatherFetchController:
    """Orchestrates weather requests and the current view mode."""

    def __init__(self, selection: SelectionStore, weather_service: Optional[WeatherService]):
        self.selection = selection
        self.weather_service = weather_service
        self.state = FetchState()
        self._last_location = None

    @property
    def view_mode(self) -> ViewMode:
        return self.state.mode

    @property
    def weather(self) -> Optional[WeatherSnapshot]:
        return self.state.weather

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def has_credential(self) -> bool:
        return bool(self.weather_service and self.weather_service.api_key)

    def begin_fetch(self, country: str, city: str) -> FetchTicket:
        """Enter Loading for a new request and return its ticket."""
        self._last_location = (country, city)
        self.state = start_loading(self.state)
        logger.debug(f"Request {self.state.request_id} started for {city}, {country}")
        return FetchTicket(self.state.request_id, country, city)

    def is_current(self, ticket: FetchTicket) -> bool:
        return self.state.is_loading and ticket.request_id == self.state.request_id

    def complete_fetch(self, ticket: FetchTicket, weather: WeatherSnapshot) -> bool:
        """Store a successful result. Returns False if the ticket was superseded."""
        if not self.is_current(ticket):
            logger.debug(f"Dropping stale response for request {ticket.request_id}")
            return False
        self.state = succeed(self.state, weather)
        return True

    def fail_fetch(self, ticket: FetchTicket, message: str) -> bool:
        """Store an error message. Returns False if the ticket was superseded."""
        if not self.is_current(ticket):
            logger.debug(f"Dropping stale failure for request {ticket.request_id}")
            return False
        self.state = fail(self.state, message)
        return True

    def fetch_weather(self, country: Optional[str] = None, city: Optional[str] = None) -> FetchState:
        """Fetch current weather for a location, defaulting to the current selection."""
        country = country or self.selection.selected_country
        city = city or self.selection.selected_city

        if not self.has_credential:
            self._last_location = (country, city)
            error = MissingCredential()
            logger.error("Weather fetch aborted: no API key configured.")
            self.state = fail(self.state, error.message)
            return self.state

        ticket = self.begin_fetch(country, city)
        try:
            weather = self.weather_service.get_current_weather(country, city)
        except WeatherAPIError as e:
            logger.warning(f"Weather fetch for {city}, {country} failed: {e}")
            self.fail_fetch(ticket, e.message)
        else:
            logger.debug(f"Weather fetch for {city}, {country} succeeded")
            self.complete_fetch(ticket, weather)
        return self.state

    def retry(self) -> FetchState:
        """Repeat the last attempted fetch."""
        if self._last_location is None:
            return self.fetch_weather()
        return self.fetch_weather(*self._last_location)

    def change_location(self) -> FetchState:
        """Return to the selection screen, keeping the current selection."""
        self.state = back_to_selecting(self.state)
        return self.state

    def reset(self) -> FetchState:
        """Return to the selection screen with the default country and city."""
        self.state = back_to_selecting(self.state)
        self.selection.reset()
        self._last_location = None
        return self.state
