"""
Core application orchestrator.

This module provides the main application class that wires the catalog,
selection, weather service and fetch controller together for the UI layers.
"""

import logging
from typing import Optional, Tuple

from .conditions import animation_for, animation_frames, classify_condition
from .config_service import ConfigService
from .controller import WeatherFetchController
from .models import City, ConditionCategory, Country, FetchState, ViewMode, WeatherSnapshot
from .region_catalog import DEFAULT_CATALOG, RegionCatalog
from .selection_service import SelectionStore
from .weather_service import WeatherService

logger = logging.getLogger(__name__)


class WeatherApp:
    """Core application class that orchestrates all services."""

    def __init__(
        self,
        weather_service: Optional[WeatherService],
        catalog: RegionCatalog = DEFAULT_CATALOG,
    ):
        """Initialize the weather application."""
        self.catalog = catalog
        self.selection = SelectionStore(catalog)
        self.weather_service = weather_service
        self.controller = WeatherFetchController(self.selection, weather_service)

    @classmethod
    def from_config(cls, config: Optional[ConfigService] = None) -> "WeatherApp":
        """Build the application from environment settings."""
        config = config or ConfigService()
        if not config.api_key:
            logger.warning("WEATHER_API_KEY is not set; fetches will fail until it is configured.")
        service = WeatherService(config.api_key, config.api_url, config.request_timeout)
        return cls(service)

    # Selection
    def get_countries(self) -> Tuple[Country, ...]:
        return self.selection.countries

    def get_cities(self, country: str) -> Tuple[City, ...]:
        return self.selection.cities_for(country)

    def select_country(self, code: str) -> None:
        self.selection.set_country(code)

    def select_city(self, city_id: str) -> None:
        self.selection.set_city(city_id)

    def select(self, code: str, city_id: str) -> None:
        self.selection.select(code, city_id)

    # Fetch state
    @property
    def view_mode(self) -> ViewMode:
        return self.controller.view_mode

    @property
    def weather(self) -> Optional[WeatherSnapshot]:
        return self.controller.weather

    @property
    def error(self) -> Optional[str]:
        return self.controller.error

    def fetch_weather(self) -> FetchState:
        """Fetch weather for the current selection."""
        return self.controller.fetch_weather()

    def retry(self) -> FetchState:
        return self.controller.retry()

    def change_location(self) -> FetchState:
        return self.controller.change_location()

    def reset(self) -> FetchState:
        return self.controller.reset()

    # Presentation helpers
    def condition_class(self) -> Optional[ConditionCategory]:
        """Coarse class of the current result, if any."""
        if self.weather is None:
            return None
        return classify_condition(self.weather.condition_category)

    def animation_name(self) -> Optional[str]:
        if self.weather is None:
            return None
        return animation_for(self.weather.condition_category)

    def animation_frames(self) -> Tuple[str, ...]:
        if self.weather is None:
            return ()
        return animation_frames(self.weather.condition_category)
