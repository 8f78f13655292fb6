"""Core business logic package.

This package contains the pure business logic separated from UI concerns.
"""

from .app import WeatherApp
from .config_service import ConfigService
from .controller import WeatherFetchController
from .exceptions import WeatherAppError
from .models import ViewMode, WeatherSnapshot
from .region_catalog import DEFAULT_CATALOG, RegionCatalog
from .selection_service import SelectionStore
from .weather_service import WeatherService

__all__ = [
    "WeatherApp",
    "ConfigService",
    "WeatherFetchController",
    "WeatherAppError",
    "ViewMode",
    "WeatherSnapshot",
    "DEFAULT_CATALOG",
    "RegionCatalog",
    "SelectionStore",
    "WeatherService",
]
