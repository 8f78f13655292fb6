"""
Core selection service module.

Holds the user's current country and city. The city always belongs to the
selected country.
"""

import logging
from typing import Tuple

from .exceptions import InvalidSelection
from .models import City, Country
from .region_catalog import DEFAULT_CATALOG, RegionCatalog

logger = logging.getLogger(__name__)


class SelectionStore:
    """Current country/city selection backed by a region catalog."""

    def __init__(self, catalog: RegionCatalog = DEFAULT_CATALOG):
        self.catalog = catalog
        self._country = catalog.default_country.code
        self._city = catalog.default_city.id

    @property
    def selected_country(self) -> str:
        return self._country

    @property
    def selected_city(self) -> str:
        return self._city

    @property
    def countries(self) -> Tuple[Country, ...]:
        return self.catalog.countries

    def cities_for(self, code: str) -> Tuple[City, ...]:
        return self.catalog.cities_for(code)

    def set_country(self, code: str) -> None:
        """Select a country and move the city to that country's first city."""
        if not self.catalog.has_country(code):
            logger.error(f"Rejected unknown country: '{code}'")
            raise InvalidSelection(f"Unknown country: '{code}'")
        self._country = code
        self._city = self.catalog.first_city(code).id
        logger.debug(f"Selected country {code}, city reset to {self._city}.")

    def set_city(self, city_id: str) -> None:
        """Select a city of the current country."""
        if not self.catalog.has_city(self._country, city_id):
            logger.error(f"Rejected city '{city_id}' for country {self._country}")
            raise InvalidSelection(f"City '{city_id}' is not available for '{self._country}'")
        self._city = city_id
        logger.debug(f"Selected city {city_id}.")

    def select(self, code: str, city_id: str) -> None:
        """Set country and city together; nothing changes if either is invalid."""
        if not self.catalog.has_city(code, city_id):
            raise InvalidSelection(f"'{city_id}, {code}' is not in the catalog")
        self._country = code
        self._city = city_id

    def reset(self) -> None:
        """Restore the catalog defaults."""
        self._country = self.catalog.default_country.code
        self._city = self.catalog.default_city.id
