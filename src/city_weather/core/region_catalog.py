"""
Region catalog module.

Static country and city reference data for the selection screens. The
catalog is validated when it is built and is read-only afterwards.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence, Tuple

from .exceptions import CatalogError, InvalidSelection
from .models import City, Country

logger = logging.getLogger(__name__)


class RegionCatalog:
    """Immutable ordered map of countries to their ordered city lists."""

    def __init__(self, countries: Iterable[Country], cities: Mapping[str, Sequence[City]]):
        self._countries: Tuple[Country, ...] = tuple(countries)
        if not self._countries:
            raise CatalogError("Region catalog must contain at least one country")

        by_code: Dict[str, Country] = {}
        city_lists: Dict[str, Tuple[City, ...]] = {}
        for country in self._countries:
            if country.code in by_code:
                raise CatalogError(f"Duplicate country code: '{country.code}'")
            by_code[country.code] = country

            country_cities = tuple(cities.get(country.code, ()))
            if not country_cities:
                raise CatalogError(f"Country '{country.code}' has no cities")
            ids = [city.id for city in country_cities]
            if len(ids) != len(set(ids)):
                raise CatalogError(f"Duplicate city id for country '{country.code}'")
            city_lists[country.code] = country_cities

        unknown = set(cities) - set(by_code)
        if unknown:
            raise CatalogError(f"Cities listed for unknown countries: {', '.join(sorted(unknown))}")

        self._by_code = MappingProxyType(by_code)
        self._cities = MappingProxyType(city_lists)
        logger.debug(f"Region catalog built with {len(self._countries)} countries.")

    @property
    def countries(self) -> Tuple[Country, ...]:
        return self._countries

    @property
    def default_country(self) -> Country:
        return self._countries[0]

    @property
    def default_city(self) -> City:
        return self.first_city(self.default_country.code)

    def has_country(self, code: str) -> bool:
        return code in self._by_code

    def get_country(self, code: str) -> Country:
        """Look up a country by code."""
        try:
            return self._by_code[code]
        except KeyError:
            raise InvalidSelection(f"Unknown country: '{code}'")

    def cities_for(self, code: str) -> Tuple[City, ...]:
        """Ordered cities for a country."""
        try:
            return self._cities[code]
        except KeyError:
            raise InvalidSelection(f"Unknown country: '{code}'")

    def first_city(self, code: str) -> City:
        return self.cities_for(code)[0]

    def has_city(self, code: str, city_id: str) -> bool:
        if not self.has_country(code):
            return False
        return any(city.id == city_id for city in self._cities[code])

    def get_city(self, code: str, city_id: str) -> City:
        """Look up a city of a given country."""
        for city in self.cities_for(code):
            if city.id == city_id:
                return city
        raise InvalidSelection(f"City '{city_id}' is not available for '{code}'")


def _cities(*names: str) -> Tuple[City, ...]:
    return tuple(City(name, name) for name in names)


DEFAULT_CATALOG = RegionCatalog(
    countries=[
        Country("IN", "India"),
        Country("US", "United States"),
        Country("GB", "United Kingdom"),
    ],
    cities={
        "IN": _cities("Delhi", "Mumbai", "Bangalore", "Patna", "Jabalpur", "Jalandhar"),
        "US": _cities("New York", "Los Angeles", "Chicago"),
        "GB": _cities("London", "Manchester", "Birmingham"),
    },
)
