"""
Core weather service module.

This module contains the business logic for weather operations,
separated from any UI concerns.
"""

import logging
from typing import Dict

import requests

from .exceptions import RequestFailed, TransportOrParseFailure
from .models import WeatherSnapshot

logger = logging.getLogger(__name__)

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


def _text(value, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} should be a string, got {type(value).__name__}")
    return value


def _number(value, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{field} should be a number, got {type(value).__name__}")
    return value


class WeatherService:
    """Fetches current weather by city name and country code."""

    def __init__(self, api_key: str, base_url: str = CURRENT_WEATHER_URL, timeout: float = 10):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def fetch_current(self, country: str, city: str) -> Dict:
        """Fetch the raw current weather body for a city."""
        params = {
            "q": f"{city},{country}",
            "appid": self.api_key,
            "units": "metric",
        }

        # Request exceptions can echo the URL, which carries the key; log class names only.
        try:
            logger.debug(f"Fetching current weather for: {city}, {country}")
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"Error fetching weather data, connection timed out: {e.__class__.__name__}")
            raise TransportOrParseFailure(cause=e)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Failed to fetch weather data, connection error: {e.__class__.__name__}")
            raise TransportOrParseFailure(cause=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching weather data: {e.__class__.__name__}")
            raise TransportOrParseFailure(cause=e)

        if response.status_code != 200:
            logger.error(f"Failed to fetch weather data for {city}, {country}: HTTP {response.status_code}")
            raise RequestFailed(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Weather response for {city}, {country} is not valid JSON")
            raise TransportOrParseFailure(cause=e)

        logger.debug(f"Data for {city}, {country} fetched successfully.")
        return data

    def parse_current_weather(self, data: Dict) -> WeatherSnapshot:
        """Parse current weather data."""
        logger.debug("Parsing current weather data")
        try:
            condition = data["weather"][0]
            weather = WeatherSnapshot(
                location_name=_text(data["name"], "name"),
                temperature_c=_number(data["main"]["temp"], "main.temp"),
                condition_summary=_text(condition["description"], "weather.description"),
                condition_category=_text(condition["main"], "weather.main"),
                humidity_pct=_number(data["main"]["humidity"], "main.humidity"),
                wind_speed=_number(data["wind"]["speed"], "wind.speed"),
            )
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Malformed weather response, bad or missing field: {e}")
            raise TransportOrParseFailure(cause=e)
        return weather

    def get_current_weather(self, country: str, city: str) -> WeatherSnapshot:
        """Get current weather for a city."""
        raw_data = self.fetch_current(country, city)
        return self.parse_current_weather(raw_data)
