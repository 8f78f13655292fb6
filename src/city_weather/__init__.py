"""City Weather: pick a country and city, see the current weather."""

__version__ = "1.0.0"
