"""Custom exceptions for the City Weather application."""


class WeatherAppError(Exception):
    """Base exception for City Weather application."""
    
    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigError(WeatherAppError):
    """Exception raised for configuration-related errors."""
    pass


class MissingCredential(ConfigError):
    """Raised when no weather API key has been configured."""
    
    def __init__(self, message: str = "API key is missing. Please set WEATHER_API_KEY in your .env file."):
        super().__init__(message)


class WeatherAPIError(WeatherAppError):
    """Exception raised when weather API requests fail."""
    pass


class RequestFailed(WeatherAPIError):
    """The provider answered, but not with a 200."""
    
    def __init__(self, status_code: int, message: str = "Failed to fetch weather data"):
        super().__init__(message)
        self.status_code = status_code


class TransportOrParseFailure(WeatherAPIError):
    """Network, timeout or response body errors."""
    
    def __init__(self, message: str = "Error fetching weather data", cause: Exception = None):
        super().__init__(message, cause)


class InvalidSelection(WeatherAppError):
    """Exception raised when a country or city is not in the catalog."""
    pass


class CatalogError(WeatherAppError):
    """Exception raised when the region catalog is inconsistent."""
    pass
