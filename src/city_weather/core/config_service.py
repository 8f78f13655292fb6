"""Configuration service for managing app settings and logging."""

import logging
import os
from pathlib import Path
from typing import Dict, Optional
from logging.handlers import RotatingFileHandler

from dotenv import dotenv_values

from .exceptions import ConfigError
from .weather_service import CURRENT_WEATHER_URL

logger = logging.getLogger(__name__)


class ConfigService:
    """Reads settings from a .env file and the process environment."""

    def __init__(self, env_file: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        """Initialize configuration service.

        Args:
            env_file: Optional path to a .env file; searched for when omitted
            environ: Values that override the .env file, os.environ by default
        """
        self._env_vars = {
            key: value
            for key, value in dotenv_values(env_file).items()
            if value is not None
        }
        self._env_vars.update(os.environ if environ is None else environ)

    @property
    def api_key(self) -> str:
        """Get OpenWeatherMap API key, empty if not configured."""
        return self._env_vars.get("WEATHER_API_KEY", "").strip()

    @property
    def api_url(self) -> str:
        return self._env_vars.get("WEATHER_API_URL", CURRENT_WEATHER_URL)

    @property
    def request_timeout(self) -> float:
        """Get HTTP timeout in seconds."""
        raw = self._env_vars.get("WEATHER_REQUEST_TIMEOUT", "10")
        try:
            timeout = float(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid WEATHER_REQUEST_TIMEOUT: '{raw}'", e)
        if timeout <= 0:
            raise ConfigError(f"WEATHER_REQUEST_TIMEOUT must be positive, got {raw}")
        return timeout

    @property
    def log_level(self) -> str:
        """Get log level from environment."""
        level = self._env_vars.get("LOG_LEVEL", "ERROR").upper()
        return level if isinstance(logging.getLevelName(level), int) else "ERROR"

    @property
    def log_dir(self) -> Path:
        return Path(self._env_vars.get("WEATHER_LOG_DIR", "logs"))

    def setup_logging(self) -> None:
        """Configure application logging."""
        try:
            self.log_dir.mkdir(exist_ok=True, parents=True)
            handler = RotatingFileHandler(
                self.log_dir / "weather_app.log",
                maxBytes=5 * 1024 * 1024,
                backupCount=3
            )
        except OSError as e:
            raise ConfigError(f"Cannot write logs to {self.log_dir}: {e}", e) from e

        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[handler],
        )
        logger.debug(f"Logging configured at level {self.log_level}")
