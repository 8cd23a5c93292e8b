"""
Airing Configuration Settings

User-facing settings are loaded from config.yaml (``options`` section) and can
be overridden from the environment or a local .env file.
"""

import logging
import os
import re
from dataclasses import dataclass, fields, replace

import numpy as np
import yaml
from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

EXPLANATION = (
    "Opening the window will bring indoor humidity closer to the value "
    "indicated in the column corresponding to the indoor temperature"
)

# Environment variable -> (AppSettings field, converter)
ENV_OVERRIDES = {
    "AIRING_LATITUDE": ("latitude", float),
    "AIRING_LONGITUDE": ("longitude", float),
    "AIRING_ELEVATION": ("elevation", float),
    "AIRING_API_URL": ("api_url", str),
}


def _camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def reference_temperatures(start: float, stop: float, step: float) -> tuple[float, ...]:
    """Build the candidate indoor temperatures, ``stop`` included.

    Args:
        start: Lowest indoor temperature (°C)
        stop: Highest indoor temperature (°C)
        step: Spacing between candidates (°C)

    Returns:
        Strictly increasing, non-empty tuple of temperatures

    Raises:
        ConfigurationError: If step is not positive or stop is below start
    """
    if step <= 0:
        raise ConfigurationError(f"Reference temperature step must be positive, got {step}")
    if stop < start:
        raise ConfigurationError(f"Reference temperature range is empty: {start} > {stop}")

    count = int(np.floor((stop - start) / step + 1e-9)) + 1
    return tuple(round(start + i * step, 6) for i in range(count))


@dataclass
class AppSettings:
    """Runtime configuration for one forecast lookup."""

    latitude: float | None = None
    longitude: float | None = None
    elevation: float = 63.1  # metres above sea level
    forecast_days: int = 7
    hourly_rows: int = 10
    daily_rows: int = 7
    reference_start: float = 16.0  # °C
    reference_stop: float = 22.0  # °C
    reference_step: float = 0.5  # °C
    ascii: bool = False
    api_url: str = OPEN_METEO_URL
    timeout: float = 10.0  # seconds

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary."""
        converted = {_camel_to_snake(k): v for k, v in data.items()}

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(converted) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        settings = cls(**converted)
        settings.validate()
        return settings

    @property
    def reference_temperatures(self) -> tuple[float, ...]:
        """Indoor temperatures shown as table columns."""
        return reference_temperatures(
            self.reference_start, self.reference_stop, self.reference_step
        )

    def with_location(self, latitude: float | None, longitude: float | None) -> "AppSettings":
        """Return a copy with coordinates replaced where given."""
        return replace(
            self,
            latitude=self.latitude if latitude is None else latitude,
            longitude=self.longitude if longitude is None else longitude,
        )

    def validate(self):
        """Check value ranges.

        Raises:
            ConfigurationError: If any setting is out of range
        """
        if self.latitude is not None and not -90.0 <= self.latitude <= 90.0:
            raise ConfigurationError(f"Latitude out of range: {self.latitude}")
        if self.longitude is not None and not -180.0 <= self.longitude <= 180.0:
            raise ConfigurationError(f"Longitude out of range: {self.longitude}")
        if not 1 <= self.forecast_days <= 16:
            raise ConfigurationError(f"forecast_days must be between 1 and 16, got {self.forecast_days}")
        if self.hourly_rows < 0 or self.daily_rows < 0:
            raise ConfigurationError("Row counts cannot be negative")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        # Raises on an empty or non-increasing range
        self.reference_temperatures

    def require_location(self) -> tuple[float, float]:
        """Return (latitude, longitude) or fail if either is missing."""
        if self.latitude is None or self.longitude is None:
            raise ConfigurationError(
                "No location configured: pass LAT LNG or set AIRING_LATITUDE/AIRING_LONGITUDE"
            )
        return self.latitude, self.longitude


def load_settings(config_path: str | None = None) -> AppSettings:
    """Load settings from config.yaml, then apply environment overrides.

    Args:
        config_path: YAML file to read (defaults to ./config.yaml if present)

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file cannot be parsed or holds invalid values
    """
    options = {}

    path = config_path or DEFAULT_CONFIG_PATH
    if os.path.exists(path):
        try:
            with open(path) as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}") from e
        options = config.get("options", {}) or {}
        if not isinstance(options, dict):
            raise ConfigurationError(f"'options' in {path} must be a mapping")
        logger.debug(f"Loaded configuration from {path}")
    elif config_path:
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    load_dotenv(find_dotenv(usecwd=True))
    for env_name, (field_name, convert) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        try:
            options[field_name] = convert(value)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_name}: {value!r}") from e
        logger.debug(f"Using {env_name} from environment")

    try:
        return AppSettings.from_dict(options)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
