"""
Configuration module for vineyard ETc estimation.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from .exceptions import ValidationError


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("WEATHER_API_BASE_URL"):
            self.config.setdefault("weather", {})["base_url"] = os.getenv("WEATHER_API_BASE_URL")

        float_overrides = {
            "FARM_LATITUDE": "latitude",
            "FARM_LONGITUDE": "longitude",
            "FARM_ELEVATION": "elevation",
        }
        for env_var, key in float_overrides.items():
            raw = os.getenv(env_var)
            if raw:
                try:
                    self.config.setdefault("farm", {})[key] = float(raw)
                except ValueError:
                    raise ValueError(f"Environment variable {env_var} must be numeric, got {raw!r}")

        if os.getenv("FARM_TIMEZONE"):
            self.config.setdefault("farm", {})["timezone"] = os.getenv("FARM_TIMEZONE")

        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "weather": ["base_url"],
            "farm": ["latitude", "longitude", "elevation"],
        }

        missing_sections = [s for s in required_config if s not in self.config]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if key not in self.config[section]:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'weather.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def weather_base_url(self) -> str:
        """Get weather API base URL."""
        return self.get("weather.base_url", "")

    @property
    def weather_timeout(self) -> int:
        """Get weather API timeout in seconds."""
        return self.get("weather.timeout", 30)

    @property
    def weather_max_retries(self) -> int:
        """Get maximum weather API retry attempts."""
        return self.get("weather.max_retries", 3)

    @property
    def log_level(self) -> str:
        """Get logging level name (DEBUG, INFO, WARNING, ...)."""
        return str(self.get("logging.level", "INFO")).upper()

    @property
    def farm_id(self) -> Optional[int]:
        return self.get("farm.id")

    @property
    def farm_timezone(self) -> str:
        """Get the farm's local timezone."""
        return self.get("farm.timezone", "UTC")

    @property
    def planting_date(self) -> Optional[str]:
        return self.get("farm.planting_date")

    @property
    def farm_location(self):
        """Farm location as a Location record."""
        from ..models import Location

        return Location(
            latitude=float(self.get("farm.latitude")),
            longitude=float(self.get("farm.longitude")),
            elevation=float(self.get("farm.elevation")),
        )

    @property
    def irrigation_method(self):
        """Configured irrigation method (defaults to drip)."""
        from ..models import IrrigationMethod

        value = self.get("farm.irrigation_method", IrrigationMethod.DRIP.value)
        try:
            return IrrigationMethod(value)
        except ValueError:
            raise ValidationError(
                f"Invalid irrigation_method: {value!r}", field="irrigation_method", value=value
            )

    @property
    def soil_type(self):
        """Configured soil type (defaults to loamy)."""
        from ..models import SoilType

        value = self.get("farm.soil_type", SoilType.LOAMY.value)
        try:
            return SoilType(value)
        except ValueError:
            raise ValidationError(f"Invalid soil_type: {value!r}", field="soil_type", value=value)

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
