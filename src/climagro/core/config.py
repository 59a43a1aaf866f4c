"""
Application configuration.

Settings come from a JSON file (see config.example.json). A few deployment
values can be replaced through environment variables, listed in ENV_OVERRIDES.
"""

import json
import os
from typing import Dict, Any, Optional, TYPE_CHECKING
from pathlib import Path

from . import constants

if TYPE_CHECKING:
    from ..models.alert import ThresholdSet

# Environment variable -> dotted configuration key
ENV_OVERRIDES = {
    "POWER_API_URL": "api.base_url",
    "GEOCODING_API_URL": "geocoding.base_url",
    "PROCESSING_TIMEZONE": "processing.timezone",
    "EXPORT_DIR": "export.directory",
    "ENVIRONMENT": "environment",
}

REQUIRED_KEYS = (
    "api.base_url",
    "api.timeout",
    "api.max_retries",
    "processing.timezone",
)

_MISSING = object()


class Config:
    """Climagro settings loaded from JSON with environment overrides."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Load, override and validate the configuration.

        Args:
            config_file: JSON file path. Defaults to the CONFIG_FILE env var,
                         then 'config.json'

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If required keys are missing or thresholds are not numeric
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")

        path = Path(self.config_file)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
        self.config: Dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))

        for env_var, key in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value:
                self._set(key, value)

        self._validate()

    def _set(self, key: str, value: Any) -> None:
        *sections, name = key.split(".")
        target = self.config
        for section in sections:
            target = target.setdefault(section, {})
        target[name] = value

    def _lookup(self, key: str) -> Any:
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return _MISSING
            value = value[part]
        return value

    def _validate(self) -> None:
        missing = [key for key in REQUIRED_KEYS if self._lookup(key) is _MISSING]
        if missing:
            raise ValueError(f"Missing required configuration keys: {', '.join(missing)}")

        thresholds = self.config.get("thresholds", {})
        if not isinstance(thresholds, dict):
            raise ValueError("'thresholds' must be an object of name -> number")
        for name, value in thresholds.items():
            # bool is an int subclass but never a sensible threshold
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Threshold '{name}' must be numeric, got {value!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Read a value by dotted key, e.g. 'api.base_url'.

        Missing keys and explicit nulls both yield the default.
        """
        value = self._lookup(key)
        return default if value is _MISSING or value is None else value

    @property
    def api_base_url(self) -> str:
        return self.get("api.base_url", constants.DEFAULT_POWER_URL)

    @property
    def api_timeout(self) -> int:
        return self.get("api.timeout", 30)

    @property
    def api_max_retries(self) -> int:
        return self.get("api.max_retries", 3)

    @property
    def api_community(self) -> str:
        """NASA POWER user community (RE: renewable energy)."""
        return self.get("api.community", constants.DEFAULT_POWER_COMMUNITY)

    @property
    def api_user(self) -> str:
        return self.get("api.user", constants.DEFAULT_POWER_USER)

    @property
    def geocoding_base_url(self) -> str:
        return self.get("geocoding.base_url", constants.DEFAULT_GEOCODING_URL)

    @property
    def geocoding_user_agent(self) -> str:
        """Nominatim rejects requests without an identifying User-Agent."""
        return self.get("geocoding.user_agent", constants.DEFAULT_USER_AGENT)

    @property
    def timezone(self) -> str:
        return self.get("processing.timezone", "UTC")

    @property
    def data_lag_days(self) -> int:
        """Days between today and the newest day NASA POWER has published."""
        return self.get("processing.data_lag_days", constants.DEFAULT_DATA_LAG_DAYS)

    @property
    def default_parameters(self) -> list:
        return self.get("processing.parameters", list(constants.DEFAULT_PARAMETERS))

    @property
    def export_directory(self) -> str:
        return self.get("export.directory", "exports")

    @property
    def thresholds(self) -> "ThresholdSet":
        """
        Alert thresholds, with the 'thresholds' section overriding defaults.

        Raises:
            ValueError: If an unknown threshold name is configured
        """
        from ..models.alert import ThresholdSet

        try:
            return ThresholdSet(**self.get("thresholds", {}))
        except TypeError as e:
            raise ValueError(f"Invalid thresholds configuration: {e}") from e

    def __repr__(self) -> str:
        return f"Config(file={self.config_file}, env={self.get('environment')})"
