"""Configuration management for the Asset Tracker."""
import copy
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from dotenv import load_dotenv
from asset_tracker.models import Office
from asset_tracker.registry import DEFAULT_OFFICES
from asset_tracker.utils.errors import ConfigurationError, ValidationError
from asset_tracker.utils.logging import setup_logging
from asset_tracker.utils.paths import find_config_file
from asset_tracker.utils.validation import DEFAULT_DATE_FORMATS, validate_currency_code
import logging

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {
    'app': {
        'name': 'Asset Tracker',
        'version': '0.1.0',
    },
    'offices': [{'location': o.location, 'currency': o.currency} for o in DEFAULT_OFFICES],
    'currency': {
        'rates': {'USD': '1.00', 'GBP': '0.74', 'SEK': '8.53', 'INR': '74.52'},
    },
    'tracker': {
        'lifespan_years': 3,
        'critical_days': 90,
        'warning_days': 180,
        'date_formats': list(DEFAULT_DATE_FORMATS),
    },
    'logging': {
        'enabled': True,
        'level': 'WARNING',
        'format': 'text',
        'file': None,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Application configuration."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        configure_logging: bool = True,
        log_level: Optional[str] = None,
    ):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file. When omitted the
                usual locations are searched and built-in defaults are used
                if no file exists.
            configure_logging: Apply the ``logging`` section on load
            log_level: Overrides both LOG_LEVEL and ``logging.level``
        """
        self.config_path: Optional[Path] = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self._configure_logging = configure_logging
        self._log_level = log_level
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        load_dotenv()

        if self.config_path is None:
            self.config_path = find_config_file()
        elif not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        data: Dict[str, Any] = {}
        if self.config_path is not None and self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigurationError(f"Config root must be a mapping: {self.config_path}")

        self._config = _merge(DEFAULTS, data)
        self._validate()

        if self._configure_logging:
            log_config = self._config.get('logging', {})
            setup_logging(
                level=self._log_level or os.getenv('LOG_LEVEL', log_config.get('level', 'WARNING')),
                log_file=log_config.get('file'),
                format_type=log_config.get('format', 'text'),
                enabled=log_config.get('enabled', True)
            )

        logger.info("Configuration loaded from %s", self.config_path or "built-in defaults")

    def _validate(self) -> None:
        """Validate the sections the tracker relies on."""
        offices = self._config.get('offices')
        if not isinstance(offices, list):
            raise ConfigurationError("'offices' must be a list")
        for entry in offices:
            if not isinstance(entry, dict) or 'location' not in entry or 'currency' not in entry:
                raise ConfigurationError(f"Office entries need location and currency: {entry!r}")
            try:
                validate_currency_code(str(entry['currency']))
            except ValidationError as e:
                raise ConfigurationError(f"Office {entry['location']!r}: {e}") from e

        rates = self.get('currency.rates')
        if not isinstance(rates, dict):
            raise ConfigurationError("'currency.rates' must be a mapping")
        for code, rate in rates.items():
            try:
                validate_currency_code(str(code))
                value = Decimal(str(rate))
            except (ValidationError, InvalidOperation) as e:
                raise ConfigurationError(f"Invalid rate {code!r}: {rate!r}") from e
            if not value.is_finite() or value < 0:
                raise ConfigurationError(f"Invalid rate {code!r}: {rate!r}")

        for key in ('lifespan_years', 'critical_days', 'warning_days'):
            raw = self.get(f'tracker.{key}')
            try:
                int(raw)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"tracker.{key} must be an integer, got {raw!r}") from e

        if self.critical_days > self.warning_days:
            raise ConfigurationError("tracker.critical_days must not exceed tracker.warning_days")

        if not self.date_formats:
            raise ConfigurationError("tracker.date_formats must not be empty")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "tracker.lifespan_years")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def app_name(self) -> str:
        return self.get('app.name', 'Asset Tracker')

    @property
    def app_version(self) -> str:
        return self.get('app.version', '0.1.0')

    @property
    def offices(self) -> List[Office]:
        return [Office(str(o['location']), str(o['currency'])) for o in self.get('offices', [])]

    @property
    def rates(self) -> Dict[str, str]:
        # Kept as strings so Decimal conversion is exact
        return {str(code): str(rate) for code, rate in self.get('currency.rates', {}).items()}

    @property
    def lifespan_years(self) -> int:
        return int(self.get('tracker.lifespan_years', 3))

    @property
    def critical_days(self) -> int:
        return int(self.get('tracker.critical_days', 90))

    @property
    def warning_days(self) -> int:
        return int(self.get('tracker.warning_days', 180))

    @property
    def date_formats(self) -> List[str]:
        return list(self.get('tracker.date_formats', []) or [])


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load and return global configuration instance."""
    global _config
    if _config is None:
        _config = Config(config_path)
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Drop the global instance (used by tests and the CLI)."""
    global _config
    _config = None
