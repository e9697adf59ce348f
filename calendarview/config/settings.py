"""Settings management using Pydantic for type validation and configuration."""

import calendar
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..grid.models import ViewMode
from ..utils.exceptions import ConfigurationError
from ..utils.logging import LOG_LEVEL_NAMES

logger = logging.getLogger(__name__)

ENV_PREFIX = "CALENDARVIEW_"

_WEEKDAY_NAMES = {name.lower(): index for index, name in enumerate(calendar.day_name)}
_WEEKDAY_NAMES.update({abbr.lower(): index for index, abbr in enumerate(calendar.day_abbr)})


def parse_weekday(value: Union[str, int]) -> int:
    """Weekday number (Monday=0) from a name, abbreviation or number.

    Raises:
        ValueError: If the value names no weekday
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= 6:
            return value
        raise ValueError(f"weekday number must be 0-6, got {value}")

    text = str(value).strip().lower()
    if text.isdigit():
        return parse_weekday(int(text))
    if text in _WEEKDAY_NAMES:
        return _WEEKDAY_NAMES[text]
    raise ValueError(f"unknown weekday {value!r}")


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    # Console Logging
    console_enabled: bool = Field(default=True, description="Enable console logging")
    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="calendarview", description="Log file prefix")
    max_log_files: int = Field(default=5, description="Maximum number of log files to keep")
    include_function_names: bool = Field(
        default=True, description="Include function names and line numbers in file logs"
    )

    # Third-party Libraries
    third_party_level: str = Field(
        default="WARNING", description="Log level for third-party libraries"
    )

    # YAML values are applied by attribute assignment
    model_config = ConfigDict(validate_assignment=True)

    @field_validator("console_level", "file_level", "third_party_level", mode="before")
    @classmethod
    def _validate_level(cls, value: Any) -> str:
        level_name = str(value).strip().upper()
        if level_name not in LOG_LEVEL_NAMES:
            raise ValueError(
                f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVEL_NAMES)}"
            )
        return level_name


class CalendarViewSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    _explicit_args: set = PrivateAttr(default_factory=set)
    _env_vars_set: set = PrivateAttr(default_factory=set)

    # Calendar
    week_starts_on: int = Field(
        default=calendar.SUNDAY,
        description="First weekday of grid rows (name or 0-6, Monday=0)",
    )
    default_view_mode: ViewMode = Field(
        default=ViewMode.MONTH, description="View mode on startup: month or week"
    )
    items_file: Optional[Path] = Field(
        default=None, description="YAML or JSON file with the items to place on the calendar"
    )

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "calendarview")
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".local" / "share" / "calendarview"
    )

    # Logging Configuration
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("week_starts_on", mode="before")
    @classmethod
    def _parse_week_starts_on(cls, value: Any) -> int:
        return parse_weekday(value)

    @field_validator("default_view_mode", mode="before")
    @classmethod
    def _parse_view_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def __init__(self, **kwargs: Any) -> None:
        env_vars_set = {
            key[len(ENV_PREFIX) :].lower() for key in os.environ if key.upper().startswith(ENV_PREFIX)
        }

        super().__init__(**kwargs)

        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set

        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find config file, checking the working directory first, then the user config dir."""
        local_config = Path.cwd() / "config" / "config.yaml"
        if local_config.exists():
            return local_config

        user_config = self.config_dir / "config.yaml"
        if user_config.exists():
            return user_config

        return None

    def _is_overridden(self, setting: str) -> bool:
        return setting in self._explicit_args or setting in self._env_vars_set

    def _load_calendar_settings(self, config_data: dict) -> None:
        """Load calendar settings from YAML data."""
        calendar_config = config_data.get("calendar", config_data)
        if not isinstance(calendar_config, dict):
            raise ValueError("calendar section must be a mapping")

        if "week_starts_on" in calendar_config and not self._is_overridden("week_starts_on"):
            self.week_starts_on = parse_weekday(calendar_config["week_starts_on"])

        if "default_view_mode" in calendar_config and not self._is_overridden("default_view_mode"):
            self.default_view_mode = ViewMode(str(calendar_config["default_view_mode"]).lower())

        if "items_file" in calendar_config and not self._is_overridden("items_file"):
            self.items_file = Path(str(calendar_config["items_file"]))

    def _load_logging_config(self, config_data: dict) -> None:
        """Load logging configuration from YAML data."""
        if "logging" not in config_data or "logging" in self._explicit_args:
            return

        logging_config = config_data["logging"] or {}
        if not isinstance(logging_config, dict):
            raise ValueError("logging section must be a mapping")
        for setting in LoggingSettings.model_fields:
            if setting in logging_config and f"logging__{setting}" not in self._env_vars_set:
                setattr(self.logging, setting, logging_config[setting])

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                return
            if not isinstance(config_data, dict):
                raise ValueError(
                    f"expected a mapping at the top level, got {type(config_data).__name__}"
                )

            self._load_calendar_settings(config_data)
            self._load_logging_config(config_data)

        except (OSError, yaml.YAMLError, ValueError) as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")

    @property
    def config_file(self) -> Path:
        """Path to the user YAML configuration file."""
        return self.config_dir / "config.yaml"


# Global settings management
_settings_instance: Optional[CalendarViewSettings] = None


def get_settings() -> CalendarViewSettings:
    """Get the global settings instance, creating it lazily if needed."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = CalendarViewSettings()
    return _settings_instance


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    global _settings_instance
    _settings_instance = None


def load_settings(**overrides: Any) -> CalendarViewSettings:
    """Build settings, reporting invalid values as :class:`ConfigurationError`.

    Raises:
        ConfigurationError: If a value from arguments, environment or ``.env`` is invalid
    """
    try:
        return CalendarViewSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid setting {field_name or '<unknown>'}: {first.get('msg', e)}",
            field_name=field_name or None,
            field_value=first.get("input"),
        ) from e
