"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "HTMLWIDGETS_"
ENV_NESTED_DELIMITER = "__"

logger = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_directory: Optional[str] = Field(
        default=None, description="Log directory (defaults to the working directory)"
    )
    file_name: str = Field(default="htmlwidgets.log", description="Log file name")


class CalendarSettings(BaseModel):
    """Calendar grid rendering defaults."""

    highlight_today: bool = Field(
        default=True, description="Mark the cell whose day matches today's day-of-month"
    )


class PaginationSettings(BaseModel):
    """Pagination control rendering defaults."""

    per_page: int = Field(default=20, description="Items per page")
    link_classes: str = Field(
        default="", description="Space-separated classes added to every page link"
    )
    page_param: str = Field(default="p", description="Query parameter carrying the page number")


class WidgetSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    _explicit_args: set = PrivateAttr(default_factory=set)
    _env_vars_set: set = PrivateAttr(default_factory=set)

    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "htmlwidgets")

    calendar: CalendarSettings = Field(
        default_factory=CalendarSettings, description="Calendar grid defaults"
    )
    pagination: PaginationSettings = Field(
        default_factory=PaginationSettings, description="Pagination control defaults"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        env_vars_set = {
            key[len(ENV_PREFIX) :].lower()
            for key in os.environ
            if key.upper().startswith(ENV_PREFIX)
        }

        super().__init__(**kwargs)

        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set

        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find config file, checking project directory first, then the config dir."""
        project_root = Path(__file__).parent.parent.parent
        project_config = project_root / "config" / "config.yaml"
        if project_config.exists():
            return project_config

        user_config = self.config_file
        if user_config.exists():
            return user_config

        return None

    def _is_overridden(self, section: str, setting: str) -> bool:
        """Check whether a nested setting came from kwargs or the environment."""
        if section in self._explicit_args or section in self._env_vars_set:
            return True
        return f"{section}{ENV_NESTED_DELIMITER}{setting}" in self._env_vars_set

    def _load_section(self, config_data: dict, section: str) -> None:
        """Copy one YAML section onto the matching nested settings model."""
        section_data = config_data.get(section)
        if not isinstance(section_data, dict):
            return

        target = getattr(self, section)
        for setting, value in section_data.items():
            if setting not in type(target).model_fields:
                logger.debug(f"Ignoring unknown setting {section}.{setting}")
                continue
            if self._is_overridden(section, setting):
                continue
            setattr(target, setting, value)

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

            for section in ("calendar", "pagination", "logging"):
                self._load_section(config_data, section)

            logger.debug(f"Loaded configuration from {config_file}")

        except Exception as e:
            # Keep defaults/env vars when the file is unreadable
            logger.warning(f"Could not load YAML config from {config_file}: {e}")

    @property
    def config_file(self) -> Path:
        """Path to YAML configuration file."""
        return self.config_dir / "config.yaml"


_settings_instance: Optional[WidgetSettings] = None


def get_settings() -> WidgetSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = WidgetSettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
