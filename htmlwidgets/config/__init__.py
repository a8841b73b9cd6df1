"""Configuration package."""

from .settings import (
    CalendarSettings,
    LoggingSettings,
    PaginationSettings,
    WidgetSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "CalendarSettings",
    "LoggingSettings",
    "PaginationSettings",
    "WidgetSettings",
    "get_settings",
    "reset_settings",
]
