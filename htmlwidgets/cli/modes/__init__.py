"""HTML Widgets CLI commands.

This module provides the registry of render commands and their handlers.
"""

from typing import Any, Callable

from .calendar import run_calendar_mode
from .pagination import run_pagination_mode

MODE_REGISTRY: dict[str, dict[str, Any]] = {
    "calendar": {
        "name": "Calendar",
        "description": "Render a month calendar grid",
        "handler": run_calendar_mode,
    },
    "pagination": {
        "name": "Pagination",
        "description": "Render numbered pagination links",
        "handler": run_pagination_mode,
    },
}


def get_available_modes() -> dict[str, dict[str, Any]]:
    """Get all available commands."""
    return MODE_REGISTRY.copy()


def get_mode_handler(mode_name: str) -> Callable[..., int]:
    """Get handler function for specified command.

    Raises:
        KeyError: If the command is not registered
    """
    if mode_name not in MODE_REGISTRY:
        raise KeyError(f"Unknown mode: {mode_name}")
    handler: Callable[..., int] = MODE_REGISTRY[mode_name]["handler"]
    return handler


__all__ = [
    "MODE_REGISTRY",
    "get_available_modes",
    "get_mode_handler",
    "run_calendar_mode",
    "run_pagination_mode",
]
