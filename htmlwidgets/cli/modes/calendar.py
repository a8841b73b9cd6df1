"""Calendar command handler."""

import sys
from typing import Any

from ...config.settings import WidgetSettings
from ...display.calendar_grid import CalendarGrid
from ...utils.logging import get_logger

logger = get_logger("cli.modes.calendar")


def run_calendar_mode(args: Any, settings: WidgetSettings) -> int:
    """Render a month calendar to stdout.

    Args:
        args: Parsed command line arguments
        settings: Effective settings

    Returns:
        Exit code (0 for success)
    """
    grid = CalendarGrid(getattr(args, "year", None), getattr(args, "month", None))

    day_values = dict(getattr(args, "day_values", None) or [])
    if day_values:
        grid.set_day_values(day_values)

    highlight_today = settings.calendar.highlight_today and not getattr(
        args, "no_highlight", False
    )

    sys.stdout.write(grid.render(highlight_today=highlight_today) + "\n")
    logger.info(f"Rendered calendar for {grid.year}-{grid.month:02d}")
    return 0
