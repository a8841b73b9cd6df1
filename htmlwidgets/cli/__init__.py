"""CLI module for HTML Widgets.

This module provides the command-line interface: argument parsing,
settings and logging setup, and dispatch to the render commands.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from ..config.settings import WidgetSettings, get_settings
from ..utils.logging import apply_command_line_overrides, setup_logging_from_settings
from .modes import get_mode_handler
from .parser import create_parser, parse_day_value

logger = logging.getLogger(__name__)


def main_entry(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when None

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if getattr(args, "config_dir", None):
        settings = WidgetSettings(config_dir=Path(args.config_dir))
    else:
        settings = get_settings()

    settings = apply_command_line_overrides(settings, args)
    setup_logging_from_settings(settings)

    handler = get_mode_handler(args.command)
    logger.debug(f"Running {args.command} command")
    return handler(args, settings)


__all__ = ["create_parser", "main_entry", "parse_day_value"]
