"""Command-line argument parsing for HTML Widgets.

This module builds the argument parser for the ``calendar`` and
``pagination`` commands together with the shared logging options.
"""

import argparse
import logging

from .modes import get_available_modes

logger = logging.getLogger(__name__)


def parse_day_value(value: str) -> tuple[int, str]:
    """Parse a ``DAY=TEXT`` pair for the calendar command.

    Args:
        value: Argument string such as ``"14=<b>Party</b>"``

    Returns:
        Tuple of the day number and the cell content

    Raises:
        argparse.ArgumentTypeError: If the value is not ``DAY=TEXT`` with a day in 1..31
    """
    day_text, sep, content = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Invalid day value '{value}'. Expected DAY=TEXT")

    try:
        day = int(day_text.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid day '{day_text}'. Day must be a number"
        ) from None

    if not 1 <= day <= 31:
        raise argparse.ArgumentTypeError(f"Invalid day '{day}'. Day must be between 1 and 31")

    return day, content


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (overrides configuration)",
    )
    group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    group.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )
    group.add_argument("--log-dir", help="Also write logs to a file in this directory")
    group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored log output"
    )
    group.add_argument(
        "--config-dir", help="Directory holding config.yaml (default: ~/.config/htmlwidgets)"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        ArgumentParser with ``calendar`` and ``pagination`` subcommands

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["calendar", "--year", "2024", "--month", "2"])
        >>> args.command
        'calendar'
    """
    parser = argparse.ArgumentParser(
        prog="htmlwidgets",
        description="HTML Widgets - render calendar grids and pagination controls as HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s calendar                              # Current month
  %(prog)s calendar --year 2024 --month 2        # February 2024
  %(prog)s calendar --day 14="<b>Party</b>"      # Custom content for the 14th
  %(prog)s pagination --total 500 --current 25 --base-url "/list?sort=name" --per-page 10
        """,
    )
    _add_logging_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    modes = get_available_modes()

    calendar_parser = subparsers.add_parser("calendar", help=modes["calendar"]["description"])
    calendar_parser.add_argument("--year", help="Year to show (default: current year)")
    calendar_parser.add_argument("--month", help="Month to show (default: current month)")
    calendar_parser.add_argument(
        "--day",
        dest="day_values",
        action="append",
        type=parse_day_value,
        default=[],
        metavar="DAY=TEXT",
        help="Content for a day cell; may be repeated",
    )
    calendar_parser.add_argument(
        "--no-highlight", action="store_true", help="Do not highlight today's day number"
    )

    pagination_parser = subparsers.add_parser(
        "pagination", help=modes["pagination"]["description"]
    )
    pagination_parser.add_argument("--total", required=True, help="Total number of items")
    pagination_parser.add_argument("--current", default=1, help="Current page (default: 1)")
    pagination_parser.add_argument(
        "--base-url", required=True, help="Base url for the links; the page number is appended"
    )
    pagination_parser.add_argument(
        "--per-page", help="Items per page (default from configuration, 20)"
    )
    pagination_parser.add_argument(
        "--link-classes", help="Extra classes added to every page link"
    )
    pagination_parser.add_argument(
        "--page-param", help="Query parameter carrying the page number (default: p)"
    )

    return parser
