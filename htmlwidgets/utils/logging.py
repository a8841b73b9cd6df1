"""Logging configuration and setup utilities."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, TextIO

if TYPE_CHECKING:
    from ..config.settings import WidgetSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Log a message at the VERBOSE level.

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Rendered %d rows", row_count)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name: Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Numeric log level value

    Raises:
        AttributeError: If level name is not recognized
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


# SGR parameters per level name: (bright palette, 8-color palette)
LEVEL_COLORS = {
    "CRITICAL": ("91;1", "31;1"),
    "ERROR": ("91", "31"),
    "WARNING": ("93", "33"),
    "INFO": ("94", "34"),
    "VERBOSE": ("92", "32"),
    "DEBUG": ("95", "35"),
}


def detect_color_mode(stream: TextIO) -> str:
    """Work out how much color a console stream can show.

    Returns:
        ``"truecolor"``, ``"basic"`` or ``"none"``
    """
    if os.environ.get("NO_COLOR"):
        return "none"

    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return "none"

    term = os.environ.get("TERM", "").lower()
    if term == "dumb":
        return "none"
    if os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit") or "256color" in term:
        return "truecolor"
    if "color" in term:
        return "basic"
    if os.name == "nt" and "WT_SESSION" in os.environ:
        return "truecolor"
    return "none"


class AutoColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when the console supports it."""

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        enable_colors: bool = True,
        stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(fmt, datefmt)
        if enable_colors:
            self.color_mode = detect_color_mode(stream if stream is not None else sys.stderr)
        else:
            self.color_mode = "none"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        codes = LEVEL_COLORS.get(record.levelname)
        if self.color_mode == "none" or codes is None:
            return formatted

        code = codes[0] if self.color_mode == "truecolor" else codes[1]
        return formatted.replace(record.levelname, f"\033[{code}m{record.levelname}\033[0m", 1)


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_colors: bool = True,
) -> logging.Logger:
    """Set up package logging with console and optional file output.

    Args:
        log_level: Logging level (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name
        log_dir: Optional log directory path
        enable_colors: Colorize level names when the terminal supports it

    Returns:
        Configured ``htmlwidgets`` logger
    """
    try:
        numeric_level = get_log_level(log_level)
    except AttributeError:
        numeric_level = logging.WARNING

    logger = logging.getLogger("htmlwidgets")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    console_formatter = AutoColoredFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        enable_colors=enable_colors,
        stream=sys.stderr,
    )
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stdout carries rendered markup, so log to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / log_file
        else:
            log_path = Path(log_file)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"  # 10MB
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_path}")

    logger.debug(f"Logging initialized at {log_level} level")
    return logger


def setup_logging_from_settings(settings: "WidgetSettings") -> logging.Logger:
    """Configure logging from the ``logging`` section of the settings."""
    log_settings = settings.logging
    log_file = log_settings.file_name if log_settings.file_enabled else None
    log_dir = Path(log_settings.file_directory) if log_settings.file_directory else None
    return setup_logging(
        log_level=log_settings.console_level,
        log_file=log_file,
        log_dir=log_dir,
        enable_colors=log_settings.console_colors,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``htmlwidgets`` namespace.

    Example:
        >>> logger = get_logger("display.pagination")
        >>> logger.name
        'htmlwidgets.display.pagination'
    """
    return logging.getLogger(f"htmlwidgets.{name}")


def apply_command_line_overrides(settings: "WidgetSettings", args: Any) -> "WidgetSettings":
    """Apply command-line logging overrides to the settings in place.

    Priority: Command-line > Environment > YAML > Defaults.

    Args:
        settings: Current settings object to modify
        args: Parsed command-line arguments from argparse

    Returns:
        The same settings object, for convenience
    """
    if getattr(args, "log_level", None):
        settings.logging.console_level = args.log_level

    if getattr(args, "verbose", False):
        settings.logging.console_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.logging.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.logging.file_directory = args.log_dir
        settings.logging.file_enabled = True

    if getattr(args, "no_log_colors", False):
        settings.logging.console_colors = False

    return settings
