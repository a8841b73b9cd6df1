"""Entry point for `python -m htmlwidgets` command."""

import sys

from htmlwidgets.cli import main_entry


def main() -> None:
    """Run the CLI and exit with its status code."""
    sys.exit(main_entry())


if __name__ == "__main__":
    main()
