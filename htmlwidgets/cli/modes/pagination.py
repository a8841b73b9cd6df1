"""Pagination command handler."""

import sys
from typing import Any

from ...config.settings import WidgetSettings
from ...display.pagination import PaginationControl
from ...utils.exceptions import BadRequestError
from ...utils.logging import get_logger

logger = get_logger("cli.modes.pagination")


def run_pagination_mode(args: Any, settings: WidgetSettings) -> int:
    """Render pagination links to stdout.

    Command-line values win over the ``pagination`` settings section.

    Args:
        args: Parsed command line arguments
        settings: Effective settings

    Returns:
        Exit code (0 for success, 1 for a bad request)
    """
    defaults = settings.pagination
    page_param = getattr(args, "page_param", None) or defaults.page_param

    try:
        pager = PaginationControl(
            getattr(args, "current", None),
            getattr(args, "total", None),
            getattr(args, "base_url", None),
            page_param=page_param,
        )
    except BadRequestError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    per_page = getattr(args, "per_page", None)
    pager.set_items_per_page(per_page if per_page is not None else defaults.per_page)

    link_classes = getattr(args, "link_classes", None)
    pager.set_link_classes(link_classes if link_classes is not None else defaults.link_classes)

    sys.stdout.write(pager.render() + "\n")
    logger.info(f"Rendered pagination page {pager.current_page} of {pager.total_pages}")
    return 0
