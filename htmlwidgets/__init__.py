"""HTML Widgets - calendar grid and pagination control HTML generators."""

from .display import CalendarCell, CalendarGrid, PageEntry, PageEntryKind, PaginationControl
from .utils.exceptions import BadRequestError, WidgetError

__version__ = "1.0.0"
__description__ = "Calendar grid and pagination control HTML generators"

__all__ = [
    "BadRequestError",
    "CalendarCell",
    "CalendarGrid",
    "PageEntry",
    "PageEntryKind",
    "PaginationControl",
    "WidgetError",
    "__description__",
    "__version__",
]
