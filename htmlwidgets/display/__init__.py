"""HTML widget renderers."""

from .calendar_grid import CalendarCell, CalendarGrid
from .pagination import PageEntry, PageEntryKind, PaginationControl

__all__ = [
    "CalendarCell",
    "CalendarGrid",
    "PageEntry",
    "PageEntryKind",
    "PaginationControl",
]
