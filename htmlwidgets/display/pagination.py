"""Numbered pagination control rendered as HTML links."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..utils.exceptions import BadRequestError
from ..utils.html import escape_html
from ..utils.url import add_query
from ..utils.validation import to_positive_int

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 20
DEFAULT_PAGE_PARAM = "p"
FULL_LIST_THRESHOLD = 10

PREVIOUS_LABEL = "&lsaquo;"
NEXT_LABEL = "&rsaquo;"
ELLIPSIS_HTML = " ... "


class PageEntryKind(Enum):
    """How a pagination entry is displayed."""

    LINK = "link"
    CURRENT = "current"
    INERT = "inert"
    ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class PageEntry:
    """One item of the pagination control, in display order."""

    kind: PageEntryKind
    page: Optional[int] = None
    label: str = ""
    url: Optional[str] = None


class PaginationControl:
    """Generates customizable pagination.

    Example:
        >>> pager = PaginationControl(current=2, total=45, base_url="/posts?tag=py")
        >>> pager.set_link_classes("btn")
        >>> html = pager.render()
    """

    def __init__(
        self, current: Any, total: Any, base_url: str, page_param: str = DEFAULT_PAGE_PARAM
    ) -> None:
        """Initialize the pagination control.

        Args:
            current: The current page number; 1 when missing or not integer-like
            total: Total number of items (the page count is derived from it)
            base_url: The base url for each link; ``p=<page>`` is added to its query
            page_param: Query parameter name carrying the page number

        Raises:
            BadRequestError: If ``total`` is not a positive integer or ``base_url`` is empty
        """
        total_items = to_positive_int(total)
        if total_items is None:
            logger.warning(f"Bad total items passed to PaginationControl: {total!r}")
            raise BadRequestError(
                "Bad total items passed to PaginationControl",
                field_name="total",
                field_value=total,
            )

        if not base_url:
            logger.warning("No base url specified for PaginationControl")
            raise BadRequestError(
                "No base url specified in PaginationControl",
                field_name="base_url",
                field_value=base_url,
            )

        self.total = total_items
        self.current = to_positive_int(current, 1)
        self.base_url = str(base_url)
        self.page_param = page_param or DEFAULT_PAGE_PARAM
        self.per_page = DEFAULT_PER_PAGE
        self.link_classes = ""

        logger.debug(
            f"Pagination initialized: current={self.current}, total={self.total}, "
            f"base_url={self.base_url!r}"
        )

    def set_items_per_page(self, per_page: Any) -> None:
        """Set the number of items per page; invalid values restore the default."""
        self.per_page = to_positive_int(per_page, DEFAULT_PER_PAGE)

    def set_link_classes(self, link_classes: str) -> None:
        """Set the classes that will be added to each link.

        Args:
            link_classes: Space-separated class names
        """
        self.link_classes = link_classes or ""

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.per_page)

    @property
    def current_page(self) -> int:
        """The current page, clamped to the last page."""
        return min(self.current, self.total_pages)

    def get_page_url(self, page: int) -> str:
        """Build the link target for a page."""
        return add_query(self.base_url, {self.page_param: page})

    def _link(self, page: int, label: Optional[str] = None) -> PageEntry:
        return PageEntry(
            kind=PageEntryKind.LINK,
            page=page,
            label=str(page) if label is None else label,
            url=self.get_page_url(page),
        )

    def _page(self, page: int, cur_page: int) -> PageEntry:
        if page == cur_page:
            return PageEntry(kind=PageEntryKind.CURRENT, page=page, label=str(page))
        return self._link(page)

    def _window(self, total_pages: int, cur_page: int) -> list[Optional[int]]:
        """Select the page numbers to show; ``None`` marks an ellipsis."""
        if total_pages < FULL_LIST_THRESHOLD:
            return list(range(1, total_pages + 1))

        if cur_page <= 3 or cur_page > total_pages - 3:
            # 1 2 3 4 5 ... 10 11 12 13 14
            return [*range(1, 6), None, *range(total_pages - 5, total_pages + 1)]

        # 1 2 ... 5 6 7 ... 10 11 12
        middle_start = 3 if cur_page <= 5 else cur_page - 3
        middle_end = min(cur_page + 3, total_pages - 2)

        pages: list[Optional[int]] = [1, 2]
        if middle_start != 3:
            pages.append(None)
        pages.extend(range(middle_start, middle_end + 1))
        if middle_end + 1 != total_pages - 1:
            pages.append(None)
        pages.extend([total_pages - 1, total_pages])
        return pages

    def get_page_entries(self) -> list[PageEntry]:
        """Get the previous control, the page window and the next control in order."""
        total_pages = self.total_pages
        cur_page = self.current_page

        entries: list[PageEntry] = []

        if cur_page > 1:
            entries.append(self._link(cur_page - 1, PREVIOUS_LABEL))
        else:
            entries.append(PageEntry(kind=PageEntryKind.INERT, label=PREVIOUS_LABEL))

        for page in self._window(total_pages, cur_page):
            if page is None:
                entries.append(PageEntry(kind=PageEntryKind.ELLIPSIS))
            else:
                entries.append(self._page(page, cur_page))

        if cur_page < total_pages:
            entries.append(self._link(cur_page + 1, NEXT_LABEL))
        else:
            entries.append(PageEntry(kind=PageEntryKind.INERT, label=NEXT_LABEL))

        return entries

    def _get_link_html(self, entry: PageEntry) -> str:
        classes = "page_link jump_link"
        if self.link_classes:
            classes = f"{classes} {self.link_classes}"
        return (
            f'<a href="{escape_html(entry.url or "")}" data-page="{entry.page}" '
            f'class="{classes}">{entry.label}</a>'
        )

    def _get_entry_html(self, entry: PageEntry) -> str:
        if entry.kind is PageEntryKind.LINK:
            return self._get_link_html(entry)
        if entry.kind is PageEntryKind.ELLIPSIS:
            return ELLIPSIS_HTML
        return f'<span class="cur_page">{entry.label}</span>'

    def render(self) -> str:
        """Get the HTML for the pagination links."""
        entries = self.get_page_entries()
        html = (
            '<span class="page_links"><span>Page:</span>'
            + "".join(self._get_entry_html(entry) for entry in entries)
            + "</span>"
        )
        logger.verbose(  # type: ignore[attr-defined]
            "Rendered pagination: page %d of %d, %d entries",
            self.current_page,
            self.total_pages,
            len(entries),
        )
        return html
