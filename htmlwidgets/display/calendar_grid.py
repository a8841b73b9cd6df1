"""Monthly calendar grid rendered as an HTML table."""

import calendar
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime
from typing import Any, Optional

from ..utils.validation import is_int_like, to_int

logger = logging.getLogger(__name__)

WEEKDAY_HEADERS = ("S", "M", "T", "W", "T", "F", "S")
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class CalendarCell:
    """A single day slot in the calendar grid."""

    day: Optional[int]
    content: str = ""
    is_today: bool = False

    @property
    def is_empty(self) -> bool:
        """True for padding cells before the 1st or after the last day."""
        return self.day is None


def _normalize_year_month(year: Any, month: Any) -> tuple[int, int]:
    """Resolve constructor input to a valid (year, month) pair.

    Non integer-like values fall back to the current date. Months outside
    1..12 roll over into the neighbouring years.
    """
    now = datetime.now()

    resolved_year = to_int(year, now.year)
    resolved_month = to_int(month, now.month)

    if not 1 <= resolved_month <= 12:
        resolved_year += (resolved_month - 1) // 12
        resolved_month = (resolved_month - 1) % 12 + 1

    if not MINYEAR <= resolved_year <= MAXYEAR:
        logger.debug(f"Year {resolved_year} out of range, using {now.year}")
        resolved_year = now.year

    return resolved_year, resolved_month


class CalendarGrid:
    """Generates a month calendar.

    Example:
        >>> grid = CalendarGrid(2024, 2)
        >>> grid.set_day_values({14: '<a href="/events/14">14</a>'})
        >>> html = grid.render()
    """

    def __init__(self, year: Any = None, month: Any = None) -> None:
        """Initialize the calendar.

        Args:
            year: The year to show; the current year when unset or not integer-like
            month: The month to show; the current month when unset or not integer-like
        """
        self.year, self.month = _normalize_year_month(year, month)
        self._day_values: dict[int, str] = {}

        logger.debug(f"Calendar grid initialized for {self.year}-{self.month:02d}")

    def set_day_values(self, day_values: Mapping[Any, Any]) -> None:
        """Set the content shown for each day, replacing any previous values.

        Args:
            day_values: Mapping of day number to the markup shown in that day's cell
        """
        normalized: dict[int, str] = {}
        for day, value in day_values.items():
            if not is_int_like(day):
                logger.debug(f"Dropping day value with non-numeric key {day!r}")
                continue
            normalized[to_int(day)] = str(value)
        self._day_values = normalized

    def get_day_values(self) -> dict[int, str]:
        """Get the currently set day values."""
        return dict(self._day_values)

    @property
    def first_day_of_week(self) -> int:
        """Weekday of the 1st of the month, 0=Sunday through 6=Saturday."""
        monday_based, _ = calendar.monthrange(self.year, self.month)
        return (monday_based + 1) % DAYS_PER_WEEK

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    @property
    def week_count(self) -> int:
        return -(-(self.days_in_month + self.first_day_of_week) // DAYS_PER_WEEK)

    def get_weeks(self, highlight_today: bool = True) -> list[list[CalendarCell]]:
        """Lay the month out as rows of seven cells.

        Only the day-of-month is compared when flagging today, so a calendar
        for any month marks the cell whose number matches today's date.

        Args:
            highlight_today: Whether or not to flag today's cell

        Returns:
            One list of seven ``CalendarCell`` objects per week
        """
        first_day_of_week = self.first_day_of_week
        days_in_month = self.days_in_month
        today_daynum = datetime.now().day

        weeks: list[list[CalendarCell]] = []
        cur_day = 1
        for i in range(self.week_count):
            row: list[CalendarCell] = []
            for j in range(DAYS_PER_WEEK):
                cellnum = i * DAYS_PER_WEEK + j
                if cellnum >= first_day_of_week and cur_day <= days_in_month:
                    row.append(
                        CalendarCell(
                            day=cur_day,
                            content=self._day_values.get(cur_day, str(cur_day)),
                            is_today=bool(highlight_today) and cur_day == today_daynum,
                        )
                    )
                    cur_day += 1
                else:
                    row.append(CalendarCell(day=None))
            weeks.append(row)
        return weeks

    def render(self, highlight_today: bool = True) -> str:
        """Get the HTML for the calendar.

        Args:
            highlight_today: Whether or not to highlight today

        Returns:
            The HTML table for the calendar
        """
        html_parts = [
            '<table class="cal">',
            f'<tr><th colspan="7"><h5>{self.month_name}</h5></th></tr>',
            "<tr>" + "".join(f"<th>{label}</th>" for label in WEEKDAY_HEADERS) + "</tr>",
        ]

        for week in self.get_weeks(highlight_today):
            html_parts.append("<tr>")
            for cell in week:
                opening = '<td class="today">' if cell.is_today else "<td>"
                html_parts.append(f"{opening}{cell.content}</td>")
            html_parts.append("</tr>")

        html_parts.append("</table>")

        logger.verbose(  # type: ignore[attr-defined]
            "Rendered calendar for %d-%02d", self.year, self.month
        )
        return "".join(html_parts)
