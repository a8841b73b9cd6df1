"""Tests for the month calendar grid renderer."""

import calendar
from datetime import datetime

import pytest

from htmlwidgets.display.calendar_grid import CalendarCell, CalendarGrid
from htmlwidgets.utils.logging import VERBOSE


def _days(weeks: list[list[CalendarCell]]) -> list[int]:
    return [cell.day for week in weeks for cell in week if not cell.is_empty]


class TestCalendarGridInitialization:
    """Test year/month resolution at construction time."""

    def test_init_with_year_and_month(self, fixed_now) -> None:
        """Test explicit year and month are kept."""
        grid = CalendarGrid(2023, 7)

        assert grid.year == 2023
        assert grid.month == 7

    def test_init_defaults_to_current_month(self, fixed_now) -> None:
        """Test missing year and month fall back to the host date."""
        grid = CalendarGrid()

        assert grid.year == 2024
        assert grid.month == 2

    def test_init_accepts_numeric_strings(self, fixed_now) -> None:
        """Test integer-like strings are accepted."""
        grid = CalendarGrid("2021", " 11 ")

        assert grid.year == 2021
        assert grid.month == 11

    @pytest.mark.parametrize("bad_value", ["abc", "", "4.5", None, [], True])
    def test_init_non_numeric_falls_back(self, fixed_now, bad_value) -> None:
        """Test non-numeric values fall back to the current date."""
        grid = CalendarGrid(bad_value, bad_value)

        assert grid.year == 2024
        assert grid.month == 2

    def test_month_thirteen_rolls_into_next_year(self, fixed_now) -> None:
        """Test month 13 becomes January of the following year."""
        grid = CalendarGrid(2023, 13)

        assert (grid.year, grid.month) == (2024, 1)

    def test_month_zero_rolls_into_previous_year(self, fixed_now) -> None:
        """Test month 0 becomes December of the previous year."""
        grid = CalendarGrid(2023, 0)

        assert (grid.year, grid.month) == (2022, 12)

    def test_out_of_range_year_falls_back(self, fixed_now) -> None:
        """Test a year the calendar cannot represent uses the current year."""
        grid = CalendarGrid(0, 5)

        assert (grid.year, grid.month) == (2024, 5)


class TestCalendarGridDayValues:
    """Test day value storage."""

    def test_day_values_default_empty(self, fixed_now) -> None:
        """Test no day values are set initially."""
        assert CalendarGrid(2024, 2).get_day_values() == {}

    def test_set_and_get_day_values(self, fixed_now) -> None:
        """Test day values round-trip through the setters."""
        grid = CalendarGrid(2024, 2)
        grid.set_day_values({3: "<b>3</b>", 10: "Meeting"})

        assert grid.get_day_values() == {3: "<b>3</b>", 10: "Meeting"}

    def test_set_day_values_replaces_previous(self, fixed_now) -> None:
        """Test setting day values again replaces the whole mapping."""
        grid = CalendarGrid(2024, 2)
        grid.set_day_values({1: "a"})
        grid.set_day_values({2: "b"})

        assert grid.get_day_values() == {2: "b"}

    def test_set_day_values_normalizes_keys(self, fixed_now) -> None:
        """Test numeric string keys become ints and junk keys are dropped."""
        grid = CalendarGrid(2024, 2)
        grid.set_day_values({"5": "five", "x": "dropped", 6: 6})

        assert grid.get_day_values() == {5: "five", 6: "6"}

    def test_get_day_values_returns_copy(self, fixed_now) -> None:
        """Test mutating the returned mapping does not change the grid."""
        grid = CalendarGrid(2024, 2)
        grid.set_day_values({1: "a"})

        grid.get_day_values()[2] = "b"

        assert grid.get_day_values() == {1: "a"}


class TestCalendarGridLayout:
    """Test the week/cell layout."""

    def test_february_2024_layout(self, fixed_now) -> None:
        """Test leap-year February starting on a Thursday."""
        grid = CalendarGrid(2024, 2)
        weeks = grid.get_weeks(highlight_today=False)

        assert grid.first_day_of_week == 4
        assert grid.days_in_month == 29
        assert len(weeks) == 5
        assert [cell.day for cell in weeks[0]] == [None, None, None, None, 1, 2, 3]
        assert [cell.day for cell in weeks[4]] == [25, 26, 27, 28, 29, None, None]

    @pytest.mark.parametrize(
        "year,month,first_day,days,week_count",
        [
            (2015, 2, 0, 28, 4),
            (2023, 2, 3, 28, 5),
            (2024, 3, 5, 31, 6),
            (2024, 6, 6, 30, 6),
            (2024, 9, 0, 30, 5),
            (2100, 2, 1, 28, 5),
        ],
    )
    def test_month_metrics(self, fixed_now, year, month, first_day, days, week_count) -> None:
        """Test offset, day count and row count for several months."""
        grid = CalendarGrid(year, month)

        assert grid.first_day_of_week == first_day
        assert grid.days_in_month == days
        assert grid.week_count == week_count
        assert len(grid.get_weeks()) == week_count

    @pytest.mark.parametrize("year", [2023, 2024])
    @pytest.mark.parametrize("month", range(1, 13))
    def test_every_day_appears_once_in_order(self, fixed_now, year, month) -> None:
        """Test days 1..N fill the grid left-to-right starting at the offset."""
        grid = CalendarGrid(year, month)
        weeks = grid.get_weeks()
        days_in_month = calendar.monthrange(year, month)[1]

        assert all(len(week) == 7 for week in weeks)
        assert _days(weeks) == list(range(1, days_in_month + 1))

        flat = [cell for week in weeks for cell in week]
        assert flat[grid.first_day_of_week].day == 1
        assert all(cell.is_empty for cell in flat[: grid.first_day_of_week])

    def test_day_values_replace_numbers(self, fixed_now) -> None:
        """Test set day values are used as cell content."""
        grid = CalendarGrid(2024, 2)
        grid.set_day_values({1: '<a href="/d/1">1</a>', 29: "Leap"})
        flat = [cell for week in grid.get_weeks() for cell in week if not cell.is_empty]

        assert flat[0].content == '<a href="/d/1">1</a>'
        assert flat[1].content == "2"
        assert flat[-1].content == "Leap"

    def test_day_values_outside_month_ignored(self, fixed_now) -> None:
        """Test a value for day 30 never shows in a 29-day month."""
        grid = CalendarGrid(2024, 2)
        grid.set_day_values({30: "Nope"})

        assert "Nope" not in grid.render()


class TestCalendarGridToday:
    """Test today highlighting."""

    def test_today_cell_flagged(self, fixed_now) -> None:
        """Test the cell matching today's day-of-month is flagged."""
        weeks = CalendarGrid(2024, 2).get_weeks()
        today_cells = [cell for week in weeks for cell in week if cell.is_today]

        assert [cell.day for cell in today_cells] == [14]

    def test_highlight_disabled(self, fixed_now) -> None:
        """Test no cell is flagged when highlighting is off."""
        grid = CalendarGrid(2024, 2)

        assert not any(cell.is_today for week in grid.get_weeks(False) for cell in week)
        assert "today" not in grid.render(highlight_today=False)

    def test_highlight_matches_day_only(self, fixed_now) -> None:
        """Test another month still flags the cell with today's day number."""
        html = CalendarGrid(2019, 7).render()

        assert '<td class="today">14</td>' in html
        assert html.count('class="today"') == 1

    def test_no_highlight_past_month_end(self, fixed_now) -> None:
        """Test today's day 31 flags nothing in a 30-day month."""
        fixed_now(datetime(2024, 3, 31))
        html = CalendarGrid(2024, 4).render()

        assert 'class="today"' not in html


class TestCalendarGridRender:
    """Test HTML output."""

    def test_render_structure(self, fixed_now) -> None:
        """Test table, month header, weekday header and rows."""
        html = CalendarGrid(2024, 2).render()

        assert html.startswith(
            '<table class="cal"><tr><th colspan="7"><h5>February</h5></th></tr>'
            "<tr><th>S</th><th>M</th><th>T</th><th>W</th><th>T</th><th>F</th><th>S</th></tr>"
        )
        assert html.endswith("</tr></table>")
        assert html.count("<tr>") == 2 + 5
        assert html.count("<td") == 35
        assert html.count("<td></td>") == 6

    def test_render_first_row(self, fixed_now) -> None:
        """Test the first row of February 2024."""
        html = CalendarGrid(2024, 2).render()

        assert "<tr><td></td><td></td><td></td><td></td><td>1</td><td>2</td><td>3</td></tr>" in html

    def test_render_today_cell(self, fixed_now) -> None:
        """Test today's cell carries the today class."""
        html = CalendarGrid(2024, 2).render()

        assert '<td class="today">14</td>' in html

    def test_render_is_idempotent(self, fixed_now) -> None:
        """Test repeated renders give identical output."""
        grid = CalendarGrid(2024, 2)
        grid.set_day_values({5: "five"})

        assert grid.render() == grid.render()

    def test_render_reflects_new_day_values(self, fixed_now) -> None:
        """Test day values set after a render affect the next render."""
        grid = CalendarGrid(2024, 2)
        first = grid.render()
        grid.set_day_values({5: "five"})

        assert "five" not in first
        assert "<td>five</td>" in grid.render()

    def test_render_logs_summary_at_verbose(self, fixed_now, caplog) -> None:
        """Test a render summary is logged at the VERBOSE level."""
        with caplog.at_level(VERBOSE, logger="htmlwidgets.display.calendar_grid"):
            CalendarGrid(2024, 2).render()

        records = [r for r in caplog.records if r.name == "htmlwidgets.display.calendar_grid"]
        assert records[-1].levelno == VERBOSE
        assert records[-1].getMessage() == "Rendered calendar for 2024-02"
