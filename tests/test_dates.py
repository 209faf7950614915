"""Tests for event date handling."""

from __future__ import annotations

from datetime import date

import pytest

from pickem.dates import add_months, format_readable, parse_event_date


class TestParseEventDate:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("04.01.2026", date(2026, 1, 4)),
            ("Jan 4, 2026", date(2026, 1, 4)),
            ("January 4, 2026", date(2026, 1, 4)),
            ("2026-01-04", date(2026, 1, 4)),
            ("2026-01-04T19:00:00Z", date(2026, 1, 4)),
            ("Jan 4th 2026", date(2026, 1, 4)),
            ("Mar 21st 2026", date(2026, 3, 21)),
        ],
    )
    def test_formats(self, text: str, expected: date) -> None:
        assert parse_event_date(text) == expected

    @pytest.mark.parametrize("text", [None, "", "TBD", "32.13.2026"])
    def test_unparseable(self, text: str | None) -> None:
        assert parse_event_date(text) is None


class TestFormatReadable:
    def test_cagematch_date(self) -> None:
        assert format_readable("11.10.2026") == "Oct 11, 2026"

    def test_passes_unknown_through(self) -> None:
        assert format_readable("TBD") == "TBD"
        assert format_readable(None) is None


class TestAddMonths:
    def test_forward(self) -> None:
        assert add_months(date(2026, 10, 17), 3) == date(2027, 1, 17)

    def test_backward(self) -> None:
        assert add_months(date(2026, 10, 17), -6) == date(2026, 4, 17)

    def test_clamps_to_month_end(self) -> None:
        assert add_months(date(2026, 8, 31), -6) == date(2026, 2, 28)
