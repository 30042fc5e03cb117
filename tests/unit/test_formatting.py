"""Unit tests for value rendering."""

import math
from datetime import UTC, datetime, timedelta

import pytest

from genv.formatting import format_complex, format_duration, format_time, render
from genv.kinds import EnvKind
from genv.parsers import parse_complex, parse_duration, parse_time


class TestFormatDuration:
    """Tests for format_duration()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (timedelta(0), "0s"),
            (timedelta(seconds=10), "10s"),
            (timedelta(hours=1, minutes=30), "1h30m0s"),
            (timedelta(hours=72, minutes=3, milliseconds=500), "72h3m0.5s"),
            (timedelta(minutes=-2), "-2m0s"),
            (timedelta(milliseconds=1500), "1.5s"),
            (timedelta(microseconds=1500), "1.5ms"),
            (timedelta(microseconds=1), "1µs"),
        ],
    )
    def test_format(self, value: timedelta, expected: str) -> None:
        assert format_duration(value) == expected

    @pytest.mark.parametrize(
        "value",
        [timedelta(days=3, microseconds=7), timedelta(seconds=-90.25), timedelta(microseconds=999)],
    )
    def test_parses_back(self, value: timedelta) -> None:
        assert parse_duration(format_duration(value)) == value


class TestFormatTime:
    """Tests for format_time()."""

    def test_utc_uses_gmt(self) -> None:
        value = datetime(2024, 5, 30, 20, 6, 14, tzinfo=UTC)
        assert format_time(value) == "Thu, 30 May 2024 20:06:14 GMT"

    def test_gmt_offset_keeps_zone_name(self) -> None:
        """Test that a GMT+h result prints its local clock and zone name."""
        value = parse_time("Thu, 30 May 2024 20:06:14 GMT+2")
        assert format_time(value) == "Thu, 30 May 2024 22:06:14 GMT+2"

    def test_zero_time(self) -> None:
        assert format_time(datetime(1, 1, 1, tzinfo=UTC)) == "Mon, 01 Jan 0001 00:00:00 GMT"


class TestFormatComplex:
    """Tests for format_complex()."""

    def test_format(self) -> None:
        assert format_complex(complex(10, 10)) == "(10.0+10.0i)"
        assert format_complex(complex(1, -2)) == "(1.0-2.0i)"

    def test_special_parts(self) -> None:
        assert format_complex(complex(math.inf, math.nan)) == "(+Inf+NaNi)"

    @pytest.mark.parametrize("value", [complex(10, 10), complex(-1.5, 0), complex(0, -2e-8)])
    def test_parses_back(self, value: complex) -> None:
        assert parse_complex(format_complex(value), 64) == value


class TestRender:
    """Tests for render()."""

    def test_bool(self) -> None:
        assert render(True, EnvKind.BOOL) == "true"
        assert render(False, "bool") == "false"

    def test_numbers(self) -> None:
        assert render(255, EnvKind.UINT8) == "255"
        assert render(1.0, EnvKind.FLOAT64) == "1.0"
        assert render(-math.inf, EnvKind.FLOAT32) == "-Inf"

    def test_string(self) -> None:
        assert render("value", EnvKind.STRING) == "value"

    def test_duration_and_time(self) -> None:
        assert render(timedelta(seconds=100), EnvKind.DURATION) == "1m40s"
        assert render(datetime(2024, 5, 30, 20, 6, 14, tzinfo=UTC), datetime) == (
            "Thu, 30 May 2024 20:06:14 GMT"
        )
