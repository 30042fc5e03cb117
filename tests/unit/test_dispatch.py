"""Unit tests for the kind dispatcher."""

from datetime import datetime, timedelta

import pytest

from genv.dispatch import convert, parse
from genv.errors import ConversionError, ErrorCode, UnsupportedKindError
from genv.kinds import EnvKind

VALUE_TYPES = {
    EnvKind.STRING: str,
    EnvKind.BOOL: bool,
    EnvKind.UINT: int,
    EnvKind.UINT8: int,
    EnvKind.UINT16: int,
    EnvKind.UINT32: int,
    EnvKind.UINT64: int,
    EnvKind.INT: int,
    EnvKind.INT8: int,
    EnvKind.INT16: int,
    EnvKind.INT32: int,
    EnvKind.INT64: int,
    EnvKind.FLOAT32: float,
    EnvKind.FLOAT64: float,
    EnvKind.COMPLEX64: complex,
    EnvKind.COMPLEX128: complex,
    EnvKind.DURATION: timedelta,
    EnvKind.TIME: datetime,
}

AWKWARD_INPUTS = [
    "1",
    "-1",
    "true",
    "1.5",
    "10+10i",
    "10s",
    "Thu, 30 May 2024 20:06:14 GMT",
    " ",
    "\x00",
    "\ud800",
    "9" * 10000,
    "1e" + "9" * 5000,
    "(" * 100,
    "0x",
    "NaN",
    "-Inf",
    "💥",
]


class TestConvert:
    """Tests for convert()."""

    def test_every_kind_has_a_parser(self) -> None:
        """Test that dispatch covers the whole kind set."""
        samples = {
            EnvKind.DURATION: "1s",
            EnvKind.TIME: "Thu, 30 May 2024 20:06:14 GMT",
        }
        for kind in EnvKind:
            assert convert(samples.get(kind, "1"), kind) is not None

    @pytest.mark.parametrize("kind", list(EnvKind))
    def test_empty_text_fails(self, kind: EnvKind) -> None:
        assert convert("", kind) is None

    @pytest.mark.parametrize("kind", list(EnvKind))
    @pytest.mark.parametrize("raw", AWKWARD_INPUTS)
    def test_total(self, kind: EnvKind, raw: str) -> None:
        """Test that any text yields None or a value of the kind's type."""
        value = convert(raw, kind)
        if value is not None:
            assert type(value) is VALUE_TYPES[kind]

    def test_failure_stays_within_kind(self) -> None:
        """Test that a failure for one kind does not affect another."""
        assert convert("300", EnvKind.UINT8) is None
        assert convert("300", EnvKind.UINT16) == 300
        assert convert("300", EnvKind.FLOAT32) == 300.0
        assert convert("300", EnvKind.STRING) == "300"

    def test_unsupported_kind(self) -> None:
        with pytest.raises(UnsupportedKindError) as exc_info:
            convert("1", bytes)
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_KIND


class TestParse:
    """Tests for parse()."""

    def test_returns_value(self) -> None:
        assert parse("1h", EnvKind.DURATION) == timedelta(hours=1)
        assert parse("false", "bool") is False

    def test_raises_conversion_error(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            parse("256", EnvKind.UINT8)
        assert exc_info.value.code == ErrorCode.CONVERSION_FAILED
        assert "uint8" in exc_info.value.message

    def test_conversion_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse("", EnvKind.STRING)
