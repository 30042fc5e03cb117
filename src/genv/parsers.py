"""Text parsers, one per kind.

Every parser takes a non-empty string and returns the converted value, or
``None`` when the text is not a valid literal for that kind. Parsers never
raise on bad input.

Accepted forms:
    bool:      1 t T TRUE true True / 0 f F FALSE false False
    integers:  base 10, ASCII digits, optional sign for signed kinds only
    floats:    1  1.  .5  1e-3  1_000  0x1.8p1  inf  -Infinity  NaN
               (float32 is rounded once, from the exact decimal or hex value)
    complex:   1  2i  1+2i  1-2.5e3i  (1+2i)
    duration:  10s  1h30m  1.5h  -300ms  0
    time:      Thu, 30 May 2024 20:06:14 GMT  (RFC 1123, one layout only)
               zones GMT UTC PST CEST GMT+2 +0000; years 0001 to 9999 only,
               so year 0000 is rejected
"""

import math
import re
from datetime import UTC, datetime, timedelta, timezone
from fractions import Fraction

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

# Any 64-bit magnitude fits in 20 digits once leading zeros are dropped.
_MAX_INT_DIGITS = 20

_SPECIAL_FLOAT = r"[+-]?(?i:infinity|inf)|(?i:nan)"
# Underscores may separate digits, or follow the 0x prefix.
_DIGITS = r"[0-9]+(?:_[0-9]+)*"
_HEX_DIGITS = r"[0-9a-fA-F]+(?:_[0-9a-fA-F]+)*"
_HEX_FLOAT = (
    rf"[+-]?0[xX](?:_?{_HEX_DIGITS}(?:\.(?:{_HEX_DIGITS})?)?|\.{_HEX_DIGITS})"
    rf"[pP][+-]?{_DIGITS}"
)
_DECIMAL_FLOAT = (
    rf"[+-]?(?:{_DIGITS}(?:\.(?:{_DIGITS})?)?|\.{_DIGITS})(?:[eE][+-]?{_DIGITS})?"
)
_FLOAT = rf"(?:{_SPECIAL_FLOAT}|{_HEX_FLOAT}|{_DECIMAL_FLOAT})"

_FLOAT_RE = re.compile(_FLOAT)

_DECIMAL_PARTS_RE = re.compile(
    r"(?P<sign>[+-]?)(?P<whole>[0-9]*)(?:\.(?P<fraction>[0-9]*))?(?:[eE](?P<exponent>[+-]?[0-9]+))?"
)
_HEX_PARTS_RE = re.compile(
    r"(?P<sign>[+-]?)0[xX](?P<whole>[0-9a-fA-F]*)(?:\.(?P<fraction>[0-9a-fA-F]*))?"
    r"[pP](?P<exponent>[+-]?[0-9]+)"
)

# Enough decimal digits to tell any float32 rounding tie apart.
_MAX_SIGNIFICANT_DIGITS = 200

_SINGLE_PRECISION = 24
_SINGLE_MIN_EXPONENT = -126
_SINGLE_LIMIT = 2.0**128

# A '+' before the imaginary part is consumed unless another '+' follows it;
# a '-' stays as the sign of the imaginary part.
_COMPLEX_RE = re.compile(
    rf"(?P<first>{_FLOAT})"
    rf"(?:(?P<imaginary_only>i)|(?:\+(?!\+)|(?=-))(?P<second>{_FLOAT})i)?"
)

_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_DURATION_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

# Durations are bounded by a signed 64-bit nanosecond count.
_DURATION_LIMIT = 1 << 63

_DURATION_COMPONENT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

# A space in the layout matches any run of spaces in the text.
_RFC1123_RE = re.compile(
    r"(?P<weekday>[A-Za-z]{3}), +(?P<day>[0-9]{2}) +(?P<month>[A-Za-z]{3}) +"
    r"(?P<year>[0-9]{4}) +(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):"
    r"(?P<second>[0-9]{2})(?:[.,](?P<fraction>[0-9]+))? +"
    r"(?P<zone>ChST|MeST|GMT(?P<gmt_offset>[+-][0-9]+)?"
    r"|(?P<numeric_offset>[+-][0-9]+)|[A-Z]{3,5})"
)

_WEEKDAYS = tuple(name.lower() for name in WEEKDAY_NAMES)
_MONTHS = tuple(name.lower() for name in MONTH_NAMES)


def parse_string(raw: str) -> str:
    return raw


def parse_bool(raw: str) -> bool | None:
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    return None


def _digits_to_int(digits: str) -> int | None:
    significant = digits.lstrip("0")
    if len(significant) > _MAX_INT_DIGITS:
        return None
    return int(significant or "0")


def parse_unsigned(raw: str, bits: int) -> int | None:
    """Parse a base 10 unsigned integer that fits in ``bits`` bits."""
    if not _UNSIGNED_RE.fullmatch(raw):
        return None
    value = _digits_to_int(raw)
    if value is None or value >= 1 << bits:
        return None
    return value


def parse_signed(raw: str, bits: int) -> int | None:
    """Parse a base 10 signed integer that fits in ``bits`` bits."""
    if not _SIGNED_RE.fullmatch(raw):
        return None
    negative = raw[0] == "-"
    magnitude = _digits_to_int(raw.lstrip("+-"))
    if magnitude is None:
        return None
    limit = 1 << (bits - 1)
    if negative:
        return -magnitude if magnitude <= limit else None
    return magnitude if magnitude < limit else None


def _exponent(text: str | None) -> int:
    if not text:
        return 0
    digits = text.lstrip("+-").lstrip("0") or "0"
    return -int(digits) if text[0] == "-" else int(digits)


def _exact_decimal(literal: str) -> Fraction:
    parts = _DECIMAL_PARTS_RE.fullmatch(literal)
    fraction = parts.group("fraction") or ""
    digits = (parts.group("whole") + fraction).lstrip("0")
    scale = _exponent(parts.group("exponent")) - len(fraction)
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        tail = digits[_MAX_SIGNIFICANT_DIGITS:]
        digits = digits[:_MAX_SIGNIFICANT_DIGITS]
        scale += len(tail)
        if tail.strip("0"):
            # A nonzero dropped tail still breaks a tie upwards.
            digits += "1"
            scale -= 1
    value = int(digits or "0") * Fraction(10) ** scale
    return -value if parts.group("sign") == "-" else value


def _exact_hex(literal: str) -> Fraction:
    parts = _HEX_PARTS_RE.fullmatch(literal)
    fraction = parts.group("fraction") or ""
    mantissa = int(parts.group("whole") + fraction or "0", 16)
    value = mantissa * Fraction(2) ** (_exponent(parts.group("exponent")) - 4 * len(fraction))
    return -value if parts.group("sign") == "-" else value


def _round_to_single(exact: Fraction) -> float | None:
    """Round an exact non-zero value to float32, ties to even.

    Returns ``None`` when the result does not fit in single precision.
    """
    magnitude = abs(exact)
    exponent = magnitude.numerator.bit_length() - magnitude.denominator.bit_length()
    if magnitude < Fraction(2) ** exponent:
        exponent -= 1
    quantum = max(exponent, _SINGLE_MIN_EXPONENT) - (_SINGLE_PRECISION - 1)
    rounded = math.ldexp(round(magnitude / Fraction(2) ** quantum), quantum)
    if rounded >= _SINGLE_LIMIT:
        return None
    return -rounded if exact < 0 else rounded


def _float_value(literal: str, bits: int) -> float | None:
    """Convert a literal already matched by ``_FLOAT`` to the given width."""
    literal = literal.replace("_", "")
    is_hex = literal.lstrip("+-")[:2].lower() == "0x"
    if is_hex:
        try:
            value = float.fromhex(literal)
        except OverflowError:
            return None
    else:
        value = float(literal)
        # Overflowing decimal text comes back as infinity.
        if math.isinf(value) and literal.lstrip("+-")[0] not in "iI":
            return None
    if bits == 64 or value == 0 or not math.isfinite(value):
        return value
    exact = _exact_hex(literal) if is_hex else _exact_decimal(literal)
    return _round_to_single(exact)


def parse_float(raw: str, bits: int) -> float | None:
    """Parse a float literal at 32 or 64 bit precision."""
    if not _FLOAT_RE.fullmatch(raw):
        return None
    return _float_value(raw, bits)


def parse_complex(raw: str, bits: int) -> complex | None:
    """Parse an ``a+bi`` literal; ``bits`` is the size of each component."""
    text = raw
    if len(text) >= 2 and text[0] == "(" and text[-1] == ")":
        text = text[1:-1]
    match = _COMPLEX_RE.fullmatch(text)
    if match is None:
        return None

    first = _float_value(match.group("first"), bits)
    if first is None:
        return None
    if match.group("imaginary_only"):
        return complex(0.0, first)
    if match.group("second") is None:
        return complex(first, 0.0)

    second = _float_value(match.group("second"), bits)
    if second is None:
        return None
    return complex(first, second)


def _nanoseconds_to_timedelta(nanoseconds: int) -> timedelta:
    # Round half to even, the same way timedelta rounds float input.
    microseconds, remainder = divmod(nanoseconds, _MICROSECOND)
    if remainder > 500 or (remainder == 500 and microseconds % 2):
        microseconds += 1
    return timedelta(microseconds=microseconds)


def parse_duration(raw: str) -> timedelta | None:
    """Parse a sequence of ``<number><unit>`` components such as ``1h30m``.

    The total is computed exactly in nanoseconds, must fit a signed 64-bit
    count and is then rounded to the microsecond resolution of timedelta.
    """
    text = raw
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        return None

    total = 0
    position = 0
    while position < len(text):
        match = _DURATION_COMPONENT_RE.match(text, position)
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            return None
        scale = _DURATION_UNITS.get(unit)
        if scale is None:
            return None

        whole_value = _digits_to_int(whole) if whole else 0
        if whole_value is None:
            return None
        total += whole_value * scale
        if fraction:
            # Digits past the 30th cannot reach a whole nanosecond.
            fraction = fraction[:30]
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > _DURATION_LIMIT:
            return None
        position = match.end()

    if negative:
        return _nanoseconds_to_timedelta(-total)
    if total == _DURATION_LIMIT:
        return None
    return _nanoseconds_to_timedelta(total)


def _offset_hours(text: str) -> int | None:
    hours = _digits_to_int(text[1:])
    if hours is None or hours > 23:
        return None
    return -hours if text[0] == "-" else hours


def _zone_offset(
    zone: str, gmt_offset: str | None, numeric_offset: str | None
) -> timezone | None:
    if gmt_offset is not None:
        hours = _offset_hours(gmt_offset)
        if hours is None:
            return None
        return timezone(timedelta(hours=hours), zone)
    if numeric_offset is not None:
        # Accepted like a named zone: validated, but no offset applied.
        return UTC if _offset_hours(numeric_offset) is not None else None
    if zone.startswith("GMT") and zone != "GMT":
        return None
    if zone in ("ChST", "MeST") or len(zone) == 3:
        return UTC
    if len(zone) == 4 and (zone[3] == "T" or zone == "WITA"):
        return UTC
    if len(zone) == 5 and zone[4] == "T":
        return UTC
    return None


def parse_time(raw: str) -> datetime | None:
    """Parse an RFC 1123 timestamp, e.g. ``Thu, 30 May 2024 20:06:14 GMT``.

    The weekday is matched by name but not checked against the date. The
    clock is always read as UTC. Named and numeric zones carry no offset;
    ``GMT+h``/``GMT-h`` keep the same instant and only change the zone the
    result is expressed in.
    """
    match = _RFC1123_RE.fullmatch(raw)
    if match is None:
        return None
    if match.group("weekday").lower() not in _WEEKDAYS:
        return None
    month_name = match.group("month").lower()
    if month_name not in _MONTHS:
        return None

    tz = _zone_offset(
        match.group("zone"), match.group("gmt_offset"), match.group("numeric_offset")
    )
    if tz is None:
        return None

    fraction = match.group("fraction") or ""
    microsecond = int((fraction + "000000")[:6])
    try:
        value = datetime(
            int(match.group("year")),
            _MONTHS.index(month_name) + 1,
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=UTC,
        )
        if tz is not UTC:
            value = value.astimezone(tz)
    except (ValueError, OverflowError):
        return None
    return value
