"""Text rendering of converted values.

Output of ``render`` is accepted by the parser of the same kind.
"""

import math
from datetime import datetime, timedelta
from typing import Any

from genv.kinds import EnvKind, KindLike, resolve_kind
from genv.parsers import MONTH_NAMES, WEEKDAY_NAMES

_MICROS_PER_MILLI = 1_000
_MICROS_PER_SECOND = 1_000_000
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE


def _decimal(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{fraction:0{width}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Format a duration as ``72h3m0.5s``, ``1.5ms`` or ``0s``."""
    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < _MICROS_PER_MILLI:
        return f"{sign}{micros}µs"
    if micros < _MICROS_PER_SECOND:
        return f"{sign}{_decimal(micros, _MICROS_PER_MILLI)}ms"

    hours, rest = divmod(micros, _MICROS_PER_HOUR)
    minutes, rest = divmod(rest, _MICROS_PER_MINUTE)
    seconds = f"{_decimal(rest, _MICROS_PER_SECOND)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"


def format_time(value: datetime) -> str:
    """Format a timestamp in RFC 1123 form, independent of the locale."""
    offset = value.utcoffset()
    if offset is None or not offset:
        zone = "GMT"
    else:
        zone = value.tzname() or "GMT"
    return (
        f"{WEEKDAY_NAMES[value.weekday()]}, {value.day:02d} "
        f"{MONTH_NAMES[value.month - 1]} {value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} {zone}"
    )


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return repr(value)


def format_complex(value: complex) -> str:
    imag = _format_float(value.imag)
    if imag[0] not in "+-":
        imag = f"+{imag}"
    return f"({_format_float(value.real)}{imag}i)"


def render(value: Any, kind: KindLike) -> str:
    """Render a converted value as text."""
    resolved = resolve_kind(kind)
    match resolved:
        case EnvKind.BOOL:
            return "true" if value else "false"
        case EnvKind.FLOAT32 | EnvKind.FLOAT64:
            return _format_float(value)
        case EnvKind.COMPLEX64 | EnvKind.COMPLEX128:
            return format_complex(value)
        case EnvKind.DURATION:
            return format_duration(value)
        case EnvKind.TIME:
            return format_time(value)
        case _:
            return str(value)
