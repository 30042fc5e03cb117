"""Typed environment variable lookups.

Example usage:
    from datetime import timedelta

    from genv import EnvKind, get, get_with_default

    debug = get("APP_DEBUG", bool)
    workers = get("APP_WORKERS", EnvKind.UINT8)
    timeout = get_with_default("APP_TIMEOUT", timedelta(seconds=30))
"""

from genv.dispatch import convert, parse
from genv.errors import (
    ConversionError,
    ErrorCode,
    GenvError,
    UnsupportedKindError,
    VariableAbsentError,
)
from genv.kinds import EnvKind, resolve_kind, zero_value
from genv.lookup import (
    get,
    get_bool,
    get_complex,
    get_duration,
    get_float,
    get_int,
    get_str,
    get_time,
    get_uint,
    get_with_default,
    require,
)

__all__ = [
    "ConversionError",
    "EnvKind",
    "ErrorCode",
    "GenvError",
    "UnsupportedKindError",
    "VariableAbsentError",
    "convert",
    "get",
    "get_bool",
    "get_complex",
    "get_duration",
    "get_float",
    "get_int",
    "get_str",
    "get_time",
    "get_uint",
    "get_with_default",
    "parse",
    "require",
    "resolve_kind",
    "zero_value",
]
