"""Supported value kinds.

The set of kinds is closed: every lookup names one of the members of
``EnvKind`` (or a builtin type that maps onto one), and each member has
exactly one parser and one zero value.
"""

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

from genv.errors import UnsupportedKindError


class EnvKind(str, Enum):
    """Semantic type requested for an environment value"""

    STRING = "string"
    BOOL = "bool"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    DURATION = "duration"
    TIME = "time"


KindLike = EnvKind | str | type

# Widthless integers use the platform natural width.
NATIVE_BITS = 64

UNSIGNED_BITS: dict[EnvKind, int] = {
    EnvKind.UINT: NATIVE_BITS,
    EnvKind.UINT8: 8,
    EnvKind.UINT16: 16,
    EnvKind.UINT32: 32,
    EnvKind.UINT64: 64,
}

SIGNED_BITS: dict[EnvKind, int] = {
    EnvKind.INT: NATIVE_BITS,
    EnvKind.INT8: 8,
    EnvKind.INT16: 16,
    EnvKind.INT32: 32,
    EnvKind.INT64: 64,
}

FLOAT_BITS: dict[EnvKind, int] = {
    EnvKind.FLOAT32: 32,
    EnvKind.FLOAT64: 64,
}

# Bit size of each component.
COMPLEX_BITS: dict[EnvKind, int] = {
    EnvKind.COMPLEX64: 32,
    EnvKind.COMPLEX128: 64,
}

ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)

_ZERO_VALUES: dict[EnvKind, Any] = {
    EnvKind.STRING: "",
    EnvKind.BOOL: False,
    **dict.fromkeys(UNSIGNED_BITS, 0),
    **dict.fromkeys(SIGNED_BITS, 0),
    **dict.fromkeys(FLOAT_BITS, 0.0),
    **dict.fromkeys(COMPLEX_BITS, 0j),
    EnvKind.DURATION: timedelta(0),
    EnvKind.TIME: ZERO_TIME,
}

# Keyed on the exact type: bool never resolves to INT, subclasses never match.
_BUILTIN_KINDS: dict[type, EnvKind] = {
    str: EnvKind.STRING,
    bool: EnvKind.BOOL,
    int: EnvKind.INT,
    float: EnvKind.FLOAT64,
    complex: EnvKind.COMPLEX128,
    timedelta: EnvKind.DURATION,
    datetime: EnvKind.TIME,
}


def resolve_kind(kind: KindLike) -> EnvKind:
    """Normalize a kind argument to an ``EnvKind`` member.

    Args:
        kind: An ``EnvKind`` member, its value (``"uint8"``) or one of the
            builtin types ``str``, ``bool``, ``int``, ``float``, ``complex``,
            ``timedelta`` and ``datetime``.

    Returns:
        The matching ``EnvKind``.

    Raises:
        UnsupportedKindError: If the kind is outside the supported set.
    """
    if isinstance(kind, EnvKind):
        return kind
    if isinstance(kind, str):
        try:
            return EnvKind(kind.lower())
        except ValueError:
            raise UnsupportedKindError(kind) from None
    if isinstance(kind, type) and kind in _BUILTIN_KINDS:
        return _BUILTIN_KINDS[kind]
    raise UnsupportedKindError(kind)


def kind_of(value: Any) -> EnvKind:
    """Infer the kind of a default value from its exact Python type."""
    return resolve_kind(type(value))


def zero_value(kind: KindLike) -> Any:
    """Return the zero value of a kind."""
    return _ZERO_VALUES[resolve_kind(kind)]
