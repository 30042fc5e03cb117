"""Typed environment lookups.

``get`` falls back to the kind's zero value whenever the variable is absent
or cannot be converted. ``get_with_default`` returns the caller's default
only when the variable is absent; a value that is present but invalid still
yields the zero value, never the default.
"""

from datetime import datetime, timedelta
from typing import Any, Literal, overload

from genv.dispatch import convert, parse
from genv.env import read
from genv.errors import VariableAbsentError
from genv.kinds import EnvKind, KindLike, kind_of, resolve_kind, zero_value

IntKind = Literal[
    EnvKind.UINT,
    EnvKind.UINT8,
    EnvKind.UINT16,
    EnvKind.UINT32,
    EnvKind.UINT64,
    EnvKind.INT,
    EnvKind.INT8,
    EnvKind.INT16,
    EnvKind.INT32,
    EnvKind.INT64,
]
FloatKind = Literal[EnvKind.FLOAT32, EnvKind.FLOAT64]
ComplexKind = Literal[EnvKind.COMPLEX64, EnvKind.COMPLEX128]


@overload
def get(key: str) -> str: ...
@overload
def get(key: str, kind: Literal[EnvKind.STRING] | type[str]) -> str: ...
@overload
def get(key: str, kind: Literal[EnvKind.BOOL] | type[bool]) -> bool: ...
@overload
def get(key: str, kind: IntKind | type[int]) -> int: ...
@overload
def get(key: str, kind: FloatKind | type[float]) -> float: ...
@overload
def get(key: str, kind: ComplexKind | type[complex]) -> complex: ...
@overload
def get(key: str, kind: Literal[EnvKind.DURATION] | type[timedelta]) -> timedelta: ...
@overload
def get(key: str, kind: Literal[EnvKind.TIME] | type[datetime]) -> datetime: ...
@overload
def get(key: str, kind: KindLike) -> Any: ...
def get(key: str, kind: KindLike = EnvKind.STRING) -> Any:
    """Read ``key`` from the environment as ``kind``.

    Args:
        key: Environment variable name
        kind: Requested kind (an ``EnvKind``, its name, or a builtin type)

    Returns:
        The converted value, or the zero value of the kind if the variable
        is absent, empty or unparsable

    Raises:
        UnsupportedKindError: If ``kind`` is outside the supported set
    """
    resolved = resolve_kind(kind)
    raw, present = read(key)
    if not present:
        return zero_value(resolved)
    value = convert(raw, resolved)
    return zero_value(resolved) if value is None else value


def get_with_default[T](key: str, default: T, kind: KindLike | None = None) -> T:
    """Read ``key`` from the environment as ``kind``, or return ``default``.

    ``default`` is returned as-is, without any validation, but only when the
    variable is absent or empty. A present value that cannot be converted
    yields the zero value of the kind.

    Args:
        key: Environment variable name
        default: Value returned when the variable is absent
        kind: Requested kind; inferred from the type of ``default`` if omitted

    Returns:
        The converted value, ``default``, or the zero value of the kind

    Raises:
        UnsupportedKindError: If the kind is outside the supported set
    """
    resolved = kind_of(default) if kind is None else resolve_kind(kind)
    raw, present = read(key)
    if not present:
        return default
    value = convert(raw, resolved)
    return zero_value(resolved) if value is None else value


def _lookup(key: str, default: Any, kind: EnvKind) -> Any:
    if default is None:
        return get(key, kind)
    return get_with_default(key, default, kind)


def get_str(key: str, default: str | None = None) -> str:
    return _lookup(key, default, EnvKind.STRING)


def get_bool(key: str, default: bool | None = None) -> bool:
    return _lookup(key, default, EnvKind.BOOL)


def get_int(key: str, default: int | None = None) -> int:
    return _lookup(key, default, EnvKind.INT)


def get_uint(key: str, default: int | None = None) -> int:
    return _lookup(key, default, EnvKind.UINT)


def get_float(key: str, default: float | None = None) -> float:
    return _lookup(key, default, EnvKind.FLOAT64)


def get_complex(key: str, default: complex | None = None) -> complex:
    return _lookup(key, default, EnvKind.COMPLEX128)


def get_duration(key: str, default: timedelta | None = None) -> timedelta:
    """Read a duration such as ``90s`` or ``1h30m``."""
    return _lookup(key, default, EnvKind.DURATION)


def get_time(key: str, default: datetime | None = None) -> datetime:
    """Read an RFC 1123 timestamp such as ``Thu, 30 May 2024 20:06:14 GMT``."""
    return _lookup(key, default, EnvKind.TIME)


def require(key: str, kind: KindLike = EnvKind.STRING) -> Any:
    """Read a variable that must be set and valid

    Args:
        key: Environment variable name
        kind: Requested kind

    Returns:
        The converted value

    Raises:
        VariableAbsentError: If the variable is absent or empty
        ConversionError: If the value cannot be converted to ``kind``
    """
    resolved = resolve_kind(kind)
    raw, present = read(key)
    if not present:
        raise VariableAbsentError(key)
    return parse(raw, resolved)
