"""Kind dispatcher.

Maps each ``EnvKind`` to exactly one parser. ``convert`` is total: it never
raises for any text and reports a failed parse as ``None``.
"""

from collections.abc import Callable
from functools import partial
from typing import Any

from genv.errors import ConversionError
from genv.kinds import (
    COMPLEX_BITS,
    FLOAT_BITS,
    SIGNED_BITS,
    UNSIGNED_BITS,
    EnvKind,
    KindLike,
    resolve_kind,
)
from genv.parsers import (
    parse_bool,
    parse_complex,
    parse_duration,
    parse_float,
    parse_signed,
    parse_string,
    parse_time,
    parse_unsigned,
)

Parser = Callable[[str], Any | None]

_PARSERS: dict[EnvKind, Parser] = {
    EnvKind.STRING: parse_string,
    EnvKind.BOOL: parse_bool,
    **{kind: partial(parse_unsigned, bits=bits) for kind, bits in UNSIGNED_BITS.items()},
    **{kind: partial(parse_signed, bits=bits) for kind, bits in SIGNED_BITS.items()},
    **{kind: partial(parse_float, bits=bits) for kind, bits in FLOAT_BITS.items()},
    **{kind: partial(parse_complex, bits=bits) for kind, bits in COMPLEX_BITS.items()},
    EnvKind.DURATION: parse_duration,
    EnvKind.TIME: parse_time,
}


def convert(raw: str, kind: KindLike) -> Any | None:
    """Convert raw text to the requested kind.

    Args:
        raw: Text read from the environment
        kind: Requested kind

    Returns:
        The converted value, or None when ``raw`` is empty or not a valid
        literal for the kind

    Raises:
        UnsupportedKindError: If ``kind`` is outside the supported set
    """
    parser = _PARSERS[resolve_kind(kind)]
    if not raw:
        return None
    return parser(raw)


def parse(raw: str, kind: KindLike) -> Any:
    """Like ``convert`` but raises ``ConversionError`` instead of returning None."""
    resolved = resolve_kind(kind)
    value = convert(raw, resolved)
    if value is None:
        raise ConversionError(raw, resolved.value)
    return value
