from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes"""
    UNSUPPORTED_KIND = "UNSUPPORTED_KIND"
    CONVERSION_FAILED = "CONVERSION_FAILED"
    VARIABLE_ABSENT = "VARIABLE_ABSENT"


class GenvError(Exception):
    """Base exception"""
    def __init__(self, code: ErrorCode, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class UnsupportedKindError(GenvError, TypeError):
    def __init__(self, kind: Any):
        name = getattr(kind, "__name__", repr(kind))
        super().__init__(
            ErrorCode.UNSUPPORTED_KIND,
            f"Unsupported kind: {name}",
            {"kind": name}
        )


class ConversionError(GenvError, ValueError):
    def __init__(self, raw: str, kind: str):
        super().__init__(
            ErrorCode.CONVERSION_FAILED,
            f"Cannot convert {raw!r} to {kind}",
            {"raw": raw, "kind": kind}
        )


class VariableAbsentError(GenvError, LookupError):
    def __init__(self, key: str):
        super().__init__(
            ErrorCode.VARIABLE_ABSENT,
            f"Environment variable '{key}' is not set",
            {"key": key}
        )
