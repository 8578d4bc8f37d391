"""Standardized error types for textslice.

The substring operations are total over well-typed input, so these errors
only surface when a caller passes something outside that domain: a value
that is not text, an index that is not an integer, or bytes that are not
UTF-8.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# -----------------------------------------------------------------------------
# Error Code Constants
# -----------------------------------------------------------------------------

class ErrorCode:
    """Constants for machine-readable error codes."""

    # Index/range errors
    INVALID_INDEX = "invalid_index"
    INVALID_RANGE = "invalid_range"

    # Text value errors
    UNSUPPORTED_TEXT_TYPE = "unsupported_text_type"
    MALFORMED_TEXT = "malformed_text"

    # Configuration errors
    INVALID_SETTING = "invalid_setting"


# -----------------------------------------------------------------------------
# Base Error Class
# -----------------------------------------------------------------------------

@dataclass
class TextSliceError(Exception):
    """Base exception class for all textslice errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
        suggestion: Actionable guidance for recovery.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary for structured reporting."""
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# -----------------------------------------------------------------------------
# Index/Range Errors
# -----------------------------------------------------------------------------

@dataclass
class InvalidIndexError(TextSliceError, TypeError):
    """Raised when a character index is not an integer."""

    error_code: str = field(default=ErrorCode.INVALID_INDEX)
    message: str = field(default="Character index must be an integer")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Pass an int (or an object implementing __index__)")

    label: str = field(default="index")
    value: Any = field(default=None)

    def __post_init__(self) -> None:
        if self.message == "Character index must be an integer":
            self.message = f"Character index '{self.label}' must be an integer"
        self.details.setdefault("label", self.label)
        self.details.setdefault("type", type(self.value).__name__)
        super().__post_init__()


@dataclass
class InvalidRangeError(TextSliceError, ValueError):
    """Raised when a range-like value cannot be interpreted as ``[start, end)``."""

    error_code: str = field(default=ErrorCode.INVALID_RANGE)
    message: str = field(default="Unsupported character range")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(
        default="Use a slice without a step, a (start, end) pair, or a CharRange"
    )


# -----------------------------------------------------------------------------
# Text Value Errors
# -----------------------------------------------------------------------------

@dataclass
class UnsupportedTextTypeError(TextSliceError, TypeError):
    """Raised when the text argument is not ``str`` or a UTF-8 byte buffer."""

    error_code: str = field(default=ErrorCode.UNSUPPORTED_TEXT_TYPE)
    message: str = field(default="Unsupported text value")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Pass str, bytes, bytearray, or a byte memoryview")

    type_name: str = field(default="")

    def __post_init__(self) -> None:
        if self.type_name:
            self.details.setdefault("type", self.type_name)
        super().__post_init__()


@dataclass
class MalformedTextError(TextSliceError, ValueError):
    """Raised when a byte buffer contains an ill-formed UTF-8 sequence."""

    error_code: str = field(default=ErrorCode.MALFORMED_TEXT)
    message: str = field(default="Ill-formed UTF-8 sequence")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(
        default="Decode the buffer first, or disable strict_utf8 to scan it leniently"
    )

    offset: int = field(default=0)

    def __post_init__(self) -> None:
        if self.message == "Ill-formed UTF-8 sequence":
            self.message = f"Ill-formed UTF-8 sequence at byte offset {self.offset}"
        self.details.setdefault("offset", self.offset)
        super().__post_init__()


# -----------------------------------------------------------------------------
# Configuration Errors
# -----------------------------------------------------------------------------

@dataclass
class SettingsError(TextSliceError, ValueError):
    """Raised when a settings value has the wrong type."""

    error_code: str = field(default=ErrorCode.INVALID_SETTING)
    message: str = field(default="Invalid setting")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="")

    setting: str = field(default="")

    def __post_init__(self) -> None:
        if self.setting:
            self.details.setdefault("setting", self.setting)
        super().__post_init__()


__all__ = [
    "ErrorCode",
    "TextSliceError",
    "InvalidIndexError",
    "InvalidRangeError",
    "UnsupportedTextTypeError",
    "MalformedTextError",
    "SettingsError",
]
