"""Substrings by Unicode scalar value index.

``substring(text, start, end)`` returns the characters of ``text`` whose
indices fall in ``[start, end)``. It accepts ``str`` as well as UTF-8
``bytes``, ``bytearray`` and ``memoryview`` buffers.
"""

from .core.ranges import UNBOUNDED, CharRange
from .errors import (
    ErrorCode,
    InvalidIndexError,
    InvalidRangeError,
    MalformedTextError,
    SettingsError,
    TextSliceError,
    UnsupportedTextTypeError,
)
from .settings import Settings, SettingsStore, configure, get_settings
from .substring import CharText, TextValue, char_count, char_substring, substring

__version__ = "0.1.0"

__all__ = [
    "substring",
    "char_substring",
    "char_count",
    "CharText",
    "CharRange",
    "TextValue",
    "UNBOUNDED",
    "Settings",
    "SettingsStore",
    "configure",
    "get_settings",
    "ErrorCode",
    "TextSliceError",
    "InvalidIndexError",
    "InvalidRangeError",
    "UnsupportedTextTypeError",
    "MalformedTextError",
    "SettingsError",
]
