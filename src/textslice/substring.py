"""Character-index substring extraction.

Indices count Unicode scalar values, not bytes and not grapheme clusters, so
``a`` followed by the combining tilde U+0303 occupies two positions::

    >>> substring("hello, world!", 7, 12)
    'world'
    >>> substring("a\\u0303", 0, 1)
    'a'

``str`` input is already indexed by code point and is sliced natively. UTF-8
byte buffers are walked once, left to right, to find the byte offsets of the
two boundaries; the scan stops as soon as the end boundary is found, so the
cost is O(n) in the byte length of the prefix that is read.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, Union

from .core import utf8
from .core.ranges import CharRange, coerce_index
from .errors import UnsupportedTextTypeError
from .settings import get_settings

__all__ = ["TextValue", "CharText", "substring", "char_substring", "char_count"]

LOGGER = logging.getLogger(__name__)

TextValue = Union[str, bytes, bytearray, memoryview]
T = TypeVar("T", str, bytes, bytearray, memoryview)


def substring(text: T, start: int, end: int) -> T:
    """Return the characters of ``text`` at indices ``[start, end)``.

    ``start >= end`` yields an empty value and indices beyond the character
    count clamp to the end of ``text``; neither is an error. The result has
    the same kind as ``text``: a ``memoryview`` yields a sub-view over the same
    buffer, every other kind an owned copy.

    Byte buffers must hold well-formed UTF-8 for the operation to be total:
    with ``strict_utf8`` enabled (the default) an ill-formed sequence inside
    the scanned prefix raises :class:`~textslice.errors.MalformedTextError`.
    """

    lower = coerce_index(start, "start")
    upper = coerce_index(end, "end")
    if isinstance(text, str):
        if lower >= upper:
            _log_collapsed(lower, upper)
            return text[0:0]
        return text[lower:upper]
    buffer = _byte_buffer(text)
    if lower >= upper:
        _log_collapsed(lower, upper)
        return text[0:0]
    lo, hi = utf8.locate(buffer, lower, upper, strict=get_settings().strict_utf8)
    return text[lo:hi]


def char_substring(text: T, index: Any) -> T:
    """Return the characters of ``text`` selected by a range-like ``index``.

    ``index`` may be a slice (``None`` bounds are unbounded), a ``range``, a
    :class:`CharRange`, a ``(start, end)`` pair or a mapping with
    ``start``/``end`` keys.
    """

    span = CharRange.from_value(index)
    return substring(text, span.start, span.end)


def char_count(text: TextValue) -> int:
    """Return the number of Unicode scalar values in ``text``."""

    if isinstance(text, str):
        return len(text)
    return utf8.count(_byte_buffer(text), strict=get_settings().strict_utf8)


class CharText(str):
    """``str`` carrying the character substring helpers as methods.

    >>> CharText("foobar").substring(2, 5)
    'oba'
    """

    __slots__ = ()

    def substring(self, start: int, end: int) -> CharText:
        return CharText(substring(str(self), start, end))

    def char_substring(self, index: Any) -> CharText:
        return CharText(char_substring(str(self), index))

    def char_count(self) -> int:
        return len(self)


def _byte_buffer(text: Any) -> utf8.ByteBuffer:
    if isinstance(text, (bytes, bytearray)):
        return text
    if isinstance(text, memoryview):
        if text.ndim != 1 or text.itemsize != 1:
            raise UnsupportedTextTypeError(
                message="memoryview text must be one-dimensional with one-byte items",
                type_name="memoryview",
                details={"format": text.format, "itemsize": text.itemsize, "ndim": text.ndim},
            )
        if not text.c_contiguous:
            # Strided views cannot be cast; scan a contiguous copy, slice the original.
            return memoryview(text.tobytes())
        return text.cast("B") if text.format != "B" else text
    raise UnsupportedTextTypeError(
        message=f"Cannot take a character substring of {type(text).__name__}",
        type_name=type(text).__name__,
    )


def _log_collapsed(start: int, end: int) -> None:
    if start > end and LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("Reversed range [%d, %d) collapsed to empty", start, end)
