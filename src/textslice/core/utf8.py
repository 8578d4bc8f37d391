"""Single-pass UTF-8 boundary scanning.

Maps Unicode scalar value indices onto byte offsets inside a UTF-8 buffer.
Sequence widths follow the well-formed byte table of RFC 3629, so overlong
forms, encoded surrogates and values above U+10FFFF are all rejected.
"""

from __future__ import annotations

import logging
from typing import Iterator, Union

from ..errors import MalformedTextError

ByteBuffer = Union[bytes, bytearray, memoryview]

LOGGER = logging.getLogger(__name__)

# (first byte, last byte) -> (sequence width, second byte low, second byte high)
_LEAD_TABLE: tuple[tuple[int, int, int, int, int], ...] = (
    (0xC2, 0xDF, 2, 0x80, 0xBF),
    (0xE0, 0xE0, 3, 0xA0, 0xBF),
    (0xE1, 0xEC, 3, 0x80, 0xBF),
    (0xED, 0xED, 3, 0x80, 0x9F),
    (0xEE, 0xEF, 3, 0x80, 0xBF),
    (0xF0, 0xF0, 4, 0x90, 0xBF),
    (0xF1, 0xF3, 4, 0x80, 0xBF),
    (0xF4, 0xF4, 4, 0x80, 0x8F),
)


def _lead_info(lead: int) -> tuple[int, int, int] | None:
    for first, last, width, low, high in _LEAD_TABLE:
        if first <= lead <= last:
            return width, low, high
    return None


def sequence_width(data: ByteBuffer, offset: int) -> int:
    """Return the byte width of the well-formed sequence starting at ``offset``.

    Returns ``0`` when the bytes at ``offset`` do not start a well-formed
    sequence. Never reads past the end of ``data``.
    """

    lead = data[offset]
    if lead < 0x80:
        return 1
    info = _lead_info(lead)
    if info is None:
        return 0
    width, low, high = info
    size = len(data)
    if offset + width > size:
        return 0
    second = data[offset + 1]
    if not low <= second <= high:
        return 0
    for cursor in range(offset + 2, offset + width):
        if not 0x80 <= data[cursor] <= 0xBF:
            return 0
    return width


def iter_boundaries(data: ByteBuffer, *, strict: bool = True) -> Iterator[int]:
    """Yield the byte offset at which each scalar value of ``data`` starts.

    In strict mode an ill-formed sequence raises :class:`MalformedTextError`;
    otherwise each of its bytes is reported as a position of its own.
    """

    offset = 0
    size = len(data)
    while offset < size:
        yield offset
        width = sequence_width(data, offset)
        if width == 0:
            if strict:
                raise MalformedTextError(offset=offset)
            if LOGGER.isEnabledFor(logging.DEBUG):
                LOGGER.debug("Counting ill-formed UTF-8 byte at offset %d as one position", offset)
            width = 1
        offset += width


def locate(data: ByteBuffer, start: int, end: int, *, strict: bool = True) -> tuple[int, int]:
    """Return the byte offsets of scalar indices ``start`` and ``end``.

    Either offset is ``len(data)`` when the text holds fewer characters. The
    scan is a single left-to-right pass that stops once ``end`` is reached;
    bytes after that point are not inspected.
    """

    size = len(data)
    if end <= start:
        return size, size
    lo = size
    index = 0
    for offset in iter_boundaries(data, strict=strict):
        if index == start:
            lo = offset
        if index == end:
            return lo, offset
        index += 1
    return lo, size


def count(data: ByteBuffer, *, strict: bool = True) -> int:
    """Return the number of scalar values in ``data``."""

    total = 0
    for _ in iter_boundaries(data, strict=strict):
        total += 1
    return total


__all__ = ["ByteBuffer", "sequence_width", "iter_boundaries", "locate", "count"]
