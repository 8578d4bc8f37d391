"""Structured helpers for representing character ranges."""

from __future__ import annotations

import operator
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator

from ..errors import InvalidIndexError, InvalidRangeError


def coerce_index(value: Any, label: str) -> int:
    """Return ``value`` as a non-negative character index.

    Negative numbers clamp to ``0``; anything that does not implement
    ``__index__`` raises :class:`InvalidIndexError`.
    """

    try:
        number = operator.index(value)
    except TypeError as exc:
        raise InvalidIndexError(label=label, value=value) from exc
    if number < 0:
        return 0
    return number


@dataclass(slots=True, frozen=True)
class CharRange(Sequence[int]):
    """Half-open ``[start, end)`` range of Unicode scalar value indices.

    A reversed pair is kept as given and simply denotes an empty range.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", coerce_index(self.start, "start"))
        object.__setattr__(self, "end", coerce_index(self.end, "end"))

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index == 0:
            return self.start
        if index == 1:
            return self.end
        raise IndexError("CharRange index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        """Return the number of characters covered by the range."""

        return max(0, self.end - self.start)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the range selects nothing, reversed ranges included."""

        return self.start >= self.end

    def to_tuple(self) -> tuple[int, int]:
        """Return the range as a ``(start, end)`` tuple."""

        return (self.start, self.end)

    def to_dict(self) -> dict[str, int]:
        """Return the range as a ``{"start": ..., "end": ...}`` mapping."""

        return {"start": self.start, "end": self.end}

    def to_slice(self) -> slice:
        """Return the equivalent ``slice`` for code point indexed sequences."""

        return slice(self.start, self.end)

    def clamp(self, upper: int) -> CharRange:
        """Clamp both bounds to ``[0, upper]``."""

        limit = coerce_index(upper, "upper")
        return CharRange(min(self.start, limit), min(self.end, limit))

    @classmethod
    def from_bounds(
        cls,
        start: Any = None,
        end: Any = None,
        *,
        start_exclusive: bool = False,
        end_inclusive: bool = False,
        length: int | None = None,
    ) -> CharRange:
        """Build a range from explicit bound kinds.

        ``None`` means unbounded: ``0`` for the start, the end of the text for
        the end. Without ``length`` an unbounded end resolves to
        :data:`UNBOUNDED`, which every text value is shorter than.
        """

        if start is None:
            lower = 0
        else:
            lower = coerce_index(start, "start")
            if start_exclusive:
                lower += 1
        if end is None:
            upper = UNBOUNDED if length is None else coerce_index(length, "length")
        else:
            upper = coerce_index(end, "end")
            if end_inclusive:
                upper += 1
        return cls(lower, upper)

    @classmethod
    def from_value(cls, value: Any, *, length: int | None = None) -> CharRange:
        """Coerce ``value`` into a :class:`CharRange`.

        Accepts ranges, slices (step ``None`` or ``1``), ``range`` objects with
        step ``1``, ``(start, end)`` pairs, mappings with ``start``/``end`` keys,
        and objects exposing ``start``/``end`` attributes.
        """

        if isinstance(value, CharRange):
            return value
        if value is None:
            raise InvalidRangeError(message="CharRange value is required")
        if isinstance(value, slice):
            if value.step not in (None, 1):
                raise InvalidRangeError(
                    message="Character slices do not support a step",
                    details={"step": value.step},
                )
            return cls.from_bounds(value.start, value.stop, length=length)
        if isinstance(value, range):
            if value.step != 1:
                raise InvalidRangeError(
                    message="Character ranges must have a step of 1",
                    details={"step": value.step},
                )
            return cls(value.start, value.stop)
        if isinstance(value, Mapping):
            if "start" not in value and "end" not in value:
                raise InvalidRangeError(message="CharRange mappings require start or end keys")
            return cls.from_bounds(value.get("start"), value.get("end"), length=length)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            seq = list(value)
            if len(seq) != 2:
                raise InvalidRangeError(
                    message="CharRange sequences must have exactly two entries",
                    details={"entries": len(seq)},
                )
            return cls.from_bounds(seq[0], seq[1], length=length)
        start = getattr(value, "start", None)
        end = getattr(value, "end", None)
        if start is not None and end is not None:
            return cls(start, end)
        raise InvalidRangeError(
            message="Unsupported CharRange input",
            details={"type": type(value).__name__},
        )

    @classmethod
    def full(cls, length: int) -> CharRange:
        """Return the range covering ``length`` characters from the start."""

        return cls(0, length)


# Larger than any index a text value can reach.
UNBOUNDED = 2**63 - 1


__all__ = ["CharRange", "UNBOUNDED", "coerce_index"]
