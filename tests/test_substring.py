"""Tests for character-index substring extraction."""

from __future__ import annotations

import sys

import pytest

from textslice import (
    CharRange,
    InvalidIndexError,
    InvalidRangeError,
    UnsupportedTextTypeError,
    char_count,
    char_substring,
    substring,
)
from tests.helpers import COMBINING_BREVE, COMBINING_TILDE


# =============================================================================
# str input
# =============================================================================


class TestSubstringStr:
    """Tests for substring() over str values."""

    def test_extracts_half_open_range(self) -> None:
        assert substring("hello, world!", 7, 12) == "world"
        assert substring("foobar", 0, 3) == "foo"

    def test_empty_text(self) -> None:
        assert substring("", 0, 5) == ""

    def test_reversed_range_is_empty(self) -> None:
        assert substring("abc", 2, 1) == ""
        assert substring("foobar", 3, 2) == ""

    def test_equal_bounds_are_empty(self) -> None:
        assert substring("foobar", 3, 3) == ""

    def test_end_past_text_clamps(self) -> None:
        assert substring("foobar", 0, 10) == "foobar"
        assert substring("foobar", 4, 10**12) == "ar"

    def test_start_past_text_is_empty(self) -> None:
        assert substring("foobar", 6, 10) == ""
        assert substring("foobar", 10**12, 10**12 + 5) == ""

    def test_both_past_text_and_reversed(self) -> None:
        assert substring("foobar", 100, 50) == ""

    def test_multiple_byte_characters(self, multibyte_text: str) -> None:
        assert substring(multibyte_text, 2, 5) == "øbα"

    def test_combining_mark_is_its_own_position(self) -> None:
        text = "y" + COMBINING_BREVE
        assert substring(text, 0, 1) == "y"
        assert substring(text, 1, 2) == COMBINING_BREVE
        assert substring("a" + COMBINING_TILDE, 0, 1) == "a"

    def test_astral_characters_count_once(self) -> None:
        assert substring("a🎉b", 1, 2) == "🎉"
        assert substring("a🎉b", 2, 3) == "b"

    def test_negative_indices_clamp_to_zero(self) -> None:
        assert substring("foobar", -3, 2) == "fo"
        assert substring("foobar", -5, -1) == ""

    def test_accepts_index_protocol(self) -> None:
        class Index:
            def __init__(self, value: int) -> None:
                self.value = value

            def __index__(self) -> int:
                return self.value

        assert substring("foobar", Index(1), Index(4)) == "oob"

    def test_rejects_non_integer_index(self) -> None:
        with pytest.raises(InvalidIndexError) as excinfo:
            substring("foobar", 1.5, 3)

        assert excinfo.value.details["label"] == "start"
        assert isinstance(excinfo.value, TypeError)

    def test_returns_plain_str_for_subclass(self) -> None:
        class Tagged(str):
            pass

        result = substring(Tagged("foobar"), 1, 3)

        assert result == "oo"


# =============================================================================
# UTF-8 buffers
# =============================================================================


class TestSubstringBytes:
    """Tests for substring() over UTF-8 byte buffers."""

    def test_bytes_slice_by_character(self, multibyte_text: str) -> None:
        data = multibyte_text.encode("utf-8")

        result = substring(data, 2, 5)

        assert isinstance(result, bytes)
        assert result == "øbα".encode("utf-8")

    def test_bytearray_returns_bytearray(self) -> None:
        data = bytearray("hello, world!", "utf-8")

        result = substring(data, 7, 12)

        assert isinstance(result, bytearray)
        assert result == bytearray(b"world")

    def test_memoryview_returns_view_over_same_buffer(self) -> None:
        backing = bytearray("日本語テキスト", "utf-8")
        view = memoryview(backing)

        result = substring(view, 1, 3)

        assert isinstance(result, memoryview)
        assert result.tobytes() == "本語".encode("utf-8")
        backing[3] = ord("x")
        assert result[0] == ord("x")

    def test_empty_results_keep_kind(self) -> None:
        assert substring(b"abc", 2, 1) == b""
        assert isinstance(substring(bytearray(b"abc"), 5, 9), bytearray)
        assert len(substring(memoryview(b"abc"), 1, 1)) == 0

    def test_end_past_text_clamps(self) -> None:
        data = "fõø".encode("utf-8")

        assert substring(data, 1, 99) == "õø".encode("utf-8")
        assert substring(data, 3, 99) == b""

    def test_combining_mark_bytes(self) -> None:
        data = ("y" + COMBINING_BREVE).encode("utf-8")

        assert substring(data, 0, 1) == b"y"
        assert substring(data, 1, 2) == COMBINING_BREVE.encode("utf-8")

    def test_four_byte_sequences(self) -> None:
        data = "a🎉𝄞b".encode("utf-8")

        assert substring(data, 1, 3) == "🎉𝄞".encode("utf-8")
        assert substring(data, 3, 4) == b"b"

    def test_signed_byte_memoryview(self) -> None:
        view = memoryview("fõø".encode("utf-8")).cast("b")

        result = substring(view, 1, 2)

        assert result.tobytes() == "õ".encode("utf-8")

    def test_strided_signed_byte_memoryview(self) -> None:
        backing = bytearray(b"aXbXcX")
        view = memoryview(backing).cast("b")[::2]

        result = substring(view, 1, 2)

        assert isinstance(result, memoryview)
        assert result.tobytes() == b"b"
        backing[2] = ord("z")
        assert result.tobytes() == b"z"

    def test_strided_memoryview_multibyte(self) -> None:
        data = "fõø".encode("utf-8")
        backing = bytearray(len(data) * 2)
        backing[::2] = data
        view = memoryview(backing)[::2]

        assert substring(view, 1, 3).tobytes() == "õø".encode("utf-8")
        assert char_count(view) == 3

    def test_docstring_states_utf8_requirement(self) -> None:
        assert "well-formed UTF-8" in substring.__doc__

    def test_rejects_wide_memoryview(self) -> None:
        view = memoryview(bytearray(8)).cast("I")

        with pytest.raises(UnsupportedTextTypeError):
            substring(view, 0, 1)

    @pytest.mark.parametrize("value", [None, 42, ["a", "b"], ("x",)])
    def test_rejects_non_text(self, value) -> None:
        with pytest.raises(UnsupportedTextTypeError) as excinfo:
            substring(value, 0, 1)

        assert excinfo.value.to_dict()["error"] == "unsupported_text_type"


# =============================================================================
# Properties
# =============================================================================


class TestSubstringProperties:
    """Properties that hold for every text value."""

    def test_length_matches_range(self, sample_texts: list[str]) -> None:
        for text in sample_texts:
            count = len(text)
            for i in range(count + 1):
                for j in range(i, count + 1):
                    assert char_count(substring(text, i, j)) == j - i

    def test_full_range_is_identity(self, sample_texts: list[str]) -> None:
        for text in sample_texts:
            assert substring(text, 0, len(text)) == text
            encoded = text.encode("utf-8")
            assert substring(encoded, 0, char_count(encoded)) == encoded

    def test_end_beyond_count_behaves_as_clamped(self, sample_texts: list[str]) -> None:
        for text in sample_texts:
            count = len(text)
            encoded = text.encode("utf-8")
            for start in range(count + 2):
                assert substring(text, start, count + 7) == substring(text, start, count)
                assert substring(encoded, start, count + 7) == substring(encoded, start, count)

    def test_bytes_agree_with_str(self, sample_texts: list[str]) -> None:
        for text in sample_texts:
            encoded = text.encode("utf-8")
            count = len(text)
            for i in range(count + 1):
                for j in range(count + 1):
                    assert substring(encoded, i, j).decode("utf-8") == substring(text, i, j)

    def test_start_not_before_end_is_always_empty(self, sample_texts: list[str]) -> None:
        for text in sample_texts:
            for start, end in ((0, 0), (3, 1), (sys.maxsize, 0), (10**20, 10**20)):
                assert substring(text, start, end) == ""


# =============================================================================
# char_substring / char_count
# =============================================================================


class TestCharSubstring:
    """Tests for the range-like char_substring() form."""

    def test_range_object(self) -> None:
        assert char_substring("foobar", range(0, 3)) == "foo"

    def test_unbounded(self) -> None:
        assert char_substring("foobar", slice(None)) == "foobar"

    def test_unbounded_start(self) -> None:
        assert char_substring("foobar", slice(None, 3)) == "foo"

    def test_unbounded_end(self) -> None:
        assert char_substring("foobar", slice(3, None)) == "bar"
        assert char_substring("fõøbα®".encode("utf-8"), slice(4, None)) == "α®".encode("utf-8")

    def test_exclusive_start(self) -> None:
        assert char_substring("foobar", CharRange.from_bounds(3, start_exclusive=True)) == "ar"

    def test_exclusive_start_max(self) -> None:
        index = CharRange.from_bounds(sys.maxsize, start_exclusive=True)
        assert char_substring("foobar", index) == ""

    def test_inclusive_end(self) -> None:
        assert char_substring("foobar", CharRange.from_bounds(end=3, end_inclusive=True)) == "foob"

    def test_inclusive_end_max(self) -> None:
        index = CharRange.from_bounds(end=sys.maxsize, end_inclusive=True)
        assert char_substring("foobar", index) == "foobar"

    def test_pair_and_mapping(self) -> None:
        assert char_substring("hello, world!", (7, 12)) == "world"
        assert char_substring("hello, world!", {"start": 7}) == "world!"

    def test_reversed_range_is_empty(self) -> None:
        assert char_substring("foobar", slice(3, 2)) == ""

    def test_rejects_step(self) -> None:
        with pytest.raises(InvalidRangeError):
            char_substring("foobar", slice(0, 4, 2))


class TestCharCount:
    """Tests for char_count()."""

    def test_counts_scalar_values(self, multibyte_text: str) -> None:
        assert char_count(multibyte_text) == 6
        assert char_count(multibyte_text.encode("utf-8")) == 6
        assert char_count(memoryview(multibyte_text.encode("utf-8"))) == 6

    def test_combining_marks_count_separately(self) -> None:
        assert char_count("y" + COMBINING_BREVE) == 2

    def test_empty(self) -> None:
        assert char_count("") == 0
        assert char_count(b"") == 0
