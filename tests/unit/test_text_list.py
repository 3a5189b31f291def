"""Unit tests for the generic comma-separated list codec."""

from __future__ import annotations

import pytest

from src.icalcodec.exceptions import ICalParseError
from src.icalcodec.values.text_list import decode_text_list, encode_text_list, escape_text


@pytest.mark.unit
class TestEncodeTextList:
    """Tests for encode_text_list and escape_text."""

    @pytest.mark.parametrize(
        ("items", "expected"),
        [
            ([], ""),
            (["one"], "one"),
            (["one", "two"], "one,two"),
            (["a,b", "c"], "a\\,b,c"),
            (["a;b"], "a\\;b"),
            (["back\\slash"], "back\\\\slash"),
            (["line\nbreak"], "line\\nbreak"),
            (["", ""], ","),
        ],
        ids=[
            "empty_list",
            "single_item",
            "two_items",
            "escaped_comma",
            "escaped_semicolon",
            "escaped_backslash",
            "escaped_newline",
            "two_empty_items",
        ],
    )
    def test_encode(self, items: list[str], expected: str) -> None:
        """Test items are escaped and joined with commas."""
        assert encode_text_list(items) == expected

    def test_encode_accepts_generator(self) -> None:
        """Test any iterable of strings can be encoded."""
        assert encode_text_list(item for item in ("x", "y")) == "x,y"

    def test_escape_text_leaves_plain_text(self) -> None:
        """Test text without special characters is unchanged."""
        assert escape_text("20240101T000000Z") == "20240101T000000Z"


@pytest.mark.unit
class TestDecodeTextList:
    """Tests for decode_text_list."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("one", ["one"]),
            ("one,two", ["one", "two"]),
            ("a\\,b,c", ["a,b", "c"]),
            ("a\\;b", ["a;b"]),
            ("back\\\\slash", ["back\\slash"]),
            ("line\\nbreak", ["line\nbreak"]),
            ("line\\Nbreak", ["line\nbreak"]),
            ("a,,b", ["a", "", "b"]),
            ("a,", ["a", ""]),
            ("\\\\,x", ["\\", "x"]),
        ],
        ids=[
            "empty_string",
            "single_item",
            "two_items",
            "escaped_comma",
            "escaped_semicolon",
            "escaped_backslash",
            "escaped_lowercase_newline",
            "escaped_uppercase_newline",
            "empty_middle_item",
            "trailing_comma",
            "escaped_backslash_before_separator",
        ],
    )
    def test_decode(self, text: str, expected: list[str]) -> None:
        """Test text is split on unescaped commas and unescaped."""
        assert decode_text_list(text) == expected

    def test_decode_dangling_escape(self) -> None:
        """Test a trailing lone backslash is rejected."""
        with pytest.raises(ICalParseError, match="dangling escape") as exc_info:
            decode_text_list("20240101T000000Z\\")

        assert exc_info.value.operation == "decode_text_list"
        assert exc_info.value.instance == "20240101T000000Z\\"

    def test_decode_unknown_escape(self) -> None:
        """Test an escape sequence outside the TEXT grammar is rejected."""
        with pytest.raises(ICalParseError, match="unknown escape sequence"):
            decode_text_list("a\\xb")

    def test_decode_encoded_items(self) -> None:
        """Test decoding returns the items that were encoded."""
        items = ["a,b", "c;d", "e\\f", "g\nh", ""]
        assert decode_text_list(encode_text_list(items)) == items
