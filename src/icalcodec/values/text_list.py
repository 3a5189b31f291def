"""Generic list codec for comma-separated property values.

Multi-valued properties (e.g. EXDATE, RDATE, CATEGORIES) carry their items
joined by commas. Commas, semicolons, backslashes and newlines inside an
item are escaped with a backslash.

Reference: RFC 5545, Section 3.3.11
"""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import ICalParseError

LIST_SEPARATOR = ","
ESCAPE_CHARACTER = "\\"

# Character -> escaped form used when encoding
_ESCAPES = {
    "\\": "\\\\",
    ",": "\\,",
    ";": "\\;",
    "\n": "\\n",
}

# Character following a backslash -> decoded character
_UNESCAPES = {
    "\\": "\\",
    ",": ",",
    ";": ";",
    "n": "\n",
    "N": "\n",
}


def escape_text(text: str) -> str:
    """Escape a single list item."""
    return "".join(_ESCAPES.get(char, char) for char in text)


def encode_text_list(items: Iterable[str]) -> str:
    """Encode items as one escaped, comma-joined string.

    Args:
        items: Unescaped item strings

    Returns:
        Encoded list value, "" for an empty list
    """
    return LIST_SEPARATOR.join(escape_text(item) for item in items)


def decode_text_list(text: str) -> list[str]:
    """Split an escaped, comma-joined string into its items.

    Args:
        text: Encoded list value

    Returns:
        Unescaped items in order, [] for an empty string

    Raises:
        ICalParseError: If text ends with a lone backslash or contains an
                        unknown escape sequence
    """
    if not text:
        return []

    items: list[str] = []
    current: list[str] = []

    position = 0
    while position < len(text):
        char = text[position]

        if char == ESCAPE_CHARACTER:
            if position + 1 >= len(text):
                raise ICalParseError("decode_text_list", f"dangling escape at end of list value {text!r}", text)

            escaped = text[position + 1]
            if escaped not in _UNESCAPES:
                raise ICalParseError(
                    "decode_text_list",
                    f"unknown escape sequence '\\{escaped}' at position {position} in list value {text!r}",
                    text,
                )

            current.append(_UNESCAPES[escaped])
            position += 2
            continue

        if char == LIST_SEPARATOR:
            items.append("".join(current))
            current = []
        else:
            current.append(char)

        position += 1

    items.append("".join(current))

    return items
