"""Escape sequences accepted in transition labels."""

from __future__ import annotations

ESCAPE_MARKER = "\\"

# Whole-label tokens for characters that cannot be written literally:
# "|" separates the pieces of an "any but" list, and JFLAP trims spaces.
VERTICAL_LINE_TOKEN = "\\vln"
SPACE_TOKEN = "\\bs"

# Code returned for an escape that is not understood
UNKNOWN_ESCAPE_CODE = 0

SIMPLE_ESCAPES: dict[str, int] = {
    ESCAPE_MARKER: ord(ESCAPE_MARKER),
    "n": ord("\n"),
    "t": ord("\t"),
    "r": ord("\r"),
}


def is_escape(text: str) -> bool:
    """Whether ``text`` is shaped like an escape sequence."""
    return len(text) >= 2 and text[0] == ESCAPE_MARKER


def decode_escape(text: str) -> int:
    """
    Decode an escape sequence to a symbol code.

    Only the character after the marker is significant, except for the two
    whole-label tokens ``\\vln`` and ``\\bs``. Any other text after ``v`` or
    ``b`` decodes to the letter itself.

    Args:
        text: Label starting with the escape marker, at least two characters

    Returns:
        Symbol code, or ``UNKNOWN_ESCAPE_CODE`` for an unrecognized escape
    """
    selector = text[1]

    if selector in SIMPLE_ESCAPES:
        return SIMPLE_ESCAPES[selector]
    if selector == "v":
        return ord("|") if text == VERTICAL_LINE_TOKEN else ord("v")
    if selector == "b":
        return ord(" ") if text == SPACE_TOKEN else ord("b")

    return UNKNOWN_ESCAPE_CODE
