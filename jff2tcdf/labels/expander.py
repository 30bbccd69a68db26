"""Expansion of transition labels into the symbol codes they accept.

Label syntax (as written on JFLAP transition edges):

    a           the character itself
    \\n \\t \\r   newline, tab, carriage return; \\\\ is the backslash
    \\vln \\bs    "|" and space
    x~y         every character from x to y inclusive
    any         every visible ASCII character (33..126)
    any but a|b|\\vln
                every visible ASCII character except the listed ones
    eof         end of input (-1)

Degraded input never raises. An unknown escape decodes to 0, malformed
``any but`` pieces are dropped, and a malformed range or ``any`` clause
accepts nothing. A label that matches no rule at all accepts nothing and
carries a warning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jff2tcdf.labels.classifier import ClassifiedLabel, LabelShape, classify
from jff2tcdf.labels.escapes import decode_escape, is_escape

# Visible ASCII characters, space excluded
VISIBLE_ASCII = range(33, 127)

EOF_CODE = -1


@dataclass(frozen=True)
class LabelWarning:
    """A label no rule could interpret."""

    label: str

    def __str__(self) -> str:
        return f"failed to parse: {self.label}"


@dataclass(frozen=True)
class Expansion:
    """
    Result of expanding one label.

    Attributes:
        label: Original label text
        shape: Rule that matched
        codes: Accepted symbol codes, in output order
        warning: Set when the label was not recognized
    """

    label: str
    shape: LabelShape
    codes: tuple[int, ...] = ()
    warning: Optional[LabelWarning] = None


def _exclusion_code(piece: str) -> Optional[int]:
    if len(piece) == 1:
        return ord(piece)
    if is_escape(piece):
        return decode_escape(piece)
    return None


def _any_but(exclusions: Optional[tuple[str, ...]]) -> tuple[int, ...]:
    if exclusions is None:
        return ()

    excluded = set()
    for piece in exclusions:
        code = _exclusion_code(piece)
        if code is not None:
            excluded.add(code)

    return tuple(code for code in VISIBLE_ASCII if code not in excluded)


def _range(bounds: Optional[tuple[str, str]]) -> tuple[int, ...]:
    if bounds is None:
        return ()
    first, last = bounds
    return tuple(range(ord(first), ord(last) + 1))


def expand_classified(classified: ClassifiedLabel) -> Expansion:
    """Expand a label that has already been classified."""
    label = classified.label
    shape = classified.shape

    if shape is LabelShape.LITERAL:
        codes: tuple[int, ...] = (ord(label),)
    elif shape is LabelShape.ESCAPE:
        codes = (decode_escape(label),)
    elif shape is LabelShape.EOF:
        codes = (EOF_CODE,)
    elif shape is LabelShape.ANY:
        codes = tuple(VISIBLE_ASCII)
    elif shape is LabelShape.ANY_BUT:
        codes = _any_but(classified.exclusions)
    elif shape is LabelShape.RANGE:
        codes = _range(classified.bounds)
    else:
        codes = ()

    warning = LabelWarning(label) if shape.is_diagnosed() else None
    return Expansion(label=label, shape=shape, codes=codes, warning=warning)


def expand(label: str) -> Expansion:
    """
    Expand a transition label into the symbol codes it accepts.

    Args:
        label: Raw label text

    Returns:
        Expansion with the codes and, for unrecognized labels, a warning
    """
    return expand_classified(classify(label))


def expand_codes(label: str) -> list[int]:
    """Codes accepted by ``label``, without the classification details."""
    return list(expand(label).codes)
