"""Classification of transition labels by shape.

A label is classified exactly once. The rules are tried in priority order and
the first one that matches decides the shape, so for example ``"any but a|b"``
is never looked at as a range and ``"\\vln"`` is an escape, not a literal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from jff2tcdf.labels.escapes import is_escape

EOF_KEYWORD = "eof"
ANY_KEYWORD = "any"
BUT_KEYWORD = "but"
RANGE_MARKER = "~"
EXCLUSION_SEPARATOR = "|"


class LabelShape(Enum):
    """Shape of a transition label, in match priority order."""

    EMPTY = "empty"
    LITERAL = "literal"
    ESCAPE = "escape"
    EOF = "eof"
    ANY = "any"
    ANY_BUT = "any_but"
    RANGE = "range"
    UNRECOGNIZED = "unrecognized"

    def is_diagnosed(self) -> bool:
        """Whether a label of this shape is reported as unrecognized."""
        return self is LabelShape.UNRECOGNIZED


@dataclass(frozen=True)
class ClassifiedLabel:
    """
    A label together with the parts extracted while classifying it.

    Attributes:
        label: Original label text
        shape: Matched rule
        exclusions: Pieces of an ``any but`` list, or None when the clause is
            malformed (``ANY_BUT`` only)
        bounds: First and last character of a range, or None when the range
            is malformed (``RANGE`` only)
    """

    label: str
    shape: LabelShape
    exclusions: Optional[tuple[str, ...]] = None
    bounds: Optional[tuple[str, str]] = None


def _split_exclusions(label: str) -> Optional[tuple[str, ...]]:
    segments = label.split(" ")
    if len(segments) >= 3 and segments[1] == BUT_KEYWORD:
        return tuple(segments[2].split(EXCLUSION_SEPARATOR))
    return None


def _split_range(label: str) -> Optional[tuple[str, str]]:
    segments = label.split(RANGE_MARKER)
    if len(segments) == 2 and len(segments[0]) == 1 and len(segments[1]) == 1:
        return segments[0], segments[1]
    return None


def classify(label: str) -> ClassifiedLabel:
    """
    Classify a transition label.

    Args:
        label: Raw label text from a JFLAP ``<read>`` element

    Returns:
        ClassifiedLabel for the first matching rule
    """
    if not label:
        return ClassifiedLabel(label, LabelShape.EMPTY)

    if len(label) == 1:
        return ClassifiedLabel(label, LabelShape.LITERAL)

    if is_escape(label):
        return ClassifiedLabel(label, LabelShape.ESCAPE)

    if label == EOF_KEYWORD:
        return ClassifiedLabel(label, LabelShape.EOF)

    if label == ANY_KEYWORD:
        return ClassifiedLabel(label, LabelShape.ANY)

    if label.startswith(ANY_KEYWORD):
        return ClassifiedLabel(
            label,
            LabelShape.ANY_BUT,
            exclusions=_split_exclusions(label),
        )

    if RANGE_MARKER in label:
        return ClassifiedLabel(label, LabelShape.RANGE, bounds=_split_range(label))

    return ClassifiedLabel(label, LabelShape.UNRECOGNIZED)
