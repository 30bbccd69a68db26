"""Transition label interpretation."""

from jff2tcdf.labels.classifier import ClassifiedLabel, LabelShape, classify
from jff2tcdf.labels.escapes import UNKNOWN_ESCAPE_CODE, decode_escape
from jff2tcdf.labels.expander import (
    EOF_CODE,
    VISIBLE_ASCII,
    Expansion,
    LabelWarning,
    expand,
    expand_classified,
    expand_codes,
)

__all__ = [
    "LabelShape",
    "ClassifiedLabel",
    "classify",
    "decode_escape",
    "UNKNOWN_ESCAPE_CODE",
    "EOF_CODE",
    "VISIBLE_ASCII",
    "Expansion",
    "LabelWarning",
    "expand",
    "expand_classified",
    "expand_codes",
]
