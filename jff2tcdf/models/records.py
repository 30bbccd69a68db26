"""TCDF output records.

A TCDF file is plain text with one record per line:

    def <id> [final ][start ]|normal
    trans <from> <to> <code>
    eof

``eof`` appears exactly once, as the last line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

SENTINEL = "eof"


@dataclass(frozen=True)
class StateRecord:
    """``def`` line declaring a state."""

    id: int
    final: bool = False
    start: bool = False

    def render(self) -> str:
        line = f"def {self.id} "
        if self.final:
            line += "final "
        if self.start:
            line += "start "
        if not (self.final or self.start):
            line += "normal"
        return line


@dataclass(frozen=True)
class TransitionRecord:
    """``trans`` line: reading ``code`` in state ``source`` moves to ``target``."""

    source: int
    target: int
    code: int

    def render(self) -> str:
        return f"trans {self.source} {self.target} {self.code}"


@dataclass(frozen=True)
class SentinelRecord:
    """Terminating ``eof`` line."""

    def render(self) -> str:
        return SENTINEL


OutputRecord = Union[StateRecord, TransitionRecord, SentinelRecord]

