"""Data models for the automaton read from a JFLAP document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class StateDescriptor:
    """
    One state of the automaton.

    Attributes:
        id: State identifier, unique within the document
        is_final: Whether the state is accepting
        is_initial: Whether the state is the start state
        name: JFLAP display name (e.g. "q0"), not written to TCDF
    """

    id: int
    is_final: bool = False
    is_initial: bool = False
    name: Optional[str] = None


@dataclass(frozen=True)
class TransitionDescriptor:
    """
    One labeled edge of the automaton.

    The endpoints are not checked against the declared states.
    """

    source: int
    target: int
    label: str


@dataclass(frozen=True)
class JffDocument:
    """States and transitions of a JFLAP document, in document order."""

    states: tuple[StateDescriptor, ...] = field(default_factory=tuple)
    transitions: tuple[TransitionDescriptor, ...] = field(default_factory=tuple)
    automaton_type: Optional[str] = None

    def to_dict(self) -> dict:
        """Summary for reporting."""
        return {
            "type": self.automaton_type,
            "states": len(self.states),
            "transitions": len(self.transitions),
        }
