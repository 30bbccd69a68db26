"""Data models for jff2tcdf."""

from jff2tcdf.models.automaton import (
    JffDocument,
    StateDescriptor,
    TransitionDescriptor,
)
from jff2tcdf.models.records import (
    SENTINEL,
    OutputRecord,
    SentinelRecord,
    StateRecord,
    TransitionRecord,
)

__all__ = [
    # Automaton models
    "StateDescriptor",
    "TransitionDescriptor",
    "JffDocument",
    # Output records
    "OutputRecord",
    "StateRecord",
    "TransitionRecord",
    "SentinelRecord",
    "SENTINEL",
]
