"""JFLAP to TCDF conversion.

States are emitted first, in document order, then transitions in document
order, then a single ``eof`` line. A transition whose label accepts no
symbol contributes no lines and does not stop the conversion.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generator, Iterable

from jff2tcdf.config.settings import OutputConfig
from jff2tcdf.labels import LabelWarning, expand
from jff2tcdf.models import (
    JffDocument,
    OutputRecord,
    SentinelRecord,
    StateDescriptor,
    StateRecord,
    TransitionDescriptor,
    TransitionRecord,
)
from jff2tcdf.utils.atomic import atomic_write
from jff2tcdf.utils.logging import get_logger

logger = get_logger("pipeline.converter")


def emit_state(state: StateDescriptor) -> StateRecord:
    """Build the ``def`` record for a state."""
    return StateRecord(id=state.id, final=state.is_final, start=state.is_initial)


def emit_transition(
    transition: TransitionDescriptor,
) -> tuple[list[TransitionRecord], LabelWarning | None]:
    """
    Build the ``trans`` records for a transition, one per accepted code.

    Returns:
        The records, in code order, and the label warning if any
    """
    expansion = expand(transition.label)
    records = [
        TransitionRecord(source=transition.source, target=transition.target, code=code)
        for code in expansion.codes
    ]
    return records, expansion.warning


@dataclass
class ConversionResult:
    """Output of converting one document."""

    records: list[OutputRecord] = field(default_factory=list)
    warnings: list[LabelWarning] = field(default_factory=list)
    state_count: int = 0
    transition_count: int = 0
    # Transitions whose label accepted no symbol
    empty_transitions: int = 0

    @property
    def lines(self) -> list[str]:
        """Rendered records without line terminators."""
        return [record.render() for record in self.records]

    def to_dict(self) -> dict[str, Any]:
        """Summary for reporting."""
        return {
            "states": self.state_count,
            "transitions": self.transition_count,
            "records": len(self.records),
            "empty_transitions": self.empty_transitions,
            "warnings": [str(w) for w in self.warnings],
        }


def convert(document: JffDocument) -> ConversionResult:
    """
    Convert a loaded document into TCDF records.

    Args:
        document: States and transitions in document order

    Returns:
        ConversionResult with records ending in the ``eof`` sentinel
    """
    result = ConversionResult()

    for state in document.states:
        result.records.append(emit_state(state))
        result.state_count += 1

    logger.info("states_processed", states=result.state_count)

    for transition in document.transitions:
        records, warning = emit_transition(transition)
        if warning is not None:
            logger.warning(
                "label_unrecognized",
                label=warning.label,
                source=transition.source,
                target=transition.target,
            )
            result.warnings.append(warning)
        if not records:
            result.empty_transitions += 1
        result.records.extend(records)
        result.transition_count += 1

    logger.info(
        "transitions_processed",
        transitions=result.transition_count,
        empty_transitions=result.empty_transitions,
    )

    result.records.append(SentinelRecord())
    return result


@contextmanager
def open_sink(path: Path, config: OutputConfig) -> Generator[Any, None, None]:
    """
    Open the TCDF output file according to the existing-output policy.

    ``truncate`` replaces the file (atomically when configured), ``append``
    adds to the end of an existing file.
    """
    path = Path(path)

    if config.existing_output == "append":
        with open(path, "a", encoding=config.encoding, newline="") as f:
            yield f
    elif config.atomic:
        with atomic_write(path, encoding=config.encoding) as f:
            yield f
    else:
        with open(path, "w", encoding=config.encoding, newline="") as f:
            yield f


def write_records(
    path: Path,
    records: Iterable[OutputRecord],
    config: OutputConfig | None = None,
) -> int:
    """
    Write records to a TCDF file, one per line.

    Args:
        path: Output file path
        records: Records in output order, sentinel included
        config: Output settings (defaults when omitted)

    Returns:
        Number of lines written
    """
    if config is None:
        config = OutputConfig()

    count = 0
    with open_sink(path, config) as sink:
        for record in records:
            sink.write(record.render() + "\n")
            count += 1

    logger.debug("records_written", path=str(path), lines=count)
    return count
