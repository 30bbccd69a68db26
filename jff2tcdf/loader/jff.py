"""JFLAP (.jff) document loader.

A JFLAP finite automaton looks like::

    <structure>
      <type>fa</type>
      <automaton>
        <state id="0" name="q0"><x>60.0</x><y>80.0</y><initial/></state>
        <state id="1" name="q1"><final/></state>
        <transition><from>0</from><to>1</to><read>a~z</read></transition>
      </automaton>
    </structure>

Every ``<state>`` and ``<transition>`` element is collected in document order.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from jff2tcdf.models import JffDocument, StateDescriptor, TransitionDescriptor
from jff2tcdf.utils.logging import get_logger
from jff2tcdf.utils.result import Err, LoadError, Ok, Result, collect_results

logger = get_logger("loader.jff")

XML_FEATURES = "xml"

# Plain ASCII integers only; int() alone also takes "1_0", "+3" and non-ASCII digits
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def _child_text(element: Tag, name: str) -> Optional[str]:
    child = element.find(name)
    if child is None:
        return None
    # Collapse whitespace the way JFLAP trims labels on save
    return " ".join(child.get_text().split())


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    value = value.strip()
    if INTEGER_PATTERN.fullmatch(value) is None:
        return None
    return int(value)


def parse_state(element: Tag) -> Result[StateDescriptor, str]:
    """
    Build a StateDescriptor from a ``<state>`` element.

    Args:
        element: The state element

    Returns:
        Result with the descriptor, or a message naming the bad attribute
    """
    raw_id = element.get("id")
    state_id = _parse_int(raw_id)
    if state_id is None:
        return Err(f"state has no numeric id: {raw_id!r}")

    return Ok(StateDescriptor(
        id=state_id,
        is_final=element.find("final") is not None,
        is_initial=element.find("initial") is not None,
        name=element.get("name"),
    ))


def parse_transition(element: Tag) -> Result[TransitionDescriptor, str]:
    """
    Build a TransitionDescriptor from a ``<transition>`` element.

    A missing or empty ``<read>`` is the empty label.
    """
    raw_source = _child_text(element, "from")
    raw_target = _child_text(element, "to")

    source = _parse_int(raw_source)
    if source is None:
        return Err(f"transition has no numeric <from>: {raw_source!r}")

    target = _parse_int(raw_target)
    if target is None:
        return Err(f"transition has no numeric <to>: {raw_target!r}")

    return Ok(TransitionDescriptor(
        source=source,
        target=target,
        label=_child_text(element, "read") or "",
    ))


def parse_document(markup: str | bytes, path: str = "<memory>") -> Result[JffDocument, LoadError]:
    """
    Parse JFLAP markup into a JffDocument.

    Args:
        markup: XML text or bytes
        path: Name used in error messages

    Returns:
        Result with the document or a LoadError
    """
    if not markup.strip():
        return Err(LoadError(path=path, message="no XML root element"))

    try:
        soup = BeautifulSoup(markup, XML_FEATURES)
    except ParserRejectedMarkup as e:
        return Err(LoadError(path=path, message="markup rejected by parser", cause=e))

    if soup.find() is None:
        return Err(LoadError(path=path, message="no XML root element"))

    states = collect_results([parse_state(el) for el in soup.find_all("state")])
    if states.is_err():
        return Err(LoadError(path=path, message="; ".join(states.unwrap_err())))

    transitions = collect_results(
        [parse_transition(el) for el in soup.find_all("transition")]
    )
    if transitions.is_err():
        return Err(LoadError(path=path, message="; ".join(transitions.unwrap_err())))

    automaton_type = _child_text(soup, "type")

    return Ok(JffDocument(
        states=tuple(states.unwrap()),
        transitions=tuple(transitions.unwrap()),
        automaton_type=automaton_type,
    ))


def load_document(path: Path) -> Result[JffDocument, LoadError]:
    """
    Load a JFLAP document from disk.

    Args:
        path: Path to the .jff file

    Returns:
        Result with the document or a LoadError
    """
    path = Path(path)

    try:
        markup = path.read_bytes()
    except OSError as e:
        logger.error("load_failed", path=str(path), error=str(e))
        return Err(LoadError(path=str(path), message="cannot read file", cause=e))

    result = parse_document(markup, path=str(path))

    if result.is_err():
        logger.error("load_failed", path=str(path), error=result.unwrap_err().message)
    else:
        logger.debug("document_loaded", path=str(path), **result.unwrap().to_dict())

    return result
