"""Shared fixtures for jff2tcdf tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from jff2tcdf.utils.logging import clear_document_context, configure_logging

SAMPLE_JFF = """<?xml version="1.0" encoding="UTF-8" standalone="no"?><!--Created with JFLAP 7.1.-->
<structure>
  <type>fa</type>
  <automaton>
    <!--The list of states.-->
    <state id="0" name="q0">
      <x>72.0</x>
      <y>110.0</y>
      <initial/>
    </state>
    <state id="1" name="q1">
      <x>210.0</x>
      <y>110.0</y>
      <final/>
    </state>
    <!--The list of transitions.-->
    <transition>
      <from>0</from>
      <to>1</to>
      <read>a~c</read>
    </transition>
  </automaton>
</structure>
"""


def make_jff(states: list[str], transitions: list[tuple[str, str, str | None]]) -> str:
    """Build a JFLAP document from state fragments and (from, to, read) triples."""
    parts = ['<?xml version="1.0" encoding="UTF-8"?>', "<structure><type>fa</type><automaton>"]
    parts.extend(states)
    for source, target, read in transitions:
        read_xml = "<read/>" if read is None else f"<read>{read}</read>"
        parts.append(
            f"<transition><from>{source}</from><to>{target}</to>{read_xml}</transition>"
        )
    parts.append("</automaton></structure>")
    return "\n".join(parts)


@pytest.fixture(autouse=True)
def reset_logging():
    """Point logging at the current stderr so no test writes to a closed stream."""
    configure_logging(level="debug", format_type="text", stream=sys.stderr)
    yield
    clear_document_context()


@pytest.fixture
def sample_jff(tmp_path: Path) -> Path:
    """Two-state automaton with one a~c transition."""
    path = tmp_path / "sample.jff"
    path.write_text(SAMPLE_JFF, encoding="utf-8")
    return path


@pytest.fixture
def write_jff(tmp_path: Path):
    """Write a generated JFLAP document and return its path."""

    def _write(states, transitions, name: str = "automaton.jff") -> Path:
        path = tmp_path / name
        path.write_text(make_jff(states, transitions), encoding="utf-8")
        return path

    return _write
