"""Input document loading."""

from jff2tcdf.loader.jff import load_document, parse_document, parse_state, parse_transition

__all__ = ["load_document", "parse_document", "parse_state", "parse_transition"]
