"""Conversion pipeline: guards, record emission and output."""

from jff2tcdf.pipeline.converter import (
    ConversionResult,
    convert,
    emit_state,
    emit_transition,
    open_sink,
    write_records,
)
from jff2tcdf.pipeline.guards import check_input_file, check_output_file, run_guards

__all__ = [
    "ConversionResult",
    "convert",
    "emit_state",
    "emit_transition",
    "open_sink",
    "write_records",
    "check_input_file",
    "check_output_file",
    "run_guards",
]
