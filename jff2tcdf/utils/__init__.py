"""Utility modules for jff2tcdf."""

from jff2tcdf.utils.atomic import AtomicWriteError, atomic_write
from jff2tcdf.utils.logging import (
    clear_document_context,
    configure_logging,
    get_logger,
    set_document_context,
)
from jff2tcdf.utils.result import (
    ConfigError,
    Err,
    ExitCode,
    GuardError,
    LoadError,
    Ok,
    Result,
    ResultError,
    collect_results,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "set_document_context",
    "clear_document_context",
    # Files
    "atomic_write",
    "AtomicWriteError",
    # Results
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "collect_results",
    "LoadError",
    "GuardError",
    "ConfigError",
    "ExitCode",
]
