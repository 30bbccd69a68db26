"""Atomic file writes so an interrupted conversion never leaves a half-written TCDF file."""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from jff2tcdf.utils.logging import get_logger

logger = get_logger("utils.atomic")


class AtomicWriteError(Exception):
    """Raised when an atomic write operation fails."""

    pass


@contextmanager
def atomic_write(
    path: Path,
    encoding: str = "utf-8",
) -> Generator[Any, None, None]:
    """
    Context manager for atomic text file writes.

    Writes to a temporary file first, then atomically renames to the target path.
    If any error occurs, the temp file is cleaned up and the original is untouched.

    Args:
        path: Target file path
        encoding: Text encoding

    Yields:
        File handle for writing

    Raises:
        AtomicWriteError: If the atomic write fails
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file in the same directory so the rename stays on one volume
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )

    temp_path = Path(temp_path)
    success = False

    try:
        os.close(fd)

        # newline="" keeps records "\n"-terminated on every platform
        with open(temp_path, "w", encoding=encoding, newline="") as f:
            yield f

        temp_path.replace(path)
        success = True

        logger.debug("atomic_write_success", path=str(path))

    except Exception as e:
        logger.error("atomic_write_failed", path=str(path), error=str(e))
        raise AtomicWriteError(f"Failed to atomically write {path}: {e}") from e

    finally:
        if not success and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
