"""Precondition checks run before a conversion.

A failed guard stops the run before any output is written, with the exit
code carried in the GuardError. An output file that already exists is not a
failure: it is reported and then reused.
"""

from __future__ import annotations

from pathlib import Path

from jff2tcdf.utils.logging import get_logger
from jff2tcdf.utils.result import Err, ExitCode, GuardError, Ok, Result

logger = get_logger("pipeline.guards")


def check_input_file(path: Path) -> Result[Path, GuardError]:
    """
    Check that the input document exists and is a regular file.

    A missing input is reported as a parse failure.

    Args:
        path: Path to the .jff file

    Returns:
        Ok(Path) if the file can be opened, Err(GuardError) otherwise
    """
    path = Path(path)

    if not path.exists():
        error = GuardError(
            code=ExitCode.INPUT_PARSE_FAILED,
            message=f"failed to parse jff file: {path}",
            details="file not found",
        )
        logger.error("guard_failed", guard="input_file", code=error.code, path=str(path))
        return Err(error)

    if not path.is_file():
        error = GuardError(
            code=ExitCode.INPUT_PARSE_FAILED,
            message=f"failed to parse jff file: {path}",
            details="not a regular file",
        )
        logger.error("guard_failed", guard="input_file", code=error.code, path=str(path))
        return Err(error)

    logger.debug("guard_passed", guard="input_file", path=str(path))
    return Ok(path)


def check_output_file(path: Path) -> Result[bool, GuardError]:
    """
    Make sure the output file can be created.

    Args:
        path: Path to the .tcdf file

    Returns:
        Ok(True) if the file already existed, Ok(False) if it was created,
        Err(GuardError) if it cannot be created
    """
    path = Path(path)

    if path.is_dir():
        error = GuardError(
            code=ExitCode.OUTPUT_UNWRITABLE,
            message=f"failed to create file: {path}",
            details="path is a directory",
        )
        logger.error("guard_failed", guard="output_file", code=error.code, path=str(path))
        return Err(error)

    if path.exists():
        logger.info("output_exists", path=str(path), action="using existing one")
        return Ok(True)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    except OSError as e:
        error = GuardError(
            code=ExitCode.OUTPUT_UNWRITABLE,
            message=f"failed to create file: {path}",
            details=f"OS error: {e}",
        )
        logger.error(
            "guard_failed",
            guard="output_file",
            code=error.code,
            path=str(path),
            error=str(e),
        )
        return Err(error)

    logger.debug("guard_passed", guard="output_file", path=str(path))
    return Ok(False)


def run_guards(input_path: Path, output_path: Path) -> Result[bool, GuardError]:
    """
    Run all precondition checks.

    Returns:
        Ok with whether the output already existed, or the first failure
    """
    result = check_input_file(input_path)
    if result.is_err():
        return result

    return check_output_file(output_path)
