"""CLI entry point for jff2tcdf."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click

from jff2tcdf import __version__
from jff2tcdf.config import ConverterConfig, load_config
from jff2tcdf.loader import load_document
from jff2tcdf.pipeline import check_input_file, convert, run_guards, write_records
from jff2tcdf.utils.atomic import AtomicWriteError
from jff2tcdf.utils.logging import (
    clear_document_context,
    configure_logging,
    get_logger,
    set_document_context,
)
from jff2tcdf.utils.result import ExitCode

DEFAULT_CONFIG = "./config"


def output_json(data: dict) -> None:
    """Output JSON to stdout."""
    click.echo(json.dumps(data, indent=2, default=str))


@click.command(name="jff2tcdf")
@click.argument("jff_file", required=False, type=click.Path(path_type=Path))
@click.argument("tcdf_file", required=False, type=click.Path(path_type=Path))
@click.option(
    "--config",
    type=click.Path(exists=False, path_type=Path),
    default=DEFAULT_CONFIG,
    help="Path to config directory",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "error"], case_sensitive=False),
    default=None,
    help="Logging level (overrides config)",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default=None,
    help="Log format (overrides config)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Convert and report without writing the TCDF file",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    jff_file: Optional[Path],
    tcdf_file: Optional[Path],
    config: Path,
    log_level: Optional[str],
    log_format: Optional[str],
    dry_run: bool,
) -> None:
    """
    Convert a JFLAP automaton (JFF_FILE) into a ToyCompile DFA file (TCDF_FILE).

    Every state becomes a "def" line and every transition one "trans" line
    per accepted character. The file ends with "eof".
    """
    config_result = load_config(config)

    # Usage is printed even when the config is broken
    if jff_file is None or tcdf_file is None:
        click.echo(ctx.get_usage())
        if config_result.is_ok():
            ctx.exit(config_result.unwrap().usage_exit_code)
        ctx.exit(ConverterConfig.usage_exit_code)

    if config_result.is_err():
        click.echo(str(config_result.unwrap_err()), err=True)
        ctx.exit(ExitCode.CONFIG_INVALID)
    settings = config_result.unwrap()

    configure_logging(
        level=log_level or settings.logging.level,
        format_type=log_format or settings.logging.format,
    )
    logger = get_logger("cli")

    set_document_context(jff_file.name)
    try:
        logger.info(
            "conversion_started",
            input=str(jff_file),
            output=str(tcdf_file),
            dry_run=dry_run,
        )

        if dry_run:
            guard = check_input_file(jff_file)
        else:
            guard = run_guards(jff_file, tcdf_file)
        if guard.is_err():
            error = guard.unwrap_err()
            output_json({"status": "error", "message": str(error)})
            ctx.exit(error.code)

        loaded = load_document(jff_file)
        if loaded.is_err():
            output_json({"status": "error", "message": str(loaded.unwrap_err())})
            ctx.exit(ExitCode.INPUT_PARSE_FAILED)

        result = convert(loaded.unwrap())

        if dry_run:
            output_json({
                "status": "dry_run",
                "message": "Would write TCDF file",
                "output": str(tcdf_file),
                **result.to_dict(),
            })
            return

        try:
            write_records(tcdf_file, result.records, settings.output)
        except (AtomicWriteError, OSError) as e:
            logger.error("write_failed", path=str(tcdf_file), error=str(e))
            output_json({"status": "error", "message": f"Failed to write {tcdf_file}: {e}"})
            ctx.exit(ExitCode.OUTPUT_UNWRITABLE)

        logger.info("conversion_completed", records=len(result.records))
        output_json({
            "status": "success" if not result.warnings else "partial",
            "message": "conversion done.",
            "output": str(tcdf_file),
            **result.to_dict(),
        })

    finally:
        clear_document_context()


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except Exception as e:
        logger = get_logger("cli")
        logger.error("cli_error", error=str(e))
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
