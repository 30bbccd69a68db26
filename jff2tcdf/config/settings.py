"""Converter configuration.

Configuration is loaded from a YAML file and validated at startup. Every
value has a default, so the converter runs without any config file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from jff2tcdf.utils.result import ConfigError, Err, Ok, Result

EXISTING_OUTPUT_POLICIES = ("truncate", "append")
LOG_LEVELS = ("debug", "info", "warn", "warning", "error")
LOG_FORMATS = ("json", "text")


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "info"
    format: str = "text"


@dataclass
class OutputConfig:
    """How the TCDF file is written."""

    # What to do with a TCDF file that already exists at the output path
    existing_output: str = "truncate"
    encoding: str = "utf-8"
    # Truncating writes go through a temp file and a rename
    atomic: bool = True


@dataclass
class ConverterConfig:
    """
    Complete converter configuration.

    Attributes:
        usage_exit_code: Exit code when the input/output arguments are missing.
            The original tool exits 0 here; scripts may rely on it.
        logging: Logging settings
        output: Output file settings
        config_dir: Directory the configuration was loaded from, if any
    """

    usage_exit_code: int = 0
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    config_dir: Optional[Path] = None

    @classmethod
    def from_yaml(cls, path: Path) -> Result["ConverterConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)

        if not path.exists():
            return Err(ConfigError(
                field="path",
                message=f"Configuration file not found: {path}",
            ))

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            return Err(ConfigError(
                field="yaml",
                message=f"Failed to parse YAML: {e}",
            ))
        except OSError as e:
            return Err(ConfigError(
                field="file",
                message=f"Failed to read config file: {e}",
            ))

        if not isinstance(data, dict):
            return Err(ConfigError(
                field="yaml",
                message="Top level of the configuration must be a mapping",
            ))

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result["ConverterConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Result with loaded config or error
        """
        try:
            logging_data = data.get("logging") or {}
            logging_config = LoggingConfig(
                level=str(logging_data.get("level", "info")),
                format=str(logging_data.get("format", "text")),
            )

            output_data = data.get("output") or {}
            atomic = output_data.get("atomic", True)
            if not isinstance(atomic, bool):
                return Err(ConfigError(
                    field="output.atomic",
                    message=f"Must be true or false, got {atomic!r}",
                ))
            output = OutputConfig(
                existing_output=str(output_data.get("existing_output", "truncate")),
                encoding=str(output_data.get("encoding", "utf-8")),
                atomic=atomic,
            )

            config = cls(
                usage_exit_code=int(data.get("usage_exit_code", 0)),
                logging=logging_config,
                output=output,
            )

        except (AttributeError, TypeError, ValueError) as e:
            return Err(ConfigError(
                field="unknown",
                message=f"Failed to parse configuration: {e}",
            ))

        return Ok(config)

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Returns:
            Result indicating success or validation error
        """
        if self.output.existing_output not in EXISTING_OUTPUT_POLICIES:
            return Err(ConfigError(
                field="output.existing_output",
                message=(
                    f"Must be one of {', '.join(EXISTING_OUTPUT_POLICIES)}, "
                    f"got {self.output.existing_output!r}"
                ),
            ))

        if self.logging.level.lower() not in LOG_LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Unknown log level {self.logging.level!r}",
            ))

        if self.logging.format.lower() not in LOG_FORMATS:
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be json or text, got {self.logging.format!r}",
            ))

        if not 0 <= self.usage_exit_code <= 255:
            return Err(ConfigError(
                field="usage_exit_code",
                message=f"Must be between 0 and 255, got {self.usage_exit_code}",
            ))

        try:
            "".encode(self.output.encoding)
        except LookupError:
            return Err(ConfigError(
                field="output.encoding",
                message=f"Unknown encoding {self.output.encoding!r}",
            ))

        return Ok(None)


def load_config(config_dir: Path = None) -> Result[ConverterConfig, ConfigError]:
    """
    Load configuration from the standard location.

    Loads <config_dir>/defaults.yaml when present, built-in defaults otherwise.

    Args:
        config_dir: Configuration directory (defaults to ./config)

    Returns:
        Result with loaded and validated config or error
    """
    if config_dir is None:
        config_dir = Path("./config")

    config_dir = Path(config_dir)

    defaults_path = config_dir / "defaults.yaml"
    if defaults_path.exists():
        result = ConverterConfig.from_yaml(defaults_path)
        if result.is_err():
            return result
        config = result.unwrap()
        config.config_dir = config_dir
    else:
        config = ConverterConfig()

    validation_result = config.validate()
    if validation_result.is_err():
        return Err(validation_result.unwrap_err())

    return Ok(config)
