"""Tests for configuration loading."""

from pathlib import Path

from jff2tcdf.config import ConverterConfig, load_config


def test_defaults_without_config_dir(tmp_path: Path):
    config = load_config(tmp_path / "nowhere").unwrap()

    assert config.usage_exit_code == 0
    assert config.output.existing_output == "truncate"
    assert config.output.atomic is True
    assert config.logging.level == "info"
    assert config.config_dir is None


def test_from_dict_overrides():
    config = ConverterConfig.from_dict({
        "usage_exit_code": 64,
        "logging": {"level": "debug", "format": "json"},
        "output": {"existing_output": "append", "encoding": "latin-1", "atomic": False},
    }).unwrap()

    assert config.usage_exit_code == 64
    assert config.logging.format == "json"
    assert config.output.existing_output == "append"
    assert config.output.encoding == "latin-1"
    assert config.output.atomic is False
    assert config.validate().is_ok()


def test_from_dict_rejects_bad_types():
    result = ConverterConfig.from_dict({"usage_exit_code": "often"})

    assert result.is_err()


def test_from_dict_rejects_quoted_atomic_flag():
    result = ConverterConfig.from_dict({"output": {"atomic": "false"}})

    assert result.unwrap_err().field == "output.atomic"


def test_quoted_atomic_flag_in_yaml_is_rejected(tmp_path: Path):
    (tmp_path / "defaults.yaml").write_text('output:\n  atomic: "false"\n')

    assert load_config(tmp_path).unwrap_err().field == "output.atomic"


def test_validate_rejects_unknown_policy():
    config = ConverterConfig.from_dict({"output": {"existing_output": "overwrite"}}).unwrap()

    error = config.validate().unwrap_err()

    assert error.field == "output.existing_output"


def test_validate_rejects_unknown_encoding():
    config = ConverterConfig.from_dict({"output": {"encoding": "no-such-codec"}}).unwrap()

    assert config.validate().unwrap_err().field == "output.encoding"


def test_load_config_reads_defaults_yaml(tmp_path: Path):
    (tmp_path / "defaults.yaml").write_text("logging:\n  level: warn\n")

    config = load_config(tmp_path).unwrap()

    assert config.logging.level == "warn"
    assert config.config_dir == tmp_path


def test_invalid_yaml(tmp_path: Path):
    (tmp_path / "defaults.yaml").write_text("logging: [unclosed\n")

    assert load_config(tmp_path).unwrap_err().field == "yaml"


def test_top_level_must_be_mapping(tmp_path: Path):
    (tmp_path / "defaults.yaml").write_text("- a\n- b\n")

    assert load_config(tmp_path).unwrap_err().field == "yaml"


def test_repository_defaults_are_valid():
    config_dir = Path(__file__).parent.parent / "config"

    assert load_config(config_dir).is_ok()
