"""Configuration module for jff2tcdf."""

from jff2tcdf.config.settings import ConverterConfig, load_config

__all__ = ["ConverterConfig", "load_config"]
