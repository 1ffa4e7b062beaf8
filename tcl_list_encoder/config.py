"""Application configuration with YAML + env vars + CLI override support."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from tcl_list_encoder.domain.encoder import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


@dataclass
class EncoderConfig:
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass
class LoggingConfig:
    verbose: bool = False


@dataclass
class AppConfig:
    encoder: EncoderConfig = field(default_factory=EncoderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Mapping: env var name -> (section, field)
_ENV_MAPPING: dict[str, tuple[str, str]] = {
    "TCL_LIST_MAX_DEPTH": ("encoder", "max_depth"),
    "TCL_LIST_VERBOSE": ("logging", "verbose"),
}


def load_config(
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Load configuration with priority: YAML < env vars < CLI overrides.

    Args:
        config_path: Path to YAML config file. None to skip.
        cli_overrides: Dict of CLI overrides in format {"section.field": value}.
            None values are skipped (means CLI option was not provided).
    """
    config = AppConfig()

    if config_path:
        _apply_yaml(config, config_path)

    _apply_env_vars(config)

    if cli_overrides:
        _apply_overrides(config, cli_overrides)

    return config


def _apply_yaml(config: AppConfig, config_path: str) -> None:
    """Load YAML file and apply values to config."""
    path = Path(config_path)
    if not path.is_file():
        logger.warning("Config file not found: %s, using defaults", config_path)
        return

    import yaml

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        logger.warning("Config file is not a valid YAML mapping: %s", config_path)
        return

    for section_name, section_data in data.items():
        if not isinstance(section_data, dict):
            continue
        section = getattr(config, section_name, None)
        if section is None:
            logger.debug("Unknown config section: %s", section_name)
            continue
        _set_section_fields(section, section_data)

    logger.info("Loaded config from %s", config_path)


def _apply_env_vars(config: AppConfig) -> None:
    for env_name, (section_name, field_name) in _ENV_MAPPING.items():
        value = os.environ.get(env_name)
        if value is None:
            continue
        _set_field_value(getattr(config, section_name), field_name, value)


def _apply_overrides(config: AppConfig, overrides: dict[str, Any]) -> None:
    """Apply CLI overrides in format {'section.field': value}."""
    for key, value in overrides.items():
        if value is None:
            continue
        parts = key.split(".", 1)
        if len(parts) != 2:
            continue
        section_name, field_name = parts
        section = getattr(config, section_name, None)
        if section is None:
            continue
        _set_field_value(section, field_name, value)


def _set_section_fields(section: Any, data: dict[str, Any]) -> None:
    section_fields = {f.name for f in fields(section)}
    for key, value in data.items():
        if key in section_fields and value is not None:
            _set_field_value(section, key, value)


def _set_field_value(obj: Any, field_name: str, value: Any) -> None:
    """Set a field on a dataclass, coercing the value to the correct type."""
    field_info = {f.name: f for f in fields(obj)}.get(field_name)
    if field_info is None:
        return

    try:
        coerced = _coerce_value(value, field_info.type)
    except (ValueError, TypeError):
        logger.warning("Ignoring invalid value %r for %s", value, field_name)
        return
    setattr(obj, field_name, coerced)


def _coerce_value(value: Any, type_hint: str) -> Any:
    """Coerce env var strings and YAML scalars to the field's declared type."""
    if type_hint == "bool" and isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    if type_hint == "int":
        return int(value)
    return value
