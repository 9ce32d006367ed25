"""Configuration loading: read config/app_config.yaml and validate it into AppConfigSchema."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from models.schemas import AppConfigSchema

from . import paths as _paths

logger = logging.getLogger(__name__)

APP_CONFIG_FILENAME = "app_config.yaml"


def get_app_config_path() -> Path:
    """app_config.yaml inside the config directory."""
    return _paths.get_config_dir_raw() / APP_CONFIG_FILENAME


def _load_yaml(path: Path) -> dict[str, Any] | None:
    """Read a YAML mapping; None when missing, unreadable or not a mapping."""
    if not path.exists():
        return None
    try:
        raw = path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Failed to read YAML %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level is not a mapping", path)
        return None
    return data


def load_app_config_yaml(path: Path | None = None) -> AppConfigSchema:
    """
    Load app_config.yaml (or the given file). Missing sections take their defaults;
    an invalid file logs a warning and yields the all-default configuration.
    """
    yaml_path = path or get_app_config_path()
    data: dict[str, Any] = _load_yaml(yaml_path) or {}
    try:
        return AppConfigSchema.model_validate(data)
    except ValidationError as e:
        logger.warning("Config validation failed, using defaults: %s", e)
        return AppConfigSchema.model_validate({})
