"""
core.config: paths, config/app_config.yaml loading and cached access.

- Config file: config/app_config.yaml (sections app, search, batch).
- Paths: config/data/output/logs directories (see .paths), each with an env override.
- load_app_config() runs once at startup; values are read through inject(Annotated alias).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from models.schemas import AppConfigSchema, AppSection, BatchSection, SearchConfig

from . import deps as _deps
from . import loader as _loader
from . import paths as _paths

Depends = _deps.Depends
inject = _deps.inject
logger = logging.getLogger(__name__)

# ----- paths (forwarded) -----

get_config_dir_raw = _paths.get_config_dir_raw
get_app_config_path = _loader.get_app_config_path
get_base_dir = _paths.get_base_dir
get_data_dir = _paths.get_data_dir
get_output_dir = _paths.get_output_dir
get_log_dir = _paths.get_log_dir
normalize_input_path = _paths.normalize_input_path

# ----- load once and cache -----

_loaded = False
_app_config_path: Path | None = None
_app_config: AppConfigSchema | None = None


def _ensure_loaded() -> None:
    if not _loaded:
        load_app_config()


def load_app_config(path: Path | None = None) -> None:
    """Load config/app_config.yaml (or path) and cache it. Later calls are no-ops until reset_app_config()."""
    global _loaded, _app_config_path, _app_config

    if _loaded:
        return

    _app_config_path = path or get_app_config_path()
    _app_config = _loader.load_app_config_yaml(_app_config_path)
    _loaded = True
    logger.debug("Config loaded: config_file=%s", _app_config_path)


def reset_app_config() -> None:
    """Drop the cached config so the next access reloads it."""
    global _loaded, _app_config_path, _app_config
    _loaded = False
    _app_config_path = None
    _app_config = None


def get_app_config() -> AppConfigSchema:
    return _resolve_app_config()


def _resolve_app_config() -> AppConfigSchema:
    _ensure_loaded()
    assert _app_config is not None
    return _app_config


def _get_app_section() -> AppSection:
    return _resolve_app_config().app


def _get_search_config() -> SearchConfig:
    return _resolve_app_config().search


def _get_batch_config() -> BatchSection:
    return _resolve_app_config().batch


# ----- Annotated aliases for inject() -----

AppSettings = Annotated[AppSection, Depends(_get_app_section)]
SearchSettings = Annotated[SearchConfig, Depends(_get_search_config)]
BatchSettings = Annotated[BatchSection, Depends(_get_batch_config)]


__all__ = [
    "load_app_config",
    "reset_app_config",
    "get_app_config",
    "get_config_dir_raw",
    "get_app_config_path",
    "get_base_dir",
    "get_data_dir",
    "get_output_dir",
    "get_log_dir",
    "normalize_input_path",
    "Depends",
    "inject",
    "AppSettings",
    "SearchSettings",
    "BatchSettings",
]
