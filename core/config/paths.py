"""
Path resolution: base directory, config directory, dataset/output/log directories, user-typed paths.

Every directory honours an AXIS_CROSSREF_* environment override.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

ENV_BASE_DIR = "AXIS_CROSSREF_BASE_DIR"
ENV_DATA_DIR = "AXIS_CROSSREF_DATA_DIR"
ENV_OUTPUT_DIR = "AXIS_CROSSREF_OUTPUT_DIR"
ENV_LOG_DIR = "AXIS_CROSSREF_LOG_DIR"


def _exe_dir() -> Path:
    """Directory of the frozen executable."""
    return Path(sys.executable).resolve().parent


def _env_dir(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value).resolve() if value else None


def get_base_dir() -> Path:
    """Base directory: env override, the executable's directory when frozen, else the project root."""
    override = _env_dir(ENV_BASE_DIR)
    if override:
        return override
    if getattr(sys, "frozen", False):
        return _exe_dir()
    return Path(__file__).resolve().parent.parent.parent


def get_config_dir_raw() -> Path:
    """config/ under the base directory (does not trigger loading)."""
    return get_base_dir() / "config"


def get_data_dir() -> Path:
    """Directory holding the JSON datasets."""
    return _env_dir(ENV_DATA_DIR) or get_base_dir() / "data"


def get_output_dir() -> Path:
    """Batch result workbooks."""
    return _env_dir(ENV_OUTPUT_DIR) or get_base_dir() / "output"


def get_log_dir() -> Path:
    return _env_dir(ENV_LOG_DIR) or get_base_dir() / "logs"


def normalize_input_path(raw: str) -> Path:
    """
    Clean a user-typed or drag-and-dropped path: strip quotes and whitespace;
    under WSL turn a Windows drive path into its /mnt mount.
    e.g. 'c:/Users/me/Desktop/models.txt' -> /mnt/c/Users/me/Desktop/models.txt
    """
    s = raw.strip().strip("\"'")
    if not s:
        return Path("")
    if os.name == "posix" and len(s) >= 2:
        m = re.match(r"^([a-zA-Z])\s*:[\\/]?(.*)$", s)
        if m:
            drive = m.group(1).lower()
            rest = (m.group(2) or "").replace("\\", "/").strip("/")
            s = f"/mnt/{drive}/{rest}" if rest else f"/mnt/{drive}"
    return Path(s)
