"""Load the JSON datasets into validated, frozen models."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from domain.catalog import AccessoryCompatDatabase, AxisSpecDatabase, CrossRefData, MsrpEntry

from .errors import DatasetError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _read_json(path: str | Path) -> Any:
    """Read a JSON file; missing, unreadable or malformed files raise DatasetError."""
    p = Path(path)
    if not p.exists():
        raise DatasetError(p, "file not found")
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DatasetError(p, f"invalid JSON at line {e.lineno}: {e.msg}") from e
    except OSError as e:
        raise DatasetError(p, str(e)) from e


def _validate(model: type[M], data: Any, path: str | Path) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DatasetError(path, f"schema mismatch: {e.error_count()} error(s), first: {e.errors()[0]['msg']}") from e


def load_crossref(path: str | Path) -> CrossRefData:
    """Competitor mappings plus the legacy Axis database."""
    data = _validate(CrossRefData, _read_json(path), path)
    logger.info(
        "Loaded %d competitor mappings and %d legacy mappings from %s",
        len(data.mappings),
        len(data.axis_legacy_database.mappings),
        path,
    )
    return data


def load_specs(path: str | Path) -> AxisSpecDatabase:
    data = _validate(AxisSpecDatabase, _read_json(path), path)
    logger.info("Loaded %d product specs from %s", len(data.products), path)
    return data


def load_accessories(path: str | Path) -> AccessoryCompatDatabase:
    data = _validate(AccessoryCompatDatabase, _read_json(path), path)
    logger.info("Loaded accessory compatibility for %d camera models from %s", len(data.compatibility), path)
    return data


def parse_msrp(raw: Any, path: str | Path = "<memory>") -> dict[str, MsrpEntry]:
    """
    Accept either {model: {msrp, description}} or the flat {model_lookup: {model: price}} form.
    Entries whose price is not a non-negative number are skipped with a warning.
    """
    if not isinstance(raw, dict):
        raise DatasetError(path, "top level must be an object")
    source = raw.get("model_lookup", raw)
    if not isinstance(source, dict):
        raise DatasetError(path, "model_lookup must be an object")

    result: dict[str, MsrpEntry] = {}
    skipped = 0
    for model, value in source.items():
        payload = {"msrp": value} if isinstance(value, (int, float)) else value
        try:
            result[str(model)] = MsrpEntry.model_validate(payload)
        except ValidationError:
            skipped += 1
    if skipped:
        logger.warning("Skipped %d MSRP entries with no usable price in %s", skipped, path)
    return result


def load_msrp(path: str | Path) -> dict[str, MsrpEntry]:
    entries = parse_msrp(_read_json(path), path)
    logger.info("Loaded %d MSRP entries from %s", len(entries), path)
    return entries
