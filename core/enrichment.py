"""
Offline spec enrichment: snapshot in, new snapshot out.

fill_spec_gaps() only fills fields that are missing in the snapshot (None, "" or
an empty list) and never overwrites a value that is already there. The input
snapshot is left untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from domain.catalog import AxisProductSpec, AxisSpecDatabase
from models.schemas import EnrichmentReport

from .model_key import normalize_model_key

logger = logging.getLogger(__name__)

# display-name keywords, checked in order
_NAME_HINTS: tuple[tuple[str, str], ...] = (
    ("ptz", "ptz"),
    ("panoramic", "panoramic"),
    ("multisensor", "panoramic"),
    ("bullet", "fixed-bullet"),
    ("dome", "fixed-dome"),
    ("sensor unit", "modular"),
    ("modular", "modular"),
    ("thermal", "specialty"),
)

_SERIES_DIGIT_TYPES = {
    "2": "fixed-bullet",
    "3": "fixed-dome",
    "4": "fixed-dome",
    "5": "ptz",
    "6": "ptz",
    "7": "panoramic",
}


def infer_camera_type(spec: AxisProductSpec, model_key: str | None = None) -> str | None:
    """
    Camera subtype for a camera entry; None for non-cameras.
    An existing camera_type is returned as is. Otherwise the display name is
    checked for keywords, then the model key (F/FA -> modular, P/Q/M + digit).
    """
    if spec.product_type != "camera":
        return None
    if spec.camera_type:
        return spec.camera_type

    name = spec.display_name.lower()
    for keyword, camera_type in _NAME_HINTS:
        if keyword in name:
            return camera_type

    key = normalize_model_key(model_key or spec.model_key)
    if key.startswith("F"):
        return "modular"
    if key[:1] in ("P", "Q", "M") and len(key) > 1:
        return _SERIES_DIGIT_TYPES.get(key[1], "specialty")
    return "specialty"


def _is_gap(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _field_name(name: str) -> str | None:
    """Accepts snake_case field names and their camelCase aliases."""
    fields = AxisProductSpec.model_fields
    if name in fields:
        return name
    for field_name, info in fields.items():
        if info.alias == name:
            return field_name
    return None


def fill_spec_gaps(
    snapshot: AxisSpecDatabase,
    updates: Mapping[str, Mapping[str, Any]],
    *,
    infer_types: bool = True,
) -> tuple[AxisSpecDatabase, EnrichmentReport]:
    """
    Apply scraped or curated values to a spec snapshot without overwriting.
    Returns the new snapshot and a report of what changed.
    """
    key_map = {normalize_model_key(k): k for k in snapshot.products}
    products = dict(snapshot.products)
    report = EnrichmentReport()

    for raw_model, fields in updates.items():
        model_key = normalize_model_key(raw_model)
        source_key = key_map.get(model_key)
        if source_key is None:
            report.unknown_models.append(raw_model)
            continue

        spec = products[source_key]
        changes: dict[str, Any] = {}
        for raw_field, value in fields.items():
            field_name = _field_name(raw_field)
            if field_name is None:
                logger.warning("Unknown spec field %r for %s, ignored", raw_field, model_key)
                continue
            if _is_gap(value):
                continue
            # a field the source never set is a gap whatever its default
            if field_name in spec.model_fields_set and not _is_gap(getattr(spec, field_name)):
                report.skipped_existing += 1
                continue
            changes[field_name] = value

        if changes:
            data = spec.model_dump(exclude_unset=True)
            data.update(changes)
            products[source_key] = AxisProductSpec.model_validate(data)
            report.updated_models.append(model_key)
            report.filled_fields += len(changes)

    if infer_types:
        for source_key, spec in list(products.items()):
            if spec.product_type != "camera" or spec.camera_type:
                continue
            camera_type = infer_camera_type(spec, source_key)
            if camera_type:
                products[source_key] = spec.model_copy(update={"camera_type": camera_type})
                report.inferred_camera_types[normalize_model_key(source_key)] = camera_type

    logger.info(
        "Enrichment: %d models updated, %d fields filled, %d existing values kept, %d unknown models",
        len(report.updated_models),
        report.filled_fields,
        report.skipped_existing,
        len(report.unknown_models),
    )
    return snapshot.model_copy(update={"products": products}), report
