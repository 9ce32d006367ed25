"""
Pairs the Axis replacement of each batch row with a mount for the requested placement.

Both functions are pure: items are never modified, paired rows are new copies.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.interfaces import AccessoryLookupProtocol, SpecLookupProtocol
from domain.catalog import PlacementType
from models.schemas import BatchItem, MountPairingResult

from .lookup import get_form_factor_defaults, mounts_for_placement, rank_mounts

logger = logging.getLogger(__name__)


def resolve_mount_pair_with_confidence(
    lookup: AccessoryLookupProtocol,
    camera_model: str,
    placement: PlacementType,
    camera_type: str | None = None,
) -> MountPairingResult:
    """
    Best mount for camera_model at placement, with how much to trust it:
    exact / series-fallback from the accessory data, form-factor-default when only
    the camera subtype says the placement is usual, none otherwise.
    """
    resolution = lookup.resolve_with_confidence(camera_model)
    if resolution.entry is not None:
        ranked = rank_mounts(mounts_for_placement(resolution.entry, placement))
        if ranked:
            return MountPairingResult(
                camera_model=camera_model,
                placement=placement,
                mount=ranked[0],
                confidence=resolution.confidence,
                warning=resolution.warning,
                alternatives=ranked[1:],
            )

    if camera_type and placement in get_form_factor_defaults(camera_type):
        return MountPairingResult(
            camera_model=camera_model,
            placement=placement,
            confidence="form-factor-default",
            warning=(
                f"No specific mount data for {camera_model}. "
                f"{camera_type} cameras typically use {placement} mounts."
            ),
        )

    return MountPairingResult(
        camera_model=camera_model,
        placement=placement,
        warning=f"No compatible {placement} mount found for {camera_model}.",
    )


def pair_mounts_for_batch(
    lookup: AccessoryLookupProtocol,
    items: Sequence[BatchItem],
    specs: SpecLookupProtocol | None = None,
) -> list[BatchItem]:
    """Rows without a mount type or without a search result come back unchanged."""
    paired: list[BatchItem] = []
    for item in items:
        best = item.response.best if item.response is not None else None
        if not item.mount_type or best is None:
            paired.append(item)
            continue
        axis_model = best.axis_model
        camera_type = None
        if specs is not None:
            # exact or base model only; a series sibling may be another form factor
            spec = specs.lookup_spec(axis_model)
            camera_type = spec.camera_type if spec is not None else None
        pairing = resolve_mount_pair_with_confidence(lookup, axis_model, item.mount_type, camera_type)
        logger.debug("Row %d: %s -> %s (%s)", item.row, axis_model, pairing.mount.model_key if pairing.mount else None, pairing.confidence)
        paired.append(item.model_copy(update={"mount_pairing": pairing}))
    return paired
