"""
Accessory compatibility lookup with series-level fallback.

resolve_mount_pair() picks the single best mount for a camera and placement:
recommendation tier first, then mounts that need no extra accessory.
"""

from __future__ import annotations

import logging

from core.cascade import ModelIndex
from domain.catalog import (
    AccessoryCompatDatabase,
    AccessoryCompatEntry,
    AccessoryCompatGroup,
    AccessoryRecommendation,
    PlacementType,
)
from models.schemas import AccessoryResolution

logger = logging.getLogger(__name__)

RECOMMENDATION_PRIORITY: dict[AccessoryRecommendation, int] = {
    "recommended": 3,
    "included": 2,
    "compatible": 1,
}

FORM_FACTOR_DEFAULTS: dict[str, tuple[PlacementType, ...]] = {
    "fixed-dome": ("pendant", "wall", "ceiling"),
    "fixed-bullet": ("wall", "pole"),
    "ptz": ("pole", "parapet", "wall"),
    "panoramic": ("ceiling", "wall", "pendant"),
    "modular": ("ceiling", "recessed"),
}


def get_form_factor_defaults(camera_type: str | None) -> list[PlacementType]:
    """Placements a camera subtype usually ships with; empty for unknown types."""
    if not camera_type:
        return []
    return list(FORM_FACTOR_DEFAULTS.get(camera_type, ()))


def rank_mounts(mounts: list[AccessoryCompatEntry]) -> list[AccessoryCompatEntry]:
    """Recommendation tier descending, then requires_additional=False first. Stable for full ties."""
    return sorted(
        mounts,
        key=lambda m: (-RECOMMENDATION_PRIORITY.get(m.recommendation, 0), m.requires_additional),
    )


def mounts_for_placement(group: AccessoryCompatGroup, placement: PlacementType) -> list[AccessoryCompatEntry]:
    return [a for a in group.accessories if a.accessory_type == "mount" and a.mount_placement == placement]


class AccessoryLookup:
    def __init__(self, database: AccessoryCompatDatabase) -> None:
        self._index: ModelIndex[AccessoryCompatGroup] = ModelIndex(database.compatibility, name="accessories")
        logger.info("Accessory index built: %d camera models", len(self._index))

    @property
    def size(self) -> int:
        return len(self._index)

    def resolve_with_confidence(self, camera_model: str) -> AccessoryResolution:
        """Exact -> base model -> series sibling, reporting which step answered."""
        hit = self._index.resolve(camera_model)
        if hit is None:
            return AccessoryResolution()
        if hit.step == "series":
            return AccessoryResolution(
                entry=hit.value,
                confidence="series-fallback",
                step=hit.step,
                matched_key=hit.key,
                warning=f"No exact match for {camera_model.strip()}. Using {hit.key} series data.",
            )
        return AccessoryResolution(entry=hit.value, confidence="exact", step=hit.step, matched_key=hit.key)

    def get_compatible(self, camera_model: str) -> list[AccessoryCompatEntry]:
        hit = self._index.resolve(camera_model)
        return list(hit.value.accessories) if hit else []

    def get_by_type(self, camera_model: str, accessory_type: str) -> list[AccessoryCompatEntry]:
        return [a for a in self.get_compatible(camera_model) if a.accessory_type == accessory_type]

    def get_recommended(self, camera_model: str) -> list[AccessoryCompatEntry]:
        return [a for a in self.get_compatible(camera_model) if a.recommendation == "recommended"]

    def get_mounts_by_placement(self, camera_model: str, placement: PlacementType) -> list[AccessoryCompatEntry]:
        return [
            a
            for a in self.get_compatible(camera_model)
            if a.accessory_type == "mount" and a.mount_placement == placement
        ]

    def resolve_mount_pair(self, camera_model: str, placement: PlacementType) -> AccessoryCompatEntry | None:
        ranked = rank_mounts(self.get_mounts_by_placement(camera_model, placement))
        return ranked[0] if ranked else None

    def has_compatibility(self, camera_model: str) -> bool:
        return self._index.resolve(camera_model) is not None
