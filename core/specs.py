"""
Axis product spec lookup.

lookup_spec() answers from exact or base-model keys only; resolve_with_confidence()
additionally falls back to a series sibling and says so in its warning.
"""

from __future__ import annotations

import logging

from domain.catalog import AxisProductSpec, AxisSpecDatabase
from models.schemas import SpecResolution

from .cascade import ModelIndex

logger = logging.getLogger(__name__)


class SpecLookup:
    def __init__(self, database: AxisSpecDatabase) -> None:
        self._index: ModelIndex[AxisProductSpec] = ModelIndex(database.products, name="specs")
        self.version = database.version
        logger.info("Spec index built: %d products", len(self._index))

    @property
    def size(self) -> int:
        return len(self._index)

    def lookup_spec(self, model: str) -> AxisProductSpec | None:
        hit = self._index.lookup(model)
        return hit.value if hit else None

    def has_spec(self, model: str) -> bool:
        return self._index.lookup(model) is not None

    def resolve_with_confidence(self, model: str) -> SpecResolution:
        hit = self._index.resolve(model)
        if hit is None:
            return SpecResolution()
        if hit.step == "series":
            return SpecResolution(
                spec=hit.value,
                confidence="series-fallback",
                step=hit.step,
                matched_key=hit.key,
                warning=f"No exact match for {model.strip()}. Using {hit.key} series data.",
            )
        return SpecResolution(spec=hit.value, confidence="exact", step=hit.step, matched_key=hit.key)

    def get_by_type(self, product_type: str) -> list[AxisProductSpec]:
        return [spec for _, spec in self._index.items() if spec.product_type == product_type]

    def get_by_camera_type(self, camera_type: str) -> list[AxisProductSpec]:
        return [spec for _, spec in self._index.items() if spec.camera_type == camera_type]

    def all_specs(self) -> list[AxisProductSpec]:
        return [spec for _, spec in self._index.items()]
