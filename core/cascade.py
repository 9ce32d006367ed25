"""
Shared model-key index behind every lookup: exact -> base model -> series prefix.

URL, spec, accessory and MSRP lookups all wrap a ModelIndex and add their own
last step (alias table, series warning, nothing) on top of resolve().
"""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from typing import Generic, Iterator, Mapping, TypeVar

from domain.catalog import CascadeStep

from .model_key import extract_series_prefix, get_base_model_key, normalize_model_key

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class CascadeHit(Generic[V]):
    value: V
    key: str
    step: CascadeStep


class ModelIndex(Generic[V]):
    """Read-only map keyed by ModelKey. Replace the whole index to reload; never mutate it."""

    def __init__(self, items: Mapping[str, V], *, name: str = "index") -> None:
        self.name = name
        data: dict[str, V] = {}
        for raw_key, value in items.items():
            key = normalize_model_key(raw_key)
            if not key:
                continue
            if key in data:
                logger.debug("%s: duplicate key %s after normalization, keeping the first", name, key)
                continue
            data[key] = value
        self._data = data
        self._sorted_keys = sorted(data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, model: object) -> bool:
        return isinstance(model, str) and normalize_model_key(model) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted_keys)

    def keys(self) -> list[str]:
        return list(self._sorted_keys)

    def items(self) -> list[tuple[str, V]]:
        return [(k, self._data[k]) for k in self._sorted_keys]

    def get(self, model: str) -> V | None:
        """Exact ModelKey match only."""
        return self._data.get(normalize_model_key(model))

    def lookup(self, model: str) -> CascadeHit[V] | None:
        """Exact, then base model. Never guesses."""
        key = normalize_model_key(model)
        if key in self._data:
            return CascadeHit(self._data[key], key, "exact")
        base = get_base_model_key(key)
        if base != key and base in self._data:
            return CascadeHit(self._data[base], base, "base-model")
        return None

    def first_in_series(self, model: str) -> CascadeHit[V] | None:
        """Lexicographically smallest key sharing the series prefix (P3288-LVE -> first P32*)."""
        prefix = extract_series_prefix(model)
        if not prefix:
            return None
        i = bisect.bisect_left(self._sorted_keys, prefix)
        if i < len(self._sorted_keys) and self._sorted_keys[i].startswith(prefix):
            key = self._sorted_keys[i]
            return CascadeHit(self._data[key], key, "series")
        return None

    def resolve(self, model: str, *, series: bool = True) -> CascadeHit[V] | None:
        """Full cascade. A base-model hit always wins over a series sibling."""
        hit = self.lookup(model)
        if hit is not None or not series:
            return hit
        hit = self.first_in_series(model)
        if hit is not None:
            logger.debug("%s: %s resolved through series sibling %s", self.name, model, hit.key)
        return hit
