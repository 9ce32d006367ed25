"""Capability interfaces for the lookups, so another backing store can replace the bundled JSON."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from domain.catalog import AccessoryCompatEntry, AxisProductSpec, PlacementType
from models.schemas import AccessoryResolution, MSRPResult, ResolvedURL, SpecResolution


@runtime_checkable
class URLResolving(Protocol):
    def resolve(self, model: str) -> ResolvedURL: ...

    def is_discontinued(self, model: str) -> bool: ...

    def get_replacement(self, model: str) -> str | None: ...


@runtime_checkable
class SpecLookupProtocol(Protocol):
    def lookup_spec(self, model: str) -> AxisProductSpec | None: ...

    def resolve_with_confidence(self, model: str) -> SpecResolution: ...

    def has_spec(self, model: str) -> bool: ...


@runtime_checkable
class AccessoryLookupProtocol(Protocol):
    def get_compatible(self, camera_model: str) -> list[AccessoryCompatEntry]: ...

    def get_mounts_by_placement(self, camera_model: str, placement: PlacementType) -> list[AccessoryCompatEntry]: ...

    def resolve_mount_pair(self, camera_model: str, placement: PlacementType) -> AccessoryCompatEntry | None: ...

    def resolve_with_confidence(self, camera_model: str) -> AccessoryResolution: ...

    def has_compatibility(self, camera_model: str) -> bool: ...


@runtime_checkable
class PriceLookup(Protocol):
    def lookup(self, model: str) -> MSRPResult: ...

    def get_price(self, model: str) -> float | None: ...
