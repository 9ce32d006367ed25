"""core.accessory.lookup unit tests: cascade and mount ranking."""

from __future__ import annotations

from core.accessory import (
    FORM_FACTOR_DEFAULTS,
    AccessoryLookup,
    get_form_factor_defaults,
    rank_mounts,
)
from core.interfaces import AccessoryLookupProtocol
from domain.catalog import AccessoryCompatEntry


def test_size_and_protocol(accessories: AccessoryLookup) -> None:
    assert accessories.size == 2
    assert isinstance(accessories, AccessoryLookupProtocol)


class TestResolveWithConfidence:
    def test_exact(self, accessories: AccessoryLookup) -> None:
        r = accessories.resolve_with_confidence("P3285-LVE")
        assert r.confidence == "exact"
        assert r.entry is not None
        assert r.warning is None

    def test_base_model(self, accessories: AccessoryLookup) -> None:
        r = accessories.resolve_with_confidence("P3285-LVE-BULK")
        assert r.confidence == "exact"
        assert r.step == "base-model"

    def test_series_fallback(self, accessories: AccessoryLookup) -> None:
        r = accessories.resolve_with_confidence("P3288-LVE")
        assert r.confidence == "series-fallback"
        assert r.entry is not None
        assert r.entry.product_variant == "P3285-LVE"
        assert r.warning
        assert "P3285-LVE" in r.warning

    def test_none(self, accessories: AccessoryLookup) -> None:
        r = accessories.resolve_with_confidence("Q6135-LE")
        assert r.entry is None
        assert r.confidence == "none"
        assert not accessories.has_compatibility("Q6135-LE")


class TestQueries:
    def test_get_compatible(self, accessories: AccessoryLookup) -> None:
        assert len(accessories.get_compatible("axis p3285-lve")) == 7
        assert accessories.get_compatible("Q6135-LE") == []

    def test_get_by_type(self, accessories: AccessoryLookup) -> None:
        assert [a.model_key for a in accessories.get_by_type("P3285-LVE", "power")] == ["T8120"]

    def test_get_recommended(self, accessories: AccessoryLookup) -> None:
        assert [a.model_key for a in accessories.get_recommended("P3285-LVE")] == ["T91B47", "T91H61", "T8120"]

    def test_mounts_by_placement(self, accessories: AccessoryLookup) -> None:
        pole = accessories.get_mounts_by_placement("P3285-LVE", "pole")
        assert {a.model_key for a in pole} == {"T91B47", "T94N01G"}
        assert accessories.get_mounts_by_placement("P3285-LVE", "corner") == []


class TestResolveMountPair:
    def test_tier_beats_requires_additional(self, accessories: AccessoryLookup) -> None:
        mount = accessories.resolve_mount_pair("P3285-LVE", "pole")
        assert mount is not None
        assert mount.model_key == "T91B47"
        assert mount.recommendation == "recommended"
        assert mount.requires_additional

    def test_included_beats_compatible(self, accessories: AccessoryLookup) -> None:
        mount = accessories.resolve_mount_pair("P3285-LVE", "ceiling")
        assert mount is not None
        assert mount.model_key == "T91B50"

    def test_recessed(self, accessories: AccessoryLookup) -> None:
        mount = accessories.resolve_mount_pair("M4215-LV", "recessed")
        assert mount is not None
        assert mount.model_key == "T94C01L"

    def test_no_mount(self, accessories: AccessoryLookup) -> None:
        assert accessories.resolve_mount_pair("P3285-LVE", "parapet") is None
        assert accessories.resolve_mount_pair("Q6135-LE", "pole") is None


def test_rank_mounts_prefers_simplest_within_tier() -> None:
    a = AccessoryCompatEntry(model_key="A", mount_placement="wall", recommendation="compatible", requires_additional=True)
    b = AccessoryCompatEntry(model_key="B", mount_placement="wall", recommendation="compatible", requires_additional=False)
    c = AccessoryCompatEntry(model_key="C", mount_placement="wall", recommendation="included", requires_additional=True)
    assert [m.model_key for m in rank_mounts([a, b, c])] == ["C", "B", "A"]


def test_form_factor_defaults() -> None:
    assert get_form_factor_defaults("ptz") == ["pole", "parapet", "wall"]
    assert get_form_factor_defaults("unknown") == []
    assert get_form_factor_defaults(None) == []
    assert set(FORM_FACTOR_DEFAULTS) == {"fixed-dome", "fixed-bullet", "ptz", "panoramic", "modular"}
