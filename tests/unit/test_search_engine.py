"""SearchEngine over the fixture cross-reference data."""

from __future__ import annotations

from unittest.mock import patch

from core.search_engine import SearchEngine, infer_form_factor, infer_resolution, memo_key, rollup_confidence
from domain.catalog import CrossRefData


class TestCompetitorSearch:
    def test_exact_competitor_model(self, engine: SearchEngine) -> None:
        response = engine.search("DS-2CD2143G2-I")
        assert response.query_type == "competitor"
        assert response.confidence == "high"
        assert len(response.grouped.exact) == 1
        best = response.best
        assert best is not None
        assert best.score == 100
        assert best.tier == "exact"
        assert best.axis_model == "P3265-LVE"
        assert best.category == "ndaa"
        assert best.url_confidence == "verified"
        assert response.suggestions == []

    def test_case_and_punctuation_insensitive(self, engine: SearchEngine) -> None:
        best = engine.search("ds 2cd2143g2 i").best
        assert best is not None
        assert best.source_model == "DS-2CD2143G2-I"
        assert best.score == 100

    def test_typed_prefix_is_partial(self, engine: SearchEngine) -> None:
        response = engine.search("DS-2CD2143")
        assert response.confidence == "medium"
        best = response.best
        assert best is not None
        assert best.source_model == "DS-2CD2143G2-I"
        assert best.tier == "partial"
        assert best.score == 85

    def test_no_match_offers_suggestions(self, engine: SearchEngine) -> None:
        response = engine.search("XNV-1234")
        assert response.results == []
        assert response.confidence == "none"
        assert response.suggestions[0] == "XNV-8080R"
        assert len(response.suggestions) <= 3

    def test_fuzzy_disabled(self, engine: SearchEngine) -> None:
        engine.configure(fuzzy_enabled=False)
        response = engine.search("DS-2CD2143G2-I")
        assert [r.source_model for r in response.results] == ["DS-2CD2143G2-I"]
        assert engine.search("DS-2CD2143").results == []


class TestOtherQueryTypes:
    def test_manufacturer_is_unscored(self, engine: SearchEngine) -> None:
        response = engine.search("Hikvision")
        assert response.query_type == "manufacturer"
        assert response.manufacturer == "Hikvision"
        assert [r.source_model for r in response.results] == [
            "DS-2CD2143G2-I",
            "DS-2CD2387G2-LU",
            "DS-2DE4425IW-DE",
        ]
        assert all(r.score is None and r.tier == "exact" for r in response.results)

    def test_manufacturer_alias(self, engine: SearchEngine) -> None:
        assert engine.search("hik").total == 3

    def test_short_manufacturer_name_covers_dataset_spelling(self, engine: SearchEngine) -> None:
        short = engine.search("hanwha")
        full = engine.search("Hanwha Vision")
        assert short.query_type == "manufacturer"
        assert [r.source_model for r in short.results] == ["XNV-8080R"]
        assert [r.source_model for r in short.results] == [r.source_model for r in full.results]
        assert short.confidence == "high"

    def test_manufacturer_without_mappings(self, engine: SearchEngine) -> None:
        assert engine.get_manufacturer_models("arecont") == []
        assert engine.get_manufacturer_models("hanwha techwin") == []

    def test_axis_model_reverse_lookup(self, engine: SearchEngine) -> None:
        response = engine.search("AXIS P3265-LVE")
        assert response.query_type == "axis-model"
        assert [r.source_model for r in response.results] == [
            "DS-2CD2143G2-I",
            "IPC-HDW3849H-AS-PV",
            "P3364-LVE",
        ]
        assert all(r.score == 100 for r in response.results)
        assert response.results[2].is_legacy

    def test_legacy(self, engine: SearchEngine) -> None:
        response = engine.search("P3364-LVE")
        assert response.query_type == "legacy"
        best = response.best
        assert best is not None
        assert best.axis_model == "P3265-LVE"
        assert best.is_legacy
        assert best.category == "legacy-axis"

    def test_legacy_variant(self, engine: SearchEngine) -> None:
        best = engine.search("P3364-LVE-EUR").best
        assert best is not None
        assert best.tier == "exact"
        assert best.source_model == "P3364-LVE"

    def test_browse(self, engine: SearchEngine) -> None:
        response = engine.search("axis")
        assert response.is_browse
        assert response.results == []
        assert engine.search("   ").is_browse

    def test_max_results(self, engine: SearchEngine) -> None:
        engine.configure(max_results=1)
        assert engine.search("P3265-LVE").total == 1


class TestSearchBatch:
    def test_memoizes_normalized_queries(self, engine: SearchEngine) -> None:
        with patch.object(engine, "search", wraps=engine.search) as spy:
            responses = engine.search_batch(["CD52-E", "cd52-e", " CD52-E "])
        assert spy.call_count == 1
        assert responses["CD52-E"] is responses["cd52-e"] is responses[" CD52-E "]
        assert responses["CD52-E"].is_batch

    def test_shared_memo(self, engine: SearchEngine) -> None:
        memo: dict = {}
        engine.search_batch(["XNV-8080R"], memo)
        with patch.object(engine, "search", wraps=engine.search) as spy:
            engine.search_batch(["xnv-8080r"], memo)
        assert spy.call_count == 0

    def test_memo_key(self) -> None:
        assert memo_key("  DS-2CD  2143 ") == "ds-2cd 2143"


class TestLookups:
    def test_lookup_axis_model(self, engine: SearchEngine) -> None:
        info = engine.lookup_axis_model("p3265-lve")
        assert info is not None
        assert info.model == "P3265-LVE"
        assert info.series == "P"
        assert info.features == ["Lightfinder 2.0", "Forensic WDR", "Edge storage"]
        assert info.msrp == 899
        assert info.is_discontinued
        assert info.replaced_by == "P3275-LVE"
        assert info.replaces == ["DS-2CD2143G2-I", "IPC-HDW3849H-AS-PV", "P3364-LVE"]

    def test_lookup_axis_model_unknown(self, engine: SearchEngine) -> None:
        assert engine.lookup_axis_model("P9999-LE") is None

    def test_get_manufacturer_models(self, engine: SearchEngine) -> None:
        assert len(engine.get_manufacturer_models("HIKVISION")) == 3
        assert len(engine.get_manufacturer_models("hik")) == 3
        assert [m.competitor_model for m in engine.get_manufacturer_models("wisenet")] == ["XNV-8080R"]
        assert engine.get_manufacturer_models("") == []

    def test_get_suggestions(self, engine: SearchEngine) -> None:
        assert engine.get_suggestions("X") == []
        assert "XNV-8080R" not in engine.get_suggestions("XNV-8080", exclude=["XNV-8080R"])
        engine.configure(max_suggestions=1)
        assert engine.get_suggestions("XNV-8080") == ["XNV-8080R"]


def test_empty_dataset() -> None:
    engine = SearchEngine(CrossRefData())
    response = engine.search("DS-2CD2143G2-I")
    assert response.results == []
    assert response.confidence == "none"
    assert response.suggestions == []


def test_infer_helpers() -> None:
    assert infer_form_factor("M2036-LE") == "bullet"
    assert infer_form_factor("Q6135-LE") == "ptz"
    assert infer_form_factor("P3265-LVE") == "fixed-dome"
    assert infer_form_factor("F2105-RE") == "box"
    assert infer_resolution("P1385-E 4K") == "4K"
    assert infer_resolution("P3265-LVE") == "1080p"
    assert rollup_confidence([]) == "none"
