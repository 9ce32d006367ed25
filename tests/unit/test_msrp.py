"""MSRP lookup and price formatting."""

from __future__ import annotations

import pytest

from core.errors import DatasetError
from core.loaders import parse_msrp
from core.msrp import MSRPLookup, format_price


class TestFormatPrice:
    def test_thousands(self) -> None:
        assert format_price(1299) == "$1,299"
        assert format_price(129) == "$129"
        assert format_price(0) == "$0"

    def test_rounds_half_up(self) -> None:
        assert format_price(3499.5) == "$3,500"
        assert format_price(12.49) == "$12"

    def test_unknown(self) -> None:
        assert format_price(None) == "TBD"


class TestMSRPLookup:
    def test_size_skips_unpriced(self, msrp: MSRPLookup) -> None:
        # M2036-LE has no price, BROKEN was rejected at load time
        assert msrp.size == 4
        assert not msrp.has_price("M2036-LE")
        assert not msrp.has_price("BROKEN")

    def test_direct(self, msrp: MSRPLookup) -> None:
        r = msrp.lookup("axis p3285-lve")
        assert r.match_type == "direct"
        assert r.price == 1299
        assert r.formatted == "$1,299"
        assert r.matched_model == "P3285-LVE"

    def test_base_model(self, msrp: MSRPLookup) -> None:
        r = msrp.lookup("P3265-LVE-EUR")
        assert r.match_type == "base-model"
        assert r.price == 899
        assert r.matched_model == "P3265-LVE"

    def test_never_series(self, msrp: MSRPLookup) -> None:
        r = msrp.lookup("P3268-LVE")
        assert r.match_type == "not-found"
        assert r.price is None
        assert r.formatted == "TBD"

    def test_description(self, msrp: MSRPLookup) -> None:
        assert msrp.get_description("T91B47") == "AXIS T91B47 Pole Mount"
        assert msrp.get_description("X0000") == ""

    def test_calculate_total(self, msrp: MSRPLookup) -> None:
        total, unknown = msrp.calculate_total([("P3265-LVE", 2), ("T91B47", 1), ("M2036-LE", 3)])
        assert total == pytest.approx(1927.0)
        assert unknown == 3

    def test_calculate_total_empty(self, msrp: MSRPLookup) -> None:
        assert msrp.calculate_total([]) == (0.0, 0)


class TestParseMsrp:
    def test_flat_model_lookup_form(self) -> None:
        entries = parse_msrp({"model_lookup": {"P3265-LVE": 899, "X1": "call us", "X2": None}})
        assert list(entries) == ["P3265-LVE"]
        assert entries["P3265-LVE"].msrp == 899

    def test_negative_price_skipped(self) -> None:
        assert parse_msrp({"A": {"msrp": -1}}) == {}

    def test_bad_top_level(self) -> None:
        with pytest.raises(DatasetError):
            parse_msrp([])
        with pytest.raises(DatasetError):
            parse_msrp({"model_lookup": [1, 2]})
