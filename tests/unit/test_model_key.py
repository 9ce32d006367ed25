"""core.model_key unit tests: normalization, base model derivation, series prefix."""

from __future__ import annotations

import pytest

from core.model_key import (
    MODEL_VARIANT_SUFFIXES,
    extract_series_prefix,
    get_base_model_key,
    normalize_model_key,
)

SAMPLES = [
    "",
    "   ",
    "p3265-lve",
    "AXIS P3265-LVE",
    "axis  q6135 le",
    "AXIS AXIS M3085-V",
    "Axis-P1465-LE",
    "P3265-LVE-60HZ-EUR",
    "P1465-LE-8MM",
    "M2036-LE-M12-BULK",
    "Q6135-LE-24V-",
    "DS-2CD2143G2-I",
]


class TestNormalizeModelKey:
    def test_uppercase_and_trim(self) -> None:
        assert normalize_model_key("  p3265-lve ") == "P3265-LVE"

    def test_strips_axis_prefix(self) -> None:
        assert normalize_model_key("AXIS P3265-LVE") == "P3265-LVE"
        assert normalize_model_key("axis p3265-lve") == "P3265-LVE"
        assert normalize_model_key("AXIS-P1465-LE") == "P1465-LE"

    def test_repeated_axis_prefix(self) -> None:
        assert normalize_model_key("AXIS AXIS M3085-V") == "M3085-V"

    def test_whitespace_becomes_hyphen(self) -> None:
        assert normalize_model_key("q6135  le") == "Q6135-LE"

    def test_empty(self) -> None:
        assert normalize_model_key("") == ""
        assert normalize_model_key("   ") == ""

    def test_competitor_model_unchanged_apart_from_case(self) -> None:
        assert normalize_model_key("ds-2cd2143g2-i") == "DS-2CD2143G2-I"

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_idempotent(self, raw: str) -> None:
        once = normalize_model_key(raw)
        assert normalize_model_key(once) == once


class TestGetBaseModelKey:
    def test_stacked_suffixes(self) -> None:
        assert get_base_model_key("P3265-LVE-60HZ-EUR") == "P3265-LVE"

    def test_single_suffixes(self) -> None:
        for suffix in MODEL_VARIANT_SUFFIXES:
            assert get_base_model_key(f"P3265-LVE{suffix}") == "P3265-LVE"

    def test_lens_size(self) -> None:
        assert get_base_model_key("P1465-LE-8MM") == "P1465-LE"
        assert get_base_model_key("P1465-LE-12MM-EUR") == "P1465-LE"

    def test_trailing_hyphens(self) -> None:
        assert get_base_model_key("Q6135-LE-24V-") == "Q6135-LE"

    def test_plain_key_unchanged(self) -> None:
        assert get_base_model_key("axis m3085-v") == "M3085-V"

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_idempotent_and_never_longer(self, raw: str) -> None:
        base = get_base_model_key(raw)
        assert get_base_model_key(base) == base
        assert normalize_model_key(raw).startswith(base)


class TestExtractSeriesPrefix:
    def test_prefixes(self) -> None:
        assert extract_series_prefix("P3285-LVE") == "P32"
        assert extract_series_prefix("axis m4215-lv") == "M42"
        assert extract_series_prefix("FA1105") == "FA11"

    def test_no_prefix(self) -> None:
        assert extract_series_prefix("") is None
        assert extract_series_prefix("LENS") is None
        assert extract_series_prefix("P1") is None
