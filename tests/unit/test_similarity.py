"""core.utils.similarity unit tests (pure functions)."""

from __future__ import annotations

import pytest

from core.utils.similarity import (
    THRESHOLD_EXACT,
    THRESHOLD_PARTIAL,
    THRESHOLD_SIMILAR,
    classify_tier,
    is_valid_match,
    levenshtein_distance,
    normalize_display,
    normalize_strict,
    score_match,
    similarity,
    sort_by_score,
    tokenize,
    word_overlap,
)


def test_thresholds() -> None:
    assert (THRESHOLD_EXACT, THRESHOLD_PARTIAL, THRESHOLD_SIMILAR) == (90, 70, 50)


def test_normalize_strict() -> None:
    assert normalize_strict("DS-2CD2143G2-I") == "DS2CD2143G2I"
    assert normalize_strict(" axis p3265 lve ") == "AXISP3265LVE"


def test_normalize_display() -> None:
    assert normalize_display("axis   p3265-lve ") == "P3265-LVE"


def test_levenshtein_distance() -> None:
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3


class TestSimilarity:
    def test_identical(self) -> None:
        assert similarity("P3265-LVE", "P3265-LVE") == 100

    def test_case_and_separators_ignored(self) -> None:
        assert similarity("ds-2cd2143g2-i", "DS 2CD2143G2 I") == 100

    def test_empty(self) -> None:
        assert similarity("", "P3265") == 0
        assert similarity("P3265", "") == 0

    def test_one_edit(self) -> None:
        # 1 substitution over 10 characters
        assert similarity("ABCDEFGHIJ", "ABCDEFGHIX") == 90

    def test_disjoint_is_zero(self) -> None:
        assert similarity("AAAA", "BBBB") == 0

    @pytest.mark.parametrize(
        "a,b",
        [("P3265-LVE", "P3268-LVE"), ("DS-2CD2143G2-I", "DS-2CD2387G2-LU"), ("Q6135", "M3085-V")],
    )
    def test_symmetric_and_bounded(self, a: str, b: str) -> None:
        s = similarity(a, b)
        assert s == similarity(b, a)
        assert 0 <= s <= 100


class TestClassifyTier:
    @pytest.mark.parametrize(
        "score,tier",
        [(100, "exact"), (90, "exact"), (89, "partial"), (70, "partial"), (69, "similar"), (50, "similar"), (49, "none"), (0, "none")],
    )
    def test_boundaries(self, score: int, tier: str) -> None:
        assert classify_tier(score) == tier


class TestScoreMatch:
    def test_exact(self) -> None:
        m = score_match("ds-2cd2143g2-i", "DS-2CD2143G2-I")
        assert m.score == 100
        assert m.tier == "exact"
        assert not m.is_substring

    def test_substring_boost(self) -> None:
        # DS2CD2143 is 9 of 12 characters: 70 + 20 * 0.75 = 85
        m = score_match("DS-2CD2143", "DS-2CD2143G2-I")
        assert m.is_substring
        assert m.score == 85
        assert m.tier == "partial"

    def test_no_match(self) -> None:
        m = score_match("XYZ", "P3265-LVE")
        assert m.tier == "none"
        assert not is_valid_match(m)


def test_sort_by_score_tie_break_on_key() -> None:
    items = [("B", 80, "partial"), ("A", 80, "partial"), ("C", 95, "exact")]
    ranked = sort_by_score(items, score=lambda i: i[1], tier=lambda i: i[2], key=lambda i: i[0])
    assert [i[0] for i in ranked] == ["C", "A", "B"]


def test_tokenize_and_word_overlap() -> None:
    assert tokenize("Hanwha Vision-XNV_8080R") == ["HANWHA", "VISION", "XNV", "8080R"]
    assert word_overlap("Hanwha Vision", "Hanwha") == 0.5
    assert word_overlap("", "Hanwha") == 0.0
