"""
String similarity for model matching: normalized Levenshtein score (0-100) and tiering.

Pure functions, no index state; the search engine and the query parser both build on them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar

from rapidfuzz.distance import Levenshtein

from domain.catalog import MatchTier

THRESHOLD_EXACT = 90
THRESHOLD_PARTIAL = 70
THRESHOLD_SIMILAR = 50

TIER_PRIORITY: dict[str, int] = {"exact": 0, "partial": 1, "similar": 2, "none": 3}

_NON_ALNUM = re.compile(r"[^A-Z0-9]")
_TOKEN_SPLIT = re.compile(r"[\s\-_./]+")

T = TypeVar("T")


def normalize_strict(text: str) -> str:
    """Comparison form: uppercase, every non-alphanumeric removed. "DS-2CD2143G2-I" -> "DS2CD2143G2I"."""
    return _NON_ALNUM.sub("", text.upper())


def normalize_display(text: str) -> str:
    """Display form: uppercase, AXIS prefix dropped, whitespace collapsed to single spaces."""
    s = re.sub(r"\s+", " ", text.upper()).strip()
    return re.sub(r"^AXIS\s+", "", s)


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or substitutions."""
    return int(Levenshtein.distance(a, b))


def similarity(a: str, b: str) -> int:
    """
    Integer similarity in [0, 100]: 100 * (1 - distance / max(len)), rounded half up, floored at 0.
    Both sides are compared in normalize_strict form; equal forms always give 100.
    """
    norm_a, norm_b = normalize_strict(a), normalize_strict(b)
    if norm_a == norm_b:
        return 100
    if not norm_a or not norm_b:
        return 0
    distance = levenshtein_distance(norm_a, norm_b)
    ratio = 1.0 - distance / max(len(norm_a), len(norm_b))
    return max(0, int(math.floor(ratio * 100 + 0.5)))


def classify_tier(score: int) -> MatchTier:
    """exact >= 90, partial >= 70, similar >= 50, otherwise none."""
    if score >= THRESHOLD_EXACT:
        return "exact"
    if score >= THRESHOLD_PARTIAL:
        return "partial"
    if score >= THRESHOLD_SIMILAR:
        return "similar"
    return "none"


@dataclass(frozen=True)
class MatchScore:
    score: int
    tier: MatchTier
    is_substring: bool


def score_match(query: str, target: str) -> MatchScore:
    """
    Score query against target. Substring containment lifts the score to
    70 + 20 * coverage so typed prefixes ("DS-2CD2143") rank as partial or better.
    """
    norm_query, norm_target = normalize_strict(query), normalize_strict(target)
    if norm_query == norm_target:
        return MatchScore(score=100, tier="exact", is_substring=False)

    is_substring = bool(norm_query and norm_target) and (
        norm_query in norm_target or norm_target in norm_query
    )
    score = similarity(query, target)
    if is_substring:
        coverage = min(len(norm_query), len(norm_target)) / max(len(norm_query), len(norm_target))
        score = max(score, int(math.floor(THRESHOLD_PARTIAL + coverage * 20 + 0.5)))
    return MatchScore(score=score, tier=classify_tier(score), is_substring=is_substring)


def is_valid_match(match: MatchScore) -> bool:
    return match.tier != "none"


def sort_by_score(items: Iterable[T], *, score: Callable[[T], int], tier: Callable[[T], str], key: Callable[[T], str]) -> list[T]:
    """Score descending, then tier priority, then key ascending; stable across reruns."""
    return sorted(items, key=lambda it: (-score(it), TIER_PRIORITY.get(tier(it), 3), key(it)))


def tokenize(text: str) -> list[str]:
    return [t for t in _TOKEN_SPLIT.split(text.upper()) if t]


def word_overlap(a: str, b: str) -> float:
    """Share of distinct tokens in common, relative to the larger token set. "Hanwha Vision" vs "Hanwha" -> 0.5."""
    tokens_a, tokens_b = set(tokenize(a)), set(tokenize(b))
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / max(len(tokens_a), len(tokens_b))
