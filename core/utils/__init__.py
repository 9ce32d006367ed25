"""Shared helpers: Excel I/O, string similarity, dictation cleanup."""

from .excel_io import cell_value, open_excel_read, write_sheet
from .similarity import (
    THRESHOLD_EXACT,
    THRESHOLD_PARTIAL,
    THRESHOLD_SIMILAR,
    MatchScore,
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
from .voice import normalize_voice

__all__ = [
    "cell_value",
    "open_excel_read",
    "write_sheet",
    "THRESHOLD_EXACT",
    "THRESHOLD_PARTIAL",
    "THRESHOLD_SIMILAR",
    "MatchScore",
    "classify_tier",
    "is_valid_match",
    "levenshtein_distance",
    "normalize_display",
    "normalize_strict",
    "score_match",
    "similarity",
    "sort_by_score",
    "tokenize",
    "word_overlap",
    "normalize_voice",
]
