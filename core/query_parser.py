"""
Query classification and batch input parsing.

Rules are checked in a fixed order and the first one that applies wins:
manufacturer -> axis-model -> legacy -> axis-browse -> competitor.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from domain.catalog import QueryType
from models.schemas import BatchParseResult, ParsedQuery, ValidationResult

from .manufacturers import MANUFACTURER_ALIASES, MANUFACTURERS, canonical_manufacturer
from .model_key import get_base_model_key, normalize_model_key
from .utils.similarity import THRESHOLD_EXACT, similarity

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_QUERY_LENGTH = 100
MAX_BATCH_SIZE = 200
FUZZY_MANUFACTURER_MIN_LENGTH = 5

AXIS_MODEL_PATTERN = re.compile(r"^(?:AXIS[\s-]*)?[PMQFTVWDCA]\d{4}", re.IGNORECASE)
BROWSE_TOKENS = frozenset({"", "*", "axis", "axis communications", "all"})

_BATCH_DELIMITERS = re.compile(r"[\r\n,;\t]+")
_WHITESPACE = re.compile(r"\s+")
_DIGIT = re.compile(r"\d")

# longest first so "hanwha vision ..." is not read as "hanwha"
_MANUFACTURERS_BY_LENGTH = tuple(sorted(MANUFACTURERS, key=lambda m: (-len(m), m)))


def _fold(query: str) -> str:
    return _WHITESPACE.sub(" ", query.strip().lower())


def find_manufacturer(query: str) -> str | None:
    """
    Canonical manufacturer named by the query, or None.
    Matches an exact name or alias, a name followed by words without digits
    ("hikvision cameras"), or a digit-free name typed with a small typo.
    A name followed by a model number ("Hikvision DS-2CD2143G2-I") is a model query.
    """
    q = _fold(query)
    if not q:
        return None
    if q in MANUFACTURER_ALIASES or q in MANUFACTURERS:
        return canonical_manufacturer(q)

    for name in _MANUFACTURERS_BY_LENGTH:
        if q.startswith(name + " "):
            remainder = q[len(name):].strip()
            if _DIGIT.search(remainder):
                return None
            return canonical_manufacturer(name)

    if _DIGIT.search(q) or len(q) < FUZZY_MANUFACTURER_MIN_LENGTH:
        return None
    best_name, best_score = None, 0
    for name in MANUFACTURERS:
        score = similarity(q, name)
        if score > best_score:
            best_name, best_score = name, score
    if best_name is not None and best_score >= THRESHOLD_EXACT:
        return canonical_manufacturer(best_name)
    return None


def looks_like_axis_model(query: str) -> bool:
    """P3265, Q6135-LE, AXIS M3085-V: a catalog letter followed by four digits."""
    return bool(AXIS_MODEL_PATTERN.match(query.strip()))


def is_browse_query(query: str) -> bool:
    return _fold(query) in BROWSE_TOKENS


class QueryParser:
    """Classifies queries; knows the legacy model keys so it can tell legacy from current Axis models."""

    def __init__(self, legacy_models: Iterable[str] = ()) -> None:
        keys = {normalize_model_key(m) for m in legacy_models}
        keys.discard("")
        self.legacy_keys = frozenset(keys)

    def is_legacy(self, query: str) -> bool:
        key = normalize_model_key(query)
        if not key:
            return False
        return key in self.legacy_keys or get_base_model_key(key) in self.legacy_keys

    def classify(self, query: str) -> QueryType:
        return self.parse(query).query_type

    def parse(self, query: str) -> ParsedQuery:
        collapsed = _WHITESPACE.sub(" ", query.strip())
        normalized = collapsed.upper()
        is_empty = not collapsed

        manufacturer = find_manufacturer(collapsed)
        if manufacturer:
            return ParsedQuery(raw=query, normalized=normalized, query_type="manufacturer", manufacturer=manufacturer)

        legacy = self.is_legacy(collapsed)
        if looks_like_axis_model(collapsed) and not legacy:
            return ParsedQuery(raw=query, normalized=normalize_model_key(collapsed), query_type="axis-model")
        if legacy:
            return ParsedQuery(raw=query, normalized=normalize_model_key(collapsed), query_type="legacy")
        if is_browse_query(collapsed):
            return ParsedQuery(raw=query, normalized=normalized, query_type="axis-browse", is_empty=is_empty)
        return ParsedQuery(raw=query, normalized=normalized, query_type="competitor")


def parse_query(query: str, legacy_models: Iterable[str] = ()) -> ParsedQuery:
    """One-off parse; build a QueryParser once when classifying many queries."""
    return QueryParser(legacy_models).parse(query)


def validate_query(query: str) -> ValidationResult:
    """Minimum-length gate for interactive input. Empty is valid (shows the default view)."""
    trimmed = query.strip()
    if not trimmed:
        return ValidationResult(valid=True)
    if len(trimmed) < MIN_QUERY_LENGTH:
        return ValidationResult(valid=False, reason=f"Query must be at least {MIN_QUERY_LENGTH} characters")
    if len(trimmed) > MAX_QUERY_LENGTH:
        return ValidationResult(valid=False, reason=f"Query cannot exceed {MAX_QUERY_LENGTH} characters")
    return ValidationResult(valid=True)


def parse_batch(text: str, max_size: int = MAX_BATCH_SIZE) -> BatchParseResult:
    """
    Split pasted text on newlines, commas, semicolons and tabs; trim; drop empties.
    Keeps duplicates and input order. Anything past max_size is dropped and reported.
    """
    items = [part.strip() for part in _BATCH_DELIMITERS.split(text)]
    items = [item for item in items if item]
    total = len(items)
    if total > max_size:
        logger.warning("Batch input truncated: %d queries, keeping the first %d", total, max_size)
        return BatchParseResult(items=items[:max_size], total=total, truncated=True, dropped=total - max_size)
    return BatchParseResult(items=items, total=total)


def parse_batch_input(text: str, max_size: int = MAX_BATCH_SIZE) -> list[str]:
    return parse_batch(text, max_size).items


def validate_batch(queries: Sequence[str], max_size: int = MAX_BATCH_SIZE) -> ValidationResult:
    """Structural check only; duplicates are allowed."""
    if not any(q.strip() for q in queries):
        return ValidationResult(valid=False, reason="No valid items found")
    if len(queries) > max_size:
        return ValidationResult(valid=False, reason=f"Batch cannot exceed {max_size} items")
    return ValidationResult(valid=True)
