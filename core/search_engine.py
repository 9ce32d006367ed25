"""
Search engine over the competitor and legacy cross-reference data.

search() classifies the query and dispatches:
- competitor: exact strict-key hits, then fuzzy scoring; falls back to the legacy index when empty
- legacy: exact / base-model hits on the legacy index, then fuzzy scoring
- axis-model: reverse lookup, every mapping whose replacement is the queried model
- manufacturer: every mapping of that manufacturer, unscored
- axis-browse: no results, is_browse=True
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from typing import Any, Iterable, Sequence

from domain.catalog import CompetitorMapping, Confidence, CrossRefData, LegacyAxisMapping, MatchTier, QueryType
from models.schemas import AxisModelInfo, GroupedResults, SearchConfig, SearchResponse, SearchResult

from .interfaces import PriceLookup, URLResolving
from .manufacturers import canonical_manufacturer, get_category
from .model_key import get_base_model_key, normalize_model_key
from .query_parser import MIN_QUERY_LENGTH, QueryParser
from .utils.similarity import normalize_strict, score_match, similarity, sort_by_score

logger = logging.getLogger(__name__)

AnyMapping = CompetitorMapping | LegacyAxisMapping


def infer_form_factor(model: str) -> str:
    """Form factor from the catalog letter and the first digit: M20xx -> bullet, Q61xx -> ptz."""
    key = normalize_model_key(model)
    series = key[:1]
    if series == "F":
        return "box"
    if series == "T":
        return "specialty"
    if series in ("P", "Q", "M") and len(key) > 1 and key[1].isdigit():
        return {
            "1": "box",
            "2": "bullet",
            "3": "fixed-dome",
            "4": "fixed-dome",
            "5": "ptz",
            "6": "ptz",
            "7": "panoramic",
        }.get(key[1], "fixed-dome")
    return "fixed-dome"


def infer_resolution(model: str) -> str:
    key = normalize_model_key(model)
    if "4K" in key or "8MP" in key:
        return "4K"
    if "5MP" in key:
        return "5MP"
    if "4MP" in key:
        return "4MP"
    return "1080p"


def rollup_confidence(results: Iterable[SearchResult]) -> Confidence:
    tiers = {r.tier for r in results}
    if "exact" in tiers:
        return "high"
    if "partial" in tiers:
        return "medium"
    if "similar" in tiers:
        return "low"
    return "none"


def memo_key(query: str) -> str:
    """Case- and whitespace-insensitive key used to memoize batch queries."""
    return " ".join(query.split()).lower()


class SearchEngine:
    """Indexes are built once in __init__ and never mutated; build a new engine to reload data."""

    def __init__(
        self,
        crossref: CrossRefData,
        url_resolver: URLResolving | None = None,
        msrp: PriceLookup | None = None,
        config: SearchConfig | None = None,
    ) -> None:
        self.config = config or SearchConfig()
        self._url_resolver = url_resolver
        self._msrp = msrp
        self._competitors: list[CompetitorMapping] = list(crossref.mappings)
        self._legacy: list[LegacyAxisMapping] = list(crossref.axis_legacy_database.mappings)
        self.parser = QueryParser(m.legacy_model for m in self._legacy)

        self._competitor_index: dict[str, list[CompetitorMapping]] = defaultdict(list)
        self._manufacturer_index: dict[str, list[CompetitorMapping]] = defaultdict(list)
        self._axis_index: dict[str, list[AnyMapping]] = defaultdict(list)
        self._legacy_index: dict[str, list[LegacyAxisMapping]] = defaultdict(list)

        for mapping in self._competitors:
            self._competitor_index[normalize_strict(mapping.competitor_model)].append(mapping)
            self._manufacturer_index[mapping.competitor_manufacturer.lower()].append(mapping)
            self._axis_index[normalize_strict(mapping.axis_replacement)].append(mapping)
        for legacy in self._legacy:
            self._legacy_index[normalize_strict(legacy.legacy_model)].append(legacy)
            self._axis_index[normalize_strict(legacy.replacement_model)].append(legacy)

        logger.info(
            "Search indexes built: %d competitor models, %d manufacturers, %d legacy models, %d Axis models",
            len(self._competitor_index),
            len(self._manufacturer_index),
            len(self._legacy_index),
            len(self._axis_index),
        )

    # ----- public API -----

    def configure(self, **overrides: Any) -> None:
        """Replace config values, e.g. configure(max_results=5, fuzzy_enabled=False)."""
        self.config = self.config.model_copy(update=overrides)

    def search(self, query: str) -> SearchResponse:
        start = time.perf_counter()
        parsed = self.parser.parse(query)

        if parsed.query_type == "axis-browse":
            return self._build_response(query, parsed.query_type, [], start, is_browse=True)

        if parsed.query_type == "manufacturer":
            results = self._manufacturer_results(parsed.manufacturer or "")
            return self._build_response(query, parsed.query_type, results, start, manufacturer=parsed.manufacturer)

        if parsed.query_type == "axis-model":
            results = self._axis_model_results(parsed.normalized)
        elif parsed.query_type == "legacy":
            results = self.search_legacy(parsed.normalized)
        else:
            results = self.search_competitor(parsed.normalized)
            if not results:
                results = self.search_legacy(parsed.normalized)
        return self._build_response(query, parsed.query_type, results, start, suggest_for=parsed.normalized)

    def search_batch(
        self,
        queries: Sequence[str],
        memo: dict[str, SearchResponse] | None = None,
    ) -> dict[str, SearchResponse]:
        """
        Search every query once per normalized form. Queries differing only in case or
        whitespace share one response object. Pass memo to share results across calls.
        """
        memo = {} if memo is None else memo
        responses: dict[str, SearchResponse] = {}
        for query in queries:
            key = memo_key(query)
            response = memo.get(key)
            if response is None:
                response = self.search(query).model_copy(update={"is_batch": True})
                memo[key] = response
            responses[query] = response
        return responses

    def search_competitor(self, query: str) -> list[SearchResult]:
        results: list[SearchResult] = []
        seen: set[str] = set()
        for mapping in self._competitor_index.get(normalize_strict(query), []):
            results.append(self._competitor_result(mapping, 100, "exact"))
            seen.add(mapping.competitor_model)

        if self.config.fuzzy_enabled:
            for mapping in self._competitors:
                if mapping.competitor_model in seen:
                    continue
                match = score_match(query, mapping.competitor_model)
                if match.tier != "none" and match.score >= self.config.min_score:
                    results.append(self._competitor_result(mapping, match.score, match.tier))
                    seen.add(mapping.competitor_model)
        return self._rank(results)

    def search_legacy(self, query: str) -> list[SearchResult]:
        results: list[SearchResult] = []
        seen: set[str] = set()
        key = normalize_model_key(query)
        exact = self._legacy_index.get(normalize_strict(key)) or self._legacy_index.get(
            normalize_strict(get_base_model_key(key)), []
        )
        for legacy in exact:
            results.append(self._legacy_result(legacy, 100, "exact"))
            seen.add(legacy.legacy_model)

        if self.config.fuzzy_enabled:
            for legacy in self._legacy:
                if legacy.legacy_model in seen:
                    continue
                match = score_match(query, legacy.legacy_model)
                if match.tier != "none" and match.score >= self.config.min_score:
                    results.append(self._legacy_result(legacy, match.score, match.tier))
                    seen.add(legacy.legacy_model)
        return self._rank(results)

    def lookup_axis_model(self, model: str) -> AxisModelInfo | None:
        """What the cross-reference data knows about a current Axis model; None if nothing maps to it."""
        key = normalize_model_key(model)
        mappings = self._mappings_replaced_by(key)
        if not mappings:
            return None

        features: list[str] = []
        for mapping in mappings:
            if isinstance(mapping, CompetitorMapping):
                features.extend(f for f in mapping.axis_features if f not in features)

        resolved = self._url_resolver.resolve(key) if self._url_resolver is not None else None
        return AxisModelInfo(
            model=key,
            series=key[:1],
            form_factor=infer_form_factor(key),
            resolution=infer_resolution(key),
            features=features,
            msrp=self._msrp.get_price(key) if self._msrp is not None else None,
            url=resolved,
            is_discontinued=resolved.is_discontinued if resolved is not None else False,
            replaced_by=resolved.replaced_by if resolved is not None else None,
            replaces=[_source_model(m) for m in mappings],
        )

    def get_manufacturer_models(self, manufacturer: str) -> list[CompetitorMapping]:
        """
        Every mapping for a manufacturer; accepts aliases ("hik") and any case.
        A short name also covers the dataset's longer spelling: "hanwha" -> "Hanwha Vision".
        """
        name = " ".join(manufacturer.split()).lower()
        if not name:
            return []
        names = {name, canonical_manufacturer(name).lower()}
        found: list[CompetitorMapping] = []
        for key in sorted(self._manufacturer_index):
            if any(key == n or key.startswith(n + " ") or n.startswith(key + " ") for n in names):
                found.extend(self._manufacturer_index[key])
        return found

    def get_suggestions(self, partial: str, exclude: Iterable[str] = ()) -> list[str]:
        """Closest known competitor and legacy models by raw similarity, including those below the match floor."""
        if len(partial.strip()) < MIN_QUERY_LENGTH or self.config.max_suggestions == 0:
            return []
        excluded = {normalize_model_key(m) for m in exclude}
        scored: dict[str, tuple[int, str]] = {}
        candidates = [m.competitor_model for m in self._competitors] + [m.legacy_model for m in self._legacy]
        for model in candidates:
            key = normalize_model_key(model)
            if key in excluded or key in scored:
                continue
            score = similarity(partial, model)
            if score > 0:
                scored[key] = (score, model)
        ranked = sorted(scored.items(), key=lambda kv: (-kv[1][0], kv[0]))
        return [model for _, (_, model) in ranked[: self.config.max_suggestions]]

    # ----- helpers -----

    def _mappings_replaced_by(self, key: str) -> list[AnyMapping]:
        found = self._axis_index.get(normalize_strict(key))
        if not found:
            found = self._axis_index.get(normalize_strict(get_base_model_key(key)), [])
        return list(found)

    def _axis_model_results(self, key: str) -> list[SearchResult]:
        results = []
        for mapping in self._mappings_replaced_by(key):
            if isinstance(mapping, LegacyAxisMapping):
                results.append(self._legacy_result(mapping, 100, "exact"))
            else:
                results.append(self._competitor_result(mapping, 100, "exact"))
        return self._rank(results)

    def _manufacturer_results(self, manufacturer: str) -> list[SearchResult]:
        results = [self._competitor_result(m, None, "exact") for m in self.get_manufacturer_models(manufacturer)]
        return self._rank(results)

    def _rank(self, results: list[SearchResult]) -> list[SearchResult]:
        ranked = sort_by_score(
            results,
            score=lambda r: 100 if r.score is None else r.score,
            tier=lambda r: r.tier,
            key=lambda r: normalize_model_key(r.source_model),
        )
        if self.config.max_results is not None:
            ranked = ranked[: self.config.max_results]
        return ranked

    def _resolve_url(self, model: str) -> tuple[str | None, Any]:
        if self._url_resolver is None:
            return None, None
        resolved = self._url_resolver.resolve(model)
        return resolved.url, resolved.confidence

    def _competitor_result(self, mapping: CompetitorMapping, score: int | None, tier: MatchTier) -> SearchResult:
        url, url_confidence = self._resolve_url(mapping.axis_replacement)
        return SearchResult(
            mapping=mapping,
            score=score,
            tier=tier,
            url=url,
            url_confidence=url_confidence,
            category=get_category(mapping.competitor_manufacturer),
        )

    def _legacy_result(self, mapping: LegacyAxisMapping, score: int, tier: MatchTier) -> SearchResult:
        url, url_confidence = self._resolve_url(mapping.replacement_model)
        return SearchResult(
            mapping=mapping,
            score=score,
            tier=tier,
            url=url,
            url_confidence=url_confidence,
            category="legacy-axis",
            is_legacy=True,
        )

    def _build_response(
        self,
        query: str,
        query_type: QueryType,
        results: list[SearchResult],
        start: float,
        *,
        is_browse: bool = False,
        manufacturer: str | None = None,
        suggest_for: str | None = None,
    ) -> SearchResponse:
        confidence = rollup_confidence(results)
        suggestions: list[str] = []
        if suggest_for and self.config.suggestions_enabled and confidence in ("low", "none"):
            suggestions = self.get_suggestions(suggest_for, exclude=(r.source_model for r in results))
        return SearchResponse(
            query=query,
            query_type=query_type,
            results=results,
            grouped=GroupedResults(
                exact=[r for r in results if r.tier == "exact"],
                partial=[r for r in results if r.tier == "partial"],
                similar=[r for r in results if r.tier == "similar"],
            ),
            confidence=confidence,
            suggestions=suggestions,
            manufacturer=manufacturer,
            is_browse=is_browse,
            duration_ms=(time.perf_counter() - start) * 1000,
        )


def _source_model(mapping: AnyMapping) -> str:
    if isinstance(mapping, LegacyAxisMapping):
        return mapping.legacy_model
    return mapping.competitor_model
