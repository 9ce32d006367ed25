"""
axis.com URL resolution.

Cascade: verified page (exact, then base model) -> alias table -> discontinued
search page -> generated product URL. Every answer carries its confidence so
callers can flag links that were never checked.
"""

from __future__ import annotations

import logging
from typing import Mapping
from urllib.parse import quote

from core.cascade import ModelIndex
from core.model_key import get_base_model_key, normalize_model_key
from models.schemas import ResolvedURL

from .tables import (
    AXIS_PRODUCT_BASE,
    AXIS_SEARCH_BASE,
    DISCONTINUED_MODELS,
    DISCONTINUED_REPLACEMENTS,
    MODEL_ALIASES,
    PHASING_OUT_MODELS,
    VERIFIED_URLS,
)

logger = logging.getLogger(__name__)


def build_product_url(model: str) -> str:
    """axis.com/products/axis-{lowercased key}."""
    return f"{AXIS_PRODUCT_BASE}{normalize_model_key(model).lower()}"


def build_search_url(model: str) -> str:
    return f"{AXIS_SEARCH_BASE}{quote(normalize_model_key(model), safe='')}"


class URLResolver:
    """Immutable resolver over the curated tables; add_verified_url() returns a new resolver."""

    def __init__(
        self,
        verified_urls: Mapping[str, str] | None = None,
        aliases: Mapping[str, str] | None = None,
        discontinued: frozenset[str] | set[str] | None = None,
        replacements: Mapping[str, str] | None = None,
        phasing_out: Mapping[str, tuple[str, str]] | None = None,
    ) -> None:
        self._verified_source = {
            normalize_model_key(k): v for k, v in (VERIFIED_URLS if verified_urls is None else verified_urls).items()
        }
        self._verified: ModelIndex[str] = ModelIndex(self._verified_source, name="verified-urls")
        alias_source = MODEL_ALIASES if aliases is None else aliases
        self._aliases = {
            normalize_model_key(src): normalize_model_key(dst)
            for src, dst in alias_source.items()
            if normalize_model_key(src) != normalize_model_key(dst)
        }
        self._discontinued = frozenset(
            normalize_model_key(m) for m in (DISCONTINUED_MODELS if discontinued is None else discontinued)
        )
        self._replacements = {
            normalize_model_key(k): normalize_model_key(v)
            for k, v in (DISCONTINUED_REPLACEMENTS if replacements is None else replacements).items()
        }
        self._phasing_out = {
            normalize_model_key(k): (normalize_model_key(v[0]), v[1])
            for k, v in (PHASING_OUT_MODELS if phasing_out is None else phasing_out).items()
        }

    def resolve(self, model: str) -> ResolvedURL:
        key = normalize_model_key(model)
        if not key:
            return ResolvedURL(url=AXIS_SEARCH_BASE, confidence="search-fallback", warning="No model given")
        base = get_base_model_key(key)

        hit = self._verified.lookup(key)
        if hit is not None:
            return ResolvedURL(
                url=hit.value,
                confidence="verified",
                is_discontinued=self.is_discontinued(hit.key),
                resolved_model=hit.key,
                replaced_by=self.get_replacement(hit.key),
            )

        canonical = self._aliases.get(key) or self._aliases.get(base)
        if canonical:
            verified = self._verified.get(canonical)
            return ResolvedURL(
                url=verified or build_product_url(canonical),
                confidence="alias",
                is_discontinued=self.is_discontinued(canonical),
                resolved_model=canonical,
                warning=f"Redirected from {model.strip()} to {canonical}",
                replaced_by=self.get_replacement(canonical),
            )

        if key in self._discontinued or base in self._discontinued:
            replaced_by = self.get_replacement(key)
            warning = "This model is discontinued"
            if replaced_by:
                warning += f"; replaced by {replaced_by}"
            logger.debug("URL for %s falls back to search (discontinued)", key)
            return ResolvedURL(
                url=build_search_url(key),
                confidence="search-fallback",
                is_discontinued=True,
                resolved_model=key,
                warning=warning,
                replaced_by=replaced_by,
            )

        return ResolvedURL(url=build_product_url(base), confidence="generated", resolved_model=base)

    def url_for(self, model: str) -> str:
        return self.resolve(model).url

    def is_verified(self, model: str) -> bool:
        return self._verified.lookup(model) is not None

    def is_discontinued(self, model: str) -> bool:
        key = normalize_model_key(model)
        return key in self._discontinued or get_base_model_key(key) in self._discontinued

    def get_replacement(self, model: str) -> str | None:
        """Known successor of a discontinued model, exact key first, then base model."""
        key = normalize_model_key(model)
        return self._replacements.get(key) or self._replacements.get(get_base_model_key(key))

    def is_phasing_out(self, model: str) -> bool:
        return normalize_model_key(model) in self._phasing_out

    def get_phasing_out(self, model: str) -> tuple[str, str] | None:
        """(replacement, note) for a model that is still sold but has a successor."""
        return self._phasing_out.get(normalize_model_key(model))

    def get_verified_urls(self) -> dict[str, str]:
        return dict(self._verified.items())

    def add_verified_url(self, model: str, url: str) -> URLResolver:
        verified = dict(self._verified_source)
        verified[normalize_model_key(model)] = url
        return URLResolver(
            verified_urls=verified,
            aliases=self._aliases,
            discontinued=self._discontinued,
            replacements=self._replacements,
            phasing_out=self._phasing_out,
        )
