"""Pydantic schemas: configuration sections and lookup/search results."""

from .schemas import (
    AccessoryResolution,
    AppConfigSchema,
    AxisModelInfo,
    BatchItem,
    BatchParseResult,
    BatchProgress,
    EnrichmentReport,
    GroupedResults,
    MountPairingResult,
    MSRPResult,
    ParsedQuery,
    ResolvedURL,
    RunConfigSchema,
    SearchConfig,
    SearchResponse,
    SearchResult,
    SpecResolution,
    ValidationResult,
)

__all__ = [
    "AccessoryResolution",
    "AppConfigSchema",
    "AxisModelInfo",
    "BatchItem",
    "BatchParseResult",
    "BatchProgress",
    "EnrichmentReport",
    "GroupedResults",
    "MountPairingResult",
    "MSRPResult",
    "ParsedQuery",
    "ResolvedURL",
    "RunConfigSchema",
    "SearchConfig",
    "SearchResponse",
    "SearchResult",
    "SpecResolution",
    "ValidationResult",
]
