"""
Pydantic V2 schemas: application config sections and every result type returned by the lookups.

- AppConfigSchema: app_config.yaml (sections app / search / batch).
- RunConfigSchema: resolved runtime directories for the CLI.
- SearchResult / SearchResponse: search engine output.
- ResolvedURL, SpecResolution, AccessoryResolution, MountPairingResult, MSRPResult: cascade output.
- BatchParseResult, ValidationResult, BatchProgress, EnrichmentReport: batch and maintenance helpers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from domain.catalog import (
    AccessoryCompatEntry,
    AccessoryCompatGroup,
    AxisProductSpec,
    CascadeStep,
    CategoryId,
    CompetitorMapping,
    Confidence,
    LegacyAxisMapping,
    LookupConfidence,
    MatchTier,
    PlacementType,
    QueryType,
    URLConfidence,
)


# ----- Configuration -----


class AppSection(BaseModel):
    """Dataset file names and output naming."""

    crossref_filename: str = Field(default="crossref_data.json", description="Competitor/legacy dataset")
    specs_filename: str = Field(default="axis_specs.json", description="Spec dataset")
    accessories_filename: str = Field(default="accessory_compat.json", description="Accessory dataset")
    msrp_filename: str = Field(default="axis_msrp.json", description="MSRP dataset")
    output_prefix: str = Field(default="crossref_results", description="Prefix of batch result workbooks")

    @field_validator("crossref_filename", "specs_filename", "accessories_filename", "msrp_filename", "output_prefix", mode="before")
    @classmethod
    def strip_strings(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()


class SearchConfig(BaseModel):
    """Search engine tuning."""

    max_results: int | None = Field(default=None, ge=1, description="Cap on returned results; None means no cap")
    min_score: int = Field(default=50, ge=0, le=100, description="Lowest score returned as a match")
    fuzzy_enabled: bool = Field(default=True, description="Fuzzy matching for competitor queries")
    suggestions_enabled: bool = Field(default=True, description="Compute did-you-mean suggestions")
    max_suggestions: int = Field(default=3, ge=0, description="Suggestion list length")


class BatchSection(BaseModel):
    """Batch input limits and chunking."""

    max_batch_size: int = Field(default=200, ge=1, description="Queries beyond this are dropped")
    chunk_size: int = Field(default=25, ge=1, description="Queries per chunk before yielding")
    show_progress: bool = Field(default=True, description="Show a tqdm progress bar")


class AppConfigSchema(BaseModel):
    """app_config.yaml root; every section has defaults."""

    app: AppSection = Field(default_factory=AppSection)
    search: SearchConfig = Field(default_factory=SearchConfig)
    batch: BatchSection = Field(default_factory=BatchSection)


class RunConfigSchema(BaseModel):
    """Runtime directories: datasets, workbook output, logs."""

    data_dir: Path = Field(description="Directory holding the four JSON datasets")
    output_dir: Path = Field(description="Batch result output directory")
    log_dir: Path = Field(description="Log file directory")
    app: AppSection = Field(default_factory=AppSection)

    @property
    def crossref_path(self) -> Path:
        return self.data_dir / self.app.crossref_filename

    @property
    def specs_path(self) -> Path:
        return self.data_dir / self.app.specs_filename

    @property
    def accessories_path(self) -> Path:
        return self.data_dir / self.app.accessories_filename

    @property
    def msrp_path(self) -> Path:
        return self.data_dir / self.app.msrp_filename


# ----- Search -----


class ParsedQuery(BaseModel):
    raw: str = Field(default="", description="Query as received")
    normalized: str = Field(default="", description="Trimmed, whitespace-collapsed query")
    query_type: QueryType = Field(default="competitor")
    manufacturer: str | None = Field(default=None, description="Canonical manufacturer when query_type is manufacturer")
    is_empty: bool = False

    model_config = {"frozen": True}


class SearchResult(BaseModel):
    """One mapping with its match score, tier, URL and category."""

    mapping: CompetitorMapping | LegacyAxisMapping
    score: int | None = Field(default=None, ge=0, le=100, description="None for identity matches (manufacturer browse)")
    tier: MatchTier = "exact"
    url: str | None = None
    url_confidence: URLConfidence | None = None
    category: CategoryId = "competitive"
    is_legacy: bool = False

    @property
    def source_model(self) -> str:
        if isinstance(self.mapping, LegacyAxisMapping):
            return self.mapping.legacy_model
        return self.mapping.competitor_model

    @property
    def axis_model(self) -> str:
        if isinstance(self.mapping, LegacyAxisMapping):
            return self.mapping.replacement_model
        return self.mapping.axis_replacement

    @property
    def manufacturer(self) -> str:
        if isinstance(self.mapping, LegacyAxisMapping):
            return "Axis"
        return self.mapping.competitor_manufacturer

    model_config = {"frozen": True}


class GroupedResults(BaseModel):
    exact: list[SearchResult] = Field(default_factory=list)
    partial: list[SearchResult] = Field(default_factory=list)
    similar: list[SearchResult] = Field(default_factory=list)

    model_config = {"frozen": True}


class SearchResponse(BaseModel):
    """Ranked results for one query, grouped by tier, with an overall confidence."""

    query: str = ""
    query_type: QueryType = "competitor"
    results: list[SearchResult] = Field(default_factory=list)
    grouped: GroupedResults = Field(default_factory=GroupedResults)
    confidence: Confidence = "none"
    suggestions: list[str] = Field(default_factory=list)
    manufacturer: str | None = None
    is_browse: bool = False
    is_batch: bool = False
    duration_ms: float = 0.0
    error: str | None = None

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def best(self) -> SearchResult | None:
        return self.results[0] if self.results else None

    model_config = {"frozen": True}


class AxisModelInfo(BaseModel):
    """What is known about one current Axis model."""

    model: str
    series: str = Field(default="", description="Series letter: P, Q, M, F, ...")
    form_factor: str = "fixed-dome"
    resolution: str = "1080p"
    features: list[str] = Field(default_factory=list)
    msrp: float | None = None
    url: ResolvedURL | None = None
    is_discontinued: bool = False
    replaced_by: str | None = None
    replaces: list[str] = Field(default_factory=list, description="Competitor/legacy models this model replaces")

    model_config = {"frozen": True, "protected_namespaces": ()}


# ----- Resolution cascades -----


class ResolvedURL(BaseModel):
    url: str
    confidence: URLConfidence
    is_discontinued: bool = False
    resolved_model: str = Field(default="", description="Model key the URL was built from")
    warning: str | None = None
    replaced_by: str | None = None

    model_config = {"frozen": True}


class SpecResolution(BaseModel):
    spec: AxisProductSpec | None = None
    confidence: LookupConfidence = "none"
    step: CascadeStep = "none"
    matched_key: str | None = None
    warning: str | None = None

    model_config = {"frozen": True}


class AccessoryResolution(BaseModel):
    entry: AccessoryCompatGroup | None = None
    confidence: LookupConfidence = "none"
    step: CascadeStep = "none"
    matched_key: str | None = None
    warning: str | None = None

    model_config = {"frozen": True}


class MountPairingResult(BaseModel):
    camera_model: str
    placement: PlacementType | None = None
    mount: AccessoryCompatEntry | None = None
    confidence: Literal["exact", "series-fallback", "form-factor-default", "none"] = "none"
    warning: str | None = None
    alternatives: list[AccessoryCompatEntry] = Field(default_factory=list)

    model_config = {"frozen": True}


class MSRPResult(BaseModel):
    price: float | None = None
    match_type: Literal["direct", "base-model", "not-found"] = "not-found"
    matched_model: str | None = None
    formatted: str = "TBD"

    model_config = {"frozen": True}


# ----- Batch / maintenance -----


class BatchItem(BaseModel):
    """One row of a batch: the query, its response and the optional mount request."""

    row: int = Field(default=0, description="1-based position in the input")
    query: str = ""
    response: SearchResponse | None = None
    mount_type: PlacementType | None = Field(default=None, description="Requested placement, already normalized")
    mount_pairing: MountPairingResult | None = None

    model_config = {"frozen": True}


class BatchParseResult(BaseModel):
    items: list[str] = Field(default_factory=list, description="Queries kept, in input order")
    total: int = Field(default=0, description="Non-empty queries found before the cap")
    truncated: bool = False
    dropped: int = Field(default=0, description="Queries removed by the cap")


class ValidationResult(BaseModel):
    valid: bool
    reason: str | None = None


class BatchProgress(BaseModel):
    processed: int = 0
    total: int = 0
    unique_queries: int = 0
    cancelled: bool = False

    @property
    def percent(self) -> float:
        return 100.0 * self.processed / self.total if self.total else 100.0


class EnrichmentReport(BaseModel):
    updated_models: list[str] = Field(default_factory=list, description="Models that received at least one value")
    filled_fields: int = Field(default=0, description="Total number of fields filled")
    skipped_existing: int = Field(default=0, description="Updates ignored because the field already had a value")
    unknown_models: list[str] = Field(default_factory=list, description="Update keys with no snapshot entry")
    inferred_camera_types: dict[str, str] = Field(default_factory=dict, description="Model -> inferred camera subtype")


AxisModelInfo.model_rebuild()
