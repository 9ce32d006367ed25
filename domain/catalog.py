"""Cross-reference dataset records (Pydantic V2), immutable once loaded."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MatchTier = Literal["exact", "partial", "similar", "none"]
QueryType = Literal["competitor", "legacy", "axis-model", "axis-browse", "manufacturer"]
Confidence = Literal["high", "medium", "low", "none"]
URLConfidence = Literal["verified", "alias", "generated", "search-fallback"]
LookupConfidence = Literal["exact", "series-fallback", "none"]
CascadeStep = Literal["exact", "base-model", "series", "alias", "none"]
PlacementType = Literal["wall", "ceiling", "pole", "parapet", "pendant", "corner", "flush", "recessed"]
AccessoryRecommendation = Literal["recommended", "included", "compatible"]
CategoryId = Literal[
    "ndaa",
    "cloud",
    "korean",
    "japanese",
    "motorola",
    "taiwan",
    "competitive",
    "family",
    "defunct",
    "legacy-axis",
]

PLACEMENT_TYPES: tuple[PlacementType, ...] = (
    "wall",
    "ceiling",
    "pole",
    "parapet",
    "pendant",
    "corner",
    "flush",
    "recessed",
)


def _strip_str(v: Any) -> str:
    if v is None:
        return ""
    return str(v).strip()


def _strip_optional_str(v: Any) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _strip_list_str(v: Any) -> list[str]:
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(x).strip() for x in v if str(x).strip()]
    return []


# ----- Competitor / legacy cross-reference -----


class CompetitorMapping(BaseModel):
    """One competitor model and the Axis model that replaces it."""

    competitor_model: str = Field(description="Competitor model number, e.g. DS-2CD2143G2-I")
    competitor_manufacturer: str = Field(default="", description="Manufacturer name as written in the dataset")
    axis_replacement: str = Field(description="Recommended Axis replacement model")
    match_confidence: int = Field(default=0, ge=0, le=100, description="Curated confidence 0-100")
    competitor_type: str | None = Field(default=None, description="Camera type / description")
    competitor_resolution: str | None = Field(default=None, description="Competitor resolution")
    axis_features: list[str] = Field(default_factory=list, description="Key Axis features of the replacement")
    notes: str | None = Field(default=None, description="Sales notes")

    @field_validator("competitor_model", "competitor_manufacturer", "axis_replacement", mode="before")
    @classmethod
    def strip_str_fields(cls, v: Any) -> str:
        return _strip_str(v)

    @field_validator("competitor_type", "competitor_resolution", "notes", mode="before")
    @classmethod
    def strip_optional_fields(cls, v: Any) -> str | None:
        return _strip_optional_str(v)

    @field_validator("axis_features", mode="before")
    @classmethod
    def normalize_list_str(cls, v: Any) -> list[str]:
        return _strip_list_str(v)

    model_config = ConfigDict(frozen=True, extra="ignore")


class LegacyAxisMapping(BaseModel):
    """A discontinued Axis model and its current replacement."""

    legacy_model: str = Field(description="Discontinued Axis model")
    replacement_model: str = Field(description="Current Axis replacement")
    notes: str | None = Field(default=None, description="Migration notes")
    discontinued_year: int | None = Field(default=None, description="Year of discontinuation")

    @field_validator("legacy_model", "replacement_model", mode="before")
    @classmethod
    def strip_str_fields(cls, v: Any) -> str:
        return _strip_str(v)

    @field_validator("notes", mode="before")
    @classmethod
    def strip_optional_fields(cls, v: Any) -> str | None:
        return _strip_optional_str(v)

    model_config = ConfigDict(frozen=True, extra="ignore")


class LegacyDatabase(BaseModel):
    mappings: list[LegacyAxisMapping] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")


class CrossRefMetadata(BaseModel):
    version: str = Field(default="", description="Dataset version")
    last_updated: str = Field(default="", description="Last update date")
    total_mappings: int | None = Field(default=None, description="Declared mapping count")

    @field_validator("version", "last_updated", mode="before")
    @classmethod
    def strip_str_fields(cls, v: Any) -> str:
        return _strip_str(v)

    model_config = ConfigDict(frozen=True, extra="ignore")


class CrossRefData(BaseModel):
    """Root of the competitor/legacy dataset."""

    mappings: list[CompetitorMapping] = Field(default_factory=list)
    axis_legacy_database: LegacyDatabase = Field(default_factory=LegacyDatabase)
    metadata: CrossRefMetadata = Field(default_factory=CrossRefMetadata)

    model_config = ConfigDict(frozen=True, extra="ignore")


# ----- Product specifications -----


class _CamelModel(BaseModel):
    """Source JSON for specs and accessories uses camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class ChipsetInfo(_CamelModel):
    chipset: str | None = Field(default=None, description="e.g. ARTPEC-8")
    has_dlpu: bool = Field(default=False, alias="hasDLPU", description="Deep learning processing unit present")
    generation: int | None = Field(default=None, description="Chipset generation number")


class AxisProductSpec(_CamelModel):
    """One Axis catalog entry. Many fields are optional because source data is incomplete."""

    model_key: str = Field(default="", description="Canonical model key")
    display_name: str = Field(default="", description="Display name")
    family: str = Field(default="", description="Product family")
    series_id: str = Field(default="", description="Series identifier")
    product_type: str = Field(default="camera", description="camera | audio | intercom | radar | ...")
    camera_type: str | None = Field(default=None, description="fixed-dome | fixed-bullet | ptz | panoramic | modular | specialty")

    sensor: str | None = None
    max_resolution: str | None = None
    max_fps: int | None = None
    lens: str | None = None
    is_varifocal: bool = False

    codecs: list[str] = Field(default_factory=list)
    has_zipstream: bool = False
    chipset: ChipsetInfo = Field(default_factory=ChipsetInfo)
    has_acap: bool = Field(default=False, alias="hasACAP")

    ip_rating: str | None = None
    ik_rating: str | None = None
    power_type: str | None = None
    max_power_watts: float | None = None

    analytics: list[str] = Field(default_factory=list)
    has_object_analytics: bool = False
    has_lpr: bool = Field(default=False, alias="hasLPR")
    has_autotracking: bool = False

    network_speed: str | None = None
    edge_storage: str | None = None

    product_url: str = ""
    datasheet_url: str | None = None

    @field_validator("model_key", "display_name", "family", "series_id", "product_url", mode="before")
    @classmethod
    def strip_str_fields(cls, v: Any) -> str:
        return _strip_str(v)

    @field_validator("codecs", "analytics", mode="before")
    @classmethod
    def normalize_list_str(cls, v: Any) -> list[str]:
        return _strip_list_str(v)

    @field_validator("chipset", mode="before")
    @classmethod
    def default_chipset(cls, v: Any) -> Any:
        return {} if v is None else v


class AxisSpecDatabase(_CamelModel):
    version: str = ""
    generated_at: str = ""
    total_products: int = 0
    products: dict[str, AxisProductSpec] = Field(default_factory=dict)


# ----- Accessory compatibility -----


class AccessoryCompatEntry(_CamelModel):
    """One accessory compatible with a camera model."""

    model_key: str = Field(description="Accessory model, e.g. T91B47")
    display_name: str = Field(default="", description="Display name")
    accessory_type: str = Field(default="mount", description="mount | power | cables | ...")
    mount_placement: PlacementType | None = Field(default=None, description="Placement for mounts")
    recommendation: AccessoryRecommendation = Field(default="compatible", description="recommended > included > compatible")
    requires_additional: bool = Field(default=False, description="Needs another accessory to work")
    msrp_key: str | None = Field(default=None, description="Key into the MSRP dataset")
    notes: str | None = None

    @field_validator("model_key", "display_name", "accessory_type", mode="before")
    @classmethod
    def strip_str_fields(cls, v: Any) -> str:
        return _strip_str(v)

    @field_validator("msrp_key", "notes", mode="before")
    @classmethod
    def strip_optional_fields(cls, v: Any) -> str | None:
        return _strip_optional_str(v)

    @field_validator("mount_placement", mode="before")
    @classmethod
    def lower_placement(cls, v: Any) -> str | None:
        s = _strip_optional_str(v)
        return s.lower() if s else None


class AccessoryCompatGroup(_CamelModel):
    product_variant: str = ""
    accessories: list[AccessoryCompatEntry] = Field(default_factory=list)


class AccessoryCompatDatabase(_CamelModel):
    version: str = ""
    compatibility: dict[str, AccessoryCompatGroup] = Field(default_factory=dict)


# ----- Pricing -----


class MsrpEntry(BaseModel):
    msrp: float | None = Field(default=None, ge=0, description="List price in USD")
    description: str = Field(default="", description="Product description")

    @field_validator("description", mode="before")
    @classmethod
    def strip_str_fields(cls, v: Any) -> str:
        return _strip_str(v)

    model_config = ConfigDict(frozen=True, extra="ignore")
