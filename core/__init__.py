"""
Cross-reference core: model keys, fuzzy matching, query parsing, search and the lookup cascades.
"""

from .accessory import AccessoryLookup, normalize_mount_type, pair_mounts_for_batch, resolve_mount_pair_with_confidence
from .enrichment import fill_spec_gaps, infer_camera_type
from .errors import CrossRefError, DatasetError, NotInitializedError
from .loaders import load_accessories, load_crossref, load_msrp, load_specs
from .model_key import extract_series_prefix, get_base_model_key, normalize_model_key
from .msrp import MSRPLookup
from .query_parser import QueryParser, parse_batch, parse_batch_input, parse_query, validate_batch, validate_query
from .search_engine import SearchEngine
from .specs import SpecLookup
from .url import URLResolver

__all__ = [
    "AccessoryLookup",
    "CrossRefError",
    "DatasetError",
    "MSRPLookup",
    "NotInitializedError",
    "QueryParser",
    "SearchEngine",
    "SpecLookup",
    "URLResolver",
    "extract_series_prefix",
    "fill_spec_gaps",
    "get_base_model_key",
    "infer_camera_type",
    "load_accessories",
    "load_crossref",
    "load_msrp",
    "load_specs",
    "normalize_model_key",
    "normalize_mount_type",
    "pair_mounts_for_batch",
    "parse_batch",
    "parse_batch_input",
    "parse_query",
    "resolve_mount_pair_with_confidence",
    "validate_batch",
    "validate_query",
]
