"""axis.com product URL resolution."""

from .resolver import URLResolver, build_product_url, build_search_url
from .tables import AXIS_PRODUCT_BASE, AXIS_SEARCH_BASE

__all__ = [
    "AXIS_PRODUCT_BASE",
    "AXIS_SEARCH_BASE",
    "URLResolver",
    "build_product_url",
    "build_search_url",
]
