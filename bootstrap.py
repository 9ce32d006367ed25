"""
Dependency assembly: build every lookup once from the four datasets and wire them together.

No business logic here. Library callers use build_services()/load_services() and pass
the result around; init_services()/get_services() exist only for the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from core.accessory import AccessoryLookup
from core.config import AppSettings, SearchSettings, get_data_dir, inject
from core.errors import NotInitializedError
from core.loaders import load_accessories, load_crossref, load_msrp, load_specs
from core.msrp import MSRPLookup
from core.search_engine import SearchEngine
from core.specs import SpecLookup
from core.url import URLResolver
from domain.catalog import AccessoryCompatDatabase, AxisSpecDatabase, CrossRefData, MsrpEntry
from models.schemas import AppSection, SearchConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogServices:
    """Every lookup built over one dataset snapshot. Reload by building a new instance."""

    search: SearchEngine
    urls: URLResolver
    specs: SpecLookup
    accessories: AccessoryLookup
    msrp: MSRPLookup


def build_services(
    crossref: CrossRefData,
    specs: AxisSpecDatabase,
    accessories: AccessoryCompatDatabase,
    msrp: Mapping[str, MsrpEntry],
    *,
    search_config: SearchConfig | None = None,
    url_resolver: URLResolver | None = None,
) -> CatalogServices:
    urls = url_resolver or URLResolver()
    prices = MSRPLookup(msrp)
    engine = SearchEngine(crossref, url_resolver=urls, msrp=prices, config=search_config)
    return CatalogServices(
        search=engine,
        urls=urls,
        specs=SpecLookup(specs),
        accessories=AccessoryLookup(accessories),
        msrp=prices,
    )


def load_services(data_dir: Path | None = None, app: AppSection | None = None) -> CatalogServices:
    """Read the four JSON datasets from data_dir (default: configured data dir). Raises DatasetError."""
    data_dir = data_dir or get_data_dir()
    app = app or inject(AppSettings)
    search_config = inject(SearchSettings)
    logger.info("Loading datasets from %s", data_dir)
    return build_services(
        load_crossref(data_dir / app.crossref_filename),
        load_specs(data_dir / app.specs_filename),
        load_accessories(data_dir / app.accessories_filename),
        load_msrp(data_dir / app.msrp_filename),
        search_config=search_config,
    )


_services: CatalogServices | None = None


def init_services(services: CatalogServices) -> CatalogServices:
    global _services
    _services = services
    return services


def get_services() -> CatalogServices:
    if _services is None:
        raise NotInitializedError("Services are not initialized; call init_services() first")
    return _services


def reset_services() -> None:
    global _services
    _services = None
