"""Shared pytest fixtures: small JSON datasets under tests/fixtures and the lookups built over them."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# make the project root importable (core / app / models / domain)
_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from bootstrap import CatalogServices, build_services  # noqa: E402
from core.accessory import AccessoryLookup  # noqa: E402
from core.loaders import load_accessories, load_crossref, load_msrp, load_specs  # noqa: E402
from core.msrp import MSRPLookup  # noqa: E402
from core.search_engine import SearchEngine  # noqa: E402
from core.specs import SpecLookup  # noqa: E402
from core.url import URLResolver  # noqa: E402
from domain.catalog import AccessoryCompatDatabase, AxisSpecDatabase, CrossRefData, MsrpEntry  # noqa: E402

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def crossref() -> CrossRefData:
    return load_crossref(FIXTURES_DIR / "crossref_data.json")


@pytest.fixture(scope="session")
def spec_db() -> AxisSpecDatabase:
    return load_specs(FIXTURES_DIR / "axis_specs.json")


@pytest.fixture(scope="session")
def accessory_db() -> AccessoryCompatDatabase:
    return load_accessories(FIXTURES_DIR / "accessory_compat.json")


@pytest.fixture(scope="session")
def msrp_entries() -> dict[str, MsrpEntry]:
    return load_msrp(FIXTURES_DIR / "axis_msrp.json")


@pytest.fixture
def url_resolver() -> URLResolver:
    return URLResolver()


@pytest.fixture
def msrp(msrp_entries: dict[str, MsrpEntry]) -> MSRPLookup:
    return MSRPLookup(msrp_entries)


@pytest.fixture
def engine(crossref: CrossRefData, url_resolver: URLResolver, msrp: MSRPLookup) -> SearchEngine:
    return SearchEngine(crossref, url_resolver=url_resolver, msrp=msrp)


@pytest.fixture
def specs(spec_db: AxisSpecDatabase) -> SpecLookup:
    return SpecLookup(spec_db)


@pytest.fixture
def accessories(accessory_db: AccessoryCompatDatabase) -> AccessoryLookup:
    return AccessoryLookup(accessory_db)


@pytest.fixture
def services(
    crossref: CrossRefData,
    spec_db: AxisSpecDatabase,
    accessory_db: AccessoryCompatDatabase,
    msrp_entries: dict[str, MsrpEntry],
) -> CatalogServices:
    return build_services(crossref, spec_db, accessory_db, msrp_entries)
