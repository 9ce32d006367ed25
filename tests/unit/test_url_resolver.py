"""core.url unit tests: verified -> alias -> discontinued search -> generated."""

from __future__ import annotations

from core.url import AXIS_SEARCH_BASE, URLResolver, build_product_url, build_search_url


def test_build_urls() -> None:
    assert build_product_url("AXIS P3265-LVE") == "https://www.axis.com/products/axis-p3265-lve"
    assert build_search_url("p3364 lve") == "https://www.axis.com/en-us/products?q=P3364-LVE"


class TestResolve:
    def test_verified_exact(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("Q6135-LE")
        assert r.confidence == "verified"
        assert r.url == "https://www.axis.com/products/axis-q6135-le"
        assert r.resolved_model == "Q6135-LE"
        assert not r.is_discontinued

    def test_verified_via_base_model(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("axis q6135-le-60hz-eur")
        assert r.confidence == "verified"
        assert r.resolved_model == "Q6135-LE"

    def test_verified_but_discontinued(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("P3265-LVE")
        assert r.confidence == "verified"
        assert r.is_discontinued
        assert r.replaced_by == "P3275-LVE"

    def test_alias(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("P3265LVE")
        assert r.confidence == "alias"
        assert r.resolved_model == "P3265-LVE"
        assert r.url == "https://www.axis.com/products/axis-p3265-lve"
        assert r.warning == "Redirected from P3265LVE to P3265-LVE"

    def test_alias_to_unverified_model_generates_url(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("P3288LVE")
        assert r.confidence == "alias"
        assert r.url == "https://www.axis.com/products/axis-p3288-lve"

    def test_discontinued_search_fallback(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("P3364-LVE")
        assert r.confidence == "search-fallback"
        assert r.is_discontinued
        assert r.url == f"{AXIS_SEARCH_BASE}P3364-LVE"
        assert r.replaced_by == "P3265-LVE"
        assert r.warning == "This model is discontinued; replaced by P3265-LVE"

    def test_discontinued_without_replacement(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("P1343")
        assert r.confidence == "search-fallback"
        assert r.replaced_by is None
        assert r.warning == "This model is discontinued"

    def test_generated(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("P9999-XLE-EUR")
        assert r.confidence == "generated"
        assert r.url == "https://www.axis.com/products/axis-p9999-xle"
        assert r.resolved_model == "P9999-XLE"

    def test_empty(self, url_resolver: URLResolver) -> None:
        r = url_resolver.resolve("  ")
        assert r.confidence == "search-fallback"
        assert r.url == AXIS_SEARCH_BASE


class TestHelpers:
    def test_flags(self, url_resolver: URLResolver) -> None:
        assert url_resolver.is_verified("M3085-V")
        assert not url_resolver.is_verified("P9999")
        assert url_resolver.is_discontinued("M3045-V")
        assert url_resolver.get_replacement("M3045-V") == "M3086-V"
        assert url_resolver.get_replacement("Q6135-LE") is None
        assert url_resolver.url_for("P9999") == "https://www.axis.com/products/axis-p9999"

    def test_phasing_out(self, url_resolver: URLResolver) -> None:
        assert url_resolver.is_phasing_out("P3268-LVE")
        assert url_resolver.get_phasing_out("P3268-LVE") == ("P3278-LVE", "ARTPEC-9 upgrade available")
        assert url_resolver.get_phasing_out("Q6135-LE") is None

    def test_add_verified_url_returns_new_resolver(self, url_resolver: URLResolver) -> None:
        updated = url_resolver.add_verified_url("axis p9999", "https://www.axis.com/products/axis-p9999-special")
        assert updated.resolve("P9999").confidence == "verified"
        assert updated.resolve("P9999").url.endswith("p9999-special")
        assert url_resolver.resolve("P9999").confidence == "generated"
        assert len(updated.get_verified_urls()) == len(url_resolver.get_verified_urls()) + 1

    def test_custom_tables(self) -> None:
        resolver = URLResolver(
            verified_urls={"X1000": "https://example.test/x1000"},
            aliases={"X1000A": "X1000"},
            discontinued=set(),
            replacements={},
            phasing_out={},
        )
        assert resolver.resolve("x1000a").url == "https://example.test/x1000"
        assert resolver.resolve("P3364-LVE").confidence == "generated"
