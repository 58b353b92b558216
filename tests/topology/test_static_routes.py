"""Tests for sitegen/topology/static_routes.py"""

import pytest

from sitegen.catalog import CatalogRegistry
from sitegen.errors import ConfigIntegrityError, SlugCollisionError
from sitegen.models import CityEntry, PageKind
from sitegen.topology.static_routes import (
    enumerate_city_params,
    enumerate_route_params,
    get_supported_routes,
    verify_bijection,
)
from sitegen.topology.url_space import BuildOptions, build


class TestCityParams:
    def test_one_entry_per_city(self, sample_registry):
        assert enumerate_city_params(sample_registry) == [
            {"state": "ca", "city": "san-francisco"},
            {"state": "ca", "city": "fresno"},
        ]

    def test_matches_city_homes(self, make_registry):
        registry = make_registry(cities=7, occasions=3, hospitals=2)
        params = {(p["state"], p["city"]) for p in enumerate_city_params(registry)}
        homes = {
            (d.city.state_slug, d.city.city_slug)
            for d in build(registry) if d.kind is PageKind.CITY_HOME
        }
        assert params == homes
        assert len(params) == 7

    def test_empty_registry(self):
        assert enumerate_city_params(CatalogRegistry(cities=[])) == []


class TestRouteParams:
    def test_occasion_route(self, sample_registry):
        params = enumerate_route_params(sample_registry, "flowers/[occasion]")
        assert params[0] == {"state": "ca", "city": "san-francisco", "occasion": "birthday"}
        assert len(params) == 2 * 2

    def test_blog_cross_product(self, sample_registry):
        params = enumerate_route_params(sample_registry, "blog/[slug]")
        assert len(params) == 2 * 2
        assert {p["city"] for p in params} == {"san-francisco", "fresno"}

    def test_hospital_route_uses_slugs(self, sample_registry):
        params = enumerate_route_params(sample_registry, "hospital/[hospital]")
        assert {"state": "ca", "city": "fresno", "hospital": "valley-childrens-hospital"} in params

    def test_venue_route(self, sample_registry):
        options = BuildOptions(include_venues=True)
        params = enumerate_route_params(sample_registry, "venue/[venue]", options)
        assert [p["venue"] for p in params] == ["city-hall", "the-presidio"]

    def test_collision_raises(self):
        city = CityEntry(state_slug="ca", city_slug="oakland", neighborhoods=("Uptown", "UPTOWN!"))
        registry = CatalogRegistry(cities=[city])
        with pytest.raises(SlugCollisionError):
            enumerate_route_params(registry, "neighborhood/[neighborhood]")

    def test_unknown_route(self, sample_registry):
        with pytest.raises(ValueError, match="Unknown route"):
            enumerate_route_params(sample_registry, "product/[sku]")

    def test_supported_routes(self):
        routes = get_supported_routes()
        assert "hospital/[hospital]" in routes
        assert "funeral-home/[funeral-home]" in routes
        assert len(routes) == 10

    @pytest.mark.parametrize("route, kind", [
        ("flowers/[occasion]", PageKind.OCCASION),
        ("shop/[product-type]", PageKind.PRODUCT_TYPE),
        ("seasonal/[season]", PageKind.SEASONAL),
        ("guides/[slug]", PageKind.GUIDE),
        ("funeral/[category]", PageKind.FUNERAL_TYPE),
        ("blog/[slug]", PageKind.BLOG_POST),
        ("hospital/[hospital]", PageKind.HOSPITAL),
        ("neighborhood/[neighborhood]", PageKind.NEIGHBORHOOD),
        ("funeral-home/[funeral-home]", PageKind.FUNERAL_HOME),
        ("venue/[venue]", PageKind.VENUE),
    ])
    def test_routes_match_sitemap_paths(self, sample_registry, route, kind):
        """Every static param renders to a path the sitemap advertises, and vice versa."""
        options = BuildOptions(include_funeral_homes=True, include_venues=True)
        sitemap_paths = {d.path for d in build(sample_registry, options) if d.kind is kind}
        segment = route.split("/")[0]
        static_paths = {
            f"/{p['state']}/{p['city']}/{segment}/{list(p.values())[2]}/"
            for p in enumerate_route_params(sample_registry, route, options)
        }
        assert static_paths == sitemap_paths

    def test_switched_off_routes_have_no_params(self, sample_registry):
        assert enumerate_route_params(sample_registry, "venue/[venue]") == []
        assert enumerate_route_params(sample_registry, "funeral-home/[funeral-home]") == []

    def test_supported_routes_follow_options(self):
        assert "venue/[venue]" not in get_supported_routes(BuildOptions())
        assert "funeral-home/[funeral-home]" not in get_supported_routes(BuildOptions())
        assert "venue/[venue]" in get_supported_routes(BuildOptions(include_venues=True))
        assert len(get_supported_routes(BuildOptions())) == 8

    @pytest.mark.parametrize("options", [
        BuildOptions(),
        BuildOptions(include_venues=True),
        BuildOptions(include_funeral_homes=True, include_venues=True),
    ])
    def test_every_static_path_is_in_sitemap(self, sample_registry, options):
        sitemap_paths = {d.path for d in build(sample_registry, options)}
        static_paths = {
            f"/{p['state']}/{p['city']}/{route.split('/')[0]}/{list(p.values())[2]}/"
            for route in get_supported_routes()
            for p in enumerate_route_params(sample_registry, route, options)
        }
        assert static_paths <= sitemap_paths


class TestVerifyBijection:
    def test_passes_for_own_descriptors(self, sample_registry):
        verify_bijection(sample_registry, build(sample_registry))

    def test_detects_city_missing_from_sitemap(self, sample_registry):
        descriptors = [d for d in build(sample_registry) if d.city.city_slug != "fresno"]
        with pytest.raises(ConfigIntegrityError, match="ca/fresno"):
            verify_bijection(sample_registry, descriptors)

    def test_detects_city_not_prerendered(self, sample_registry, make_registry):
        other = make_registry(cities=1)
        descriptors = build(sample_registry) + build(other)
        with pytest.raises(ConfigIntegrityError, match="ca/city-0"):
            verify_bijection(sample_registry, descriptors)
