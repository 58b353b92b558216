"""
Static Route Enumerator

Lists the route parameters the page-rendering layer must pre-build.
Always reads the same CatalogRegistry instance as the URL space builder,
so the pre-rendered set and the sitemap cannot diverge.

Dynamic routes (product SKUs, search) are not enumerated.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..catalog import CatalogRegistry
from ..common import constants
from ..errors import ConfigIntegrityError
from ..models import CityEntry, PageDescriptor, PageKind
from .url_space import BuildOptions, free_text_segments

logger = logging.getLogger(__name__)

RouteParams = Dict[str, str]

_SlugSource = Callable[[CatalogRegistry, CityEntry], Iterable[str]]


def _items(accessor: str) -> _SlugSource:
    return lambda registry, city: [item.slug for item in getattr(registry, accessor)()]


def _free_text(accessor: str, segment: str) -> _SlugSource:
    def source(registry: CatalogRegistry, city: CityEntry) -> Iterable[str]:
        names = getattr(registry, accessor)(city)
        return [slug for _name, slug in free_text_segments(city, names, segment)]
    return source


# route template below [state]/[city] -> (param name, per-city slug source)
CITY_ROUTES: Dict[str, Tuple[str, _SlugSource]] = {
    f"{constants.OCCASION_SEGMENT}/[occasion]": ('occasion', _items('list_occasions')),
    f"{constants.PRODUCT_TYPE_SEGMENT}/[product-type]": ('product-type', _items('list_product_types')),
    f"{constants.SEASONAL_SEGMENT}/[season]": ('season', _items('list_seasonal')),
    f"{constants.GUIDES_SEGMENT}/[slug]": ('slug', _items('list_guides')),
    f"{constants.FUNERAL_TYPE_SEGMENT}/[category]": ('category', _items('list_funeral_types')),
    f"{constants.BLOG_SEGMENT}/[slug]": ('slug', lambda registry, city: registry.list_blog_slugs()),
    f"{constants.HOSPITAL_SEGMENT}/[hospital]": (
        'hospital', _free_text('hospitals_of', constants.HOSPITAL_SEGMENT)),
    f"{constants.NEIGHBORHOOD_SEGMENT}/[neighborhood]": (
        'neighborhood', _free_text('neighborhoods_of', constants.NEIGHBORHOOD_SEGMENT)),
    f"{constants.FUNERAL_HOME_SEGMENT}/[funeral-home]": (
        'funeral-home', _free_text('funeral_homes_of', constants.FUNERAL_HOME_SEGMENT)),
    f"{constants.VENUE_SEGMENT}/[venue]": (
        'venue', _free_text('venues_of', constants.VENUE_SEGMENT)),
}


def enumerate_city_params(registry: CatalogRegistry) -> List[RouteParams]:
    """
    One {state, city} entry per city, in registry order.

    Drives every city-scoped template ([state]/[city]/...).
    """
    return [
        {'state': city.state_slug, 'city': city.city_slug}
        for city in registry.list_cities()
    ]


def enumerate_route_params(
    registry: CatalogRegistry,
    route: str,
    options: Optional[BuildOptions] = None,
) -> List[RouteParams]:
    """
    Static params for one city-scoped content route.

    Args:
        registry: The registry the sitemap was built from
        route: Route template below [state]/[city], e.g. 'hospital/[hospital]'
        options: The BuildOptions the sitemap was built with; an opt-in
            route that is switched off has nothing to pre-render

    Returns:
        List of {state, city, <param>} dicts, cities in registry order

    Raises:
        ValueError: If the route is not a known static route
    """
    if route not in CITY_ROUTES:
        raise ValueError(f"Unknown route: {route}. Supported: {', '.join(CITY_ROUTES)}")

    options = options or BuildOptions()
    if not options.route_enabled(_segment(route)):
        logger.debug("Route %s is switched off, no params", route)
        return []

    param, source = CITY_ROUTES[route]
    params: List[RouteParams] = []
    for city in registry.list_cities():
        for slug in source(registry, city):
            params.append({'state': city.state_slug, 'city': city.city_slug, param: slug})
    return params


def get_supported_routes(options: Optional[BuildOptions] = None) -> List[str]:
    """
    Return the route templates that can be enumerated.

    With options, only the routes those options put in the sitemap.
    """
    if options is None:
        return list(CITY_ROUTES.keys())
    return [route for route in CITY_ROUTES if options.route_enabled(_segment(route))]


def _segment(route: str) -> str:
    return route.split('/', 1)[0]


def verify_bijection(registry: CatalogRegistry, descriptors: Iterable[PageDescriptor]) -> None:
    """
    Check that static city params and sitemap city homes are the same set.

    Raises:
        ConfigIntegrityError: If a city is pre-rendered but not advertised,
            or advertised but not pre-rendered
    """
    static_pairs = {(p['state'], p['city']) for p in enumerate_city_params(registry)}
    sitemap_pairs = {
        (d.city.state_slug, d.city.city_slug)
        for d in descriptors
        if d.kind is PageKind.CITY_HOME and d.city is not None
    }

    if static_pairs != sitemap_pairs:
        missing = sorted('/'.join(p) for p in static_pairs - sitemap_pairs)
        extra = sorted('/'.join(p) for p in sitemap_pairs - static_pairs)
        raise ConfigIntegrityError(
            f"Static routes and sitemap disagree: not in sitemap {missing}, "
            f"not pre-rendered {extra}"
        )
