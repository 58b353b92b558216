"""
URL Space Builder

Expands the catalog registry into every city-scoped page descriptor.

For each city, in a fixed order (stable sitemaps diff cleanly between
builds): city home, occasions, product types, seasonal, utility pages,
guides hub + guides, funeral types, blog hub + posts, hospitals,
neighborhoods, then the opt-in funeral homes and venues.

Ranking (priority / changefreq) is not decided here; see metadata.py.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..catalog import CatalogRegistry
from ..common import constants
from ..common.slugs import is_valid_slug, require_slug
from ..errors import ConfigIntegrityError, SlugCollisionError
from ..models import CityEntry, PageDescriptor, PageKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildOptions:
    """Switches for the optional parts of the URL space."""
    utility_pages: Tuple[str, ...] = constants.UTILITY_PAGES
    include_funeral_homes: bool = False
    include_venues: bool = False

    def __post_init__(self):
        seen: set[str] = set()
        for page in self.utility_pages:
            if not isinstance(page, str) or not is_valid_slug(page):
                raise ConfigIntegrityError(f"Invalid utility page slug {page!r}")
            if page in seen:
                raise ConfigIntegrityError(f"Duplicate utility page slug {page!r}")
            seen.add(page)
        for name in ('include_funeral_homes', 'include_venues'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigIntegrityError(f"{name} must be true or false, got {value!r}")

    def route_enabled(self, segment: str) -> bool:
        """Return False for an opt-in free-text dimension that is switched off."""
        if segment == constants.FUNERAL_HOME_SEGMENT:
            return self.include_funeral_homes
        if segment == constants.VENUE_SEGMENT:
            return self.include_venues
        return True


def page_path(city: CityEntry, *segments: str) -> str:
    """
    Compose an absolute, trailing-slash-terminated path under a city.

    Example:
        >>> page_path(city, 'hospital', 'st-marys-hospital')
        '/ca/san-francisco/hospital/st-marys-hospital/'
    """
    tail = ''.join(f"/{segment}" for segment in segments)
    return f"{city.base_path}{tail}/"


def free_text_segments(city: CityEntry, names: Sequence[str], dimension: str) -> List[Tuple[str, str]]:
    """
    Slug every free-text name of one city dimension.

    Args:
        city: City the names belong to
        names: Display names as entered in the catalog
        dimension: Route segment, used in error messages

    Returns:
        List of (display name, slug) pairs in catalog order

    Raises:
        EmptyNormalizationError: If a name has no alphanumeric characters
        SlugCollisionError: If two names produce the same slug
    """
    pairs: List[Tuple[str, str]] = []
    owners: dict[str, str] = {}
    for name in names:
        slug = require_slug(name, f"{city.key} {dimension}")
        if slug in owners:
            raise SlugCollisionError(
                f"{city.key}: {dimension} names {owners[slug]!r} and {name!r} "
                f"both normalize to {slug!r}",
                path=page_path(city, dimension, slug),
            )
        owners[slug] = name
        pairs.append((name, slug))
    return pairs


class UrlSpaceBuilder:
    """
    Lazily enumerates page descriptors for every city in a registry.

    Each city is an independent shard: concatenating
    iter_city_descriptors() over list_cities() in order yields exactly
    iter_descriptors().
    """

    def __init__(self, registry: CatalogRegistry, options: BuildOptions | None = None):
        self.registry = registry
        self.options = options or BuildOptions()

    def iter_descriptors(self) -> Iterator[PageDescriptor]:
        for city in self.registry.list_cities():
            yield from self.iter_city_descriptors(city)

    def iter_city_descriptors(self, city: CityEntry) -> Iterator[PageDescriptor]:
        registry = self.registry

        yield PageDescriptor(page_path(city), PageKind.CITY_HOME, city)

        yield from self._catalog_pages(
            city, constants.OCCASION_SEGMENT, registry.list_occasions(), PageKind.OCCASION)
        yield from self._catalog_pages(
            city, constants.PRODUCT_TYPE_SEGMENT, registry.list_product_types(), PageKind.PRODUCT_TYPE)
        yield from self._catalog_pages(
            city, constants.SEASONAL_SEGMENT, registry.list_seasonal(), PageKind.SEASONAL)

        for page in self.options.utility_pages:
            yield PageDescriptor(page_path(city, page), PageKind.UTILITY, city)

        yield PageDescriptor(page_path(city, constants.GUIDES_SEGMENT), PageKind.GUIDES_HUB, city)
        yield from self._catalog_pages(
            city, constants.GUIDES_SEGMENT, registry.list_guides(), PageKind.GUIDE)

        yield from self._catalog_pages(
            city, constants.FUNERAL_TYPE_SEGMENT, registry.list_funeral_types(), PageKind.FUNERAL_TYPE)

        # Blog posts are global; every city gets the full cross product
        yield PageDescriptor(page_path(city, constants.BLOG_SEGMENT), PageKind.BLOG_HUB, city)
        for slug in registry.list_blog_slugs():
            yield PageDescriptor(page_path(city, constants.BLOG_SEGMENT, slug), PageKind.BLOG_POST, city)

        yield from self._free_text_pages(
            city, constants.HOSPITAL_SEGMENT, registry.hospitals_of(city), PageKind.HOSPITAL)
        yield from self._free_text_pages(
            city, constants.NEIGHBORHOOD_SEGMENT, registry.neighborhoods_of(city), PageKind.NEIGHBORHOOD)

        if self.options.route_enabled(constants.FUNERAL_HOME_SEGMENT):
            yield from self._free_text_pages(
                city, constants.FUNERAL_HOME_SEGMENT, registry.funeral_homes_of(city), PageKind.FUNERAL_HOME)
        if self.options.route_enabled(constants.VENUE_SEGMENT):
            yield from self._free_text_pages(
                city, constants.VENUE_SEGMENT, registry.venues_of(city), PageKind.VENUE)

    @staticmethod
    def _catalog_pages(city, segment, items, kind) -> Iterator[PageDescriptor]:
        for item in items:
            yield PageDescriptor(page_path(city, segment, item.slug), kind, city)

    @staticmethod
    def _free_text_pages(city, segment, names, kind) -> Iterator[PageDescriptor]:
        # Slug the whole list first so a collision fails before any page is yielded
        for _name, slug in free_text_segments(city, names, segment):
            yield PageDescriptor(page_path(city, segment, slug), kind, city)

    def build(self) -> List[PageDescriptor]:
        """Materialize every descriptor in emission order."""
        descriptors = list(self.iter_descriptors())
        logger.debug(
            "Built %d page descriptors for %d cities",
            len(descriptors), len(self.registry.list_cities()),
        )
        return descriptors


def build(registry: CatalogRegistry, options: BuildOptions | None = None) -> List[PageDescriptor]:
    """
    Build the full city-scoped URL space.

    Args:
        registry: Catalog registry (shared with the static route enumerator)
        options: Optional dimensions and utility page list

    Returns:
        Page descriptors in deterministic order (the global home is added
        by the sitemap assembler, not here)
    """
    return UrlSpaceBuilder(registry, options).build()


def merge_shards(shards: Iterable[Sequence[PageDescriptor]]) -> List[PageDescriptor]:
    """Concatenate per-city shards given in registry order."""
    merged: List[PageDescriptor] = []
    for shard in shards:
        merged.extend(shard)
    return merged
