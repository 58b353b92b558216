"""
Catalog Registry

Read-only collection of the configuration tables the site topology is
derived from. Validated once at construction; no I/O after load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..common import config_loader
from ..common.slugs import is_valid_slug
from ..errors import ConfigIntegrityError
from ..models import CatalogItem, CityEntry

logger = logging.getLogger(__name__)


def _as_items(raw: Iterable[Any], dimension: str) -> Tuple[CatalogItem, ...]:
    """Convert raw YAML entries ({slug, name|title} or bare slug strings) to items."""
    items = []
    for entry in raw:
        if isinstance(entry, str):
            items.append(CatalogItem(slug=entry))
        elif isinstance(entry, dict):
            items.append(CatalogItem(
                slug=str(entry.get('slug') or ''),
                name=str(entry.get('name') or entry.get('title') or ''),
            ))
        else:
            raise ConfigIntegrityError(
                f"{dimension}: entry must be a mapping or a slug, got {type(entry).__name__}"
            )
    return tuple(items)


def _check_dimension(items: Sequence[CatalogItem], dimension: str) -> None:
    seen: set[str] = set()
    for item in items:
        if not is_valid_slug(item.slug):
            raise ConfigIntegrityError(f"{dimension}: invalid slug {item.slug!r}")
        if item.slug in seen:
            raise ConfigIntegrityError(f"{dimension}: duplicate slug {item.slug!r}")
        seen.add(item.slug)


class CatalogRegistry:
    """
    In-memory catalog tables for one build.

    The URL space builder and the static route enumerator both take the
    same registry instance, so the sitemap and the pre-rendered routes
    share one source of truth.

    Usage::

        registry = CatalogRegistry.from_config()
        for city in registry.list_cities():
            registry.hospitals_of(city)
    """

    def __init__(
        self,
        cities: Iterable[CityEntry],
        occasions: Iterable[CatalogItem] = (),
        product_types: Iterable[CatalogItem] = (),
        seasonal: Iterable[CatalogItem] = (),
        funeral_types: Iterable[CatalogItem] = (),
        guides: Iterable[CatalogItem] = (),
        blog_posts: Iterable[CatalogItem] = (),
    ):
        self._cities: Tuple[CityEntry, ...] = tuple(cities)
        self._occasions = tuple(occasions)
        self._product_types = tuple(product_types)
        self._seasonal = tuple(seasonal)
        self._funeral_types = tuple(funeral_types)
        self._guides = tuple(guides)
        self._blog_posts = tuple(blog_posts)

        self._validate()
        self._by_key: Dict[str, CityEntry] = {city.key: city for city in self._cities}

    def _validate(self) -> None:
        """Fail fast on malformed catalogs."""
        for items, dimension in (
            (self._occasions, 'occasions'),
            (self._product_types, 'product_types'),
            (self._seasonal, 'seasonal'),
            (self._funeral_types, 'funeral_types'),
            (self._guides, 'guides'),
            (self._blog_posts, 'blog_posts'),
        ):
            _check_dimension(items, dimension)

        seen_keys: set[str] = set()
        for city in self._cities:
            if not isinstance(city, CityEntry):
                raise ConfigIntegrityError(f"cities: expected CityEntry, got {type(city).__name__}")
            if city.key in seen_keys:
                raise ConfigIntegrityError(f"cities: duplicate city {city.key!r}")
            seen_keys.add(city.key)

    @classmethod
    def from_config(cls, config_dir: Optional[Union[str, Path]] = None) -> "CatalogRegistry":
        """
        Load every catalog from the YAML configuration directory.

        Args:
            config_dir: Directory holding cities.yaml, categories.yaml,
                guides.yaml and blog_posts.yaml (default: repo config/)

        Returns:
            Validated registry

        Raises:
            FileNotFoundError: If a catalog file is missing
            ConfigIntegrityError: If any catalog is malformed
        """
        cities = [CityEntry.from_dict(raw) for raw in config_loader.load_cities(config_dir)]
        categories = config_loader.load_categories(config_dir)

        registry = cls(
            cities=cities,
            occasions=_as_items(categories['occasions'], 'occasions'),
            product_types=_as_items(categories['product_types'], 'product_types'),
            seasonal=_as_items(categories['seasonal'], 'seasonal'),
            funeral_types=_as_items(categories['funeral_types'], 'funeral_types'),
            guides=_as_items(config_loader.load_guides(config_dir), 'guides'),
            blog_posts=_as_items(config_loader.load_blog_posts(config_dir), 'blog_posts'),
        )
        logger.info(
            "Loaded catalogs: %d cities, %d occasions, %d product types, %d seasonal, "
            "%d funeral types, %d guides, %d blog posts",
            len(registry._cities), len(registry._occasions), len(registry._product_types),
            len(registry._seasonal), len(registry._funeral_types), len(registry._guides),
            len(registry._blog_posts),
        )
        return registry

    # ── Catalog accessors ─────────────────────────────────────────────────────

    def list_cities(self) -> Tuple[CityEntry, ...]:
        return self._cities

    def list_occasions(self) -> Tuple[CatalogItem, ...]:
        return self._occasions

    def list_product_types(self) -> Tuple[CatalogItem, ...]:
        return self._product_types

    def list_seasonal(self) -> Tuple[CatalogItem, ...]:
        return self._seasonal

    def list_funeral_types(self) -> Tuple[CatalogItem, ...]:
        return self._funeral_types

    def list_guides(self) -> Tuple[CatalogItem, ...]:
        return self._guides

    def list_blog_posts(self) -> Tuple[CatalogItem, ...]:
        return self._blog_posts

    def list_blog_slugs(self) -> List[str]:
        """Blog slugs are global: every city gets the full list."""
        return [post.slug for post in self._blog_posts]

    # ── Per-city free-text dimensions ─────────────────────────────────────────

    def hospitals_of(self, city: CityEntry) -> Tuple[str, ...]:
        return self._own(city).hospitals

    def neighborhoods_of(self, city: CityEntry) -> Tuple[str, ...]:
        return self._own(city).neighborhoods

    def funeral_homes_of(self, city: CityEntry) -> Tuple[str, ...]:
        return self._own(city).funeral_homes

    def venues_of(self, city: CityEntry) -> Tuple[str, ...]:
        return self._own(city).venues

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get_city(self, state_slug: str, city_slug: str) -> Optional[CityEntry]:
        """Get city by state and city slugs, or None."""
        return self._by_key.get(f"{state_slug}/{city_slug}")

    def city_exists(self, state_slug: str, city_slug: str) -> bool:
        return f"{state_slug}/{city_slug}" in self._by_key

    def _own(self, city: CityEntry) -> CityEntry:
        """Return the registry's own record for city; reject foreign cities."""
        owned = self._by_key.get(city.key)
        if owned is None:
            raise KeyError(f"City {city.key!r} is not in this registry")
        return owned

    def __repr__(self) -> str:
        return f"CatalogRegistry(cities={len(self._cities)})"
