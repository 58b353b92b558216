"""
Catalog data models.

Immutable records loaded once from configuration at build start.
No business logic - only structure and identity checks.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..common.slugs import is_valid_slug
from ..errors import ConfigIntegrityError


@dataclass(frozen=True)
class CatalogItem:
    """Entry of a non-free-text dimension (occasion, product type, guide, ...)."""
    slug: str
    name: str = ""


@dataclass(frozen=True)
class CityEntry:
    """
    A city served by the storefront.

    state_slug and city_slug are pre-normalized path segments. The
    free-text lists hold display names exactly as entered; they are
    slugged by the URL space builder, never here.
    """

    state_slug: str
    city_slug: str
    city_name: str = ""
    state_name: str = ""

    # Free-text dimensions (display names, not slugs)
    hospitals: Tuple[str, ...] = field(default_factory=tuple)
    neighborhoods: Tuple[str, ...] = field(default_factory=tuple)
    funeral_homes: Tuple[str, ...] = field(default_factory=tuple)
    venues: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate identity fields after initialization."""
        for attr in ('state_slug', 'city_slug'):
            value = getattr(self, attr)
            if not value:
                raise ConfigIntegrityError(f"City {self.city_name!r} is missing {attr}")
            if not is_valid_slug(value):
                raise ConfigIntegrityError(
                    f"City {self.city_name!r}: {attr} {value!r} is not a valid path segment"
                )

    @property
    def key(self) -> str:
        """Registry key, e.g. 'ca/san-francisco'."""
        return f"{self.state_slug}/{self.city_slug}"

    @property
    def base_path(self) -> str:
        """Path prefix without trailing slash, e.g. '/ca/san-francisco'."""
        return f"/{self.state_slug}/{self.city_slug}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CityEntry":
        """Build a CityEntry from a raw cities.yaml mapping."""
        if not isinstance(data, dict):
            raise ConfigIntegrityError(f"City entry must be a mapping, got {type(data).__name__}")

        free_text = {}
        for attr in ('hospitals', 'neighborhoods', 'funeral_homes', 'venues'):
            names = data.get(attr) or []
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                raise ConfigIntegrityError(
                    f"City {data.get('city_name', '?')!r}: '{attr}' must be a list of names"
                )
            free_text[attr] = tuple(names)

        return cls(
            state_slug=str(data.get('state_slug') or ''),
            city_slug=str(data.get('city_slug') or ''),
            city_name=str(data.get('city_name') or ''),
            state_name=str(data.get('state_name') or ''),
            **free_text,
        )
