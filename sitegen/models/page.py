"""
Page and sitemap data models.

Derived, disposable projections of the catalog registry, recomputed on
every build.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from .catalog import CityEntry


class PageKind(str, Enum):
    """Content type of a generated page."""
    HOME = "home"
    CITY_HOME = "city_home"
    OCCASION = "occasion"
    PRODUCT_TYPE = "product_type"
    SEASONAL = "seasonal"
    UTILITY = "utility"
    GUIDES_HUB = "guides_hub"
    GUIDE = "guide"
    FUNERAL_TYPE = "funeral_type"
    BLOG_HUB = "blog_hub"
    BLOG_POST = "blog_post"
    HOSPITAL = "hospital"
    NEIGHBORHOOD = "neighborhood"
    FUNERAL_HOME = "funeral_home"
    VENUE = "venue"


class ChangeFrequency(str, Enum):
    """<changefreq> values allowed by the sitemaps protocol."""
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class PageDescriptor:
    """A single logical page, identified by its final URL path."""
    path: str                       # absolute, trailing slash, e.g. /ca/fresno/faq/
    kind: PageKind
    city: Optional[CityEntry] = None  # None only for the global home


@dataclass(frozen=True)
class PageMetadata:
    """Crawl hints for one page kind."""
    change_frequency: ChangeFrequency
    priority: float


@dataclass(frozen=True)
class SitemapEntry:
    """A descriptor enriched with crawl metadata."""
    descriptor: PageDescriptor
    loc: str                        # absolute URL
    last_modified: date
    change_frequency: ChangeFrequency
    priority: float

    @property
    def path(self) -> str:
        return self.descriptor.path

    @property
    def kind(self) -> PageKind:
        return self.descriptor.kind


@dataclass
class SitemapDocument:
    """Ordered sitemap entries for one build."""
    site_url: str
    build_date: date
    entries: List[SitemapEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def urls(self) -> List[str]:
        """Absolute URLs in emission order."""
        return [entry.loc for entry in self.entries]
