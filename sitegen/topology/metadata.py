"""
Metadata Assigner

Fixed crawl taxonomy: each page kind maps to one (changefreq, priority)
pair. Catalogs carry no per-item revision dates, so lastmod is the build
date for every entry (applied by the assembler).
"""

from typing import Dict

from ..models import ChangeFrequency, PageDescriptor, PageKind, PageMetadata

WEEKLY = ChangeFrequency.WEEKLY
MONTHLY = ChangeFrequency.MONTHLY

PAGE_METADATA: Dict[PageKind, PageMetadata] = {
    PageKind.HOME: PageMetadata(WEEKLY, 1.0),
    PageKind.CITY_HOME: PageMetadata(WEEKLY, 0.9),
    PageKind.OCCASION: PageMetadata(WEEKLY, 0.8),
    PageKind.PRODUCT_TYPE: PageMetadata(WEEKLY, 0.7),
    PageKind.SEASONAL: PageMetadata(WEEKLY, 0.7),
    PageKind.UTILITY: PageMetadata(MONTHLY, 0.5),
    PageKind.GUIDES_HUB: PageMetadata(WEEKLY, 0.7),
    PageKind.GUIDE: PageMetadata(MONTHLY, 0.6),
    PageKind.FUNERAL_TYPE: PageMetadata(WEEKLY, 0.7),
    PageKind.BLOG_HUB: PageMetadata(WEEKLY, 0.7),
    PageKind.BLOG_POST: PageMetadata(MONTHLY, 0.6),
    PageKind.HOSPITAL: PageMetadata(MONTHLY, 0.6),
    PageKind.NEIGHBORHOOD: PageMetadata(MONTHLY, 0.6),
    PageKind.FUNERAL_HOME: PageMetadata(MONTHLY, 0.6),
    PageKind.VENUE: PageMetadata(MONTHLY, 0.6),
}


def assign(descriptor: PageDescriptor) -> PageMetadata:
    """Look up the crawl metadata for a descriptor's kind."""
    return PAGE_METADATA[descriptor.kind]
