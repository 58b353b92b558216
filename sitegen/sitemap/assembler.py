"""
Sitemap Assembler

Turns the descriptor set into a SitemapDocument: the global home first,
then every descriptor in builder order, each with its crawl metadata.
Duplicate paths fail the build instead of overwriting an entry.
"""

import logging
from datetime import date
from typing import Callable, Iterable, Optional

from ..errors import SlugCollisionError
from ..models import (
    PageDescriptor,
    PageKind,
    PageMetadata,
    SitemapDocument,
    SitemapEntry,
)
from ..topology.metadata import assign

logger = logging.getLogger(__name__)

HOME = PageDescriptor(path='/', kind=PageKind.HOME, city=None)


def absolute_url(site_url: str, path: str) -> str:
    """Join the site origin and an absolute path."""
    return f"{site_url.rstrip('/')}{path}"


def assemble(
    descriptors: Iterable[PageDescriptor],
    assign_metadata: Callable[[PageDescriptor], PageMetadata] = assign,
    *,
    site_url: str,
    build_date: Optional[date] = None,
) -> SitemapDocument:
    """
    Build the sitemap document.

    Args:
        descriptors: City-scoped descriptors from the URL space builder
        assign_metadata: Kind -> metadata lookup
        site_url: Origin for <loc>, e.g. 'https://example.com'
        build_date: lastmod for every entry (default: today)

    Returns:
        SitemapDocument with one entry per descriptor plus the global home

    Raises:
        SlugCollisionError: If two entries share a path
        ValueError: If metadata yields a priority outside [0, 1]
    """
    build_date = build_date or date.today()
    document = SitemapDocument(site_url=site_url.rstrip('/'), build_date=build_date)
    seen: dict = {}

    for descriptor in _with_home(descriptors):
        if descriptor.path in seen:
            first = seen[descriptor.path]
            raise SlugCollisionError(
                f"Duplicate sitemap path {descriptor.path} "
                f"({first.kind.value} and {descriptor.kind.value})",
                path=descriptor.path,
            )
        seen[descriptor.path] = descriptor

        metadata = assign_metadata(descriptor)
        if not 0.0 <= metadata.priority <= 1.0:
            raise ValueError(
                f"priority for {descriptor.kind.value} must be in [0, 1] (got {metadata.priority})"
            )

        document.entries.append(SitemapEntry(
            descriptor=descriptor,
            loc=absolute_url(site_url, descriptor.path),
            last_modified=build_date,
            change_frequency=metadata.change_frequency,
            priority=metadata.priority,
        ))

    logger.info("Assembled sitemap with %d URLs", len(document))
    return document


def _with_home(descriptors: Iterable[PageDescriptor]) -> Iterable[PageDescriptor]:
    yield HOME
    yield from descriptors
