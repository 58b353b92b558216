"""
Build pipeline.

Catalog registry -> URL space -> {metadata -> sitemap document; static routes}.
Everything is computed in memory; callers write files only after the
whole pipeline has succeeded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from .catalog import CatalogRegistry
from .common import constants
from .errors import ConfigIntegrityError
from .models import PageDescriptor, SitemapDocument
from .sitemap import assemble
from .topology import BuildOptions, assign, build, verify_bijection

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outputs of one generator run."""
    descriptors: List[PageDescriptor]
    document: SitemapDocument


def options_from_settings(settings: Dict[str, Any]) -> BuildOptions:
    """
    Read BuildOptions from site.yaml settings.

    Raises:
        ConfigIntegrityError: If utility_pages is not a list of unique slugs,
            or an include_* switch is not a YAML boolean
    """
    utility_pages = settings.get('utility_pages', list(constants.UTILITY_PAGES))
    if not isinstance(utility_pages, list):
        raise ConfigIntegrityError("site.yaml: 'utility_pages' must be a list of slugs")

    try:
        return BuildOptions(
            utility_pages=tuple(utility_pages),
            include_funeral_homes=settings.get('include_funeral_homes', False),
            include_venues=settings.get('include_venues', False),
        )
    except ConfigIntegrityError as e:
        raise ConfigIntegrityError(f"site.yaml: {e}") from e


def generate(
    registry: CatalogRegistry,
    site_url: str = constants.DEFAULT_SITE_URL,
    options: Optional[BuildOptions] = None,
    build_date: Optional[date] = None,
) -> BuildResult:
    """
    Run the whole topology build.

    Raises:
        ConfigIntegrityError, SlugCollisionError, EmptyNormalizationError:
            on any catalog defect; nothing is returned in that case
    """
    descriptors = build(registry, options)
    logger.info("Generated %d city-scoped pages for %d cities", len(descriptors), len(registry.list_cities()))
    verify_bijection(registry, descriptors)
    document = assemble(descriptors, assign, site_url=site_url, build_date=build_date)
    return BuildResult(descriptors=descriptors, document=document)
