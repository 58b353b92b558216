"""
Data models for the site topology.

This module contains pure data classes with no business logic.
"""

from .catalog import CatalogItem, CityEntry
from .page import (
    ChangeFrequency,
    PageDescriptor,
    PageKind,
    PageMetadata,
    SitemapDocument,
    SitemapEntry,
)

__all__ = [
    'CatalogItem',
    'CityEntry',
    'ChangeFrequency',
    'PageDescriptor',
    'PageKind',
    'PageMetadata',
    'SitemapDocument',
    'SitemapEntry',
]
