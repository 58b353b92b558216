"""
Catalog registry.

Modules:
    registry - CatalogRegistry, the single source of truth for a build
"""

from .registry import CatalogRegistry

__all__ = ['CatalogRegistry']
