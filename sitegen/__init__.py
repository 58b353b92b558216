"""
Site Topology Generator

Derives the complete URL space of the localized storefront from static
catalogs, emits the sitemap and enumerates static route parameters.

Modules:
    models      - Data models (CityEntry, CatalogItem, PageDescriptor, SitemapEntry)
    common      - Shared utilities (config loader, slug normalizer, logging)
    catalog     - Read-only catalog registry loaded from YAML configuration
    topology    - URL space expansion, metadata taxonomy, static routes
    sitemap     - Sitemap assembly and XML / robots.txt output
"""
