"""
Site topology.

Modules:
    url_space     - UrlSpaceBuilder, the combinatorial expansion of the catalogs
    metadata      - Page kind -> (changefreq, priority) taxonomy
    static_routes - Static route params for the page-rendering layer
    report        - Per-kind / per-city counts for a run
"""

from .metadata import PAGE_METADATA, assign
from .report import TopologyReport
from .static_routes import (
    enumerate_city_params,
    enumerate_route_params,
    get_supported_routes,
    verify_bijection,
)
from .url_space import BuildOptions, UrlSpaceBuilder, build, page_path

__all__ = [
    'PAGE_METADATA',
    'assign',
    'TopologyReport',
    'enumerate_city_params',
    'enumerate_route_params',
    'get_supported_routes',
    'verify_bijection',
    'BuildOptions',
    'UrlSpaceBuilder',
    'build',
    'page_path',
]
