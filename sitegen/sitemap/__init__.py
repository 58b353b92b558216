"""
Sitemap output.

Modules:
    assembler - assemble() descriptors + metadata into a SitemapDocument
    writer    - sitemap XML / sitemap index / robots.txt rendering
"""

from .assembler import HOME, absolute_url, assemble
from .writer import render_sitemaps, robots_txt, urlset_xml, write_sitemaps

__all__ = [
    'HOME',
    'absolute_url',
    'assemble',
    'render_sitemaps',
    'robots_txt',
    'urlset_xml',
    'write_sitemaps',
]
