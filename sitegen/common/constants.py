"""
Shared constants for the site topology.

Route segments live here so the URL space builder and the static route
enumerator cannot drift apart.
"""

DEFAULT_SITE_URL = "https://goldenstateflowershop.com"

# Utility pages every city gets, in sitemap order
UTILITY_PAGES = ('faq', 'contact', 'delivery', 'privacy', 'terms')

# Route segment per content dimension: /{state}/{city}/{segment}/{slug}/
OCCASION_SEGMENT = 'flowers'
PRODUCT_TYPE_SEGMENT = 'shop'
SEASONAL_SEGMENT = 'seasonal'
GUIDES_SEGMENT = 'guides'
FUNERAL_TYPE_SEGMENT = 'funeral'
BLOG_SEGMENT = 'blog'
HOSPITAL_SEGMENT = 'hospital'
NEIGHBORHOOD_SEGMENT = 'neighborhood'
FUNERAL_HOME_SEGMENT = 'funeral-home'
VENUE_SEGMENT = 'venue'

# Sitemaps protocol limit per file
MAX_URLS_PER_SITEMAP = 50000
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
