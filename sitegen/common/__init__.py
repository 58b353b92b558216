# Common utilities
from .config_loader import (
    load_blog_posts,
    load_categories,
    load_cities,
    load_config,
    load_guides,
    load_site_settings,
)
from .log_config import setup_logging
from .slugs import is_valid_slug, normalize, require_slug, resolve_slug
