"""
Configuration Loader

Loads the YAML catalogs (cities, categories, guides, blog posts) and the
site settings used by the sitemap build.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..errors import ConfigIntegrityError

PathLike = Union[str, Path]


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str, config_dir: Optional[PathLike] = None) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'cities.yaml')
        config_dir: Directory to read from (default: the repo's config/)

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigIntegrityError: If the file does not contain a mapping
    """
    base = Path(config_dir) if config_dir is not None else _get_config_dir()
    config_path = base / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigIntegrityError(f"{config_path}: top level must be a mapping")
    return data


def _require_list(config: Dict[str, Any], key: str, filename: str) -> List[Any]:
    value = config.get(key, [])
    if not isinstance(value, list):
        raise ConfigIntegrityError(f"{filename}: '{key}' must be a list")
    return value


def load_cities(config_dir: Optional[PathLike] = None) -> List[Dict[str, Any]]:
    """
    Load city configuration.

    Returns:
        List of raw city mappings in file order

    Example:
        [
            {
                'state_slug': 'ca',
                'city_slug': 'san-francisco',
                'city_name': 'San Francisco',
                'hospitals': ['UCSF Medical Center', ...],
                'neighborhoods': ['Mission', 'SoMa', ...],
            },
            ...
        ]
    """
    config = load_config('cities.yaml', config_dir)
    return _require_list(config, 'cities', 'cities.yaml')


def load_categories(config_dir: Optional[PathLike] = None) -> Dict[str, List[Dict[str, Any]]]:
    """
    Load the category dimensions.

    Returns:
        Dictionary with 'occasions', 'product_types', 'seasonal' and
        'funeral_types', each a list of {slug, name} mappings
    """
    config = load_config('categories.yaml', config_dir)
    return {
        key: _require_list(config, key, 'categories.yaml')
        for key in ('occasions', 'product_types', 'seasonal', 'funeral_types')
    }


def load_guides(config_dir: Optional[PathLike] = None) -> List[Dict[str, Any]]:
    """Load guide entries ({slug, title})."""
    config = load_config('guides.yaml', config_dir)
    return _require_list(config, 'guides', 'guides.yaml')


def load_blog_posts(config_dir: Optional[PathLike] = None) -> List[Dict[str, Any]]:
    """Load blog post entries ({slug, title}). Blog posts are shared by every city."""
    config = load_config('blog_posts.yaml', config_dir)
    return _require_list(config, 'blog_posts', 'blog_posts.yaml')


def load_site_settings(config_dir: Optional[PathLike] = None) -> Dict[str, Any]:
    """
    Load site settings.

    Returns:
        Dictionary with site_url, sitemap_filename and the optional
        free-text dimensions to publish (include_funeral_homes, include_venues)
    """
    return load_config('site.yaml', config_dir)
