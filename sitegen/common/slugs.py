"""
Slug Normalization

Converts free-text display names (hospitals, neighborhoods, venues) to URL
path segments. The output must stay stable: search engines have already
indexed pages under these slugs.
"""

import re
import unicodedata
from typing import Iterable, Optional

from ..errors import EmptyNormalizationError

# Straight and typographic apostrophes are deleted, not turned into hyphens
APOSTROPHE_RE = re.compile(r"['’]")
NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')
EDGE_HYPHEN_RE = re.compile(r'(^-|-$)')

SLUG_RE = re.compile(r'[a-z0-9]+(?:-[a-z0-9]+)*')


def _fold_accents(text: str) -> str:
    """Drop combining marks so that 'é' becomes 'e' instead of a separator."""
    decomposed = unicodedata.normalize('NFKD', text)
    return ''.join(char for char in decomposed if not unicodedata.combining(char))


def normalize(text: str) -> str:
    """
    Generate a URL path segment from a display name.

    Folds accents and compatibility forms (NFKD), lowercases, deletes
    apostrophes, collapses every run of non-alphanumeric characters into
    a single hyphen and strips the leading/trailing hyphen.

    Args:
        text: Display name, e.g. a hospital or neighborhood

    Returns:
        URL-safe segment, or an empty string when the text has no
        alphanumeric characters

    Example:
        >>> normalize("St. Mary's Hospital")
        'st-marys-hospital'
        >>> normalize("O'Brien's / Café Noir!")
        'obriens-cafe-noir'
    """
    slug = _fold_accents(text).lower()
    slug = APOSTROPHE_RE.sub('', slug)
    slug = NON_ALNUM_RE.sub('-', slug)
    return EDGE_HYPHEN_RE.sub('', slug)


def is_valid_slug(segment: str) -> bool:
    """Return True if segment is a non-empty, already-normalized path segment."""
    return bool(SLUG_RE.fullmatch(segment))


def require_slug(text: str, context: str = '') -> str:
    """
    Normalize text and refuse an empty result.

    Args:
        text: Display name to normalize
        context: Where the name came from, used in the error message

    Returns:
        Non-empty URL segment

    Raises:
        EmptyNormalizationError: If the name has no alphanumeric characters
    """
    slug = normalize(text)
    if not slug:
        raise EmptyNormalizationError(text, context)
    return slug


def resolve_slug(segment: str, names: Iterable[str]) -> Optional[str]:
    """
    Find the display name that produced a URL segment.

    Args:
        segment: Path segment taken from a route
        names: Candidate display names

    Returns:
        The first matching display name, or None
    """
    for name in names:
        if normalize(name) == segment:
            return name
    return None
