"""
Generator errors.

Every error is fatal for the build: the generator stops before writing a
partial sitemap or a partial static-route list.
"""


class TopologyError(ValueError):
    """Base class for site topology build failures."""


class ConfigIntegrityError(TopologyError):
    """A catalog is malformed: duplicate slug, bad slug, or missing city identity."""


class SlugCollisionError(TopologyError):
    """Two entries map to the same URL path."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class EmptyNormalizationError(TopologyError):
    """A free-text name contains no alphanumeric characters."""

    def __init__(self, text: str, context: str = ""):
        where = f" ({context})" if context else ""
        super().__init__(f"Name {text!r}{where} normalizes to an empty slug")
        self.text = text
        self.context = context
