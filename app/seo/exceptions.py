# seotemplates/app/seo/exceptions.py


class SeoError(Exception):
    """Base class for errors raised by the seo app."""


class UnknownPageType(SeoError, KeyError):
    """Raised when rendering or looking up a page type that was never registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"No SEO page type registered under '{self.name}'."


class DuplicatePageType(SeoError, ValueError):
    """Raised when a page type name is registered twice or clashes with the global key."""
