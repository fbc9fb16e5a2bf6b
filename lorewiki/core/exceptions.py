"""Custom exceptions for the LoreWiki markup engine."""


class WikiMarkupError(Exception):
    """Base exception for markup engine operations."""


class SanitizerUnavailableError(WikiMarkupError):
    """The HTML sanitizer could not be initialised.

    Raised instead of a rendering result. Callers must never substitute the
    unsanitized HTML.
    """
