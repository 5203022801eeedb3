class LanguageCookieError(Exception):
    """Base class for all language cookie errors."""


class ImproperlyConfigured(LanguageCookieError):
    """Raised when cookie settings or filters cannot be loaded."""
