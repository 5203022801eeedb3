from .config import DEFAULT_COOKIE_NAME, YEAR_IN_SECONDS, Config, CookieSettings
from .contexts import ASGIContext, ResponseContext
from .exceptions import ImproperlyConfigured, LanguageCookieError
from .filters import FilterChain
from .helpers import (
    forget_language,
    get_cookie_policy,
    get_language_cookie,
    remember_language,
    remember_language_on_response,
)
from .middleware import LanguageCookieMiddleware
from .policy import CookiePolicy
from .protocols import CookieContext, HasPreferredLanguage
from .structures import CookieAttributes, SameSite
from .utils import sanitize_key

__all__ = [
    "Config",
    "CookieSettings",
    "DEFAULT_COOKIE_NAME",
    "YEAR_IN_SECONDS",
    "ASGIContext",
    "ResponseContext",
    "CookieContext",
    "HasPreferredLanguage",
    "LanguageCookieError",
    "ImproperlyConfigured",
    "FilterChain",
    "CookiePolicy",
    "CookieAttributes",
    "SameSite",
    "LanguageCookieMiddleware",
    "get_cookie_policy",
    "get_language_cookie",
    "remember_language",
    "forget_language",
    "remember_language_on_response",
    "sanitize_key",
]
