import typing
from starlette import responses
from starlette.requests import HTTPConnection

from langcookie.config import CookieSettings
from langcookie.contexts import ResponseContext
from langcookie.filters import FilterChain
from langcookie.policy import CookiePolicy
from langcookie.structures import CookieAttributes


def get_cookie_policy(connection: HTTPConnection) -> CookiePolicy:
    """Get language cookie policy of the current request."""
    assert "language_cookie" in connection.scope, "LanguageCookieMiddleware must be installed to access cookie policy."
    return connection.scope["language_cookie"]


def get_language_cookie(connection: HTTPConnection) -> str:
    return get_cookie_policy(connection).get()


def remember_language(connection: HTTPConnection, language: str, **overrides: typing.Any) -> None:
    """Remember language in cookie."""
    get_cookie_policy(connection).set(language, **overrides)


def forget_language(connection: HTTPConnection, **overrides: typing.Any) -> None:
    """Remove language cookie from the client."""
    get_cookie_policy(connection).delete(**overrides)


_R = typing.TypeVar('_R', bound=responses.Response)


def remember_language_on_response(
    connection: HTTPConnection,
    response: _R,
    language: str,
    settings: CookieSettings | None = None,
    duration_filters: FilterChain[int] | None = None,
    attribute_filters: FilterChain[CookieAttributes] | None = None,
    **overrides: typing.Any,
) -> _R:
    """Remember language by writing cookie directly to the response, no middleware required."""
    policy = CookiePolicy(
        settings or CookieSettings(),
        ResponseContext(connection, response),
        duration_filters=duration_filters,
        attribute_filters=attribute_filters,
    )
    policy.set(language, **overrides)
    return response
