import typing

from langcookie.structures import CookieAttributes


class HasPreferredLanguage(typing.Protocol):  # pragma: nocover
    """Defines an object that can provide preselected language information."""

    def get_preferred_language(self) -> str | None:
        ...


class CookieContext(typing.Protocol):  # pragma: nocover
    """Request-scoped access to inbound cookies and the outgoing Set-Cookie header."""

    @property
    def cookies(self) -> typing.Mapping[str, str]:
        ...

    @property
    def is_secure(self) -> bool:
        ...

    @property
    def headers_sent(self) -> bool:
        ...

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None:
        ...
