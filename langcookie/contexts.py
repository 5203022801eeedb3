from __future__ import annotations

import typing
from starlette import responses
from starlette.requests import HTTPConnection
from starlette.types import Message, Scope

from langcookie.cookies import build_set_cookie_headers, write_cookie
from langcookie.structures import CookieAttributes


class ResponseContext:
    """Writes cookies into a Starlette response that has not been sent yet."""

    def __init__(self, connection: HTTPConnection, response: responses.Response) -> None:
        self.connection = connection
        self.response = response
        self.headers_sent = False

    @property
    def cookies(self) -> typing.Mapping[str, str]:
        return self.connection.cookies

    @property
    def is_secure(self) -> bool:
        return self.connection.url.scheme in ("https", "wss")

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None:
        write_cookie(self.response, name, value, attributes)


class ASGIContext:
    """
    Collects Set-Cookie headers until the response starts.

    Queued headers are appended to the `http.response.start` message by `flush`, after that
    the context reports headers as sent. Cookies written through this context are visible
    to subsequent reads within the same request.
    """

    def __init__(self, scope: Scope) -> None:
        self.scope = scope
        self.headers_sent = False
        self.pending: dict[str, list[tuple[bytes, bytes]]] = {}
        self._cookies = dict(HTTPConnection(scope).cookies)

    @property
    def cookies(self) -> typing.Mapping[str, str]:
        return self._cookies

    @property
    def is_secure(self) -> bool:
        return self.scope.get("scheme") in ("https", "wss")

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None:
        self.pending[name] = build_set_cookie_headers(name, value, attributes)
        if value:
            self._cookies[name] = value
        else:
            self._cookies.pop(name, None)

    def has_pending(self, name: str) -> bool:
        return name in self.pending

    def flush(self, message: Message) -> None:
        headers = list(message.get("headers", []))
        for pairs in self.pending.values():
            headers.extend(pairs)
        message["headers"] = headers
        self.pending.clear()
        self.headers_sent = True
