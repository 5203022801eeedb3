from __future__ import annotations

import datetime
import logging
import time
import typing

from starlette import responses

from langcookie.structures import CookieAttributes, SameSite

logger = logging.getLogger(__name__)


def _samesite(value: str) -> typing.Literal["lax", "strict", "none"] | None:
    if SameSite.is_valid(value):
        return typing.cast(typing.Literal["lax", "strict", "none"], value.lower())
    logger.warning('Ignoring invalid SameSite value "%s" for cookie.', value)
    return None


def write_cookie(
    http_response: responses.Response,
    name: str,
    value: str,
    attributes: CookieAttributes,
    now: float | None = None,
) -> None:
    """
    Add Set-Cookie header to the response.

    A zero `expires` produces a session cookie without Expires and Max-Age attributes.
    """
    expires: datetime.datetime | None = None
    max_age: int | None = None
    if attributes.expires != 0:
        current = int(time.time() if now is None else now)
        expires = datetime.datetime.fromtimestamp(max(attributes.expires, 0), tz=datetime.timezone.utc)
        max_age = max(attributes.expires - current, 0)

    http_response.set_cookie(
        key=name,
        value=value,
        max_age=max_age,
        expires=expires,
        path=attributes.path,
        domain=attributes.domain or None,
        secure=attributes.secure,
        httponly=attributes.httponly,
        samesite=_samesite(attributes.samesite),
    )


def build_set_cookie_headers(
    name: str,
    value: str,
    attributes: CookieAttributes,
    now: float | None = None,
) -> list[tuple[bytes, bytes]]:
    """Render Set-Cookie header as raw ASGI header pairs."""
    http_response = responses.Response()
    write_cookie(http_response, name, value, attributes, now=now)
    return [(key, header) for key, header in http_response.raw_headers if key == b"set-cookie"]
