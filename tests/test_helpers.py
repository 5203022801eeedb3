import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from langcookie.config import CookieSettings
from langcookie.filters import FilterChain
from langcookie.helpers import get_cookie_policy, get_language_cookie, remember_language_on_response


async def switch(request: Request) -> PlainTextResponse:
    response = PlainTextResponse("ok")
    return remember_language_on_response(request, response, request.path_params["lang"])


async def switch_session(request: Request) -> PlainTextResponse:
    response = PlainTextResponse("ok")
    return remember_language_on_response(
        request,
        response,
        request.path_params["lang"],
        settings=CookieSettings(name="lang"),
        duration_filters=FilterChain([lambda duration: 0]),
        httponly=True,
    )


async def current(request: Request) -> PlainTextResponse:
    return PlainTextResponse(get_language_cookie(request))


app = Starlette(
    routes=[
        Route("/switch/{lang}", switch),
        Route("/session/{lang}", switch_session),
        Route("/current", current),
    ]
)


def test_remember_language_on_response() -> None:
    client = TestClient(app)
    response = client.get("/switch/de")
    assert response.headers["set-cookie"].startswith("pll_language=de;")


def test_remember_language_on_response_skips_same_value() -> None:
    client = TestClient(app, cookies={"pll_language": "de"})
    assert "set-cookie" not in client.get("/switch/de").headers


def test_remember_language_on_response_with_options() -> None:
    client = TestClient(app)
    header = client.get("/session/de").headers["set-cookie"]
    assert header.startswith("lang=de;")
    assert "HttpOnly" in header
    assert "expires" not in header.lower()


def test_get_cookie_policy_requires_middleware() -> None:
    client = TestClient(app)
    with pytest.raises(AssertionError, match="LanguageCookieMiddleware must be installed"):
        client.get("/current")


def test_get_cookie_policy() -> None:
    scope = {"type": "http", "language_cookie": object()}
    assert get_cookie_policy(Request(scope)) is scope["language_cookie"]
