import pytest
import typing

from langcookie.config import CookieSettings
from langcookie.policy import CookiePolicy
from langcookie.structures import CookieAttributes

NOW = 1_700_000_000


class FakeContext:
    def __init__(
        self,
        cookies: dict[str, str] | None = None,
        is_secure: bool = False,
        headers_sent: bool = False,
    ) -> None:
        self.cookies = dict(cookies or {})
        self.is_secure = is_secure
        self.headers_sent = headers_sent
        self.writes: list[tuple[str, str, CookieAttributes]] = []

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None:
        self.writes.append((name, value, attributes))
        self.cookies[name] = value


class PolicyFactory(typing.Protocol):  # pragma: nocover
    def __call__(
        self,
        context: FakeContext | None = None,
        settings: CookieSettings | None = None,
        **kwargs: typing.Any,
    ) -> CookiePolicy:
        ...


@pytest.fixture
def context() -> FakeContext:
    return FakeContext()


@pytest.fixture
def policy_factory(context: FakeContext) -> PolicyFactory:
    def factory(
        context: FakeContext | None = context,
        settings: CookieSettings | None = None,
        **kwargs: typing.Any,
    ) -> CookiePolicy:
        kwargs.setdefault("clock", lambda: NOW)
        return CookiePolicy(settings or CookieSettings(), context or FakeContext(), **kwargs)

    return typing.cast(PolicyFactory, factory)
