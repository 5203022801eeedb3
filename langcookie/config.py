from __future__ import annotations

import dataclasses
import os
import pathlib
import typing

from starlette.config import Config as BaseConfig
from starlette.config import Environ

from langcookie.exceptions import ImproperlyConfigured
from langcookie.filters import FilterChain
from langcookie.structures import CookieAttributes, SameSite
from langcookie.utils import to_string_list

__all__ = ["Config", "CookieSettings", "YEAR_IN_SECONDS", "DEFAULT_COOKIE_NAME"]

YEAR_IN_SECONDS = 365 * 24 * 60 * 60
DEFAULT_COOKIE_NAME = "pll_language"


class Config(BaseConfig):
    def __init__(
        self,
        env_files: list[str | pathlib.Path] | None = None,
        env_prefix: str = "",
        environ: typing.Mapping[str, str] | None = None,
    ):
        env_files = env_files or []
        super().__init__(None, environ if environ is not None else Environ(), env_prefix)
        for env_file in env_files:
            if os.path.exists(env_file) and os.path.isfile(env_file):
                self.file_values.update(BaseConfig(env_file).file_values)


@dataclasses.dataclass(frozen=True)
class CookieSettings:
    """Language cookie configuration.

    An empty `name` disables the cookie entirely.
    """

    name: str | None = DEFAULT_COOKIE_NAME
    path: str = "/"
    domain: str | typing.Literal[False] = False
    duration: int = YEAR_IN_SECONDS
    httponly: bool = False
    samesite: str = SameSite.LAX.value
    duration_filters: tuple[str, ...] = ()
    attribute_filters: tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        return bool(self.name)

    def default_attributes(self) -> CookieAttributes:
        return CookieAttributes(
            path=self.path,
            domain=self.domain,
            httponly=self.httponly,
            samesite=self.samesite,
        )

    def build_duration_filters(self) -> FilterChain[int]:
        return FilterChain.from_strings(self.duration_filters)

    def build_attribute_filters(self) -> FilterChain[CookieAttributes]:
        return FilterChain.from_strings(self.attribute_filters)

    @classmethod
    def from_config(cls, config: BaseConfig) -> CookieSettings:
        samesite = config("LANGUAGE_COOKIE_SAMESITE", default=SameSite.LAX.value)
        if not SameSite.is_valid(samesite):
            raise ImproperlyConfigured(
                f'Invalid LANGUAGE_COOKIE_SAMESITE value "{samesite}", expected one of: Strict, Lax, None.'
            )

        return cls(
            name=config("LANGUAGE_COOKIE_NAME", default=DEFAULT_COOKIE_NAME) or None,
            path=config("LANGUAGE_COOKIE_PATH", default="/"),
            domain=config("LANGUAGE_COOKIE_DOMAIN", default="") or False,
            duration=config("LANGUAGE_COOKIE_DURATION", cast=int, default=YEAR_IN_SECONDS),
            httponly=config("LANGUAGE_COOKIE_HTTPONLY", cast=bool, default=False),
            samesite=SameSite(samesite.capitalize()).value,
            duration_filters=tuple(to_string_list(config("LANGUAGE_COOKIE_DURATION_FILTERS", default=""))),
            attribute_filters=tuple(to_string_list(config("LANGUAGE_COOKIE_ATTRIBUTE_FILTERS", default=""))),
        )
