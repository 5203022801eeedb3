import logging
import typing
from babel.core import Locale, UnknownLocaleError
from functools import lru_cache
from starlette.requests import HTTPConnection
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from langcookie.config import CookieSettings
from langcookie.contexts import ASGIContext
from langcookie.filters import FilterChain
from langcookie.policy import CookiePolicy
from langcookie.protocols import HasPreferredLanguage
from langcookie.structures import CookieAttributes

logger = logging.getLogger(__name__)


def _get_language_from_query(connection: HTTPConnection, query_param: str) -> str | None:
    return connection.query_params.get(query_param)


def _get_language_from_user(connection: HTTPConnection) -> str | None:
    if 'user' in connection.scope and hasattr(connection.user, "get_preferred_language"):
        language_provider = typing.cast(HasPreferredLanguage, connection.user)
        return language_provider.get_preferred_language()
    return None


def _get_language_from_cookie(policy: CookiePolicy) -> str | None:
    return policy.get() or None


@lru_cache(maxsize=1000)
def _get_languages_from_header(header: str) -> list[tuple[str, float]]:
    result = []
    for part in header.split(","):
        if ";" in part:
            locale, priority_ = part.split(";", 1)
            try:
                priority = float(priority_.strip()[2:])
            except ValueError:
                priority = 0.0
        else:
            locale = part
            priority = 1.0
        result.append((locale.strip(), priority))
    return sorted(result, key=lambda x: x[1], reverse=True)


def _get_language_from_header(connection: HTTPConnection, supported: set[str]) -> str | None:
    header = connection.headers.get("accept-language", "").lower()
    for lang, _ in _get_languages_from_header(header):
        lang = lang.replace('-', '_')
        if lang == "*":
            break

        if lang in supported:
            return lang
    return None


def locale_to_slug(locale: Locale) -> str:
    return str(locale).lower()


class LanguageCookieMiddleware:
    """
    Detect request locale and remember it in the language cookie.

    The cookie is written when the response starts, unless a view has already queued a
    cookie via `remember_language` or `forget_language`.
    """

    def __init__(
        self,
        app: ASGIApp,
        settings: CookieSettings | None = None,
        languages: list[str] | None = None,
        default_locale: str = 'en_US',
        query_param_name: str = "lang",
        locale_detector: typing.Callable[[HTTPConnection, CookiePolicy], Locale | None] | None = None,
        duration_filters: FilterChain[int] | None = None,
        attribute_filters: FilterChain[CookieAttributes] | None = None,
        remember: bool = True,
    ) -> None:
        self.app = app
        self.settings = settings or CookieSettings()
        self.languages = {x.lower().replace('-', '_') for x in (languages or ["en"])}
        self.default_locale = default_locale
        self.query_param_name = query_param_name
        self.locale_detector = locale_detector or self.detect_locale
        self.duration_filters = duration_filters or self.settings.build_duration_filters()
        self.attribute_filters = attribute_filters or self.settings.build_attribute_filters()
        self.remember = remember

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope['type'] != 'http':  # pragma: nocover
            return await self.app(scope, receive, send)

        context = ASGIContext(scope)
        policy = CookiePolicy(
            self.settings,
            context,
            duration_filters=self.duration_filters,
            attribute_filters=self.attribute_filters,
        )

        locale = self.locale_detector(HTTPConnection(scope, receive), policy)
        if not locale:
            locale = Locale.parse(self.default_locale)

        scope["locale"] = locale
        scope['language'] = locale.language
        scope['language_cookie'] = policy

        async def send_wrapper(message: Message) -> None:
            if message['type'] == 'http.response.start' and not context.headers_sent:
                if self.remember and self.settings.name and not context.has_pending(self.settings.name):
                    policy.set(locale_to_slug(locale))
                context.flush(message)
            await send(message)

        await self.app(scope, receive, send_wrapper)

    def detect_locale(self, connection: HTTPConnection, policy: CookiePolicy) -> Locale:
        lang = self.default_locale
        if detected_lang := _get_language_from_query(connection, self.query_param_name):
            lang = detected_lang
        elif detected_lang := _get_language_from_user(connection):
            lang = detected_lang
        elif detected_lang := _get_language_from_cookie(policy):
            lang = detected_lang
        elif detected_lang := _get_language_from_header(connection, self.languages):
            lang = detected_lang

        variant = self.find_variant(lang) or self.default_locale
        try:
            return Locale.parse(variant)
        except (ValueError, UnknownLocaleError):
            logger.warning('Cannot parse locale "%s", falling back to "%s".', variant, self.default_locale)
            return Locale.parse(self.default_locale)

    def find_variant(self, locale: str) -> str | None:
        """
        Look up requested locale in supported list.

        If the locale does not exist, it will attempt to find the closest locale
        from the all supported. For example, if clients requests en_US, but we
        support only "en_GB" then en_GB to be returned. If no locales match
        request then None returned.
        """
        locale = locale.lower().replace('-', '_')
        if locale in self.languages:
            return locale

        from_locale = locale.split('_')[0]
        for supported in sorted(self.languages):
            if supported.split('_')[0] == from_locale:
                return supported
        return None
