from __future__ import annotations

import logging
import time
import typing

from langcookie.config import YEAR_IN_SECONDS, CookieSettings
from langcookie.filters import FilterChain
from langcookie.protocols import CookieContext
from langcookie.structures import CookieAttributes
from langcookie.utils import sanitize_key

logger = logging.getLogger(__name__)


class CookiePolicy:
    """
    Reads and conditionally writes the language cookie.

    Attributes are built from settings, the current request and caller overrides, then
    passed through `attribute_filters`. The default duration is passed through
    `duration_filters` first: zero yields a session cookie, a negative value yields an
    expiration date in the past which removes the cookie.
    """

    def __init__(
        self,
        settings: CookieSettings,
        context: CookieContext,
        duration_filters: FilterChain[int] | None = None,
        attribute_filters: FilterChain[CookieAttributes] | None = None,
        clock: typing.Callable[[], float] = time.time,
    ) -> None:
        self.settings = settings
        self.context = context
        self.duration_filters = duration_filters or FilterChain()
        self.attribute_filters = attribute_filters or FilterChain()
        self.clock = clock

    def resolve_attributes(self, **overrides: typing.Any) -> CookieAttributes:
        duration = self._resolve_duration()
        defaults = self.settings.default_attributes().replace(
            expires=int(self.clock()) + duration if duration != 0 else 0,
            secure=self.context.is_secure,
        )
        attributes = defaults.replace(**overrides)
        result = self.attribute_filters.apply(attributes)
        if isinstance(result, CookieAttributes):
            return result
        if not isinstance(result, typing.Mapping):
            logger.debug("Attribute filters returned %r, keeping merged attributes.", result)
            result = {}
        return CookieAttributes.from_mapping(result, defaults=attributes)

    def _resolve_duration(self) -> int:
        duration = self.duration_filters.apply(self.settings.duration)
        try:
            return int(duration)
        except (TypeError, ValueError):
            logger.debug("Duration filters returned %r, using session cookie.", duration)
            return 0

    def set(self, value: str, **overrides: typing.Any) -> None:
        """Write the cookie unless headers are sent, the cookie is disabled, or it already holds `value`."""
        if not self._can_write():
            return

        if self.get() == value:
            logger.debug('Cookie "%s" already holds "%s", skipping.', self.settings.name, value)
            return

        attributes = self.resolve_attributes(**overrides)
        self.context.set_cookie(typing.cast(str, self.settings.name), value, attributes)
        logger.debug('Cookie "%s" set to "%s" with %r.', self.settings.name, value, attributes)

    def delete(self, **overrides: typing.Any) -> None:
        """Expire the cookie if the client has one."""
        if not self._can_write():
            return

        if self.settings.name not in self.context.cookies:
            logger.debug('Cookie "%s" is not present, nothing to delete.', self.settings.name)
            return

        overrides.setdefault("expires", int(self.clock()) - YEAR_IN_SECONDS)
        attributes = self.resolve_attributes(**overrides)
        self.context.set_cookie(typing.cast(str, self.settings.name), "", attributes)
        logger.debug('Cookie "%s" deleted.', self.settings.name)

    def get(self) -> str:
        if not self.settings.enabled:
            return ""
        value = self.context.cookies.get(typing.cast(str, self.settings.name))
        return sanitize_key(value) if value else ""

    def _can_write(self) -> bool:
        if self.context.headers_sent:
            logger.debug("Headers already sent, cannot write cookie.")
            return False

        if not self.settings.enabled:
            logger.debug("Language cookie is disabled.")
            return False
        return True
