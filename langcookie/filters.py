from __future__ import annotations

import logging
import typing

from langcookie.exceptions import ImproperlyConfigured
from langcookie.utils import callable_name, import_string

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")

Filter = typing.Callable[[T], typing.Any]


class FilterChain(typing.Generic[T]):
    """An ordered list of callables applied to a value one after another.

    Every filter receives the result of the previous one.
    """

    def __init__(self, filters: typing.Iterable[Filter[T]] | None = None) -> None:
        self._filters: list[Filter[T]] = list(filters or [])

    def top(self, fn: Filter[T]) -> None:
        """Add filter to the top of chain."""
        self._filters.insert(0, fn)

    def use(self, fn: Filter[T]) -> None:
        """Add filter to the end of chain."""
        self._filters.append(fn)

    def apply(self, value: typing.Any) -> typing.Any:
        for fn in self._filters:
            value = fn(value)
            logger.debug("Filter %s returned %r.", callable_name(fn), value)
        return value

    @classmethod
    def from_strings(cls, paths: typing.Iterable[str]) -> FilterChain[T]:
        """Build a chain from "module:attr" import strings."""
        filters = []
        for path in paths:
            try:
                fn = import_string(path)
            except (ImportError, AttributeError, ValueError) as ex:
                raise ImproperlyConfigured(f'Cannot import cookie filter "{path}".') from ex
            if not callable(fn):
                raise ImproperlyConfigured(f'Cookie filter "{path}" is not callable.')
            filters.append(fn)
        return cls(filters)

    def __iter__(self) -> typing.Iterator[Filter[T]]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:  # pragma: nocover
        return "<FilterChain: %s filters>" % len(self)
