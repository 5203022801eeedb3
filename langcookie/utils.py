from __future__ import annotations

import importlib
import inspect
import re
import typing

UNSAFE_KEY_CHARS_PATTERN = re.compile(r'[^a-z0-9_\-]')


def sanitize_key(value: str) -> str:
    """
    Make a string safe to use as a key.

    Lowercases the value and strips everything except lowercase alphanumerics, dashes and
    underscores.
    """
    return UNSAFE_KEY_CHARS_PATTERN.sub('', value.lower())


def import_string(path: str, package: str | None = None) -> typing.Any:
    attr = None
    if ':' in path:
        module_name, attr = path.split(':')
    else:
        module_name = path

    module_instance = importlib.import_module(module_name, package)
    if attr:
        return getattr(module_instance, attr)
    return module_instance


def to_string_list(value: str | typing.Iterable[str] | None) -> list[str]:
    """
    Covert comma separated string, list, or None to list of strings.

    If value is None then an empty list returned.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(',') if item.strip()]
    return list(value)


def callable_name(fn: typing.Any) -> str:
    class_name = fn.__name__ if inspect.isclass(fn) else getattr(fn, '__name__', repr(fn))
    module_name = getattr(fn, '__module__', '')
    return f'{module_name}.{class_name}'
