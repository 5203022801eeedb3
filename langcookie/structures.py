from __future__ import annotations

import dataclasses
import enum
import typing


class SameSite(enum.StrEnum):
    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"

    @classmethod
    def is_valid(cls, value: typing.Any) -> bool:
        return str(value).lower() in {member.value.lower() for member in cls}


def _coerce_domain(value: typing.Any) -> str | typing.Literal[False]:
    return str(value) if value else False


_COERCERS: dict[str, typing.Callable[[typing.Any], typing.Any]] = {
    "expires": int,
    "path": str,
    "domain": _coerce_domain,
    "secure": bool,
    "httponly": bool,
    "samesite": str,
}


@dataclasses.dataclass(frozen=True)
class CookieAttributes:
    """Attributes of the language cookie.

    `expires` is a unix timestamp. Zero means a session cookie, a value in the past
    removes the cookie. `domain` set to False disables domain restriction.
    """

    expires: int = 0
    path: str = "/"
    domain: str | typing.Literal[False] = False
    secure: bool = False
    httponly: bool = False
    samesite: str = SameSite.LAX.value

    def replace(self, **changes: typing.Any) -> CookieAttributes:
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict[str, typing.Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_mapping(
        cls,
        data: typing.Mapping[str, typing.Any],
        defaults: CookieAttributes | None = None,
    ) -> CookieAttributes:
        """
        Build attributes from an arbitrary mapping.

        Unknown keys are ignored, missing keys are taken from `defaults`. Values are
        coerced to field types but never validated.
        """
        base = (defaults or cls()).as_dict()
        for key, coerce in _COERCERS.items():
            if key in data:
                base[key] = coerce(data[key])
        return cls(**base)
