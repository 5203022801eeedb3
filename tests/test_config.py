import pathlib
import pytest

from langcookie.config import YEAR_IN_SECONDS, Config, CookieSettings
from langcookie.exceptions import ImproperlyConfigured
from langcookie.structures import CookieAttributes


def test_settings_defaults() -> None:
    settings = CookieSettings.from_config(Config(environ={}))
    assert settings == CookieSettings()
    assert settings.name == "pll_language"
    assert settings.duration == YEAR_IN_SECONDS
    assert settings.domain is False
    assert settings.enabled


def test_settings_from_environ() -> None:
    settings = CookieSettings.from_config(
        Config(
            environ={
                "LANGUAGE_COOKIE_NAME": "lang",
                "LANGUAGE_COOKIE_PATH": "/blog/",
                "LANGUAGE_COOKIE_DOMAIN": "example.com",
                "LANGUAGE_COOKIE_DURATION": "0",
                "LANGUAGE_COOKIE_HTTPONLY": "true",
                "LANGUAGE_COOKIE_SAMESITE": "strict",
                "LANGUAGE_COOKIE_DURATION_FILTERS": "tests.test_filters:double, tests.test_filters:increment",
            }
        )
    )
    assert settings.name == "lang"
    assert settings.path == "/blog/"
    assert settings.domain == "example.com"
    assert settings.duration == 0
    assert settings.httponly is True
    assert settings.samesite == "Strict"
    assert settings.build_duration_filters().apply(1) == 3
    assert len(settings.build_attribute_filters()) == 0


def test_empty_name_disables_cookie() -> None:
    settings = CookieSettings.from_config(Config(environ={"LANGUAGE_COOKIE_NAME": ""}))
    assert settings.name is None
    assert not settings.enabled


def test_invalid_samesite() -> None:
    with pytest.raises(ImproperlyConfigured, match="LANGUAGE_COOKIE_SAMESITE"):
        CookieSettings.from_config(Config(environ={"LANGUAGE_COOKIE_SAMESITE": "sometimes"}))


def test_env_files(tmp_path: pathlib.Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("LANGUAGE_COOKIE_NAME=from_file\nLANGUAGE_COOKIE_DURATION=60\n")

    settings = CookieSettings.from_config(
        Config(env_files=[env_file, tmp_path / "missing.env"], environ={"LANGUAGE_COOKIE_DURATION": "120"})
    )
    assert settings.name == "from_file"
    assert settings.duration == 120


def test_env_prefix() -> None:
    settings = CookieSettings.from_config(Config(env_prefix="APP_", environ={"APP_LANGUAGE_COOKIE_NAME": "lang"}))
    assert settings.name == "lang"


def test_default_attributes() -> None:
    settings = CookieSettings(path="/a/", domain="example.com", httponly=True, samesite="None")
    assert settings.default_attributes() == CookieAttributes(
        expires=0, path="/a/", domain="example.com", secure=False, httponly=True, samesite="None"
    )
