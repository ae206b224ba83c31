import pytest
from flask import g

from landing.errors import MissingLocaleError
from landing.utils import locale as loc


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("en_US", "en-US"),
        ("pt_BR", "pt-BR"),
        ("zh_Hant_TW", "zh-Hant-TW"),
        ("fr", "fr"),
        ("en-GB", "en-GB"),
    ],
)
def test_to_language_tag_replaces_underscores(value, expected):
    assert loc.to_language_tag(value) == expected


def test_resolve_locale_uses_app_locale_without_negotiation():
    config = {"APP_LOCALE": "en_US", "SUPPORTED_LOCALES": ("fr_FR",)}
    assert loc.resolve_locale(config, ["fr-FR"]) == "en_US"


def test_resolve_locale_falls_back_when_app_locale_blank():
    config = {"APP_LOCALE": "", "APP_FALLBACK_LOCALE": "en"}
    assert loc.resolve_locale(config) == "en"


def test_resolve_locale_raises_when_nothing_configured():
    with pytest.raises(MissingLocaleError):
        loc.resolve_locale({"APP_LOCALE": "", "APP_FALLBACK_LOCALE": None})


def test_resolve_locale_negotiates_supported_spelling():
    config = {
        "APP_LOCALE": "en_US",
        "NEGOTIATE_LOCALE": True,
        "SUPPORTED_LOCALES": ("en_US", "fr_FR", "de"),
    }
    assert loc.resolve_locale(config, ["fr-fr", "en"]) == "fr_FR"
    assert loc.resolve_locale(config, ["de-AT"]) == "de"
    assert loc.resolve_locale(config, ["*", "es-ES"]) == "en_US"


def test_get_locale_prefers_value_set_by_request_hook(app):
    with app.test_request_context("/"):
        g.locale = "de"
        assert loc.get_locale() == "de"


def test_get_locale_resolves_from_accept_language(app):
    app.config["NEGOTIATE_LOCALE"] = True
    with app.test_request_context("/", headers={"Accept-Language": "fr-FR,fr;q=0.8"}):
        assert loc.get_locale() == "fr_FR"


def test_request_hook_sets_locale(app, client):
    app.config["APP_LOCALE"] = "pt_BR"
    body = client.get("/").get_data(as_text=True)
    assert '<html lang="pt-BR">' in body


def test_missing_locale_yields_server_error(app, client):
    app.config.update(APP_LOCALE="", APP_FALLBACK_LOCALE="")
    response = client.get("/")

    assert response.status_code == 500
    assert response.get_data(as_text=True) == "Server Error"
