"""Locale resolution for the ``lang`` attribute of the page shell."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from babel import negotiate_locale
from flask import current_app, g, has_request_context, request

from landing.errors import MissingLocaleError


def to_language_tag(locale: str) -> str:
    """Return the BCP-47 style tag for a locale identifier (``en_US`` -> ``en-US``)."""
    return str(locale).replace("_", "-")


def resolve_locale(config: Mapping[str, Any], preferred: Iterable[str] = ()) -> str:
    """Pick the locale for a request.

    When negotiation is enabled, the client's preferred languages are matched
    against ``SUPPORTED_LOCALES`` and the supported spelling is returned.
    Otherwise, or when nothing matches, the configured application locale
    wins, then the fallback locale.
    """
    supported = tuple(config.get("SUPPORTED_LOCALES") or ())
    if config.get("NEGOTIATE_LOCALE") and supported:
        candidates = [
            value.replace("-", "_") for value in preferred if value and value != "*"
        ]
        negotiated = negotiate_locale(candidates, supported, sep="_")
        if negotiated:
            canonical = {value.lower(): value for value in supported}
            return canonical.get(negotiated.lower(), negotiated)

    locale = config.get("APP_LOCALE") or config.get("APP_FALLBACK_LOCALE")
    if not locale:
        raise MissingLocaleError("No APP_LOCALE or APP_FALLBACK_LOCALE configured")
    return locale


def get_locale() -> str:
    """Return the locale resolved for the current request."""
    locale = g.get("locale") if has_request_context() else None
    if locale:
        return locale

    preferred: list[str] = []
    if has_request_context():
        preferred = [value for value, _quality in request.accept_languages]
    return resolve_locale(current_app.config, preferred)
