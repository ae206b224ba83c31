"""The HTML envelope shared by every client-rendered page."""

from __future__ import annotations

from typing import Any, Mapping

from flask import current_app, render_template

from landing.errors import MissingLocaleError
from landing.utils.analytics import resolve_tracking_id
from landing.utils.head import HeadPayload, page_title, render_head
from landing.utils.inertia import render_mount
from landing.utils.locale import get_locale


def render_shell(
    page: Mapping[str, Any],
    head: HeadPayload | None = None,
    locale: str | None = None,
) -> str:
    """Render ``app.html`` for a page object.

    ``locale`` defaults to the locale resolved for the current request. The
    Vite manifest is read while rendering, so a missing manifest or entry
    aborts the whole document instead of producing a partial page.
    """
    if locale is None:
        locale = get_locale()
    if not locale:
        raise MissingLocaleError("The page shell needs a locale to render")

    config = current_app.config
    return render_template(
        "app.html",
        locale=locale,
        title=page_title(head),
        head_extra=render_head(head),
        mount=render_mount(page, config.get("INERTIA_ROOT_ID", "app")),
        tracking_id=resolve_tracking_id(config.get("GA_TRACKING_ID")),
        entrypoints=config["VITE_ENTRYPOINTS"],
    )
