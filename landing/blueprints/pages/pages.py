"""Public landing blueprint rendering the client application entry page."""

from __future__ import annotations

from flask import Blueprint, current_app

from landing.utils import inertia
from landing.utils.locale import get_locale

pages_bp = Blueprint("pages", __name__)


@pages_bp.get("/")
def welcome():
    """Serve the shell for the ``Welcome`` client component."""
    current_app.logger.debug("Rendering Welcome page")
    return inertia.render(
        "Welcome",
        {
            "locale": get_locale,
            "appVersion": current_app.config.get("APP_VERSION"),
        },
    )
