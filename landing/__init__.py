"""Core application factory and shared setup utilities."""

from __future__ import annotations

import os

from flask import Flask, g, request

DEFAULT_SUPPORTED_LOCALES = ("en",)
APP_VERSION_SUFFIX = "V1.0.0"


def create_app(config_object: str | object = "config.Config") -> Flask:
    """Create, configure, and return the Flask application instance."""
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)

    app.config.setdefault(
        "APP_VERSION",
        f"{os.getenv('APP_VERSION', 'landing-dev')} {APP_VERSION_SUFFIX}",
    )
    app.config.setdefault("SUPPORTED_LOCALES", _load_supported_locales())

    _register_blueprints(app)
    _register_request_hooks(app)
    _register_context_processors(app)
    _register_filters(app)
    _register_commands(app)

    from .errors import register_error_handlers

    register_error_handlers(app)
    app.logger.debug("Landing app created (version %s)", app.config["APP_VERSION"])
    return app


def _load_supported_locales() -> tuple[str, ...]:
    """Read SUPPORTED_LOCALES from env (comma-separated) with a safe fallback."""
    raw = os.getenv("SUPPORTED_LOCALES")
    if not raw:
        return DEFAULT_SUPPORTED_LOCALES

    locales = tuple(value.strip() for value in raw.split(",") if value.strip())
    return locales or DEFAULT_SUPPORTED_LOCALES


def _register_blueprints(app: Flask) -> None:
    """Import and register the application's blueprints."""
    from .blueprints.pages.pages import pages_bp

    app.register_blueprint(pages_bp)


def _register_request_hooks(app: Flask) -> None:
    """Resolve the request locale and wire the Inertia protocol hooks."""
    from .utils import inertia
    from .utils.locale import resolve_locale

    @app.before_request
    def resolve_request_locale() -> None:
        preferred = [value for value, _quality in request.accept_languages]
        g.locale = resolve_locale(app.config, preferred)

    inertia.init_app(app)


def _register_context_processors(app: Flask) -> None:
    """Expose global template helpers."""
    from .utils.vite import current_vite

    @app.context_processor
    def inject_template_globals() -> dict[str, object]:
        """Make the Vite tag helper available, like Blade's ``@vite``."""
        return {"vite": lambda entrypoints: current_vite().tags(entrypoints)}


def _register_filters(app: Flask) -> None:
    """Register custom Jinja filters used by the shell template."""
    from .utils.locale import to_language_tag

    app.jinja_env.filters["language_tag"] = to_language_tag


def _register_commands(app: Flask) -> None:
    """Attach deployment-check commands to ``flask``."""
    from .cli import check_manifest_command

    app.cli.add_command(check_manifest_command)
