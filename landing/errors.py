"""Configuration and deployment errors raised while rendering the page shell."""

from __future__ import annotations

from flask import Flask


class ShellConfigError(RuntimeError):
    """The shell cannot be rendered because the host is misconfigured."""


class MissingLocaleError(ShellConfigError):
    """No locale could be resolved for the current request."""


class ManifestError(ShellConfigError):
    """The Vite build manifest is unusable."""


class ManifestNotFoundError(ManifestError):
    """The manifest file does not exist at the configured build directory."""


class ManifestEntryError(ManifestError):
    """A logical asset name is absent from the manifest."""


def register_error_handlers(app: Flask) -> None:
    """Turn shell configuration errors into a plain server error response."""

    @app.errorhandler(ShellConfigError)
    def handle_shell_config_error(exc: ShellConfigError):
        app.logger.error("Page shell could not be rendered: %s", exc)
        return "Server Error", 500, {"Content-Type": "text/plain; charset=utf-8"}
