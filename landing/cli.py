"""Deployment sanity checks exposed through the ``flask`` command."""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext

from landing.errors import ManifestError
from landing.utils.vite import current_vite


@click.command("check-manifest")
@click.option(
    "--entry",
    "entries",
    multiple=True,
    help="Logical asset name to resolve. Defaults to VITE_ENTRYPOINTS.",
)
@with_appcontext
def check_manifest_command(entries: tuple[str, ...]) -> None:
    """Resolve every entrypoint against the Vite build manifest."""
    vite = current_vite()
    entries = entries or tuple(current_app.config["VITE_ENTRYPOINTS"])

    if vite.is_running_hot():
        click.echo(f"Vite dev server running at {vite.hot_url()}")

    failures = 0
    for entry in entries:
        try:
            url = vite.resolve(entry)
        except ManifestError as exc:
            failures += 1
            click.echo(f"{entry} -> ERROR {exc}", err=True)
        else:
            click.echo(f"{entry} -> {url}")

    if failures:
        raise click.ClickException(f"{failures} entrypoint(s) could not be resolved")
