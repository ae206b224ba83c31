"""Inertia page objects: the body mount point and the XHR visit protocol."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping

from flask import Flask, Response, current_app, jsonify, make_response, request
from markupsafe import Markup

from landing.utils.head import HeadPayload
from landing.utils.vite import current_vite

INERTIA_HEADER = "X-Inertia"


def is_inertia_request() -> bool:
    return request.headers.get(INERTIA_HEADER, "").lower() == "true"


def _current_url() -> str:
    if request.query_string:
        return request.full_path
    return request.path


def _partial_keys(component: str) -> list[str] | None:
    """Prop names requested by a partial reload of ``component``, if any."""
    if request.headers.get("X-Inertia-Partial-Component") != component:
        return None
    raw = request.headers.get("X-Inertia-Partial-Data", "")
    keys = [key.strip() for key in raw.split(",") if key.strip()]
    return keys or None


def build_page(component: str, props: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Assemble the page object the client application boots from."""
    props = dict(props or {})
    keys = _partial_keys(component) if is_inertia_request() else None
    if keys is not None:
        props = {key: value for key, value in props.items() if key in keys}

    resolved = {key: value() if callable(value) else value for key, value in props.items()}
    return {
        "component": component,
        "props": resolved,
        "url": _current_url(),
        "version": current_vite().version(),
    }


def render_mount(page: Mapping[str, Any], root_id: str = "app") -> Markup:
    """Render the single element the client application attaches to."""
    payload = json.dumps(page, ensure_ascii=False, separators=(",", ":"))
    return Markup('<div id="{}" data-page="{}"></div>').format(root_id, payload)


def render(
    component: str,
    props: Mapping[str, Any | Callable[[], Any]] | None = None,
    head: HeadPayload | None = None,
) -> Response:
    """Answer with the JSON page on Inertia visits, the full HTML shell otherwise."""
    from landing.shell import render_shell

    page = build_page(component, props)
    if is_inertia_request():
        response = jsonify(page)
        response.headers[INERTIA_HEADER] = "true"
    else:
        response = make_response(render_shell(page, head=head))
    response.vary.add(INERTIA_HEADER)
    return response


def init_app(app: Flask) -> None:
    """Register the asset-version check and redirect handling for Inertia visits."""

    @app.before_request
    def check_inertia_version():
        if request.method != "GET" or not is_inertia_request():
            return None

        client_version = request.headers.get("X-Inertia-Version", "")
        server_version = current_vite().version() or ""
        if client_version == server_version:
            return None

        current_app.logger.info(
            "Asset version changed (%s -> %s), forcing full reload of %s",
            client_version or "-",
            server_version or "-",
            request.path,
        )
        response = make_response("", 409)
        response.headers["X-Inertia-Location"] = request.url
        return response

    @app.after_request
    def convert_inertia_redirects(response: Response) -> Response:
        if (
            is_inertia_request()
            and response.status_code == 302
            and request.method in {"PUT", "PATCH", "DELETE"}
        ):
            response.status_code = 303
        return response
