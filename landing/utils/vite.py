"""Vite build manifest lookup and asset tag rendering.

The manifest maps logical source names (``resources/js/app.js``) to the
content-hashed files the bundler wrote under ``public/build``::

    {
        "resources/js/app.js": {
            "file": "assets/app-4ed993c7.js",
            "imports": ["_vendor-9f8e7d6c.js"],
            "css": ["assets/app-5e6f7a8b.css"],
            "isEntry": true
        }
    }

When the Vite dev server runs it writes its URL to ``public/hot`` and every
entry is served from there instead.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

from flask import current_app
from markupsafe import Markup

from landing.errors import ManifestEntryError, ManifestError, ManifestNotFoundError

logger = logging.getLogger(__name__)

MANIFEST_FILENAMES = (".vite/manifest.json", "manifest.json")
CSS_EXTENSIONS = (".css", ".less", ".sass", ".scss", ".styl", ".stylus", ".pcss", ".postcss")
TAG_SEPARATOR = Markup("\n        ")

_MANIFEST_CACHE: dict[Path, tuple[tuple[int, int], dict[str, Any]]] = {}


def load_manifest(path: Path) -> dict[str, Any]:
    """Read the manifest at ``path``, reusing the cached copy while the file is unchanged."""
    try:
        stat = path.stat()
    except FileNotFoundError as exc:
        raise ManifestNotFoundError(f"Vite manifest not found at: {path}") from exc

    signature = (stat.st_mtime_ns, stat.st_size)
    cached = _MANIFEST_CACHE.get(path)
    if cached is not None and cached[0] == signature:
        return cached[1]

    try:
        with path.open("r", encoding="utf-8") as file:
            data = json.load(file)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Vite manifest at {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Vite manifest at {path} must be a JSON object")

    logger.debug("Loaded Vite manifest %s (%d entries)", path, len(data))
    _MANIFEST_CACHE[path] = (signature, data)
    return data


def _checked_entry(name: str, entry: Any) -> dict[str, Any]:
    if not isinstance(entry, dict) or not isinstance(entry.get("file"), str):
        raise ManifestEntryError(f"Malformed Vite manifest entry: {name}.")
    return entry


def is_css_path(path: str) -> bool:
    return path.lower().endswith(CSS_EXTENSIONS)


def _integrity_attr(integrity: str | None) -> Markup:
    if not integrity:
        return Markup("")
    return Markup(' integrity="{}" crossorigin="anonymous"').format(integrity)


def _stylesheet_tag(url: str, integrity: str | None = None) -> Markup:
    return Markup('<link rel="stylesheet" href="{}"{}>').format(url, _integrity_attr(integrity))


def _script_tag(url: str, integrity: str | None = None) -> Markup:
    return Markup('<script type="module" src="{}"{}></script>').format(
        url, _integrity_attr(integrity)
    )


def _modulepreload_tag(url: str, integrity: str | None = None) -> Markup:
    return Markup('<link rel="modulepreload" href="{}"{}>').format(url, _integrity_attr(integrity))


def _tag_for(url: str, source: str, integrity: str | None = None) -> Markup:
    if is_css_path(source):
        return _stylesheet_tag(url, integrity)
    return _script_tag(url, integrity)


@dataclass(frozen=True)
class Vite:
    """Resolve logical asset names against one build directory."""

    build_dir: Path
    build_url: str
    hot_file: Path | None = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Vite":
        public_dir = Path(config["PUBLIC_DIR"])
        build_directory = str(config.get("VITE_BUILD_DIRECTORY") or "build").strip("/")
        asset_url = str(config.get("ASSET_URL") or "").rstrip("/")
        hot_file = config.get("VITE_HOT_FILE")
        return cls(
            build_dir=public_dir / build_directory,
            build_url=f"{asset_url}/{build_directory}",
            hot_file=Path(hot_file) if hot_file else public_dir / "hot",
        )

    def is_running_hot(self) -> bool:
        return self.hot_file is not None and self.hot_file.is_file()

    def hot_url(self) -> str:
        if self.hot_file is None:
            raise ManifestError("No Vite hot file configured")
        return self.hot_file.read_text(encoding="utf-8").strip().rstrip("/")

    def manifest_path(self) -> Path:
        for name in MANIFEST_FILENAMES:
            candidate = self.build_dir / name
            if candidate.is_file():
                return candidate
        return self.build_dir / MANIFEST_FILENAMES[-1]

    def manifest(self) -> dict[str, Any]:
        return load_manifest(self.manifest_path())

    def chunk(self, name: str) -> dict[str, Any]:
        """Return the manifest entry for a logical name."""
        try:
            entry = self.manifest()[name]
        except KeyError:
            raise ManifestEntryError(f"Unable to locate file in Vite manifest: {name}.") from None
        return _checked_entry(name, entry)

    def asset_url(self, file: str) -> str:
        return f"{self.build_url}/{file}"

    def resolve(self, name: str) -> str:
        """Map a logical asset name to the URL the browser should load."""
        if self.is_running_hot():
            return f"{self.hot_url()}/{name}"
        return self.asset_url(self.chunk(name)["file"])

    def version(self) -> str | None:
        """Hash of the manifest, used as the client asset version."""
        if self.is_running_hot():
            return None
        try:
            return hashlib.md5(self.manifest_path().read_bytes()).hexdigest()
        except FileNotFoundError:
            return None

    def _imported_chunks(
        self, manifest: Mapping[str, Any], chunk: Mapping[str, Any], seen: set[str]
    ) -> list[dict[str, Any]]:
        chunks: list[dict[str, Any]] = []
        for name in chunk.get("imports", []):
            if name in seen:
                continue
            seen.add(name)
            imported = manifest.get(name)
            if imported is None:
                raise ManifestEntryError(f"Unable to locate file in Vite manifest: {name}.")
            imported = _checked_entry(name, imported)
            chunks.extend(self._imported_chunks(manifest, imported, seen))
            chunks.append(imported)
        return chunks

    def tags(self, entrypoints: Iterable[str]) -> Markup:
        """Render the preload, stylesheet and script tags for ``entrypoints``."""
        entrypoints = list(entrypoints)
        if self.is_running_hot():
            base = self.hot_url()
            tags = [_script_tag(f"{base}/@vite/client")]
            tags.extend(_tag_for(f"{base}/{entry}", entry) for entry in entrypoints)
            return TAG_SEPARATOR.join(tags)

        manifest = self.manifest()
        preloads: dict[str, Markup] = {}
        stylesheets: dict[str, Markup] = {}
        scripts: dict[str, Markup] = {}
        seen: set[str] = set()

        for entry in entrypoints:
            chunk = self.chunk(entry)
            for imported in self._imported_chunks(manifest, chunk, seen):
                url = self.asset_url(imported["file"])
                preloads.setdefault(url, _modulepreload_tag(url, imported.get("integrity")))
                for css in imported.get("css", []):
                    css_url = self.asset_url(css)
                    stylesheets.setdefault(css_url, _stylesheet_tag(css_url))

            for css in chunk.get("css", []):
                css_url = self.asset_url(css)
                stylesheets.setdefault(css_url, _stylesheet_tag(css_url))

            url = self.asset_url(chunk["file"])
            if is_css_path(chunk["file"]):
                stylesheets.setdefault(url, _stylesheet_tag(url, chunk.get("integrity")))
            else:
                scripts.setdefault(url, _script_tag(url, chunk.get("integrity")))

        return TAG_SEPARATOR.join([*preloads.values(), *stylesheets.values(), *scripts.values()])


def current_vite() -> Vite:
    """Return a resolver bound to the active application's configuration."""
    return Vite.from_config(current_app.config)
