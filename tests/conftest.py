import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from landing import create_app

CSS_URL = "/build/assets/app-4ed993c7.css"
JS_URL = "/build/assets/app-a1b2c3d4.js"

MANIFEST = {
    "resources/css/app.css": {
        "file": "assets/app-4ed993c7.css",
        "src": "resources/css/app.css",
        "isEntry": True,
    },
    "resources/js/app.js": {
        "file": "assets/app-a1b2c3d4.js",
        "src": "resources/js/app.js",
        "isEntry": True,
    },
}


def _write_manifest(public_dir: Path, manifest=None, filename: str = "manifest.json") -> Path:
    path = Path(public_dir) / "build" / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(MANIFEST if manifest is None else manifest), encoding="utf-8")
    return path


@pytest.fixture()
def write_manifest():
    """Helper writing a manifest under ``<public_dir>/build``."""
    return _write_manifest


@pytest.fixture()
def public_dir(tmp_path):
    directory = Path(tmp_path) / "public"
    _write_manifest(directory)
    return directory


@pytest.fixture()
def app(public_dir):
    """Create a Flask app instance configured for tests."""
    app = create_app()
    app.config.update(
        TESTING=True,
        PUBLIC_DIR=str(public_dir),
        ASSET_URL="",
        VITE_BUILD_DIRECTORY="build",
        VITE_HOT_FILE=None,
        APP_LOCALE="en_US",
        APP_FALLBACK_LOCALE="en",
        NEGOTIATE_LOCALE=False,
        SUPPORTED_LOCALES=("en_US", "fr_FR", "de"),
        GA_TRACKING_ID="G-6GM7JT9KS8",
    )

    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()
