import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


class Config:
    """
    Environment-driven settings:
    - no secrets hard-coded, everything comes from environment variables
    - DEBUG follows FLASK_DEBUG (0/1)
    - the Vite build is read from PUBLIC_DIR/VITE_BUILD_DIRECTORY
    """

    DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"

    APP_LOCALE = os.getenv("APP_LOCALE", "en")
    APP_FALLBACK_LOCALE = os.getenv("APP_FALLBACK_LOCALE", "en")
    NEGOTIATE_LOCALE = os.getenv("NEGOTIATE_LOCALE", "0") == "1"

    PUBLIC_DIR = os.getenv("PUBLIC_DIR", str(BASE_DIR / "public"))
    ASSET_URL = os.getenv("ASSET_URL", "")
    VITE_BUILD_DIRECTORY = os.getenv("VITE_BUILD_DIRECTORY", "build")
    # Defaults to PUBLIC_DIR/hot when unset.
    VITE_HOT_FILE = os.getenv("VITE_HOT_FILE")
    VITE_ENTRYPOINTS = ("resources/css/app.css", "resources/js/app.js")

    INERTIA_ROOT_ID = "app"
    GA_TRACKING_ID = os.getenv("GA_TRACKING_ID", "G-6GM7JT9KS8")
