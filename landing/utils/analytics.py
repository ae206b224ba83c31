"""Google Analytics measurement id used by the gtag bootstrap."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_TRACKING_ID = "G-6GM7JT9KS8"
_TRACKING_ID = re.compile(r"^G-[A-Z0-9]+$")


def resolve_tracking_id(value: object) -> str:
    """Return the configured measurement id, or the default one when unusable."""
    if not value:
        return DEFAULT_TRACKING_ID

    candidate = str(value).strip()
    if _TRACKING_ID.match(candidate):
        return candidate

    logger.warning("Ignoring malformed GA_TRACKING_ID %r", value)
    return DEFAULT_TRACKING_ID
