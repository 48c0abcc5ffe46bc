"""Base URL + path template -> one absolute URL."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def compose_url(base: str, path: str) -> str:
    """
    Join base and path with exactly one "/" at the seam.
    Nothing else in the URL is touched.
    """
    if not path:
        url = base
    elif base.endswith("/") and path.startswith("/"):
        url = base + path[1:]
    elif base.endswith("/") or path.startswith("/"):
        url = base + path
    else:
        url = f"{base}/{path}"
    logger.debug("Composed URL: %s (base=%s, path=%s)", url, base, path)
    return url
