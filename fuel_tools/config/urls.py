"""Server URL normalization.

A server URL is kept in a single canonical form so that
``http://host:8080/`` and ``http://host:8080`` refer to the same server.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit


def normalize_url(raw_url: Optional[str]) -> Optional[str]:
    """Return the normalized form of *raw_url*, or ``None`` if it is invalid.

    - Surrounding whitespace is ignored.
    - The URL must be absolute: a non-empty scheme and a non-empty host.
    - A port, when present, must be numeric.
    - Exactly one trailing ``/`` is stripped.
    """
    if not isinstance(raw_url, str):
        return None

    url = raw_url.strip()
    if not url:
        return None

    try:
        parts = urlsplit(url)
        # Accessing .port validates it (raises ValueError when out of range).
        parts.port  # noqa: B018
    except ValueError:
        return None

    if not parts.scheme or not parts.hostname:
        return None

    if url.endswith("/"):
        url = url[:-1]
    return url
