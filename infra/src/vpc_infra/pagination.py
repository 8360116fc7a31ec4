"""Cursor handling for paginated VPC list calls."""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse


def get_next(next_href: str | None) -> str:
    """Extract the ``start`` cursor from a collection's "next" link.

    Returns an empty string when there is no next page.
    """
    if not next_href:
        return ""
    values = parse_qs(urlparse(next_href).query).get("start")
    return values[0] if values else ""
