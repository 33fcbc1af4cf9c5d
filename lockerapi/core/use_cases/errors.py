from __future__ import annotations


class NotFoundError(Exception):
    """Raise to map to HTTP 404."""
