"""
Shared utility helpers.
"""

from datetime import datetime, timezone
from urllib.parse import quote


def utc_now() -> datetime:
    """Return the current UTC datetime (timezone-aware)."""
    return datetime.now(timezone.utc)


def safe_get(data: dict, *keys: str | int, default=None):
    """
    Safely traverse nested dicts and lists.

    Usage:
        safe_get(payload, "errors", 0, "code")
    """
    current = data
    for key in keys:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
            current = current[key]
            continue
        if not isinstance(current, dict):
            return default
        current = current.get(key, default)
    return current


def render_path(template: str, params: dict[str, str] | None = None) -> str:
    """
    Substitute ``{name}`` placeholders with URL-quoted values.

    Usage:
        render_path("/vdcs/{id}", {"id": "abc"})  # -> "/vdcs/abc"
    """
    path = template
    for name, value in (params or {}).items():
        path = path.replace("{" + name + "}", quote(str(value), safe=""))
    return path
