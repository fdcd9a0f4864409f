"""Username policy."""

import re

from core.config import settings

USERNAME_PATTERN = re.compile(r"[a-z0-9_]+")

RESERVED_USERNAMES = frozenset(
    {
        "admin",
        "administrator",
        "api",
        "help",
        "null",
        "root",
        "settings",
        "support",
        "system",
        "undefined",
    }
)


def validate_username(username: str) -> bool:
    """Return True if the username may be registered."""
    if not settings.username_min_length <= len(username) <= settings.username_max_length:
        return False
    if not USERNAME_PATTERN.fullmatch(username):
        return False
    return username not in RESERVED_USERNAMES
