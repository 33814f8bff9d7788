"""
Cache key builders for the application.

Keys built here are shared by readers and invalidators, so every part of the
application that touches an entry must go through these functions.
"""

from uuid import UUID

from quill.configs import AUTH_USER_KEY_PREFIX

type UserIdentifier = UUID | int | str


def auth_user_key(identifier: UserIdentifier) -> str:
    """Generate the auth cache key for a user identifier."""
    return f"{AUTH_USER_KEY_PREFIX}{identifier}"
