"""Repository layer for database operations."""

from quill.repositories.user import UserRepository

__all__ = ["UserRepository"]
