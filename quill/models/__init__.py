"""Database models for the application."""

from quill.models.user import UserDB

__all__ = ["UserDB"]
