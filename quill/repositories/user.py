"""User repository for database operations."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import ColumnElement

from quill.errors import DatabaseError, DuplicateEntryError, RecordNotFoundError
from quill.models.user import UserDB
from quill.schemas.user import UserCreate


class UserRepository:
    """
    Repository for User database operations.

    This is the persistent user store behind authentication: ``get_by_id``
    is the lookup the auth cache wraps.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user in the database.

        Raises:
            DuplicateEntryError: If username or email already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(
            username=user.username,
            email=str(user.email),
            first_name=user.first_name,
            last_name=user.last_name,
        )

        try:
            self.session.add(db_user)
            await self.session.flush()
            await self.session.refresh(db_user)
            return db_user
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "username" in error_msg.lower():
                raise DuplicateEntryError(
                    detail=f"Username '{user.username}' already exists",
                ) from e
            if "email" in error_msg.lower():
                raise DuplicateEntryError(
                    detail=f"Email '{user.email}' already exists",
                ) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        """
        Get user by ID.

        Args:
            user_id: User UUID

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.uuid == user_id)),
        )
        return result.scalar_one_or_none()

    async def get_or_raise(self, user_id: UUID) -> UserDB:
        """
        Get user by ID or raise.

        Raises:
            RecordNotFoundError: If the user does not exist
        """
        user = await self.get_by_id(user_id)
        if user is None:
            raise RecordNotFoundError(detail=f"User with ID {user_id} not found")
        return user

    async def mark_email_verified(self, user: UserDB) -> UserDB:
        """Stamp ``email_verified_at`` and flush the change."""
        now = datetime.now(tz=UTC)
        user.email_verified_at = now
        user.updated_at = now
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
