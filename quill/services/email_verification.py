"""Email verification workflow."""

from uuid import UUID

from quill.auth.cached_user_provider import CachedUserProvider
from quill.errors import CacheBackendError
from quill.monitoring import get_logger
from quill.repositories.user import UserRepository

logger = get_logger(__name__)


class EmailVerificationService:
    """
    Marks email addresses as verified and evicts the stale auth cache entry.

    The verification is committed before the eviction, so the next cache miss
    reads the verified row.

    A failed eviction is logged and ignored: the cached user is at worst stale
    until its TTL runs out.
    """

    def __init__(
        self,
        repository: UserRepository,
        user_cache: CachedUserProvider | None = None,
    ) -> None:
        self.repository = repository
        self.user_cache = user_cache

    async def verify(self, user_id: UUID) -> bool:
        """
        Verify the email address of ``user_id``.

        Returns:
            True if the address was verified now, False if it already was.

        Raises:
            RecordNotFoundError: If the user does not exist.
        """
        user = await self.repository.get_or_raise(user_id)
        if user.has_verified_email:
            return False

        await self.repository.mark_email_verified(user)
        # Evicting before the commit lets a concurrent reader re-cache the old row.
        await self.repository.session.commit()
        logger.info("Email verified", user_id=str(user_id))

        if self.user_cache is not None:
            try:
                await self.user_cache.invalidate(user_id)
            except CacheBackendError as e:
                logger.warning(
                    "Failed to evict verified user from auth cache",
                    user_id=str(user_id),
                    error=str(e),
                    cache_store=self.user_cache.store_name,
                )
        return True
