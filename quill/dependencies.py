"""FastAPI dependencies wiring the auth layer per request."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from quill.auth import CachedUserProvider, UserProvider, create_user_provider
from quill.configs import AuthProviderConfig
from quill.db import get_session
from quill.managers import CacheManager
from quill.repositories import UserRepository
from quill.services import EmailVerificationService

auth_config = AuthProviderConfig()


def get_cache_manager(request: Request) -> CacheManager:
    """Return the cache manager created by the application lifespan."""
    return request.app.state.cache_manager


def get_auth_config() -> AuthProviderConfig:
    return auth_config


SessionDep = Annotated[AsyncSession, Depends(get_session)]
CacheManagerDep = Annotated[CacheManager, Depends(get_cache_manager)]
AuthConfigDep = Annotated[AuthProviderConfig, Depends(get_auth_config)]


def get_user_provider(
    session: SessionDep,
    cache_manager: CacheManagerDep,
    config: AuthConfigDep,
) -> UserProvider:
    return create_user_provider(session, cache_manager, config)


UserProviderDep = Annotated[UserProvider, Depends(get_user_provider)]


def get_email_verification_service(
    session: SessionDep,
    provider: UserProviderDep,
) -> EmailVerificationService:
    user_cache = provider if isinstance(provider, CachedUserProvider) else None
    return EmailVerificationService(UserRepository(session), user_cache)


EmailVerificationDep = Annotated[
    EmailVerificationService,
    Depends(get_email_verification_service),
]
