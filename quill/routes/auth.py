"""Auth routes backed by the cached user provider."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import ORJSONResponse

from quill.dependencies import EmailVerificationDep, UserProviderDep
from quill.schemas import EmailVerificationResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["🔑 Auth"])


@router.get(
    "/users/{user_id}",
    summary="Resolve a user by ID",
    response_model=UserResponse,
    response_class=ORJSONResponse,
    operation_id="get_auth_user",
)
async def get_auth_user(user_id: UUID, provider: UserProviderDep) -> UserResponse:
    """Resolve a user the way the authentication layer does, cache included."""
    user = await provider.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.model_validate(user)


@router.post(
    "/users/{user_id}/verify-email",
    summary="Mark a user's email address as verified",
    response_model=EmailVerificationResponse,
    response_class=ORJSONResponse,
    operation_id="verify_email",
)
async def verify_email(user_id: UUID, service: EmailVerificationDep) -> EmailVerificationResponse:
    newly_verified = await service.verify(user_id)
    return EmailVerificationResponse(user_id=user_id, verified=True, newly_verified=newly_verified)
