from quill.schemas.user import EmailVerificationResponse, UserCreate, UserResponse

__all__ = ["EmailVerificationResponse", "UserCreate", "UserResponse"]
