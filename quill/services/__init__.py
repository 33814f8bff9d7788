from quill.services.email_verification import EmailVerificationService

__all__ = ["EmailVerificationService"]
