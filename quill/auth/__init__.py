from quill.auth.cached_user_provider import CACHE_FAILURE_EVENT, CachedUserProvider
from quill.auth.factory import create_user_provider
from quill.auth.protocols import DiagnosticsSink, StoreResolver, UserProvider

__all__ = [
    "CACHE_FAILURE_EVENT",
    "CachedUserProvider",
    "DiagnosticsSink",
    "StoreResolver",
    "UserProvider",
    "create_user_provider",
]
