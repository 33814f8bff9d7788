from quill.middleware.middleware import LoggingMiddleware, lifespan

__all__ = ["LoggingMiddleware", "lifespan"]
