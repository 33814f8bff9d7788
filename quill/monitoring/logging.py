"""
Structured logging with PII sanitization.

This module configures structlog with:
- Pretty console output for development, JSON output elsewhere
- Redaction of e-mail addresses and JWTs
- Escaping of control characters to prevent log injection
- Request ID correlation through context variables

Examples
--------
>>> from quill.monitoring import get_logger
>>> logger = get_logger("quill.auth")
>>> logger.warning("Cache failure", identifier="42", cache_store="redis")
"""

from logging import StreamHandler, root
from re import Pattern
from re import compile as re_compile

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, StackInfoRenderer, add_log_level, format_exc_info
from structlog.stdlib import (
    BoundLogger,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from quill.configs import settings
from quill.utils.helpers import today_str

# Order matters: JWTs contain dots and must be matched before e-mails.
PII_PATTERNS: list[tuple[Pattern, str]] = [
    (re_compile(r"eyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*"), "[REDACTED_JWT]"),
    (re_compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "[REDACTED_EMAIL]"),
]

CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Escape control characters in a log message.

    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return str(message).translate(CONTROL_CHARS)


def redact_pii(message: str) -> str:
    """
    Redact PII patterns from a log message.

    >>> redact_pii("User user@example.com logged in")
    'User [REDACTED_EMAIL] logged in'
    """
    for pattern, replacement in PII_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["timestamp"] = today_str()
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Sanitize every string value of the event dictionary."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = redact_pii(sanitize_log_message(value))
    return event_dict


def get_renderer(*, colors: bool = True) -> Processor:
    if settings.ENVIRONMENT == "development":
        return ConsoleRenderer(colors=colors, pad_level=False)
    return JSONRenderer()


def configure_logging() -> None:
    """Configure structlog and route it through the standard library root logger."""
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            add_timestamp,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            sanitize_event_dict,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = StreamHandler()
    handler.setFormatter(
        ProcessorFormatter(
            processor=get_renderer(),
            foreign_pre_chain=[add_log_level, add_timestamp, sanitize_event_dict],
        ),
    )
    root.addHandler(handler)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    >>> logger = get_logger("quill.services.email_verification")
    >>> logger.info("Email verified", user_id="123")
    """
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    """Bind a request ID to the current logging context."""
    bind_contextvars(request_id=request_id)


def clear_context() -> None:
    clear_contextvars()
