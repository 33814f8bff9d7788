"""Module-level logger helpers."""

from logging import INFO, Formatter, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from quill.configs.settings import settings

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def file_logger(logger: Logger) -> Logger:
    """Attach the rotating log file handler to ``logger`` when file logging is on."""
    if not settings.LOG_TO_FILE:
        return logger

    log_file = Path(settings.LOG_FILE)
    if any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == log_file.resolve()
        for h in logger.handlers
    ):
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setLevel(INFO)
    handler.setFormatter(Formatter(FILE_FORMAT))
    logger.addHandler(handler)
    return logger
