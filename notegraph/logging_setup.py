from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from notegraph.settings import APP_NAME, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 5


class EnsureSessionFilter(logging.Filter):
    """Stamp records from plain loggers with the session id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(EnsureSessionFilter())
    return handler


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    log_path: Path = LOG_PATH,
) -> logging.Logger:
    """
    Attach handlers to the ``notegraph`` logger.

    Everything goes to a rotating file; the console gets ``console_level``
    and up on stderr, since stdout carries command output. Calling it again
    only adjusts the console level.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.handlers:
        for h in logger.handlers:
            if not isinstance(h, RotatingFileHandler):
                h.setLevel(console_level)
        return logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.addHandler(
        _handler(
            RotatingFileHandler(
                log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
            ),
            logging.DEBUG,
        )
    )
    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), console_level))

    logger.debug("logging ready log_file=%s", log_path)
    return logger


log = SessionAdapter(logging.getLogger(APP_NAME), {})


def install_global_exception_hooks() -> None:
    """Log uncaught exceptions before the default hook prints them."""

    def _excepthook(exc_type, exc, tb):
        if not issubclass(exc_type, KeyboardInterrupt):
            log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
