"""
Logging for the invoice builder.

Call setup_logging(settings) once at startup; later calls only adjust the level.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from invoice_builder.settings import Settings


LOG_FILE_NAME = "invoice_builder.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5

# Handlers installed by setup_logging carry this attribute.
_OWNED = "_invoice_builder_handler"


def _owned_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in root.handlers if getattr(handler, _OWNED, False)]


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.log_dir / LOG_FILE_NAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    return [logging.StreamHandler(sys.stdout), file_handler]


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO
    root = logging.getLogger()
    handlers = _owned_handlers(root)

    if not handlers:
        formatter = logging.Formatter(LOG_FORMAT)
        handlers = _build_handlers(settings)
        for handler in handlers:
            handler.setFormatter(formatter)
            setattr(handler, _OWNED, True)
            root.addHandler(handler)

    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
    # SQL statements stay quiet even in debug mode.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
