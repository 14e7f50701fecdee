"""
Structured logging for the catalog backend.

Log calls take keyword fields next to the message:

    logger.info("Audit event", action="create", entity_type="Product")

Production renders one JSON object per line; every other environment gets
a compact colored line. Both include the request id set by
CorrelationIdMiddleware.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from shared.config.settings import settings


def _fields(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "fields", None) or {}


def _request_id(record: logging.LogRecord) -> str | None:
    request_id = getattr(record, "request_id", None)
    return None if request_id in (None, "", "-") else request_id


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if request_id := _request_id(record):
            entry["request_id"] = request_id
        if fields := _fields(record):
            entry["data"] = fields
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, "")
        parts = [
            f"{color}{record.levelname:<7}{self.RESET}",
            datetime.now().strftime("%H:%M:%S"),
        ]
        if request_id := _request_id(record):
            parts.append(f"[{request_id[:8]}]")
        parts.append(f"{record.name}: {record.getMessage()}")

        line = " ".join(parts)
        if fields := _fields(record):
            line += " | " + ", ".join(f"{key}={value}" for key, value in fields.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger(logging.Logger):
    """Logger whose info/warning/error accept keyword fields."""

    def _log_fields(self, level: int, msg: str, args: tuple, exc_info: Any, fields: dict) -> None:
        if not self.isEnabledFor(level):
            return
        # Plain stdlib callers (third-party loggers) may still pass extra=
        extra = dict(fields.pop("extra", None) or {})
        fields.pop("stack_info", None)
        fields.pop("stacklevel", None)
        extra["fields"] = fields
        self._log(level, msg, args, exc_info=exc_info, extra=extra)

    def info(self, msg: str, *args: Any, exc_info: Any = None, **fields: Any) -> None:
        self._log_fields(logging.INFO, msg, args, exc_info, fields)

    def warning(self, msg: str, *args: Any, exc_info: Any = None, **fields: Any) -> None:
        self._log_fields(logging.WARNING, msg, args, exc_info, fields)

    def error(self, msg: str, *args: Any, exc_info: Any = None, **fields: Any) -> None:
        self._log_fields(logging.ERROR, msg, args, exc_info, fields)


logging.setLoggerClass(StructuredLogger)


def setup_logging() -> None:
    """Install the stdout handler on the root logger. Called from the lifespan."""
    # Deferred: correlation imports fastapi, config must stay importable without it
    from shared.infrastructure.correlation import CorrelationIdFilter

    level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(
        JsonFormatter() if settings.environment == "production" else ConsoleFormatter()
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    return logging.getLogger(name)  # type: ignore[return-value]


rest_api_logger = get_logger("rest_api")
audit_logger = get_logger("catalog.audit")
