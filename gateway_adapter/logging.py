"""Logging configuration for the gateway adapter service."""

from __future__ import annotations

import contextvars
import json
import logging
import os
import pathlib
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict

_LOG_CONFIGURED = False
_REQUEST_ID_CTX: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "request_id"}


class RequestContextFilter(logging.Filter):
    """Stamp each record with the request id bound to the current context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _REQUEST_ID_CTX.get()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with ``extra`` fields lifted to the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = getattr(record, "request_id", None)
        if request_id:
            payload["request_id"] = request_id

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=True, default=str)


def set_request_id(request_id: str | None) -> contextvars.Token[str | None]:
    return _REQUEST_ID_CTX.set(request_id)


def reset_request_id(token: contextvars.Token[str | None]) -> None:
    _REQUEST_ID_CTX.reset(token)


def get_request_id() -> str | None:
    return _REQUEST_ID_CTX.get()


def _log_file_path() -> pathlib.Path | None:
    configured = os.getenv("LOG_FILE", "logs/gateway.jsonl")
    if not configured or configured == "-":
        return None
    path = pathlib.Path(configured)
    if not path.is_absolute():
        path = pathlib.Path.cwd() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def configure_logging() -> None:
    """Install console and JSON-lines file handlers on the root logger once."""
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED:
        return

    console_level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
    console_level = getattr(logging, console_level_name, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    context_filter = RequestContextFilter()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.addFilter(context_filter)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s (request_id=%(request_id)s)"
        )
    )
    root_logger.addHandler(console_handler)

    log_path = _log_file_path()
    if log_path is not None:
        file_handler = RotatingFileHandler(log_path, maxBytes=10_000_000, backupCount=5)
        file_handler.setLevel(logging.INFO)
        file_handler.addFilter(context_filter)
        file_handler.setFormatter(JsonFormatter())
        root_logger.addHandler(file_handler)

    # httpx logs every request line at INFO, including the full gateway URL.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.WARNING)

    _LOG_CONFIGURED = True


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
]
