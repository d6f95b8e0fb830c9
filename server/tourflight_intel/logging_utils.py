# logging_utils.py
# Structured JSON logging for tourflight_intel

import json
import logging
import os
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import settings

# Per-request correlation id (set by the HTTP middleware in api.py)
_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Attributes every LogRecord carries, plus the ones Formatter adds later
_RESERVED_LOG_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONLogFormatter(logging.Formatter):
    """One JSON object per line: envelope keys first, then the record's extra fields."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, timezone.utc)
        payload: Dict[str, Any] = {
            "ts": stamp.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(record.msecs):03d}Z",
            "level": record.levelname,
            "logger": record.name,
            "service": settings.service_name,
            "env": settings.env,
            "message": record.getMessage(),
        }
        if _request_id.get():
            payload["request_id"] = _request_id.get()

        payload.update(
            (k, v)
            for k, v in vars(record).items()
            if not k.startswith("_") and k not in _RESERVED_LOG_FIELDS and k not in payload
        )

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _file_handler(path: str) -> Optional[logging.Handler]:
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return logging.FileHandler(path)
    except OSError as e:
        print(f"tourflight: cannot log to {path}: {e}", file=sys.stderr)
        return None


def configure_logging() -> None:
    """Install JSON handlers on the root logger. Safe to call more than once."""
    root = logging.getLogger()
    if getattr(root, "_tourflight_configured", False):
        return

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handler = _file_handler(settings.log_file)
        if handler is not None:
            handlers.append(handler)

    formatter = JSONLogFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(settings.log_level)
    root._tourflight_configured = True  # type: ignore[attr-defined]


def new_request_id() -> str:
    rid = uuid.uuid4().hex
    _request_id.set(rid)
    return rid


def set_request_id(rid: Optional[str]) -> None:
    _request_id.set(rid)


def log_event(logger: logging.Logger, event: str, level: int = logging.INFO, **fields: Any) -> None:
    """
    Log ``event`` as the message with ``fields`` attached to the record.

    A field named like a LogRecord attribute gets a ``field_`` prefix
    (``filename`` is logged as ``field_filename``).
    """
    if not logger.isEnabledFor(level):
        return
    extra = {(f"field_{k}" if k in _RESERVED_LOG_FIELDS else k): v for k, v in fields.items()}
    extra["event"] = event
    logger.log(level, event, extra=extra)
