"""JSON logging for the mail builder.

Every record becomes one JSON object per line. Values passed through
``extra=`` (or bound with ``get_logger(name, **context)``) are collected
under the ``"extra"`` key, and the current render request id is attached
when one is set.

Recipient addresses must go through mask_email() before being logged,
and rendered mail bodies are only ever logged at DEBUG.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from contextvars import ContextVar
from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Iterable
from typing import MutableMapping
from typing import Optional
from typing import TextIO


def mask_email(email: str) -> str:
    """Mask an email address for safe logging.

    Examples:
        >>> mask_email("john.doe@example.com")
        'jo***@***.com'
        >>> mask_email("a@b.co")
        'a***@***.co'
    """
    if not email or "@" not in email:
        return "***"

    local, domain = email.rsplit("@", 1)
    domain_parts = domain.rsplit(".", 1)

    visible_local = local[:2] if len(local) > 2 else local[:1]
    tld = domain_parts[-1] if len(domain_parts) > 1 else ""

    return f"{visible_local}***@***.{tld}" if tld else f"{visible_local}***@***"


def mask_emails(emails: Iterable[str]) -> list[str]:
    """Mask every address in a recipient list."""
    return [mask_email(email) for email in emails]


request_id: ContextVar[str] = ContextVar("request_id", default="")

# Attributes every LogRecord carries; anything else came in through extra=.
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def record_extra(record: logging.LogRecord) -> dict[str, Any]:
    """Return the caller-supplied fields attached to a log record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
    }


class StructuredLogFormatter(logging.Formatter):
    """Format records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        req_id = request_id.get()
        if req_id:
            log_data["request_id"] = req_id

        log_data["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        extra = record_extra(record)
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that adds its bound context to every record.

    Fields passed with ``extra=`` on a single call take precedence over
    the bound context.
    """

    def process(
        self,
        msg: str,
        kwargs: MutableMapping[str, Any],
    ) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **(kwargs.get("extra") or {})}
        return msg, kwargs


def configure_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Install the JSON formatter on the root logger.

    Args:
        level: Log level name. Defaults to LOG_LEVEL, then INFO.
        stream: Where log lines go. Defaults to stdout, which is what
            Lambda ships to CloudWatch; the CLI passes stderr so the
            rendered HTML stays alone on stdout.
    """
    log_level: str = level or os.getenv("LOG_LEVEL") or "INFO"

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(StructuredLogFormatter())
    root_logger.addHandler(handler)

    for noisy in ("boto3", "botocore", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str, **context: Any) -> ContextLogger:
    """Return a logger that adds ``context`` to every record."""
    return ContextLogger(logging.getLogger(name), context)


def set_request_context(req_id: Optional[str] = None) -> None:
    """Attach a request id to every log line of the current render."""
    if req_id:
        request_id.set(req_id)


def clear_request_context() -> None:
    request_id.set("")


def log_response(
    logger: ContextLogger,
    status_code: int,
    duration_ms: Optional[float] = None,
) -> None:
    """Log the outcome of a render request.

    Client and server errors are logged at WARNING, everything else at INFO.
    """
    fields: dict[str, Any] = {"status_code": status_code}
    if duration_ms is not None:
        fields["duration_ms"] = round(duration_ms, 2)

    level = logging.INFO if status_code < 400 else logging.WARNING
    logger.log(level, "Render response", extra=fields)
