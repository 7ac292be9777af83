"""Structured logging with secret redaction hooks.

Supports two modes:
  - ENV=prod → JSON structured logging (machine-parseable)
  - ENV!=prod → Human-readable plaintext (developer friendly)

The library never touches the root logger on import; applications opt in
by calling setup_logging().
"""
import json
import logging
import re
import sys
from typing import Optional

from playht.config.settings import get_settings
from playht.observability.redaction import redact

_JOB_RE = re.compile(r"job=(\S+)")


class RedactingFormatter(logging.Formatter):
    """Formatter that redacts credentials from log messages."""

    def format(self, record: logging.LogRecord) -> str:
        settings = get_settings()
        original = super().format(record)
        if settings.LOG_REDACTION_ENABLED:
            return redact(original)
        return original


class JSONFormatter(logging.Formatter):
    """JSON structured formatter for production: machine-parseable."""

    def format(self, record: logging.LogRecord) -> str:
        settings = get_settings()
        msg = record.getMessage()
        log_entry = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": msg,
        }
        # Correlate by TTS job when the message carries one (convention: job=xxx)
        m = _JOB_RE.search(msg)
        if m:
            log_entry["job_id"] = m.group(1)

        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)

        raw = json.dumps(log_entry, default=str)
        if settings.LOG_REDACTION_ENABLED:
            return redact(raw)
        return raw


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logger: JSON in prod, plaintext in dev."""
    settings = get_settings()
    log_level = level or settings.LOG_LEVEL

    if settings.ENV == "prod":
        formatter = JSONFormatter()
    else:
        formatter = RedactingFormatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    # Silence noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
