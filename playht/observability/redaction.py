"""Secrets redaction engine.

Patterns: play.ht auth headers, bearer tokens, key=value secrets, emails.
"""
import re
from typing import List, Mapping, Tuple

# (pattern, replacement_label)
_PATTERNS: List[Tuple[re.Pattern, str]] = [
    # AUTHORIZATION / X-USER-ID header values as rendered in logs
    (re.compile(r"(authorization|x-user-id)([\"']?\s*[:=]\s*[\"']?)[^\s\"',}]+", re.IGNORECASE), r"\1\2[REDACTED]"),
    # Generic bearer token
    (re.compile(r"Bearer\s+[A-Za-z0-9_\-\.]+", re.IGNORECASE), "[REDACTED_BEARER]"),
    # API key patterns (generic long hex/base64)
    (re.compile(r"(?:api[_-]?key|secret[_-]?key|token|secret|password)[\s:=]+[\"']?[A-Za-z0-9_\-\.]{16,}[\"']?", re.IGNORECASE), "[REDACTED_SECRET]"),
    # Email (voice owners, account ids)
    (re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+"), "[REDACTED_EMAIL]"),
]

SENSITIVE_HEADERS = {"authorization", "x-user-id", "cookie", "set-cookie"}


def redact(text: str) -> str:
    """Apply all redaction patterns to text."""
    result = text
    for pattern, replacement in _PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def redact_headers(headers: Mapping[str, str]) -> dict:
    """Return a copy of headers safe to log."""
    return {
        k: "[REDACTED]" if k.lower() in SENSITIVE_HEADERS else v
        for k, v in headers.items()
    }
