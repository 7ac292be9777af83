"""Client configuration guardrails."""

import logging
from urllib.parse import urlparse

from playht.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def validate_credentials(secret_key: str, user_id: str) -> None:
    """Fail closed if either credential is missing."""
    required_vars = {
        "PLAYHT_SECRET_KEY": secret_key,
        "PLAYHT_USER_ID": user_id,
    }
    missing = [k for k, v in required_vars.items() if not v or not v.strip()]
    if missing:
        raise ConfigurationError(
            f"missing required credentials: {', '.join(missing)}. "
            "Set them in the environment or .env, or pass them to the client."
        )


def validate_base_url(base_url: str) -> None:
    parsed = urlparse(base_url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"invalid API base URL: {base_url!r}")
    if parsed.scheme == "http":
        logger.warning("CONFIG WARNING: base URL %s is not TLS, credentials sent in clear", base_url)
