"""Centralized settings module: single source of truth for client config.

Credentials are loaded from env vars (or a local .env file) and can be
overridden per client. Never logged unredacted.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

BASE_URL = "https://api.play.ht/api"
V2_PATH = "/v2"
# gRPC streaming lives under v1; not wrapped yet.
V1_PATH = "/v1"

CLIENT_USER_AGENT = "playht-client/0.2.0"


class Settings(BaseSettings):
    # ── Environment ──────────────────────────────────────────────
    ENV: Literal["dev", "staging", "prod"] = Field(default="dev")

    # ── play.ht API ──────────────────────────────────────────────
    PLAYHT_SECRET_KEY: str = Field(default="")
    PLAYHT_USER_ID: str = Field(default="")
    PLAYHT_BASE_URL: str = Field(default=BASE_URL + V2_PATH)
    PLAYHT_USER_AGENT: str = Field(default=CLIENT_USER_AGENT)
    # None = no client-side deadline; callers impose their own.
    PLAYHT_TIMEOUT_S: Optional[float] = Field(default=None)

    # ── Observability ────────────────────────────────────────────
    LOG_LEVEL: str = Field(default="INFO")
    LOG_REDACTION_ENABLED: bool = Field(default=True)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
