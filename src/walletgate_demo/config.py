"""
═══════════════════════════════════════════════════════════════════════════════
WalletGate Demo — Application Configuration
═══════════════════════════════════════════════════════════════════════════════

DemoSettings for the storefront backend. Holds:
    • API server (host, port, log level)
    • CORS
    • WalletGate API base URL (explicit, injected into the HTTP client)
    • Request timeout and session polling parameters
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_API_BASE = "http://localhost:4000"
PROD_API_BASE = "https://api.walletgate.app"


class DemoSettings(BaseSettings):
    """
    Storefront backend settings.

    Values are read from environment variables or a ``.env`` file.
    ``DEMO_API_BASE`` overrides the endpoint derived from ``APP_ENV``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Runtime environment ───────────────────────────────────────────────
    app_env: str = Field(
        default="development",
        description="Application environment: development | staging | production",
    )

    # ── API server ────────────────────────────────────────────────────────
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8300, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors(cls, v: str | List[str]) -> List[str]:
        """Parses CORS_ORIGINS given as a JSON string."""
        if isinstance(v, str):
            return json.loads(v)
        return v

    # ── WalletGate API ────────────────────────────────────────────────────
    demo_api_base: str = Field(
        default="",
        description="WalletGate API base URL; empty means derive from app_env",
    )
    request_timeout_seconds: float = Field(default=12.0, gt=0)

    # ── Session polling ───────────────────────────────────────────────────
    poll_interval_seconds: float = Field(default=10.0, gt=0)
    poll_max_attempts: int = Field(default=90, ge=1)

    @model_validator(mode="after")
    def _resolve_api_base(self) -> "DemoSettings":
        """Fills ``demo_api_base`` from ``app_env`` and strips trailing slashes."""
        base = self.demo_api_base.strip()
        if not base:
            base = DEV_API_BASE if self.app_env == "development" else PROD_API_BASE
        self.demo_api_base = base.rstrip("/")
        return self


@lru_cache
def get_settings() -> DemoSettings:
    """
    Returns the single DemoSettings instance.

    ``@lru_cache`` makes sure the object is built only on the first call.
    """
    return DemoSettings()


__all__ = ["DemoSettings", "get_settings", "DEV_API_BASE", "PROD_API_BASE"]
