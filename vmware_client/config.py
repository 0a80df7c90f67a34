"""
Client settings loaded from environment variables.

Uses pydantic-settings to validate and type-cast env vars. The service
facade never reads these implicitly; only ``VmwareService.from_settings()``
and the example programs do.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Client identity ───────────────────────────────────────────────
    app_name: str = "vmware-client"
    app_version: str = "1.0.0"

    # ── VMware as a Service control plane ─────────────────────────────
    service_url: str = "https://api.us-south.vmware.cloud.ibm.com/v1"
    api_version: str = "2024-05-01"
    request_timeout: float = 30.0

    # ── IAM (Authentication) ──────────────────────────────────────────
    iam_url: str = "https://iam.cloud.ibm.com"
    iam_apikey: str = ""
    bearer_token: str = ""

    # ── Logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    @property
    def user_agent(self) -> str:
        return f"{self.app_name}/{self.app_version}"


@lru_cache
def get_settings() -> Settings:
    """
    Cached singleton — settings are read once and reused.
    """
    return Settings()
