"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets adapters (HTTP) and the CLI read the same typed values.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from urllib.parse import urljoin

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.services.styles import AggregationStyle


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "holocron"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "holocron"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "holocron"
    return Path.home() / ".config" / "holocron"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, .env files).
    - One configuration contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOLOCRON_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://swapi.dev/api/",
        min_length=8,
        description="Base URL of the upstream REST API.",
    )
    default_person_path: str = Field(
        default="people/1/",
        min_length=1,
        description="Path of the root resource, relative to `api_base_url`.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="holocron/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    default_style: AggregationStyle = Field(
        default=AggregationStyle.AWAIT,
        description="Control-flow style used when the CLI gets no --style.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING...).",
    )

    @property
    def root_url(self) -> str:
        """Absolute URL of the default root resource."""

        base = self.api_base_url if self.api_base_url.endswith("/") else self.api_base_url + "/"
        return urljoin(base, self.default_person_path.lstrip("/"))
