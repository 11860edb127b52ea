"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets the prompt, the flows and the logging setup read one consistent
  contract.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EXIT_SENTINEL = ":exit"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "data-frobotz"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "data-frobotz"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "data-frobotz"
    return Path.home() / ".config" / "data-frobotz"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) so the prompt logic never
      sees a malformed sentinel.
    - One configuration contract for CLI, services and logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="FROBOTZ_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    site_name: str = Field(
        default="Data-Frobotz",
        min_length=1,
        max_length=32,
        description="Site name shown in the banner and flow headings.",
    )
    exit_sentinel: str = Field(
        default=EXIT_SENTINEL,
        min_length=1,
        description="Token that cancels a prompt without confirmation.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner before the menu.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level name for the `frobotz` logger (DEBUG, INFO, ...).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional rotating log file. Console-only when unset.",
    )

    @field_validator("exit_sentinel")
    @classmethod
    def _sentinel_is_trimmed(cls, value: str) -> str:
        # Input is trimmed before comparison, so a padded sentinel could never match.
        if value != value.strip():
            raise ValueError("exit_sentinel must not have surrounding whitespace")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
