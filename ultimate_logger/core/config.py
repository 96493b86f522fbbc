# ultimate_logger/core/config.py
"""
Central configuration for ultimate_logger.

This module defines a single `settings` object (Pydantic BaseSettings) that reads
configuration from environment variables prefixed with `ULTIMATE_LOGGER_`.

Guiding principles:
- Config is declared once, imported everywhere.
- Sensible defaults: a Logger behaves the same with or without any env set.
- No config files. Loggers themselves are configured in code.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

COLOR_MODES = ("auto", "always", "never")


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Values are looked up when a Logger is built or writes, so patching the
    singleton (or the environment before import) is enough to change behavior.
    """

    model_config = SettingsConfigDict(
        env_prefix="ULTIMATE_LOGGER_",
        extra="ignore",
        case_sensitive=False,
    )

    # -----------------------
    # Console
    # -----------------------
    COLOR: str = Field(
        default="auto",
        description="Console color mode: auto (TTY only) | always | never",
    )

    # -----------------------
    # File destination
    # -----------------------
    FILE_ENCODING: str = Field(
        default="utf-8",
        description="Text encoding used when opening log files",
    )

    # -----------------------
    # Diagnostics
    # -----------------------
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level for the library's own stdlib-logging diagnostics",
    )

    # -----------------------
    # Validators / normalizers
    # -----------------------
    @field_validator("COLOR")
    @classmethod
    def _normalize_color(cls, v: str) -> str:
        mode = (v or "auto").strip().lower()
        return mode if mode in COLOR_MODES else "auto"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return (v or "WARNING").strip().upper()

    @field_validator("FILE_ENCODING")
    @classmethod
    def _strip_encoding(cls, v: str) -> str:
        return (v or "utf-8").strip()


# Singleton instance imported across the package.
settings = Settings()
