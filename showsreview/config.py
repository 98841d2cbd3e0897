"""
Shows Review — Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the logging setup and the
       `python -m showsreview` entry point.

Environment variables (case-insensitive):
    PORT           Port the HTTP server binds (default 3000)
    HOST           Interface the HTTP server binds (default 127.0.0.1)
    LOG_LEVEL      DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    TEMPLATES_DIR  Directory holding the page templates
    STATIC_DIR     Directory served for unmatched GET/HEAD paths
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development; a bare
    `python -m showsreview` serves the site on http://127.0.0.1:3000.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Views & Assets ────────────────────────────────────────────────────
    # What: Where the renderer looks up `<template_name>.html`
    templates_dir: str = Field(default=str(PACKAGE_DIR / "templates"))

    # What: Directory whose files are served at their relative URL path
    static_dir: str = Field(default=str(PACKAGE_DIR / "static"))

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def base_url(self) -> str:
        """Address announced in the startup message."""
        return f"http://{self.host}:{self.port}"


# Singleton instance, imported throughout the application
settings = Settings()
