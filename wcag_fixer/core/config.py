"""
Configuration module - centralized settings for the fixer.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Fixer settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Every variable is prefixed with WCAG_FIXER_, e.g.:
        export WCAG_FIXER_OUTPUT_PATH=/tmp/fixed.html
        export WCAG_FIXER_USE_BROWSER=false
    """

    model_config = SettingsConfigDict(
        env_prefix="WCAG_FIXER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # SOURCE / OUTPUT
    # ---------------------------------------------------------------------------
    # SOURCE: URL or file path used when the CLI is called without one
    SOURCE: str = "./test.html"

    # OUTPUT_PATH: Overwritten on every successful run
    OUTPUT_PATH: str = "fixed_output.html"

    # ---------------------------------------------------------------------------
    # RULE DEFAULTS
    # ---------------------------------------------------------------------------
    # DEFAULT_LANGUAGE: Locale written to <html lang> when it is missing
    DEFAULT_LANGUAGE: str = Field(default="en", min_length=1)

    # FOCUS_MARKER_COLOR: Colour of the injected focus ring
    FOCUS_MARKER_COLOR: str = Field(default="#00f", min_length=1)

    # ---------------------------------------------------------------------------
    # ACQUISITION
    # ---------------------------------------------------------------------------
    # USE_BROWSER: Render URLs in headless Chromium (Playwright) instead of
    # a plain HTTP GET, so that script-built markup is captured
    USE_BROWSER: bool = True

    BROWSER_TIMEOUT_MS: int = Field(default=30000, gt=0)

    # WAIT_UNTIL: Playwright load state to wait for before reading content
    WAIT_UNTIL: str = "domcontentloaded"

    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    USER_AGENT: str = "wcag-fixer/0.1"

    # ---------------------------------------------------------------------------
    # LOGGING
    # ---------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from wcag_fixer.core.config import settings
settings = Settings()
