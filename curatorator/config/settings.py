"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# pydantic-settings reads configuration from two sources (in priority order):
#
#   1. **Environment variables** - e.g., ARTSY_XAPP_TOKEN=abc123
#   2. **.env file** - key=value lines in the project root .env file
#
# Field name `artsy_xapp_token` maps to env var `ARTSY_XAPP_TOKEN`.
#
# The token is never validated at startup.  An empty or expired token only
# shows up later as a FetchError from the first API request.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Curatorator application settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Artsy API ===
    artsy_xapp_token: str = ""
    artsy_api_root: str = "https://api.artsy.net/api"
    artsy_accept: str = "application/vnd.artsy-v2+json"
    http_timeout: float = 30.0

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
