"""
Withings API Configuration
==========================
Credentials for the example programs and for the `from_settings` helpers on
the client config models. Loaded from environment variables or a .env file;
the clients themselves never read settings implicitly.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings

from withings_api.constants import WITHINGS_API_URL


class Settings(BaseSettings):
    """Loaded from environment variables or a .env file."""

    # --- Withings API host ---
    withings_api_url: str = WITHINGS_API_URL

    # --- OAuth client (developer dashboard) ---
    client_id: str = ""
    consumer_secret: str = ""
    callback_url: str = ""
    # Sent as the `state` parameter of the authorize URL
    mode: str = "demo"

    # --- Per-user credentials ---
    code: str = ""  # authorization code from the callback redirect
    access_token: str = ""

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
