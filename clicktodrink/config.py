from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://www.clicktodrink.es/api/v1"


class AppConfig(BaseSettings):
    """Client configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    The establishment identifier has no default: it must be supplied by whoever
    deploys the client (ESTABLISHMENT_ID).
    """
    # Remote commerce API
    api_base_url: str = DEFAULT_API_BASE_URL
    establishment_id: Optional[str] = None

    # Application
    app_env: str = "local"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
