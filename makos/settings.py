from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Supabase (required at startup)
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""

    # Site
    SITE_URL: str = "http://localhost:3000"

    # Auth flow
    AUTH_PROVIDERS: List[str] = ["google"]
    AUTH_REDIRECT_DELAY_SECONDS: int = 2
    COOKIE_SECURE: bool = True

    # Analytics
    GA_MEASUREMENT_ID: str = "G-SZW6X77247"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def auth_callback_url(self) -> str:
        return f"{self.SITE_URL.rstrip('/')}/auth/callback"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
