# app/core/settings.py
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- DB ---
    database_url: str = Field(default="sqlite+aiosqlite:///./tvshows.db", alias="DATABASE_URL")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # --- CORS ---
    # Any origin by default; set CORS_ORIGINS='["https://example.com"]' to narrow it.
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

settings = Settings()
