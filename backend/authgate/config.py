"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # JWT Configuration (no fallback secret: startup fails without one)
    jwt_secret_key: str = Field(..., min_length=16)
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 24 * 60

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # User store
    user_store_backend: Literal["memory", "mongo"] = "memory"
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "auth_db"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
