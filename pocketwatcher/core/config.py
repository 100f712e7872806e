"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List, Optional, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # Application
    APP_NAME: str = "PocketWatcher"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Database (no default, must be supplied by the environment)
    DATABASE_URL: str
    DB_ECHO: bool = False

    # JWT (no default, must be supplied by the environment)
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: Optional[int] = 7  # None disables the exp claim
    AUTH_HEADER_NAME: str = "auth-token"

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("ACCESS_TOKEN_EXPIRE_DAYS", mode="before")
    @classmethod
    def parse_expire_days(cls, v):
        """Treat an empty value as 'no expiry'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Refuse to start with an empty signing key."""
        if not v.strip():
            raise ValueError("SECRET_KEY must not be empty")
        return v


settings = Settings()
