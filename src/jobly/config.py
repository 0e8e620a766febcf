"""Configuration management for the application."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./jobly.db")

    # Auth
    secret_key: str = Field(default="secret-dev-change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")

    # Logging
    log_level: str = Field(default="INFO")

    # Frontend origins allowed by CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    @field_validator("database_url")
    @classmethod
    def normalize_database_url(cls, value: str) -> str:
        """Rewrite legacy ``postgres://`` URLs to the scheme SQLAlchemy expects."""
        if value.startswith("postgres://"):
            return "postgresql://" + value.removeprefix("postgres://")
        return value

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()


# Global settings instance
settings = Settings()
