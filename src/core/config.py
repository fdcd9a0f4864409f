"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool | None = Field(
        default=None,
        description="Render logs as JSON. Defaults to true in production.",
    )

    # Database
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/shelf",
        description="PostgreSQL connection URL with asyncpg driver",
    )

    # Web client, used to build links in outgoing emails
    client_url: str = Field(default="http://localhost:3000")

    # Confirmation tokens
    jwt_secret_key: str = Field(
        default="CHANGE-ME-IN-PRODUCTION",
        description="Secret key for signing email confirmation tokens",
    )
    jwt_algorithm: str = Field(default="HS256")
    confirmation_token_expire_minutes: int = Field(default=60 * 24)

    # Transactional email API
    email_api_url: str = Field(
        default="",
        description="HTTP endpoint of the transactional email provider",
    )
    email_api_key: str = Field(
        default="",
        description="API key for the email provider (server-side only, keep secret)",
    )
    email_from: str = Field(default="no-reply@localhost")
    confirmation_template_id: str = Field(default="confirmation-email")
    email_timeout_seconds: float = Field(default=10.0)

    # Username policy
    username_min_length: int = Field(default=4)
    username_max_length: int = Field(default=15)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure the database URL uses the asyncpg driver scheme.

        Hosting providers supply a standard ``postgresql://`` URL.
        SQLAlchemy's async engine requires ``postgresql+asyncpg://``.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
