from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or defaults."""

    port: int = Field(default=3000, description="HTTP listen port.")
    bind_host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP listener binds to.",
    )
    app_env: str = Field(
        default="local",
        description="Deployment label echoed by the info endpoint.",
    )
    db_host: str | None = None
    db_port: int = 5432
    db_user: str | None = None
    db_password: str | None = None
    db_name: str | None = None
    db_ssl: bool = Field(
        default=False,
        description="Enable TLS to the database without certificate verification.",
    )
    database_url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; takes precedence over the DB_* pieces.",
    )
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("db_ssl", mode="before")
    @classmethod
    def _parse_db_ssl(cls, value: object) -> bool:
        # Anything other than "true" leaves TLS off.
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() == "true"

    @property
    def sqlalchemy_url(self) -> URL:
        """Async driver URL for the configured database."""

        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
