"""Application configuration using Pydantic Settings.

Environment Variable Strategy:
- The database is described either by a full DATABASE_URL or by the
  DB_HOST / DB_USER / DB_PASSWORD / DB_NAME quartet
- JWT_SECRET has no default; the bootloader refuses to start without it
- Everything else has a sensible default and rarely needs an override

The settings object is frozen. Build it once with ``get_settings()`` and pass
it to whatever needs it.
"""

from functools import cached_property, lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


def parse_comma_list(value: str | list[str] | None, default: list[str]) -> list[str]:
    """Parse comma-separated string into list."""
    if value is None:
        return default
    if isinstance(value, list):
        return value
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ================================================================
    # Database
    # ================================================================

    # Full URL wins over the individual parts when set
    database_url_override: str | None = Field(default=None, validation_alias="DATABASE_URL")
    db_driver: str = Field(default="postgresql+asyncpg", validation_alias="DB_DRIVER")
    db_host: str = Field(default="127.0.0.1", validation_alias="DB_HOST")
    db_port: int | None = Field(default=None, validation_alias="DB_PORT")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="postgres", validation_alias="DB_PASSWORD")
    db_name: str = Field(default="cureconnect", validation_alias="DB_NAME")

    db_pool_size: int = Field(default=10, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, validation_alias="DB_MAX_OVERFLOW")
    db_pool_recycle: int = Field(default=3600, validation_alias="DB_POOL_RECYCLE")

    # Create tables on startup instead of relying on migrations (dev only)
    auto_create_schema: bool = Field(default=False, validation_alias="AUTO_CREATE_SCHEMA")

    # ================================================================
    # Security
    # ================================================================

    secret_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("JWT_SECRET", "SECRET_KEY"),
    )
    jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=60, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, validation_alias="BCRYPT_ROUNDS")

    # ================================================================
    # Server
    # ================================================================

    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=5001, validation_alias="PORT")
    environment: str = Field(default="development", validation_alias=AliasChoices("ENVIRONMENT", "ENV"))
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # Env format: CORS_ORIGINS="http://localhost:3000,http://localhost:3001"
    cors_origins_str: str | None = Field(default=None, validation_alias="CORS_ORIGINS")

    @cached_property
    def database_url(self) -> str:
        """SQLAlchemy URL assembled from DATABASE_URL or the DB_* parts."""
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    @cached_property
    def is_sqlite(self) -> bool:
        return make_url(self.database_url).get_backend_name() == "sqlite"

    @cached_property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from env string; all origins are allowed by default."""
        return parse_comma_list(self.cors_origins_str, ["*"])


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built on first use."""
    return Settings()


settings = get_settings()
