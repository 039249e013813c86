"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        RENTALS_DB_HOST: Database host (default: localhost)
        RENTALS_DB_PORT: Database port (default: 5432)
        RENTALS_DB_DATABASE: Database name (default: rentals)
        RENTALS_DB_USERNAME: Database user (default: rentals)
        RENTALS_DB_PASSWORD: Database password (required in production)
        RENTALS_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        RENTALS_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="RENTALS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="rentals", description="Database name")
    username: str = Field(default="rentals", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class TenancySettings(BaseSettings):
    """Subdomain routing settings.

    Environment variables:
        RENTALS_TENANCY_ROOT_DOMAIN: Apex domain of the application (default: localhost)
        RENTALS_TENANCY_RESERVED_SUBDOMAINS: JSON list of subdomains that never
            resolve to a tenant (default: ["www"])
        RENTALS_TENANCY_LOOKUP_TIMEOUT_SECONDS: Upper bound for tenant and
            membership lookups while assembling the tenant context (default: 5)
    """

    model_config = SettingsConfigDict(
        env_prefix="RENTALS_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_domain: str = Field(
        default="localhost",
        description="Apex domain; tenants are served on <slug>.<root_domain>",
    )
    reserved_subdomains: list[str] = Field(
        default_factory=lambda: ["www"],
        description="Subdomains treated as the root application context",
    )
    lookup_timeout_seconds: float = Field(
        default=5.0,
        description="Timeout for tenant and membership lookups",
        gt=0,
        le=60,
    )

    @field_validator("root_domain")
    @classmethod
    def normalize_root_domain(cls, value: str) -> str:
        """Store the root domain lower-cased, without port or dots at the edges."""
        normalized = value.strip().split(":")[0].strip(".").lower()
        if not normalized:
            raise ValueError("root_domain must not be empty")
        return normalized

    @field_validator("reserved_subdomains")
    @classmethod
    def normalize_reserved_subdomains(cls, value: list[str]) -> list[str]:
        """Compare reserved subdomains case-insensitively."""
        return [label.strip().lower() for label in value if label.strip()]


class SessionSettings(BaseSettings):
    """Session token settings.

    Environment variables:
        RENTALS_SESSION_SECRET: Secret shared with the identity provider
        RENTALS_SESSION_ALGORITHM: JWS algorithm of session tokens (default: HS256)
        RENTALS_SESSION_ISSUER: Expected issuer claim (optional)
        RENTALS_SESSION_COOKIE_NAME: Cookie carrying the session (default: rentals_session)
    """

    model_config = SettingsConfigDict(
        env_prefix="RENTALS_SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret: SecretStr = Field(
        default=SecretStr(""),
        description="Secret shared with the identity provider",
    )
    algorithm: str = Field(default="HS256", description="JWS algorithm")
    issuer: str | None = Field(default=None, description="Expected issuer claim")
    cookie_name: str = Field(
        default="rentals_session",
        description="Name of the session cookie",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="RENTALS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Rentals API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def tenancy(self) -> TenancySettings:
        """Get tenancy settings."""
        return get_tenancy_settings()

    @property
    def session(self) -> SessionSettings:
        """Get session settings."""
        return get_session_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return TenancySettings()


@lru_cache
def get_session_settings() -> SessionSettings:
    """Get cached session settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return SessionSettings()
