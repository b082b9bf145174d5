"""
Application Configuration

Settings are loaded from environment variables (or a local .env file)
using Pydantic Settings. Import `settings` for the cached instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "DocuPrint API"
    python_env: str = "development"
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Database (in-memory by default; any async SQLAlchemy URL works)
    database_url: str = "sqlite+aiosqlite:///:memory:"
    db_echo: bool = False

    # Redis is optional - rate limiting falls back to memory without it
    redis_url: str | None = None

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Sessions
    session_secret_key: str = "docuprint-dev-secret-change-me"
    session_algorithm: str = "HS256"
    session_ttl_days: int = 7
    resident_cookie_name: str = "docuprint_resident"
    admin_cookie_name: str = "docuprint_admin"

    # Passwords
    bcrypt_rounds: int = 12

    # OTP
    otp_ttl_minutes: int = 5
    otp_demo_mode: bool = True
    otp_purge_interval_minutes: int = 60

    # Print jobs
    max_upload_size_mb: int = 20
    enforce_print_job_transitions: bool = False

    # Startup behaviour
    scheduler_enabled: bool = True
    seed_demo_data: bool = True

    @property
    def is_development(self) -> bool:
        return self.python_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        return self.python_env.lower() == "production"

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins from a comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


settings = get_settings()
