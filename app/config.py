"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="SmartCanteen", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Database settings
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/smartcanteen",
        description="SQLAlchemy database URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="SmartCanteen API", description="API documentation title"
    )
    api_description: str = Field(
        default="Next-day cafeteria menu, meal ordering and order reports",
        description="API documentation description",
    )

    # Ordering window
    cutoff_hour: int = Field(
        default=21, ge=1, le=23, description="Local hour at which ordering closes"
    )
    time_zone: Optional[str] = Field(
        default=None,
        description="IANA time zone of the canteen; host local time when unset",
    )

    # Reminders
    reminder_start_hour: int = Field(
        default=17, ge=0, le=23, description="First hour of the reminder band"
    )
    reminder_end_hour: int = Field(
        default=21, ge=1, le=24, description="Hour at which the reminder band ends"
    )
    reminder_check_interval_sec: int = Field(
        default=60, ge=1, description="Interval between reminder evaluations"
    )
    scheduler_enabled: bool = Field(
        default=True, description="Run background jobs inside the API process"
    )

    # Sessions and roles
    admin_emails: list[str] = Field(
        default=[], description="Emails registered with the admin role"
    )
    session_ttl_minutes: int = Field(
        default=720, ge=1, description="Lifetime of a login session"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("time_zone")
    @classmethod
    def validate_time_zone(cls, v):
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @field_validator("admin_emails")
    @classmethod
    def normalize_admin_emails(cls, v):
        return [email.strip().lower() for email in v if email.strip()]

    @model_validator(mode="after")
    def check_reminder_band(self):
        if self.reminder_start_hour >= self.reminder_end_hour:
            raise ValueError("reminder_start_hour must be lower than reminder_end_hour")
        return self

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_admin_email(self, email: str) -> bool:
        return email.strip().lower() in self.admin_emails


# Global settings instance
settings = Settings()
