"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "lease-payments"
    log_level: str = "INFO"

    # Payment rules
    default_grace_period_days: int = Field(default=5, ge=0, le=365)
    max_schedule_payments: int = Field(default=1000, ge=1)  # Upper bound on generated due dates per request


settings = Settings()
