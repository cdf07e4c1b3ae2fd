"""Configuration management for Payment Gateway."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Acquiring bank
    bank_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the acquiring bank simulator",
    )
    bank_timeout_seconds: float | None = Field(
        default=None,
        description="Bank request timeout in seconds (None waits indefinitely)",
    )
    bank_client_type: str = Field(
        default="http", description="Bank client implementation (http or mock)"
    )

    # Service Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(default="development", description="Environment name")
    service_name: str = Field(default="payment-gateway", description="Service name")

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8090, description="Bind port")


# Global settings instance
settings = Settings()
