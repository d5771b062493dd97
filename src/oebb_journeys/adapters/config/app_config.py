"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Every field can be set through an ``OEBB_``-prefixed environment variable
    or a ``.env`` file, e.g. ``OEBB_API_TIMEOUT=20``.
    """

    model_config = SettingsConfigDict(
        env_prefix="OEBB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ÖBB ticket shop configuration
    base_url: str = Field(
        default="https://shop.oebbtickets.at",
        description="Base URL of the ÖBB ticket shop backend",
    )
    api_timeout: float = Field(
        default=10, description="Timeout for a single ticket shop request in seconds"
    )
    channel: str = Field(default="inet", description="Sales channel sent with every request")
    language: str = Field(default="de", description="Language requested from the backend")

    # Diagnostics
    log_requests: bool = Field(
        default=False,
        description="Log every outgoing request (auth headers are redacted)",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL is an http(s) URL and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("api_timeout")
    @classmethod
    def validate_api_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("api_timeout must be positive")
        return v
