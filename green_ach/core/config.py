"""Gateway configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


TEST_ENDPOINT = "https://cpsandbox.com/ACHService.asmx"
LIVE_ENDPOINT = "https://greenbyphone.com/ACHService.asmx"


class GatewaySettings(BaseSettings):
    """
    Gateway settings loaded from environment variables.

    All settings can be overridden via environment variables
    with the GREEN_ prefix or a .env file:
        GREEN_CLIENT_ID=123456
        GREEN_API_PASSWORD=secret
        GREEN_LIVE=false
    """

    model_config = SettingsConfigDict(
        env_prefix="GREEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    client_id: str = ""
    api_password: str = ""

    # Endpoints
    live: bool = Field(
        default=False,
        description="Send calls to the live system instead of the sandbox",
    )
    test_endpoint: str = TEST_ENDPOINT
    live_endpoint: str = LIVE_ENDPOINT

    # Transport
    connect_timeout: float = Field(
        default=3.0,
        gt=0.0,
        description="Seconds allowed to establish the connection",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"


@lru_cache
def get_settings() -> GatewaySettings:
    """Get cached settings instance."""
    return GatewaySettings()
