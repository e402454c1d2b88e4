"""Application settings using Pydantic BaseSettings."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Figma API
    figma_access_token: str = Field(default="", alias="FIGMA_ACCESS_TOKEN")
    figma_api_base_url: str = Field(default="https://api.figma.com/v1", alias="FIGMA_API_BASE_URL")
    figma_timeout_seconds: float = Field(default=30.0, alias="FIGMA_TIMEOUT_SECONDS")

    # SSE
    sse_keepalive_seconds: float = Field(default=30.0, alias="SSE_KEEPALIVE_SECONDS")

    # Application configuration
    port: int = Field(default=8000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")

    # Service info
    service_name: str = Field(default="figma-mcp", alias="SERVICE_NAME")
    service_version: str = Field(default="0.1.0", alias="SERVICE_VERSION")

    @property
    def has_token(self) -> bool:
        """Whether a Figma access token is configured."""
        return bool(self.figma_access_token.strip())


# Global settings instance
settings = Settings()
