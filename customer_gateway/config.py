"""
Configuration Management
Environment-based settings for the gateway and its data service connection
"""

from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    """Gateway settings, read from the environment or a .env file"""

    # Service info
    service_name: str = "customer-gateway"
    service_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    api_prefix: str = "/api"

    # Data service connection
    data_service_url: str = "http://localhost:3002"
    data_service_timeout: Optional[float] = None  # None keeps the httpx default

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('data_service_url')
    @classmethod
    def validate_data_service_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError('Data service URL must start with http:// or https://')
        return v.rstrip('/')

    @field_validator('data_service_timeout')
    @classmethod
    def validate_data_service_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError('Data service timeout must be positive')
        return v

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Port must be between 1 and 65535')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f'Unknown log level: {v}')
        return level

    def log_config(self):
        """Log configuration"""
        logger.info(
            "Gateway configuration",
            service=self.service_name,
            version=self.service_version,
            data_service_url=self.data_service_url,
            data_service_timeout=self.data_service_timeout,
            api_prefix=self.api_prefix,
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
