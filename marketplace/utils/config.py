"""
Configuration Management
Environment-based configuration for the marketplace service
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import logging

logger = logging.getLogger(__name__)


class AppConfig(BaseSettings):
    """Application Configuration"""

    # Service info
    service_name: str = "marketplace-service"
    service_version: str = "1.0.0"
    debug: bool = False

    # API settings
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 3000
    docs_url: str = "/docs"

    # CORS (comma-separated origins; "null" admits file:// pages)
    cors_allowed_origins: str = "http://localhost:8080,http://127.0.0.1:8080,null"
    cors_allow_credentials: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "default"
    log_config_path: Optional[str] = None

    # Unique ID issuance
    unique_id_max_attempts: int = 5

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Port must be between 1 and 65535')
        return v

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        if v not in ('default', 'detailed', 'json'):
            raise ValueError('Log format must be one of: default, detailed, json')
        return v

    @field_validator('unique_id_max_attempts')
    @classmethod
    def validate_unique_id_max_attempts(cls, v):
        if v < 1:
            raise ValueError('At least one unique ID attempt is required')
        return v

    def get_cors_origins(self) -> List[str]:
        """Split the configured origins into a list"""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    def log_config(self):
        """Log configuration"""
        logger.info(f"Service: {self.service_name} v{self.service_version}")
        logger.info(f"API prefix: {self.api_prefix}")
        logger.info(f"CORS origins: {self.get_cors_origins()}")
        logger.info(f"Log level: {self.log_level}, format: {self.log_format}")


# Global configuration instance
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """Get application configuration instance"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
