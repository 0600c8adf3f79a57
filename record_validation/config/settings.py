"""
Configuration management for the record validation service.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecordValidationConfig(BaseSettings):
    """Configuration settings for the record validation service."""

    # Application Configuration
    app_name: str = Field(default="Record Validation API", alias="APP_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # HTTP Configuration
    api_prefix: str = Field(default="", alias="API_PREFIX")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v):
        """Ensure the prefix is empty or an absolute path without trailing slash."""
        if v and not v.startswith("/"):
            raise ValueError("API prefix must be empty or start with '/'")
        return v.rstrip("/")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Ensure port is a valid TCP port."""
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v


def load_config(env_file: Optional[str] = None) -> RecordValidationConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return RecordValidationConfig()


# Global configuration instance
_config: Optional[RecordValidationConfig] = None


def get_config() -> RecordValidationConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> RecordValidationConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
