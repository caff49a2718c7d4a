"""
EDI Ingestion Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml
3. Automatically override with environment variables from .env or CI/CD secrets

Usage:
    from src.config import settings

    # Tokenizer delimiters
    separators = settings.tokenizer.separators

    # Validation switches
    strict = settings.validation.strict_envelope
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config.paths import PathsConfig
from src.config.tokenizer import TokenizerConfig
from src.config.validation import ValidationConfig
from src.config.logging_config import LoggingConfig


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from src.config import settings

        settings.tokenizer.separators
        settings.validation.isa_element_count
        settings.logging.level
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Public API
# ===========================

__all__ = [
    "settings",
    "Settings",
    "PathsConfig",
    "TokenizerConfig",
    "ValidationConfig",
    "LoggingConfig",
]
