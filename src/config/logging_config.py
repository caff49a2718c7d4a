"""Logging configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "logging")


class LoggingConfig(BaseSettings):
    """Log level and format used by the CLI entry point."""
    model_config = SettingsConfigDict(
        env_prefix='EDI_LOG_',
        case_sensitive=False
    )

    level: str = Field(
        default_factory=lambda: _get_config().get('level', "INFO")
    )
    format: str = Field(
        default_factory=lambda: _get_config().get(
            'format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    )
