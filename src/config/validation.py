"""EDI validation rule configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "validation")


class ValidationConfig(BaseSettings):
    """
    Validation rule settings.

    strict_envelope turns on the header/trailer balance, nesting order and
    SE01 count checks on top of the envelope presence rules.
    """
    model_config = SettingsConfigDict(
        env_prefix='EDI_VALIDATION_',
        case_sensitive=False
    )

    isa_element_count: int = Field(
        default_factory=lambda: _get_config().get('isa_element_count', 16)
    )
    date_pattern: str = Field(
        default_factory=lambda: _get_config().get('date_pattern', r"^\d{8}$")
    )
    strict_envelope: bool = Field(
        default_factory=lambda: _get_config().get('strict_envelope', False)
    )
