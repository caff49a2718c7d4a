"""EDI tokenizer configuration."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml", "tokenizer")


class TokenizerConfig(BaseSettings):
    """Tokenizer and input decoding settings."""
    model_config = SettingsConfigDict(
        env_prefix='EDI_TOKENIZER_',
        case_sensitive=False
    )

    separators: List[str] = Field(
        default_factory=lambda: _get_config().get('separators', ["~", "*", "|"])
    )
    encoding: str = Field(
        default_factory=lambda: _get_config().get('encoding', "utf-8")
    )
    encoding_errors: str = Field(
        default_factory=lambda: _get_config().get('encoding_errors', "replace")
    )
    input_file_extensions: List[str] = Field(
        default_factory=lambda: _get_config().get('input_file_extensions', ["edi", "x12", "txt"])
    )
