"""Configuration management for Tally using Pydantic Settings.

Settings come from environment variables, an optional ``.env`` file, or
explicit keyword arguments.

Environment variables:
    TALLY_LOG_LEVEL: Logging level (debug, info, warn, warning, error)
    TALLY_STRICT_SHAPES: Reject statements whose tokens do not match the
        grammar instead of extracting fields by offset
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .observability.logging import LEVEL_MAP


class TallySettings(BaseSettings):
    """Translator settings.

    Example:
        >>> settings = TallySettings(strict_shapes=False)
        >>> settings.strict_shapes
        False
    """

    model_config = SettingsConfigDict(
        env_prefix='TALLY_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    strict_shapes: bool = Field(
        default=True,
        description="Raise on malformed statements instead of reading fields by offset"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.lower() not in LEVEL_MAP:
            raise ValueError(f"log_level must be one of {sorted(LEVEL_MAP)}")
        return v.upper()


@lru_cache()
def get_settings() -> TallySettings:
    return TallySettings()


__all__ = ["TallySettings", "get_settings"]
