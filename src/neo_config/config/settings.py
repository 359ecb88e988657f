"""Runtime settings for neo-config.

Process-level switches for the configuration runtime, loaded from environment
variables (prefix ``NEO_CONFIG_``) or a ``.env`` file with pydantic-settings.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Settings consumed by ConfigurationManager and its services."""
    
    model_config = SettingsConfigDict(
        env_prefix="NEO_CONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    ignore_deletes_from_source: bool = Field(
        default=False,
        description="Keep store keys that a source no longer reports",
    )
    allow_post_configure: bool = Field(
        default=True,
        description="Invoke post-configure hooks after binding",
    )
    prefix_separator: str = Field(
        default=".",
        description="Separator appended to non-empty binding prefixes",
    )
    
    @field_validator("prefix_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("prefix_separator cannot be empty")
        return value


@lru_cache(maxsize=1)
def get_runtime_settings() -> RuntimeSettings:
    """Get runtime settings from the environment (cached)."""
    return RuntimeSettings()
