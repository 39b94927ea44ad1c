"""Engine settings using Pydantic Settings."""

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class SelfReferenceBoundaryPolicy(str, Enum):
    """Which boundaries suppress shorthand ``[text]`` self-references.

    ``LEGACY`` checks link-form matches against code blocks only and never
    checks image-form matches. ``STRICT`` checks both forms against code
    blocks and block quotes.
    """

    LEGACY = "legacy"
    STRICT = "strict"


class Settings(BaseSettings):
    """Settings loaded from ``MD_MACROS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MD_MACROS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Extraction
    self_reference_boundary_policy: SelfReferenceBoundaryPolicy = (
        SelfReferenceBoundaryPolicy.LEGACY
    )
    collapsed_reference_uses_text: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
