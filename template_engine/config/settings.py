"""
Template Engine Settings

Centralized settings with environment variable support.
Priority: Environment Variables > Defaults

Usage:
    from template_engine.config import get_settings

    settings = get_settings()
    threshold = settings.long_timeout_warning_seconds

Version: 1.0.0
"""

from functools import lru_cache
from typing import Any, Dict

from pydantic import Field
from pydantic_settings import BaseSettings

from .defaults import Defaults


class Settings(BaseSettings):
    """
    Template engine settings with automatic environment variable loading.

    Environment variables are loaded with the prefix TEMPLATE_ENGINE_.
    Example: TEMPLATE_ENGINE_LONG_TIMEOUT_WARNING_SECONDS overrides
    long_timeout_warning_seconds
    """

    # =========================================================================
    # Wizard Suggestions
    # =========================================================================
    descriptive_name_length: int = Field(
        default=Defaults.DESCRIPTIVE_NAME_LENGTH,
        description="Template names shorter than this get a suggestion"
    )
    detailed_description_length: int = Field(
        default=Defaults.DETAILED_DESCRIPTION_LENGTH,
        description="Descriptions shorter than this get a suggestion"
    )
    suggest_more_agents_below: int = Field(default=Defaults.SUGGEST_MORE_AGENTS_BELOW)

    # =========================================================================
    # Workflow Warnings
    # =========================================================================
    long_timeout_warning_seconds: int = Field(default=Defaults.LONG_TIMEOUT_WARNING_SECONDS)
    conditional_min_agents: int = Field(default=Defaults.CONDITIONAL_MIN_AGENTS)

    # =========================================================================
    # Auto-fix
    # =========================================================================
    auto_fix_max_concurrent_agents: int = Field(default=Defaults.AUTO_FIX_MAX_CONCURRENT_AGENTS)
    auto_fix_timeout_margin_seconds: int = Field(default=Defaults.AUTO_FIX_TIMEOUT_MARGIN_SECONDS)

    model_config = {
        "env_prefix": "TEMPLATE_ENGINE_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def to_dict(self) -> Dict[str, Any]:
        """Export settings to dictionary."""
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Call Settings() directly if you need a fresh instance, or
    get_settings.cache_clear() after changing the environment.

    Returns:
        Settings instance
    """
    return Settings()
