"""
Configuration Module

Provides the tunable thresholds of the template engine with environment
variable support.

Usage:
    from template_engine.config import get_settings, Defaults

    settings = get_settings()
"""

from .settings import Settings, get_settings
from .defaults import Defaults

__all__ = [
    "Settings",
    "get_settings",
    "Defaults",
]
