"""
Template Builders

Provides fluent builder pattern for creating templates and their agents.
"""

from .agent_builder import AgentBuilder
from .template_builder import TemplateBuilder

__all__ = [
    "AgentBuilder",
    "TemplateBuilder",
]
