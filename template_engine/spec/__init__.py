"""
Template Specification Models

This module contains the data models for templates, agents, workflows and
validation results.
"""

from .base import SpecModel
from .agent_models import (
    LLMConfig,
    TavilyConfig,
    HITLConfig,
    AgentSpec,
)
from .workflow_models import (
    MODE_PAYLOAD_FIELDS,
    is_virtual_node,
    GraphEdge,
    GraphStructure,
    WorkflowConfig,
)
from .template_models import TemplateSpec
from .validation_models import (
    ValidationError,
    ValidationResult,
    StepValidationResult,
    AutoFix,
)

__all__ = [
    "SpecModel",
    # Agent models
    "LLMConfig",
    "TavilyConfig",
    "HITLConfig",
    "AgentSpec",
    # Workflow models
    "MODE_PAYLOAD_FIELDS",
    "is_virtual_node",
    "GraphEdge",
    "GraphStructure",
    "WorkflowConfig",
    # Template
    "TemplateSpec",
    # Validation results
    "ValidationError",
    "ValidationResult",
    "StepValidationResult",
    "AutoFix",
]
