"""
Template Engine

Validation engine for multi-agent workflow templates. A template is a set of
agents plus a workflow topology (sequential, parallel, conditional or an
explicit graph). The engine checks that the topology is well formed and that
every numeric and enum constraint of the execution service holds before a
template is saved or executed.

Version: 1.0.0

Components:
- Spec: Lenient pydantic models for templates, agents and workflows
- Builders: Fluent builders for agents and templates
- Validators: Side-effect-free rule checks producing immutable results
- Steps: Per-step validation for the template creation wizard
- Auto-fix: Suggested corrections, computed independently of validation
- Loader: JSON/YAML template documents

Usage:
    from template_engine import (
        AgentBuilder, TemplateBuilder, AgentType,
        validate_template, validate_step, suggest_auto_fixes,
    )

    researcher = (AgentBuilder()
        .with_id("researcher")
        .with_name("Researcher")
        .with_type(AgentType.RESEARCH)
        .with_prompts("You are a research assistant.", "Find sources on the topic.")
        .with_search(search_api=True)
        .build())

    template = (TemplateBuilder()
        .with_name("Research brief")
        .with_description("Collects sources and writes a brief")
        .add_agent(researcher)
        .sequential("researcher")
        .build())

    result = validate_template(template)
    if not result.is_valid:
        fixes = suggest_auto_fixes(template)
"""

# =============================================================================
# ENUMS
# =============================================================================

from .enum import (
    AgentType,
    LLMModel,
    WorkflowMode,
    CompletionStrategy,
    InterventionType,
    InterventionPoint,
    SearchDepth,
    TimeRange,
    ContentFormat,
    EdgeConditionType,
    ValidationErrorType,
    WizardStep,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================

from .exceptions import (
    TemplateError,
    TemplateBuildError,
    TemplateLoadError,
    TemplateValidationError,
    TemplateNotExecutableError,
    AutoFixError,
)

# =============================================================================
# SPEC MODELS
# =============================================================================

from .spec import (
    LLMConfig,
    TavilyConfig,
    HITLConfig,
    AgentSpec,
    GraphEdge,
    GraphStructure,
    WorkflowConfig,
    TemplateSpec,
    ValidationError,
    ValidationResult,
    StepValidationResult,
    AutoFix,
)

# =============================================================================
# BUILDERS
# =============================================================================

from .builders import AgentBuilder, TemplateBuilder

# =============================================================================
# VALIDATION
# =============================================================================

from .validators import (
    validate_template,
    is_template_executable,
    ensure_executable,
    validate_field,
    get_validation_summary,
    get_workflow_summary,
    validate_step,
    suggest_auto_fixes,
    apply_auto_fixes,
    find_dependency_cycle,
    find_graph_cycle,
)

# =============================================================================
# LOADING & CONFIG
# =============================================================================

from .loader import template_from_dict, load_template, save_template
from .config import Settings, get_settings

__all__ = [
    # Enums
    "AgentType",
    "LLMModel",
    "WorkflowMode",
    "CompletionStrategy",
    "InterventionType",
    "InterventionPoint",
    "SearchDepth",
    "TimeRange",
    "ContentFormat",
    "EdgeConditionType",
    "ValidationErrorType",
    "WizardStep",
    # Exceptions
    "TemplateError",
    "TemplateBuildError",
    "TemplateLoadError",
    "TemplateValidationError",
    "TemplateNotExecutableError",
    "AutoFixError",
    # Spec models
    "LLMConfig",
    "TavilyConfig",
    "HITLConfig",
    "AgentSpec",
    "GraphEdge",
    "GraphStructure",
    "WorkflowConfig",
    "TemplateSpec",
    "ValidationError",
    "ValidationResult",
    "StepValidationResult",
    "AutoFix",
    # Builders
    "AgentBuilder",
    "TemplateBuilder",
    # Validation
    "validate_template",
    "is_template_executable",
    "ensure_executable",
    "validate_field",
    "get_validation_summary",
    "get_workflow_summary",
    "validate_step",
    "suggest_auto_fixes",
    "apply_auto_fixes",
    "find_dependency_cycle",
    "find_graph_cycle",
    # Loading & config
    "template_from_dict",
    "load_template",
    "save_template",
    "Settings",
    "get_settings",
]
