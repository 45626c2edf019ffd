"""
Template Validators

Deterministic, side-effect-free rule checks over a TemplateSpec.
"""

from .collector import ValidationCollector
from .rules import (
    is_present,
    check_required,
    check_length,
    check_range,
    check_enum,
)
from .agent_validator import (
    validate_agent,
    validate_agents,
    validate_llm_config,
    validate_tavily_config,
    validate_hitl_config,
)
from .dependency_graph import (
    find_dependency_cycle,
    check_dependency_cycle,
    find_entry_agents,
    find_unreachable_agents,
    check_conditional_reachability,
)
from .graph_validator import (
    find_graph_cycle,
    find_unreachable_nodes,
    validate_graph_structure,
)
from .workflow_validator import validate_workflow_mode
from .cross_validators import (
    validate_completion,
    validate_timeouts,
    validate_hitl_conflicts,
    validate_cross_rules,
)
from .template_validator import (
    validate_basic_info,
    validate_workflow,
    validate_template,
    is_template_executable,
    ensure_executable,
    validate_field,
    get_validation_summary,
    get_workflow_summary,
)
from .step_validator import (
    normalize_step,
    validate_step,
    validate_basic_step,
    validate_agents_step,
    validate_workflow_step,
    validate_preview_step,
    calculate_basic_completion,
    calculate_agents_completion,
    calculate_workflow_completion,
)
from .auto_fix import suggest_auto_fixes, apply_auto_fixes

__all__ = [
    "ValidationCollector",
    # Rule primitives
    "is_present",
    "check_required",
    "check_length",
    "check_range",
    "check_enum",
    # Agents
    "validate_agent",
    "validate_agents",
    "validate_llm_config",
    "validate_tavily_config",
    "validate_hitl_config",
    # Dependency graph
    "find_dependency_cycle",
    "check_dependency_cycle",
    "find_entry_agents",
    "find_unreachable_agents",
    "check_conditional_reachability",
    # Explicit graph
    "find_graph_cycle",
    "find_unreachable_nodes",
    "validate_graph_structure",
    # Workflow
    "validate_workflow_mode",
    "validate_completion",
    "validate_timeouts",
    "validate_hitl_conflicts",
    "validate_cross_rules",
    # Template
    "validate_basic_info",
    "validate_workflow",
    "validate_template",
    "is_template_executable",
    "ensure_executable",
    "validate_field",
    "get_validation_summary",
    "get_workflow_summary",
    # Steps
    "normalize_step",
    "validate_step",
    "validate_basic_step",
    "validate_agents_step",
    "validate_workflow_step",
    "validate_preview_step",
    "calculate_basic_completion",
    "calculate_agents_completion",
    "calculate_workflow_completion",
    # Auto-fix
    "suggest_auto_fixes",
    "apply_auto_fixes",
]
