"""
Template Validator

Full-template validation: the union of the basic-info, agent, workflow mode,
cross and graph rules. This is the gate used before a template is saved or
executed.

Usage:
    from template_engine.validators import validate_template

    result = validate_template(template)
    if not result.is_valid:
        for error in result.errors:
            print(error.field, error.message)

Version: 1.0.0
"""

import logging
from typing import List, Optional

from ..constants import (
    FIELD_NAME,
    FIELD_DESCRIPTION,
    MODE_SEQUENTIAL,
    MODE_PARALLEL,
    MODE_CONDITIONAL,
    MODE_GRAPH,
    TEMPLATE_NAME_MAX_LENGTH,
    TEMPLATE_DESCRIPTION_MAX_LENGTH,
    SUMMARY_VALID,
    SUMMARY_NO_WORKFLOW,
)
from ..exceptions import TemplateNotExecutableError
from ..spec.agent_models import AgentSpec
from ..spec.template_models import TemplateSpec
from ..spec.validation_models import ValidationError, ValidationResult
from ..spec.workflow_models import WorkflowConfig
from .agent_validator import validate_agents
from .collector import ValidationCollector
from .cross_validators import validate_cross_rules
from .rules import check_length
from .workflow_validator import validate_workflow_mode, validate_workflow_present

logger = logging.getLogger(__name__)


def validate_basic_info(template: TemplateSpec, collector: ValidationCollector) -> None:
    check_length(
        template.name, FIELD_NAME, "Template name", collector,
        max_length=TEMPLATE_NAME_MAX_LENGTH,
    )
    check_length(
        template.description, FIELD_DESCRIPTION, "Template description", collector,
        max_length=TEMPLATE_DESCRIPTION_MAX_LENGTH,
    )


def validate_workflow(template: TemplateSpec, collector: ValidationCollector) -> None:
    """Workflow mode, completion/timeout/HITL cross rules and (graph mode) graph rules."""
    if not validate_workflow_present(template.workflow, collector):
        return
    validate_workflow_mode(template.workflow, template.agents, collector)
    validate_cross_rules(template.workflow, template.agents, collector)


def validate_template(template: TemplateSpec) -> ValidationResult:
    """
    Validate a complete template.

    Validation never raises for malformed values and never modifies the
    template. Every call uses its own collector, so the same template always
    yields an equal result.

    Args:
        template: Template to validate

    Returns:
        Immutable ValidationResult (is_valid, errors, warnings)
    """
    collector = ValidationCollector()

    validate_basic_info(template, collector)
    validate_agents(template.agents, collector)
    validate_workflow(template, collector)

    result = collector.to_result()
    logger.debug(
        "Validated template %r: %d error(s), %d warning(s)",
        template.name, len(result.errors), len(result.warnings),
    )
    return result


def is_template_executable(template: TemplateSpec) -> bool:
    """A template is executable when it is valid and has at least one agent."""
    return validate_template(template).is_valid and len(template.agents) > 0


def ensure_executable(template: TemplateSpec) -> ValidationResult:
    """
    Validate a template and raise if it must not be executed.

    Raises:
        TemplateNotExecutableError: With the validation errors attached

    Returns:
        The (valid) ValidationResult
    """
    result = validate_template(template)
    if not result.is_valid or not template.agents:
        raise TemplateNotExecutableError(
            template.name or "<unnamed>",
            validation_errors=[error.to_dict() for error in result.errors],
        )
    return result


def validate_field(template: TemplateSpec, prefix: str) -> List[ValidationError]:
    """Errors of a full validation whose field equals or lies below `prefix`."""
    return validate_template(template).errors_for(prefix)


def get_validation_summary(result: ValidationResult) -> str:
    """Short human-readable summary such as "2 errors, 1 warning"."""
    if result.is_valid:
        return SUMMARY_VALID

    error_count = len(result.errors)
    warning_count = len(result.warnings)

    summary = f"{error_count} error{'s' if error_count != 1 else ''}"
    if warning_count > 0:
        summary += f", {warning_count} warning{'s' if warning_count != 1 else ''}"
    return summary


def get_workflow_summary(workflow: Optional[WorkflowConfig], agents: List[AgentSpec]) -> str:
    if workflow is None:
        return SUMMARY_NO_WORKFLOW

    if workflow.mode == MODE_SEQUENTIAL:
        return f"Sequential execution of {len(workflow.sequence or [])} agents"
    if workflow.mode == MODE_PARALLEL:
        groups = workflow.parallel_groups or []
        total = sum(len(group) for group in groups)
        return (
            f"Parallel execution: {len(groups)} group{'s' if len(groups) != 1 else ''}, "
            f"{total} agents total"
        )
    if workflow.mode == MODE_CONDITIONAL:
        return f"Conditional routing with {len(agents)} available agents"
    if workflow.mode == MODE_GRAPH and workflow.graph_structure is not None:
        graph = workflow.graph_structure
        return f"Graph execution: {len(graph.nodes)} nodes, {len(graph.edges)} edges"
    return SUMMARY_NO_WORKFLOW
