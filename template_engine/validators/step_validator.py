"""
Step Validator

Validation for the template creation wizard. Each step runs only the rules
of that step and adds suggestions and a completion percentage. Suggestions
never affect validity.

Steps: basic -> agents -> workflow -> preview

Version: 1.0.0
"""

import logging
from typing import List, Optional, Union

from ..config import get_settings
from ..constants import (
    FIELD_WORKFLOW,
    STEP_ALIASES,
    STEP_BASIC,
    STEP_AGENTS,
    STEP_WORKFLOW,
    STEP_PREVIEW,
    MODE_SEQUENTIAL,
    MODE_PARALLEL,
    MODE_CONDITIONAL,
    MODE_GRAPH,
    COMPLETION_ALL,
    SYSTEM_PROMPT_MIN_LENGTH,
    USER_PROMPT_MIN_LENGTH,
    AGENT_TIMEOUT_MIN_S,
    WORKFLOW_TIMEOUT_MIN_S,
    MAX_CONCURRENT_MIN,
    ERROR_STEP_AGENTS_FIRST,
    WARNING_ALL_WITH_GROUPS,
    WARNING_LONG_TIMEOUT,
    WARNING_CONDITIONAL_FEW_AGENTS,
    SUGGESTION_DESCRIPTIVE_NAME,
    SUGGESTION_DETAILED_DESCRIPTION,
    SUGGESTION_FIRST_AGENT,
    SUGGESTION_MORE_AGENTS,
    SUGGESTION_ENABLE_HITL,
    SUGGESTION_DIVERSE_TYPES,
    SUGGESTION_FULL_SEQUENCE,
    SUGGESTION_FULL_GROUPS,
    SUGGESTION_DEFINE_CONDITIONS,
    SUGGESTION_READY,
    SUGGESTION_FIX_ERRORS,
)
from ..enum import WizardStep, ValidationErrorType
from ..spec.agent_models import AgentSpec
from ..spec.template_models import TemplateSpec
from ..spec.validation_models import StepValidationResult
from .agent_validator import validate_agents
from .collector import ValidationCollector
from .rules import is_present
from .template_validator import validate_basic_info, validate_template, validate_workflow

logger = logging.getLogger(__name__)

PREVIEW_MAX_INCOMPLETE_PERCENTAGE = 99


def _percent(done: int, total: int) -> int:
    """Percentage rounded half up."""
    if total <= 0:
        return 0
    return int(done * 100 / total + 0.5)


def normalize_step(step: Union[WizardStep, str]) -> Optional[str]:
    """Canonical step name, or None for an unknown step."""
    if isinstance(step, WizardStep):
        return step.value
    name = str(step).strip().lower()
    name = STEP_ALIASES.get(name, name)
    return name if name in WizardStep.values() else None


# =============================================================================
# COMPLETION
# =============================================================================

def calculate_basic_completion(template: TemplateSpec) -> int:
    filled = sum(1 for value in (template.name, template.description) if is_present(value))
    return _percent(filled, 2)


def _agent_score(agent: AgentSpec) -> int:
    criteria = [
        is_present(agent.name),
        is_present(agent.type),
        bool(agent.system_prompt) and len(agent.system_prompt) >= SYSTEM_PROMPT_MIN_LENGTH,
        bool(agent.user_prompt) and len(agent.user_prompt) >= USER_PROMPT_MIN_LENGTH,
        agent.llm_config is not None,
        agent.tavily_config is not None,
        agent.is_hitl_enabled(),
        agent.timeout_seconds is not None and agent.timeout_seconds >= AGENT_TIMEOUT_MIN_S,
    ]
    return sum(1 for passed in criteria if passed)


AGENT_CRITERIA_COUNT = 8


def calculate_agents_completion(template: TemplateSpec) -> int:
    """Average over agents of the eight per-agent criteria."""
    if not template.agents:
        return 0
    score = sum(_agent_score(agent) for agent in template.agents)
    return _percent(score, len(template.agents) * AGENT_CRITERIA_COUNT)


def _mode_configured(template: TemplateSpec) -> bool:
    workflow = template.workflow
    if workflow.mode == MODE_SEQUENTIAL:
        return bool(workflow.sequence)
    if workflow.mode == MODE_PARALLEL:
        return bool(workflow.parallel_groups)
    if workflow.mode == MODE_CONDITIONAL:
        # Routing conditions are defined after creation
        return True
    if workflow.mode == MODE_GRAPH:
        return workflow.graph_structure is not None and bool(workflow.graph_structure.nodes)
    return False


def calculate_workflow_completion(template: TemplateSpec) -> int:
    workflow = template.workflow
    if workflow is None:
        return 0
    criteria = [
        is_present(workflow.mode),
        _mode_configured(template),
        is_present(workflow.completion_strategy),
        workflow.timeout_seconds is not None and workflow.timeout_seconds >= WORKFLOW_TIMEOUT_MIN_S,
        isinstance(workflow.continue_on_failure, bool),
        workflow.max_concurrent_agents is not None and workflow.max_concurrent_agents >= MAX_CONCURRENT_MIN,
    ]
    return _percent(sum(1 for passed in criteria if passed), len(criteria))


# =============================================================================
# STEPS
# =============================================================================

def validate_basic_step(template: TemplateSpec) -> StepValidationResult:
    settings = get_settings()
    collector = ValidationCollector()
    suggestions: List[str] = []

    validate_basic_info(template, collector)

    if template.name and len(template.name) < settings.descriptive_name_length:
        suggestions.append(SUGGESTION_DESCRIPTIVE_NAME)
    if template.description and len(template.description) < settings.detailed_description_length:
        suggestions.append(SUGGESTION_DETAILED_DESCRIPTION)

    valid = not collector.has_errors()
    return StepValidationResult(
        step=STEP_BASIC,
        is_valid=valid,
        can_proceed=valid and is_present(template.name) and is_present(template.description),
        errors=collector.errors,
        warnings=collector.warnings,
        suggestions=suggestions,
        completion_percentage=calculate_basic_completion(template),
    )


def validate_agents_step(template: TemplateSpec) -> StepValidationResult:
    settings = get_settings()
    collector = ValidationCollector()
    suggestions: List[str] = []
    agents = template.agents

    validate_agents(agents, collector)

    if not agents:
        suggestions.append(SUGGESTION_FIRST_AGENT)
    elif len(agents) < settings.suggest_more_agents_below:
        suggestions.append(SUGGESTION_MORE_AGENTS)

    if len(agents) > 1:
        if not template.hitl_agents():
            suggestions.append(SUGGESTION_ENABLE_HITL)
        if len({agent.type for agent in agents}) == 1:
            suggestions.append(SUGGESTION_DIVERSE_TYPES)

    valid = not collector.has_errors()
    return StepValidationResult(
        step=STEP_AGENTS,
        is_valid=valid,
        can_proceed=valid and len(agents) > 0,
        errors=collector.errors,
        warnings=collector.warnings,
        suggestions=suggestions,
        completion_percentage=calculate_agents_completion(template),
    )


def validate_workflow_step(template: TemplateSpec) -> StepValidationResult:
    settings = get_settings()
    collector = ValidationCollector()
    suggestions: List[str] = []
    agents = template.agents
    workflow = template.workflow

    validate_workflow(template, collector)

    if not agents:
        collector.add_error(FIELD_WORKFLOW, ERROR_STEP_AGENTS_FIRST, ValidationErrorType.REQUIRED)

    if workflow is not None:
        agent_ids = template.agent_ids()
        if workflow.mode == MODE_SEQUENTIAL and workflow.sequence:
            if any(agent_id not in workflow.sequence for agent_id in agent_ids):
                suggestions.append(SUGGESTION_FULL_SEQUENCE)
        elif workflow.mode == MODE_PARALLEL and workflow.parallel_groups:
            grouped = {agent_id for group in workflow.parallel_groups for agent_id in group}
            if any(agent_id not in grouped for agent_id in agent_ids):
                suggestions.append(SUGGESTION_FULL_GROUPS)
            if workflow.completion_strategy == COMPLETION_ALL and len(workflow.parallel_groups) > 1:
                collector.add_warning(WARNING_ALL_WITH_GROUPS)
        elif workflow.mode == MODE_CONDITIONAL:
            if len(agents) < settings.conditional_min_agents:
                collector.add_warning(WARNING_CONDITIONAL_FEW_AGENTS)
            if not workflow.conditions:
                suggestions.append(SUGGESTION_DEFINE_CONDITIONS)

        if (
            workflow.timeout_seconds is not None
            and workflow.timeout_seconds > settings.long_timeout_warning_seconds
        ):
            collector.add_warning(WARNING_LONG_TIMEOUT)

    valid = not collector.has_errors()
    return StepValidationResult(
        step=STEP_WORKFLOW,
        is_valid=valid,
        can_proceed=valid and len(agents) > 0,
        errors=collector.errors,
        warnings=collector.warnings,
        suggestions=suggestions,
        completion_percentage=calculate_workflow_completion(template),
    )


def validate_preview_step(template: TemplateSpec) -> StepValidationResult:
    result = validate_template(template)

    if result.is_valid:
        completion = 100
    else:
        steps = [
            calculate_basic_completion(template),
            calculate_agents_completion(template),
            calculate_workflow_completion(template),
        ]
        completion = min(PREVIEW_MAX_INCOMPLETE_PERCENTAGE, _percent(sum(steps), 100 * len(steps)))

    return StepValidationResult(
        step=STEP_PREVIEW,
        is_valid=result.is_valid,
        can_proceed=result.is_valid,
        errors=result.errors,
        warnings=result.warnings,
        suggestions=[SUGGESTION_READY if result.is_valid else SUGGESTION_FIX_ERRORS],
        completion_percentage=completion,
    )


_STEP_VALIDATORS = {
    STEP_BASIC: validate_basic_step,
    STEP_AGENTS: validate_agents_step,
    STEP_WORKFLOW: validate_workflow_step,
    STEP_PREVIEW: validate_preview_step,
}


def validate_step(step: Union[WizardStep, str], template: TemplateSpec) -> StepValidationResult:
    """
    Validate one wizard step.

    Args:
        step: Step name or WizardStep ("basic-info" and "basic_info" are accepted for basic)
        template: Template being edited

    Returns:
        StepValidationResult. An unknown step yields a result that is not
        valid, cannot proceed and is 0% complete.
    """
    name = normalize_step(step)
    if name is None:
        logger.debug("Unknown wizard step %r", step)
        return StepValidationResult(
            step=str(step),
            is_valid=False,
            can_proceed=False,
            completion_percentage=0,
        )
    return _STEP_VALIDATORS[name](template)
