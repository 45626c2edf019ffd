"""
Auto-fix Suggestions

Computes proposed corrections for common configuration mistakes. This is a
pure computation over a template, independent of validation: callers decide
when to ask for fixes and whether to apply them.

Usage:
    fixes = suggest_auto_fixes(template)
    fixed = apply_auto_fixes(template, fixes)   # new TemplateSpec, input unchanged

Version: 1.0.0
"""

import copy
import logging
from typing import Any, List, Optional

from ..config import get_settings
from ..constants import (
    FIELD_AGENTS,
    FIELD_WORKFLOW,
    MODE_SEQUENTIAL,
    MODE_PARALLEL,
    COMPLETION_ALL,
    COMPLETION_THRESHOLD,
    COMPLETION_FIRST_SUCCESS,
    AGENT_TIMEOUT_MIN_S,
    HITL_TIMEOUT_MIN_S,
    MAX_CONCURRENT_MIN,
    FIX_MAX_CONCURRENT,
    FIX_REQUIRED_COMPLETIONS,
    FIX_FAILURE_THRESHOLD,
    FIX_FIRST_SUCCESS,
    FIX_SEQUENCE,
    FIX_AGENT_TIMEOUT,
)
from ..exceptions import AutoFixError
from ..spec.template_models import TemplateSpec
from ..spec.validation_models import AutoFix

logger = logging.getLogger(__name__)


def _lowered_timeout(workflow_timeout: int, minimum: int) -> Optional[int]:
    """Timeout below the workflow timeout, or None when the minimum does not fit below it."""
    margin = get_settings().auto_fix_timeout_margin_seconds
    suggested = max(minimum, min(workflow_timeout - margin, workflow_timeout - 1))
    return suggested if suggested < workflow_timeout else None


def suggest_auto_fixes(template: TemplateSpec) -> List[AutoFix]:
    """
    Propose fixes for clamp-style workflow and timeout problems.

    Args:
        template: Template to inspect (never modified)

    Returns:
        Fixes with dotted field paths relative to the template
    """
    workflow = template.workflow
    if workflow is None:
        return []

    fixes: List[AutoFix] = []
    agent_count = template.agent_count

    if agent_count > 0 and workflow.max_concurrent_agents is not None:
        cap = min(agent_count, get_settings().auto_fix_max_concurrent_agents)
        suggested = max(MAX_CONCURRENT_MIN, min(workflow.max_concurrent_agents, cap))
        if suggested != workflow.max_concurrent_agents:
            fixes.append(AutoFix(
                field=f"{FIELD_WORKFLOW}.max_concurrent_agents",
                current_value=workflow.max_concurrent_agents,
                suggested_value=suggested,
                reason=FIX_MAX_CONCURRENT.format(agent_count=agent_count),
            ))

    if workflow.completion_strategy == COMPLETION_THRESHOLD and agent_count > 0:
        current = workflow.required_completions
        suggested = agent_count if current is None else max(1, min(current, agent_count))
        if suggested != current:
            fixes.append(AutoFix(
                field=f"{FIELD_WORKFLOW}.required_completions",
                current_value=current,
                suggested_value=suggested,
                reason=FIX_REQUIRED_COMPLETIONS.format(agent_count=agent_count),
            ))

    threshold = workflow.failure_threshold
    if threshold is not None and agent_count > 0 and not 1 <= threshold <= agent_count:
        fixes.append(AutoFix(
            field=f"{FIELD_WORKFLOW}.failure_threshold",
            current_value=threshold,
            suggested_value=max(1, min(threshold, agent_count)),
            reason=FIX_FAILURE_THRESHOLD.format(agent_count=agent_count),
        ))

    if workflow.completion_strategy == COMPLETION_FIRST_SUCCESS and workflow.mode != MODE_PARALLEL:
        fixes.append(AutoFix(
            field=f"{FIELD_WORKFLOW}.completion_strategy",
            current_value=workflow.completion_strategy,
            suggested_value=COMPLETION_ALL,
            reason=FIX_FIRST_SUCCESS,
        ))

    agent_ids = template.agent_ids()
    if workflow.mode == MODE_SEQUENTIAL and not workflow.sequence and agent_ids:
        fixes.append(AutoFix(
            field=f"{FIELD_WORKFLOW}.sequence",
            current_value=workflow.sequence,
            suggested_value=agent_ids,
            reason=FIX_SEQUENCE,
        ))

    workflow_timeout = workflow.timeout_seconds
    if workflow_timeout is not None:
        for index, agent in enumerate(template.agents):
            if agent.timeout_seconds is not None and agent.timeout_seconds >= workflow_timeout:
                suggested = _lowered_timeout(workflow_timeout, AGENT_TIMEOUT_MIN_S)
                if suggested is not None:
                    fixes.append(AutoFix(
                        field=f"{FIELD_AGENTS}.{index}.timeout_seconds",
                        current_value=agent.timeout_seconds,
                        suggested_value=suggested,
                        reason=FIX_AGENT_TIMEOUT.format(workflow_timeout=workflow_timeout),
                    ))
            if agent.is_hitl_enabled():
                hitl_timeout = agent.hitl_config.timeout_seconds
                suggested = _lowered_timeout(workflow_timeout, HITL_TIMEOUT_MIN_S)
                if hitl_timeout is not None and hitl_timeout >= workflow_timeout and suggested is not None:
                    fixes.append(AutoFix(
                        field=f"{FIELD_AGENTS}.{index}.hitl_config.timeout_seconds",
                        current_value=hitl_timeout,
                        suggested_value=suggested,
                        reason=FIX_AGENT_TIMEOUT.format(workflow_timeout=workflow_timeout),
                    ))

    return fixes


def _set_path(data: Any, field: str, value: Any) -> None:
    segments = field.split(".")
    target = data
    try:
        for segment in segments[:-1]:
            target = target[int(segment)] if isinstance(target, list) else target[segment]
        last = segments[-1]
        if isinstance(target, list):
            target[int(last)] = value
        elif isinstance(target, dict) and last in target:
            target[last] = value
        else:
            raise AutoFixError(field)
    except (KeyError, IndexError, ValueError, TypeError) as e:
        raise AutoFixError(field, details={"reason": str(e)}) from e


def apply_auto_fixes(template: TemplateSpec, fixes: List[AutoFix]) -> TemplateSpec:
    """
    Apply fixes to a copy of a template.

    Raises:
        AutoFixError: If a fix targets a field that does not exist

    Returns:
        A new TemplateSpec; the input template is not modified
    """
    data = copy.deepcopy(template.model_dump())
    for fix in fixes:
        _set_path(data, fix.field, copy.deepcopy(fix.suggested_value))
    logger.debug("Applied %d auto-fix(es) to template %r", len(fixes), template.name)
    return TemplateSpec.model_validate(data)
