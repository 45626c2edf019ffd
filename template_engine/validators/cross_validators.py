"""
Completion, Timeout and HITL Cross-Validators

Rules that relate workflow settings to the agents of a template: completion
strategy against agent count and mode, agent and HITL timeouts against the
workflow timeout, and HITL compatibility with the completion strategy.

Version: 1.0.0
"""

import logging
from typing import List

from ..constants import (
    FIELD_AGENTS,
    FIELD_WORKFLOW,
    MODE_SEQUENTIAL,
    MODE_PARALLEL,
    COMPLETION_THRESHOLD,
    COMPLETION_FIRST_SUCCESS,
    COMPLETION_ANY,
    INTERVENTION_POINT_AFTER_EXECUTION,
    WORKFLOW_TIMEOUT_MIN_S,
    WORKFLOW_TIMEOUT_MAX_S,
    MAX_CONCURRENT_MIN,
    MAX_CONCURRENT_MAX,
    ERROR_MAX_CONCURRENT_EXCEEDS_AGENTS,
    ERROR_REQUIRED_COMPLETIONS_MISSING,
    ERROR_REQUIRED_COMPLETIONS_RANGE,
    ERROR_FIRST_SUCCESS_MODE,
    ERROR_FAILURE_THRESHOLD_RANGE,
    ERROR_AGENT_TIMEOUT_EXCEEDS_WORKFLOW,
    ERROR_HITL_TIMEOUT_EXCEEDS_WORKFLOW,
    WARNING_SEQUENTIAL_TIMEOUT_SUM,
    WARNING_HITL_FIRST_SUCCESS,
    WARNING_MULTIPLE_HITL_ANY,
    WARNING_HITL_AFTER_EXECUTION_FIRST_SUCCESS,
)
from ..enum import CompletionStrategy, ValidationErrorType
from ..spec.agent_models import AgentSpec
from ..spec.workflow_models import WorkflowConfig
from .collector import ValidationCollector
from .rules import check_enum, check_range

logger = logging.getLogger(__name__)


def validate_completion(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    """Validate the completion strategy, concurrency cap and failure threshold."""
    agent_count = len(agents)

    check_enum(
        workflow.completion_strategy, CompletionStrategy.values(),
        f"{FIELD_WORKFLOW}.completion_strategy", "completion strategy", collector,
    )

    field = f"{FIELD_WORKFLOW}.max_concurrent_agents"
    if check_range(
        workflow.max_concurrent_agents, field, "Max concurrent agents", collector,
        MAX_CONCURRENT_MIN, MAX_CONCURRENT_MAX,
    ):
        if agents and workflow.max_concurrent_agents > agent_count:
            collector.add_error(
                field,
                ERROR_MAX_CONCURRENT_EXCEEDS_AGENTS.format(
                    max_concurrent=workflow.max_concurrent_agents, agent_count=agent_count,
                ),
                ValidationErrorType.RANGE,
            )

    if workflow.completion_strategy == COMPLETION_THRESHOLD:
        field = f"{FIELD_WORKFLOW}.required_completions"
        required = workflow.required_completions
        if required is None:
            collector.add_error(field, ERROR_REQUIRED_COMPLETIONS_MISSING, ValidationErrorType.REQUIRED)
        elif required < 1 or required > agent_count:
            collector.add_error(
                field,
                ERROR_REQUIRED_COMPLETIONS_RANGE.format(required=required, agent_count=agent_count),
                ValidationErrorType.RANGE,
            )

    if workflow.completion_strategy == COMPLETION_FIRST_SUCCESS and workflow.mode != MODE_PARALLEL:
        collector.add_error(
            f"{FIELD_WORKFLOW}.completion_strategy",
            ERROR_FIRST_SUCCESS_MODE.format(mode=workflow.mode),
            ValidationErrorType.CUSTOM,
        )

    threshold = workflow.failure_threshold
    if threshold is not None and (threshold < 1 or threshold > agent_count):
        collector.add_error(
            f"{FIELD_WORKFLOW}.failure_threshold",
            ERROR_FAILURE_THRESHOLD_RANGE.format(threshold=threshold, agent_count=agent_count),
            ValidationErrorType.RANGE,
        )


def validate_timeouts(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    """
    Validate the workflow timeout and compare agent timeouts against it.

    Every agent timeout must be strictly less than the workflow timeout. In
    sequential mode a sum of sequenced agent timeouts above the workflow
    timeout is only a warning.
    """
    check_range(
        workflow.timeout_seconds, f"{FIELD_WORKFLOW}.timeout_seconds", "Workflow timeout", collector,
        WORKFLOW_TIMEOUT_MIN_S, WORKFLOW_TIMEOUT_MAX_S, "seconds",
    )
    workflow_timeout = workflow.timeout_seconds
    if workflow_timeout is None:
        return

    for index, agent in enumerate(agents):
        if agent.timeout_seconds is not None and agent.timeout_seconds >= workflow_timeout:
            collector.add_error(
                f"{FIELD_AGENTS}.{index}.timeout_seconds",
                ERROR_AGENT_TIMEOUT_EXCEEDS_WORKFLOW.format(
                    name=agent.display_name(),
                    agent_timeout=agent.timeout_seconds,
                    workflow_timeout=workflow_timeout,
                ),
                ValidationErrorType.RANGE,
            )

    if workflow.mode == MODE_SEQUENTIAL and workflow.sequence:
        sequenced = set(workflow.sequence)
        total = sum(
            agent.timeout_seconds or 0
            for agent in agents
            if agent.id in sequenced
        )
        if total > workflow_timeout:
            collector.add_warning(
                WARNING_SEQUENTIAL_TIMEOUT_SUM.format(total=total, workflow_timeout=workflow_timeout)
            )


def validate_hitl_conflicts(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    """Validate HITL-enabled agents against the workflow timeout and completion strategy."""
    hitl_count = 0
    for index, agent in enumerate(agents):
        if not agent.is_hitl_enabled():
            continue
        hitl_count += 1
        hitl_timeout = agent.hitl_config.timeout_seconds

        if (
            hitl_timeout is not None
            and workflow.timeout_seconds is not None
            and hitl_timeout >= workflow.timeout_seconds
        ):
            collector.add_error(
                f"{FIELD_AGENTS}.{index}.hitl_config.timeout_seconds",
                ERROR_HITL_TIMEOUT_EXCEEDS_WORKFLOW.format(
                    name=agent.display_name(),
                    hitl_timeout=hitl_timeout,
                    workflow_timeout=workflow.timeout_seconds,
                ),
                ValidationErrorType.RANGE,
            )

        if workflow.completion_strategy == COMPLETION_FIRST_SUCCESS:
            collector.add_warning(WARNING_HITL_FIRST_SUCCESS.format(name=agent.display_name()))

        if (
            workflow.mode == MODE_PARALLEL
            and workflow.completion_strategy == COMPLETION_FIRST_SUCCESS
            and INTERVENTION_POINT_AFTER_EXECUTION in agent.hitl_config.intervention_points
        ):
            collector.add_warning(
                WARNING_HITL_AFTER_EXECUTION_FIRST_SUCCESS.format(name=agent.display_name())
            )

    if workflow.mode == MODE_PARALLEL and workflow.completion_strategy == COMPLETION_ANY and hitl_count > 1:
        collector.add_warning(WARNING_MULTIPLE_HITL_ANY)


def validate_cross_rules(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    validate_completion(workflow, agents, collector)
    validate_timeouts(workflow, agents, collector)
    validate_hitl_conflicts(workflow, agents, collector)
