"""
Workflow Mode Validator

Checks the mode of a workflow and the payload that mode owns. Payloads left
over from other modes are tolerated and reported as warnings.

Version: 1.0.0
"""

import logging
from typing import List

from ..constants import (
    FIELD_WORKFLOW,
    FIELD_SEQUENCE,
    FIELD_PARALLEL_GROUPS,
    FIELD_GRAPH_STRUCTURE,
    MODE_SEQUENTIAL,
    MODE_PARALLEL,
    MODE_CONDITIONAL,
    MODE_GRAPH,
    ERROR_SEQUENCE_REQUIRED,
    ERROR_AGENT_NOT_FOUND,
    ERROR_DUPLICATE_IN_SEQUENCE,
    ERROR_PARALLEL_GROUPS_REQUIRED,
    ERROR_EMPTY_PARALLEL_GROUP,
    ERROR_AGENT_IN_MULTIPLE_GROUPS,
    ERROR_AGENT_REPEATED_IN_GROUP,
    ERROR_GRAPH_STRUCTURE_REQUIRED,
    ERROR_GRAPH_NODES_REQUIRED,
    WARNING_MODE_IGNORES_FIELD,
    WARNING_AGENTS_NOT_IN_SEQUENCE,
    WARNING_AGENTS_NOT_IN_GROUPS,
    WARNING_NO_CONDITIONS,
)
from ..enum import WorkflowMode, ValidationErrorType
from ..spec.agent_models import AgentSpec
from ..spec.workflow_models import WorkflowConfig
from .collector import ValidationCollector
from .dependency_graph import check_conditional_reachability
from .graph_validator import validate_graph_structure
from .rules import check_enum, check_required

logger = logging.getLogger(__name__)


def _validate_sequential(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    field = f"{FIELD_WORKFLOW}.{FIELD_SEQUENCE}"
    sequence = workflow.sequence or []

    if not sequence:
        if agents:
            collector.add_error(field, ERROR_SEQUENCE_REQUIRED, ValidationErrorType.REQUIRED)
        return

    known_ids = {agent.id for agent in agents if agent.id}
    for index, agent_id in enumerate(sequence):
        if agent_id not in known_ids:
            collector.add_error(
                f"{field}.{index}",
                ERROR_AGENT_NOT_FOUND.format(agent_id=agent_id),
                ValidationErrorType.CUSTOM,
            )

    duplicates = sorted({agent_id for agent_id in sequence if sequence.count(agent_id) > 1})
    if duplicates:
        collector.add_error(
            field,
            ERROR_DUPLICATE_IN_SEQUENCE.format(agent_ids=", ".join(duplicates)),
            ValidationErrorType.CUSTOM,
        )

    missing = [agent.id for agent in agents if agent.id and agent.id not in sequence]
    if missing:
        collector.add_warning(WARNING_AGENTS_NOT_IN_SEQUENCE.format(agent_ids=", ".join(missing)))


def _validate_parallel(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    field = f"{FIELD_WORKFLOW}.{FIELD_PARALLEL_GROUPS}"
    groups = workflow.parallel_groups or []

    if not groups:
        collector.add_error(field, ERROR_PARALLEL_GROUPS_REQUIRED, ValidationErrorType.REQUIRED)
        return

    known_ids = {agent.id for agent in agents if agent.id}
    group_of = {}
    reported = set()

    for group_index, group in enumerate(groups):
        if not group:
            collector.add_error(
                f"{field}.{group_index}",
                ERROR_EMPTY_PARALLEL_GROUP.format(number=group_index + 1),
                ValidationErrorType.REQUIRED,
            )
            continue

        seen_in_group = set()
        for agent_index, agent_id in enumerate(group):
            if agent_id not in known_ids:
                collector.add_error(
                    f"{field}.{group_index}.{agent_index}",
                    ERROR_AGENT_NOT_FOUND.format(agent_id=agent_id),
                    ValidationErrorType.CUSTOM,
                )
                continue

            if agent_id in seen_in_group:
                collector.add_error(
                    f"{field}.{group_index}",
                    ERROR_AGENT_REPEATED_IN_GROUP.format(agent_id=agent_id, number=group_index + 1),
                    ValidationErrorType.CUSTOM,
                )
                continue
            seen_in_group.add(agent_id)

            if agent_id in group_of and agent_id not in reported:
                reported.add(agent_id)
                collector.add_error(
                    field,
                    ERROR_AGENT_IN_MULTIPLE_GROUPS.format(agent_id=agent_id),
                    ValidationErrorType.CUSTOM,
                )
            group_of.setdefault(agent_id, group_index)

    unassigned = [agent.id for agent in agents if agent.id and agent.id not in group_of]
    if unassigned:
        collector.add_warning(WARNING_AGENTS_NOT_IN_GROUPS.format(agent_ids=", ".join(unassigned)))


def _validate_conditional(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    if not workflow.conditions:
        collector.add_warning(WARNING_NO_CONDITIONS)
    check_conditional_reachability(agents, collector)


def _validate_graph(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    field = f"{FIELD_WORKFLOW}.{FIELD_GRAPH_STRUCTURE}"
    graph = workflow.graph_structure

    if graph is None:
        collector.add_error(field, ERROR_GRAPH_STRUCTURE_REQUIRED, ValidationErrorType.REQUIRED)
        return
    if not graph.nodes:
        collector.add_error(f"{field}.nodes", ERROR_GRAPH_NODES_REQUIRED, ValidationErrorType.REQUIRED)
        return

    validate_graph_structure(graph, agents, collector)


_MODE_VALIDATORS = {
    MODE_SEQUENTIAL: _validate_sequential,
    MODE_PARALLEL: _validate_parallel,
    MODE_CONDITIONAL: _validate_conditional,
    MODE_GRAPH: _validate_graph,
}


def validate_workflow_mode(
    workflow: WorkflowConfig,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    """
    Validate the workflow mode and its payload.

    An unknown mode is reported as an `enum` error and the mode-specific
    checks are skipped.

    Args:
        workflow: Workflow block of the template
        agents: Agents of the template
        collector: Collector receiving the findings
    """
    if not check_enum(workflow.mode, WorkflowMode.values(), f"{FIELD_WORKFLOW}.mode", "workflow mode", collector):
        return

    _MODE_VALIDATORS[workflow.mode](workflow, agents, collector)

    for field_name in workflow.stale_payload_fields():
        collector.add_warning(
            WARNING_MODE_IGNORES_FIELD.format(mode=workflow.mode.capitalize(), field=field_name)
        )


def validate_workflow_present(workflow, collector: ValidationCollector) -> bool:
    """A template without a workflow block gets one `required` error on `workflow`."""
    return check_required(workflow, FIELD_WORKFLOW, "Workflow configuration", collector)
