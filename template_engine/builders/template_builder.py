"""
Template Builder

Fluent builder for creating complete templates.

Version: 1.0.0
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..spec.agent_models import AgentSpec
from ..spec.template_models import TemplateSpec
from ..spec.workflow_models import GraphEdge, GraphStructure, WorkflowConfig
from ..enum import WorkflowMode, CompletionStrategy, EdgeConditionType
from ..defaults import (
    DEFAULT_WORKFLOW_MODE,
    DEFAULT_WORKFLOW_TIMEOUT_S,
    DEFAULT_MAX_CONCURRENT_AGENTS,
    DEFAULT_COMPLETION_STRATEGY,
    DEFAULT_CONTINUE_ON_FAILURE,
    DEFAULT_RETRY_FAILED_AGENTS,
)
from ..exceptions import TemplateBuildError, TemplateValidationError

logger = logging.getLogger(__name__)


class TemplateBuilder:
    """
    Fluent builder for creating TemplateSpec instances.

    Usage:
        # Sequential template
        template = (TemplateBuilder()
            .with_name("Market research")
            .with_description("Researches a market and writes a summary")
            .add_agent(researcher)
            .add_agent(writer)
            .sequential("researcher", "writer")
            .with_timeout(1800)
            .build())

        # Graph template
        template = (TemplateBuilder()
            .with_name("Review loop")
            .with_description("Drafts and reviews a document")
            .add_agents([drafter, reviewer])
            .as_graph(entry_point="drafter")
            .connect("drafter", "reviewer")
            .connect("reviewer", "end", condition_type=EdgeConditionType.SUCCESS)
            .add_graph_node("end")
            .build_validated())
    """

    def __init__(self):
        """Initialize the builder."""
        self._id: Optional[str] = None
        self._name: str = ""
        self._description: str = ""
        self._agents: List[AgentSpec] = []

        # Workflow
        self._mode: Union[WorkflowMode, str] = DEFAULT_WORKFLOW_MODE
        self._timeout_seconds: Optional[int] = DEFAULT_WORKFLOW_TIMEOUT_S
        self._max_concurrent_agents: Optional[int] = DEFAULT_MAX_CONCURRENT_AGENTS
        self._completion_strategy: Union[CompletionStrategy, str] = DEFAULT_COMPLETION_STRATEGY
        self._required_completions: Optional[int] = None
        self._failure_threshold: Optional[int] = None
        self._continue_on_failure: bool = DEFAULT_CONTINUE_ON_FAILURE
        self._retry_failed_agents: bool = DEFAULT_RETRY_FAILED_AGENTS

        # Mode payloads
        self._sequence: Optional[List[str]] = None
        self._parallel_groups: Optional[List[List[str]]] = None
        self._conditions: Optional[Dict[str, Any]] = None

        # Graph
        self._graph_nodes: List[str] = []
        self._graph_edges: List[GraphEdge] = []
        self._entry_point: Optional[str] = None
        self._exit_points: List[str] = []
        self._use_graph: bool = False

    def with_id(self, template_id: str) -> TemplateBuilder:
        """Set the template ID."""
        self._id = template_id
        return self

    def with_name(self, name: str) -> TemplateBuilder:
        """Set the template name."""
        self._name = name
        return self

    def with_description(self, description: str) -> TemplateBuilder:
        """Set the template description."""
        self._description = description
        return self

    # =========================================================================
    # Agent methods
    # =========================================================================

    def add_agent(self, agent: AgentSpec) -> TemplateBuilder:
        """Add an agent to the template."""
        self._agents.append(agent)
        return self

    def add_agents(self, agents: List[AgentSpec]) -> TemplateBuilder:
        """Add multiple agents."""
        for agent in agents:
            self.add_agent(agent)
        return self

    def remove_agent(self, agent_id: str) -> TemplateBuilder:
        """Remove an agent and every reference to it in the workflow payloads."""
        self._agents = [agent for agent in self._agents if agent.id != agent_id]
        if self._sequence is not None:
            self._sequence = [item for item in self._sequence if item != agent_id]
        if self._parallel_groups is not None:
            self._parallel_groups = [
                [item for item in group if item != agent_id] for group in self._parallel_groups
            ]
        self._graph_nodes = [node for node in self._graph_nodes if node != agent_id]
        self._graph_edges = [
            edge for edge in self._graph_edges
            if edge.from_node != agent_id and edge.to_node != agent_id
        ]
        return self

    # =========================================================================
    # Mode methods
    # =========================================================================

    def with_mode(self, mode: Union[WorkflowMode, str]) -> TemplateBuilder:
        """Set the workflow mode without touching any payload."""
        self._mode = mode
        return self

    def sequential(self, *agent_ids: str) -> TemplateBuilder:
        """Use sequential mode with the given execution order."""
        self._mode = WorkflowMode.SEQUENTIAL
        self._sequence = list(agent_ids)
        return self

    def parallel(self, *groups: List[str]) -> TemplateBuilder:
        """Use parallel mode with the given groups."""
        self._mode = WorkflowMode.PARALLEL
        self._parallel_groups = [list(group) for group in groups]
        return self

    def conditional(self, conditions: Optional[Dict[str, Any]] = None) -> TemplateBuilder:
        """Use conditional mode; routing follows the agents' depends_on."""
        self._mode = WorkflowMode.CONDITIONAL
        self._conditions = conditions
        return self

    def as_graph(self, entry_point: Optional[str] = None) -> TemplateBuilder:
        """Use graph mode. Agents added so far become graph nodes."""
        self._mode = WorkflowMode.GRAPH
        self._use_graph = True
        self._entry_point = entry_point
        for agent in self._agents:
            if agent.id and agent.id not in self._graph_nodes:
                self._graph_nodes.append(agent.id)
        return self

    # =========================================================================
    # Graph methods
    # =========================================================================

    def add_graph_node(self, node_id: str) -> TemplateBuilder:
        """Add a graph node (an agent ID or a virtual node)."""
        self._use_graph = True
        if node_id not in self._graph_nodes:
            self._graph_nodes.append(node_id)
        return self

    def set_entry_point(self, node_id: str) -> TemplateBuilder:
        self._use_graph = True
        self._entry_point = node_id
        return self

    def add_exit_point(self, node_id: str) -> TemplateBuilder:
        self._use_graph = True
        if node_id not in self._exit_points:
            self._exit_points.append(node_id)
        return self

    def connect(
        self,
        from_node: str,
        to_node: str,
        condition_type: Union[EdgeConditionType, str] = EdgeConditionType.ALWAYS,
        condition: Optional[str] = None,
        weight: Optional[float] = None,
        edge_id: Optional[str] = None,
    ) -> TemplateBuilder:
        """
        Add a directed graph edge.

        Args:
            from_node: Source node ID
            to_node: Target node ID
            condition_type: When the edge is traversed
            condition: Condition text (needed for custom edges)
            weight: Routing weight
            edge_id: Optional edge ID (auto-generated if not provided)
        """
        self._use_graph = True
        if not edge_id:
            edge_id = f"edge-{len(self._graph_edges) + 1}"

        self._graph_edges.append(GraphEdge(
            edge_id=edge_id,
            from_node=from_node,
            to_node=to_node,
            condition_type=condition_type,
            condition=condition,
            weight=weight,
        ))
        return self

    # =========================================================================
    # Config methods
    # =========================================================================

    def with_timeout(self, timeout_seconds: Optional[int]) -> TemplateBuilder:
        """Set the workflow timeout."""
        self._timeout_seconds = timeout_seconds
        return self

    def with_max_concurrent_agents(self, max_concurrent: Optional[int]) -> TemplateBuilder:
        self._max_concurrent_agents = max_concurrent
        return self

    def with_completion_strategy(
        self,
        strategy: Union[CompletionStrategy, str],
        required_completions: Optional[int] = None,
    ) -> TemplateBuilder:
        """Set the completion strategy (and the threshold count for threshold)."""
        self._completion_strategy = strategy
        self._required_completions = required_completions
        return self

    def with_failure_threshold(self, threshold: Optional[int]) -> TemplateBuilder:
        self._failure_threshold = threshold
        return self

    def with_continue_on_failure(self, enabled: bool = True) -> TemplateBuilder:
        self._continue_on_failure = enabled
        return self

    def with_retry_failed_agents(self, enabled: bool = True) -> TemplateBuilder:
        self._retry_failed_agents = enabled
        return self

    # =========================================================================
    # Build methods
    # =========================================================================

    def _build_graph(self) -> Optional[GraphStructure]:
        if not self._use_graph:
            return None
        return GraphStructure(
            nodes=list(self._graph_nodes),
            edges=list(self._graph_edges),
            entry_point=self._entry_point,
            exit_points=list(self._exit_points),
        )

    def build(self) -> TemplateSpec:
        """
        Build the TemplateSpec.

        Only the name is enforced here; the validators decide whether the
        template is complete.

        Raises:
            TemplateBuildError: If the template name is missing
        """
        if not self._name or not self._name.strip():
            raise TemplateBuildError("Template name is required")

        workflow = WorkflowConfig(
            mode=self._mode,
            timeout_seconds=self._timeout_seconds,
            max_concurrent_agents=self._max_concurrent_agents,
            completion_strategy=self._completion_strategy,
            required_completions=self._required_completions,
            failure_threshold=self._failure_threshold,
            continue_on_failure=self._continue_on_failure,
            retry_failed_agents=self._retry_failed_agents,
            sequence=self._sequence,
            parallel_groups=self._parallel_groups,
            conditions=self._conditions,
            graph_structure=self._build_graph(),
        )

        return TemplateSpec(
            id=self._id,
            name=self._name,
            description=self._description,
            agents=list(self._agents),
            workflow=workflow,
        )

    def build_validated(self) -> TemplateSpec:
        """
        Build the TemplateSpec and require it to be valid.

        Raises:
            TemplateValidationError: If validation reports any error
        """
        from ..validators.template_validator import validate_template

        template = self.build()
        result = validate_template(template)
        if not result.is_valid:
            logger.debug("Template %r failed validation with %d error(s)", template.name, len(result.errors))
            raise TemplateValidationError(
                f"Template '{template.name}' is invalid",
                validation_errors=[error.to_dict() for error in result.errors],
            )
        return template
