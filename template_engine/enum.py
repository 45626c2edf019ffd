"""
Template Engine Enumerations

Version: 1.0.0
"""

from enum import Enum
from typing import List

from .constants import (
    # Agent types
    AGENT_TYPE_RESEARCH,
    AGENT_TYPE_ANALYSIS,
    AGENT_TYPE_SYNTHESIS,
    AGENT_TYPE_VALIDATION,
    # LLM models
    LLM_MODEL_GPT_4,
    LLM_MODEL_GPT_35_TURBO,
    LLM_MODEL_GPT_4_TURBO,
    # Workflow modes
    MODE_SEQUENTIAL,
    MODE_PARALLEL,
    MODE_CONDITIONAL,
    MODE_GRAPH,
    # Completion strategies
    COMPLETION_ALL,
    COMPLETION_MAJORITY,
    COMPLETION_ANY,
    COMPLETION_THRESHOLD,
    COMPLETION_FIRST_SUCCESS,
    # HITL
    INTERVENTION_TYPE_APPROVAL,
    INTERVENTION_TYPE_INPUT,
    INTERVENTION_TYPE_REVIEW,
    INTERVENTION_TYPE_MODIFY,
    INTERVENTION_TYPE_DECISION,
    INTERVENTION_POINT_BEFORE_EXECUTION,
    INTERVENTION_POINT_AFTER_EXECUTION,
    INTERVENTION_POINT_ON_ERROR,
    INTERVENTION_POINT_CONDITIONAL,
    # Search tool
    SEARCH_DEPTH_BASIC,
    SEARCH_DEPTH_ADVANCED,
    TIME_RANGE_DAY,
    TIME_RANGE_WEEK,
    TIME_RANGE_MONTH,
    TIME_RANGE_YEAR,
    CONTENT_FORMAT_MARKDOWN,
    CONTENT_FORMAT_TEXT,
    # Edge conditions
    EDGE_CONDITION_ALWAYS,
    EDGE_CONDITION_SUCCESS,
    EDGE_CONDITION_FAILURE,
    EDGE_CONDITION_CUSTOM,
    EDGE_CONDITION_CONDITIONAL,
    # Validation error types
    ERROR_TYPE_REQUIRED,
    ERROR_TYPE_MAX_LENGTH,
    ERROR_TYPE_MIN_LENGTH,
    ERROR_TYPE_RANGE,
    ERROR_TYPE_ENUM,
    ERROR_TYPE_CUSTOM,
    # Wizard steps
    STEP_BASIC,
    STEP_AGENTS,
    STEP_WORKFLOW,
    STEP_PREVIEW,
)


class _ValuesMixin:
    """Adds a helper listing the raw string values of a str enum."""

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]  # type: ignore[attr-defined]


class AgentType(_ValuesMixin, str, Enum):
    """
    Role an agent plays inside a template.

    RESEARCH: Gathers information (usually with the search tool)
    ANALYSIS: Analyses gathered material
    SYNTHESIS: Combines results of other agents
    VALIDATION: Checks results produced by other agents
    """
    RESEARCH = AGENT_TYPE_RESEARCH
    ANALYSIS = AGENT_TYPE_ANALYSIS
    SYNTHESIS = AGENT_TYPE_SYNTHESIS
    VALIDATION = AGENT_TYPE_VALIDATION


class LLMModel(_ValuesMixin, str, Enum):
    """LLM models supported by the execution service."""
    GPT_4 = LLM_MODEL_GPT_4
    GPT_35_TURBO = LLM_MODEL_GPT_35_TURBO
    GPT_4_TURBO = LLM_MODEL_GPT_4_TURBO


class WorkflowMode(_ValuesMixin, str, Enum):
    """
    Topology of a template workflow.

    SEQUENTIAL: Agents run one after another in `sequence` order
    PARALLEL: Agents run concurrently in `parallel_groups`
    CONDITIONAL: Agents are routed by `conditions` and `depends_on`
    GRAPH: Explicit nodes and edges in `graph_structure`
    """
    SEQUENTIAL = MODE_SEQUENTIAL
    PARALLEL = MODE_PARALLEL
    CONDITIONAL = MODE_CONDITIONAL
    GRAPH = MODE_GRAPH


class CompletionStrategy(_ValuesMixin, str, Enum):
    """
    When a multi-agent workflow counts as complete.

    ALL: Wait for all agents
    MAJORITY: More than half of the agents completed
    ANY: Any single completion
    THRESHOLD: `required_completions` agents completed
    FIRST_SUCCESS: First successful agent (parallel mode only)
    """
    ALL = COMPLETION_ALL
    MAJORITY = COMPLETION_MAJORITY
    ANY = COMPLETION_ANY
    THRESHOLD = COMPLETION_THRESHOLD
    FIRST_SUCCESS = COMPLETION_FIRST_SUCCESS


class InterventionType(_ValuesMixin, str, Enum):
    """
    Kind of human intervention requested by a HITL-enabled agent.

    APPROVAL: Simple approve/reject
    INPUT: Human provides input data
    REVIEW: Human reviews and validates
    MODIFY: Human modifies agent parameters
    DECISION: Human makes a routing decision
    """
    APPROVAL = INTERVENTION_TYPE_APPROVAL
    INPUT = INTERVENTION_TYPE_INPUT
    REVIEW = INTERVENTION_TYPE_REVIEW
    MODIFY = INTERVENTION_TYPE_MODIFY
    DECISION = INTERVENTION_TYPE_DECISION


class InterventionPoint(_ValuesMixin, str, Enum):
    """Point in an agent's lifecycle where a human may intervene."""
    BEFORE_EXECUTION = INTERVENTION_POINT_BEFORE_EXECUTION
    AFTER_EXECUTION = INTERVENTION_POINT_AFTER_EXECUTION
    ON_ERROR = INTERVENTION_POINT_ON_ERROR
    CONDITIONAL = INTERVENTION_POINT_CONDITIONAL


class SearchDepth(_ValuesMixin, str, Enum):
    """Search/extract depth for the Tavily search tool."""
    BASIC = SEARCH_DEPTH_BASIC
    ADVANCED = SEARCH_DEPTH_ADVANCED


class TimeRange(_ValuesMixin, str, Enum):
    """Recency filter for search results."""
    DAY = TIME_RANGE_DAY
    WEEK = TIME_RANGE_WEEK
    MONTH = TIME_RANGE_MONTH
    YEAR = TIME_RANGE_YEAR


class ContentFormat(_ValuesMixin, str, Enum):
    """Content format returned by the extract API."""
    MARKDOWN = CONTENT_FORMAT_MARKDOWN
    TEXT = CONTENT_FORMAT_TEXT


class EdgeConditionType(_ValuesMixin, str, Enum):
    """
    When an explicit graph edge is traversed.

    ALWAYS: Unconditional
    SUCCESS: Source node succeeded
    FAILURE: Source node failed
    CUSTOM: Free-text condition (requires `condition`)
    CONDITIONAL: Routed by the workflow conditions
    """
    ALWAYS = EDGE_CONDITION_ALWAYS
    SUCCESS = EDGE_CONDITION_SUCCESS
    FAILURE = EDGE_CONDITION_FAILURE
    CUSTOM = EDGE_CONDITION_CUSTOM
    CONDITIONAL = EDGE_CONDITION_CONDITIONAL


class ValidationErrorType(_ValuesMixin, str, Enum):
    """Taxonomy of blocking validation errors."""
    REQUIRED = ERROR_TYPE_REQUIRED
    MAX_LENGTH = ERROR_TYPE_MAX_LENGTH
    MIN_LENGTH = ERROR_TYPE_MIN_LENGTH
    RANGE = ERROR_TYPE_RANGE
    ENUM = ERROR_TYPE_ENUM
    CUSTOM = ERROR_TYPE_CUSTOM


class WizardStep(_ValuesMixin, str, Enum):
    """Steps of the template creation wizard."""
    BASIC = STEP_BASIC
    AGENTS = STEP_AGENTS
    WORKFLOW = STEP_WORKFLOW
    PREVIEW = STEP_PREVIEW
