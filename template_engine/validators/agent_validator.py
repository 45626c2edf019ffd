"""
Agent Validator

Validates each agent of a template and its LLM, search tool (Tavily) and
human-in-the-loop sub-records, then the agent list as a whole.

Version: 1.0.0
"""

import logging
from typing import List, Optional

from ..constants import (
    FIELD_AGENTS,
    MAX_AGENTS,
    AGENT_NAME_MAX_LENGTH,
    SYSTEM_PROMPT_MIN_LENGTH,
    SYSTEM_PROMPT_MAX_LENGTH,
    USER_PROMPT_MIN_LENGTH,
    USER_PROMPT_MAX_LENGTH,
    AGENT_TIMEOUT_MIN_S,
    AGENT_TIMEOUT_MAX_S,
    RETRY_COUNT_MIN,
    RETRY_COUNT_MAX,
    PRIORITY_MIN,
    PRIORITY_MAX,
    TEMPERATURE_MIN,
    TEMPERATURE_MAX,
    MAX_TOKENS_MIN,
    MAX_TOKENS_MAX,
    MAX_RESULTS_MIN,
    MAX_RESULTS_MAX,
    CRAWL_DEPTH_MIN,
    CRAWL_DEPTH_MAX,
    CRAWL_LIMIT_MIN,
    CRAWL_LIMIT_MAX,
    MAP_DEPTH_MIN,
    MAP_DEPTH_MAX,
    CREDITS_PER_AGENT_MIN,
    CREDITS_PER_AGENT_MAX,
    SEARCH_TIMEOUT_MIN_S,
    SEARCH_TIMEOUT_MAX_S,
    SEARCH_RETRY_MIN,
    SEARCH_RETRY_MAX,
    HITL_TIMEOUT_MIN_S,
    HITL_TIMEOUT_MAX_S,
    INTERVENTION_POINT_CONDITIONAL,
    INTERVENTION_TYPE_DECISION,
    ERROR_AGENTS_REQUIRED,
    ERROR_TOO_MANY_AGENTS,
    ERROR_DUPLICATE_AGENT_NAMES,
    ERROR_SELF_DEPENDENCY,
    ERROR_UNKNOWN_DEPENDENCY,
    WARNING_REPEATED_DEPENDENCY,
    WARNING_NO_SEARCH_API,
    WARNING_BETA_SEARCH_API,
    WARNING_NO_INTERVENTION_POINTS,
    WARNING_CONDITIONAL_POINT_TYPE,
)
from ..enum import (
    AgentType,
    LLMModel,
    SearchDepth,
    TimeRange,
    ContentFormat,
    InterventionType,
    InterventionPoint,
    ValidationErrorType,
)
from ..spec.agent_models import AgentSpec, LLMConfig, TavilyConfig, HITLConfig
from .collector import ValidationCollector
from .dependency_graph import check_dependency_cycle
from .rules import check_length, check_range, check_enum, check_required

logger = logging.getLogger(__name__)

SECONDS = "seconds"


def validate_llm_config(
    llm_config: Optional[LLMConfig],
    field_prefix: str,
    collector: ValidationCollector,
) -> None:
    if not check_required(llm_config, field_prefix, "LLM configuration", collector):
        return
    check_enum(llm_config.model, LLMModel.values(), f"{field_prefix}.model", "LLM model", collector)
    check_range(
        llm_config.temperature, f"{field_prefix}.temperature", "Temperature", collector,
        TEMPERATURE_MIN, TEMPERATURE_MAX,
    )
    check_range(
        llm_config.max_tokens, f"{field_prefix}.max_tokens", "Max tokens", collector,
        MAX_TOKENS_MIN, MAX_TOKENS_MAX,
    )


def validate_tavily_config(
    tavily_config: Optional[TavilyConfig],
    field_prefix: str,
    agent_name: str,
    collector: ValidationCollector,
) -> None:
    """
    Validate the search tool settings of an agent.

    A missing config is treated as "no APIs enabled" and only warned about.
    """
    if tavily_config is None:
        collector.add_warning(WARNING_NO_SEARCH_API.format(name=agent_name))
        return

    check_enum(
        tavily_config.search_depth, SearchDepth.values(),
        f"{field_prefix}.search_depth", "search depth", collector,
    )
    check_range(
        tavily_config.max_results, f"{field_prefix}.max_results", "Max results", collector,
        MAX_RESULTS_MIN, MAX_RESULTS_MAX,
    )
    if tavily_config.time_range:
        check_enum(
            tavily_config.time_range, TimeRange.values(),
            f"{field_prefix}.time_range", "time range", collector,
        )
    check_enum(
        tavily_config.extract_depth, SearchDepth.values(),
        f"{field_prefix}.extract_depth", "extract depth", collector,
    )
    check_enum(
        tavily_config.format, ContentFormat.values(),
        f"{field_prefix}.format", "format", collector,
    )
    check_range(
        tavily_config.max_crawl_depth, f"{field_prefix}.max_crawl_depth", "Max crawl depth", collector,
        CRAWL_DEPTH_MIN, CRAWL_DEPTH_MAX,
    )
    check_range(
        tavily_config.crawl_limit, f"{field_prefix}.crawl_limit", "Crawl limit", collector,
        CRAWL_LIMIT_MIN, CRAWL_LIMIT_MAX,
    )
    check_range(
        tavily_config.max_map_depth, f"{field_prefix}.max_map_depth", "Max map depth", collector,
        MAP_DEPTH_MIN, MAP_DEPTH_MAX,
    )
    check_range(
        tavily_config.max_credits_per_agent, f"{field_prefix}.max_credits_per_agent",
        "Max credits per agent", collector,
        CREDITS_PER_AGENT_MIN, CREDITS_PER_AGENT_MAX,
    )
    check_range(
        tavily_config.timeout_seconds, f"{field_prefix}.timeout_seconds", "Tavily timeout", collector,
        SEARCH_TIMEOUT_MIN_S, SEARCH_TIMEOUT_MAX_S, SECONDS,
    )
    check_range(
        tavily_config.retry_attempts, f"{field_prefix}.retry_attempts", "Retry attempts", collector,
        SEARCH_RETRY_MIN, SEARCH_RETRY_MAX,
    )

    if not tavily_config.enabled_apis():
        collector.add_warning(WARNING_NO_SEARCH_API.format(name=agent_name))
    if tavily_config.uses_beta_apis():
        collector.add_warning(WARNING_BETA_SEARCH_API.format(name=agent_name))


def validate_hitl_config(
    hitl_config: HITLConfig,
    field_prefix: str,
    agent_name: str,
    collector: ValidationCollector,
) -> None:
    """Validate an enabled HITL config. The workflow timeout comparison lives in cross_validators."""
    check_enum(
        hitl_config.intervention_type, InterventionType.values(),
        f"{field_prefix}.intervention_type", "intervention type", collector,
    )
    for index, point in enumerate(hitl_config.intervention_points):
        check_enum(
            point, InterventionPoint.values(),
            f"{field_prefix}.intervention_points.{index}", "intervention point", collector,
        )
    check_range(
        hitl_config.timeout_seconds, f"{field_prefix}.timeout_seconds", "HITL timeout", collector,
        HITL_TIMEOUT_MIN_S, HITL_TIMEOUT_MAX_S, SECONDS,
    )

    if not hitl_config.intervention_points:
        collector.add_warning(WARNING_NO_INTERVENTION_POINTS.format(name=agent_name))
    if (
        INTERVENTION_POINT_CONDITIONAL in hitl_config.intervention_points
        and hitl_config.intervention_type != INTERVENTION_TYPE_DECISION
    ):
        collector.add_warning(WARNING_CONDITIONAL_POINT_TYPE.format(name=agent_name))


def _validate_dependencies(
    agent: AgentSpec,
    field: str,
    known_ids: List[str],
    collector: ValidationCollector,
) -> None:
    seen = set()
    for dependency in agent.dependencies():
        if dependency in seen:
            collector.add_warning(
                WARNING_REPEATED_DEPENDENCY.format(name=agent.display_name(), dependency=dependency)
            )
            continue
        seen.add(dependency)

        if agent.id and dependency == agent.id:
            collector.add_error(
                field,
                ERROR_SELF_DEPENDENCY.format(name=agent.display_name()),
                ValidationErrorType.CUSTOM,
            )
        elif dependency not in known_ids:
            collector.add_error(
                field,
                ERROR_UNKNOWN_DEPENDENCY.format(name=agent.display_name(), dependency=dependency),
                ValidationErrorType.CUSTOM,
            )


def validate_agent(
    agent: AgentSpec,
    index: int,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    """
    Validate one agent.

    Args:
        agent: Agent to validate
        index: Position of the agent in the template (used in field paths)
        agents: All agents of the template (to resolve dependencies)
        collector: Collector receiving the findings
    """
    prefix = f"{FIELD_AGENTS}.{index}"
    name = agent.display_name()

    check_length(agent.name, f"{prefix}.name", "Agent name", collector, max_length=AGENT_NAME_MAX_LENGTH)
    check_enum(agent.type, AgentType.values(), f"{prefix}.type", "agent type", collector)
    check_length(
        agent.system_prompt, f"{prefix}.system_prompt", "System prompt", collector,
        min_length=SYSTEM_PROMPT_MIN_LENGTH, max_length=SYSTEM_PROMPT_MAX_LENGTH,
    )
    check_length(
        agent.user_prompt, f"{prefix}.user_prompt", "User prompt", collector,
        min_length=USER_PROMPT_MIN_LENGTH, max_length=USER_PROMPT_MAX_LENGTH,
    )

    known_ids = [other.id for other in agents if other.id]
    _validate_dependencies(agent, f"{prefix}.depends_on", known_ids, collector)

    check_range(
        agent.timeout_seconds, f"{prefix}.timeout_seconds", "Agent timeout", collector,
        AGENT_TIMEOUT_MIN_S, AGENT_TIMEOUT_MAX_S, SECONDS,
    )
    check_range(
        agent.retry_count, f"{prefix}.retry_count", "Retry count", collector,
        RETRY_COUNT_MIN, RETRY_COUNT_MAX,
    )
    check_range(
        agent.priority, f"{prefix}.priority", "Agent priority", collector,
        PRIORITY_MIN, PRIORITY_MAX,
    )

    validate_llm_config(agent.llm_config, f"{prefix}.llm_config", collector)
    validate_tavily_config(agent.tavily_config, f"{prefix}.tavily_config", name, collector)
    if agent.is_hitl_enabled():
        validate_hitl_config(agent.hitl_config, f"{prefix}.hitl_config", name, collector)


def validate_agents(agents: List[AgentSpec], collector: ValidationCollector) -> None:
    """
    Validate the agent list of a template.

    An empty list yields exactly one `required` error on `agents` and
    nothing else from this validator.
    """
    if not agents:
        collector.add_error(FIELD_AGENTS, ERROR_AGENTS_REQUIRED, ValidationErrorType.REQUIRED)
        return

    if len(agents) > MAX_AGENTS:
        collector.add_error(
            FIELD_AGENTS,
            ERROR_TOO_MANY_AGENTS.format(max_agents=MAX_AGENTS),
            ValidationErrorType.RANGE,
        )

    for index, agent in enumerate(agents):
        validate_agent(agent, index, agents, collector)

    names = [agent.name.strip().lower() for agent in agents if agent.name and agent.name.strip()]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        collector.add_error(
            FIELD_AGENTS,
            ERROR_DUPLICATE_AGENT_NAMES.format(names=", ".join(duplicates)),
            ValidationErrorType.CUSTOM,
        )

    check_dependency_cycle(agents, collector)
