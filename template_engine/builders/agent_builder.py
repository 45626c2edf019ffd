"""
Agent Builder

Fluent builder for creating template agents.

Version: 1.0.0
"""

from __future__ import annotations

from typing import List, Optional, Union

from ..spec.agent_models import AgentSpec, LLMConfig, TavilyConfig, HITLConfig
from ..enum import AgentType, LLMModel, InterventionType, InterventionPoint
from ..defaults import (
    DEFAULT_AGENT_TYPE,
    DEFAULT_AGENT_TIMEOUT_S,
    DEFAULT_RETRY_COUNT,
    DEFAULT_PRIORITY,
    DEFAULT_HITL_TIMEOUT_S,
)
from ..exceptions import TemplateBuildError


class AgentBuilder:
    """
    Fluent builder for creating AgentSpec instances.

    Usage:
        agent = (AgentBuilder()
            .with_id("researcher")
            .with_name("Researcher")
            .with_type(AgentType.RESEARCH)
            .with_system_prompt("You are a careful research assistant.")
            .with_user_prompt("Collect recent sources about the topic.")
            .with_search(search_api=True)
            .with_timeout(300)
            .build())

        reviewer = (AgentBuilder()
            .with_id("reviewer")
            .with_name("Reviewer")
            .with_type(AgentType.VALIDATION)
            .with_prompts("You review research notes.", "Check the notes for errors.")
            .depends_on("researcher")
            .with_hitl(InterventionType.APPROVAL, [InterventionPoint.AFTER_EXECUTION])
            .build())
    """

    def __init__(self):
        """Initialize the builder."""
        self._id: Optional[str] = None
        self._name: str = ""
        self._type: Union[AgentType, str] = DEFAULT_AGENT_TYPE
        self._system_prompt: str = ""
        self._user_prompt: str = ""
        self._depends_on: List[str] = []
        self._timeout_seconds: Optional[int] = DEFAULT_AGENT_TIMEOUT_S
        self._retry_count: Optional[int] = DEFAULT_RETRY_COUNT
        self._priority: Optional[int] = DEFAULT_PRIORITY

        # Sub-records
        self._llm_config: Optional[LLMConfig] = LLMConfig()
        self._tavily_config: Optional[TavilyConfig] = TavilyConfig()
        self._hitl_config: Optional[HITLConfig] = None

    def with_id(self, agent_id: str) -> AgentBuilder:
        """Set the agent ID."""
        self._id = agent_id
        return self

    def with_name(self, name: str) -> AgentBuilder:
        """Set the agent name."""
        self._name = name
        return self

    def with_type(self, agent_type: Union[AgentType, str]) -> AgentBuilder:
        """Set the agent type."""
        self._type = agent_type
        return self

    def with_system_prompt(self, prompt: str) -> AgentBuilder:
        self._system_prompt = prompt
        return self

    def with_user_prompt(self, prompt: str) -> AgentBuilder:
        self._user_prompt = prompt
        return self

    def with_prompts(self, system_prompt: str, user_prompt: str) -> AgentBuilder:
        """Set both prompts."""
        self._system_prompt = system_prompt
        self._user_prompt = user_prompt
        return self

    # =========================================================================
    # Dependency methods
    # =========================================================================

    def depends_on(self, *agent_ids: str) -> AgentBuilder:
        """Add dependencies on other agents."""
        self._depends_on.extend(agent_ids)
        return self

    # =========================================================================
    # Execution methods
    # =========================================================================

    def with_timeout(self, timeout_seconds: Optional[int]) -> AgentBuilder:
        self._timeout_seconds = timeout_seconds
        return self

    def with_retry_count(self, retry_count: Optional[int]) -> AgentBuilder:
        self._retry_count = retry_count
        return self

    def with_priority(self, priority: Optional[int]) -> AgentBuilder:
        self._priority = priority
        return self

    # =========================================================================
    # Sub-record methods
    # =========================================================================

    def with_llm(
        self,
        model: Union[LLMModel, str] = LLMModel.GPT_4,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> AgentBuilder:
        """Configure the LLM. Unset values keep their defaults."""
        values = {"model": model}
        if temperature is not None:
            values["temperature"] = temperature
        if max_tokens is not None:
            values["max_tokens"] = max_tokens
        self._llm_config = LLMConfig(**values)
        return self

    def with_llm_config(self, llm_config: Optional[LLMConfig]) -> AgentBuilder:
        """Set a pre-built LLM config (None removes it)."""
        self._llm_config = llm_config
        return self

    def with_search(self, **options) -> AgentBuilder:
        """
        Configure the search tool.

        Args:
            **options: TavilyConfig fields (e.g. search_api=True, max_results=5)
        """
        self._tavily_config = TavilyConfig(**options)
        return self

    def with_tavily_config(self, tavily_config: Optional[TavilyConfig]) -> AgentBuilder:
        self._tavily_config = tavily_config
        return self

    def with_hitl(
        self,
        intervention_type: Union[InterventionType, str] = InterventionType.APPROVAL,
        intervention_points: Optional[List[Union[InterventionPoint, str]]] = None,
        timeout_seconds: int = DEFAULT_HITL_TIMEOUT_S,
        auto_approve_after_timeout: bool = False,
    ) -> AgentBuilder:
        """Enable human-in-the-loop intervention (defaults to approval before execution)."""
        if intervention_points is None:
            intervention_points = [InterventionPoint.BEFORE_EXECUTION]
        self._hitl_config = HITLConfig(
            enabled=True,
            intervention_type=intervention_type,
            intervention_points=intervention_points,
            timeout_seconds=timeout_seconds,
            auto_approve_after_timeout=auto_approve_after_timeout,
        )
        return self

    def with_hitl_config(self, hitl_config: Optional[HITLConfig]) -> AgentBuilder:
        self._hitl_config = hitl_config
        return self

    # =========================================================================
    # Build method
    # =========================================================================

    def build(self) -> AgentSpec:
        """
        Build the AgentSpec.

        Only the ID is enforced here; everything else is left to the
        validators so incomplete agents can still be built.

        Raises:
            TemplateBuildError: If the agent ID is missing
        """
        if not self._id:
            raise TemplateBuildError("Agent ID is required")

        return AgentSpec(
            id=self._id,
            name=self._name,
            type=self._type,
            system_prompt=self._system_prompt,
            user_prompt=self._user_prompt,
            depends_on=list(self._depends_on),
            timeout_seconds=self._timeout_seconds,
            retry_count=self._retry_count,
            priority=self._priority,
            llm_config=self._llm_config,
            tavily_config=self._tavily_config,
            hitl_config=self._hitl_config,
        )
