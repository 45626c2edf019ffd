"""
Shared fixtures for template engine tests.
"""

import pytest

from template_engine import (
    AgentBuilder,
    AgentType,
    TemplateBuilder,
    get_settings,
)


def _agent(agent_id, **overrides):
    builder = (AgentBuilder()
        .with_id(agent_id)
        .with_name(overrides.pop("name", f"Agent {agent_id}"))
        .with_type(overrides.pop("agent_type", AgentType.RESEARCH))
        .with_prompts(
            overrides.pop("system_prompt", "You are a focused research assistant."),
            overrides.pop("user_prompt", "Research the assigned topic thoroughly."),
        )
        .with_search(search_api=True)
        .with_timeout(overrides.pop("timeout_seconds", 300)))

    depends_on = overrides.pop("depends_on", [])
    if depends_on:
        builder.depends_on(*depends_on)

    agent = builder.build()
    if overrides:
        agent = agent.model_copy(update=overrides)
    return agent


@pytest.fixture
def make_agent():
    """Factory for valid agents; keyword arguments override fields."""
    return _agent


@pytest.fixture
def agents_abc():
    """Three valid agents with ids a, b and c."""
    return [_agent("a"), _agent("b"), _agent("c")]


@pytest.fixture
def template_builder():
    """Builder pre-filled with a valid name and description."""
    def factory():
        return (TemplateBuilder()
            .with_name("Market research")
            .with_description("Researches a market and writes a short summary of the findings"))
    return factory


@pytest.fixture
def valid_sequential_template(template_builder, agents_abc):
    """Three agents run in sequence with the default workflow settings."""
    return (template_builder()
        .add_agents(agents_abc)
        .sequential("a", "b", "c")
        .with_timeout(1800)
        .build())


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
