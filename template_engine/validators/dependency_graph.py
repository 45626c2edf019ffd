"""
Dependency Graph Checker

Cycle and reachability analysis over agent `depends_on` edges. This graph is
separate from the explicit graph of graph mode (see graph_validator): its
nodes are agents only.

Version: 1.0.0
"""

import logging
from typing import Dict, List, Optional, Set

from ..constants import (
    FIELD_AGENTS,
    FIELD_WORKFLOW,
    ERROR_DEPENDENCY_CYCLE,
    ERROR_NO_ENTRY_AGENT,
    WARNING_UNREACHABLE_AGENT,
)
from ..enum import ValidationErrorType
from ..spec.agent_models import AgentSpec
from .collector import ValidationCollector

logger = logging.getLogger(__name__)


def _dependency_map(agents: List[AgentSpec]) -> Dict[str, List[str]]:
    """Map agent id to the ids it depends on, dropping self-edges and unknown ids."""
    known = {agent.id for agent in agents if agent.id}
    graph: Dict[str, List[str]] = {}
    for agent in agents:
        if not agent.id:
            continue
        graph.setdefault(agent.id, [])
        for dependency in agent.dependencies():
            if dependency != agent.id and dependency in known:
                graph[agent.id].append(dependency)
    return graph


def find_dependency_cycle(agents: List[AgentSpec]) -> Optional[List[str]]:
    """
    Find the first dependency cycle among agents.

    Args:
        agents: Agents of the template

    Returns:
        The cycle as a list of agent ids whose first and last entries are
        equal (e.g. ["a", "b", "a"]), or None when the dependencies are acyclic.
    """
    graph = _dependency_map(agents)
    visited: Set[str] = set()
    rec_stack: Set[str] = set()
    path: List[str] = []

    def dfs(agent_id: str) -> Optional[List[str]]:
        visited.add(agent_id)
        rec_stack.add(agent_id)
        path.append(agent_id)

        for next_id in graph.get(agent_id, []):
            if next_id not in visited:
                cycle = dfs(next_id)
                if cycle:
                    return cycle
            elif next_id in rec_stack:
                return path[path.index(next_id):] + [next_id]

        rec_stack.remove(agent_id)
        path.pop()
        return None

    for agent_id in graph:
        if agent_id not in visited:
            cycle = dfs(agent_id)
            if cycle:
                return cycle
    return None


def check_dependency_cycle(agents: List[AgentSpec], collector: ValidationCollector) -> bool:
    """Report at most one cycle error on `agents`. Returns True when acyclic."""
    cycle = find_dependency_cycle(agents)
    if cycle is None:
        return True
    logger.debug("Dependency cycle found: %s", cycle)
    collector.add_error(
        FIELD_AGENTS,
        ERROR_DEPENDENCY_CYCLE.format(path=" -> ".join(cycle)),
        ValidationErrorType.CUSTOM,
    )
    return False


def find_entry_agents(agents: List[AgentSpec]) -> List[AgentSpec]:
    """Agents without dependencies: where a conditional workflow can start."""
    return [agent for agent in agents if not agent.dependencies()]


def find_unreachable_agents(agents: List[AgentSpec]) -> List[AgentSpec]:
    """
    Agents that can never run in a conditional workflow.

    An agent is reachable once every one of its dependencies is reachable.
    Dependencies on unknown ids, on the agent itself or on a cycle are
    never satisfied.
    """
    reachable: Set[int] = set()
    index_by_id = {agent.id: index for index, agent in enumerate(agents) if agent.id}

    changed = True
    while changed:
        changed = False
        for index, agent in enumerate(agents):
            if index in reachable:
                continue
            dependencies = agent.dependencies()
            if all(
                dependency in index_by_id and index_by_id[dependency] in reachable
                for dependency in dependencies
            ):
                reachable.add(index)
                changed = True

    return [agent for index, agent in enumerate(agents) if index not in reachable]


def check_conditional_reachability(agents: List[AgentSpec], collector: ValidationCollector) -> None:
    """No entry agent is an error on `workflow`; each never-reached agent is a warning."""
    if not agents:
        return
    if not find_entry_agents(agents):
        collector.add_error(FIELD_WORKFLOW, ERROR_NO_ENTRY_AGENT, ValidationErrorType.CUSTOM)
        return
    for agent in find_unreachable_agents(agents):
        collector.add_warning(WARNING_UNREACHABLE_AGENT.format(name=agent.display_name()))
