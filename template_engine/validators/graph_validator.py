"""
Graph Structure Validator

Validates the explicit node/edge topology of graph mode: entry and exit
points, node membership, edge endpoints and conditions, cycles and
reachability from the entry point.

Version: 1.0.0
"""

import logging
from typing import Dict, List, Optional, Set

from ..constants import (
    FIELD_WORKFLOW,
    FIELD_GRAPH_STRUCTURE,
    EDGE_CONDITION_CUSTOM,
    EDGE_WEIGHT_MIN,
    EDGE_WEIGHT_MAX,
    ERROR_ENTRY_POINT_REQUIRED,
    ERROR_ENTRY_POINT_NOT_NODE,
    ERROR_ORPHAN_NODE,
    ERROR_EDGE_ENDPOINT_NOT_NODE,
    ERROR_CUSTOM_CONDITION_REQUIRED,
    ERROR_EXIT_POINT_NOT_NODE,
    ERROR_GRAPH_CYCLE,
    WARNING_REPEATED_NODE,
    WARNING_AGENTS_NOT_IN_GRAPH,
    WARNING_UNREACHABLE_NODE,
)
from ..enum import EdgeConditionType, ValidationErrorType
from ..spec.agent_models import AgentSpec
from ..spec.workflow_models import GraphEdge, GraphStructure, is_virtual_node
from .collector import ValidationCollector
from .rules import check_enum, check_range, is_present

logger = logging.getLogger(__name__)

GRAPH_FIELD = f"{FIELD_WORKFLOW}.{FIELD_GRAPH_STRUCTURE}"


def _unique(nodes: List[str]) -> List[str]:
    return list(dict.fromkeys(nodes))


def _adjacency(nodes: List[str], edges: List[GraphEdge]) -> Dict[str, List[str]]:
    """Successors of each node, ignoring edges whose endpoints are not nodes."""
    node_set = set(nodes)
    adjacency: Dict[str, List[str]] = {node: [] for node in _unique(nodes)}
    for edge in edges:
        if edge.from_node in node_set and edge.to_node in node_set:
            adjacency[edge.from_node].append(edge.to_node)
    return adjacency


def find_graph_cycle(nodes: List[str], edges: List[GraphEdge]) -> Optional[List[str]]:
    """
    Find the first cycle among explicit graph edges.

    The search starts from every unvisited node, so cycles in parts of the
    graph that are not reachable from the entry point are found too.

    Returns:
        The cycle as a node path whose first and last entries are equal, or None
    """
    adjacency = _adjacency(nodes, edges)
    visited: Set[str] = set()
    rec_stack: Set[str] = set()
    path: List[str] = []

    def dfs(node_id: str) -> Optional[List[str]]:
        visited.add(node_id)
        rec_stack.add(node_id)
        path.append(node_id)

        for next_id in adjacency[node_id]:
            if next_id not in visited:
                cycle = dfs(next_id)
                if cycle:
                    return cycle
            elif next_id in rec_stack:
                return path[path.index(next_id):] + [next_id]

        rec_stack.remove(node_id)
        path.pop()
        return None

    for node_id in adjacency:
        if node_id not in visited:
            cycle = dfs(node_id)
            if cycle:
                return cycle
    return None


def find_unreachable_nodes(entry_point: str, nodes: List[str], edges: List[GraphEdge]) -> List[str]:
    """Nodes not reachable from the entry point by following edges forward."""
    adjacency = _adjacency(nodes, edges)
    if entry_point not in adjacency:
        return _unique(nodes)

    visited: Set[str] = set()
    stack = [entry_point]
    while stack:
        node_id = stack.pop()
        if node_id in visited:
            continue
        visited.add(node_id)
        stack.extend(adjacency[node_id])

    return [node for node in adjacency if node not in visited]


def _validate_edge(
    edge: GraphEdge,
    index: int,
    node_set: Set[str],
    collector: ValidationCollector,
) -> None:
    prefix = f"{GRAPH_FIELD}.edges.{index}"
    number = index + 1

    for attribute in ("from_node", "to_node"):
        node = getattr(edge, attribute)
        if node not in node_set:
            collector.add_error(
                f"{prefix}.{attribute}",
                ERROR_EDGE_ENDPOINT_NOT_NODE.format(number=number, node=node),
                ValidationErrorType.CUSTOM,
            )

    check_enum(
        edge.condition_type, EdgeConditionType.values(),
        f"{prefix}.condition_type", "edge condition type", collector,
    )
    if edge.condition_type == EDGE_CONDITION_CUSTOM and not is_present(edge.condition):
        collector.add_error(
            f"{prefix}.condition",
            ERROR_CUSTOM_CONDITION_REQUIRED.format(number=number),
            ValidationErrorType.REQUIRED,
        )
    if edge.weight is not None:
        check_range(edge.weight, f"{prefix}.weight", "Edge weight", collector, EDGE_WEIGHT_MIN, EDGE_WEIGHT_MAX)


def validate_graph_structure(
    graph: GraphStructure,
    agents: List[AgentSpec],
    collector: ValidationCollector,
) -> None:
    """
    Validate an explicit workflow graph.

    Args:
        graph: Graph structure with at least one node
        agents: Agents of the template (graph nodes must be agents or virtual nodes)
        collector: Collector receiving the findings
    """
    node_set = set(graph.nodes)
    agent_ids = {agent.id for agent in agents if agent.id}

    # Entry point
    entry_valid = False
    if not is_present(graph.entry_point):
        collector.add_error(
            f"{GRAPH_FIELD}.entry_point", ERROR_ENTRY_POINT_REQUIRED, ValidationErrorType.REQUIRED,
        )
    elif graph.entry_point not in node_set:
        collector.add_error(
            f"{GRAPH_FIELD}.entry_point",
            ERROR_ENTRY_POINT_NOT_NODE.format(entry_point=graph.entry_point),
            ValidationErrorType.CUSTOM,
        )
    else:
        entry_valid = True

    # Nodes
    seen: Set[str] = set()
    for index, node in enumerate(graph.nodes):
        if node in seen:
            collector.add_warning(WARNING_REPEATED_NODE.format(node=node))
            continue
        seen.add(node)
        if node not in agent_ids and not is_virtual_node(node):
            collector.add_error(
                f"{GRAPH_FIELD}.nodes.{index}",
                ERROR_ORPHAN_NODE.format(node=node),
                ValidationErrorType.CUSTOM,
            )

    missing = [agent.id for agent in agents if agent.id and agent.id not in node_set]
    if missing:
        collector.add_warning(WARNING_AGENTS_NOT_IN_GRAPH.format(agent_ids=", ".join(missing)))

    # Edges
    for index, edge in enumerate(graph.edges):
        _validate_edge(edge, index, node_set, collector)

    for index, node in enumerate(graph.exit_points):
        if node not in node_set:
            collector.add_error(
                f"{GRAPH_FIELD}.exit_points.{index}",
                ERROR_EXIT_POINT_NOT_NODE.format(node=node),
                ValidationErrorType.CUSTOM,
            )

    # Topology
    cycle = find_graph_cycle(graph.nodes, graph.edges)
    if cycle:
        logger.debug("Graph cycle found: %s", cycle)
        collector.add_error(
            GRAPH_FIELD,
            ERROR_GRAPH_CYCLE.format(path=" -> ".join(cycle)),
            ValidationErrorType.CUSTOM,
        )

    if entry_valid:
        for node in find_unreachable_nodes(graph.entry_point, graph.nodes, graph.edges):
            collector.add_warning(
                WARNING_UNREACHABLE_NODE.format(node=node, entry_point=graph.entry_point)
            )
