"""
Test suite for agent dependency analysis.

Tests cycle detection over depends_on and conditional-mode reachability.
"""

import pytest

from template_engine.validators import (
    ValidationCollector,
    check_conditional_reachability,
    find_dependency_cycle,
    find_entry_agents,
    find_unreachable_agents,
    validate_agents,
)


# ============================================================================
# CYCLE DETECTION
# ============================================================================

@pytest.mark.unit
class TestDependencyCycle:
    """Test find_dependency_cycle."""

    def test_acyclic(self, make_agent):
        agents = [make_agent("a"), make_agent("b", depends_on=["a"]), make_agent("c", depends_on=["a", "b"])]
        assert find_dependency_cycle(agents) is None

    def test_two_agent_cycle_path(self, make_agent):
        agents = [make_agent("a", depends_on=["b"]), make_agent("b", depends_on=["a"])]
        cycle = find_dependency_cycle(agents)
        assert cycle[0] == cycle[-1]
        assert set(cycle) == {"a", "b"}

    def test_self_edges_and_unknown_ids_skipped(self, make_agent):
        agents = [make_agent("a", depends_on=["a", "ghost"])]
        assert find_dependency_cycle(agents) is None

    @pytest.mark.parametrize("order", [("a", "b"), ("b", "a")])
    def test_single_cycle_error_regardless_of_order(self, make_agent, order):
        """Test A<->B yields exactly one agents-scoped error for any list order."""
        by_id = {
            "a": make_agent("a", depends_on=["b"]),
            "b": make_agent("b", depends_on=["a"]),
        }
        collector = ValidationCollector()
        validate_agents([by_id[agent_id] for agent_id in order], collector)
        cycle_errors = [e for e in collector.errors if e.field == "agents"]
        assert len(cycle_errors) == 1
        assert cycle_errors[0].type == "custom"

    def test_two_disjoint_cycles_report_once(self, make_agent):
        agents = [
            make_agent("a", depends_on=["b"]),
            make_agent("b", depends_on=["a"]),
            make_agent("c", depends_on=["d"]),
            make_agent("d", depends_on=["c"]),
        ]
        collector = ValidationCollector()
        validate_agents(agents, collector)
        assert len([e for e in collector.errors if e.field == "agents"]) == 1


# ============================================================================
# REACHABILITY
# ============================================================================

@pytest.mark.unit
class TestReachability:
    """Test entry agents and unreachable agents in conditional mode."""

    def test_entry_agents(self, make_agent):
        agents = [make_agent("a"), make_agent("b", depends_on=["a"])]
        assert [agent.id for agent in find_entry_agents(agents)] == ["a"]

    def test_chain_is_reachable(self, make_agent):
        agents = [make_agent("a"), make_agent("b", depends_on=["a"]), make_agent("c", depends_on=["b"])]
        assert find_unreachable_agents(agents) == []

    def test_agent_behind_cycle_unreachable(self, make_agent):
        agents = [
            make_agent("a"),
            make_agent("b", depends_on=["c"]),
            make_agent("c", depends_on=["b"]),
            make_agent("d", depends_on=["a", "b"]),
        ]
        assert [agent.id for agent in find_unreachable_agents(agents)] == ["b", "c", "d"]

    def test_unreachable_agents_warn(self, make_agent):
        agents = [make_agent("a"), make_agent("b", depends_on=["ghost"])]
        collector = ValidationCollector()
        check_conditional_reachability(agents, collector)
        assert collector.errors == []
        assert len(collector.warnings) == 1
        assert "Agent b" in collector.warnings[0]

    def test_no_entry_agent_is_workflow_error(self, make_agent):
        agents = [make_agent("a", depends_on=["b"]), make_agent("b", depends_on=["a"])]
        collector = ValidationCollector()
        check_conditional_reachability(agents, collector)
        assert [e.field for e in collector.errors] == ["workflow"]
        assert collector.warnings == []
