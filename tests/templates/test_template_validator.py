"""
Test suite for full-template validation and the execution gate.

Covers:
- Result shape and wire format
- Determinism and purity of validation
- Error aggregation across rule groups
- Field filtering and summaries
"""

import pytest

from template_engine import (
    TemplateNotExecutableError,
    TemplateSpec,
    WorkflowConfig,
    ensure_executable,
    get_validation_summary,
    get_workflow_summary,
    is_template_executable,
    validate_field,
    validate_template,
)
from template_engine.spec import GraphEdge, GraphStructure, ValidationError, ValidationResult


# ============================================================================
# VALID TEMPLATES
# ============================================================================

@pytest.mark.unit
class TestValidTemplate:
    """Test templates that pass every rule."""

    def test_sequential_template_is_valid(self, valid_sequential_template):
        result = validate_template(valid_sequential_template)
        assert result.errors == []
        assert result.is_valid is True

    def test_parallel_template_is_valid(self, template_builder, agents_abc):
        template = (template_builder()
            .add_agents(agents_abc)
            .parallel(["a", "b"], ["c"])
            .with_max_concurrent_agents(2)
            .with_completion_strategy("majority")
            .build())
        assert validate_template(template).is_valid

    def test_graph_template_is_valid(self, template_builder, agents_abc):
        template = (template_builder()
            .add_agents(agents_abc)
            .as_graph("a")
            .connect("a", "b")
            .connect("b", "c")
            .add_exit_point("c")
            .build())
        result = validate_template(template)
        assert result.errors == []

    def test_is_executable(self, valid_sequential_template):
        assert is_template_executable(valid_sequential_template)

    def test_ensure_executable_returns_result(self, valid_sequential_template):
        result = ensure_executable(valid_sequential_template)
        assert result.is_valid


# ============================================================================
# RESULT PROPERTIES
# ============================================================================

@pytest.mark.unit
class TestResultProperties:
    """Test invariants that hold for every validation result."""

    def test_validity_matches_errors(self, valid_sequential_template):
        broken = valid_sequential_template.model_copy(update={"name": ""})
        for template in (valid_sequential_template, broken):
            result = validate_template(template)
            assert result.is_valid == (len(result.errors) == 0)

    def test_validation_is_deterministic(self, valid_sequential_template):
        broken = valid_sequential_template.model_copy(update={"name": "", "description": ""})
        assert validate_template(broken) == validate_template(broken)

    def test_validation_does_not_modify_template(self, valid_sequential_template):
        before = valid_sequential_template.model_dump()
        validate_template(valid_sequential_template)
        assert valid_sequential_template.model_dump() == before

    def test_adding_broken_agent_never_removes_errors(self, valid_sequential_template, make_agent):
        """Test errors grow monotonically when an invalid agent is added."""
        baseline = validate_template(valid_sequential_template)
        broken_agent = make_agent("d", system_prompt="short")
        template = valid_sequential_template.model_copy(
            update={"agents": valid_sequential_template.agents + [broken_agent]}
        )
        result = validate_template(template)
        for error in baseline.errors:
            assert error in result.errors
        assert len(result.errors) > len(baseline.errors)

    def test_result_is_immutable(self, valid_sequential_template):
        result = validate_template(valid_sequential_template)
        with pytest.raises(Exception):
            result.is_valid = False

    def test_wire_format_uses_camel_case(self, valid_sequential_template):
        data = validate_template(valid_sequential_template.model_copy(update={"name": ""})).to_dict()
        assert data["isValid"] is False
        assert data["errors"][0] == {"field": "name", "message": "Template name is required", "type": "required"}
        assert "warnings" in data


# ============================================================================
# AGGREGATION
# ============================================================================

@pytest.mark.unit
class TestAggregation:
    """Test findings from different rule groups are combined."""

    def test_empty_template(self):
        result = validate_template(TemplateSpec())
        fields = [error.field for error in result.errors]
        assert "name" in fields
        assert "description" in fields
        assert fields.count("agents") == 1
        assert not result.is_valid

    def test_zero_agents_single_agent_error(self, template_builder):
        template = template_builder().build()
        result = validate_template(template)
        assert [(e.field, e.type) for e in result.errors] == [("agents", "required")]

    def test_zero_agents_not_executable(self, template_builder):
        template = template_builder().build()
        assert not is_template_executable(template)
        with pytest.raises(TemplateNotExecutableError) as exc_info:
            ensure_executable(template)
        assert exc_info.value.validation_errors[0]["field"] == "agents"

    def test_name_length_limits(self, valid_sequential_template):
        result = validate_template(valid_sequential_template.model_copy(update={"name": "x" * 201}))
        assert [(e.field, e.type) for e in result.errors] == [("name", "maxLength")]
        result = validate_template(valid_sequential_template.model_copy(update={"description": "x" * 1001}))
        assert [(e.field, e.type) for e in result.errors] == [("description", "maxLength")]

    def test_missing_workflow(self, valid_sequential_template):
        result = validate_template(valid_sequential_template.model_copy(update={"workflow": None}))
        assert [e.field for e in result.errors] == ["workflow"]

    def test_threshold_error_from_cross_rules(self, valid_sequential_template):
        workflow = valid_sequential_template.workflow.model_copy(
            update={"completion_strategy": "threshold", "required_completions": 5}
        )
        result = validate_template(valid_sequential_template.model_copy(update={"workflow": workflow}))
        assert [e.field for e in result.errors] == ["workflow.required_completions"]

    def test_graph_cycle_error(self, template_builder, agents_abc):
        template = (template_builder()
            .add_agents(agents_abc[:2])
            .as_graph("a")
            .connect("a", "b")
            .connect("b", "a")
            .build())
        result = validate_template(template)
        assert [e.field for e in result.errors] == ["workflow.graph_structure"]

    def test_warnings_do_not_affect_validity(self, valid_sequential_template):
        workflow = valid_sequential_template.workflow.model_copy(update={"parallel_groups": [["a"]]})
        result = validate_template(valid_sequential_template.model_copy(update={"workflow": workflow}))
        assert result.is_valid
        assert "Sequential mode ignores parallel_groups configuration" in result.warnings


# ============================================================================
# FIELD FILTERING AND SUMMARIES
# ============================================================================

@pytest.mark.unit
class TestFieldAndSummary:
    """Test per-field lookups and human-readable summaries."""

    def test_validate_field_prefix(self, valid_sequential_template):
        agents = list(valid_sequential_template.agents)
        agents[1] = agents[1].model_copy(update={"system_prompt": "short", "retry_count": 9})
        template = valid_sequential_template.model_copy(update={"agents": agents, "name": ""})

        agent_errors = validate_field(template, "agents.1")
        assert {error.field for error in agent_errors} == {"agents.1.system_prompt", "agents.1.retry_count"}
        assert [error.field for error in validate_field(template, "name")] == ["name"]
        assert validate_field(template, "agents.10") == []

    def test_summary(self):
        assert get_validation_summary(ValidationResult(is_valid=True)) == "Template is valid and ready to save"
        errors = [ValidationError(field="name", message="Template name is required", type="required")]
        assert get_validation_summary(ValidationResult(is_valid=False, errors=errors)) == "1 error"
        result = ValidationResult(is_valid=False, errors=errors * 2, warnings=["a", "b"])
        assert get_validation_summary(result) == "2 errors, 2 warnings"

    def test_workflow_summary(self, agents_abc):
        assert get_workflow_summary(None, agents_abc) == "No workflow configured"
        sequential = WorkflowConfig(mode="sequential", sequence=["a", "b"])
        assert get_workflow_summary(sequential, agents_abc) == "Sequential execution of 2 agents"
        parallel = WorkflowConfig(mode="parallel", parallel_groups=[["a", "b"], ["c"]])
        assert get_workflow_summary(parallel, agents_abc) == "Parallel execution: 2 groups, 3 agents total"
        conditional = WorkflowConfig(mode="conditional")
        assert get_workflow_summary(conditional, agents_abc) == "Conditional routing with 3 available agents"
        graph = WorkflowConfig(
            mode="graph",
            graph_structure=GraphStructure(nodes=["a", "b"], edges=[GraphEdge(from_node="a", to_node="b")]),
        )
        assert get_workflow_summary(graph, agents_abc) == "Graph execution: 2 nodes, 1 edges"
