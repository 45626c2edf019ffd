"""
Test suite for wizard step validation.
"""

import pytest

from template_engine import HITLConfig, WizardStep, validate_step
from template_engine.validators import (
    calculate_agents_completion,
    calculate_basic_completion,
    calculate_workflow_completion,
    normalize_step,
)


# ============================================================================
# STEP NAMES
# ============================================================================

@pytest.mark.unit
class TestStepNames:
    """Test step name normalization."""

    @pytest.mark.parametrize("step,expected", [
        ("basic", "basic"),
        ("basic-info", "basic"),
        ("Basic_Info", "basic"),
        (WizardStep.AGENTS, "agents"),
        (" workflow ", "workflow"),
        ("preview", "preview"),
        ("review", None),
    ])
    def test_normalize(self, step, expected):
        assert normalize_step(step) == expected

    def test_unknown_step(self, valid_sequential_template):
        result = validate_step("review", valid_sequential_template)
        assert result.is_valid is False
        assert result.can_proceed is False
        assert result.completion_percentage == 0
        assert result.step == "review"


# ============================================================================
# BASIC STEP
# ============================================================================

@pytest.mark.unit
class TestBasicStep:
    """Test the basic information step."""

    def test_complete(self, valid_sequential_template):
        result = validate_step("basic-info", valid_sequential_template)
        assert result.step == "basic"
        assert result.is_valid and result.can_proceed
        assert result.suggestions == []
        assert result.completion_percentage == 100

    def test_blank_description(self, valid_sequential_template):
        template = valid_sequential_template.model_copy(update={"description": "  "})
        result = validate_step("basic", template)
        assert not result.is_valid
        assert not result.can_proceed
        assert [(e.field, e.type) for e in result.errors] == [("description", "required")]
        assert result.completion_percentage == 50

    def test_short_text_suggestions(self, valid_sequential_template):
        template = valid_sequential_template.model_copy(update={"name": "Research", "description": "Short"})
        result = validate_step("basic", template)
        assert result.is_valid
        assert result.suggestions == [
            "Consider a more descriptive template name",
            "Add more detail to the description for better understanding",
        ]

    def test_thresholds_from_environment(self, monkeypatch, valid_sequential_template):
        monkeypatch.setenv("TEMPLATE_ENGINE_DESCRIPTIVE_NAME_LENGTH", "50")
        result = validate_step("basic", valid_sequential_template)
        assert "Consider a more descriptive template name" in result.suggestions


# ============================================================================
# AGENTS STEP
# ============================================================================

@pytest.mark.unit
class TestAgentsStep:
    """Test the agents step."""

    def test_no_agents(self, template_builder):
        result = validate_step("agents", template_builder().build())
        assert not result.can_proceed
        assert result.completion_percentage == 0
        assert "Add your first agent to begin building the workflow" in result.suggestions

    def test_single_agent_suggestion(self, template_builder, make_agent):
        template = template_builder().add_agent(make_agent("a")).sequential("a").build()
        result = validate_step("agents", template)
        assert result.can_proceed
        assert result.suggestions == ["Consider adding more agents for complex workflows"]

    def test_multi_agent_suggestions(self, valid_sequential_template):
        result = validate_step("agents", valid_sequential_template)
        assert result.is_valid
        assert "Consider enabling HITL for critical decision points" in result.suggestions
        assert "Consider using different agent types for specialized tasks" in result.suggestions

    def test_completion_without_hitl(self, valid_sequential_template):
        """Test seven of eight criteria per agent round half up to 88."""
        assert calculate_agents_completion(valid_sequential_template) == 88

    def test_completion_with_hitl(self, template_builder, make_agent):
        hitl = HITLConfig(enabled=True, intervention_points=["before_execution"])
        template = template_builder().add_agent(make_agent("a", hitl_config=hitl)).build()
        assert calculate_agents_completion(template) == 100


# ============================================================================
# WORKFLOW STEP
# ============================================================================

@pytest.mark.unit
class TestWorkflowStep:
    """Test the workflow step."""

    def test_complete(self, valid_sequential_template):
        result = validate_step("workflow", valid_sequential_template)
        assert result.is_valid and result.can_proceed
        assert result.completion_percentage == 100

    def test_agents_required_first(self, template_builder):
        result = validate_step("workflow", template_builder().build())
        assert not result.can_proceed
        assert [(e.field, e.message) for e in result.errors] == [
            ("workflow", "Configure agents before setting up workflow"),
        ]

    def test_partial_sequence_suggestion(self, template_builder, agents_abc):
        template = template_builder().add_agents(agents_abc).sequential("a", "b").build()
        result = validate_step("workflow", template)
        assert "Consider including all agents in the sequence" in result.suggestions

    def test_all_strategy_with_groups_warns(self, template_builder, agents_abc):
        template = (template_builder()
            .add_agents(agents_abc)
            .parallel(["a"], ["b", "c"])
            .with_max_concurrent_agents(2)
            .build())
        result = validate_step("workflow", template)
        assert result.is_valid
        assert "All completion strategy with multiple groups may cause delays" in result.warnings

    def test_conditional_hints(self, template_builder, make_agent):
        template = template_builder().add_agent(make_agent("a")).conditional().build()
        result = validate_step("workflow", template)
        assert result.is_valid
        assert "Conditional workflows work best with multiple agents" in result.warnings
        assert "Define routing conditions after template creation" in result.suggestions

    def test_long_timeout_warning(self, valid_sequential_template):
        workflow = valid_sequential_template.workflow.model_copy(update={"timeout_seconds": 4000})
        template = valid_sequential_template.model_copy(update={"workflow": workflow})
        result = validate_step("workflow", template)
        assert "Long timeout may impact user experience" in result.warnings

    def test_completion_without_sequence(self, template_builder):
        assert calculate_workflow_completion(template_builder().build()) == 83


# ============================================================================
# PREVIEW STEP
# ============================================================================

@pytest.mark.unit
class TestPreviewStep:
    """Test the preview step."""

    def test_valid_template(self, valid_sequential_template):
        result = validate_step(WizardStep.PREVIEW, valid_sequential_template)
        assert result.can_proceed
        assert result.completion_percentage == 100
        assert result.suggestions == ["Template is ready to save!"]

    def test_invalid_template_capped(self, template_builder):
        template = template_builder().build()
        result = validate_step("preview", template)
        assert not result.can_proceed
        assert calculate_basic_completion(template) == 100
        assert result.completion_percentage == 61
        assert result.suggestions == ["Fix all errors before saving"]

    def test_wire_format(self, valid_sequential_template):
        data = validate_step("preview", valid_sequential_template).to_dict()
        assert data["isValid"] is True
        assert data["canProceed"] is True
        assert data["completionPercentage"] == 100
