"""
Test suite for the rule primitives.

Each check appends at most one error and reports whether the value passed.
"""

import pytest

from template_engine.validators import (
    ValidationCollector,
    check_enum,
    check_length,
    check_range,
    check_required,
    is_present,
)


@pytest.fixture
def collector():
    return ValidationCollector()


# ============================================================================
# PRESENCE
# ============================================================================

@pytest.mark.unit
class TestPresence:
    """Test what counts as a present value."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_missing_values(self, value):
        assert not is_present(value)

    @pytest.mark.parametrize("value", ["x", 0, False, ["a"], {"k": 1}])
    def test_present_values(self, value):
        assert is_present(value)

    def test_required_error(self, collector):
        """Test blank text yields one required error."""
        assert check_required("  ", "name", "Template name", collector) is False
        assert len(collector.errors) == 1
        assert collector.errors[0].type == "required"
        assert collector.errors[0].message == "Template name is required"


# ============================================================================
# LENGTH
# ============================================================================

@pytest.mark.unit
class TestLength:
    """Test text length checks."""

    def test_blank_reports_required_only(self, collector):
        check_length("", "agents.0.system_prompt", "System prompt", collector, min_length=10, max_length=20)
        assert [e.type for e in collector.errors] == ["required"]

    def test_too_short(self, collector):
        assert not check_length("short", "f", "System prompt", collector, min_length=10)
        assert collector.errors[0].type == "minLength"
        assert collector.errors[0].message == "System prompt must be at least 10 characters"

    def test_too_long(self, collector):
        assert not check_length("x" * 201, "name", "Template name", collector, max_length=200)
        assert collector.errors[0].type == "maxLength"
        assert collector.errors[0].message == "Template name must be 200 characters or less"

    def test_boundaries_pass(self, collector):
        assert check_length("x" * 10, "f", "Prompt", collector, min_length=10, max_length=10)
        assert collector.errors == []


# ============================================================================
# RANGE
# ============================================================================

@pytest.mark.unit
class TestRange:
    """Test inclusive numeric range checks."""

    def test_bounds_are_inclusive(self, collector):
        assert check_range(30, "t", "Agent timeout", collector, 30, 3600)
        assert check_range(3600, "t", "Agent timeout", collector, 30, 3600)
        assert collector.errors == []

    def test_out_of_range_with_unit(self, collector):
        assert not check_range(29, "t", "Agent timeout", collector, 30, 3600, "seconds")
        error = collector.errors[0]
        assert error.type == "range"
        assert error.message == "Agent timeout must be between 30 and 3600 seconds"

    def test_float_bounds_message(self, collector):
        check_range(2.5, "temperature", "Temperature", collector, 0.0, 2.0)
        assert collector.errors[0].message == "Temperature must be between 0.0 and 2.0"

    def test_none_is_required(self, collector):
        assert not check_range(None, "t", "Retry count", collector, 0, 3)
        assert collector.errors[0].type == "required"


# ============================================================================
# ENUM
# ============================================================================

@pytest.mark.unit
class TestEnum:
    """Test closed-set membership checks."""

    def test_member_passes(self, collector):
        assert check_enum("gpt-4", ["gpt-4", "gpt-4-turbo"], "m", "LLM model", collector)

    def test_unknown_value(self, collector):
        assert not check_enum("claude", ["gpt-4", "gpt-4-turbo"], "m", "LLM model", collector)
        error = collector.errors[0]
        assert error.type == "enum"
        assert error.message == "Invalid LLM model. Must be one of: gpt-4, gpt-4-turbo"

    def test_collector_result_is_frozen(self, collector):
        check_enum("x", ["y"], "f", "value", collector)
        result = collector.to_result()
        assert result.is_valid is False
        collector.add_warning("later")
        assert result.warnings == []
