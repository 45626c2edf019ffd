"""
Template Engine Tests Package.

Tests for the template_engine module including:
- Rule primitives and agent validation
- Dependency and explicit graph cycle detection
- Workflow mode, completion, timeout and HITL rules
- Wizard step validation and auto-fix suggestions
- Builders, loader and settings
"""
