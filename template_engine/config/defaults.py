"""
Default Configuration Values

Fallback values for the tunable (non-hard) thresholds of the template engine.
All values can be overridden via environment variables with the
TEMPLATE_ENGINE_ prefix.

The hard bounds of the execution service (timeouts, agent counts, prompt
lengths) are not configurable and live in template_engine.constants.

Version: 1.0.0
"""


class Defaults:
    """Default configuration values for the template engine."""

    # =========================================================================
    # Wizard Suggestions
    # =========================================================================
    DESCRIPTIVE_NAME_LENGTH = 10        # Shorter names get a suggestion
    DETAILED_DESCRIPTION_LENGTH = 50    # Shorter descriptions get a suggestion
    SUGGEST_MORE_AGENTS_BELOW = 2  # Single-agent templates get a suggestion

    # =========================================================================
    # Workflow Warnings
    # =========================================================================
    LONG_TIMEOUT_WARNING_SECONDS = 3600  # 1 hour
    CONDITIONAL_MIN_AGENTS = 2

    # =========================================================================
    # Auto-fix
    # =========================================================================
    AUTO_FIX_MAX_CONCURRENT_AGENTS = 10
    AUTO_FIX_TIMEOUT_MARGIN_SECONDS = 60
