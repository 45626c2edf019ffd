"""
Template Engine Default Values

Defaults used when a template, agent or workflow field is not provided.
They match the defaults of the execution service.

Version: 1.0.0
"""

from .constants import (
    AGENT_TYPE_RESEARCH,
    LLM_MODEL_GPT_4,
    MODE_SEQUENTIAL,
    COMPLETION_ALL,
    INTERVENTION_TYPE_APPROVAL,
    SEARCH_DEPTH_BASIC,
    CONTENT_FORMAT_MARKDOWN,
    EDGE_CONDITION_ALWAYS,
)

# =============================================================================
# AGENT DEFAULTS
# =============================================================================

DEFAULT_AGENT_TYPE = AGENT_TYPE_RESEARCH
DEFAULT_AGENT_TIMEOUT_S = 300  # 5 minutes
DEFAULT_RETRY_COUNT = 1
DEFAULT_PRIORITY = 5

# =============================================================================
# LLM DEFAULTS
# =============================================================================

DEFAULT_LLM_MODEL = LLM_MODEL_GPT_4
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000

# =============================================================================
# SEARCH TOOL DEFAULTS
# =============================================================================

DEFAULT_SEARCH_API = False
DEFAULT_EXTRACT_API = False
DEFAULT_CRAWL_API = False
DEFAULT_MAP_API = False
DEFAULT_SEARCH_DEPTH = SEARCH_DEPTH_BASIC
DEFAULT_MAX_RESULTS = 3
DEFAULT_INCLUDE_ANSWER = True
DEFAULT_INCLUDE_IMAGES = True
DEFAULT_INCLUDE_RAW_CONTENT = False
DEFAULT_EXTRACT_DEPTH = SEARCH_DEPTH_BASIC
DEFAULT_CONTENT_FORMAT = CONTENT_FORMAT_MARKDOWN
DEFAULT_MAX_CRAWL_DEPTH = 3
DEFAULT_CRAWL_LIMIT = 50
DEFAULT_MAX_MAP_DEPTH = 2
DEFAULT_ESTIMATED_CREDITS = 0
DEFAULT_MAX_CREDITS_PER_AGENT = 10
DEFAULT_SEARCH_TIMEOUT_S = 30
DEFAULT_SEARCH_RETRY_ATTEMPTS = 2
DEFAULT_FALLBACK_ENABLED = True
DEFAULT_CONTINUE_WITHOUT_SEARCH = True

# =============================================================================
# HITL DEFAULTS
# =============================================================================

DEFAULT_HITL_ENABLED = False
DEFAULT_INTERVENTION_TYPE = INTERVENTION_TYPE_APPROVAL
DEFAULT_HITL_TIMEOUT_S = 300
DEFAULT_AUTO_APPROVE_AFTER_TIMEOUT = False

# =============================================================================
# WORKFLOW DEFAULTS
# =============================================================================

DEFAULT_WORKFLOW_MODE = MODE_SEQUENTIAL
DEFAULT_WORKFLOW_TIMEOUT_S = 1800  # 30 minutes
DEFAULT_MAX_CONCURRENT_AGENTS = 1
DEFAULT_COMPLETION_STRATEGY = COMPLETION_ALL
DEFAULT_CONTINUE_ON_FAILURE = False
DEFAULT_RETRY_FAILED_AGENTS = True

# =============================================================================
# GRAPH DEFAULTS
# =============================================================================

DEFAULT_EDGE_CONDITION_TYPE = EDGE_CONDITION_ALWAYS
