"""
Template Engine Constants

Defines string constants, numeric bounds and message templates for the
template validation engine. The bounds mirror the constraints enforced by the
execution service and must stay in sync with it.

Version: 1.0.0
"""

# =============================================================================
# AGENT TYPES
# =============================================================================

AGENT_TYPE_RESEARCH = "research"
AGENT_TYPE_ANALYSIS = "analysis"
AGENT_TYPE_SYNTHESIS = "synthesis"
AGENT_TYPE_VALIDATION = "validation"

# =============================================================================
# LLM MODELS
# =============================================================================

LLM_MODEL_GPT_4 = "gpt-4"
LLM_MODEL_GPT_35_TURBO = "gpt-3.5-turbo"
LLM_MODEL_GPT_4_TURBO = "gpt-4-turbo"

# =============================================================================
# WORKFLOW MODES
# =============================================================================

MODE_SEQUENTIAL = "sequential"
MODE_PARALLEL = "parallel"
MODE_CONDITIONAL = "conditional"
MODE_GRAPH = "graph"

# =============================================================================
# COMPLETION STRATEGIES
# =============================================================================

COMPLETION_ALL = "all"
COMPLETION_MAJORITY = "majority"
COMPLETION_ANY = "any"
COMPLETION_THRESHOLD = "threshold"
COMPLETION_FIRST_SUCCESS = "first_success"

# =============================================================================
# HITL (HUMAN-IN-THE-LOOP)
# =============================================================================

INTERVENTION_TYPE_APPROVAL = "approval"
INTERVENTION_TYPE_INPUT = "input"
INTERVENTION_TYPE_REVIEW = "review"
INTERVENTION_TYPE_MODIFY = "modify"
INTERVENTION_TYPE_DECISION = "decision"

INTERVENTION_POINT_BEFORE_EXECUTION = "before_execution"
INTERVENTION_POINT_AFTER_EXECUTION = "after_execution"
INTERVENTION_POINT_ON_ERROR = "on_error"
INTERVENTION_POINT_CONDITIONAL = "conditional"

# =============================================================================
# SEARCH TOOL (TAVILY)
# =============================================================================

SEARCH_DEPTH_BASIC = "basic"
SEARCH_DEPTH_ADVANCED = "advanced"

TIME_RANGE_DAY = "day"
TIME_RANGE_WEEK = "week"
TIME_RANGE_MONTH = "month"
TIME_RANGE_YEAR = "year"

CONTENT_FORMAT_MARKDOWN = "markdown"
CONTENT_FORMAT_TEXT = "text"

# =============================================================================
# GRAPH EDGE CONDITION TYPES
# =============================================================================

EDGE_CONDITION_ALWAYS = "always"
EDGE_CONDITION_SUCCESS = "success"
EDGE_CONDITION_FAILURE = "failure"
EDGE_CONDITION_CUSTOM = "custom"
EDGE_CONDITION_CONDITIONAL = "conditional"

# =============================================================================
# VIRTUAL GRAPH NODES
# =============================================================================

VIRTUAL_NODE_START = "start"
VIRTUAL_NODE_END = "end"
VIRTUAL_NODE_GRAPH_START = "__start__"
VIRTUAL_NODE_GRAPH_END = "__end__"
VIRTUAL_NODE_IDS = frozenset({
    VIRTUAL_NODE_START,
    VIRTUAL_NODE_END,
    VIRTUAL_NODE_GRAPH_START,
    VIRTUAL_NODE_GRAPH_END,
})
VIRTUAL_NODE_PARALLEL_PREFIX = "parallel_"

# =============================================================================
# VALIDATION ERROR TYPES
# =============================================================================

ERROR_TYPE_REQUIRED = "required"
ERROR_TYPE_MAX_LENGTH = "maxLength"
ERROR_TYPE_MIN_LENGTH = "minLength"
ERROR_TYPE_RANGE = "range"
ERROR_TYPE_ENUM = "enum"
ERROR_TYPE_CUSTOM = "custom"

# =============================================================================
# WIZARD STEPS
# =============================================================================

STEP_BASIC = "basic"
STEP_AGENTS = "agents"
STEP_WORKFLOW = "workflow"
STEP_PREVIEW = "preview"
STEP_ALIASES = {
    "basic-info": STEP_BASIC,
    "basic_info": STEP_BASIC,
}

# =============================================================================
# TEMPLATE BOUNDS
# =============================================================================

TEMPLATE_NAME_MAX_LENGTH = 200
TEMPLATE_DESCRIPTION_MAX_LENGTH = 1000
MIN_AGENTS = 1
MAX_AGENTS = 5

# =============================================================================
# AGENT BOUNDS
# =============================================================================

AGENT_NAME_MAX_LENGTH = 100
SYSTEM_PROMPT_MIN_LENGTH = 10
SYSTEM_PROMPT_MAX_LENGTH = 2000
USER_PROMPT_MIN_LENGTH = 10
USER_PROMPT_MAX_LENGTH = 1000
AGENT_TIMEOUT_MIN_S = 30
AGENT_TIMEOUT_MAX_S = 3600
RETRY_COUNT_MIN = 0
RETRY_COUNT_MAX = 3
PRIORITY_MIN = 1
PRIORITY_MAX = 10

# =============================================================================
# LLM BOUNDS
# =============================================================================

TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 2.0
MAX_TOKENS_MIN = 100
MAX_TOKENS_MAX = 4000

# =============================================================================
# SEARCH TOOL BOUNDS
# =============================================================================

MAX_RESULTS_MIN = 1
MAX_RESULTS_MAX = 50
CRAWL_DEPTH_MIN = 1
CRAWL_DEPTH_MAX = 5
CRAWL_LIMIT_MIN = 1
CRAWL_LIMIT_MAX = 100
MAP_DEPTH_MIN = 1
MAP_DEPTH_MAX = 3
CREDITS_PER_AGENT_MIN = 1
CREDITS_PER_AGENT_MAX = 50
SEARCH_TIMEOUT_MIN_S = 10
SEARCH_TIMEOUT_MAX_S = 120
SEARCH_RETRY_MIN = 0
SEARCH_RETRY_MAX = 3

# =============================================================================
# HITL BOUNDS
# =============================================================================

HITL_TIMEOUT_MIN_S = 30
HITL_TIMEOUT_MAX_S = 3600

# =============================================================================
# WORKFLOW BOUNDS
# =============================================================================

WORKFLOW_TIMEOUT_MIN_S = 60
WORKFLOW_TIMEOUT_MAX_S = 7200
MAX_CONCURRENT_MIN = 1
MAX_CONCURRENT_MAX = 10
EDGE_WEIGHT_MIN = 0.0
EDGE_WEIGHT_MAX = 10.0

# =============================================================================
# FIELD PATHS
# =============================================================================

FIELD_NAME = "name"
FIELD_DESCRIPTION = "description"
FIELD_AGENTS = "agents"
FIELD_WORKFLOW = "workflow"
FIELD_SEQUENCE = "sequence"
FIELD_PARALLEL_GROUPS = "parallel_groups"
FIELD_CONDITIONS = "conditions"
FIELD_GRAPH_STRUCTURE = "graph_structure"

# =============================================================================
# PYDANTIC MODEL CONFIG KEYS
# =============================================================================

POPULATE_BY_NAME = "populate_by_name"
EXTRA = "extra"
FROZEN = "frozen"

# =============================================================================
# FILE FORMATS
# =============================================================================

JSON_EXTENSION = ".json"
YAML_EXTENSION = ".yaml"
YML_EXTENSION = ".yml"
UTF_8 = "utf-8"

# =============================================================================
# ERROR MESSAGES
# =============================================================================

ERROR_REQUIRED = "{label} is required"
ERROR_MIN_LENGTH = "{label} must be at least {min_length} characters"
ERROR_MAX_LENGTH = "{label} must be {max_length} characters or less"
ERROR_RANGE = "{label} must be between {minimum} and {maximum}"
ERROR_ENUM = "Invalid {label}. Must be one of: {allowed}"

ERROR_AGENTS_REQUIRED = "At least one agent is required"
ERROR_TOO_MANY_AGENTS = "Maximum of {max_agents} agents allowed"
ERROR_DUPLICATE_AGENT_NAMES = "Agent names must be unique (duplicates: {names})"
ERROR_SELF_DEPENDENCY = "Agent \"{name}\" cannot depend on itself"
ERROR_UNKNOWN_DEPENDENCY = "Agent \"{name}\" depends on non-existent agent ID: {dependency}"
ERROR_DEPENDENCY_CYCLE = "Circular dependency detected among agents: {path}"
ERROR_NO_ENTRY_AGENT = (
    "Conditional workflow has no entry agent: every agent depends on another agent"
)

ERROR_SEQUENCE_REQUIRED = "Sequential workflow requires at least one agent in sequence"
ERROR_AGENT_NOT_FOUND = "Agent with ID {agent_id} not found"
ERROR_DUPLICATE_IN_SEQUENCE = "Duplicate agents in sequence: {agent_ids}"
ERROR_PARALLEL_GROUPS_REQUIRED = "Parallel workflow requires at least one group"
ERROR_EMPTY_PARALLEL_GROUP = "Parallel group {number} cannot be empty"
ERROR_AGENT_IN_MULTIPLE_GROUPS = "Agent {agent_id} appears in multiple parallel groups"
ERROR_AGENT_REPEATED_IN_GROUP = "Agent {agent_id} is listed more than once in parallel group {number}"
ERROR_GRAPH_STRUCTURE_REQUIRED = "Graph mode requires graph_structure configuration"
ERROR_GRAPH_NODES_REQUIRED = "Graph structure must contain at least one node"

ERROR_MAX_CONCURRENT_EXCEEDS_AGENTS = (
    "Max concurrent agents ({max_concurrent}) cannot exceed total agents ({agent_count})"
)
ERROR_REQUIRED_COMPLETIONS_MISSING = "Threshold strategy requires required_completions to be set"
ERROR_REQUIRED_COMPLETIONS_RANGE = (
    "Required completions ({required}) must be between 1 and total agents ({agent_count})"
)
ERROR_FIRST_SUCCESS_MODE = "First success strategy is only valid with parallel mode (current mode: {mode})"
ERROR_FAILURE_THRESHOLD_RANGE = (
    "Failure threshold ({threshold}) must be between 1 and total agents ({agent_count})"
)
ERROR_AGENT_TIMEOUT_EXCEEDS_WORKFLOW = (
    "Agent \"{name}\" timeout ({agent_timeout}s) must be less than workflow timeout ({workflow_timeout}s)"
)
ERROR_HITL_TIMEOUT_EXCEEDS_WORKFLOW = (
    "Agent \"{name}\" HITL timeout ({hitl_timeout}s) must be less than workflow timeout ({workflow_timeout}s)"
)

ERROR_ENTRY_POINT_REQUIRED = "Graph structure requires an entry point"
ERROR_ENTRY_POINT_NOT_NODE = "Entry point '{entry_point}' is not a node of the graph"
ERROR_ORPHAN_NODE = "Node '{node}' does not correspond to any agent"
ERROR_EDGE_ENDPOINT_NOT_NODE = "Edge {number} references unknown node '{node}'"
ERROR_CUSTOM_CONDITION_REQUIRED = "Edge {number} uses a custom condition but has no condition text"
ERROR_EXIT_POINT_NOT_NODE = "Exit point '{node}' is not a node of the graph"
ERROR_GRAPH_CYCLE = "Cycle detected in workflow graph: {path}"

ERROR_STEP_AGENTS_FIRST = "Configure agents before setting up workflow"

# =============================================================================
# WARNING MESSAGES
# =============================================================================

WARNING_REPEATED_DEPENDENCY = "Agent \"{name}\" lists dependency {dependency} more than once"
WARNING_NO_SEARCH_API = (
    "Agent \"{name}\": no Tavily APIs enabled - agent will not have search capabilities"
)
WARNING_BETA_SEARCH_API = (
    "Agent \"{name}\": using BETA Tavily APIs (Crawl/Map) - may have limited availability"
)
WARNING_NO_INTERVENTION_POINTS = "Agent \"{name}\": HITL enabled but no intervention points selected"
WARNING_CONDITIONAL_POINT_TYPE = (
    "Agent \"{name}\": conditional intervention point works best with decision intervention type"
)
WARNING_UNREACHABLE_AGENT = "Agent \"{name}\" is never reachable: one of its dependencies can never complete"

WARNING_MODE_IGNORES_FIELD = "{mode} mode ignores {field} configuration"
WARNING_AGENTS_NOT_IN_SEQUENCE = "Agents not included in sequence: {agent_ids}"
WARNING_AGENTS_NOT_IN_GROUPS = "Agents not assigned to any parallel group: {agent_ids}"
WARNING_NO_CONDITIONS = "Conditional workflow has no routing conditions defined"

WARNING_SEQUENTIAL_TIMEOUT_SUM = (
    "Sum of sequenced agent timeouts ({total}s) exceeds workflow timeout ({workflow_timeout}s)"
)
WARNING_HITL_FIRST_SUCCESS = (
    "Agent \"{name}\" HITL may never trigger with \"first_success\" strategy"
)
WARNING_MULTIPLE_HITL_ANY = (
    "Multiple HITL agents with \"any\" completion strategy may cause conflicts"
)
WARNING_HITL_AFTER_EXECUTION_FIRST_SUCCESS = (
    "Agent \"{name}\" after_execution HITL incompatible with first_success strategy"
)

WARNING_REPEATED_NODE = "Node '{node}' is listed more than once in the graph"
WARNING_AGENTS_NOT_IN_GRAPH = "Agents not present in graph: {agent_ids}"
WARNING_UNREACHABLE_NODE = "Node '{node}' is not reachable from entry point '{entry_point}'"

WARNING_ALL_WITH_GROUPS = "All completion strategy with multiple groups may cause delays"
WARNING_LONG_TIMEOUT = "Long timeout may impact user experience"
WARNING_CONDITIONAL_FEW_AGENTS = "Conditional workflows work best with multiple agents"

# =============================================================================
# SUGGESTIONS
# =============================================================================

SUGGESTION_DESCRIPTIVE_NAME = "Consider a more descriptive template name"
SUGGESTION_DETAILED_DESCRIPTION = "Add more detail to the description for better understanding"
SUGGESTION_FIRST_AGENT = "Add your first agent to begin building the workflow"
SUGGESTION_MORE_AGENTS = "Consider adding more agents for complex workflows"
SUGGESTION_ENABLE_HITL = "Consider enabling HITL for critical decision points"
SUGGESTION_DIVERSE_TYPES = "Consider using different agent types for specialized tasks"
SUGGESTION_FULL_SEQUENCE = "Consider including all agents in the sequence"
SUGGESTION_FULL_GROUPS = "Consider including all agents in parallel groups"
SUGGESTION_DEFINE_CONDITIONS = "Define routing conditions after template creation"
SUGGESTION_READY = "Template is ready to save!"
SUGGESTION_FIX_ERRORS = "Fix all errors before saving"

# =============================================================================
# AUTO-FIX REASONS
# =============================================================================

FIX_MAX_CONCURRENT = "Cannot exceed total agents ({agent_count})"
FIX_REQUIRED_COMPLETIONS = "Threshold strategy needs between 1 and {agent_count} completions"
FIX_FAILURE_THRESHOLD = "Cannot exceed total agents ({agent_count})"
FIX_FIRST_SUCCESS = "First success strategy requires parallel mode"
FIX_SEQUENCE = "Sequential workflow needs an execution order"
FIX_AGENT_TIMEOUT = "Must be less than workflow timeout ({workflow_timeout}s)"

# =============================================================================
# SUMMARIES
# =============================================================================

SUMMARY_VALID = "Template is valid and ready to save"
SUMMARY_NO_WORKFLOW = "No workflow configured"
