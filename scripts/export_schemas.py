#!/usr/bin/env python3
"""
Export Template Models to JSON Schema.

This script exports the template, workflow and validation result models to
JSON Schema format, together with the enum values and numeric bounds the
validators enforce, so the template editor can build its forms from them.

Usage:
    python scripts/export_schemas.py [output_file]

Output:
    generated/template_schemas.json (default)
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Type

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import BaseModel

from template_engine import constants
from template_engine.spec import (
    # Agent models
    LLMConfig,
    TavilyConfig,
    HITLConfig,
    AgentSpec,
    # Workflow models
    GraphEdge,
    GraphStructure,
    WorkflowConfig,
    TemplateSpec,
    # Results
    ValidationError,
    ValidationResult,
    StepValidationResult,
    AutoFix,
)
from template_engine.enum import (
    AgentType,
    LLMModel,
    WorkflowMode,
    CompletionStrategy,
    InterventionType,
    InterventionPoint,
    SearchDepth,
    TimeRange,
    ContentFormat,
    EdgeConditionType,
    ValidationErrorType,
    WizardStep,
)


# Models to export (order matters for dependencies)
TEMPLATE_MODELS: List[Type[BaseModel]] = [
    LLMConfig,
    TavilyConfig,
    HITLConfig,
    AgentSpec,
    GraphEdge,
    GraphStructure,
    WorkflowConfig,
    TemplateSpec,
]

RESULT_MODELS: List[Type[BaseModel]] = [
    ValidationError,
    ValidationResult,
    StepValidationResult,
    AutoFix,
]

ENUMS = [
    AgentType,
    LLMModel,
    WorkflowMode,
    CompletionStrategy,
    InterventionType,
    InterventionPoint,
    SearchDepth,
    TimeRange,
    ContentFormat,
    EdgeConditionType,
    ValidationErrorType,
    WizardStep,
]

# Constant name suffixes that describe numeric bounds
BOUND_SUFFIXES = ("_MIN", "_MAX", "_MIN_S", "_MAX_S", "_MIN_LENGTH", "_MAX_LENGTH")


def get_model_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """
    Get JSON schema for a Pydantic model.
    """
    schema = model.model_json_schema(mode='serialization', by_alias=True)

    # Add model name
    schema["_model_name"] = model.__name__

    # Add model docstring as description if not present
    if not schema.get("description") and model.__doc__:
        schema["description"] = model.__doc__.strip()

    return schema


def collect_bounds() -> Dict[str, Any]:
    """Numeric bounds enforced by the validators, keyed by constant name."""
    bounds = {}
    for name in dir(constants):
        if name.isupper() and name.endswith(BOUND_SUFFIXES):
            value = getattr(constants, name)
            if isinstance(value, (int, float)):
                bounds[name] = value
    bounds["MIN_AGENTS"] = constants.MIN_AGENTS
    bounds["MAX_AGENTS"] = constants.MAX_AGENTS
    return bounds


def export_schemas(output_path: Path) -> None:
    """
    Export all schemas to a single JSON file.
    """
    output = {
        "version": "1.0.0",
        "generated": True,
        "enums": {enum.__name__: enum.values() for enum in ENUMS},
        "bounds": collect_bounds(),
        "schemas": {
            "templates": {},
            "results": {},
        },
        "definitions": {},
    }

    for model in TEMPLATE_MODELS:
        output["schemas"]["templates"][model.__name__] = get_model_schema(model)
        print(f"  Exported: {model.__name__}")

    for model in RESULT_MODELS:
        output["schemas"]["results"][model.__name__] = get_model_schema(model)
        print(f"  Exported: {model.__name__}")

    # Collect shared definitions ($defs)
    all_defs = {}
    for category in output["schemas"].values():
        for schema in category.values():
            if "$defs" in schema:
                all_defs.update(schema["$defs"])
                del schema["$defs"]

    output["definitions"] = all_defs

    # Write output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)

    print(f"\nExported schemas to: {output_path}")
    print(f"  Templates: {len(TEMPLATE_MODELS)}")
    print(f"  Results: {len(RESULT_MODELS)}")
    print(f"  Enums: {len(ENUMS)}")


def main():
    """Main entry point."""
    if len(sys.argv) > 1:
        output_file = Path(sys.argv[1])
    else:
        output_file = PROJECT_ROOT / "generated" / "template_schemas.json"

    print("Exporting template schemas...")
    print("-" * 50)

    export_schemas(output_file)

    print("-" * 50)
    print("Done!")


if __name__ == "__main__":
    main()
