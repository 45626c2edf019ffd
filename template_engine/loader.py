"""
Template Loader

Builds TemplateSpec instances from dictionaries and from JSON or YAML
documents, and writes templates back in either format.

Loading only checks that the document has the right shape and types. Bounds
and cross-field rules are left to the validators.

Usage:
    from template_engine.loader import load_template
    from template_engine.validators import validate_template

    template = load_template("templates/market_research.yaml")
    result = validate_template(template)

Version: 1.0.0
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from .constants import JSON_EXTENSION, YAML_EXTENSION, YML_EXTENSION, UTF_8
from .exceptions import TemplateLoadError
from .spec.template_models import TemplateSpec

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (JSON_EXTENSION, YAML_EXTENSION, YML_EXTENSION)


def template_from_dict(data: Dict[str, Any], source: str = "<dict>") -> TemplateSpec:
    """
    Build a TemplateSpec from a plain dictionary.

    Raises:
        TemplateLoadError: If the data is not a mapping or has wrongly typed fields
    """
    if not isinstance(data, dict):
        raise TemplateLoadError(
            f"Template document must be a mapping, got {type(data).__name__}",
            source=source,
        )
    try:
        return TemplateSpec.model_validate(data)
    except PydanticValidationError as e:
        raise TemplateLoadError(
            f"Template document has invalid field types: {e.error_count()} problem(s)",
            source=source,
            details={"errors": e.errors(include_url=False)},
        ) from e


def load_template(path: Union[str, Path]) -> TemplateSpec:
    """
    Load a template from a JSON or YAML file.

    Args:
        path: File path ending in .json, .yaml or .yml

    Raises:
        TemplateLoadError: If the file is missing, unsupported or unparsable
    """
    file_path = Path(path)
    if file_path.suffix not in SUPPORTED_EXTENSIONS:
        raise TemplateLoadError(
            f"Unsupported template format '{file_path.suffix}'",
            source=str(file_path),
        )
    if not file_path.exists():
        raise TemplateLoadError("Template file not found", source=str(file_path))

    try:
        with open(file_path, "r", encoding=UTF_8) as f:
            if file_path.suffix in [YAML_EXTENSION, YML_EXTENSION]:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise TemplateLoadError(f"Cannot parse template file: {e}", source=str(file_path)) from e

    logger.debug("Loaded template document from %s", file_path)
    return template_from_dict(data, source=str(file_path))


def save_template(template: TemplateSpec, path: Union[str, Path]) -> Path:
    """
    Write a template as JSON or YAML (chosen by file extension).

    Returns:
        The path written to
    """
    file_path = Path(path)
    if file_path.suffix not in SUPPORTED_EXTENSIONS:
        raise TemplateLoadError(
            f"Unsupported template format '{file_path.suffix}'",
            source=str(file_path),
        )

    data = template.model_dump(exclude_none=True)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=UTF_8) as f:
        if file_path.suffix in [YAML_EXTENSION, YML_EXTENSION]:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        else:
            json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("Saved template %r to %s", template.name, file_path)
    return file_path
