"""
Test suite for loading and saving template documents.
"""

import json

import pytest
import yaml

from template_engine import (
    TemplateLoadError,
    load_template,
    save_template,
    template_from_dict,
    validate_template,
)


@pytest.fixture
def template_document():
    return {
        "name": "Competitor scan",
        "description": "Scans competitor websites and summarises their positioning",
        "agents": [
            {
                "id": "scanner",
                "name": "Scanner",
                "type": "research",
                "system_prompt": "You scan websites for product information.",
                "user_prompt": "Scan the listed competitor websites.",
                "tavily_config": {"search_api": True, "extract_api": True},
            },
        ],
        "workflow": {"mode": "sequential", "sequence": ["scanner"], "timeout_seconds": 900},
        "created_by": "editor",
    }


# ============================================================================
# DICTIONARIES
# ============================================================================

@pytest.mark.unit
class TestFromDict:
    """Test building templates from plain data."""

    def test_valid_document(self, template_document):
        template = template_from_dict(template_document)
        assert template.agents[0].tavily_config.extract_api is True
        assert template.agents[0].timeout_seconds == 300
        assert validate_template(template).is_valid

    def test_unknown_keys_ignored(self, template_document):
        template = template_from_dict(template_document)
        assert "created_by" not in template.model_dump()

    def test_out_of_range_values_accepted(self, template_document):
        """Test bounds are left to the validators."""
        template_document["workflow"]["timeout_seconds"] = 5
        template = template_from_dict(template_document)
        assert template.workflow.timeout_seconds == 5
        assert not validate_template(template).is_valid

    def test_wrong_types_rejected(self, template_document):
        template_document["agents"] = "scanner"
        with pytest.raises(TemplateLoadError) as exc_info:
            template_from_dict(template_document, source="inline")
        assert exc_info.value.source == "inline"

    def test_non_mapping_rejected(self):
        with pytest.raises(TemplateLoadError):
            template_from_dict(["not", "a", "mapping"])


# ============================================================================
# FILES
# ============================================================================

@pytest.mark.unit
class TestFiles:
    """Test reading and writing JSON and YAML files."""

    def test_load_yaml(self, tmp_path, template_document):
        path = tmp_path / "scan.yaml"
        path.write_text(yaml.safe_dump(template_document), encoding="utf-8")
        template = load_template(path)
        assert template.name == "Competitor scan"

    def test_load_json(self, tmp_path, template_document):
        path = tmp_path / "scan.json"
        path.write_text(json.dumps(template_document), encoding="utf-8")
        assert load_template(str(path)).workflow.sequence == ["scanner"]

    def test_save_and_reload(self, tmp_path, valid_sequential_template):
        for name in ("saved.yml", "saved.json"):
            path = save_template(valid_sequential_template, tmp_path / "out" / name)
            assert load_template(path) == valid_sequential_template

    def test_missing_file(self, tmp_path):
        with pytest.raises(TemplateLoadError, match="not found"):
            load_template(tmp_path / "missing.yaml")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "scan.toml"
        path.write_text("name = 'x'", encoding="utf-8")
        with pytest.raises(TemplateLoadError, match="Unsupported"):
            load_template(path)

    def test_unparsable_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TemplateLoadError, match="Cannot parse"):
            load_template(path)

    @pytest.mark.parametrize("name,content", [
        ("latin.json", b'{"name": "\xff\xfe"}'),
        ("latin.yaml", b'name: "\xff\xfe"\n'),
    ])
    def test_invalid_utf8(self, tmp_path, name, content):
        path = tmp_path / name
        path.write_bytes(content)
        with pytest.raises(TemplateLoadError, match="Cannot parse"):
            load_template(path)

    def test_directory_with_template_extension(self, tmp_path):
        path = tmp_path / "folder.json"
        path.mkdir()
        with pytest.raises(TemplateLoadError):
            load_template(path)
