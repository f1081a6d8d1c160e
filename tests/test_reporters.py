"""
Tests for the table, JSON and YAML report generators.
"""

import json

import pytest
import yaml

from genkit_migrate.core.exceptions import UnsupportedFormatError
from genkit_migrate.models.project import Project
from genkit_migrate.reporters import (
    JSONReportGenerator,
    TableReportGenerator,
    YAMLReportGenerator,
    get_reporter,
)


class TestGetReporter:
    """Test cases for reporter lookup."""

    @pytest.mark.parametrize("format_name,expected", [
        ("table", TableReportGenerator),
        ("json", JSONReportGenerator),
        ("yaml", YAMLReportGenerator),
        ("JSON", JSONReportGenerator),
    ])
    def test_known_formats(self, format_name, expected):
        assert isinstance(get_reporter(format_name), expected)

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            get_reporter("xml")

        assert exc_info.value.format == "xml"
        assert str(exc_info.value) == "Unsupported output format: xml"


class TestJSONReportGenerator:
    """Test cases for JSON output."""

    def test_render_project(self, analyzed_project):
        data = json.loads(JSONReportGenerator().render_project(analyzed_project))

        assert data["path"] == analyzed_project.path
        assert list(data["files"]) == ["main.py"]
        assert data["flows"][0]["name"] == "summarize"
        assert data["flows"][0]["input_type"] == "Article"
        assert data["models"][0] == {
            "name": "googleai/gemini-1.5-pro",
            "provider": "gcp",
            "position": {
                "filename": analyzed_project.models[0].position.filename,
                "line": 13,
                "column": 30,
            },
        }

    def test_render_migration(self, aws_migration):
        data = json.loads(JSONReportGenerator().render_migration(aws_migration))

        assert data["target_provider"] == "aws"
        assert [change["type"] for change in data["changes"]] == [
            "dependency", "import", "model", "config",
        ]
        assert data["new_files"] == sorted(aws_migration.new_files)
        assert "old_value" not in data["changes"][0]
        assert data["changes"][2]["new_value"] == "anthropic.claude-3-sonnet-20240229-v1:0"

    def test_save(self, analyzed_project, tmp_path):
        reporter = JSONReportGenerator()
        path = reporter.save(reporter.render_project(analyzed_project), tmp_path / "out" / "report.json")

        assert path.exists()
        assert json.loads(path.read_text())["path"] == analyzed_project.path


class TestYAMLReportGenerator:
    """Test cases for YAML output."""

    def test_render_project(self, analyzed_project):
        data = yaml.safe_load(YAMLReportGenerator().render_project(analyzed_project))

        assert data == analyzed_project.to_dict()

    def test_render_migration_keeps_key_order(self, aws_migration):
        content = YAMLReportGenerator().render_migration(aws_migration)

        assert content.index("project:") < content.index("changes:") < content.index("commands:")


class TestTableReportGenerator:
    """Test cases for terminal table output."""

    def test_render_project(self, analyzed_project):
        output = TableReportGenerator().render_project(analyzed_project)

        assert "Project Analysis Results" in output
        assert "Genkit Flows" in output
        assert "summarize" in output
        assert "main.py:16" in output
        assert "googleai/gemini-1.5-pro" in output
        assert "Key Dependencies" in output
        assert "firebase-admin" in output
        assert "\x1b[" not in output

    def test_render_project_without_constructs(self, tmp_path):
        output = TableReportGenerator().render_project(Project(path=str(tmp_path)))

        assert "Project Analysis Results" in output
        assert "Genkit Flows" not in output
        assert "Key Dependencies" not in output

    def test_render_migration(self, aws_migration):
        output = TableReportGenerator().render_migration(aws_migration)

        assert "Migration Plan" in output
        assert "Updated dependencies for aws" in output
        assert "New files to be created:" in output
        assert "terraform/main.tf" in output
        assert "Commands to run:" in output
        assert "pip install -e ." in output
