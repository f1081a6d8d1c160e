"""
Tests for the Genkit construct extractor.

Covers provider classification, call-shape matching, import extraction
and parse error reporting.
"""

import ast
import textwrap

import pytest

from genkit_migrate.analyzer.extractor import (
    ConstructExtractor,
    ConstructVisitor,
    classify_provider,
)
from genkit_migrate.core.exceptions import ProjectIOError, SourceParseError
from genkit_migrate.models.project import Position


class TestClassifyProvider:
    """Test cases for model provider classification."""

    @pytest.mark.parametrize("model_name,expected", [
        ("googleai/gemini-1.5-pro", "gcp"),
        ("vertexai/gemini-pro", "gcp"),
        ("openai/gpt-4o", "openai"),
        ("gpt-4-turbo", "openai"),
        ("anthropic/claude-3-opus", "anthropic"),
        ("claude-3-haiku", "anthropic"),
        ("ollama/llama3", "ollama"),
        ("bedrock/titan", "aws"),
        ("amazon.nova-lite-v1:0", "aws"),
        ("mistral-large", "unknown"),
        ("", "unknown"),
    ])
    def test_classification(self, model_name, expected):
        assert classify_provider(model_name) == expected

    def test_first_matching_rule_wins(self):
        """A Bedrock identifier for a Claude model is claimed by the anthropic rule."""
        assert classify_provider("anthropic.claude-3-sonnet-20240229-v1:0") == "anthropic"


class TestConstructVisitor:
    """Test cases for call-shape matching."""

    def _visit(self, source: str) -> ConstructVisitor:
        visitor = ConstructVisitor("app.py")
        visitor.visit(ast.parse(textwrap.dedent(source)))
        return visitor

    def test_flow_with_literal_name(self):
        visitor = self._visit('''
            flow = ai.define_flow("greet", handler)
        ''')

        assert len(visitor.flows) == 1
        flow = visitor.flows[0]
        assert flow.name == "greet"
        assert flow.position == Position(filename="app.py", line=2, column=8)
        assert flow.input_type is None
        assert flow.output_type is None
        assert flow.description is None

    def test_flow_keywords_fill_optional_fields(self):
        visitor = self._visit('''
            ai.define_flow(
                "greet",
                handler,
                input_schema=schemas.Greeting,
                output_schema="GreetingReply",
                description="Say hello",
            )
        ''')

        flow = visitor.flows[0]
        assert flow.input_type == "schemas.Greeting"
        assert flow.output_type == "GreetingReply"
        assert flow.description == "Say hello"

    def test_flow_requires_two_arguments(self):
        visitor = self._visit('''
            ai.define_flow("greet")
        ''')
        assert visitor.flows == []

    def test_model_reference(self):
        visitor = self._visit('''
            m = ai.model("vertexai/gemini-pro")
        ''')

        assert len(visitor.models) == 1
        model = visitor.models[0]
        assert model.name == "vertexai/gemini-pro"
        assert model.provider == "gcp"
        assert model.position.line == 2
        assert model.position.column == 5

    def test_dynamic_names_are_ignored(self):
        visitor = self._visit('''
            name = "googleai/gemini-1.5-pro"
            ai.model(name)
            ai.model(f"googleai/{name}")
            ai.define_flow(flow_name, handler)
        ''')
        assert visitor.flows == []
        assert visitor.models == []

    def test_bare_function_calls_are_ignored(self):
        visitor = self._visit('''
            model("googleai/gemini-1.5-pro")
            define_flow("greet", handler)
        ''')
        assert visitor.flows == []
        assert visitor.models == []

    def test_nested_calls_follow_their_parent(self):
        visitor = self._visit('''
            ai.define_flow("outer", lambda: ai.model("openai/gpt-4o"))
            ai.model("googleai/gemini-1.5-flash")
        ''')

        assert [flow.name for flow in visitor.flows] == ["outer"]
        assert [model.name for model in visitor.models] == [
            "openai/gpt-4o",
            "googleai/gemini-1.5-flash",
        ]


class TestConstructExtractor:
    """Test cases for per-file extraction."""

    @pytest.fixture
    def extractor(self):
        return ConstructExtractor()

    def test_extract_genkit_file(self, extractor, genkit_project):
        source_file = extractor.extract(genkit_project / "main.py", genkit_project)

        assert source_file is not None
        assert source_file.has_genkit is True
        assert source_file.path == str(genkit_project / "main.py")
        assert source_file.package_name == "main"
        assert source_file.imports == [
            "genkit.ai",
            "genkit.plugins.google_genai",
            "pydantic",
        ]

        assert len(source_file.flows) == 1
        flow = source_file.flows[0]
        assert flow.name == "summarize"
        assert flow.input_type == "Article"
        assert flow.output_type == "str"
        assert flow.description == "Summarize an article"
        assert flow.position.line == 16
        assert flow.position.column == 18

        assert len(source_file.models) == 1
        model = source_file.models[0]
        assert model.name == "googleai/gemini-1.5-pro"
        assert model.provider == "gcp"
        assert model.position.filename == str(genkit_project / "main.py")
        assert model.position.line == 13
        assert model.position.column == 30

    def test_irrelevant_file_returns_none(self, extractor, genkit_project):
        assert extractor.extract(genkit_project / "helpers.py", genkit_project) is None

    def test_package_name_of_nested_module(self, extractor, tmp_path, make_tree):
        make_tree(tmp_path, {
            "app/flows/__init__.py": "from genkit.ai import Genkit\n",
            "app/flows/summary.py": "import genkit\n",
        })

        init_file = extractor.extract(tmp_path / "app/flows/__init__.py", tmp_path)
        module_file = extractor.extract(tmp_path / "app/flows/summary.py", tmp_path)

        assert init_file.package_name == "app.flows"
        assert module_file.package_name == "app.flows.summary"

    def test_relative_imports_keep_leading_dots(self, extractor):
        tree = ast.parse(textwrap.dedent('''
            from . import flows
            from ..genkit_helpers import setup
            import os, sys
        '''))

        assert extractor.extract_imports(tree) == [".", "..genkit_helpers", "os", "sys"]

    def test_relevance_is_substring_based(self, extractor):
        assert extractor.is_framework_relevant(["my_genkit_utils"])
        assert not extractor.is_framework_relevant(["os", "json"])
        assert not extractor.is_framework_relevant([])

    def test_syntax_error_raises_source_parse_error(self, extractor, tmp_path):
        broken = tmp_path / "broken.py"
        broken.write_text("import genkit\n\ndef oops(:\n    pass\n")

        with pytest.raises(SourceParseError) as exc_info:
            extractor.extract(broken, tmp_path)

        assert exc_info.value.file_path == str(broken)
        assert exc_info.value.line == 3

    def test_null_bytes_raise_source_parse_error(self, extractor, tmp_path):
        binary = tmp_path / "binary.py"
        binary.write_bytes(b"import genkit\x00\n")

        with pytest.raises(SourceParseError):
            extractor.extract(binary, tmp_path)

    def test_missing_file_raises_project_io_error(self, extractor, tmp_path):
        with pytest.raises(ProjectIOError):
            extractor.extract(tmp_path / "missing.py", tmp_path)
