"""
Tests for the model mapping table.
"""

from genkit_migrate.analyzer.extractor import classify_provider
from genkit_migrate.transformer.mappings import MODEL_MAPPINGS, get_model_mappings


class TestModelMappings:
    """Test cases for get_model_mappings."""

    def test_gcp_to_aws_entries(self):
        mappings = get_model_mappings("gcp", "aws")

        assert len(mappings) == 8
        assert mappings["googleai/gemini-1.5-flash"] == "anthropic.claude-3-haiku-20240307-v1:0"
        assert mappings["googleai/gemini-1.5-pro"] == "anthropic.claude-3-sonnet-20240229-v1:0"
        assert mappings["googleai/gemini-2.0-flash"] == "anthropic.claude-3-5-sonnet-20241022-v2:0"
        assert mappings["vertexai/gemini-pro"] == "anthropic.claude-3-sonnet-20240229-v1:0"
        assert mappings["googleai/gemini-1.5-flash-8b"] == "amazon.nova-lite-v1:0"
        assert mappings["googleai/text-bison"] == "amazon.nova-micro-v1:0"

    def test_unknown_pair_is_empty(self):
        assert get_model_mappings("aws", "gcp") == {}
        assert get_model_mappings("gcp", "azure") == {}
        assert get_model_mappings("", "") == {}

    def test_returns_a_copy(self):
        mappings = get_model_mappings("gcp", "aws")
        mappings["googleai/gemini-1.5-pro"] = "changed"

        assert MODEL_MAPPINGS[("gcp", "aws")]["googleai/gemini-1.5-pro"] != "changed"

    def test_lookup_is_exact(self):
        mappings = get_model_mappings("gcp", "aws")

        assert "googleai/gemini-1.5" not in mappings
        assert "GOOGLEAI/GEMINI-1.5-PRO" not in mappings

    def test_sources_are_gcp_models(self):
        for source_model in get_model_mappings("gcp", "aws"):
            assert classify_provider(source_model) == "gcp"
