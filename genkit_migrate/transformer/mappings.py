"""
Model Mapping Table

Translates source-provider model identifiers to their target-provider
equivalents. Lookups are exact-match on the full identifier.
"""

from typing import Dict, Tuple


MODEL_MAPPINGS: Dict[Tuple[str, str], Dict[str, str]] = {
    ("gcp", "aws"): {
        "googleai/gemini-1.5-flash": "anthropic.claude-3-haiku-20240307-v1:0",
        "googleai/gemini-1.5-pro": "anthropic.claude-3-sonnet-20240229-v1:0",
        "googleai/gemini-2.0-flash": "anthropic.claude-3-5-sonnet-20241022-v2:0",
        "vertexai/gemini-pro": "anthropic.claude-3-sonnet-20240229-v1:0",
        "vertexai/gemini-1.5-pro": "anthropic.claude-3-sonnet-20240229-v1:0",
        "vertexai/gemini-1.5-flash": "anthropic.claude-3-haiku-20240307-v1:0",
        # Smaller Gemini variants go to Amazon Nova
        "googleai/gemini-1.5-flash-8b": "amazon.nova-lite-v1:0",
        "googleai/text-bison": "amazon.nova-micro-v1:0",
    },
}


def get_model_mappings(source_provider: str, target_provider: str) -> Dict[str, str]:
    """
    Return the model mapping for a provider pair.
    
    Args:
        source_provider: Provider the project currently targets
        target_provider: Provider the project is migrated to
    
    Returns:
        A new dict of old model identifier to new model identifier;
        empty when the pair has no known mapping
    """
    return dict(MODEL_MAPPINGS.get((source_provider, target_provider), {}))
