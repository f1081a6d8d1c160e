"""
Transformation Modules

Contains the model mapping table and the rewrite planner.
"""

from genkit_migrate.transformer.mappings import MODEL_MAPPINGS, get_model_mappings
from genkit_migrate.transformer.planner import ProjectTransformer

__all__ = [
    "MODEL_MAPPINGS",
    "get_model_mappings",
    "ProjectTransformer",
]
