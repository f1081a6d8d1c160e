"""
Data models for genkit-migrate.

This module contains the analysis and migration records (dataclasses)
and the configuration models (Pydantic) used throughout the application.
"""

from genkit_migrate.models.project import (
    Position,
    Flow,
    Model,
    SourceFile,
    Project,
)
from genkit_migrate.models.migration import (
    ChangeType,
    Change,
    Migration,
)
from genkit_migrate.models.config import (
    AnalyzerConfig,
    TransformerConfig,
    GeneratorConfig,
    ToolConfig,
    AWSSettings,
    GCPSettings,
    AzureSettings,
    ProviderSettings,
)

__all__ = [
    # Analysis records
    "Position",
    "Flow",
    "Model",
    "SourceFile",
    "Project",
    # Migration records
    "ChangeType",
    "Change",
    "Migration",
    # Configuration models
    "AnalyzerConfig",
    "TransformerConfig",
    "GeneratorConfig",
    "ToolConfig",
    "AWSSettings",
    "GCPSettings",
    "AzureSettings",
    "ProviderSettings",
]
