"""
Core module for genkit-migrate.

This module contains the exception hierarchy shared by every stage
of the migration pipeline.
"""

from genkit_migrate.core.exceptions import (
    GenkitMigrateError,
    ConfigurationError,
    SourceParseError,
    ProjectIOError,
    TemplateRenderError,
    UnsupportedFormatError,
)

__all__ = [
    "GenkitMigrateError",
    "ConfigurationError",
    "SourceParseError",
    "ProjectIOError",
    "TemplateRenderError",
    "UnsupportedFormatError",
]
