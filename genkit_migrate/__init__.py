"""
genkit-migrate

Static analysis and migration planning for Genkit applications moving
between cloud providers.
"""

__version__ = "0.1.0"
__author__ = "genkit-migrate contributors"

from genkit_migrate.analyzer import ProjectAnalyzer, SourceTreeWalker, ConstructExtractor
from genkit_migrate.transformer import ProjectTransformer
from genkit_migrate.generator import ProjectGenerator
from genkit_migrate.models import Project, Migration

__all__ = [
    "ProjectAnalyzer",
    "SourceTreeWalker",
    "ConstructExtractor",
    "ProjectTransformer",
    "ProjectGenerator",
    "Project",
    "Migration",
]
