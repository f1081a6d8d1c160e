"""
Static Analysis Modules

Contains the source tree walker, the Genkit construct extractor and the
project-level aggregator.
"""

from genkit_migrate.analyzer.walker import SourceTreeWalker
from genkit_migrate.analyzer.extractor import (
    CallShape,
    ConstructExtractor,
    ConstructVisitor,
    classify_provider,
)
from genkit_migrate.analyzer.project import ProjectAnalyzer, parse_manifest

__all__ = [
    "SourceTreeWalker",
    "CallShape",
    "ConstructExtractor",
    "ConstructVisitor",
    "classify_provider",
    "ProjectAnalyzer",
    "parse_manifest",
]
