"""
Output Generation

Writes a planned migration to disk.
"""

from genkit_migrate.generator.writer import ProjectGenerator, SUMMARY_FILE

__all__ = [
    "ProjectGenerator",
    "SUMMARY_FILE",
]
