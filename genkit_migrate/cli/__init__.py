"""
Command Line Interface

Click commands for analyzing and migrating Genkit projects.
"""

from genkit_migrate.cli.main import main

__all__ = ["main"]
