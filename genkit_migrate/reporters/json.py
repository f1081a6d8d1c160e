"""
JSON Report Generator

Generates JSON output for programmatic access.
"""

import json
from typing import Any, Dict

from genkit_migrate.models.migration import Migration
from genkit_migrate.models.project import Project
from genkit_migrate.reporters.base import ReportGenerator


class JSONReportGenerator(ReportGenerator):
    """Generator for JSON reports."""
    
    format_name = "json"
    
    def __init__(self, indent: int = 2):
        self.indent = indent
    
    @property
    def file_extension(self) -> str:
        return '.json'
    
    def render_project(self, project: Project) -> str:
        return self._dump(project.to_dict())
    
    def render_migration(self, migration: Migration) -> str:
        return self._dump(migration.to_dict())
    
    def _dump(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=self.indent, default=str)
