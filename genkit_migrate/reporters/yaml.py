"""
YAML Report Generator

Generates YAML output, convenient for diffing and hand inspection.
"""

import yaml

from genkit_migrate.models.migration import Migration
from genkit_migrate.models.project import Project
from genkit_migrate.reporters.base import ReportGenerator


class YAMLReportGenerator(ReportGenerator):
    """Generator for YAML reports."""
    
    format_name = "yaml"
    
    @property
    def file_extension(self) -> str:
        return '.yaml'
    
    def render_project(self, project: Project) -> str:
        return yaml.safe_dump(project.to_dict(), default_flow_style=False, sort_keys=False)
    
    def render_migration(self, migration: Migration) -> str:
        return yaml.safe_dump(migration.to_dict(), default_flow_style=False, sort_keys=False)
