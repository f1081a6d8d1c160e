"""
Table Report Generator

Renders analysis results and migration plans as Rich tables for the
terminal.
"""

import io

from rich import box
from rich.console import Console
from rich.table import Table

from genkit_migrate.models.migration import Migration
from genkit_migrate.models.project import Project
from genkit_migrate.reporters.base import ReportGenerator
from genkit_migrate.utils.files import relative_posix


# Dependencies worth surfacing in the summary table
RELEVANT_DEPENDENCY_MARKERS = (
    "genkit", "google", "firebase", "aws", "boto", "azure", "anthropic", "openai",
)


class TableReportGenerator(ReportGenerator):
    """Generator for human-readable terminal tables."""
    
    format_name = "table"
    
    def __init__(self, width: int = 100):
        self.width = width
    
    @property
    def file_extension(self) -> str:
        return '.txt'
    
    def render_project(self, project: Project) -> str:
        console = self._console()
        
        overview = Table(title="Project Analysis Results", box=box.ROUNDED, show_header=False)
        overview.add_column("Field", style="bold cyan")
        overview.add_column("Value")
        overview.add_row("Project Path", project.path)
        overview.add_row("Source Provider", project.source_provider or "-")
        overview.add_row("Genkit Files", str(len(project.files)))
        overview.add_row("Dependencies", str(len(project.dependencies)))
        overview.add_row("Config Files", ", ".join(project.configuration) or "-")
        console.print(overview)
        
        if project.flows:
            flows = Table(title="Genkit Flows", box=box.SIMPLE)
            flows.add_column("Name", style="green")
            flows.add_column("Location")
            flows.add_column("Description")
            for flow in project.flows:
                flows.add_row(
                    flow.name,
                    self._location(project, flow.position.filename, flow.position.line),
                    flow.description or ""
                )
            console.print(flows)
        
        if project.models:
            models = Table(title="Models", box=box.SIMPLE)
            models.add_column("Name", style="green")
            models.add_column("Provider", style="magenta")
            models.add_column("Location")
            for model in project.models:
                models.add_row(
                    model.name,
                    model.provider,
                    self._location(project, model.position.filename, model.position.line)
                )
            console.print(models)
        
        relevant = {
            name: version for name, version in sorted(project.dependencies.items())
            if any(marker in name for marker in RELEVANT_DEPENDENCY_MARKERS)
        }
        if relevant:
            dependencies = Table(title="Key Dependencies", box=box.SIMPLE)
            dependencies.add_column("Package")
            dependencies.add_column("Version")
            for name, version in relevant.items():
                dependencies.add_row(name, version)
            console.print(dependencies)
        
        return console.file.getvalue()
    
    def render_migration(self, migration: Migration) -> str:
        console = self._console()
        console.print("Migration Plan", style="bold")
        
        if migration.changes:
            changes = Table(title="Changes", box=box.SIMPLE)
            changes.add_column("Type", style="cyan")
            changes.add_column("Description")
            changes.add_column("File")
            for change in migration.changes:
                changes.add_row(change.type.value, change.description, change.file)
            console.print(changes)
        
        if migration.new_files:
            console.print("New files to be created:", style="bold")
            for relative_path in sorted(migration.new_files):
                console.print(f"  • {relative_path}")
        
        if migration.commands:
            console.print("Commands to run:", style="bold")
            for command in migration.commands:
                console.print(f"  • {command}")
        
        return console.file.getvalue()
    
    def _console(self) -> Console:
        return Console(file=io.StringIO(), width=self.width, force_terminal=False)
    
    @staticmethod
    def _location(project: Project, filename: str, line: int) -> str:
        return f"{relative_posix(filename, project.path)}:{line}"
