"""
Project Generator

Materializes a Migration on disk. All output is staged in a temporary
directory next to the target and moved into place only once every file
has been written, so a failed run never leaves a half-written tree at
the output path.
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from genkit_migrate.analyzer.walker import SourceTreeWalker
from genkit_migrate.core.exceptions import ProjectIOError, TemplateRenderError
from genkit_migrate.models.config import AnalyzerConfig, GeneratorConfig
from genkit_migrate.models.migration import ChangeType, Migration
from genkit_migrate.utils.files import copy_file, ensure_dir, relative_posix, write_file_with_dir
from genkit_migrate.utils.logging import get_logger


TEMPLATE_DIR = Path(__file__).parent / "templates"

SUMMARY_FILE = "MIGRATION.md"


class ProjectGenerator:
    """Writes a migrated project tree."""
    
    def __init__(self, config: GeneratorConfig):
        """
        Initialize the generator.
        
        Args:
            config: Generator configuration
        """
        self.config = config
        self.output_path = Path(config.output_path).absolute()
        self.logger = get_logger("generator")
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
    
    def generate_project(self, migration: Migration) -> Path:
        """
        Write the migrated project to the output path.
        
        Args:
            migration: Migration plan to materialize
        
        Returns:
            The output directory
        
        Raises:
            ProjectIOError: If the output is the project root or one of its
                parents, if it exists (without overwrite), or if any file
                cannot be read or written
            TemplateRenderError: If the summary document fails to render
        """
        project_root = Path(migration.project.path).resolve()
        if self._is_within(project_root, self.output_path.resolve()):
            raise ProjectIOError(
                f"Output directory {self.output_path} would replace the source project {project_root}",
                path=str(self.output_path)
            )
        
        if self.output_path.exists() and not self.config.overwrite:
            raise ProjectIOError(
                f"Output directory already exists: {self.output_path}",
                path=str(self.output_path)
            )
        
        try:
            ensure_dir(self.output_path.parent)
            staging = Path(tempfile.mkdtemp(
                prefix=f".{self.output_path.name}-",
                dir=self.output_path.parent
            ))
        except OSError as e:
            raise ProjectIOError(
                f"Failed to create output directory {self.output_path}: {e}",
                path=str(self.output_path)
            ) from e
        
        try:
            self.write_new_files(migration, staging)
            self.copy_existing_files(migration, staging)
            self.generate_documentation(migration, staging)
            self._commit(staging)
        except OSError as e:
            raise ProjectIOError(
                f"Failed to write migrated project to {self.output_path}: {e}",
                path=str(self.output_path)
            ) from e
        finally:
            if staging.exists():
                shutil.rmtree(staging, ignore_errors=True)
        
        self.logger.info(f"Migrated project written to {self.output_path}")
        return self.output_path
    
    def write_new_files(self, migration: Migration, destination: Path) -> None:
        for relative_path, content in migration.new_files.items():
            write_file_with_dir(destination / relative_path, content)
            self.logger.debug(f"Wrote {relative_path}")
    
    def copy_existing_files(self, migration: Migration, destination: Path) -> None:
        """Copy every project file that was neither regenerated nor deleted."""
        project_root = Path(migration.project.path)
        skipped = set(migration.new_files) | set(migration.delete_files)
        
        walker = SourceTreeWalker(
            project_root,
            AnalyzerConfig(exclude_dirs=self.config.exclude_dirs)
        )
        for file_path in walker.walk_all():
            # Output nested in the source tree must not be copied into itself
            if self._is_within(file_path, destination) or self._is_within(file_path, self.output_path):
                continue
            
            relative_path = relative_posix(file_path, project_root)
            if relative_path in skipped:
                continue
            
            copy_file(file_path, destination / relative_path)
    
    def generate_documentation(self, migration: Migration, destination: Path) -> None:
        """Write the migration summary document."""
        write_file_with_dir(destination / SUMMARY_FILE, self.render_summary(migration))
    
    def render_summary(self, migration: Migration) -> str:
        project = migration.project
        try:
            template = self.template_env.get_template("migration_summary.md.j2")
            return template.render(
                source_provider=project.source_provider,
                target_provider=self.config.target_provider,
                flow_count=len(project.flows),
                model_count=len(project.models),
                changes=migration.changes,
                model_changes=migration.changes_of_type(ChangeType.MODEL),
                commands=migration.commands,
            )
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render {SUMMARY_FILE}: {e}",
                template="migration_summary.md.j2",
                step="documentation"
            ) from e
    
    def _commit(self, staging: Path) -> None:
        if self.output_path.exists():
            shutil.rmtree(self.output_path)
        os.replace(staging, self.output_path)
    
    @staticmethod
    def _is_within(path: Path, directory: Path) -> bool:
        try:
            path.relative_to(directory)
            return True
        except ValueError:
            return False
