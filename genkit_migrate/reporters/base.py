"""
Base Report Generator

Defines the common interface for rendering analysis and migration results.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from genkit_migrate.models.migration import Migration
from genkit_migrate.models.project import Project
from genkit_migrate.utils.files import write_file_with_dir


class ReportGenerator(ABC):
    """Abstract base class for output formats."""
    
    format_name: str = ""
    
    @property
    def name(self) -> str:
        """Return the reporter name."""
        return self.__class__.__name__
    
    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for saved reports."""
        pass
    
    @abstractmethod
    def render_project(self, project: Project) -> str:
        """Render analysis results."""
        pass
    
    @abstractmethod
    def render_migration(self, migration: Migration) -> str:
        """Render a migration plan."""
        pass
    
    def save(self, content: str, output_path: Union[str, Path]) -> Path:
        """
        Save rendered content to a file.
        
        Args:
            content: Rendered report
            output_path: Destination file
        
        Returns:
            Path to the saved report
        """
        path = Path(output_path)
        write_file_with_dir(path, content)
        return path
