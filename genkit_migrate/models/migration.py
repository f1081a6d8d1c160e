"""
Migration Data Models

Contains the change log and the staged file contents produced by the
rewrite planner.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from genkit_migrate.models.project import Project


class ChangeType(str, Enum):
    """Kinds of changes recorded during a migration."""
    DEPENDENCY = "dependency"
    IMPORT = "import"
    MODEL = "model"
    CONFIG = "config"


@dataclass(frozen=True)
class Change:
    """A single entry of the migration change log."""
    type: ChangeType
    description: str
    file: str
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": self.type.value,
            "description": self.description,
            "file": self.file,
        }
        if self.old_value is not None:
            data["old_value"] = self.old_value
        if self.new_value is not None:
            data["new_value"] = self.new_value
        return data


@dataclass
class Migration:
    """Complete output plan for one project, prior to materialization."""
    project: Project
    changes: List[Change] = field(default_factory=list)
    new_files: Dict[str, str] = field(default_factory=dict)
    delete_files: List[str] = field(default_factory=list)
    commands: List[str] = field(default_factory=list)
    
    def add_change(self, change: Change) -> None:
        self.changes.append(change)
    
    def add_file(self, relative_path: str, content: str) -> None:
        """Stage a generated file; a later entry for the same path wins."""
        self.new_files[relative_path] = content
    
    def changes_of_type(self, change_type: ChangeType) -> List[Change]:
        """Return the changes of a given kind, in log order."""
        return [change for change in self.changes if change.type == change_type]
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the migration plan (file contents are listed by path only)."""
        return {
            "project": self.project.path,
            "source_provider": self.project.source_provider,
            "target_provider": self.project.target_provider,
            "changes": [change.to_dict() for change in self.changes],
            "new_files": sorted(self.new_files),
            "delete_files": list(self.delete_files),
            "commands": list(self.commands),
        }
