"""
Project Data Models

Contains the records produced by static analysis of a Genkit project:
the project itself, its framework-relevant source files, and the flows
and model references discovered in them.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Position:
    """Source location of a construct (1-based line and column)."""
    filename: str = ""
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Flow:
    """A named Genkit flow declared through ``define_flow``."""
    name: str
    position: Position = field(default_factory=Position)
    input_type: Optional[str] = None
    output_type: Optional[str] = None
    description: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the flow, omitting unset optional attributes."""
        data = {"name": self.name, "position": asdict(self.position)}
        for key in ("input_type", "output_type", "description"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class Model:
    """A reference to a hosted inference model."""
    name: str
    provider: str = "unknown"
    position: Position = field(default_factory=Position)
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the model reference."""
        return {
            "name": self.name,
            "provider": self.provider,
            "position": asdict(self.position),
        }


@dataclass
class SourceFile:
    """A parsed source file and the framework constructs found in it."""
    path: str
    package_name: str = ""
    imports: List[str] = field(default_factory=list)
    flows: List[Flow] = field(default_factory=list)
    models: List[Model] = field(default_factory=list)
    has_genkit: bool = False
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the source file."""
        return {
            "path": self.path,
            "package_name": self.package_name,
            "imports": list(self.imports),
            "flows": [flow.to_dict() for flow in self.flows],
            "models": [model.to_dict() for model in self.models],
            "has_genkit": self.has_genkit,
        }


@dataclass
class Project:
    """Aggregated analysis results for a whole project tree."""
    path: str
    source_provider: str = ""
    target_provider: str = ""
    files: Dict[str, SourceFile] = field(default_factory=dict)
    dependencies: Dict[str, str] = field(default_factory=dict)
    flows: List[Flow] = field(default_factory=list)
    models: List[Model] = field(default_factory=list)
    configuration: Dict[str, str] = field(default_factory=dict)
    
    def add_source_file(self, relative_path: str, source_file: SourceFile) -> None:
        """
        Register a framework-relevant source file.
        
        The file's flows and models are appended to the project-level
        lists, so the project keeps them in file-walk order.
        
        Args:
            relative_path: Path of the file relative to the project root
            source_file: Extraction result for the file
        """
        self.files[relative_path] = source_file
        self.flows.extend(source_file.flows)
        self.models.extend(source_file.models)
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the project for structured inspection output."""
        return {
            "path": self.path,
            "source_provider": self.source_provider,
            "target_provider": self.target_provider,
            "files": {
                rel_path: source_file.to_dict()
                for rel_path, source_file in self.files.items()
            },
            "dependencies": dict(self.dependencies),
            "flows": [flow.to_dict() for flow in self.flows],
            "models": [model.to_dict() for model in self.models],
            "configuration": dict(self.configuration),
        }
