"""
Project Transformer

Plans the migration of an analyzed project to a target provider. The
planner runs a fixed sequence of rewrite steps, each of which appends to
the change log and stages generated file contents:

1. dependencies (``pyproject.toml``)
2. Genkit source files
3. model remapping (change log only)
4. provider configuration (``config.yaml``)
5. deployment artifacts (Terraform, Dockerfile, CI workflow)

Steps run in this order and a later step overwrites an earlier step's
file at the same path.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from genkit_migrate.core.exceptions import TemplateRenderError
from genkit_migrate.models.config import TransformerConfig
from genkit_migrate.models.migration import Change, ChangeType, Migration
from genkit_migrate.models.project import Project
from genkit_migrate.transformer.mappings import get_model_mappings
from genkit_migrate.utils.files import relative_posix
from genkit_migrate.utils.logging import get_logger


TEMPLATE_DIR = Path(__file__).parent / "templates"

MANIFEST_FILE = "pyproject.toml"
CONFIG_FILE = "config.yaml"

PYTHON_VERSION = "3.11"
FRAMEWORK_PACKAGE = "genkit"
FRAMEWORK_VERSION = "0.5.0"

# Provider plugin pinned in the generated manifest
TARGET_PACKAGES = {
    "aws": ("genkit-aws", "0.1.0"),
}

TARGET_PLUGIN_IMPORTS = {
    "aws": [
        "from genkit_aws import GenkitAWS",
        "from genkit_aws.bedrock import Bedrock",
        "from genkit_aws.monitoring import CloudWatch",
    ],
}

# Dependencies from the source vendor's namespace are superseded by the target plugin
SOURCE_VENDOR_MARKERS = {
    "gcp": ("firebase", "google", "vertex"),
    "aws": ("aws", "boto"),
    "azure": ("azure",),
}

DEPLOYMENT_FILES = {
    "terraform/main.tf": "terraform_main.tf.j2",
    "terraform/variables.tf": "terraform_variables.tf.j2",
    "Dockerfile": "Dockerfile.j2",
    ".github/workflows/deploy.yml": "deploy.yml.j2",
}

DEPLOYMENT_COMMANDS = {
    "aws": [
        "pip install -e .",
        "terraform -chdir=terraform init",
        "terraform -chdir=terraform plan",
    ],
}

DEFAULT_MODULE_NAME = "genkit-app"
DEFAULT_PROJECT_NAME = "GenkitApp"


class ProjectTransformer:
    """Builds a Migration from an analyzed Project."""
    
    def __init__(self, config: Optional[TransformerConfig] = None):
        """
        Initialize the transformer with configuration.
        
        Args:
            config: Transformer configuration
        """
        self.config = config or TransformerConfig()
        self.logger = get_logger("transformer")
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
    
    @property
    def source_provider(self) -> str:
        return self.config.source_provider
    
    @property
    def target_provider(self) -> str:
        return self.config.target_provider
    
    def transform_project(self, project: Project) -> Migration:
        """
        Plan the migration of a project.
        
        Args:
            project: Aggregated analysis results
        
        Returns:
            Fully assembled migration
        
        Raises:
            TemplateRenderError: If any step fails to render; no partial
                migration is returned
        """
        migration = Migration(project=project)
        
        self.logger.info(
            f"Transforming {project.path} from {self.source_provider} to {self.target_provider}"
        )
        
        self.transform_dependencies(migration)
        self.transform_source_files(migration)
        self.transform_models(migration)
        self.transform_configuration(migration)
        self.generate_deployment_files(migration)
        
        self.logger.info(
            f"Planned {len(migration.changes)} changes and {len(migration.new_files)} new files"
        )
        return migration
    
    def transform_dependencies(self, migration: Migration) -> None:
        """Render the target manifest and log one dependency change."""
        target_package, target_version = TARGET_PACKAGES.get(self.target_provider, (None, None))
        
        content = self._render("dependencies", "pyproject.toml.j2", {
            "module_name": self.extract_module_name(migration.project),
            "python_version": PYTHON_VERSION,
            "framework_package": FRAMEWORK_PACKAGE,
            "framework_version": FRAMEWORK_VERSION,
            "target_package": target_package,
            "target_version": target_version,
            "dependencies": self.filter_dependencies(migration.project.dependencies),
        })
        
        migration.add_file(MANIFEST_FILE, content)
        migration.add_change(Change(
            type=ChangeType.DEPENDENCY,
            description=f"Updated dependencies for {self.target_provider}",
            file=MANIFEST_FILE,
        ))
    
    def transform_source_files(self, migration: Migration) -> None:
        """Re-render every Genkit source file with the target plugin imports."""
        project = migration.project
        
        for relative_path, source_file in project.files.items():
            if not source_file.has_genkit:
                continue
            
            content = self._render("source files", "source_module.py.j2", {
                "package_name": source_file.package_name,
                "source_provider": self.source_provider,
                "target_provider": self.target_provider,
                "plugin_imports": TARGET_PLUGIN_IMPORTS.get(self.target_provider, []),
                "flows": source_file.flows,
            })
            
            migration.add_file(relative_path, content)
            migration.add_change(Change(
                type=ChangeType.IMPORT,
                description=f"Added {self.target_provider} imports",
                file=relative_path,
            ))
    
    def transform_models(self, migration: Migration) -> None:
        """Log a change for every model reference with a known mapping."""
        mappings = get_model_mappings(self.source_provider, self.target_provider)
        project = migration.project
        
        for model in project.models:
            new_model = mappings.get(model.name)
            if new_model is None:
                continue
            
            migration.add_change(Change(
                type=ChangeType.MODEL,
                description=f"Map model {model.name} -> {new_model}",
                file=self._relative_to_project(project, model.position.filename),
                old_value=model.name,
                new_value=new_model,
            ))
    
    def transform_configuration(self, migration: Migration) -> None:
        """Render the provider configuration file for aws targets."""
        if self.target_provider != "aws":
            return
        
        content = self._render("configuration", "config.yaml.j2", {
            "project_name": self.extract_project_name(migration.project),
            "region": self.config.region,
        })
        
        migration.add_file(CONFIG_FILE, content)
        migration.add_change(Change(
            type=ChangeType.CONFIG,
            description=f"Generated {self.target_provider} configuration",
            file=CONFIG_FILE,
        ))
    
    def generate_deployment_files(self, migration: Migration) -> None:
        """Stage the deployment descriptors and operator commands."""
        if self.target_provider != "aws":
            return
        
        for relative_path, template_name in DEPLOYMENT_FILES.items():
            migration.add_file(relative_path, self._render("deployment", template_name, {}))
        
        migration.commands.extend(DEPLOYMENT_COMMANDS[self.target_provider])
    
    def filter_dependencies(self, dependencies: Dict[str, str]) -> List[Dict[str, str]]:
        """
        Drop source-vendor and already pinned dependencies.
        
        Args:
            dependencies: Mapping of dependency name to version
        
        Returns:
            Remaining dependencies as ``{"name", "version"}`` dicts,
            sorted by name
        """
        markers = SOURCE_VENDOR_MARKERS.get(self.source_provider, ())
        pinned = {FRAMEWORK_PACKAGE}
        if self.target_provider in TARGET_PACKAGES:
            pinned.add(TARGET_PACKAGES[self.target_provider][0])
        
        filtered = []
        for name in sorted(dependencies):
            if name in pinned or any(marker in name for marker in markers):
                continue
            filtered.append({"name": name, "version": self._format_specifier(dependencies[name])})
        return filtered
    
    def extract_module_name(self, project: Project) -> str:
        """Derive a distribution name from the project directory name."""
        name = re.sub(r"[^A-Za-z0-9]+", "-", Path(project.path).name).strip("-").lower()
        return name or DEFAULT_MODULE_NAME
    
    def extract_project_name(self, project: Project) -> str:
        """Derive a CamelCase project name from the project directory name."""
        words = re.split(r"[^A-Za-z0-9]+", Path(project.path).name)
        name = "".join(word[:1].upper() + word[1:] for word in words if word)
        return name or DEFAULT_PROJECT_NAME
    
    def _format_specifier(self, version: str) -> str:
        # Bare versions become exact pins
        if version[:1].isdigit():
            return f"=={version}"
        return version
    
    def _relative_to_project(self, project: Project, filename: str) -> str:
        if not filename:
            return filename
        return relative_posix(filename, project.path)
    
    def _render(self, step: str, template_name: str, context: Dict[str, Any]) -> str:
        try:
            template = self.template_env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render {template_name} during {step} step: {e}",
                template=template_name,
                step=step
            ) from e
