"""
Project Analyzer

Aggregates per-file extraction results into a single project model and
collects the declared dependencies and configuration files.
"""

import re
from pathlib import Path
from typing import Dict, Optional, Union

from genkit_migrate.analyzer.extractor import ConstructExtractor
from genkit_migrate.analyzer.walker import SourceTreeWalker
from genkit_migrate.core.exceptions import ProjectIOError, SourceParseError
from genkit_migrate.models.config import AnalyzerConfig
from genkit_migrate.models.project import Project
from genkit_migrate.utils.files import relative_posix
from genkit_migrate.utils.logging import get_logger


MANIFEST_FILE = "pyproject.toml"

CONFIG_FILES = ["config.yaml", "config.json", ".env", "app.yaml"]

SECTION_PATTERN = re.compile(r'^\[\s*([A-Za-z0-9_.-]+)\s*\]$')

# Module declaration and language version lines never carry dependencies
SKIPPED_KEY_PATTERN = re.compile(r'^(name|version|requires-python|requires)\s*=')

BLOCK_KEYWORD_PATTERN = re.compile(r'^dependencies\s*=')

REQUIREMENT_PATTERN = re.compile(
    r"""["']\s*(?P<name>[A-Za-z0-9][A-Za-z0-9._-]*)\s*(?:\[[^\]]*\])?\s*"""
    r"""(?P<spec>(?:===|==|~=|!=|>=|<=|>|<)\s*\d+(?:\.\d+)*[^"',;\s]*)"""
)

IGNORED_SECTIONS = {"build-system"}


def parse_manifest(content: str) -> Dict[str, str]:
    """
    Parse dependency declarations out of ``pyproject.toml`` text.
    
    This is a line heuristic rather than a TOML parse: each line that
    opens the ``dependencies`` block or carries a versioned requirement
    string contributes ``name -> specifier`` entries. Lines that do not
    fit the pattern are ignored.
    
    Args:
        content: Manifest text
    
    Returns:
        Mapping of dependency name to version specifier (e.g. ``"==2.31.0"``)
    """
    dependencies: Dict[str, str] = {}
    section = None
    
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        
        header = SECTION_PATTERN.match(line)
        if header:
            section = header.group(1)
            continue
        
        if section in IGNORED_SECTIONS or SKIPPED_KEY_PATTERN.match(line):
            continue
        
        if BLOCK_KEYWORD_PATTERN.match(line):
            line = BLOCK_KEYWORD_PATTERN.sub("", line, count=1)
        
        for match in REQUIREMENT_PATTERN.finditer(line):
            dependencies[match.group("name")] = re.sub(r"\s+", "", match.group("spec"))
    
    return dependencies


class ProjectAnalyzer:
    """Runs the walker and extractor over a project and aggregates the results."""
    
    def __init__(self, config: Optional[AnalyzerConfig] = None):
        """
        Initialize the analyzer with configuration.
        
        Args:
            config: Analyzer configuration
        """
        self.config = config or AnalyzerConfig()
        self.extractor = ConstructExtractor(self.config)
        self.logger = get_logger("analyzer.project")
    
    def analyze_project(self, project_path: Union[str, Path]) -> Project:
        """
        Analyze a project tree.
        
        Args:
            project_path: Project root directory
        
        Returns:
            Aggregated project model
        
        Raises:
            SourceParseError: If a file fails to parse and verbose mode is off
            ProjectIOError: If the tree or the manifest cannot be read, or a
                source file cannot be read and verbose mode is off
        """
        root = Path(project_path).absolute()
        project = Project(
            path=str(root),
            source_provider=self.config.source_provider,
            target_provider=self.config.target_provider,
        )
        
        self.logger.info(f"Analyzing Genkit project: {root}")
        
        walker = SourceTreeWalker(root, self.config)
        for file_path in walker.walk():
            try:
                source_file = self.extractor.extract(file_path, root)
            except (SourceParseError, ProjectIOError) as e:
                if not self.config.verbose:
                    raise
                self.logger.warning(f"Skipping {file_path}: {e.message}")
                continue
            
            if source_file is not None:
                project.add_source_file(relative_posix(file_path, root), source_file)
        
        project.dependencies = self.analyze_dependencies(root)
        project.configuration = self.analyze_configuration(root)
        
        self.logger.info(
            f"Found {len(project.files)} Genkit files, "
            f"{len(project.flows)} flows, {len(project.models)} models"
        )
        return project
    
    def analyze_dependencies(self, root: Path) -> Dict[str, str]:
        """
        Read the dependency manifest at the project root.
        
        Raises:
            ProjectIOError: If the manifest is missing or unreadable
        """
        manifest_path = root / MANIFEST_FILE
        try:
            content = manifest_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProjectIOError(
                f"Failed to read {MANIFEST_FILE}: {e}",
                path=str(manifest_path)
            ) from e
        
        return parse_manifest(content)
    
    def analyze_configuration(self, root: Path) -> Dict[str, str]:
        """Record which well-known configuration files exist at the root."""
        configuration = {}
        for filename in CONFIG_FILES:
            config_path = root / filename
            if config_path.exists():
                configuration[filename] = str(config_path)
        return configuration
