"""
Source Tree Walker

Lazily enumerates the source files of a project, pruning dependency
caches and version-control directories.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional

from genkit_migrate.core.exceptions import ProjectIOError
from genkit_migrate.models.config import AnalyzerConfig
from genkit_migrate.utils.logging import get_logger


class SourceTreeWalker:
    """Deterministic, depth-first walk over a project tree."""
    
    SOURCE_EXTENSIONS = ['.py']
    
    def __init__(self, root: Path, config: Optional[AnalyzerConfig] = None):
        """
        Initialize the walker.
        
        Args:
            root: Project root directory
            config: Analyzer configuration (verbosity and excluded directories)
        """
        self.root = Path(root)
        self.config = config or AnalyzerConfig()
        self.logger = get_logger("analyzer.walker")
    
    @property
    def exclude_dirs(self) -> List[str]:
        return self.config.exclude_dirs
    
    def get_supported_file_types(self) -> List[str]:
        """Return the source file extensions the walker yields."""
        return self.SOURCE_EXTENSIONS
    
    def should_visit_directory(self, name: str) -> bool:
        """Return False for directories that are pruned from traversal."""
        return name not in self.exclude_dirs
    
    def should_analyze_file(self, file_path: Path) -> bool:
        """Return True if the file has a supported source extension."""
        return file_path.suffix in self.get_supported_file_types()
    
    def walk(self) -> Iterator[Path]:
        """
        Yield candidate source files in lexical per-directory order.
        
        Yields:
            Absolute paths of source files
        
        Raises:
            ProjectIOError: If the root is not a directory, or a directory
                cannot be listed and verbose mode is off
        """
        for file_path in self.walk_all():
            if self.should_analyze_file(file_path):
                yield file_path
    
    def walk_all(self) -> Iterator[Path]:
        """Yield every file under the root, applying directory pruning only."""
        if not self.root.is_dir():
            raise ProjectIOError(
                f"Project directory does not exist: {self.root}",
                path=str(self.root)
            )
        
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=self._on_error):
            # Prune in place so os.walk never descends into excluded directories
            dirnames[:] = sorted(d for d in dirnames if self.should_visit_directory(d))
            for filename in sorted(filenames):
                yield Path(dirpath, filename).absolute()
    
    def _on_error(self, error: OSError) -> None:
        if self.config.verbose:
            self.logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")
            return
        raise ProjectIOError(
            f"Failed to read directory {error.filename}: {error.strerror}",
            path=error.filename
        ) from error
